"""Generates identifiers for new notes."""

import shortuuid


def new_id() -> str:
    """Returns a random, globally unique identifier (a UUID4 in shortuuid's compact encoding)."""
    return shortuuid.uuid()
