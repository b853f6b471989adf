"""Defines classes for representing notes and the records they are persisted as.

The most important classes are :class:`NoteListEntry` and :class:`NoteContent`.
"""

from __future__ import annotations
from dataclasses import dataclass
import json
from typing import List


NOTE_LIST_KEY = 'note_lists'
"""Storage key under which the note index is kept."""

TYPING_MODE_KEY = 'typing_mode'
"""Storage key of the editor's input-mode flag."""

RESERVED_NAMES = frozenset({NOTE_LIST_KEY, TYPING_MODE_KEY})
"""Storage keys that can never be used as note names, since notes are stored under their names."""


class MalformedStorageError(Exception):
    """Raised when a stored record cannot be parsed into the expected shape."""
    def __init__(self, message: str, key: str, cause: BaseException = None):
        super().__init__(message)
        self.message = message
        self.key = key
        self.cause = cause


def _load_json(text: str, key: str):
    try:
        return json.loads(text)
    except (ValueError, RecursionError) as e:
        raise MalformedStorageError('Stored value is not valid JSON', key, e)


@dataclass
class NoteListEntry:
    """Represents one row in the note index."""

    name: str
    """The user-facing name of the note.

    This is also the storage key of the note's :class:`NoteContent` and the last segment of its navigation path.
    """

    id: str
    """An opaque unique identifier, assigned when the note is created and kept across renames."""

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {'name': self.name, 'id': self.id}

    @classmethod
    def from_json(cls, data) -> NoteListEntry:
        if not (isinstance(data, dict) and isinstance(data.get('name'), str) and isinstance(data.get('id'), str)):
            raise MalformedStorageError(f'Not a note list entry: {data!r}', NOTE_LIST_KEY)
        return cls(name=data['name'], id=data['id'])

    @classmethod
    def list_from_json(cls, text: str) -> List[NoteListEntry]:
        """Parses the serialized note index.

        Raises :exc:`MalformedStorageError` if the text is not a JSON array of objects with string
        ``name`` and ``id`` fields. A single bad entry makes the whole index malformed.
        """
        data = _load_json(text, NOTE_LIST_KEY)
        if not isinstance(data, list):
            raise MalformedStorageError('Note index is not a list', NOTE_LIST_KEY)
        return [cls.from_json(item) for item in data]

    @staticmethod
    def list_to_json(entries: List[NoteListEntry]) -> str:
        return json.dumps([e.as_json() for e in entries])


@dataclass
class NoteContent:
    """The persisted body of a single note, stored under a key equal to :attr:`name`."""

    name: str
    value: str = ''

    def as_json(self) -> dict:
        """Returns a dict representing the instance, suitable for serializing as json."""
        return {'name': self.name, 'value': self.value}

    def to_json(self) -> str:
        return json.dumps(self.as_json())

    @classmethod
    def from_json(cls, text: str, key: str) -> NoteContent:
        """Parses a content record read from the given storage key.

        Raises :exc:`MalformedStorageError` unless the text is a JSON object with string ``name`` and ``value``.
        """
        data = _load_json(text, key)
        if not (isinstance(data, dict) and isinstance(data.get('name'), str) and isinstance(data.get('value'), str)):
            raise MalformedStorageError(f'Not a note content record: {data!r}', key)
        return cls(name=data['name'], value=data['value'])
