"""Keeps a collection of short text notes in a local key-value store.

If you installed via ``pip``, run ``notekeeper -h`` to get help.

To use the Python API, look at :class:`notekeeper.api.Notebook`
"""
