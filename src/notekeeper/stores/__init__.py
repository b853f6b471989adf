"""Handles reading and writing the key-value store that notes are persisted in.

:class:`notekeeper.stores.base.Store` defines an API.
:class:`notekeeper.stores.memory.MemoryStore` keeps everything in a dict, while
:class:`notekeeper.stores.sqlite.SqliteStore` is the persistent implementation you usually want to use.
"""
