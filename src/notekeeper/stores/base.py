"""Defines the API for accessing the key-value store.

The most important class is :class:`Store`.
"""

from typing import Iterator, Optional

from notekeeper.conf import StoreConf


class Store:
    """Base class for stores, which hold string values under string keys.

    All operations are synchronous: once :meth:`set` or :meth:`remove` returns, the change is visible to later
    calls to :meth:`get`, including from other instances opened on the same underlying storage.

    Subclasses implement :meth:`get`, :meth:`keys`, :meth:`_set` and :meth:`_remove`.

    .. attribute:: conf
       :type: notekeeper.conf.StoreConf
    """
    def __init__(self, conf: StoreConf):
        self.conf = conf

    def get(self, key: str) -> Optional[str]:
        """Returns the value stored under the key, or None if there is none."""
        raise NotImplementedError()

    def keys(self) -> Iterator[str]:
        """Yields every key that currently has a value."""
        raise NotImplementedError()

    def set(self, key: str, value: str) -> None:
        """Stores the value under the key, replacing any previous value.

        In preview mode, the write is printed instead of performed.
        """
        if self.conf.preview_mode:
            print(f'set {key!r}: {value}')
            return
        self._set(key, value)

    def remove(self, key: str) -> None:
        """Deletes the key. Does nothing if the key has no value.

        In preview mode, the removal is printed instead of performed.
        """
        if self.conf.preview_mode:
            print(f'remove {key!r}')
            return
        self._remove(key)

    def _set(self, key: str, value: str) -> None:
        raise NotImplementedError()

    def _remove(self, key: str) -> None:
        raise NotImplementedError()

    def close(self) -> None:
        """Release any resources associated with the store. Should be called when you're done with an instance."""
        pass

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
