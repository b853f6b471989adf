"""Provides the :class:`MemoryStore` class."""

from typing import Dict, Iterator, Optional

from notekeeper.conf import MemoryStoreConf
from notekeeper.stores.base import Store


class MemoryStore(Store):
    """Keeps values in a dict. Nothing survives the instance.

    Useful for tests and scratch sessions. Pass ``data`` to share or pre-populate the dict.
    """
    def __init__(self, conf: MemoryStoreConf, data: Dict[str, str] = None):
        super().__init__(conf)
        self.data = {} if data is None else data

    def get(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def keys(self) -> Iterator[str]:
        yield from list(self.data)

    def _set(self, key: str, value: str) -> None:
        self.data[key] = value

    def _remove(self, key: str) -> None:
        self.data.pop(key, None)
