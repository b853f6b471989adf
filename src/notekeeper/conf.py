from __future__ import annotations
from dataclasses import dataclass, replace
import os.path


@dataclass
class StoreConf:
    """Base class for store config. Use a subclass such as :class:`SqliteStoreConf`."""

    preview_mode: bool = False
    """If True, writes to the store should instead just be printed to the console.

    Instead of setting this in your ``.notekeeper.conf.py``, you can pass a ``--preview`` command-line argument to
    commands that change notes.
    """

    def instantiate(self):
        raise NotImplementedError("Please use a subclass like SqliteStoreConf instead!")

    def standardize(self):
        return self


@dataclass
class MemoryStoreConf(StoreConf):
    """Configures notekeeper to keep notes in memory only, via :class:`notekeeper.stores.memory.MemoryStore`."""
    def instantiate(self):
        from notekeeper.stores.memory import MemoryStore
        return MemoryStore(self)


@dataclass
class SqliteStoreConf(StoreConf):
    """Configures notekeeper to persist notes in a SQLite database, via :class:`notekeeper.stores.sqlite.SqliteStore`."""

    path: str = None
    """Required. Path where the SQLite database file should be stored.

    The file will be created if it does not exist. Unlike a cache, this file *is* your notes: deleting it
    deletes them. ``:memory:`` may be used for a throwaway database.
    """

    def instantiate(self):
        from notekeeper.stores.sqlite import SqliteStore
        return SqliteStore(self.standardize())

    def standardize(self):
        if not self.path or self.path == ':memory:':
            return self
        return replace(self, path=os.path.realpath(os.path.expanduser(self.path)))


@dataclass
class NotekeeperConf:
    store_conf: StoreConf
    """Configures where your notes are persisted."""

    @classmethod
    def user_config_path(cls) -> str:
        return os.path.expanduser(os.path.join('~', '.notekeeper.conf.py'))

    @classmethod
    def for_user(cls) -> NotekeeperConf:
        path = cls.user_config_path()
        if not os.path.exists(path):
            raise Exception(f'You need to create the config file: {path}')
        with open(path, 'r') as file:
            conf_script = file.read()
        context = {}
        exec(conf_script, context)
        if 'conf' not in context or not isinstance(context['conf'], cls):
            raise Exception('You need to assign an instance of NotekeeperConf to the variable `conf` '
                            f'in your config file: {path}')
        return context['conf']

    def standardize(self):
        return replace(
            self,
            store_conf=self.store_conf.standardize()
        )

    def instantiate(self, navigator=None):
        from notekeeper.api import Notebook
        return Notebook(self.standardize(), navigator=navigator)
