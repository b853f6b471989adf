"""Provides the main entry point for using the library, :class:`Notebook`"""

from __future__ import annotations
from enum import Enum
import json
import logging
import re
from typing import Callable, List, Optional, Tuple

from notekeeper import ids
from notekeeper.conf import NotekeeperConf
from notekeeper.listing import read_note_content, read_note_list
from notekeeper.models import NOTE_LIST_KEY, RESERVED_NAMES, TYPING_MODE_KEY, NoteContent, NoteListEntry
from notekeeper.navigation import HistoryNavigator, Navigator, ROOT_PATH, note_path
from notekeeper.selection import CurrentNoteSelector


logger = logging.getLogger(__name__)

_ILLEGAL_NAME_CHARS = re.compile(r'[#/]')


class Error(Exception):
    pass


class NameProblem(Enum):
    """The reasons a candidate note name can be rejected. Values are the messages shown to the user."""
    EMPTY = 'Name can not be empty'
    RESERVED = 'This name is not allowed'
    TAKEN = 'This name is already taken'
    ILLEGAL_CHARACTER = "You can't use # or / characters"
    UNSAVABLE = 'This name contains characters that can not be saved'


class ValidationError(Error):
    """Raised when a note name is rejected. Nothing has been changed when this is raised."""
    def __init__(self, reason: NameProblem, name: str):
        super().__init__(reason.value)
        self.reason = reason
        self.name = name


class NoteNotFoundError(Error):
    """Raised when an operation requires a note that is not in the index."""
    def __init__(self, name: str):
        super().__init__(f'No note named {name!r}')
        self.name = name


class MissingContentError(Error):
    """Raised when a note to be renamed has no index entry or no readable content record to carry over."""
    def __init__(self, name: str):
        super().__init__(f'Nothing to rename for note {name!r}')
        self.name = name


class Notebook:
    """Main entry point for working programmatically with your collection of notes.

    A Notebook owns the note index (:attr:`notes`) and is the only thing that should change it. Every change
    updates the index and the affected content records together, so that a content record exists under a
    name exactly when the index has an entry with that name. Names are validated before anything is written;
    a rejected name leaves the index, the store and the navigator untouched.

    After each successful change the notebook moves the :attr:`navigator` to the appropriate note, and calls
    the ``callback`` given to the method, if any.

    Generally, you should get an instance using :meth:`Notebook.for_user`. Call :meth:`close` when you're done
    with it, or else use it as a context manager.

    .. attribute:: conf
       :type: notekeeper.conf.NotekeeperConf

    .. attribute:: store
       :type: notekeeper.stores.base.Store

    .. attribute:: navigator
       :type: notekeeper.navigation.Navigator

    .. attribute:: notes
       :type: List[notekeeper.models.NoteListEntry]

       The note index, newest note first.

    Here's an example:

    .. code-block:: python

       from notekeeper.api import Notebook
       with Notebook.for_user() as nb:
           nb.add_note('groceries')
           nb.set_note_value('groceries', 'eggs, flour')
           nb.rename_note('groceries', 'shopping')
    """

    @staticmethod
    def for_user(navigator: Navigator = None) -> Notebook:
        """Creates an instance using the user's ``~/.notekeeper.conf.py`` file.

        Raises :exc:`Exception` if it does not exist or does not define configuration.
        """
        return NotekeeperConf.for_user().instantiate(navigator)

    def __init__(self, conf: NotekeeperConf, navigator: Navigator = None):
        self.conf = conf
        self.store = conf.store_conf.instantiate()
        self.navigator = navigator or HistoryNavigator()
        self.notes: List[NoteListEntry] = read_note_list(self.store)
        self.selector = CurrentNoteSelector(self.store, self.navigator)

    @property
    def current_note(self) -> Optional[NoteContent]:
        """The content of the note at the navigator's current location, if there is one."""
        return self.selector.current_note

    def refresh(self) -> None:
        """Re-reads the note index and the current note from the store.

        Only needed if something other than this instance may have changed the store.
        """
        self.notes = read_note_list(self.store)
        self.selector.refresh()

    def entry(self, name: str) -> Optional[NoteListEntry]:
        """Returns the index entry with exactly the given name, if any."""
        return next((n for n in self.notes if n.name == name), None)

    def validate_name(self, name: str, renaming: str = None) -> None:
        """Raises :exc:`ValidationError` if the name cannot be given to a note.

        When renaming, pass the note's current name as ``renaming`` so it doesn't count as taking the new name.
        """
        lower = name.lower()
        taken = any(n.name.lower() == lower for n in self.notes if not n.name == renaming)
        if not name:
            raise ValidationError(NameProblem.EMPTY, name)
        if name in RESERVED_NAMES:
            raise ValidationError(NameProblem.RESERVED, name)
        if taken:
            raise ValidationError(NameProblem.TAKEN, name)
        if _ILLEGAL_NAME_CHARS.search(name):
            raise ValidationError(NameProblem.ILLEGAL_CHARACTER, name)
        try:
            name.encode('utf-8')
        except UnicodeEncodeError:
            raise ValidationError(NameProblem.UNSAVABLE, name)

    def add_note(self, name: str, callback: Callable[[], None] = None) -> NoteListEntry:
        """Creates an empty note, places it first in the index, and navigates to it.

        Raises :exc:`ValidationError` if the name is not allowed.
        """
        self.validate_name(name)
        entry = NoteListEntry(name=name, id=ids.new_id())
        logger.debug('Adding note %r (%s)', name, entry.id)
        self.store.set(name, NoteContent(name).to_json())
        self._save_notes([entry] + self.notes)
        self.navigator.navigate_to(note_path(name))
        if callback:
            callback()
        return entry

    def remove_note(self, name: str, callback: Callable[[], None] = None) -> None:
        """Deletes the note with exactly the given name, and navigates to the first remaining note.

        If no notes remain, navigates to :data:`notekeeper.navigation.ROOT_PATH`. If there is no such note in the
        index, any record stored under the name is still removed.
        """
        logger.debug('Removing note %r', name)
        remaining = [n for n in self.notes if not n.name == name]
        self._save_notes(remaining)
        self.store.remove(name)
        self.navigator.navigate_to(note_path(remaining[0].name) if remaining else ROOT_PATH)
        if callback:
            callback()

    def rename_note(self, old_name: str, new_name: str, callback: Callable[[], None] = None) -> bool:
        """Renames a note, carrying over its content and id, and navigates to it.

        Raises :exc:`ValidationError` if the new name is not allowed. Renaming a note to its current name is allowed
        and changes nothing.

        If there is no note named ``old_name``, or its content record is missing or unreadable, nothing is changed,
        the callback is not called, and False is returned. Otherwise returns True.
        """
        self.validate_name(new_name, renaming=old_name)
        try:
            entry, content = self._rename_source(old_name)
        except MissingContentError as e:
            logger.warning('Not renaming %r to %r: %s', old_name, new_name, e)
            return False

        if not old_name == new_name:
            logger.debug('Renaming note %r to %r', old_name, new_name)
            self.store.set(new_name, NoteContent(new_name, content.value).to_json())
            self._save_notes([NoteListEntry(name=new_name, id=n.id) if n is entry else n for n in self.notes])
            self.store.remove(old_name)
        self.navigator.navigate_to(note_path(new_name))
        if callback:
            callback()
        return True

    edit_note_name = rename_note

    def _rename_source(self, name: str) -> Tuple[NoteListEntry, NoteContent]:
        entry = self.entry(name)
        if not entry:
            raise MissingContentError(name)
        content = read_note_content(self.store, name)
        if not content:
            raise MissingContentError(name)
        return entry, content

    def set_note_value(self, name: str, value: str) -> None:
        """Replaces the text of an existing note.

        Raises :exc:`NoteNotFoundError` if the index has no note with exactly this name.
        """
        if not self.entry(name):
            raise NoteNotFoundError(name)
        self.store.set(name, NoteContent(name, value).to_json())
        if name == self.selector.current_name:
            self.selector.refresh()

    @property
    def typing_mode(self) -> bool:
        """The editor's persisted input-mode flag. Absent or unreadable values count as False."""
        raw = self.store.get(TYPING_MODE_KEY)
        if raw is None:
            return False
        try:
            return json.loads(raw) is True
        except (ValueError, RecursionError):
            logger.warning('Ignoring malformed typing mode flag: %r', raw)
            return False

    @typing_mode.setter
    def typing_mode(self, value: bool) -> None:
        self.store.set(TYPING_MODE_KEY, json.dumps(bool(value)))

    def _save_notes(self, notes: List[NoteListEntry]) -> None:
        self.store.set(NOTE_LIST_KEY, NoteListEntry.list_to_json(notes))
        self.notes = notes

    def close(self):
        """Closes the associated store and releases any other resources."""
        self.store.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
