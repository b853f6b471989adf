"""Provides the :class:`CurrentNoteSelector` class."""

from typing import Optional

from notekeeper.listing import read_note_content
from notekeeper.models import NoteContent
from notekeeper.navigation import Navigator, note_name_for_path
from notekeeper.stores.base import Store


class CurrentNoteSelector:
    """Exposes the note addressed by the navigator's current path.

    The content is re-read from the store whenever the addressed name changes. If the path addresses no note,
    or addresses a note that has no readable content record (for example a stale link), :attr:`current_note`
    is None.
    """
    def __init__(self, store: Store, navigator: Navigator):
        self.store = store
        self.navigator = navigator
        self.current_name: Optional[str] = None
        self.current_note: Optional[NoteContent] = None
        navigator.subscribe(self._location_changed)
        self.refresh()

    def _location_changed(self, path: str) -> None:
        if not note_name_for_path(path) == self.current_name:
            self.refresh()

    def refresh(self) -> None:
        """Re-reads the current note even if the location has not changed."""
        self.current_name = note_name_for_path(self.navigator.current_path)
        if self.current_name is None:
            self.current_note = None
        else:
            self.current_note = read_note_content(self.store, self.current_name)
