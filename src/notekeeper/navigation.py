"""Tracks where the user is within the collection of notes.

A note is addressed by the path ``/note/<name>``, with the name embedded verbatim (note names cannot contain
``/`` or ``#``). :data:`ROOT_PATH` is the location shown when there is no note to show.
"""

from typing import Callable, List, Optional


ROOT_PATH = '/'
NOTE_PATH_PREFIX = '/note/'


def note_path(name: str) -> str:
    return f'{NOTE_PATH_PREFIX}{name}'


def note_name_for_path(path: str) -> Optional[str]:
    """Returns the name of the note addressed by the path, or None if the path does not address a note."""
    if path and path.startswith(NOTE_PATH_PREFIX):
        return path[len(NOTE_PATH_PREFIX):] or None
    return None


class Navigator:
    """Base class for navigation collaborators.

    :class:`notekeeper.api.Notebook` calls :meth:`navigate_to` after each successful change, and
    :class:`notekeeper.selection.CurrentNoteSelector` subscribes to learn when the location changes.
    """
    def __init__(self):
        self._listeners = []

    @property
    def current_path(self) -> str:
        raise NotImplementedError()

    def navigate_to(self, path: str) -> None:
        raise NotImplementedError()

    def subscribe(self, listener: Callable[[str], None]) -> None:
        """Registers a function to be called with the new path whenever the location changes."""
        self._listeners.append(listener)

    def _notify(self, path: str) -> None:
        for listener in list(self._listeners):
            listener(path)


class HistoryNavigator(Navigator):
    """Keeps the visited paths in memory, most recent last.

    .. attribute:: history
       :type: List[str]
    """
    def __init__(self, start: str = ROOT_PATH):
        super().__init__()
        self.history: List[str] = [start]

    @property
    def current_path(self) -> str:
        return self.history[-1]

    def navigate_to(self, path: str) -> None:
        self.history.append(path)
        self._notify(path)

    def back(self) -> str:
        """Returns to the previous path, if any, and returns the resulting current path."""
        if len(self.history) > 1:
            self.history.pop()
            self._notify(self.current_path)
        return self.current_path
