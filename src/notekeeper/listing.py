"""Functions for reading note records out of a store.

Nothing here caches: call again whenever the set of notes may have changed.
"""

import logging
from typing import List, Optional

from notekeeper.models import NOTE_LIST_KEY, MalformedStorageError, NoteContent, NoteListEntry
from notekeeper.stores.base import Store


logger = logging.getLogger(__name__)


def read_note_list(store: Store) -> List[NoteListEntry]:
    """Returns the persisted note index, newest note first.

    Returns an empty list if no index has been stored yet, or if the stored value is malformed.
    """
    raw = store.get(NOTE_LIST_KEY)
    if raw is None:
        return []
    try:
        return NoteListEntry.list_from_json(raw)
    except MalformedStorageError as e:
        logger.warning('Ignoring malformed note index: %s', e.message)
        return []


def read_note_content(store: Store, name: str) -> Optional[NoteContent]:
    """Returns the content record stored under the note's name.

    Returns None if there is no record or the record is malformed; a malformed note is treated as nonexistent
    rather than as empty, so that nothing ever overwrites the bad data on the user's behalf.
    """
    raw = store.get(name)
    if raw is None:
        return None
    try:
        return NoteContent.from_json(raw, name)
    except MalformedStorageError as e:
        logger.warning('Ignoring malformed content for note %r: %s', name, e.message)
        return None
