"""Command-line interface for notekeeper."""


import argparse
import json
import logging
import sys
from terminaltables import AsciiTable
from notekeeper.api import Notebook, ValidationError, NoteNotFoundError
from notekeeper.listing import read_note_content


def _list(args, nb: Notebook) -> int:
    if args.json:
        print(json.dumps([n.as_json() for n in nb.notes]))
    elif args.table:
        data = [('Name', 'Id')] + [(n.name, n.id) for n in nb.notes]
        print(AsciiTable(data).table)
    else:
        for note in nb.notes:
            print(note.name)
    return 0


def _show(args, nb: Notebook) -> int:
    name = args.name[0]
    content = read_note_content(nb.store, name) if nb.entry(name) else None
    if not content:
        print(f'No note named {name}', file=sys.stderr)
        return 1
    if args.json:
        print(json.dumps(content.as_json()))
    else:
        print(content.value)
    return 0


def _add(args, nb: Notebook) -> int:
    name = args.name[0]
    nb.add_note(name, lambda: None if args.preview else print(f'Created {name}'))
    return 0


def _rm(args, nb: Notebook) -> int:
    name = args.name[0]
    nb.remove_note(name, lambda: None if args.preview else print(f'Removed {name}'))
    return 0


def _mv(args, nb: Notebook) -> int:
    old = args.old[0]
    new = args.new[0]
    if not nb.rename_note(old, new, lambda: None if args.preview else print(f'Renamed {old} to {new}')):
        print(f'Nothing to rename for note {old}', file=sys.stderr)
        return 1
    return 0


def _write(args, nb: Notebook) -> int:
    value = sys.stdin.read() if args.value == '-' else args.value
    nb.set_note_value(args.name[0], value)
    return 0


def argparser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser()
    parser.set_defaults(func=None, preview=False)
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debugging information to stderr.')

    subs = parser.add_subparsers(title='Commands')

    p_list = subs.add_parser('list', help='List the names of all notes, newest first.')
    p_list_formats = p_list.add_mutually_exclusive_group()
    p_list_formats.add_argument('-j', '--json', action='store_true', help='Output as JSON.')
    p_list_formats.add_argument('-t', '--table', action='store_true', help='Format output as a table.')
    p_list.set_defaults(func=_list)

    p_show = subs.add_parser('show', help='Print the text of a note.')
    p_show.add_argument('name', nargs=1)
    p_show.add_argument('-j', '--json', action='store_true', help='Output the stored record as JSON.')
    p_show.set_defaults(func=_show)

    p_add = subs.add_parser('add', help='Create a new, empty note. Names must be unique (ignoring case), '
                                        'and cannot contain # or / characters.')
    p_add.add_argument('name', nargs=1)
    p_add.add_argument('-p', '--preview', action='store_true', help='Print changes to be made but do not save them')
    p_add.set_defaults(func=_add)

    p_rm = subs.add_parser('rm', help='Delete a note.')
    p_rm.add_argument('name', nargs=1)
    p_rm.add_argument('-p', '--preview', action='store_true', help='Print changes to be made but do not save them')
    p_rm.set_defaults(func=_rm)

    p_mv = subs.add_parser('mv', help='Rename a note, keeping its text.')
    p_mv.add_argument('old', nargs=1)
    p_mv.add_argument('new', nargs=1)
    p_mv.add_argument('-p', '--preview', action='store_true', help='Print changes to be made but do not save them')
    p_mv.set_defaults(func=_mv)

    p_write = subs.add_parser('write', help='Replace the text of a note.')
    p_write.add_argument('name', nargs=1)
    p_write.add_argument('value', help='The new text, or - to read it from stdin.')
    p_write.add_argument('-p', '--preview', action='store_true', help='Print changes to be made but do not save them')
    p_write.set_defaults(func=_write)

    return parser


def main(args=None) -> int:
    """Runs the tool and returns its exit code.

    args may be an array of string command-line arguments; if absent,
    the process's arguments are used.
    """
    parser = argparser()
    args = parser.parse_args(args)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='%(levelname)s %(name)s: %(message)s')
    if not args.func:
        parser.print_help()
        return 1
    with Notebook.for_user() as nb:
        if args.preview:
            nb.store.conf.preview_mode = True
        try:
            return args.func(args, nb)
        except (ValidationError, NoteNotFoundError) as e:
            print(e, file=sys.stderr)
            return 1
