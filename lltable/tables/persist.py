import json

from lltable.common import Location
from lltable.exceptions import GrammarFileError


def table_to_serializable(table):
    """Convert table object to canonical serializable representation composed
    of lists and dicts. Entries are ordered by (non-terminal, terminal)."""
    entries = []
    for key, production in table.sorted_items():
        entries.append(_dump_entry(key, production))

    return {
        'nonterminals': sorted(table.nonterminals),
        'entries': entries,
    }


def save_table(file_name, table):
    with open(file_name, 'w', encoding='utf-8') as f:
        f.write(dumps_table(table))


def dumps_table(table):
    return json.dumps(table_to_serializable(table), sort_keys=True,
                      indent=1) + "\n"


def table_from_serializable(serialized, file_name=None):
    """Convert serializable representation of a parsing table into
    ParsingTable object."""
    from lltable.grammar import SYMBOL_KINDS
    from lltable.tables import ParsingTable, Production, TableKey

    location = Location(file_name=file_name)
    try:
        entries = {}
        for json_entry in serialized['entries']:
            key = TableKey(json_entry['nonterminal'], json_entry['terminal'])
            if key in entries:
                raise GrammarFileError(
                    location, "cell ({}, {}) defined more than once"
                    .format(key.nonterminal, key.terminal))
            entries[key] = Production(
                SYMBOL_KINDS[s['kind']](s['name'])
                for s in json_entry['production'])
        nonterminals = serialized['nonterminals']
        if not isinstance(nonterminals, list):
            raise GrammarFileError(location,
                                   '"nonterminals" must be a list of names')
        table = ParsingTable(entries, nonterminals)
    except (KeyError, TypeError) as e:
        raise GrammarFileError(location,
                               f'invalid table data: {e!r}') from e

    return table


def load_table(file_name):
    with open(file_name, encoding='utf-8') as f:
        try:
            data = json.load(f, object_pairs_hook=_unique_keys)
        except ValueError as e:
            raise GrammarFileError(Location(file_name=file_name),
                                   f'invalid JSON: {e}') from e
    return table_from_serializable(data, file_name=file_name)


def _unique_keys(pairs):
    obj = {}
    for key, value in pairs:
        if key in obj:
            raise ValueError(f'key "{key}" defined more than once')
        obj[key] = value
    return obj


def _dump_entry(key, production):
    e = {}
    e['nonterminal'] = key.nonterminal
    e['terminal'] = key.terminal
    e['production'] = [_dump_symbol(s) for s in production]
    return e


def _dump_symbol(symbol):
    return {'kind': symbol.kind, 'name': symbol.name}
