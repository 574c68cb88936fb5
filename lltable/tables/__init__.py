import logging
from collections import namedtuple
from collections.abc import Mapping

from lltable.exceptions import DuplicateCell, EmptyGrammar, MalformedRow
from lltable.grammar import NONTERMINAL_COLUMN, RESERVED_COLUMNS, \
    EPSILON_MARKER, NonTerminal, rename_stop
from lltable.termui import prints, h_print, s_emph

logger = logging.getLogger(__name__)


TableKey = namedtuple('TableKey', ['nonterminal', 'terminal'])


class Production(tuple):
    """
    Ordered, immutable sequence of grammar symbols a non-terminal expands to.
    An empty production represents epsilon.
    """
    __slots__ = ()

    def __str__(self):
        if not self:
            return 'EMPTY'
        return " ".join(s.name for s in self)

    def __repr__(self):
        return f"Production({', '.join(repr(s) for s in self)})"


class ParsingTable(Mapping):
    """
    Read-only LL(1) parsing table mapping `TableKey` to `Production`.
    Cells absent from the table mean that no rule applies.

    Attributes:
    nonterminals(frozenset): Declared non-terminal names.
    terminals(frozenset): Lookahead terminal names used in the table.
    """
    def __init__(self, entries, nonterminals):
        self._entries = dict(entries)
        self.nonterminals = frozenset(nonterminals)
        self.terminals = frozenset(k.terminal for k in self._entries)

    def __getitem__(self, key):
        try:
            key = TableKey(*key)
        except TypeError:
            raise KeyError(key)
        return self._entries[key]

    def __iter__(self):
        return iter(self._entries)

    def __len__(self):
        return len(self._entries)

    def __contains__(self, key):
        try:
            return TableKey(*key) in self._entries
        except TypeError:
            return False

    def __eq__(self, other):
        if isinstance(other, ParsingTable):
            return self._entries == other._entries \
                and self.nonterminals == other.nonterminals
        return NotImplemented

    __hash__ = None

    def get_production(self, nonterminal, terminal):
        """
        Returns production for the given non-terminal and lookahead terminal
        or `None` if the cell is empty.
        """
        return self._entries.get(TableKey(nonterminal, terminal))

    def sorted_items(self):
        return sorted(self._entries.items(), key=lambda e: e[0])

    def print_debug(self):
        h_print("LL(1) TABLE:", new_line=True)
        current = None
        for key, production in self.sorted_items():
            if key.nonterminal != current:
                current = key.nonterminal
                h_print(f"{current}:", new_line=True)
            prints("\t{} => {}".format(s_emph(key.terminal), production))
        prints("")


def create_table(grammar, debug=False):
    """
    Builds LL(1) parsing table from the rows of the given grammar.

    Arguments:
    grammar (Grammar): Grammar with resolved cells.
    debug (bool): Print the resulting table.

    Raises EmptyGrammar, MalformedRow, UnknownTerminal or DuplicateCell. The
    table is never returned partially built.
    """
    if not grammar.rows:
        raise EmptyGrammar(grammar.location())

    entries = {}
    # Row index which defined each cell. Used for conflict reporting.
    origins = {}

    for row_idx, row in enumerate(grammar.rows):
        nonterminal = _row_nonterminal(grammar, row_idx, row)
        logger.debug("Processing row %d: %s", row_idx, nonterminal)

        # Columns repeated inside one JSON row object.
        for column, first, second in getattr(row, 'duplicates', ()):
            location = grammar.location(row_idx, nonterminal, column)
            if column in RESERVED_COLUMNS:
                raise MalformedRow(location,
                                   f'column "{column}" defined more than once')
            raise DuplicateCell(location,
                                TableKey(nonterminal, rename_stop(column)),
                                row_idx, first, second)

        for column, raw_production in row.items():
            if column in RESERVED_COLUMNS:
                continue
            location = grammar.location(row_idx, nonterminal, column)
            if not isinstance(raw_production, str):
                raise MalformedRow(
                    location, "cell value must be a production string, "
                    f"got {type(raw_production).__name__}")
            if not raw_production.strip():
                continue

            terminal = rename_stop(column)
            if isinstance(grammar.classify(terminal, location), NonTerminal):
                raise MalformedRow(
                    location,
                    f'lookahead column "{column}" names a non-terminal',
                    hint="lookahead columns must be terminals")

            production = Production(
                grammar.classify(rename_stop(name), location)
                for name in raw_production.split()
                if name != EPSILON_MARKER)

            key = TableKey(nonterminal, terminal)
            if key in entries:
                raise DuplicateCell(location, key, origins[key],
                                    entries[key], production)
            entries[key] = production
            origins[key] = row_idx

    table = ParsingTable(entries, grammar.nonterminals)
    logger.debug("Created table with %d entries.", len(table))

    if debug:
        table.print_debug()

    return table


def _row_nonterminal(grammar, row_idx, row):
    if not isinstance(row, Mapping):
        raise MalformedRow(grammar.location(row_idx),
                           f"row must be a mapping, got {type(row).__name__}")
    nonterminal = row.get(NONTERMINAL_COLUMN)
    if not isinstance(nonterminal, str) or not nonterminal.strip():
        raise MalformedRow(
            grammar.location(row_idx, column=NONTERMINAL_COLUMN),
            f'missing "{NONTERMINAL_COLUMN}" name')
    nonterminal = nonterminal.strip()
    if nonterminal not in grammar.nonterminals:
        raise MalformedRow(
            grammar.location(row_idx, nonterminal, NONTERMINAL_COLUMN),
            f'"{nonterminal}" is not a declared non-terminal',
            hint="add it to the grammar non-terminals")
    return nonterminal
