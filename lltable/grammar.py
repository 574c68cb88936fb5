import json
from os import path

from lltable.common import Location
from lltable.exceptions import GrammarFileError, UnknownTerminal

# Column holding the name of the row non-terminal.
NONTERMINAL_COLUMN = 'Nonterminal'

# Auxiliary annotations from the grammar source. Not lookup columns.
RESERVED_COLUMNS = frozenset([NONTERMINAL_COLUMN, 'FIRST', 'FOLLOW'])

# Marks the empty string in the grammar notation.
EPSILON_MARKER = "''"

# End-of-input sentinel as written in the grammar source and the stable
# name it is emitted under.
STOP_MARKER = '$'
END = 'End'


class GrammarSymbol:
    """
    Represents an abstract grammar symbol. Symbols are immutable and compare
    equal if they are of the same kind and have the same name.

    Attributes:
    name(str): The name of this grammar symbol.
    """

    __slots__ = ['_name', '_hash']

    kind = None

    def __init__(self, name):
        self._name = name
        self._hash = hash((self.kind, name))

    @property
    def name(self):
        return self._name

    def __setattr__(self, name, value):
        if hasattr(self, '_hash'):
            raise AttributeError(
                f"{type(self).__name__} is immutable")
        super().__setattr__(name, value)

    def __eq__(self, other):
        return type(self) is type(other) and self._name == other._name

    def __ne__(self, other):
        return not self == other

    def __hash__(self):
        return self._hash

    def __str__(self):
        return self._name

    def __repr__(self):
        return f"{type(self).__name__}({self._name})"


class NonTerminal(GrammarSymbol):
    """Represents a non-terminal symbol of the grammar."""
    __slots__ = []
    kind = 'nonterminal'


class Terminal(GrammarSymbol):
    """Represents a terminal symbol of the grammar."""
    __slots__ = []
    kind = 'terminal'


SYMBOL_KINDS = {
    NonTerminal.kind: NonTerminal,
    Terminal.kind: Terminal,
}


def classify(name, nonterminals):
    """
    Returns `NonTerminal(name)` if the name is one of the given non-terminal
    names and `Terminal(name)` otherwise.
    """
    if name in nonterminals:
        return NonTerminal(name)
    return Terminal(name)


def rename_stop(name):
    return END if name == STOP_MARKER else name


class JSONObject(dict):
    """
    Decoded JSON object which keeps the first value of a repeated key and
    records every repetition in `duplicates` as (key, first, other) triples.
    Used as `object_pairs_hook` so repeated keys are not lost in decoding.
    """
    def __init__(self, pairs):
        super().__init__()
        self.duplicates = []
        for key, value in pairs:
            if key in self:
                self.duplicates.append((key, self[key], value))
            else:
                self[key] = value


class Grammar:
    """
    Grammar definition with already resolved LL(1) cells.

    Attributes:
    rows(list of dict): Each row maps column names to raw production strings.
        The `Nonterminal` column names the row non-terminal.
    nonterminals(frozenset): Declared non-terminal names.
    terminals(frozenset or None): Terminal vocabulary. If given, symbols which
        are neither non-terminals nor in the vocabulary are rejected.
    file_name(str): The file this grammar is loaded from if any.
    """
    def __init__(self, rows, nonterminals, terminals=None, file_name=None):
        self.rows = list(rows)
        self.nonterminals = frozenset(nonterminals)
        if terminals is not None:
            terminals = frozenset(rename_stop(t) for t in terminals) | {END}
        self.terminals = terminals
        self.file_name = file_name

    @property
    def strict(self):
        return self.terminals is not None

    def classify(self, name, location=None):
        """
        Classifies the given symbol name. In strict mode raise
        `UnknownTerminal` for names outside of the terminal vocabulary.
        """
        symbol = classify(name, self.nonterminals)
        if self.strict and isinstance(symbol, Terminal) \
                and name not in self.terminals:
            raise UnknownTerminal(location, name)
        return symbol

    def location(self, row=None, nonterminal=None, column=None):
        return Location(file_name=self.file_name, row=row,
                        nonterminal=nonterminal, column=column)

    @staticmethod
    def from_struct(data, nonterminals=None, terminals=None, file_name=None):
        """
        Creates a grammar from decoded JSON data. The data is either a dict
        with `rows`, `nonterminals` and optional `terminals` keys or a bare
        list of rows. For a bare list the non-terminals are the names of the
        rows unless given explicitly.
        """
        location = Location(file_name=file_name)
        if isinstance(data, dict):
            duplicates = getattr(data, 'duplicates', None)
            if duplicates:
                raise GrammarFileError(
                    location,
                    f'key "{duplicates[0][0]}" defined more than once')
            if 'rows' not in data:
                raise GrammarFileError(location, 'missing "rows" key')
            rows = data['rows']
            if nonterminals is None:
                nonterminals = data.get('nonterminals')
            if terminals is None:
                terminals = data.get('terminals')
        else:
            rows = data

        if not isinstance(rows, list):
            raise GrammarFileError(location, 'rows must be a list')

        if nonterminals is None:
            nonterminals = [row[NONTERMINAL_COLUMN].strip() for row in rows
                            if isinstance(row, dict)
                            and isinstance(row.get(NONTERMINAL_COLUMN), str)]

        for names, what in ((nonterminals, 'nonterminals'),
                            (terminals, 'terminals')):
            if names is not None and (
                    not isinstance(names, (list, tuple, set, frozenset))
                    or not all(isinstance(n, str) for n in names)):
                raise GrammarFileError(
                    location, f'"{what}" must be a list of names')

        return Grammar(rows, nonterminals, terminals=terminals,
                       file_name=file_name)

    @staticmethod
    def from_string(grammar_str, nonterminals=None, terminals=None,
                    file_name=None):
        try:
            data = json.loads(grammar_str, object_pairs_hook=JSONObject)
        except ValueError as e:
            raise GrammarFileError(Location(file_name=file_name),
                                   f'invalid JSON: {e}') from e
        return Grammar.from_struct(data, nonterminals=nonterminals,
                                   terminals=terminals, file_name=file_name)

    @staticmethod
    def from_file(file_name, nonterminals=None, terminals=None):
        file_name = path.realpath(file_name)
        with open(file_name, encoding='utf-8') as f:
            content = f.read()
        return Grammar.from_string(content, nonterminals=nonterminals,
                                   terminals=terminals, file_name=file_name)


def load_vocabulary(file_name):
    """
    Loads terminal vocabulary from a JSON list or a text file with one name
    per line.
    """
    with open(file_name, encoding='utf-8') as f:
        content = f.read()
    try:
        names = json.loads(content)
    except ValueError:
        names = content.split()
    if not isinstance(names, list) \
            or not all(isinstance(n, str) for n in names):
        raise GrammarFileError(Location(file_name=file_name),
                               'vocabulary must be a list of names')
    return names
