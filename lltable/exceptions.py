from typing import Optional

from lltable.common import Location
from lltable.termui import s_attention as err
from lltable.termui import s_header as _


class LLTableError(Exception):
    def __init__(self, location: Optional[Location],
                 message: str,
                 error_type: str = "error",
                 hint: Optional[str] = None):

        self.location = location if location is not None else Location()
        self.hint = hint
        self.message = message
        self.error_type = error_type

        hint = _(f"  hint: {hint}") if hint else None

        self.full_message = "\n".join(
            filter(None, [f"{err(error_type)}: {message}", hint]))
        super().__init__(self.full_message)

    def __str__(self):
        return f"{self.location}: {self.full_message}"


class EmptyGrammar(LLTableError):
    def __init__(self, location=None):
        super().__init__(location, "grammar has no rows",
                         error_type="empty grammar")


class MalformedRow(LLTableError):
    def __init__(self, location, message, hint=None):
        super().__init__(location, message, error_type="malformed row",
                         hint=hint)


class UnknownTerminal(LLTableError):
    def __init__(self, location, name):
        self.name = name
        super().__init__(
            location,
            f'symbol "{name}" is neither a non-terminal nor a known terminal',
            error_type="unknown terminal",
            hint="add it to the terminal vocabulary or declare it "
                 "as a non-terminal")


class DuplicateCell(LLTableError):
    """
    Raised when two grammar rows define the same (non-terminal, terminal)
    cell, i.e. the grammar is not LL(1) at that cell.

    Attributes:
    key(TableKey): The conflicting cell.
    first_row(int): Index of the row which defined the cell first.
    row(int): Index of the row with the conflicting definition.
    """
    def __init__(self, location, key, first_row, first_production,
                 production):
        self.key = key
        self.first_row = first_row
        self.row = location.row
        message = "cell ({}, {}) already defined in row {} as '{}', " \
                  "redefined as '{}'".format(key.nonterminal, key.terminal,
                                             first_row, first_production,
                                             production)
        super().__init__(location, message, error_type="duplicate cell",
                         hint="the grammar is not LL(1) for this lookahead")


class GrammarFileError(LLTableError):
    def __init__(self, location, message):
        super().__init__(location, message, error_type="grammar file error")
