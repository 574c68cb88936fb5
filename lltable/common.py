from lltable.termui import s_attention as _a


class Location:
    """
    Represents a location of a cell in the grammar definition.

    Attributes:
    file_name(str): The name (path) of the grammar file if the grammar was
        loaded from a file.
    row(int): Zero-based index of the grammar row.
    nonterminal(str): The name of the row non-terminal if known.
    column(str): The name of the column (terminal) inside the row.
    """

    __slots__ = ['file_name', 'row', 'nonterminal', 'column']

    def __init__(self, file_name=None, row=None, nonterminal=None,
                 column=None):
        self.file_name = file_name
        self.row = row
        self.nonterminal = nonterminal
        self.column = column

    def __str__(self):
        parts = []
        if self.file_name:
            parts.append(self.file_name)
        if self.row is not None:
            parts.append(f"row {self.row}")
        if self.nonterminal is not None or self.column is not None:
            parts.append("({}, {})".format(
                self.nonterminal if self.nonterminal is not None else "?",
                self.column if self.column is not None else "?"))
        if parts:
            return ":".join(parts)
        return _a("<Unknown location>")

    def __repr__(self):
        return str(self)
