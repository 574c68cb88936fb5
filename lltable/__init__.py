# -*- coding: utf-8 -*-
# flake8: NOQA
from lltable.grammar import Grammar, GrammarSymbol, NonTerminal, Terminal, \
    classify, END, EPSILON_MARKER
from lltable.tables import ParsingTable, Production, TableKey, create_table
from lltable.tables.persist import save_table, load_table
from lltable.export import table_rust_export
from lltable.exceptions import LLTableError, MalformedRow, UnknownTerminal, \
    DuplicateCell, EmptyGrammar, GrammarFileError

from .version import __version__
