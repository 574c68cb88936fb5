import pytest  # noqa
import os
from lltable import Grammar, NonTerminal, Terminal, TableKey, create_table
from lltable.grammar import EPSILON_MARKER, RESERVED_COLUMNS
from lltable.tables.persist import dumps_table

this_folder = os.path.dirname(__file__)
EXPRESSION_GRAMMAR = os.path.join(this_folder, 'grammar', 'expression.json')
STATEMENTS_GRAMMAR = os.path.join(this_folder, 'grammar', 'statements.json')


def test_statement_row():
    rows = [{
        'Nonterminal': 'Statement',
        'if': 'IfStatement',
        'print': 'PrintStatement',
        'FOLLOW': '...',
    }]
    g = Grammar(rows, ['Statement', 'IfStatement', 'PrintStatement'])
    table = create_table(g)

    assert len(table) == 2
    assert table['Statement', 'if'] == (NonTerminal('IfStatement'),)
    assert table[TableKey('Statement', 'print')] \
        == (NonTerminal('PrintStatement'),)
    assert ('Statement', 'FOLLOW') not in table
    assert table.get_production('Statement', 'FOLLOW') is None


def test_expression_grammar():
    g = Grammar.from_file(EXPRESSION_GRAMMAR)
    table = create_table(g)

    assert len(table) == 13
    assert g.nonterminals == {'Expression', 'ExpressionPRE', 'Term',
                              'TermPRE', 'Factor'}
    assert table.terminals == {'LParen', 'RParen', 'Plus', 'Star', 'Id',
                               'End'}

    assert table['Factor', 'LParen'] == (Terminal('LParen'),
                                         NonTerminal('Expression'),
                                         Terminal('RParen'))
    assert table['ExpressionPRE', 'Plus'] == (Terminal('Plus'),
                                              NonTerminal('Term'),
                                              NonTerminal('ExpressionPRE'))

    # Epsilon productions.
    assert table['ExpressionPRE', 'End'] == ()
    assert table['TermPRE', 'RParen'] == ()
    assert str(table['TermPRE', 'Plus']) == 'EMPTY'

    # Empty cells are syntax errors for the parser.
    assert table.get_production('Factor', 'Plus') is None


def test_cells_match_source():
    """
    Every non-empty non-reserved cell yields exactly one entry with symbols
    in source order.
    """
    g = Grammar.from_file(EXPRESSION_GRAMMAR)
    table = create_table(g)

    cells = 0
    for row in g.rows:
        for column, value in row.items():
            if column in RESERVED_COLUMNS or not value:
                continue
            cells += 1
            terminal = 'End' if column == '$' else column
            production = table[row['Nonterminal'], terminal]
            expected = [n for n in value.split() if n != EPSILON_MARKER]
            assert [s.name for s in production] == expected
            for symbol in production:
                assert isinstance(symbol, NonTerminal) \
                    == (symbol.name in g.nonterminals)
    assert cells == len(table)


def test_epsilon_marker_never_in_production():
    g = Grammar.from_file(EXPRESSION_GRAMMAR)
    table = create_table(g)
    for production in table.values():
        assert all(s.name != EPSILON_MARKER for s in production)


def test_end_sentinel_renamed():
    g = Grammar.from_file(STATEMENTS_GRAMMAR)
    table = create_table(g)

    assert len(table) == 10
    assert table['Program', 'If'] == (NonTerminal('Statements'),
                                      Terminal('End'))
    assert table['Program', 'End'] == (NonTerminal('Statements'),
                                       Terminal('End'))
    assert table['Statements', 'End'] == ()
    for key, production in table.items():
        assert key.terminal != '$'
        assert all(s.name != '$' for s in production)


def test_epsilon_among_other_symbols():
    rows = [{'Nonterminal': 'A', 'x': "x '' B", 'y': "  ''  "}]
    table = create_table(Grammar(rows, ['A', 'B']))
    assert table['A', 'x'] == (Terminal('x'), NonTerminal('B'))
    assert table['A', 'y'] == ()


def test_blank_cells_skipped():
    rows = [{'Nonterminal': 'A', 'x': 'x', 'y': '   ', 'z': ''}]
    table = create_table(Grammar(rows, ['A']))
    assert list(table) == [TableKey('A', 'x')]


def test_table_is_read_only():
    table = create_table(Grammar.from_file(EXPRESSION_GRAMMAR))
    with pytest.raises(TypeError):
        table['Factor', 'Plus'] = ()
    with pytest.raises(TypeError):
        del table['Factor', 'Id']
    with pytest.raises(TypeError):
        table['Factor', 'Id'][0] = Terminal('x')
    assert not hasattr(table, 'update')


def test_build_is_idempotent():
    first = dumps_table(create_table(Grammar.from_file(EXPRESSION_GRAMMAR)))
    second = dumps_table(create_table(Grammar.from_file(EXPRESSION_GRAMMAR)))
    assert first == second


def test_explicit_nonterminals_override():
    """
    For a bare list of rows non-terminals are taken from row names unless
    given explicitly.
    """
    rows = '[{"Nonterminal": "A", "t": "B x"}, {"Nonterminal": "B", "t": ""}]'
    table = create_table(Grammar.from_string(rows))
    assert table['A', 't'] == (NonTerminal('B'), Terminal('x'))

    table = create_table(Grammar.from_string(rows,
                                             nonterminals=['A', 'B', 'x']))
    assert table['A', 't'] == (NonTerminal('B'), NonTerminal('x'))


def test_strict_grammar_file():
    g = Grammar.from_file(STATEMENTS_GRAMMAR)
    assert g.strict
    assert 'End' in g.terminals
    create_table(g)


def test_debug_prints_table(capsys):
    create_table(Grammar.from_file(EXPRESSION_GRAMMAR), debug=True)
    out = capsys.readouterr().out
    assert 'LL(1) TABLE' in out
    assert 'Factor:' in out
    assert 'LParen => LParen Expression RParen' in out
