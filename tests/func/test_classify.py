import pytest
from lltable import Grammar, NonTerminal, Terminal, classify
from lltable.exceptions import UnknownTerminal


NONTERMINALS = {'Statement', 'IfStatement', 'PrintStatement'}


def test_classify_nonterminal():
    symbol = classify('IfStatement', NONTERMINALS)
    assert isinstance(symbol, NonTerminal)
    assert symbol.name == 'IfStatement'


def test_classify_terminal():
    """
    Anything which is not a declared non-terminal is a terminal.
    """
    for name in ['If', 'print', 'Statements', 'End']:
        symbol = classify(name, NONTERMINALS)
        assert isinstance(symbol, Terminal)
        assert symbol.name == name


def test_classify_is_consistent():
    assert classify('Statement', NONTERMINALS) \
        == classify('Statement', NONTERMINALS)
    assert classify('Statement', NONTERMINALS) != Terminal('Statement')


def test_symbols_are_immutable():
    symbol = NonTerminal('Statement')
    with pytest.raises(AttributeError):
        symbol.name = 'Other'
    with pytest.raises(AttributeError):
        symbol._name = 'Other'
    assert repr(symbol) == 'NonTerminal(Statement)'
    assert str(Terminal('If')) == 'If'


def test_strict_classify_unknown_terminal():
    g = Grammar([], NONTERMINALS, terminals=['If', 'Print'])

    assert g.classify('If') == Terminal('If')
    assert g.classify('Statement') == NonTerminal('Statement')
    # End-of-input is always a known terminal.
    assert g.classify('End') == Terminal('End')

    with pytest.raises(UnknownTerminal) as e:
        g.classify('Whilee')

    assert e.value.name == 'Whilee'
    assert 'Whilee' in str(e.value)


def test_non_strict_grammar_accepts_any_terminal():
    g = Grammar([], NONTERMINALS)
    assert not g.strict
    assert g.classify('Whatever') == Terminal('Whatever')
