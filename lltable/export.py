import io


HEADER = '''\
// Generated by lltable. Do not edit.
use std::collections::HashMap;

pub fn {function}() -> {table_type} {{
    let mut parsing_table: {table_type} = HashMap::new();
'''

FOOTER = '''\
    parsing_table
}
'''


def table_rust_export(table, file_name=None, function='add_rules',
                      table_type='ParsingTable', nonterminal_type='NonTerminal',
                      token_type='TokenType', symbol_type='Symbol'):
    """
    Renders the table as a Rust function which fills a `HashMap` keyed by
    (non-terminal, token) with symbol vectors. Entries are emitted in
    canonical order. If `file_name` is given the code is also written there.
    """

    def symbol(s):
        if s.kind == 'nonterminal':
            return f"{symbol_type}::NonTerminal({nonterminal_type}::{s.name})"
        return f"{symbol_type}::Token({token_type}::{s.name})"

    out = io.StringIO()
    out.write(HEADER.format(function=function, table_type=table_type))
    for key, production in table.sorted_items():
        out.write(
            "    parsing_table.insert(({}::{}, {}::{}), vec![{}]);\n".format(
                nonterminal_type, key.nonterminal, token_type, key.terminal,
                ", ".join(symbol(s) for s in production)))
    out.write(FOOTER)
    code = out.getvalue()

    if file_name:
        with io.open(file_name, 'w', encoding="utf-8") as f:
            f.write(code)

    return code
