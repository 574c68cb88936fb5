import os
from lltable import Grammar, create_table, table_rust_export


def main(debug=False):
    this_folder = os.path.dirname(__file__)
    g = Grammar.from_file(os.path.join(this_folder, 'grammar.json'))
    table = create_table(g, debug=debug)

    # Expansion of the start symbol for the first token of `a + b`.
    print(table.get_production('Expression', 'Id'))

    print(table_rust_export(table))


if __name__ == "__main__":
    main(debug=True)
