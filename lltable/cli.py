#!/usr/bin/env python
import logging
import sys
import click
from lltable import Grammar, LLTableError, create_table
from lltable.export import table_rust_export
from lltable.grammar import load_vocabulary
from lltable.tables.persist import save_table
from lltable.termui import prints, a_print, h_print
import lltable.termui as t


@click.group()
@click.option('--debug', default=False, is_flag=True,
              help="Debug/trace output.")
@click.option('--no-colors', default=False, is_flag=True,
              help="Disable output coloring.")
@click.pass_context
def lltable(ctx, debug, no_colors):
    """
    Command line interface for building LL(1) parsing tables.
    """
    ctx.obj = {'debug': debug, 'colors': not no_colors}
    t.colors = not no_colors
    if debug:
        logging.basicConfig(level=logging.DEBUG)


terminals_option = click.option(
    '--terminals', '-t', type=click.Path(exists=True),
    help="Terminal vocabulary (JSON list or one name per line). "
    "Unknown terminals are reported as errors.")


@lltable.command()
@click.argument('grammar_file', type=click.Path())
@terminals_option
@click.pass_context
def check(ctx, grammar_file, terminals):
    table = compile_get_table(grammar_file, terminals, ctx.obj['debug'])
    h_print("Grammar OK.", f"{len(table)} table entries.")


@lltable.command()
@click.argument('grammar_file', type=click.Path())
@click.option('--output', '-o', type=click.Path(),
              help="Output table file. Defaults to <grammar_file>.llt")
@terminals_option
@click.pass_context
def compile(ctx, grammar_file, output, terminals):
    h_print('Compiling...')
    table = compile_get_table(grammar_file, terminals, ctx.obj['debug'])
    output = output or f"{grammar_file}.llt"
    save_table(output, table)
    prints(f"Table with {len(table)} entries written to '{output}'.")


@lltable.command()
@click.argument('grammar_file', type=click.Path())
@click.option('--output', '-o', type=click.Path(),
              help="Output Rust file. Printed to stdout if not given.")
@click.option('--function', default='add_rules',
              help="Name of the generated Rust function.")
@terminals_option
@click.pass_context
def rust(ctx, grammar_file, output, function, terminals):
    table = compile_get_table(grammar_file, terminals, ctx.obj['debug'])
    code = table_rust_export(table, output, function=function)
    if output:
        prints(f"Rust code written to '{output}'.")
    else:
        click.echo(code, nl=False)


def compile_get_table(grammar_file, terminals_file, debug):
    try:
        terminals = load_vocabulary(terminals_file) \
            if terminals_file else None
        g = Grammar.from_file(grammar_file, terminals=terminals)
        table = create_table(g, debug=debug)
    except LLTableError as e:
        a_print("Error in the grammar file.")
        prints(str(e))
        sys.exit(1)
    except OSError as e:
        a_print("Can't read file.")
        prints(str(e))
        sys.exit(1)

    return table


if __name__ == '__main__':
    lltable()
