import click

colors = False

S_ATTENTION = {'fg': 'red', 'bold': True}
S_HEADER = {'fg': 'green'}
S_EMPH = {'fg': 'yellow'}


def prints(message, s={}):
    click.echo(style_message(message, s) if s else message, color=colors)


def style_message(message, style):
    if colors:
        return click.style(message, **style)
    else:
        return message


def s_header(message):
    return style_message(message, S_HEADER)


def s_attention(message):
    return style_message(message, S_ATTENTION)


def s_emph(message):
    return style_message(message, S_EMPH)


def style(header, content, new_line=False, header_style=S_HEADER):
    new_line = "\n" if new_line else ""
    return new_line + style_message(str(header), header_style) \
        + ((" " + str(content)) if content else "")


def h_print(header, content="", new_line=False):
    prints(style(header, content, new_line, S_HEADER))


def a_print(header, content="", new_line=False):
    prints(style(header, content, new_line, S_ATTENTION))
