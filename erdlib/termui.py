"""
Terminal output used for lexer/parser debug traces.

Nothing here is called unless `debug` is requested on the `Lexer` or the
`Parser`. Error messages never go through this module.
"""
from functools import wraps

import click

# Switched on only while a `with_colors` decorated trace method runs.
colors = False

S_ATTENTION = {'fg': 'red', 'bold': True}
S_HEADER = {'fg': 'green'}
S_EMPH = {'fg': 'yellow'}

INDENT = '    '


def with_colors(f):
    """
    Decorator for trace methods. Output is colored according to the
    `debug_colors` of the instance doing the trace. The previous setting is
    restored afterwards.
    """
    @wraps(f)
    def wc_f(self, *args, **kwargs):
        global colors
        old_colors = colors
        colors = self.debug_colors
        try:
            return f(self, *args, **kwargs)
        finally:
            colors = old_colors
    return wc_f


def prints(message):
    click.echo(message, color=colors)


def style_message(message, style):
    if colors:
        return click.style(message, **style)
    return message


def trace_line(header, content='', level=0, header_style=S_HEADER,
               new_line=False):
    """
    Formats one trace line: indented, styled header followed by content.
    """
    line = INDENT * level + style_message(str(header), header_style)
    if content != '':
        line += ' ' + str(content)
    return ('\n' if new_line else '') + line


def h_print(header, content='', level=0, new_line=False):
    prints(trace_line(header, content, level, S_HEADER, new_line))


def a_print(header, content='', level=0, new_line=False):
    prints(trace_line(header, content, level, S_ATTENTION, new_line))


def e_print(header, content='', level=0, new_line=False):
    prints(trace_line(header, content, level, S_EMPH, new_line))
