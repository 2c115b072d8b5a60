"""
Token recognizers.

Recognizers are callables with signature `(input_str, pos)` returning the
matched string or None. The lexer tries them in order at each position.
"""
import re
from erdlib.exceptions import GrammarError


class Recognizer:
    """
    Base class for a recognizer.
    """
    def __init__(self, name):
        self.name = name

    def __call__(self, in_str, pos):
        raise NotImplementedError

    def __repr__(self):
        return f"<{type(self).__name__}({self.name})>"


class StringRecognizer(Recognizer):
    """
    Recognizes the given literal string.
    """
    def __init__(self, value):
        super().__init__(value)
        self.value = value

    def __call__(self, in_str, pos):
        if in_str.startswith(self.value, pos):
            return self.value


def esc_control_characters(regex):
    """
    Escape control characters in regular expressions.
    """
    unescapes = [('\a', r'\a'), ('\b', r'\b'), ('\f', r'\f'), ('\n', r'\n'),
                 ('\r', r'\r'), ('\t', r'\t'), ('\v', r'\v')]
    for val, text in unescapes:
        regex = regex.replace(val, text)
    return regex


class RegExRecognizer(Recognizer):
    """
    Recognizes the given regular expression anchored at the position.
    Empty matches are never reported.
    """
    def __init__(self, regex, name=None, re_flags=0):
        super().__init__(regex if name is None else name)
        self._regex = regex
        try:
            self.regex = re.compile(regex, re_flags)
        except re.error as ex:
            message = 'Regex compile error in /{}/ (report: "{}")'
            raise GrammarError(
                message.format(esc_control_characters(regex), ex)) from ex

    def __call__(self, in_str, pos):
        m = self.regex.match(in_str, pos)
        if m and m.group():
            return m.group()
