from erdlib.common import Location, position_context
from erdlib.exceptions import LexError
from erdlib.recognizers import RegExRecognizer, StringRecognizer
from erdlib.termui import a_print, h_print, with_colors


class Terminal:
    """
    A named kind of token together with the recognizer that matches it.

    Attributes:
    name(str): Used in error reports and debug traces. Literal terminals are
        named by their literal value.
    recognizer(callable): Called with `(input_str, pos)`.
    """
    __slots__ = ['name', 'recognizer']

    def __init__(self, name, recognizer):
        self.name = name
        self.recognizer = recognizer

    def __str__(self):
        return self.name

    def __repr__(self):
        return f"<Terminal({self.name})>"


IDENT = Terminal('Ident', RegExRecognizer(r'[a-zA-Z][a-zA-Z0-9]*'))
NUMBER = Terminal('Number', RegExRecognizer(r'[0-9]+'))

# Reserved for entity reference arrows. No grammar rule consumes it yet.
ARROW = Terminal('->', StringRecognizer('->'))
COMMA = Terminal(',', StringRecognizer(','))
OPEN = Terminal('(', StringRecognizer('('))
CLOSE = Terminal(')', StringRecognizer(')'))
UNDERSCORE = Terminal('_', StringRecognizer('_'))
OPEN_BRACKET = Terminal('[', StringRecognizer('['))
CLOSE_BRACKET = Terminal(']', StringRecognizer(']'))
STAR = Terminal('*', StringRecognizer('*'))

# Whitespace skipped between tokens. Vertical tab is not included.
WHITESPACE = ' \t\n\r\f'

# The first terminal that matches at the current position wins.
TERMINALS = (IDENT,
             ARROW, COMMA, OPEN, CLOSE, UNDERSCORE, OPEN_BRACKET,
             CLOSE_BRACKET, STAR,
             NUMBER)


class Token:
    """
    Token or lexeme matched from the input.
    """
    __slots__ = ['symbol', 'value', 'length', 'position']

    def __init__(self, symbol, value, position):
        self.symbol = symbol
        self.value = value
        self.length = len(value)
        self.position = position

    def __repr__(self):
        return "<{}({})>".format(str(self.symbol), str(self.value))

    def __len__(self):
        return self.length

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return (self.symbol, self.value, self.position) == \
            (other.symbol, other.value, other.position)

    def __hash__(self):
        return hash((self.symbol.name, self.value, self.position))

    @property
    def end_position(self):
        return self.position + self.length


class Lexer:
    """
    Splits a line of ERD notation into tokens.

    The lexer keeps no per-input state so a single instance may be shared.
    """
    def __init__(self, terminals=TERMINALS, ws=WHITESPACE, debug=False,
                 debug_colors=False):
        self.terminals = terminals
        self.ws = ws
        self.debug = debug
        self.debug_colors = debug_colors

    def tokenize(self, input_str, file_name=None):
        """
        Returns the list of tokens for the given input. Whitespace is
        skipped.

        Raises:
        LexError: if no terminal matches at some position.
        """
        return list(self.tokens(input_str, file_name))

    def tokens(self, input_str, file_name=None):
        """
        Lazily yields tokens from the given input.
        """
        debug = self.debug
        if debug:
            self._trace(a_print, "*** LEXING STARTED", new_line=True)

        in_len = len(input_str)
        position = self._skipws(input_str, 0)
        while position < in_len:
            token = self._recognize(input_str, position)
            if token is None:
                error = LexError(Location(input_str, position,
                                          file_name=file_name))
                if debug:
                    self._trace(a_print, "Error:", error.message, level=1)
                raise error
            if debug:
                self._trace(h_print, "Token:", f"{token!r} at {position}",
                            level=1)
            yield token
            position = self._skipws(input_str, token.end_position)

        if debug:
            self._trace(a_print, "*** LEXING DONE")

    def _recognize(self, input_str, position):
        for terminal in self.terminals:
            value = terminal.recognizer(input_str, position)
            if value:
                return Token(terminal, value, position)
        return None

    def _skipws(self, input_str, position):
        if not self.ws:
            return position
        old_pos = position
        in_len = len(input_str)
        while position < in_len and input_str[position] in self.ws:
            position += 1
        if self.debug and position > old_pos:
            self._trace(h_print, "Skipping whitespaces:",
                        position_context(input_str, position), level=1)
        return position

    @with_colors
    def _trace(self, printer, header, content='', level=0, new_line=False):
        printer(header, content, level=level, new_line=new_line)


default_lexer = Lexer()


def tokenize(input_str, file_name=None):
    """
    Tokenizes the input with the default lexer.
    """
    return default_lexer.tokenize(input_str, file_name)
