from typing import Optional, Tuple

from erdlib.common import Location


class ERDError(Exception):
    """
    Base class for all errors raised while lexing/parsing ERD notation.

    Attributes:
    location(Location): Where in the input the error is found.
    message(str): Short description of the problem.
    context_message(str): Message rendered under the input excerpt.
    error_type(str): Human readable kind of the error.
    hint(str): Optional hint for the user.
    full_message(str): All of the above combined. Never contains terminal
        color codes.
    """
    stage = None

    def __init__(self, location: Location,
                 message: str,
                 context_message: Optional[str] = None,
                 error_type: str = "error",
                 hint: Optional[str] = None):

        self.location = location
        self.hint = hint
        self.message = message
        self.context_message = context_message
        self.error_type = error_type

        context = get_context(location, context_message) \
            if context_message else None
        hint = f"  hint: {hint}" if hint else None

        self.full_message = "\n".join(
            filter(None, [f"{error_type}: {message}", context, hint]))
        super().__init__(self.full_message)

    @property
    def position(self):
        return self.location.start_position

    def __str__(self):
        return f"{self.location}: {self.full_message}"


def get_line_col_at_position(text: str, pos: int) -> Tuple[Optional[int],
                                                           Optional[int],
                                                           Optional[str]]:
    """
    Returns zero-based line index, column and the content of the line for the
    given position. Position equal to the input length denotes end of input.
    """
    lines = text.splitlines(keepends=True)

    if pos > len(text):
        return None, None, None

    if not lines:
        return 0, 0, ''

    if pos == len(text):
        return len(lines) - 1, len(lines[-1].rstrip('\n\r')), \
            lines[-1].rstrip('\n\r')

    current_pos = 0
    for lineidx, line in enumerate(lines):
        if current_pos <= pos < current_pos + len(line):
            return lineidx, pos - current_pos, line.rstrip('\n\r')
        current_pos += len(line)
    return None, None, None


def get_context(location: Location, message: str) -> Optional[str]:
    """
    Renders the offending input line with the message pointed at the
    location column.
    """
    if location.input_str is None or location.start_position is None:
        return None
    lineidx, colidx, line = get_line_col_at_position(location.input_str,
                                                     location.start_position)
    if lineidx is None:
        return None
    marker = " " * colidx + "^"
    return f"{lineidx+1:>5} | {line}\n" \
        + f"      | {marker} {message}"


class LexError(ERDError):
    """
    Raised when no token can be recognized at the current input position.
    """
    stage = "lexing"

    def __init__(self, location: Location, hint=None):
        self.character = location.input_str[location.start_position]
        super().__init__(location,
                         f"unrecognized character {self.character!r}",
                         context_message="expected: " +
                         "identifier, number or one of -> , ( ) _ [ ] *",
                         error_type="lexical error", hint=hint)


class SyntaxError(ERDError):
    """
    Raised when the token sequence does not match the ERD grammar.
    """
    stage = "parsing"

    def __init__(self, location: Location, symbols_expected,
                 token_found=None, hint=None, message=None):
        """
        Args:
        location(Location): The :class:`Location` of the error.
        symbols_expected(list): Names of terminals expected at the location.
        token_found(Token): The token found instead. None at the end of input.
        message(str): Overrides the default "unexpected token" message.
        """
        self.symbols_expected = list(symbols_expected)
        self.token_found = token_found
        if message is None:
            if token_found is not None:
                message = f'unexpected token {token_found}'
            else:
                message = 'unexpected end of input'
        super().__init__(location, message,
                         context_message='expected: ' +
                         expected_symbols_str(self.symbols_expected),
                         error_type="syntax error", hint=hint)


class ParserInitError(Exception):
    pass


class GrammarError(ERDError):
    """
    Raised when a terminal recognizer can't be constructed.
    """
    stage = "setup"

    def __init__(self, message):
        super().__init__(Location('', 0), message,
                         error_type="grammar error")

    def __str__(self):
        return self.full_message


def expected_symbols_str(symbols):
    return " or ".join(symbols)
