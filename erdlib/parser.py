import logging

from erdlib.common import Location, position_context
from erdlib.exceptions import ERDError, SyntaxError, ParserInitError
from erdlib.lexer import (Lexer, WHITESPACE, IDENT, NUMBER, COMMA, OPEN,
                          CLOSE, UNDERSCORE, OPEN_BRACKET, CLOSE_BRACKET, STAR)
from erdlib.model import (ERDExpression, Ref, PrimaryKey, Plain, MinMax,
                          UNBOUNDED)
from erdlib.termui import a_print, h_print, e_print, with_colors


logger = logging.getLogger(__name__)

# Name used in error reports when the end of input is expected.
EOF = 'EOF'


class Parser:
    """
    Predictive recursive-descent parser for one line of ERD notation:

        ERDExpression    := Ident "(" Ref ("," Ref)* ")"
        Ref              := Attribute ( "[" MinMax "]" )?
        Attribute        := "_" Ident "_" | Ident
        MinMax           := CardinalityBound "," CardinalityBound
        CardinalityBound := Number | "*"

    The next token always decides which rule to apply so no backtracking is
    done. All per-input state lives in a `ParseContext` so a parser instance
    can be shared between threads.
    """
    def __init__(self, lexer=None, ws=None, debug=False, debug_colors=False):
        """
        Args:
            lexer(Lexer): Lexer to tokenize the input with. By default a new
                `Lexer` is made using `ws`, `debug` and `debug_colors`.
            ws(str): Whitespace characters skipped between tokens. Defaults
                to `erdlib.lexer.WHITESPACE`. Can't be combined with `lexer`,
                configure the given lexer instead.
            debug(bool): Print a parsing trace.
            debug_colors(bool): Color the trace of this parser. Never affects
                error messages or other instances.
        """
        if lexer is not None and ws is not None:
            raise ParserInitError(
                "`ws` can't be used together with `lexer`. "
                "Pass `ws` to the lexer instead.")
        self.debug = debug
        self.debug_colors = debug_colors
        if lexer is None:
            lexer = Lexer(ws=WHITESPACE if ws is None else ws, debug=debug,
                          debug_colors=debug_colors)
        self.lexer = lexer

    def parse(self, input_str, file_name=None):
        """
        Parses the given input string into an `ERDExpression`.

        Args:
            input_str(str): A single line in `Name(member, ...)` notation.
            file_name(str): Input origin if applicable. Used in error
                reporting.

        Raises:
            LexError: on a character no token starts with.
            SyntaxError: when tokens don't match the grammar or input is left
                after the closing parenthesis.
        """
        if self.debug:
            self._trace(a_print, "*** PARSING STARTED", new_line=True)
            self._trace(h_print, "Input:", f"'{input_str}'", level=1)

        try:
            tokens = self.lexer.tokenize(input_str, file_name)
            context = ParseContext(input_str, tokens, file_name)
            expression = self._erd_expression(context)
            if context.token_ahead is not None:
                raise self._error(context, [EOF])
        except ERDError as e:
            logger.debug("%s of %r failed at position %s.",
                         e.stage.capitalize(), input_str, e.position)
            raise

        if self.debug:
            self._trace(a_print, "SUCCESS!!!")
            self._trace(h_print, "Result:",
                        expression.to_str().replace('\n', '\n\t'), level=1)
        return expression

    def _erd_expression(self, context):
        self._trace_rule(context, 'ERDExpression')
        start = context.position
        name = self._expect(context, IDENT)
        self._expect(context, OPEN)
        members = []
        while True:
            ref = self._ref(context)
            members.append(ref)
            # A member without cardinality could still be followed by one.
            token = self._expect(
                context, COMMA, CLOSE,
                also_expected=() if ref.is_entity_ref() else (OPEN_BRACKET,))
            if token.symbol is CLOSE:
                break

        return ERDExpression(name.value, members,
                             location=context.location(start))

    def _ref(self, context):
        self._trace_rule(context, 'Ref')
        start = context.position
        attribute = self._attribute(context)
        cardinality = None
        if context.next_is(OPEN_BRACKET):
            cardinality = self._min_max(context)
        return Ref(attribute, cardinality, location=context.location(start))

    def _attribute(self, context):
        self._trace_rule(context, 'Attribute')
        start = context.position
        token = self._expect(context, UNDERSCORE, IDENT)
        if token.symbol is UNDERSCORE:
            name = self._expect(context, IDENT)
            self._expect(context, UNDERSCORE)
            return PrimaryKey(name.value, location=context.location(start))
        return Plain(token.value, location=context.location(start))

    def _min_max(self, context):
        self._trace_rule(context, 'MinMax')
        start = context.position
        self._expect(context, OPEN_BRACKET)
        min_bound = self._cardinality_bound(context)
        self._expect(context, COMMA)
        max_bound = self._cardinality_bound(context)
        self._expect(context, CLOSE_BRACKET)
        return MinMax(min_bound, max_bound, location=context.location(start))

    def _cardinality_bound(self, context):
        token = self._expect(context, NUMBER, STAR)
        if token.symbol is STAR:
            return UNBOUNDED
        try:
            return int(token.value)
        except ValueError as e:
            # Interpreter limit on int conversion of very long digit strings.
            raise SyntaxError(
                Location(context.input_str, token.position,
                         token.end_position, file_name=context.file_name),
                [NUMBER.name, STAR.name], token,
                message=f"cardinality bound of {len(token)} digits is too "
                        "large",
                hint="use `*` for an unbounded cardinality") from e

    def _expect(self, context, *terminals, also_expected=()):
        """
        Consumes and returns the next token if it is one of the given
        terminals. `also_expected` terminals are only reported on error.
        """
        token = context.token_ahead
        if token is None or token.symbol not in terminals:
            raise self._error(
                context, [t.name for t in terminals + tuple(also_expected)])
        if self.debug:
            self._trace(h_print, "Matched:", f"{token!r} at {token.position}",
                        level=1)
        context.index += 1
        context.last_token = token
        return token

    def _error(self, context, symbols_expected):
        token = context.token_ahead
        position = token.position if token is not None \
            else len(context.input_str)
        error = SyntaxError(Location(context.input_str, position,
                                     file_name=context.file_name),
                            symbols_expected, token)
        if self.debug:
            self._trace(a_print, "Error:", error.message, level=1)
        return error

    def _trace_rule(self, context, rule):
        if self.debug:
            self._trace(e_print, "Rule:", "{} at '{}'".format(
                rule, position_context(context.input_str, context.position)))

    @with_colors
    def _trace(self, printer, header, content='', level=0, new_line=False):
        printer(header, content, level=level, new_line=new_line)


class ParseContext:
    """
    State of a single parse: the token sequence and the current index.
    """

    __slots__ = ['input_str', 'tokens', 'file_name', 'index', 'last_token']

    def __init__(self, input_str, tokens, file_name=None):
        self.input_str = input_str
        self.tokens = tokens
        self.file_name = file_name
        self.index = 0
        self.last_token = None

    @property
    def token_ahead(self):
        if self.index < len(self.tokens):
            return self.tokens[self.index]
        return None

    @property
    def position(self):
        token = self.token_ahead
        return token.position if token is not None else len(self.input_str)

    def next_is(self, terminal):
        token = self.token_ahead
        return token is not None and token.symbol is terminal

    def location(self, start):
        """
        Returns the location spanning from start to the end of the last
        consumed token.
        """
        end = self.last_token.end_position if self.last_token else start
        return Location(self.input_str, start, end, file_name=self.file_name)


default_parser = Parser()


def parse(input_str, file_name=None):
    """
    Parses the input with the default parser.
    """
    return default_parser.parse(input_str, file_name)
