# flake8: NOQA
from erdlib.parser import Parser, ParseContext, parse
from erdlib.lexer import Lexer, Token, Terminal, TERMINALS, WHITESPACE, \
    tokenize
from erdlib.model import ERDExpression, Ref, Attribute, PrimaryKey, Plain, \
    MinMax, UNBOUNDED
from erdlib.common import Location, pos_to_line_col
from erdlib.exceptions import ERDError, LexError, SyntaxError, GrammarError, \
    ParserInitError

from .version import __version__
