import logging

import pytest  # noqa
from erdlib import Parser, ERDError, LexError, SyntaxError, \
    ParserInitError, parse
from erdlib.lexer import Lexer

invalid_inputs = pytest.mark.parametrize(
    "input_str, position, expected, found", [
        ("R()", 2, ['_', 'Ident'], ')'),
        ("R(_a)", 4, ['_'], ')'),
        ("R(a[1,])", 6, ['Number', '*'], ']'),
        ("R(a) extra", 5, ['EOF'], 'extra'),
        ("(a)", 0, ['Ident'], '('),
        ("R a", 2, ['('], 'a'),
        ("R(a,)", 4, ['_', 'Ident'], ')'),
        ("R(a[1 2])", 6, [','], '2'),
        ("R(a[1,2)", 7, [']'], ')'),
        ("R(a b)", 4, [',', ')', '['], 'b'),
        ("R(a[0,1] b)", 9, [',', ')'], 'b'),
        ("R(__)", 3, ['Ident'], '_'),
        ("R(a->b)", 3, [',', ')', '['], '->'),
        ("R(a)(b)", 4, ['EOF'], '('),
    ])


@invalid_inputs
def test_syntax_errors(input_str, position, expected, found):

    with pytest.raises(SyntaxError) as e:
        parse(input_str)

    assert e.value.stage == 'parsing'
    assert e.value.position == position
    assert e.value.symbols_expected == expected
    assert e.value.token_found.value == found


@pytest.mark.parametrize("input_str", ["", "   ", "R", "R(", "R(a",
                                       "R(a[", "R(a[0,1", "R(_a"])
def test_premature_end(input_str):

    with pytest.raises(SyntaxError) as e:
        parse(input_str)

    assert e.value.token_found is None
    assert e.value.position == len(input_str)
    assert e.value.location.is_eof()
    assert 'unexpected end of input' in str(e.value)


def test_lex_error_is_reported_before_parsing():

    with pytest.raises(LexError) as e:
        parse("R(a%)")

    assert e.value.stage == 'lexing'
    assert e.value.position == 3


def test_errors_share_base_class():
    for input_str in ["R()", "R(a%)"]:
        with pytest.raises(ERDError):
            parse(input_str)


def test_error_message():

    with pytest.raises(SyntaxError) as e:
        parse("R(a[1,])")

    message = str(e.value)
    assert message.startswith('1:6:"R(a[1, **> ])"')
    assert 'unexpected token <]' in message
    assert 'expected: Number or *' in message
    assert '    1 | R(a[1,])' in message
    assert '      |       ^' in message


def test_error_carries_file_name():

    with pytest.raises(SyntaxError) as e:
        Parser().parse("R()", file_name='model.erd')

    assert e.value.location.file_name == 'model.erd'
    assert str(e.value).startswith('model.erd:1:2:')


def test_syntax_error_is_not_the_builtin():
    import builtins
    assert SyntaxError is not builtins.SyntaxError
    assert not issubclass(SyntaxError, builtins.SyntaxError)


def test_custom_lexer():

    parser = Parser(lexer=Lexer(ws=' '))

    assert parser.parse("R(a, b)").name == 'R'
    with pytest.raises(LexError):
        parser.parse("R(a,\tb)")


def test_debug_trace_on_error(capsys):

    with pytest.raises(SyntaxError):
        Parser(debug=True).parse("R(a) extra")

    out = capsys.readouterr().out
    assert "Error:" in out


def test_oversized_cardinality_bound():

    digits = "9" * 5000
    input_str = "R(a[" + digits + ",*])"

    with pytest.raises(SyntaxError) as e:
        parse(input_str)

    assert e.value.position == 4
    assert e.value.location.end_position == 4 + len(digits)
    assert e.value.token_found.value == digits
    assert 'too large' in e.value.message
    assert 'hint:' in str(e.value)


def test_long_but_convertible_bound():
    result = parse("R(a[0," + "9" * 100 + "])")
    assert result.members[0].cardinality.max == int("9" * 100)


def test_colored_trace_does_not_leak_into_errors(capsys):

    Parser(debug_colors=True)
    with pytest.raises(SyntaxError) as e:
        parse("R()")
    assert '\x1b[' not in str(e.value)

    with pytest.raises(SyntaxError) as e:
        Parser(debug=True, debug_colors=True).parse("R()")
    assert '\x1b[' not in str(e.value)

    with pytest.raises(LexError) as e:
        parse("R(a%)")
    assert '\x1b[' not in str(e.value)

    capsys.readouterr()
    with pytest.raises(SyntaxError):
        Parser(debug=True).parse("R()")
    assert '\x1b[' not in capsys.readouterr().out


def test_failures_are_logged(caplog):

    caplog.set_level(logging.DEBUG, logger='erdlib.parser')

    with pytest.raises(SyntaxError):
        parse("R()")
    with pytest.raises(LexError):
        parse("R(a%)")

    records = [r for r in caplog.records if r.name == 'erdlib.parser']
    assert len(records) == 2
    assert all(r.levelno == logging.DEBUG for r in records)
    assert records[0].getMessage() == \
        "Parsing of 'R()' failed at position 2."
    assert records[1].getMessage() == \
        "Lexing of 'R(a%)' failed at position 3."


def test_ws_and_lexer_are_exclusive():
    with pytest.raises(ParserInitError):
        Parser(lexer=Lexer(), ws=' ')
