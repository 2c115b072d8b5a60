import pytest  # noqa
from erdlib import GrammarError
from erdlib.recognizers import StringRecognizer, RegExRecognizer


def test_string_recognizer():
    r = StringRecognizer('->')
    assert r('a->b', 1) == '->'
    assert r('a->b', 0) is None
    assert r('-', 0) is None


def test_regex_recognizer_is_anchored():
    r = RegExRecognizer(r'[0-9]+', name='Number')
    assert r.name == 'Number'
    assert r('ab12', 2) == '12'
    assert r('ab12', 0) is None


def test_regex_recognizer_never_matches_empty():
    r = RegExRecognizer(r'[0-9]*')
    assert r('abc', 0) is None


def test_invalid_regex():
    with pytest.raises(GrammarError) as e:
        RegExRecognizer(r'[0-9')
    assert 'Regex compile error' in str(e.value)


def test_grammar_error_stage():
    with pytest.raises(GrammarError) as e:
        RegExRecognizer(r'(')
    assert e.value.stage == 'setup'
