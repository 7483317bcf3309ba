## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from argsift.types import OptionKind, OptionSpec, Classification, looks_like_option
from argsift.errors import SiftMissingValue, SiftIntegerError


def test_kind_from_word():
    assert OptionKind.from_word('string') is OptionKind.STRING
    assert OptionKind.from_word('integer') is OptionKind.INTEGER
    for word in ('float', 'Integer'):
        with pytest.raises(ValueError):
            OptionKind.from_word(word)


def test_boolean_look_ahead_advances_by_one_or_two():
    assert OptionKind.BOOLEAN.look_ahead('--f', '--f', None) == ('true', 1)
    assert OptionKind.BOOLEAN.look_ahead('--f', '--f', 'other') == ('true', 1)
    assert OptionKind.BOOLEAN.look_ahead('--f', '--f', 'false') == ('false', 2)


def test_value_kinds_always_consume_the_next_token():
    assert OptionKind.STRING.look_ahead('--p', '-p', 'x') == ('x', 2)
    assert OptionKind.INTEGER.look_ahead('--n', '-n', '10') == ('10', 2)


def test_coerce_keeps_raw_integer_text():
    assert OptionKind.INTEGER.coerce('--n', '-n', '007') == '007'


def test_coerce_errors():
    with pytest.raises(SiftMissingValue):
        OptionKind.STRING.coerce('--p', '-p', None)
    with pytest.raises(SiftMissingValue):
        OptionKind.STRING.coerce('--p', '-p', '-')
    with pytest.raises(SiftIntegerError):
        OptionKind.INTEGER.coerce('--n', '-n', 'ten')


def test_spec_matching_and_display():
    spec = OptionSpec('--path', OptionKind.STRING, frozenset({'-p', '--PATH'}))
    assert spec.matches('--path') and spec.matches('-p') and spec.matches('--PATH')
    assert not spec.matches('-P')
    assert str(spec) == 'string --PATH -p'


def test_option_detection():
    assert looks_like_option('-x')
    assert looks_like_option('--long')
    assert not looks_like_option('value')


def test_classification_lookup():
    result = Classification(options={'--a': '1'}, leftover=[])
    assert result['--a'] == '1'
    assert result.get('--b', 'none') == 'none'
