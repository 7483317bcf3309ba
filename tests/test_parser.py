## argsift — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from argsift import parser
from argsift.types import OptionKind, OptionSpec
from argsift.errors import SiftSetupError, SiftSpecError


def test_declaration_with_kind_and_aliases():
    spec = parser.parse_declaration('--count', 'integer -c --COUNT')
    assert spec.canonical == '--count'
    assert spec.kind is OptionKind.INTEGER
    assert spec.aliases == frozenset({'-c', '--COUNT'})


def test_declaration_without_aliases():
    spec = parser.parse_declaration('--debug', 'boolean')
    assert spec.kind is OptionKind.BOOLEAN
    assert spec.aliases == frozenset()
    # The canonical name always matches, even when not listed as an alias.
    assert spec.matches('--debug')


def test_declaration_tolerates_extra_whitespace():
    spec = parser.parse_declaration('--path', '  string   -p\t--PATH ')
    assert spec.kind is OptionKind.STRING
    assert spec.aliases == frozenset({'-p', '--PATH'})


def test_kind_word_may_reappear_as_alias():
    spec = parser.parse_declaration('--mode', 'string boolean')
    assert spec.kind is OptionKind.STRING
    assert spec.aliases == frozenset({'boolean'})


def test_unknown_kind_is_rejected():
    with pytest.raises(SiftSpecError, match=r"unknown kind `float`") as info:
        parser.parse_declaration('--ratio', 'float -r')
    assert info.value.sift_option == '--ratio'
    assert info.value.exit_code == 1


def test_kind_prefix_is_not_a_kind():
    with pytest.raises(SiftSpecError):
        parser.parse_declaration('--name', 'strings -n')


def test_empty_declaration_is_rejected():
    with pytest.raises(SiftSpecError, match=r"--name"):
        parser.parse_declaration('--name', '')


def test_non_string_declaration_is_rejected():
    with pytest.raises(SiftSpecError, match=r"must be a string"):
        parser.parse_declaration('--name', 42)


def test_table_mixes_strings_and_specs():
    ready = OptionSpec('--flag', OptionKind.BOOLEAN, frozenset({'-f'}))
    table = parser.parse_table({'--path': 'string -p', '--flag': ready})
    assert list(table) == ['--path', '--flag']
    assert table['--flag'] is ready
    assert table['--path'].matches('-p')


def test_table_rejects_mismatched_canonical_name():
    with pytest.raises(SiftSpecError):
        parser.parse_table({'--other': OptionSpec('--flag', OptionKind.BOOLEAN)})


@pytest.mark.parametrize('specs', [None, {}])
def test_table_must_not_be_empty(specs):
    with pytest.raises(SiftSetupError, match=r"missing or empty"):
        parser.parse_table(specs)


def test_kind_words_are_lowercase_only():
    with pytest.raises(SiftSpecError, match=r"unknown kind `Integer`"):
        parser.parse_declaration('--count', 'Integer -c')


def test_error_reports_column_of_bad_kind():
    with pytest.raises(SiftSpecError, match=r"at column 3") as info:
        parser.parse_declaration('--ratio', '  float -r')
    assert info.value.column == 3
    assert info.value.sift_token == 'float'
