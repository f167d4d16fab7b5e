## makeopts — Copyright © 2025, Alex J. Champandard.  Licensed under AGPLv3; see LICENSE! ⚘

import pytest

from makeopts.options import extract
from makeopts.types import Option, Extraction
from makeopts.errors import InvalidInputError, UnknownOptionError, MissingOptionArgumentError


def test_none_arguments_are_rejected():
    with pytest.raises(InvalidInputError, match=r"Invalid argv"):
        extract(None, 'abc')
    with pytest.raises(InvalidInputError, match=r"Invalid optstring"):
        extract(['-ab', 'c'], None)


def test_string_instead_of_list_is_rejected():
    with pytest.raises(InvalidInputError):
        extract('-ab', 'ab')


def test_non_string_argument_is_rejected():
    with pytest.raises(InvalidInputError):
        extract(['-a', 3], 'a')


def test_empty_arguments():
    assert extract([], '') == Extraction(options=[], operands=[])


def test_single_option():
    assert extract(['-a'], 'a') == Extraction([Option('a')], [])


def test_bundled_options_keep_their_order():
    result = extract(['-abc'], 'cba')
    assert result.options == [Option('a'), Option('b'), Option('c')]
    assert all(o.optarg is None for o in result.options)


def test_separate_option_arguments():
    assert extract(['-a', '-b'], 'ab').options == [Option('a'), Option('b')]


def test_repeated_options_are_all_returned():
    assert extract(['-aa', '-a'], 'a').options == [Option('a')] * 3


def test_unknown_option_is_named():
    with pytest.raises(UnknownOptionError, match=r"Unknown option: -b") as info:
        extract(['-ab'], 'a')
    assert info.value.opt == 'b'
    assert info.value.token == '-ab'


def test_colon_is_an_option_when_the_optstring_holds_one():
    assert extract(['-:'], 'a:') == Extraction([Option(':')], [])
    assert extract(['-a:', 'x'], 'a::') == Extraction([Option('a', ':')], ['x'])
    with pytest.raises(UnknownOptionError):
        extract(['-:'], 'a')


@pytest.mark.parametrize('optstring, expected', [
    (':a', Extraction([Option('a')], ['x'])),
    ('::a', Extraction([Option('a')], ['x'])),
    ('a::', Extraction([Option('a', 'x')], [])),
])
def test_stray_colons_in_optstring_are_accepted(optstring, expected):
    assert extract(['-a', 'x'], optstring) == expected


def test_leading_colon_optstring():
    assert extract(['-a', 'x'], ':a') == Extraction([Option('a')], ['x'])


def test_attached_optarg():
    assert extract(['-afoo'], 'a:') == Extraction([Option('a', 'foo')], [])


def test_freestanding_optarg():
    assert extract(['-a', 'foo'], 'a:') == Extraction([Option('a', 'foo')], [])


def test_optarg_after_bundled_flags():
    assert extract(['-abFoo'], 'ab:').options == [Option('a'), Option('b', 'Foo')]
    assert extract(['-ab', 'Foo'], 'ab:').options == [Option('a'), Option('b', 'Foo')]


def test_optarg_ends_the_cluster():
    # `b` belongs to the option-argument, it is not parsed as an option.
    assert extract(['-ab'], 'a:').options == [Option('a', 'b')]


def test_repeated_optargs():
    assert extract(['-afoo', '-abar'], 'a:').options == [Option('a', 'foo'), Option('a', 'bar')]


def test_missing_optarg():
    with pytest.raises(MissingOptionArgumentError, match=r"Missing argument for option -a") as info:
        extract(['-a'], 'a:')
    assert info.value.opt == 'a'


def test_optarg_may_look_like_an_option():
    assert extract(['-a', '-b'], 'a:b') == Extraction([Option('a', '-b')], [])
    assert extract(['-a', '--', 'x'], 'a:') == Extraction([Option('a', '--')], ['x'])


def test_empty_string_optarg_is_not_absent():
    result = extract(['-a', ''], 'a:')
    assert result.options == [Option('a', '')]
    assert result.options[0].optarg is not None


def test_operands_without_options():
    assert extract(['foo', 'bar'], '') == Extraction([], ['foo', 'bar'])


def test_operands_after_options():
    assert extract(['-a', 'foo', 'bar'], 'a') == Extraction([Option('a')], ['foo', 'bar'])


def test_operands_after_option_with_optarg():
    assert extract(['-a', 'foo', 'bar'], 'a:') == Extraction([Option('a', 'foo')], ['bar'])


def test_options_after_first_operand_are_operands():
    assert extract(['foo', '-a'], 'a') == Extraction([], ['foo', '-a'])


def test_dash_is_an_operand():
    assert extract(['-', 'foo'], '') == Extraction([], ['-', 'foo'])
    assert extract(['-a', '-', '-a'], 'a') == Extraction([Option('a')], ['-', '-a'])


def test_empty_string_is_an_operand():
    assert extract(['', '-a'], 'a') == Extraction([], ['', '-a'])


def test_double_dash_stops_options():
    assert extract(['-a', '--', '-b'], 'ab') == Extraction([Option('a')], ['-b'])


def test_initial_double_dash():
    assert extract(['--', '-a'], 'a') == Extraction([], ['-a'])


def test_sole_double_dash():
    assert extract(['--'], '') == Extraction([], [])


def test_repeated_double_dash_is_an_operand():
    assert extract(['--', '--'], '') == Extraction([], ['--'])
    assert extract(['x', '--', 'y'], '') == Extraction([], ['x', '--', 'y'])


def test_operands_are_stable_under_reextraction():
    operands = extract(['-a', 'foo', '-b', '--'], 'ab').operands
    assert operands == ['foo', '-b', '--']
    assert extract(operands, '') == Extraction([], operands)


def test_plain_operands_are_returned_unchanged():
    argv = ['foo', 'bar=1', '-', 'baz']
    assert extract(argv, '').operands == argv


def test_input_is_not_mutated():
    argv = ['-a', 'foo', '--', 'bar']
    extract(argv, 'a:')
    assert argv == ['-a', 'foo', '--', 'bar']


def test_accepts_any_sequence():
    assert extract(('-a', 'x'), 'a') == Extraction([Option('a')], ['x'])


def test_options_are_immutable():
    option = extract(['-a'], 'a').options[0]
    with pytest.raises(AttributeError):
        option.opt = 'b'
