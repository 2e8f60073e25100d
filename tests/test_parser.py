import pytest

from mysh.parser import CommandLine, parse_line, split_params


@pytest.mark.parametrize('line,expected', [
    ('echo hello', ('echo', None, 'hello')),
    ('echo', ('echo', None, None)),
    ('echo -n hello world', ('echo', 'n', 'hello world')),
    ('echo -n', ('echo', 'n', None)),
    ('echo -nx  a  b', ('echo', 'nx', 'a  b')),
    ('  echo   hi  ', ('echo', None, 'hi  ')),
    ('cat\tnotes.txt', ('cat', None, 'notes.txt')),
    ('PS1 my prompt >', ('PS1', None, 'my prompt >')),
])
def test_parse_line(line, expected):
    assert parse_line(line) == CommandLine(*expected)


@pytest.mark.parametrize('line', ['', '   ', '\t'])
def test_blank_line_is_none(line):
    assert parse_line(line) is None


def test_dash_inside_parameter_is_literal():
    parsed = parse_line('cp my-file other-file')
    assert parsed.options is None
    assert parsed.params == 'my-file other-file'


def test_dash_after_first_parameter_is_literal():
    parsed = parse_line('echo hello -n')
    assert parsed.options is None
    assert parsed.params == 'hello -n'


def test_double_dash_ends_options():
    parsed = parse_line('rm -- -weird-name')
    assert parsed.options is None
    assert parsed.params == '-weird-name'


def test_double_dash_alone():
    assert parse_line('rm --') == CommandLine('rm', None, None)


def test_lone_dash_is_parameter_text():
    parsed = parse_line('echo - hi')
    assert parsed.options is None
    assert parsed.params == '- hi'


def test_only_first_option_token_is_an_option():
    parsed = parse_line('echo -n -x')
    assert parsed.options == 'n'
    assert parsed.params == '-x'


def test_split_params():
    assert split_params('a b c', 2) == ('a', 'b')
    assert split_params('a', 2) == ('a', None)
    assert split_params(None, 1) == (None,)
    assert split_params('  spaced   out ', 2) == ('spaced', 'out')
