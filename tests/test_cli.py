import io
import sys

import pytest

from mysh import __version__
from mysh.cli import build_parser, main


def test_version(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--version'])
    assert exc.value.code == 0
    assert __version__ in capsys.readouterr().out


def test_prompt_too_long_rejected(capsys):
    with pytest.raises(SystemExit) as exc:
        main(['--prompt', 'x' * 65])
    assert exc.value.code == 2
    assert 'prompt may be no longer than 64 characters' in capsys.readouterr().err


def test_defaults():
    args = build_parser().parse_args([])
    assert args.prompt == '$'
    assert args.log_level == 'WARNING'


def test_main_runs_shell(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO('echo from cli\nexit\n'))
    assert main(['--prompt', '>']) == 0
    out = capsys.readouterr().out
    assert out == '> from cli\n> '


def test_main_exits_on_end_of_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, 'stdin', io.StringIO(''))
    assert main([]) == 0
    assert capsys.readouterr().out == '$ \n'


def test_main_passes_undecodable_bytes_through(monkeypatch, capsysbinary):
    stdin = io.TextIOWrapper(io.BytesIO(b'echo caf\xe9\nexit\n'), encoding='utf-8')
    monkeypatch.setattr(sys, 'stdin', stdin)
    assert main([]) == 0
    assert capsysbinary.readouterr().out == b'$ caf\xe9\n$ '
