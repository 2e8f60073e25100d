import io

import pytest

from mysh.process import OutputStream, Process
from mysh.session import Session
from mysh.shell import Shell


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def make_process():
    def _make(command, options=None, params=None, session=None):
        return Process(
            command,
            options=options,
            params=params,
            stdout=OutputStream(),
            stderr=OutputStream(),
            session=session if session is not None else Session(),
        )
    return _make


@pytest.fixture
def make_shell():
    def _make(text='', config=None):
        return Shell(config, stdin=io.StringIO(text), stdout=OutputStream(), stderr=OutputStream())
    return _make
