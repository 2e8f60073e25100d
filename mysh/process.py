"""Execution context handed to every built-in command"""

import io
import sys
from typing import BinaryIO, Optional, Union

from .session import Session


class OutputStream:
    """
    Byte-oriented output stream

    Accepts both str (encoded as UTF-8) and bytes so commands can print text
    and pass file contents through untouched. Undecodable input bytes, kept
    as surrogates by the reader, are written back out as the original bytes.
    """

    def __init__(self, buffer: Optional[BinaryIO] = None):
        self.buffer = buffer if buffer is not None else io.BytesIO()

    @classmethod
    def from_text_stream(cls, stream) -> "OutputStream":
        """Wrap sys.stdout / sys.stderr style text streams"""
        return cls(getattr(stream, 'buffer', stream))

    def write(self, data: Union[str, bytes]) -> int:
        if isinstance(data, str):
            data = data.encode('utf-8', 'surrogateescape')
        written = self.buffer.write(data)
        return len(data) if written is None else written

    def flush(self) -> None:
        self.buffer.flush()

    def get_value(self) -> bytes:
        """Everything written so far (in-memory buffers only)"""
        if isinstance(self.buffer, io.BytesIO):
            return self.buffer.getvalue()
        return b''


class Process:
    """
    One invocation of a built-in command

    ``options`` is the option cluster without its leading ``-`` and ``params``
    the parameter string; both are None when the command line had none.
    """

    def __init__(
        self,
        command: str,
        options: Optional[str] = None,
        params: Optional[str] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[OutputStream] = None,
        session: Optional[Session] = None,
    ):
        self.command = command
        self.options = options
        self.params = params
        self.stdout = stdout if stdout is not None else OutputStream.from_text_stream(sys.stdout)
        self.stderr = stderr if stderr is not None else OutputStream.from_text_stream(sys.stderr)
        self.session = session if session is not None else Session()

    def has_option(self, flag: str) -> bool:
        return self.options is not None and flag in self.options

    def __repr__(self):
        return f"Process(command={self.command!r}, options={self.options!r}, params={self.params!r})"
