"""Errors raised by built-in commands.

Each class maps to one ``Status``. The ``@command`` wrapper catches them,
writes the message to the process stderr and turns them into a
``CommandResult``.
"""

from typing import Optional

from .status import Status


class ShellError(Exception):
    """Base class for command failures"""

    status = Status.UNSPECIFIED_ERROR


class UnspecifiedError(ShellError):
    """A system call failed (file not found, permission denied, ...)"""

    status = Status.UNSPECIFIED_ERROR

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path

    @classmethod
    def from_os_error(cls, command: str, path: str, exc: OSError) -> "UnspecifiedError":
        reason = exc.strerror or str(exc)
        return cls(f"{command}: {path}: {reason}", path=path)


class InvalidOptionError(ShellError):
    """An option character outside the command's alphabet"""

    status = Status.INVALID_OPTIONS

    def __init__(self, option: str):
        super().__init__(f"Unrecognized option: {option}")
        self.option = option


class SizeTooLargeError(ShellError):
    status = Status.SIZE_TOO_LARGE


class NoParamsSpecifiedError(ShellError):
    status = Status.NO_PARAMS_SPECIFIED
