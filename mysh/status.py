"""Command status codes and the result type handlers hand back to the shell"""

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class Status(IntEnum):
    """Exit status of a built-in command"""

    SUCCESS = 0
    UNSPECIFIED_ERROR = -1
    INVALID_OPTIONS = 1
    SIZE_TOO_LARGE = 2
    NO_PARAMS_SPECIFIED = 3


@dataclass(frozen=True)
class CommandResult:
    """Outcome of one command invocation.

    ``detail`` holds the diagnostic the command wrote to stderr, ``None`` on
    success.
    """

    status: Status
    detail: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == Status.SUCCESS
