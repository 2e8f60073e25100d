"""Decorator that turns a plain function into a built-in command"""

import functools
import inspect
from typing import Callable, Optional

from .exceptions import InvalidOptionError, ShellError
from .process import Process
from .status import CommandResult, Status

HELP_OPTION = 'h'


def command(options: Optional[str] = '', help_option: bool = True):
    """
    Mark a function as a built-in command

    The decorated function receives a Process and returns a Status. The
    wrapper returns a CommandResult and takes care of what every command
    shares:

    - the option cluster is checked against ``options`` (plus ``h`` when
      ``help_option`` is set) before the function runs
    - ``-h`` prints the function's docstring instead of running it
    - a ShellError raised by the function is written to stderr and becomes
      the result status

    Pass ``options=None`` for commands that ignore options altogether.
    """
    def decorator(func: Callable[[Process], int]):
        if options is None:
            alphabet = None
        else:
            alphabet = options + (HELP_OPTION if help_option else '')

        @functools.wraps(func)
        def wrapper(process: Process) -> CommandResult:
            try:
                if alphabet is not None:
                    check_options(process.options, alphabet)
                    if help_option and process.has_option(HELP_OPTION):
                        write_usage(process, func)
                        return CommandResult(Status.SUCCESS)
                status = func(process)
            except ShellError as e:
                message = str(e)
                process.stderr.write(f"{message}\n")
                return CommandResult(e.status, message)
            return CommandResult(Status(status))

        return wrapper

    return decorator


def check_options(cluster: Optional[str], alphabet: str) -> None:
    """Raise InvalidOptionError for the first character not in ``alphabet``"""
    if cluster is None:
        return
    for char in cluster:
        if char not in alphabet:
            raise InvalidOptionError(char)


def usage_text(func: Callable) -> str:
    doc = inspect.getdoc(func)
    return doc if doc else "No help available"


def write_usage(process: Process, func: Callable) -> None:
    process.stdout.write(f"{usage_text(func)}\n")
