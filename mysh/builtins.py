"""Built-in shell commands"""

import logging
import os
import shutil

from .command_decorators import command
from .exceptions import NoParamsSpecifiedError, UnspecifiedError
from .parser import split_params
from .process import OutputStream, Process
from .status import Status

logger = logging.getLogger("mysh.builtins")

CHUNK_SIZE = 8192
DIRECTORY_MODE = 0o775


@command(options='n')
def cmd_echo(process: Process) -> int:
    """
    Write text to standard output

    Usage: echo [-n] [text]

    Options:
        -n          Do not print the trailing newline
        -h          Show this help

    Examples:
        echo hello world
        echo -n no newline
    """
    text = process.params if process.params is not None else ''
    if not process.has_option('n'):
        text += '\n'
    process.stdout.write(text)
    return Status.SUCCESS


@command()
def cmd_ps1(process: Process) -> int:
    """
    Set the prompt text

    Usage: PS1 text

    The whole rest of the line becomes the prompt. Prompts longer than the
    limit (64 characters by default) are rejected and the old prompt stays.
    """
    if process.params is None:
        raise NoParamsSpecifiedError("No prompt given")

    process.session.set_prompt(process.params)
    return Status.SUCCESS


@command()
def cmd_cat(process: Process) -> int:
    """
    Print a file

    Usage: cat file

    Writes the file contents followed by a newline.
    """
    (path,) = split_params(process.params, 1)
    if path is None:
        raise NoParamsSpecifiedError("No input file specified")

    try:
        with open(path, 'rb') as f:
            while True:
                chunk = f.read(CHUNK_SIZE)
                if not chunk:
                    break
                process.stdout.write(chunk)
    except OSError as e:
        raise UnspecifiedError.from_os_error(process.command, path, e) from e

    process.stdout.write(b'\n')
    return Status.SUCCESS


@command()
def cmd_cp(process: Process) -> int:
    """
    Copy a file

    Usage: cp source dest

    The destination is created, or truncated if it already exists.
    """
    source, dest = split_params(process.params, 2)
    if source is None:
        raise NoParamsSpecifiedError("No input file specified")
    if dest is None:
        raise NoParamsSpecifiedError("No output file specified")

    # Open the source first so a bad source never truncates the destination
    try:
        src = open(source, 'rb')
    except OSError as e:
        raise UnspecifiedError.from_os_error(process.command, source, e) from e

    with src:
        try:
            same_file = os.path.exists(dest) and os.path.samefile(source, dest)
        except OSError as e:
            raise UnspecifiedError.from_os_error(process.command, dest, e) from e
        if same_file:
            raise UnspecifiedError(
                f"{process.command}: {source}: {dest} is the same file", path=dest
            )
        try:
            dst = open(dest, 'wb')
        except OSError as e:
            raise UnspecifiedError.from_os_error(process.command, dest, e) from e

        with dst:
            try:
                shutil.copyfileobj(src, dst, CHUNK_SIZE)
            except OSError as e:
                raise UnspecifiedError.from_os_error(process.command, dest, e) from e

    logger.debug("copied %s to %s", source, dest)
    return Status.SUCCESS


@command()
def cmd_rm(process: Process) -> int:
    """
    Remove a file or an empty directory

    Usage: rm path
           rmdir path
    """
    (path,) = split_params(process.params, 1)
    if path is None:
        raise NoParamsSpecifiedError("No file specified")

    try:
        if os.path.isdir(path) and not os.path.islink(path):
            os.rmdir(path)
        else:
            os.remove(path)
    except OSError as e:
        raise UnspecifiedError.from_os_error(process.command, path, e) from e

    logger.debug("removed %s", path)
    return Status.SUCCESS


@command()
def cmd_mkdir(process: Process) -> int:
    """
    Create a directory

    Usage: mkdir path

    The directory is created with mode 0775 (minus the umask).
    """
    (path,) = split_params(process.params, 1)
    if path is None:
        raise NoParamsSpecifiedError("No directory specified")

    try:
        os.mkdir(path, DIRECTORY_MODE)
    except OSError as e:
        raise UnspecifiedError.from_os_error(process.command, path, e) from e

    logger.debug("created directory %s", path)
    return Status.SUCCESS


@command(options=None)
def cmd_exit(process: Process) -> int:
    """
    Leave the shell

    Usage: exit
    """
    process.session.terminate()
    return Status.SUCCESS


# Registry of built-in commands
BUILTINS = {
    'echo': cmd_echo,
    'PS1': cmd_ps1,
    'cat': cmd_cat,
    'cp': cmd_cp,
    'rm': cmd_rm,
    'mkdir': cmd_mkdir,
    'rmdir': cmd_rm,  # rmdir shares the rm handler
    'exit': cmd_exit,
}

# Commands shown by the unknown-command listing
LISTED_COMMANDS = ['echo', 'PS1', 'cat', 'cp', 'rm', 'mkdir', 'rmdir']


def get_builtin(command: str):
    """Get a built-in command executor"""
    return BUILTINS.get(command)


def write_command_listing(stream: OutputStream) -> None:
    stream.write("Available commands are:\n")
    for name in LISTED_COMMANDS:
        stream.write(f"\t{name}\n")
    stream.write("Use -h to see more info about a command.\n")
