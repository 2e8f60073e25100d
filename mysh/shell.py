"""
The interactive loop

Shell reads one line at a time, tokenizes it, dispatches it to a built-in
command and reports failures. A failing command never ends the session;
only ``exit`` or the end of input does.
"""

import logging
import sys
from typing import Optional, TextIO

from .builtins import get_builtin, write_command_listing
from .config import Config
from .parser import parse_line
from .process import OutputStream, Process
from .session import Session
from .status import CommandResult, Status

logger = logging.getLogger("mysh")


class Shell:
    """Command interpreter bound to a set of streams and its own session"""

    def __init__(
        self,
        config: Optional[Config] = None,
        stdin: Optional[TextIO] = None,
        stdout: Optional[OutputStream] = None,
        stderr: Optional[OutputStream] = None,
    ):
        self.config = config if config is not None else Config()
        self.session = Session(self.config.prompt, self.config.max_prompt_length)
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else OutputStream.from_text_stream(sys.stdout)
        self.stderr = stderr if stderr is not None else OutputStream.from_text_stream(sys.stderr)

    @property
    def prompt(self) -> str:
        return self.session.prompt

    @property
    def running(self) -> bool:
        return self.session.running

    def show_prompt(self) -> None:
        self.stdout.write(f"{self.session.prompt} ")
        self.stdout.flush()

    def read_line(self) -> Optional[str]:
        """
        Read the next input line without its line terminator

        Returns None at end of input. Lines longer than max_line_length are
        cut down to that length.
        """
        line = self.stdin.readline()
        if not line:
            return None

        if line.endswith('\n'):
            line = line[:-1]
            if line.endswith('\r'):
                line = line[:-1]

        limit = self.config.max_line_length
        if len(line) > limit:
            logger.warning("Input line of %d characters truncated to %d", len(line), limit)
            line = line[:limit]
        return line

    def execute(self, line: str) -> Optional[CommandResult]:
        """
        Run one command line

        Returns the command's result, or None when nothing was run (empty
        line or unknown command).
        """
        parsed = parse_line(line)
        if parsed is None:
            return None

        executor = get_builtin(parsed.command)
        if executor is None:
            logger.debug("Unknown command %r", parsed.command)
            self.stderr.write(f"Unknown command entered: {parsed.command}\n")
            write_command_listing(self.stdout)
            self._flush()
            return None

        process = Process(
            parsed.command,
            options=parsed.options,
            params=parsed.params,
            stdout=self.stdout,
            stderr=self.stderr,
            session=self.session,
        )
        logger.debug("Dispatching %r", process)

        try:
            result = executor(process)
        except Exception as e:
            logger.error(f"Unexpected error in {parsed.command}: {e}", exc_info=True)
            result = CommandResult(Status.UNSPECIFIED_ERROR, f"{parsed.command}: {e}")
            self.stderr.write(f"{result.detail}\n")

        if not result.ok:
            self.stderr.write(f"{parsed.command} command exited with the above error(s)\n")
        self._flush()

        logger.debug("%s exited with status %s", parsed.command, result.status.name)
        return result

    def run(self) -> int:
        """Prompt, read and execute until exit or end of input"""
        while self.session.running:
            self.show_prompt()
            try:
                line = self.read_line()
            except KeyboardInterrupt:
                self.stdout.write("\n")
                continue
            except UnicodeDecodeError as e:
                logger.warning("Skipping undecodable input: %s", e)
                self.stderr.write(f"Input is not valid {e.encoding}: {e.reason}\n")
                self._flush()
                continue

            if line is None:
                logger.debug("End of input, leaving shell")
                self.stdout.write("\n")
                self.session.terminate()
                break

            try:
                self.execute(line)
            except KeyboardInterrupt:
                self.stderr.write("\ninterrupted\n")

        self._flush()
        return 0

    def _flush(self) -> None:
        self.stdout.flush()
        self.stderr.flush()
