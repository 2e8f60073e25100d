"""Command line entry point"""

import argparse
import logging
import sys

from . import __version__
from .config import DEFAULT_PROMPT, MAX_PROMPT_LENGTH, Config
from .shell import Shell

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


def prompt_text(value: str) -> str:
    if len(value) > MAX_PROMPT_LENGTH:
        raise argparse.ArgumentTypeError(
            f"prompt may be no longer than {MAX_PROMPT_LENGTH} characters"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mysh",
        description="Minimal interactive shell with echo, PS1, cat, cp, rm, mkdir and rmdir",
    )
    parser.add_argument("--prompt", type=prompt_text, default=DEFAULT_PROMPT,
                        help=f"initial prompt text (default: {DEFAULT_PROMPT!r})")
    parser.add_argument("--log-level", choices=LOG_LEVELS, default="WARNING",
                        help="logging level for diagnostics on stderr (default: WARNING)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv=None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logger = logging.getLogger("mysh")
    logger.debug(f"Starting mysh {__version__} (prompt={args.prompt!r})")

    # Keep bytes that are not valid text; echo and file names pass them through
    if hasattr(sys.stdin, 'reconfigure'):
        sys.stdin.reconfigure(errors='surrogateescape')

    shell = Shell(Config(prompt=args.prompt))
    return shell.run()


if __name__ == "__main__":
    sys.exit(main())
