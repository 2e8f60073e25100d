"""
Command line tokenizer

A line is split into a command word, an optional option cluster and an
optional parameter string:

    echo -n hello world   ->  ('echo', 'n', 'hello world')
    cp a b                ->  ('cp', None, 'a b')
    rm -- -file           ->  ('rm', None, '-file')

Only the first token after the command can be an option token. A ``-``
anywhere later is plain parameter text, a lone ``-`` is plain text, and
``--`` ends option processing.
"""

from typing import NamedTuple, Optional, Tuple


class CommandLine(NamedTuple):
    command: str
    options: Optional[str]
    params: Optional[str]


def parse_line(line: str) -> Optional[CommandLine]:
    """
    Parse one input line

    Returns None for an empty or whitespace-only line.
    """
    parts = line.split(None, 1)
    if not parts:
        return None

    command = parts[0]
    remainder = parts[1] if len(parts) > 1 else ''
    options, params = split_options(remainder)
    return CommandLine(command, options, params)


def split_options(remainder: str) -> Tuple[Optional[str], Optional[str]]:
    """Split the text after the command into (option cluster, parameters)"""
    parts = remainder.split(None, 1)
    if not parts:
        return None, None

    token = parts[0]
    rest = parts[1] if len(parts) > 1 else None

    if token == '--':
        return None, rest
    if token.startswith('-') and token != '-':
        return token[1:], rest

    # No option token: the whole remainder is the parameter string
    return None, remainder.lstrip()


def split_params(params: Optional[str], count: int) -> Tuple[Optional[str], ...]:
    """
    Take the first ``count`` whitespace-delimited tokens of ``params``

    Missing tokens come back as None; extra tokens are dropped.
    """
    tokens = params.split() if params else []
    tokens = tokens[:count]
    tokens.extend([None] * (count - len(tokens)))
    return tuple(tokens)
