"""Command line: count word frequencies for pairs of input and output files."""

from __future__ import annotations

import logging
import re
import sys
from collections.abc import Iterator, Sequence
from contextlib import contextmanager
from dataclasses import dataclass, field
from pathlib import Path

from .errors import FlagsError, SmashMapError, strerror
from .freq import print_freq_dict

MAX_INOUT_FILES_CNT = 10
DEFAULT_LOG_FOLDER = "./log/"
LOGOUT_FILENAME = "logout.log"

_OPTIONS_WITH_ARGUMENT = frozenset("li")
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

_logger = logging.getLogger("smashmap")


@dataclass
class Options:
    """Settings gathered from the command line."""

    log_folder: str = DEFAULT_LOG_FOLDER
    files: list[tuple[str, str]] = field(default_factory=list)


def _leading_int(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _split_option(args: list[str], index: int) -> tuple[str, str, int]:
    """Return (letter, argument, index after it) for the option at args[index]."""
    token = args[index]
    letter = token[1]
    if letter not in _OPTIONS_WITH_ARGUMENT:
        raise FlagsError(f"unknown option -{letter}")
    if len(token) > 2:
        return letter, token[2:], index + 1
    if index + 1 >= len(args):
        raise FlagsError(f"option -{letter} requires an argument")
    return letter, args[index + 1], index + 2


def parse_args(argv: Sequence[str]) -> Options:
    """Parse options (program name excluded).

    ``-l DIR`` sets the log folder prefix; ``-i N`` is followed by N pairs of
    input and output file names.  Arguments that are not options are ignored.
    """
    args = list(argv)
    options = Options()
    index = 0
    while index < len(args):
        token = args[index]
        if token == "--":
            break
        if not token.startswith("-") or token == "-":
            index += 1
            continue

        letter, value, index = _split_option(args, index)
        if letter == "l":
            options.log_folder = value
            continue

        count = _leading_int(value)
        if count <= 0 or count > MAX_INOUT_FILES_CNT:
            raise FlagsError("Error cnt_inout_files value")
        if len(args) - index < 2 * count:
            raise FlagsError("Few arguments in command line")
        pairs = args[index : index + 2 * count]
        options.files = list(zip(pairs[0::2], pairs[1::2]))
        index += 2 * count

    return options


@contextmanager
def _log_to(log_folder: str) -> Iterator[None]:
    handler = logging.FileHandler(f"{log_folder}{LOGOUT_FILENAME}", encoding="utf-8")
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    previous_level = _logger.level
    _logger.addHandler(handler)
    _logger.setLevel(logging.DEBUG)
    try:
        yield
    finally:
        _logger.removeHandler(handler)
        _logger.setLevel(previous_level)
        handler.close()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the frequency dictionary over every file pair; return an exit status."""
    if argv is None:
        argv = sys.argv[1:]

    try:
        options = parse_args(argv)
    except FlagsError as exc:
        print(f"Can't flags_processing. Error: {exc}", file=sys.stderr)
        return 1

    try:
        log_context = _log_to(options.log_folder)
        log_context.__enter__()
    except OSError as exc:
        print(f"Can't logger init: {exc}", file=sys.stderr)
        return 1

    try:
        for input_path, output_path in options.files:
            _logger.info("counting words of %s into %s", input_path, output_path)
            try:
                print_freq_dict(Path(input_path), Path(output_path))
            except SmashMapError as exc:
                _logger.error("print_freq_dict failed: %s", exc)
                print(
                    f"Can't print_freq_dict. Error: {strerror(exc.code)}",
                    file=sys.stderr,
                )
                return int(exc.code)
    finally:
        log_context.__exit__(None, None, None)

    return 0


if __name__ == "__main__":
    sys.exit(main())