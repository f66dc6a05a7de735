"""Diagnostic dump of a hash map to a console stream and an HTML log."""

from __future__ import annotations

import inspect
import io
import sys
from datetime import datetime
from typing import TextIO

from .smash_map import SmashMap

NORMAL_FORMAT = "\033[0m"
BLACK_FORMAT = "\033[30m"
RED_FORMAT = "\033[31m"
GREEN_FORMAT = "\033[32m"
YELLOW_FORMAT = "\033[33m"
BOLD_FORMAT = "\033[1m"
ITALIC_FORMAT = "\033[2m"

HTML_INTRO = (
    "\n<!DOCTYPE html>\n"
    "<html lang='en'>\n"
    "<head>\n"
    "<meta charset='UTF-8'>\n"
    "<meta http-equiv='X-UA-Compatible' content='IE=edge'>\n"
    "<meta name='viewport' content='width=device-width, initial-scale=1.0'>\n"
    "<title>MEGA MEGA MEGA DUMB</title>\n"
    "</head>\n"
    "<body>\n"
    "<pre>\n"
)
SEPARATOR = "</pre><hr /><pre>\n"


def red_text(text: str) -> str:
    """Wrap text in the escape sequences for red console output."""
    return f"{RED_FORMAT}{text}{NORMAL_FORMAT}"


def _html_is_empty(html_file: TextIO) -> bool:
    try:
        position = html_file.tell()
        html_file.seek(0, io.SEEK_END)
        size = html_file.tell()
        html_file.seek(position)
    except (OSError, ValueError):
        return True
    return size <= 2


def _call_place() -> tuple[str, int, str]:
    frame = inspect.currentframe()
    caller = frame.f_back.f_back if frame and frame.f_back else None
    if caller is None:
        return "?", 0, "?"
    return caller.f_code.co_filename, caller.f_lineno, caller.f_code.co_name


def dump(
    smash_map: SmashMap | None,
    stream: TextIO | None = None,
    html_file: TextIO | None = None,
) -> None:
    """Write a full description of the map, bucket by bucket.

    Output goes to ``stream`` (standard error by default) and, when given,
    to ``html_file``, which receives an HTML preamble if it is still empty.
    """
    if stream is None:
        stream = sys.stderr
    file_name, line, func = _call_place()

    if html_file is not None:
        if _html_is_empty(html_file):
            html_file.write(HTML_INTRO)
        html_file.write(SEPARATOR)
        html_file.write(SEPARATOR)

    def emit(text: str) -> None:
        if html_file is not None:
            html_file.write(text)
        stream.write(text)

    now = datetime.now()
    emit(
        "\n==SMASH MAP DUMB==\n"
        f"Date: {now.strftime('%b %d %Y')}\n"
        f"Time: {now.strftime('%H:%M:%S')}\n\n"
    )

    if smash_map is None:
        emit(f"smash_map_t [NULL] at {file_name}:{line} ({func}())\n")
        stream.write("\n")
        return

    hash_func = smash_map._hash_func
    hash_name = getattr(hash_func, "__qualname__", None) or repr(hash_func)

    emit(
        f"smash_map_t {smash_map.name}[{id(smash_map):#x}] "
        f"at {file_name}:{line} ({func}())\n"
    )
    emit("\n")
    emit(f"\tsize      = {smash_map.size}\n")
    emit(f"\thash_func = {hash_name}\n")
    emit(f"\tbuckets   = {len(smash_map)} entries\n")
    emit("\n")

    for bucket_index, bucket in enumerate(smash_map.buckets()):
        emit(f"BUCKET INDEX: {bucket_index}\n")
        emit("KEYS\n")
        for position, (key, _) in enumerate(bucket, start=1):
            emit(f"\t[{position}] {smash_map.key_to_str(key)}\n")
        emit("VALS\n")
        for position, (_, val) in enumerate(bucket, start=1):
            emit(f"\t[{position}] {smash_map.val_to_str(val)}\n")