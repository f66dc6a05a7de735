"""Word frequency counting over the hash map."""

from __future__ import annotations

from pathlib import Path

from .errors import SmashMapError, SmashMapErrorCode
from .smash_map import SmashMap

HASH_KEY = 31
INT64_MAX = (1 << 63) - 1
MAX_WORD_SIZE = 64
MAP_SIZE = 10007

_MASK64 = (1 << 64) - 1


def _as_bytes(text: str | bytes) -> bytes:
    return text.encode("utf-8") if isinstance(text, str) else bytes(text)


def string_hash(text: str | bytes) -> int:
    """Polynomial string hash with 64-bit wrap-around, reduced modulo INT64_MAX."""
    result = 0
    for byte in _as_bytes(text):
        char_value = byte if byte < 128 else (byte - 256) & _MASK64
        scaled = ((HASH_KEY * result) & _MASK64) % INT64_MAX
        result = ((scaled + char_value) & _MASK64) % INT64_MAX
    return result


def key_to_str(key: str | None) -> str:
    """Render a word key quoted, or '(nul)' when it is empty."""
    return f"'{key}'" if key else "(nul)"


def val_to_str(val: int | None) -> str:
    """Render a count quoted, or '(nul)' when absent."""
    return "(nul)" if val is None else f"'{val}'"


def count_words(text: str | bytes, max_word_size: int = MAX_WORD_SIZE) -> SmashMap:
    """Count runs of ASCII letters; a word still open at the end is not counted."""
    counts = SmashMap(
        MAP_SIZE,
        hash_func=string_hash,
        key_to_str=key_to_str,
        val_to_str=val_to_str,
        name="map",
    )
    word = bytearray()
    for byte in _as_bytes(text):
        if bytes((byte,)).isalpha():
            if len(word) >= max_word_size:
                raise SmashMapError(
                    SmashMapErrorCode.UNKNOWN,
                    "found word longer than the maximum valid size",
                )
            word.append(byte)
            continue
        if not word:
            continue
        key = word.decode("ascii")
        counts.insert(key, counts.get(key, 0) + 1)
        word.clear()
    return counts


def print_freq_dict(input_path: str | Path, output_path: str | Path) -> None:
    """Count the words of one file and write 'word: count' lines to another."""
    try:
        data = Path(input_path).read_bytes()
    except OSError as exc:
        raise SmashMapError(SmashMapErrorCode.STANDARD_ERRNO, str(exc)) from exc
    if not data:
        raise SmashMapError(SmashMapErrorCode.STANDARD_ERRNO, "file is empty")

    counts = count_words(data)

    try:
        with open(output_path, "w", encoding="utf-8", newline="") as output:
            counts.print_to(output)
    except OSError as exc:
        raise SmashMapError(SmashMapErrorCode.STANDARD_ERRNO, str(exc)) from exc