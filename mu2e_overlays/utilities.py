"""Formatting, hex dumps, command-line option helpers and DMA size words."""

from __future__ import annotations

import logging
import math
import re
import struct
from collections.abc import Iterator, Sequence
from typing import BinaryIO

logger = logging.getLogger(__name__)

_U32_MASK = (1 << 32) - 1
_U64_MASK = (1 << 64) - 1
_SIZE_WORD = struct.Struct("<Q")
_LEADING_UNSIGNED = re.compile(r"\s*([+-]?)(0[xX][0-9a-fA-F]+|0[0-7]*|[1-9][0-9]*)")


def format_bytes(num_bytes: float) -> tuple[float, str]:
    """Pick the largest unit, up to TB, in which the value still exceeds 1."""
    value = num_bytes
    unit = "bytes"
    for next_unit in ("KB", "MB", "GB", "TB"):
        scaled = value / 1024.0
        if scaled <= 1:
            break
        value, unit = scaled, next_unit
    return value, unit


def format_byte_string(num_bytes: float, extra_unit: str = "") -> str:
    """Describe a byte count as "<value> <unit> (<n> bytes)", with an extra unit suffix."""
    value, unit = format_bytes(num_bytes)
    return (
        f"{value:.5g} {unit}{extra_unit} "
        f"({int(num_bytes)} bytes{extra_unit})"
    )


def format_time(seconds: float) -> tuple[float, str]:
    """Pick the best unit for a time span, from ns up to days."""
    if seconds > 1:
        value, unit = seconds, "s"
        for divisor, next_unit in ((60.0, "minutes"), (60.0, "hours"), (24.0, "days")):
            scaled = value / divisor
            if scaled <= 1:
                break
            value, unit = scaled, next_unit
        return value, unit

    ms = seconds * 1000
    if ms > 1:
        return ms, "ms"
    us = ms * 1000
    if us > 1:
        return us, "us"
    return us * 1000, "ns"


def format_time_string(seconds: float) -> str:
    """Describe a time span as "<value> <unit>"."""
    value, unit = format_time(seconds)
    return f"{value:.5g} {unit}"


def hexdump_lines(data: bytes, quiet_count: int = 0) -> Iterator[str]:
    """Yield hex dump lines of 16-bit little-endian words, eight per line.

    With a positive ``quiet_count`` and a buffer of more than twice that many
    lines, only the first and last ``quiet_count`` lines are produced.
    """
    raw = bytes(data)
    size = len(raw)
    padded = raw + b"\x00" * (size % 2)
    max_line = math.ceil(size / 16)

    line = 0
    while line < max_line:
        words = [
            int.from_bytes(padded[line * 16 + 2 * i:line * 16 + 2 * i + 2], "little")
            for i in range(8)
            if line * 16 + 2 * i < size
        ]
        yield f"0x{line:05x}0: " + "".join(f"{word:04x} " for word in words)
        if quiet_count > 0 and max_line > quiet_count * 2 and line == quiet_count - 1:
            line = max_line - (1 + quiet_count)
        line += 1


def print_buffer(data: bytes, quiet_count: int = 0, level: int = logging.INFO) -> None:
    """Log a hex dump of ``data`` at ``level``."""
    for text in hexdump_lines(data, quiet_count):
        logger.log(level, "%s", text)


def _strtoul(text: str, mask: int) -> int:
    """Parse a leading unsigned integer the way C's strtoul does with base 0."""
    match = _LEADING_UNSIGNED.match(text)
    if match is None:
        return 0
    sign, digits = match.groups()
    if digits[:2] in ("0x", "0X"):
        value = int(digits, 16)
    elif len(digits) > 1:
        value = int(digits, 8)
    else:
        value = int(digits)
    if value > _U64_MASK:
        return _U64_MASK & mask
    if sign == "-":
        value = -value & _U64_MASK
    return value & mask


def _next_value(argv: Sequence[str], index: int, mask: int) -> tuple[int, int]:
    following = index + 1
    if following >= len(argv):
        return 0, index
    text = argv[following]
    value = _strtoul(text, mask)
    if value == 0 and not text.startswith("0"):
        return 0, index
    return value, following


def _short_option_tail(arg: str) -> str | None:
    """Text after a short option's letter, or None when the value is the next argument."""
    if len(arg) <= 2:
        return None
    return arg[3:] if arg[2] == "=" else arg[2:]


def _short_value(argv: Sequence[str], index: int, mask: int) -> tuple[int, int]:
    tail = _short_option_tail(argv[index])
    if tail is None:
        return _next_value(argv, index, mask)
    return _strtoul(tail, mask), index


def _long_value(argv: Sequence[str], index: int, mask: int) -> tuple[int, int]:
    arg = argv[index]
    pos = arg.find("=")
    if pos == -1:
        return _next_value(argv, index, mask)
    return _strtoul(arg[pos + 1:], mask), index


def get_option_value(argv: Sequence[str], index: int) -> tuple[int, int]:
    """Read a 32-bit unsigned value of a short option ("-n5", "-n=5" or "-n 5").

    Returns the value and the index of the last argument consumed.
    """
    return _short_value(argv, index, _U32_MASK)


def get_option_value_long(argv: Sequence[str], index: int) -> tuple[int, int]:
    """Read a 64-bit unsigned value of a short option; see get_option_value."""
    return _short_value(argv, index, _U64_MASK)


def get_option_string(argv: Sequence[str], index: int) -> tuple[str, int]:
    """Read the text value of a short option; raises IndexError if it is missing."""
    tail = _short_option_tail(argv[index])
    if tail is not None:
        return tail, index
    following = index + 1
    if following >= len(argv):
        raise IndexError(f"option {argv[index]!r} needs a value")
    return argv[following], following


def get_long_option_value(argv: Sequence[str], index: int) -> tuple[int, int]:
    """Read a 32-bit unsigned value of a long option ("--n=5" or "--n 5")."""
    return _long_value(argv, index, _U32_MASK)


def get_long_option_value_long(argv: Sequence[str], index: int) -> tuple[int, int]:
    """Read a 64-bit unsigned value of a long option."""
    return _long_value(argv, index, _U64_MASK)


def get_long_option_option(argv: Sequence[str], index: int) -> str:
    """The option part of a long option argument.

    When the argument holds '=', the character just before it is dropped too.
    """
    arg = argv[index]
    pos = arg.find("=")
    if pos <= 0:
        return arg
    return arg[:pos - 1]


def get_long_option_string(argv: Sequence[str], index: int) -> tuple[str, int]:
    """Read the text value of a long option.

    With '=' in the argument the returned text starts at the '=' itself;
    otherwise the next argument is returned. Raises IndexError if it is missing.
    """
    arg = argv[index]
    pos = arg.find("=")
    if pos != -1:
        return arg[pos:], index
    following = index + 1
    if following >= len(argv):
        raise IndexError(f"option {arg!r} needs a value")
    return argv[following], following


def write_dma_buffer_size_words(
    output: BinaryIO,
    include_dma_write_size: bool,
    data_size: int,
    pos: int,
    restore_pos: bool,
) -> int:
    """Write the DMA size word(s) for a buffer of ``data_size`` bytes at ``pos``.

    With ``include_dma_write_size`` a leading write-size word used by the
    detector emulator comes first. Returns the number of bytes written.
    """
    saved = output.tell()
    output.seek(pos)
    written = 0
    if include_dma_write_size:
        dma_write_size = data_size + 2 * _SIZE_WORD.size
        logger.debug("Writing DMA Write Size (%d) for Detector Emulator", dma_write_size)
        output.write(_SIZE_WORD.pack(dma_write_size))
        written += _SIZE_WORD.size

    dma_size = data_size + _SIZE_WORD.size
    logger.debug("Writing DMA Size (%d)", dma_size)
    output.write(_SIZE_WORD.pack(dma_size))
    written += _SIZE_WORD.size

    if restore_pos:
        logger.debug("Reverting write pointer")
        output.seek(saved)
    return written