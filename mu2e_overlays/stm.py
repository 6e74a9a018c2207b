"""Decoding of Stopping Target Monitor fragments."""

from __future__ import annotations

import struct
from dataclasses import dataclass

TRIGGER_HEADER_WORDS = 20
SLICE_HEADER_WORDS = 8
TRIGGER_HEADER_BYTES = TRIGGER_HEADER_WORDS * 2
SLICE_HEADER_BYTES = SLICE_HEADER_WORDS * 2


def _check_words(words: tuple[int, ...], count: int, name: str) -> None:
    if len(words) != count:
        raise ValueError(f"{name} needs {count} words, got {len(words)}")
    for word in words:
        if not 0 <= word <= 0xFFFF:
            raise ValueError(f"{name} word out of 16-bit range: {word}")


def _unpack_words(data: bytes, count: int, name: str) -> tuple[int, ...]:
    needed = count * 2
    if len(data) < needed:
        raise ValueError(f"{name} needs {needed} bytes, got {len(data)}")
    return struct.unpack_from(f"<{count}H", data)


def _join(*words: int) -> int:
    """Combine 16-bit words, the first given being the most significant."""
    value = 0
    for word in words:
        value = (value << 16) | word
    return value


@dataclass(frozen=True)
class TriggerHeader:
    """The 20-word software trigger header; words are little-endian."""

    words: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "words", tuple(self.words))
        _check_words(self.words, TRIGGER_HEADER_WORDS, "trigger header")

    @classmethod
    def from_bytes(cls, data: bytes) -> TriggerHeader:
        """Decode the header from the start of ``data``."""
        return cls(_unpack_words(bytes(data), TRIGGER_HEADER_WORDS, "trigger header"))

    def test_word(self) -> int:
        w = self.words
        return _join(w[1], w[0])

    def data_size(self) -> int:
        w = self.words
        return _join(w[3], w[2])

    def slice_number(self) -> int:
        w = self.words
        return _join(w[5], w[4])

    def trigger_number(self) -> int:
        w = self.words
        return _join(w[7], w[6])

    def mode(self) -> int:
        return (self.words[8] & 0xF000) >> 12

    def channel(self) -> int:
        return (self.words[8] & 0x0F00) >> 8

    def type(self) -> int:
        return self.words[8] & 0x00FF

    def trigger_time(self) -> int:
        w = self.words
        return _join(w[12], w[11], w[10], w[9])

    def adc_offset(self) -> int:
        w = self.words
        return _join(w[14], w[13])

    def dropped_packets(self) -> int:
        return self.words[15]

    def unix_time(self) -> int:
        """Epoch time in milliseconds."""
        w = self.words
        return _join(w[19], w[18], w[17], w[16])

    def describe(self) -> str:
        """A short human-readable summary of the header."""
        w = self.words
        return (
            f"Data size is {_join(w[2], w[3])}\n"
            f" Test word is {w[0]:x}{16:x}{w[1]:x}\n"
        )

    def __str__(self) -> str:
        return self.describe()


@dataclass(frozen=True)
class SliceHeader:
    """The 8-word software slice header; words are little-endian."""

    words: tuple[int, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "words", tuple(self.words))
        _check_words(self.words, SLICE_HEADER_WORDS, "slice header")

    @classmethod
    def from_bytes(cls, data: bytes) -> SliceHeader:
        """Decode the header from the start of ``data``."""
        return cls(_unpack_words(bytes(data), SLICE_HEADER_WORDS, "slice header"))

    def slice_number(self) -> int:
        w = self.words
        return _join(w[1], w[0])

    def slice_size(self) -> int:
        """Number of 16-bit samples following the header."""
        w = self.words
        return _join(w[3], w[2])

    def adc_time(self) -> int:
        w = self.words
        return _join(w[7], w[6], w[5], w[4])


class STMFragment:
    """A fragment payload: trigger header, slice header, then ADC samples."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)

    def trigger_header(self) -> TriggerHeader:
        return TriggerHeader.from_bytes(self._data)

    def slice_header(self) -> SliceHeader:
        return SliceHeader.from_bytes(self._data[TRIGGER_HEADER_BYTES:])

    def samples(self) -> tuple[int, ...]:
        """The ADC samples of the slice; raises ValueError if the data is short."""
        count = self.slice_header().slice_size()
        start = TRIGGER_HEADER_BYTES + SLICE_HEADER_BYTES
        available = (len(self._data) - start) // 2
        if available < count:
            raise ValueError(
                f"slice claims {count} samples but only {available} are present"
            )
        return struct.unpack_from(f"<{count}H", self._data, start)