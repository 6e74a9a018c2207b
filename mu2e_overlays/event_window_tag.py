"""The 48-bit Mu2e event window tag."""

from __future__ import annotations

from dataclasses import dataclass

_TAG_BYTES = 6
_TAG_MASK = (1 << 48) - 1


@dataclass(frozen=True, order=True)
class EventWindowTag:
    """A 48-bit event window tag; wider values are truncated to 48 bits."""

    value: int = 0

    def __post_init__(self) -> None:
        object.__setattr__(self, "value", int(self.value) & _TAG_MASK)

    @classmethod
    def from_parts(cls, low: int, high: int) -> EventWindowTag:
        """Build a tag from its lower 32 bits and upper 16 bits."""
        return cls(((high & 0xFFFF) << 32) + (low & 0xFFFFFFFF))

    @classmethod
    def from_bytes(cls, data: bytes, offset: int = 0) -> EventWindowTag:
        """Read a little-endian tag from ``data`` starting at ``offset``."""
        if offset < 0:
            raise ValueError(f"offset must not be negative, got {offset}")
        chunk = bytes(data[offset:offset + _TAG_BYTES])
        if len(chunk) < _TAG_BYTES:
            raise ValueError(
                f"need {_TAG_BYTES} bytes at offset {offset}, got {len(chunk)}"
            )
        return cls(int.from_bytes(chunk, "little"))

    def to_bytes(self) -> bytes:
        """The tag as six little-endian bytes."""
        return self.value.to_bytes(_TAG_BYTES, "little")

    def to_json(self, array_mode: bool = False) -> str:
        """A JSON fragment holding the tag, as a number or as an array of bytes."""
        if array_mode:
            body = ",\n".join(str(b) for b in self.to_bytes())
            return f'\t"timestamp": [\n{body}\n]'
        return f'\t"timestamp": {self.value}'

    def to_packet_format(self) -> str:
        """The tag laid out as in packet diagrams: byte 1 | byte 0, and so on."""
        ts = self.to_bytes()
        return "".join(
            f"0x{ts[i + 1]:06x}\t0x{ts[i]:06x}\n" for i in range(0, _TAG_BYTES, 2)
        )

    def __add__(self, other: int) -> EventWindowTag:
        if not isinstance(other, int):
            return NotImplemented
        return EventWindowTag(self.value + other)

    __radd__ = __add__

    def __int__(self) -> int:
        return self.value

    def __index__(self) -> int:
        return self.value