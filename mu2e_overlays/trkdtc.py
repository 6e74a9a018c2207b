"""Decoding of tracker DTC register-dump fragments."""

from __future__ import annotations

import struct
from collections.abc import Iterator
from dataclasses import dataclass

CURRENT_VERSION = 1

_ENTRY = struct.Struct("<II")
_METADATA = struct.Struct("<i")


@dataclass(frozen=True)
class RegisterEntry:
    """One register address and the value read from it."""

    address: int = 0
    value: int = 0


@dataclass(frozen=True)
class TrkDtcMetadata:
    """Metadata carried by a tracker DTC fragment."""

    version: int = CURRENT_VERSION

    size_bytes = _METADATA.size

    @classmethod
    def from_bytes(cls, data: bytes) -> TrkDtcMetadata:
        """Decode metadata from its little-endian wire form."""
        if len(data) < _METADATA.size:
            raise ValueError(
                f"metadata needs {_METADATA.size} bytes, got {len(data)}"
            )
        (version,) = _METADATA.unpack_from(data)
        return cls(version)

    def to_bytes(self) -> bytes:
        """Encode the metadata in its little-endian wire form."""
        return _METADATA.pack(self.version)


class TrkDtcFragment:
    """A fragment payload holding a list of register address/value pairs."""

    CURRENT_VERSION = CURRENT_VERSION

    def __init__(self, data: bytes, metadata: TrkDtcMetadata | None = None) -> None:
        self._data = bytes(data)
        self._metadata = metadata if metadata is not None else self.create_metadata()

    @staticmethod
    def create_metadata() -> TrkDtcMetadata:
        """Metadata describing the current fragment version."""
        return TrkDtcMetadata(CURRENT_VERSION)

    def n_reg(self) -> int:
        """Number of complete register entries in the payload."""
        return len(self._data) // _ENTRY.size

    def version(self) -> int:
        """Fragment version taken from the metadata."""
        return self._metadata.version

    def register_entry(self, index: int) -> RegisterEntry:
        """The register entry at ``index``; raises IndexError when out of range."""
        count = self.n_reg()
        if not 0 <= index < count:
            raise IndexError(f"Index {index} is out of range! (nReg={count})")
        return RegisterEntry(*_ENTRY.unpack_from(self._data, index * _ENTRY.size))

    def reg(self, index: int) -> int:
        """Address of the register at ``index``."""
        return self.register_entry(index).address

    def val(self, index: int) -> int:
        """Value of the register at ``index``."""
        return self.register_entry(index).value

    def __len__(self) -> int:
        return self.n_reg()

    def __iter__(self) -> Iterator[RegisterEntry]:
        return (RegisterEntry(*fields) for fields in _ENTRY.iter_unpack(
            self._data[: self.n_reg() * _ENTRY.size]
        ))