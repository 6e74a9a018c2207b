"""Decoded DTC status and error registers."""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import IntEnum

from mu2e_overlays.links import LinkID

_REGISTER_BITS = 32


def _json_bool(value: bool) -> str:
    return "true" if value else "false"


def _flags_json(obj: object) -> str:
    body = ",".join(
        f'"{field.name}":{_json_bool(getattr(obj, field.name))}' for field in fields(obj)
    )
    return "{" + body + "}"


def _link_bits(data: int, link: LinkID | int) -> int:
    base = int(link) * 2
    if base < 0 or base + 1 >= _REGISTER_BITS:
        raise ValueError(f"link {int(link)} has no bits in a {_REGISTER_BITS}-bit register")
    return ((data & 0xFFFFFFFF) >> base) & 0b11


@dataclass(frozen=True)
class _TwoBitError:
    data: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.data <= 0b11:
            raise ValueError(f"error bits must fit in two bits, got {self.data}")

    @property
    def low(self) -> bool:
        return bool(self.data & 0b01)

    @property
    def high(self) -> bool:
        return bool(self.data & 0b10)

    def __int__(self) -> int:
        return self.data

    def to_json(self) -> str:
        """The two error bits as a JSON object."""
        return f'{{"low":{int(self.low)},"high":{int(self.high)}}}'


@dataclass(frozen=True)
class CharacterNotInTableError(_TwoBitError):
    """The two SERDES character-not-in-table error bits of one link."""

    @classmethod
    def from_register(cls, data: int, link: LinkID | int) -> CharacterNotInTableError:
        """Take the bits belonging to ``link`` from the register value."""
        return cls(_link_bits(data, link))

    def to_json(self) -> str:
        """The two error bits as a JSON object."""
        return super().to_json()


@dataclass(frozen=True)
class SERDESRXDisparityError(_TwoBitError):
    """The two SERDES receive disparity error bits of one link."""

    @classmethod
    def from_register(cls, data: int, link: LinkID | int) -> SERDESRXDisparityError:
        """Take the bits belonging to ``link`` from the register value."""
        return cls(_link_bits(data, link))

    def to_json(self) -> str:
        """The two error bits as a JSON object."""
        return super().to_json()


@dataclass(frozen=True)
class DDRFlags:
    """Fill state of the DDR input fragment and output event buffers."""

    InputFragmentBufferFull: bool = False
    InputFragmentBufferEmpty: bool = False
    InputFragmentBufferHalfFull: bool = False
    OutputEventBufferFull: bool = False
    OutputEventBufferEmpty: bool = False
    OutputEventBufferHalfFull: bool = False

    def to_json(self) -> str:
        """The flags as a JSON object."""
        return _flags_json(self)


@dataclass(frozen=True)
class FIFOFullErrorFlags:
    """Which DTC FIFOs have reported being full."""

    OutputData: bool = False
    CFOLinkInput: bool = False
    ReadoutRequestOutput: bool = False
    DataRequestOutput: bool = False
    OtherOutput: bool = False
    OutputDCS: bool = False
    OutputDCSStage2: bool = False
    DataInput: bool = False
    DCSStatusInput: bool = False

    def to_json(self) -> str:
        """The flags as a JSON object."""
        return _flags_json(self)


@dataclass(frozen=True)
class LinkEnableMode:
    """Transmit and receive enables of one link."""

    TransmitEnable: bool = True
    ReceiveEnable: bool = True

    def to_json(self) -> str:
        """The enables as a JSON object."""
        return _flags_json(self)


class EVBStatusFlag(IntEnum):
    """Bit positions of the event builder status flags."""

    EVENT_FRAGMENT_TIMEOUT = 0
    RESERVED_1 = 1
    RESERVED_2 = 2
    RESERVED_3 = 3
    RESERVED_4 = 4
    RESERVED_5 = 5
    RESERVED_6 = 6
    INVALID = 7


class LinkStatusFlag(IntEnum):
    """Bit positions of the link status flags."""

    ROC_TIMEOUT_ERROR = 0
    RESERVED_1 = 1
    PACKET_SEQUENCE_NUMBER_ERROR = 2
    PACKET_CRC_ERROR = 3
    RESERVED_4 = 4
    RESERVED_5 = 5
    FATAL_ERROR = 6
    INVALID = 7


@dataclass(frozen=True)
class _StatusWord:
    error: bool = False
    flags: int = 0

    def __post_init__(self) -> None:
        if not 0 <= self.flags <= 0x7F:
            raise ValueError(f"flags must fit in seven bits, got {self.flags}")

    def __contains__(self, flag: int) -> bool:
        position = int(flag)
        return 0 <= position < 7 and bool(self.flags >> position & 1)


@dataclass(frozen=True)
class EVBStatus(_StatusWord):
    """Event builder status byte: an error bit and seven flag bits."""

    @classmethod
    def from_word(cls, word: int) -> EVBStatus:
        """Decode a status byte."""
        return cls(bool(word & 0x80), word & 0x7F)


@dataclass(frozen=True)
class LinkStatus(_StatusWord):
    """Link status byte: an error bit and seven flag bits."""

    @classmethod
    def from_word(cls, word: int) -> LinkStatus:
        """Decode a status byte."""
        return cls(bool(word & 0x80), word & 0x7F)


@dataclass(frozen=True)
class EventMode:
    """The five event mode bytes sent with heartbeats."""

    mode0: int = 0
    mode1: int = 0
    mode2: int = 0
    mode3: int = 0
    mode4: int = 0

    def __post_init__(self) -> None:
        for field in fields(self):
            value = getattr(self, field.name)
            if not 0 <= value <= 0xFF:
                raise ValueError(f"{field.name} must be a byte, got {value}")

    def to_bytes(self) -> bytes:
        """The five mode bytes in order."""
        return bytes((self.mode0, self.mode1, self.mode2, self.mode3, self.mode4))

    def is_on_spill_flag_set(self) -> bool:
        """Whether the on-spill bit of mode4 is set."""
        return bool(self.mode4 & 1)

    def is_subrun_bit_set(self) -> bool:
        """Whether the subrun bit of mode4 is set."""
        return bool(self.mode4 & 2)

    def is_predictive_subrun_bit_set(self) -> bool:
        """Whether the predictive subrun bit of mode4 is set."""
        return bool(self.mode4 & 4)