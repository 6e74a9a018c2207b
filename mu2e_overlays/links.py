"""Identifiers for DTC links, PLLs, oscillators, subsystems and IIC buses."""

from __future__ import annotations

from enum import IntEnum


class LinkID(IntEnum):
    """A link on the DTC."""

    LINK_0 = 0
    LINK_1 = 1
    LINK_2 = 2
    LINK_3 = 3
    LINK_4 = 4
    LINK_5 = 5
    CFO = 6
    EVB = 7
    UNUSED = 8
    ALL = 255

    def __str__(self) -> str:
        return str(int(self))


ROC_LINKS: tuple[LinkID, ...] = (
    LinkID.LINK_0,
    LinkID.LINK_1,
    LinkID.LINK_2,
    LinkID.LINK_3,
    LinkID.LINK_4,
    LinkID.LINK_5,
)


class PLLID(IntEnum):
    """A phase-locked loop on the DTC."""

    LINK_0 = 0
    LINK_1 = 1
    LINK_2 = 2
    LINK_3 = 3
    LINK_4 = 4
    LINK_5 = 5
    CFO_RX = 6
    CFO_TX = 7
    EVB_TXRX = 8
    PUNCHED_CLOCK = 9
    UNUSED = 10


PLLS: tuple[PLLID, ...] = (
    PLLID.LINK_0,
    PLLID.LINK_1,
    PLLID.LINK_2,
    PLLID.LINK_3,
    PLLID.LINK_4,
    PLLID.LINK_5,
)


class OscillatorType(IntEnum):
    """Oscillators that can be programmed on the DTC."""

    SERDES = 0
    DDR = 1
    TIMING = 2


class ROCEmulationType(IntEnum):
    """How a ROC is emulated."""

    INTERNAL = 0
    FIBER_LOOPBACK = 1
    EXTERNAL = 2


class SerdesClockSpeed(IntEnum):
    """SERDES line rates."""

    GBPS_2_5 = 0
    GBPS_3_125 = 1
    GBPS_4_8 = 2
    UNKNOWN = 3


class Subsystem(IntEnum):
    """Detector subsystem a DTC serves."""

    TRACKER = 0
    CALORIMETER = 1
    CRV = 2
    OTHER = 3
    STM = 4
    EXT_MON = 5


class IICDDRBusAddress(IntEnum):
    """Device addresses on the DDR IIC bus."""

    DDR_OSCILLATOR = 0x59


class IICSERDESBusAddress(IntEnum):
    """Device addresses on the SERDES IIC bus."""

    EVB = 0x55
    CFO = 0x5D
    JITTER_ATTENUATOR = 0x68