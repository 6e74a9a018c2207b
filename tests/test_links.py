import pytest

from mu2e_overlays.links import (
    PLLID,
    PLLS,
    ROC_LINKS,
    IICDDRBusAddress,
    IICSERDESBusAddress,
    LinkID,
    OscillatorType,
    ROCEmulationType,
    SerdesClockSpeed,
    Subsystem,
)


def test_link_str_is_number():
    assert str(LinkID(6)) == "6"
    assert str(LinkID(255)) == "255"
    assert f"{LinkID(3)}" == "3"


def test_link_values():
    assert LinkID(7) is LinkID.EVB
    assert LinkID(8) is LinkID.UNUSED
    assert LinkID(255) is LinkID.ALL


def test_invalid_link_rejected():
    with pytest.raises(ValueError):
        LinkID(9)


def test_roc_links_are_first_six():
    assert list(ROC_LINKS) == [LinkID(i) for i in range(6)]


def test_plls():
    assert list(PLLS) == [PLLID(i) for i in range(6)]
    assert PLLID(9) is PLLID.PUNCHED_CLOCK
    assert PLLID(10) is PLLID.UNUSED


def test_sequential_enums():
    assert [OscillatorType(i) for i in range(3)] == list(OscillatorType)
    assert [ROCEmulationType(i) for i in range(3)] == list(ROCEmulationType)
    assert [SerdesClockSpeed(i) for i in range(4)] == list(SerdesClockSpeed)


def test_subsystem_values():
    assert Subsystem(4) is Subsystem.STM
    assert Subsystem(5) is Subsystem.EXT_MON


def test_iic_addresses():
    assert IICDDRBusAddress(0x59) is IICDDRBusAddress.DDR_OSCILLATOR
    assert IICSERDESBusAddress(0x55) is IICSERDESBusAddress.EVB
    assert IICSERDESBusAddress(0x5D) is IICSERDESBusAddress.CFO
    assert IICSERDESBusAddress(0x68) is IICSERDESBusAddress.JITTER_ATTENUATOR