import pytest

from mu2e_overlays.event_window_tag import EventWindowTag


def test_default_is_zero():
    assert int(EventWindowTag()) == 0


def test_truncates_to_48_bits():
    assert EventWindowTag((1 << 48) | 7) == EventWindowTag(7)


def test_from_parts_layout():
    low, high = 0x12345678, 0xABCD
    tag = EventWindowTag.from_parts(low, high)
    assert tag.to_bytes() == low.to_bytes(4, "little") + high.to_bytes(2, "little")


def test_bytes_round_trip():
    raw = bytes(range(1, 7))
    assert EventWindowTag.from_bytes(raw).to_bytes() == raw


def test_from_bytes_with_offset():
    tag = EventWindowTag(123456789)
    data = b"\xff\xff" + tag.to_bytes() + b"\xee\xee"
    assert EventWindowTag.from_bytes(data, 2) == tag


def test_from_bytes_too_short():
    with pytest.raises(ValueError):
        EventWindowTag.from_bytes(b"\x00" * 5)
    with pytest.raises(ValueError):
        EventWindowTag.from_bytes(b"\x00" * 8, 4)


def test_to_json_number():
    assert EventWindowTag(5).to_json() == '\t"timestamp": 5'


def test_to_json_array():
    tag = EventWindowTag.from_bytes(bytes(range(1, 7)))
    assert tag.to_json(True) == '\t"timestamp": [\n1,\n2,\n3,\n4,\n5,\n6\n]'


def test_to_packet_format():
    tag = EventWindowTag.from_bytes(bytes(range(1, 7)))
    assert tag.to_packet_format() == (
        "0x000002\t0x000001\n0x000004\t0x000003\n0x000006\t0x000005\n"
    )


def test_addition_wraps():
    top = EventWindowTag((1 << 48) - 1)
    assert top + 1 == EventWindowTag(0)
    assert EventWindowTag(10) + 5 == EventWindowTag(15)


def test_ordering_and_equality():
    assert EventWindowTag(1) < EventWindowTag(2)
    assert not EventWindowTag(2) < EventWindowTag(2)
    assert sorted([EventWindowTag(3), EventWindowTag(1)]) == [
        EventWindowTag(1),
        EventWindowTag(3),
    ]
    assert len({EventWindowTag(4), EventWindowTag(4)}) == 1