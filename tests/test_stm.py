import struct

import pytest

from mu2e_overlays.stm import SliceHeader, STMFragment, TriggerHeader


def _trigger_words(**overrides):
    words = [0] * 20
    for index, value in overrides.items():
        words[int(index[1:])] = value
    return words


def _pack(words):
    return struct.pack(f"<{len(words)}H", *words)


def test_trigger_header_from_bytes_round_trip():
    words = list(range(100, 120))
    header = TriggerHeader.from_bytes(_pack(words))
    assert header.words == tuple(words)


def test_trigger_header_32_bit_fields_low_word_first():
    words = list(range(1, 21))
    header = TriggerHeader(tuple(words))
    for method, low in (
        (header.test_word, 0),
        (header.data_size, 2),
        (header.slice_number, 4),
        (header.trigger_number, 6),
        (header.adc_offset, 13),
    ):
        value = method()
        assert value & 0xFFFF == words[low]
        assert value >> 16 == words[low + 1]


def test_trigger_header_64_bit_fields():
    words = [0x1111 * (i % 15 + 1) for i in range(20)]
    header = TriggerHeader(tuple(words))
    trigger_time = header.trigger_time()
    unix_time = header.unix_time()
    for i in range(4):
        assert (trigger_time >> (16 * i)) & 0xFFFF == words[9 + i]
        assert (unix_time >> (16 * i)) & 0xFFFF == words[16 + i]
    assert trigger_time >> 64 == 0


def test_trigger_header_mode_channel_type():
    mode, channel, kind = 0xA, 0x5, 0x3C
    header = TriggerHeader(tuple(_trigger_words(w8=(mode << 12) | (channel << 8) | kind)))
    assert header.mode() == mode
    assert header.channel() == channel
    assert header.type() == kind


def test_dropped_packets():
    header = TriggerHeader(tuple(_trigger_words(w15=42)))
    assert header.dropped_packets() == 42


def test_describe():
    header = TriggerHeader(tuple(_trigger_words(w0=0xAB, w1=0xCD, w3=7)))
    assert header.describe() == "Data size is 7\n Test word is ab10cd\n"
    assert str(header) == header.describe()


def test_trigger_header_wrong_length():
    with pytest.raises(ValueError):
        TriggerHeader((0,) * 19)


def test_trigger_header_word_out_of_range():
    with pytest.raises(ValueError):
        TriggerHeader((0x10000,) + (0,) * 19)


def test_trigger_header_short_bytes():
    with pytest.raises(ValueError):
        TriggerHeader.from_bytes(b"\x00" * 39)


def test_slice_header_fields():
    words = [11, 22, 3, 0, 0x1234, 0x5678, 0x9ABC, 0x0DEF]
    header = SliceHeader.from_bytes(_pack(words))
    assert header.slice_number() & 0xFFFF == 11
    assert header.slice_number() >> 16 == 22
    assert header.slice_size() == 3
    adc = header.adc_time()
    for i in range(4):
        assert (adc >> (16 * i)) & 0xFFFF == words[4 + i]


def test_slice_header_short_bytes():
    with pytest.raises(ValueError):
        SliceHeader.from_bytes(b"\x00" * 15)


def _fragment_bytes(samples, declared=None):
    trigger = _trigger_words(w3=1)
    size = len(samples) if declared is None else declared
    slice_words = [1, 0, size & 0xFFFF, size >> 16, 0, 0, 0, 0]
    return _pack(trigger) + _pack(slice_words) + _pack(list(samples))


def test_fragment_samples():
    samples = (1, 2, 3, 0xFFFF)
    fragment = STMFragment(_fragment_bytes(samples))
    assert fragment.samples() == samples
    assert fragment.slice_header().slice_size() == len(samples)
    assert fragment.trigger_header().data_size() == 1 << 16


def test_fragment_ignores_trailing_data():
    data = _fragment_bytes((5, 6), declared=1)
    assert STMFragment(data).samples() == (5,)


def test_fragment_too_short_for_samples():
    data = _fragment_bytes((5, 6), declared=3)
    with pytest.raises(ValueError):
        STMFragment(data).samples()


def test_fragment_missing_slice_header():
    fragment = STMFragment(_pack(_trigger_words()))
    with pytest.raises(ValueError):
        fragment.slice_header()