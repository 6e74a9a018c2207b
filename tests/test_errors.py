import pytest

from mu2e_overlays.errors import (
    DataCorruptionError,
    DTCError,
    DTCIOError,
    WrongPacketSizeError,
    WrongPacketTypeError,
    WrongVersionError,
)


def test_wrong_version_message():
    err = WrongVersionError("v1", "v2")
    assert str(err) == (
        "DTCwrongVersionException: Unexpected firmware version encountered: "
        "v2 != v1 (expected)"
    )
    assert err.expected == "v1"
    assert err.encountered == "v2"


def test_wrong_packet_type_message():
    err = WrongPacketTypeError(3, 5)
    assert str(err) == (
        "DTCWrongPacketTypeException: Unexpected packet type encountered: "
        "5 != 3 (expected)"
    )


def test_wrong_packet_size_message():
    err = WrongPacketSizeError(16, 32)
    assert str(err) == (
        "DTC_WrongPacketSizeException: Unexpected block size encountered: "
        "32 != 16 (expected)"
    )


def test_io_error_with_code():
    err = DTCIOError(42)
    assert str(err) == (
        "DTCIOErrorException: Unable to communicate with the DTC: Error Code: 42"
    )
    assert err.retcode == 42


def test_io_error_with_message():
    err = DTCIOError("device gone")
    assert str(err) == "DTCIOErrorException: device gone"
    assert err.retcode is None


def test_data_corruption_message():
    assert str(DataCorruptionError()) == (
        "DTCDataCorruptionException: Corruption detected in data stream from DTC"
    )


@pytest.mark.parametrize(
    "factory, args, prefix",
    [
        (WrongVersionError, ("a", "b"), "DTCwrongVersionException: "),
        (WrongPacketTypeError, (1, 2), "DTCWrongPacketTypeException: "),
        (WrongPacketSizeError, (1, 2), "DTC_WrongPacketSizeException: "),
        (DTCIOError, (1,), "DTCIOErrorException: "),
        (DataCorruptionError, (), "DTCDataCorruptionException: "),
    ],
)
def test_all_errors_catchable_as_base(factory, args, prefix):
    error = factory(*args)
    with pytest.raises(DTCError) as base_info:
        raise error
    assert base_info.value is error
    assert str(base_info.value).startswith(prefix)
    with pytest.raises(RuntimeError) as runtime_info:
        raise error
    assert runtime_info.value is error