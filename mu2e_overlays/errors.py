"""Exceptions raised while talking to or decoding data from a DTC."""

from __future__ import annotations


class DTCError(RuntimeError):
    """Base class for every DTC-related error."""


class WrongVersionError(DTCError):
    """The firmware version found differs from the one expected."""

    def __init__(self, expected: str, encountered: str) -> None:
        self.expected = expected
        self.encountered = encountered
        super().__init__(
            "DTCwrongVersionException: Unexpected firmware version encountered: "
            f"{encountered} != {expected} (expected)"
        )


class WrongPacketTypeError(DTCError):
    """A packet was decoded whose header type differs from the one expected."""

    def __init__(self, expected: int, encountered: int) -> None:
        self.expected = expected
        self.encountered = encountered
        super().__init__(
            "DTCWrongPacketTypeException: Unexpected packet type encountered: "
            f"{encountered} != {expected} (expected)"
        )


class WrongPacketSizeError(DTCError):
    """A data header's packet count disagrees with its block size."""

    def __init__(self, expected: int, encountered: int) -> None:
        self.expected = expected
        self.encountered = encountered
        super().__init__(
            "DTC_WrongPacketSizeException: Unexpected block size encountered: "
            f"{encountered} != {expected} (expected)"
        )


class DTCIOError(DTCError):
    """Reading from or writing to the DTC gave an unexpected result."""

    def __init__(self, reason: int | str) -> None:
        if isinstance(reason, int):
            self.retcode: int | None = reason
            message = (
                "DTCIOErrorException: Unable to communicate with the DTC: "
                f"Error Code: {reason}"
            )
        else:
            self.retcode = None
            message = f"DTCIOErrorException: {reason}"
        super().__init__(message)


class DataCorruptionError(DTCError):
    """Corrupt data was detected in the stream coming from the DTC."""

    def __init__(self) -> None:
        super().__init__(
            "DTCDataCorruptionException: Corruption detected in data stream from DTC"
        )