"""Operating modes and status codes of the DTC, with their text and JSON forms."""

from __future__ import annotations

import re
from enum import IntEnum


class DCSOperationType(IntEnum):
    """Operation carried in the Op word of a DCS request packet."""

    READ = 0
    WRITE = 1
    BLOCK_READ = 2
    BLOCK_WRITE = 3
    DOUBLE_READ = 4
    DOUBLE_WRITE = 5
    INVALID_S2C = 0xC
    TIMEOUT = 0xE
    UNKNOWN = 0xF

    def __str__(self) -> str:
        return _DCS_LABELS.get(self, "Unknown")

    def to_json(self) -> str:
        """The operation name as a quoted JSON string."""
        return f'"{self}"'


_DCS_LABELS = {
    DCSOperationType.READ: "Read",
    DCSOperationType.WRITE: "Write",
    DCSOperationType.BLOCK_READ: "BlockRead",
    DCSOperationType.BLOCK_WRITE: "BlockWrite",
    DCSOperationType.DOUBLE_READ: "DoubleRead",
    DCSOperationType.DOUBLE_WRITE: "DoubleWrite",
}


class DebugType(IntEnum):
    """Kind of debug run the DTC performs."""

    SPECIAL_SEQUENCE = 0
    EXTERNAL_SERIAL = 1
    EXTERNAL_SERIAL_WITH_RESET = 2
    RAM_TEST = 3
    DDR_TEST = 4
    INVALID = 5

    def __str__(self) -> str:
        return _DEBUG_LABELS.get(self, "Unknown")

    @classmethod
    def from_string(cls, text: str) -> DebugType:
        """Parse a debug type from its number or initial letter; INVALID otherwise."""
        if not text:
            return cls.INVALID
        return _DEBUG_BY_CHAR.get(text[0], cls.INVALID)

    def to_json(self) -> str:
        """A JSON key/value pair naming the debug type."""
        return f'"DTC_DebugType":"{self}"'


_DEBUG_LABELS = {
    DebugType.SPECIAL_SEQUENCE: "Special Sequence",
    DebugType.EXTERNAL_SERIAL: "External Serial",
    DebugType.EXTERNAL_SERIAL_WITH_RESET: "External Serial with FIFO Reset",
    DebugType.RAM_TEST: "FPGA SRAM Error Checking",
    DebugType.DDR_TEST: "DDR3 Memory Error Checking",
    DebugType.INVALID: "INVALID!!!",
}

_DEBUG_BY_CHAR = {
    char: member
    for chars, member in (
        ("0sS", DebugType.SPECIAL_SEQUENCE),
        ("1eE", DebugType.EXTERNAL_SERIAL),
        ("2wW", DebugType.EXTERNAL_SERIAL_WITH_RESET),
        ("3rR", DebugType.RAM_TEST),
        ("4dD", DebugType.DDR_TEST),
    )
    for char in chars
}


class PRBSMode(IntEnum):
    """Pseudo-random bit sequence test pattern of a SERDES link."""

    NORMAL = 0
    PRBS_7 = 1
    PRBS_15 = 2
    PRBS_23 = 3
    PRBS_31 = 4
    PCI_EXPRESS = 5
    UI_SQUARE_2 = 6
    UI_SQUARE_20 = 7

    def __str__(self) -> str:
        return _PRBS_LABELS.get(self, "Unknown")

    def to_json(self) -> str:
        """A JSON key/value pair naming the PRBS mode."""
        return f'"DTC_PRBSMode":"{self}"'


_PRBS_LABELS = {
    PRBSMode.NORMAL: "Normal",
    PRBSMode.PRBS_7: "PRBS-7",
    PRBSMode.PRBS_15: "PRBS-15",
    PRBSMode.PRBS_23: "PRBS-23",
    PRBSMode.PRBS_31: "PRBS-31",
    PRBSMode.PCI_EXPRESS: "PCIExpress",
    PRBSMode.UI_SQUARE_2: "2UISquare",
    PRBSMode.UI_SQUARE_20: "20UISquare",
}


class RXBufferStatus(IntEnum):
    """State of a SERDES receive buffer."""

    NOMINAL = 0
    BUFFER_EMPTY = 1
    BUFFER_FULL = 2
    UNDERFLOW = 5
    OVERFLOW = 6
    UNKNOWN = 0x10

    def __str__(self) -> str:
        return _RX_BUFFER_LABELS.get(self, "Unknown")

    def to_json(self) -> str:
        """A JSON key/value pair naming the buffer status."""
        return f'"DTC_RXBufferStatus":"{self}"'


_RX_BUFFER_LABELS = {
    RXBufferStatus.NOMINAL: "Nominal",
    RXBufferStatus.BUFFER_EMPTY: "BufferEmpty",
    RXBufferStatus.BUFFER_FULL: "BufferFull",
    RXBufferStatus.UNDERFLOW: "Underflow",
    RXBufferStatus.OVERFLOW: "Overflow",
}


class RXStatus(IntEnum):
    """Status reported by a SERDES receiver."""

    DATA_OK = 0
    SKP_ADDED = 1
    SKP_REMOVED = 2
    RECEIVER_DETECTED = 3
    DECODE_ERROR = 4
    ELASTIC_OVERFLOW = 5
    ELASTIC_UNDERFLOW = 6
    RX_DISPARITY_ERROR = 7

    def __str__(self) -> str:
        return _RX_STATUS_LABELS.get(self, "Unknown")

    def to_json(self) -> str:
        """A JSON key/value pair naming the receiver status."""
        return f'"DTC_RXStatus":"{self}"'


_RX_STATUS_LABELS = {
    RXStatus.DATA_OK: "DataOK",
    RXStatus.SKP_ADDED: "SKPAdded",
    RXStatus.SKP_REMOVED: "SKPRemoved",
    RXStatus.RECEIVER_DETECTED: "ReceiverDetected",
    RXStatus.DECODE_ERROR: "DecodeErr",
    RXStatus.ELASTIC_OVERFLOW: "ElasticOF",
    RXStatus.ELASTIC_UNDERFLOW: "ElasticUF",
    RXStatus.RX_DISPARITY_ERROR: "RXDisparity",
}


class SERDESLoopbackMode(IntEnum):
    """Loopback setting of a SERDES link."""

    DISABLED = 0
    NEAR_PCS = 1
    NEAR_PMA = 2
    FAR_PMA = 4
    FAR_PCS = 6

    def __str__(self) -> str:
        return _LOOPBACK_LABELS.get(self, "Unknown")

    def to_json(self) -> str:
        """A JSON key/value pair naming the loopback mode."""
        return f'"DTC_SERDESLoopbackMode":"{self}"'


_LOOPBACK_LABELS = {
    SERDESLoopbackMode.DISABLED: "Disabled",
    SERDESLoopbackMode.NEAR_PCS: "NearPCS",
    SERDESLoopbackMode.NEAR_PMA: "NearPMA",
    SERDESLoopbackMode.FAR_PMA: "FarPMA",
    SERDESLoopbackMode.FAR_PCS: "FarPCS",
}


class SimMode(IntEnum):
    """Simulation or emulation mode the DTC is run in."""

    DISABLED = 0
    TRACKER = 1
    CALORIMETER = 2
    COSMIC_VETO = 3
    NO_CFO = 4
    ROC_EMULATOR = 5
    LOOPBACK = 6
    PERFORMANCE = 7
    LARGE_FILE = 8
    TIMEOUT = 9
    EVENT = 10
    INVALID = 11

    def __str__(self) -> str:
        return _SIM_LABELS.get(self, "Disabled")

    @classmethod
    def from_string(cls, text: str) -> SimMode:
        """Parse a mode from its number or initial letter.

        Text that names no mode gives INVALID; the number of INVALID itself
        gives DISABLED.
        """
        if text:
            first = text[0]
            if first == "1" and len(text) > 1:
                if text[1] == "0":
                    return cls.EVENT
            elif first in _SIM_BY_CHAR:
                return _SIM_BY_CHAR[first]

        match = _LEADING_INT.match(text)
        if match is None:
            return cls.INVALID
        number = int(match.group())
        if number == cls.INVALID:
            return cls.DISABLED
        try:
            return cls(number)
        except ValueError:
            return cls.INVALID

    def to_json(self) -> str:
        """A JSON key/value pair naming the simulation mode."""
        return f'"DTC_SimMode":"{self}"'


_LEADING_INT = re.compile(r"\s*[+-]?\d+")

_SIM_LABELS = {
    SimMode.TRACKER: "Tracker",
    SimMode.CALORIMETER: "Calorimeter",
    SimMode.COSMIC_VETO: "CosmicVeto",
    SimMode.NO_CFO: "NoCFO",
    SimMode.ROC_EMULATOR: "ROCEmulator",
    SimMode.LOOPBACK: "Loopback",
    SimMode.PERFORMANCE: "Performance",
    SimMode.LARGE_FILE: "LargeFile",
    SimMode.TIMEOUT: "Timeout",
    SimMode.EVENT: "Event",
}

_SIM_BY_CHAR = {
    char: member
    for chars, member in (
        ("1tT", SimMode.TRACKER),
        ("2cC", SimMode.CALORIMETER),
        ("3vV", SimMode.COSMIC_VETO),
        ("4nN", SimMode.NO_CFO),
        ("5rR", SimMode.ROC_EMULATOR),
        ("6lL", SimMode.LOOPBACK),
        ("7pP", SimMode.PERFORMANCE),
        ("8fF", SimMode.LARGE_FILE),
        ("9oO", SimMode.TIMEOUT),
        ("eE", SimMode.EVENT),
        ("0dD", SimMode.DISABLED),
    )
    for char in chars
}