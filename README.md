# mu2e_overlays

Pure-Python types for working with Mu2e DTC (Data Transfer Controller)
readout data: link and subsystem identifiers, the 48-bit event window tag,
status register decoders, mode enumerations with their text and JSON forms,
and read-only views of tracker-DTC and STM fragment payloads.

It has no dependencies outside the standard library.

## Installation

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Modules

- `mu2e_overlays.errors` – exceptions derived from `DTCError` (itself a
  `RuntimeError`): `WrongVersionError`, `WrongPacketTypeError`,
  `WrongPacketSizeError`, `DTCIOError` (built from a return code or a
  message) and `DataCorruptionError`.
- `mu2e_overlays.links` – `IntEnum` identifiers: `LinkID`, `PLLID`,
  `OscillatorType`, `ROCEmulationType`, `SerdesClockSpeed`, `Subsystem`,
  `IICDDRBusAddress` and `IICSERDESBusAddress`, plus the tuples `ROC_LINKS`
  and `PLLS` of the six ROC links.
- `mu2e_overlays.event_window_tag` – `EventWindowTag`, a frozen, ordered
  dataclass truncating its value to 48 bits. Build one with
  `EventWindowTag(value)`, `from_parts(low, high)` or
  `from_bytes(data, offset)`; convert with `to_bytes()` (six little-endian
  bytes), `to_json(array_mode)` and `to_packet_format()`. Adding an integer
  gives a new tag.
- `mu2e_overlays.modes` – `DCSOperationType`, `DebugType`, `PRBSMode`,
  `RXBufferStatus`, `RXStatus`, `SERDESLoopbackMode` and `SimMode`. `str()`
  gives each value's label and `to_json()` its JSON fragment;
  `DebugType.from_string` and `SimMode.from_string` parse a number or an
  initial letter.
- `mu2e_overlays.status` – register decoders: `CharacterNotInTableError`
  and `SERDESRXDisparityError` (two bits per link, via
  `from_register(data, link)`), `DDRFlags`, `FIFOFullErrorFlags` and
  `LinkEnableMode` (each with `to_json()`), `EVBStatus` and `LinkStatus`
  (decoded with `from_word`, tested with `flag in status` using
  `EVBStatusFlag` / `LinkStatusFlag`), and `EventMode` with its mode4 bit
  checks.
- `mu2e_overlays.utilities` – `format_bytes`, `format_byte_string`,
  `format_time`, `format_time_string`; `hexdump_lines` and `print_buffer`
  (which logs through the `logging` module); short and long command-line
  option helpers (`get_option_value`, `get_option_string`,
  `get_long_option_value`, …) that return the value together with the index
  of the last argument consumed; and `write_dma_buffer_size_words`, which
  writes the 64-bit DMA size word(s) into a binary stream.
- `mu2e_overlays.trkdtc` – `TrkDtcFragment`, a view of a payload of
  register address/value pairs (`n_reg`, `register_entry`, `reg`, `val`,
  iteration), with `TrkDtcMetadata` and `RegisterEntry`. An index out of
  range raises `IndexError`.
- `mu2e_overlays.stm` – `STMFragment`, a view of a payload made of a
  20-word `TriggerHeader`, an 8-word `SliceHeader` and the ADC samples
  returned by `samples()`.

## Example

```python
from mu2e_overlays.event_window_tag import EventWindowTag
from mu2e_overlays.modes import SimMode
from mu2e_overlays.utilities import format_byte_string

tag = EventWindowTag.from_parts(0x12345678, 0x9ABC)
print(tag.to_json(False))
print(tag.to_packet_format())

print(SimMode.from_string("tracker").to_json())  # "DTC_SimMode":"Tracker"

print(format_byte_string(3 * 1024 * 1024, "/s"))
```

## What it does not do

The package only describes and decodes data. It does not talk to DTC
hardware, has no device driver or register access, provides no command-line
program, and does not decode DTC packets, events or sub-events, nor keep a
registry of fragment type codes. Fragment views take the payload bytes
(and, for tracker-DTC fragments, the metadata) that the caller supplies.