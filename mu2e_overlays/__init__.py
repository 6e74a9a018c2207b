"""Data types, register decoders and fragment overlays for Mu2e DTC readout data."""

__version__ = "0.1.0"

__all__ = [
    "errors",
    "links",
    "event_window_tag",
    "trkdtc",
    "modes",
    "status",
    "utilities",
    "stm",
]