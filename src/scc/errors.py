"""Exception types raised by the scanner."""


class ScanError(Exception):
    """Fatal scan failure; the scanner discards its output when raised."""


class UnknownStandardError(ScanError, ValueError):
    """The requested language standard is not recognised."""
