"""Error taxonomy for reading a tachograph card.

Every failure aborts the read sequence. Errors raised while the sequence
is running are tagged with the ``step`` that was executing so the caller
can report where the read stopped.
"""

from __future__ import annotations


class TachoError(Exception):
    """Base class for all tachoid errors."""

    step: object | None = None

    def __str__(self) -> str:
        text = super().__str__()
        if self.step is not None:
            return f"{text} (step: {self.step})"
        return text


class InvalidParameter(TachoError, ValueError):
    """A command or slice argument is out of range."""


# -- transport --

class TransportError(TachoError):
    """The byte exchange with the reader or card failed."""


class NoCardError(TransportError):
    """No card is present in the reader."""


class ReaderUnavailableError(TransportError):
    """The PC/SC service or the requested reader cannot be reached."""


class IoFailureError(TransportError):
    """The command/response exchange itself failed."""


# -- decoding --

class TruncatedData(TachoError):
    """Fewer bytes are available than the record layout needs."""

    def __init__(self, needed: int, available: int, what: str = "data") -> None:
        super().__init__(f"{what} too short: need {needed} bytes, have {available}")
        self.needed = needed
        self.available = available


class InvalidEncoding(TachoError):
    """Text bytes are not valid in the expected character encoding."""

    def __init__(self, raw: bytes, encoding: str) -> None:
        super().__init__(f"bytes {raw.hex(' ').upper()} are not valid {encoding}")
        self.raw = raw
        self.encoding = encoding


class InvalidBcdDigit(TachoError):
    """A BCD nibble holds a value above 9."""

    def __init__(self, raw: bytes, position: int, value: int) -> None:
        super().__init__(
            f"invalid BCD nibble {value:X} at position {position} in {raw.hex().upper()}"
        )
        self.raw = raw
        self.position = position
        self.value = value


# -- protocol --

class StatusWordError(TachoError):
    """The card answered with a status word other than 90 00."""

    def __init__(self, sw: int, label: str) -> None:
        super().__init__(f"{label} failed: SW={sw:04X}")
        self.sw = sw
        self.label = label


class SequenceError(TachoError):
    """A read step was requested out of order."""
