from __future__ import annotations

import logging
from typing import Protocol

from tachoid.core.errors import NoCardError, ReaderUnavailableError, TransportError
from tachoid.core.smartcard import Card

lg = logging.getLogger(__name__)


class Transport(Protocol):
    """Synchronous byte exchange with a card.

    ``transmit`` returns the response APDU with SW1 SW2 as the last two
    bytes, or raises a TransportError.
    """

    def transmit(self, command: bytes) -> bytes: ...


def select_reader(available: list, selector: str | None) -> list:
    """Filter readers by index ("0", "1", ...) or case-insensitive name substring."""
    if selector is None:
        return list(available)
    if selector.isdigit():
        index = int(selector)
        if index >= len(available):
            raise ReaderUnavailableError(f"no reader with index {index}")
        return [available[index]]
    wanted = selector.lower()
    matches = [r for r in available if wanted in str(r).lower()]
    if not matches:
        raise ReaderUnavailableError(f"no reader matching {selector!r}")
    return matches


class Agent:
    """Agent that manages card connectivity and APDU transmission.

    Protocol operations live in standalone classes (ISO7816, ReadSequence)
    that receive agent.transmit as a callable.
    """

    def __init__(self, card: Card, reader: str | None = None) -> None:
        self._card = card
        self._reader = reader
        self.reader_name: str | None = None

    def connect(self) -> None:
        """Discover a reader with a card present and connect."""
        available = self._card.list_readers()
        if not available:
            raise ReaderUnavailableError("No readers are connected")
        candidates = select_reader(available, self._reader)
        last_error: TransportError | None = None
        for reader in candidates:
            try:
                self._card.connect(reader)
            except NoCardError as exc:
                lg.debug("no card on %s", reader)
                last_error = exc
                continue
            except TransportError as exc:
                lg.debug("cannot connect to %s: %s", reader, exc)
                last_error = exc
                continue
            self.reader_name = str(reader)
            lg.info("Using reader %s", self.reader_name)
            return
        if last_error is None or isinstance(last_error, NoCardError):
            raise NoCardError("A smartcard is not present in the reader") from last_error
        raise last_error

    def disconnect(self) -> None:
        """Disconnect from the card."""
        try:
            self._card.disconnect()
        finally:
            self.reader_name = None

    def get_atr(self) -> bytes:
        """Return the ATR of the connected card."""
        return self._card.get_atr()

    def transmit(self, command: bytes) -> bytes:
        """Send a command APDU and return the raw response APDU."""
        return self._card.transmit(command)
