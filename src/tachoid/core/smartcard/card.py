from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from smartcard.CardConnection import CardConnection
from smartcard.Exceptions import CardConnectionException, NoCardException, SmartcardException
from smartcard.pcsc.PCSCExceptions import BaseSCardException
from smartcard.System import readers

from tachoid.core.errors import IoFailureError, NoCardError, ReaderUnavailableError
from tachoid.core.smartcard.observer import LoggingCardObserver

if TYPE_CHECKING:
    from smartcard.reader.Reader import Reader

lg = logging.getLogger(__name__)


class Card:
    """Wrapper around pyscard: the byte transport to one contact card.

    ``transmit`` returns the full response APDU, status word last, and
    raises a TransportError subclass for every pyscard failure.
    """

    def __init__(self) -> None:
        self._connection: CardConnection | None = None
        self._observer = LoggingCardObserver()

    @property
    def connected(self) -> bool:
        return self._connection is not None

    @staticmethod
    def list_readers() -> list[Reader]:
        try:
            return list(readers())
        except (BaseSCardException, SmartcardException) as exc:
            raise ReaderUnavailableError(f"PC/SC service unavailable: {exc}") from exc

    def connect(self, reader: Reader) -> None:
        connection = reader.createConnection()
        connection.addObserver(self._observer)
        try:
            connection.connect()
        except NoCardException as exc:
            connection.deleteObserver(self._observer)
            raise NoCardError("A smartcard is not present in the reader") from exc
        except (CardConnectionException, BaseSCardException) as exc:
            connection.deleteObserver(self._observer)
            raise ReaderUnavailableError(f"failed to connect to card: {exc}") from exc
        self._connection = connection

    def disconnect(self) -> None:
        if self._connection is not None:
            try:
                self._connection.disconnect()
            except (SmartcardException, BaseSCardException) as exc:
                raise IoFailureError(f"failed to disconnect: {exc}") from exc
            finally:
                self._connection.deleteObserver(self._observer)
                self._connection = None

    def get_atr(self) -> bytes:
        if self._connection is None:
            raise IoFailureError("not connected to a card")
        return bytes(self._connection.getATR())

    def transmit(self, command: bytes) -> bytes:
        if self._connection is None:
            raise IoFailureError("not connected to a card")
        try:
            data, sw1, sw2 = self._connection.transmit(list(command))
        except NoCardException as exc:
            raise NoCardError("card removed during exchange") from exc
        except (SmartcardException, BaseSCardException) as exc:
            raise IoFailureError(f"failed to transmit APDU: {exc}") from exc
        return bytes(data) + bytes([sw1, sw2])
