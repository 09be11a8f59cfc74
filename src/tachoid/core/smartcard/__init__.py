from tachoid.core.smartcard.card import Card
from tachoid.core.smartcard.logging import PROTOCOL, TRACE
from tachoid.core.smartcard.types import APDU, Response

__all__ = ["APDU", "Card", "PROTOCOL", "Response", "TRACE"]
