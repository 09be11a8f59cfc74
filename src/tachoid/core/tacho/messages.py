from __future__ import annotations

from dataclasses import dataclass

from tachoid.core.base import Message, Result
from tachoid.core.tacho.codec import DEFAULT_ENCODING
from tachoid.core.tacho.constants import TACHOGRAPH_DF
from tachoid.core.tacho.records import CardHolderIdentification, CardIdentification


@dataclass(frozen=True)
class GetATRMessage(Message):
    """Request the ATR of the connected card."""


@dataclass(frozen=True)
class GetATRResult(Result):
    atr: bytes


@dataclass(frozen=True)
class ReadIdentityMessage(Message):
    """Read card identification and card holder identification from EF Identification."""

    df_name: bytes = TACHOGRAPH_DF
    encoding: str = DEFAULT_ENCODING


@dataclass(frozen=True)
class ReadIdentityResult(Result):
    identification: CardIdentification
    holder: CardHolderIdentification
