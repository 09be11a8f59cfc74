from tachoid.core.tacho.messages import (
    GetATRMessage,
    GetATRResult,
    ReadIdentityMessage,
    ReadIdentityResult,
)
from tachoid.core.tacho.records import (
    BirthDate,
    CardHolderIdentification,
    CardIdentification,
    DriverIdentity,
)
from tachoid.core.tacho.sequence import ReadSequence, ReadState
from tachoid.core.tacho.terminal import TachoTerminal

__all__ = [
    "BirthDate",
    "CardHolderIdentification",
    "CardIdentification",
    "DriverIdentity",
    "GetATRMessage",
    "GetATRResult",
    "ReadIdentityMessage",
    "ReadIdentityResult",
    "ReadSequence",
    "ReadState",
    "TachoTerminal",
]
