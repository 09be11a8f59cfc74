"""Read sequence for EF Identification of a tachograph driver card.

SELECT of the EF is relative to the selected DF and READ BINARY is relative
to the selected EF, so the steps only run in one order:

    START -> DF_SELECTED -> EF_SELECTED -> IDENTIFICATION_READ
          -> HOLDER_IDENTIFICATION_READ -> DONE

Each transition method checks the current state before touching the card.
The first failure moves the sequence to FAILED and re-raises the error
tagged with the step name.
"""

from __future__ import annotations

import enum
import logging
from collections.abc import Callable
from typing import TypeVar

from tachoid.core.base.iso7816 import ISO7816
from tachoid.core.errors import SequenceError, TachoError
from tachoid.core.tacho.codec import DEFAULT_ENCODING
from tachoid.core.tacho.constants import (
    CARD_IDENTIFICATION_LENGTH,
    CARD_IDENTIFICATION_OFFSET,
    DRIVER_CARD_HOLDER_IDENTIFICATION_LENGTH,
    DRIVER_CARD_HOLDER_IDENTIFICATION_OFFSET,
    IDENTIFICATION_EF,
    TACHOGRAPH_DF,
)
from tachoid.core.tacho.records import (
    CardHolderIdentification,
    CardIdentification,
    DriverIdentity,
    parse_card_holder_identification,
    parse_card_identification,
)

lg = logging.getLogger(__name__)

T = TypeVar("T")


class ReadState(enum.Enum):
    START = "start"
    DF_SELECTED = "DF selected"
    EF_SELECTED = "EF selected"
    IDENTIFICATION_READ = "identification read"
    HOLDER_IDENTIFICATION_READ = "holder identification read"
    DONE = "done"
    FAILED = "failed"


class ReadSequence:
    """Fetch card identification and card holder identification, in order."""

    def __init__(
        self,
        transmit: Callable[[bytes], bytes],
        df_name: bytes = TACHOGRAPH_DF,
        *,
        verify_status: bool = True,
        encoding: str = DEFAULT_ENCODING,
    ) -> None:
        self._iso = ISO7816(transmit, verify_status=verify_status)
        self._df_name = df_name
        self._encoding = encoding
        self._state = ReadState.START
        self._identification: CardIdentification | None = None
        self._holder: CardHolderIdentification | None = None

    @property
    def state(self) -> ReadState:
        return self._state

    def _transition(
        self, step: str, expected: ReadState, target: ReadState, action: Callable[[], T],
    ) -> T:
        if self._state is not expected:
            raise SequenceError(
                f"cannot {step} in state '{self._state.value}', "
                f"expected '{expected.value}'"
            )
        try:
            result = action()
        except Exception as exc:
            self._state = ReadState.FAILED
            if isinstance(exc, TachoError) and exc.step is None:
                exc.step = step
            raise
        lg.debug("%s -> %s", step, target.value)
        self._state = target
        return result

    # -- transitions --

    def select_df(self) -> None:
        self._transition(
            "select DF", ReadState.START, ReadState.DF_SELECTED,
            lambda: self._iso.send_select_df(self._df_name),
        )

    def select_ef(self) -> None:
        self._transition(
            "select EF", ReadState.DF_SELECTED, ReadState.EF_SELECTED,
            lambda: self._iso.send_select_ef(IDENTIFICATION_EF),
        )

    def read_identification(self) -> CardIdentification:
        def action() -> CardIdentification:
            data = self._iso.send_read_binary(
                CARD_IDENTIFICATION_OFFSET, CARD_IDENTIFICATION_LENGTH,
            )
            return parse_card_identification(data, self._encoding)

        self._identification = self._transition(
            "read card identification",
            ReadState.EF_SELECTED, ReadState.IDENTIFICATION_READ, action,
        )
        return self._identification

    def read_holder_identification(self) -> CardHolderIdentification:
        def action() -> CardHolderIdentification:
            data = self._iso.send_read_binary(
                DRIVER_CARD_HOLDER_IDENTIFICATION_OFFSET,
                DRIVER_CARD_HOLDER_IDENTIFICATION_LENGTH,
            )
            return parse_card_holder_identification(data, self._encoding)

        self._holder = self._transition(
            "read card holder identification",
            ReadState.IDENTIFICATION_READ, ReadState.HOLDER_IDENTIFICATION_READ, action,
        )
        return self._holder

    def finish(self) -> DriverIdentity:
        return self._transition(
            "finish", ReadState.HOLDER_IDENTIFICATION_READ, ReadState.DONE,
            lambda: DriverIdentity(self._identification, self._holder),
        )

    def run(self) -> DriverIdentity:
        """Execute every step from START to DONE."""
        self.select_df()
        self.select_ef()
        self.read_identification()
        self.read_holder_identification()
        return self.finish()
