from __future__ import annotations

from tachoid.core.base import Agent, Terminal
from tachoid.core.base.terminal import handles
from tachoid.core.tacho.messages import (
    GetATRMessage,
    GetATRResult,
    ReadIdentityMessage,
    ReadIdentityResult,
)
from tachoid.core.tacho.sequence import ReadSequence


class TachoTerminal(Terminal):
    """Terminal for tachograph driver cards (read-only)."""

    def __init__(self, agent: Agent, verify_status: bool = True) -> None:
        super().__init__(agent)
        self._verify_status = verify_status

    @handles(GetATRMessage)
    def _get_atr(self, message: GetATRMessage) -> GetATRResult:
        return GetATRResult(atr=self._agent.get_atr())

    @handles(ReadIdentityMessage)
    def _read_identity(self, message: ReadIdentityMessage) -> ReadIdentityResult:
        sequence = ReadSequence(
            self._agent.transmit,
            message.df_name,
            verify_status=self._verify_status,
            encoding=message.encoding,
        )
        identity = sequence.run()
        return ReadIdentityResult(
            identification=identity.identification, holder=identity.holder,
        )
