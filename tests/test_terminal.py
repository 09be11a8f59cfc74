import pytest

from conftest import FakeTransport, card_responses
from tachoid.core.base import Message
from tachoid.core.errors import StatusWordError
from tachoid.core.tacho import (
    GetATRMessage,
    ReadIdentityMessage,
    ReadIdentityResult,
    TachoTerminal,
)
from tachoid.core.tacho.constants import TACHOGRAPH_GEN2_DF


class FakeAgent:
    def __init__(self, transport):
        self._transport = transport

    def get_atr(self):
        return b"\x3B\x9F\x96"

    def transmit(self, command):
        return self._transport.transmit(command)


def test_supported_messages():
    assert set(TachoTerminal(FakeAgent(None)).supported_messages) == {
        GetATRMessage,
        ReadIdentityMessage,
    }


def test_read_identity(transport):
    terminal = TachoTerminal(FakeAgent(transport))
    result = terminal.send(ReadIdentityMessage())
    assert isinstance(result, ReadIdentityResult)
    assert result.identification.card_number == "1234567890123456"
    assert result.holder.surname == "DOE"


def test_read_identity_generation_2(transport):
    terminal = TachoTerminal(FakeAgent(transport))
    terminal.send(ReadIdentityMessage(df_name=TACHOGRAPH_GEN2_DF))
    assert transport.commands[0].endswith(TACHOGRAPH_GEN2_DF)


def test_read_identity_status_check():
    transport = FakeTransport([b"\x6A\x82"])
    with pytest.raises(StatusWordError):
        TachoTerminal(FakeAgent(transport)).send(ReadIdentityMessage())


def test_read_identity_lenient():
    transport = FakeTransport([b"\x6A\x82", b"\x6A\x82"] + card_responses()[2:])
    terminal = TachoTerminal(FakeAgent(transport), verify_status=False)
    assert terminal.send(ReadIdentityMessage()).holder.first_names == "JOHN"


def test_get_atr():
    terminal = TachoTerminal(FakeAgent(None))
    assert terminal.send(GetATRMessage()).atr == b"\x3B\x9F\x96"


def test_unsupported_message():
    with pytest.raises(ValueError, match="unsupported message"):
        TachoTerminal(FakeAgent(None)).send(Message())
