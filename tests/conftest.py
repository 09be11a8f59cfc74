from __future__ import annotations

import pytest

OK = b"\x90\x00"

CARD_NUMBER = b"1234567890123456"
IDENTIFICATION = b"\x12" + CARD_NUMBER + b"\x00" * 48
HOLDER_IDENTIFICATION = (
    b"DOE".ljust(36)
    + b"JOHN".ljust(36)
    + bytes([0x19, 0x85, 0x03, 0x15])
    + b"en"
)


class FakeTransport:
    """Scripted card: answers each command with the next queued response.

    A queued exception instance is raised instead of returned.
    """

    def __init__(self, responses: list[bytes | Exception]) -> None:
        self._responses = list(responses)
        self.commands: list[bytes] = []

    def transmit(self, command: bytes) -> bytes:
        self.commands.append(bytes(command))
        if not self._responses:
            raise AssertionError(f"unexpected command {command.hex()}")
        response = self._responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def card_responses(
    identification: bytes = IDENTIFICATION,
    holder: bytes = HOLDER_IDENTIFICATION,
) -> list[bytes]:
    """Responses for a complete read, status words included."""
    return [OK, OK, identification + OK, holder + OK]


@pytest.fixture
def transport() -> FakeTransport:
    return FakeTransport(card_responses())
