from __future__ import annotations

import logging
from collections.abc import Callable

from tachoid.core.errors import InvalidParameter, StatusWordError
from tachoid.core.smartcard import APDU, Response
from tachoid.core.smartcard.logging import PROTOCOL
from tachoid.core.smartcard.observer import format_sw

lg = logging.getLogger(__name__)

SELECT_DF_HEADER = bytes([0x00, 0xA4, 0x04, 0x0C])
SELECT_EF_UNDER_DF_HEADER = bytes([0x00, 0xA4, 0x02, 0x0C])
READ_BINARY_HEADER = bytes([0x00, 0xB0])

MAX_OFFSET = 0x7FFF


# -- builders --

def _build_select(header: bytes, selector: bytes, what: str) -> bytes:
    if not selector:
        raise InvalidParameter(f"{what} must not be empty")
    cla, ins, p1, p2 = header
    return APDU(cla=cla, ins=ins, p1=p1, p2=p2, data=bytes(selector)).to_bytes()


def build_select_df(name: bytes) -> bytes:
    """SELECT by DF name (00 A4 04 0C), no response data requested."""
    return _build_select(SELECT_DF_HEADER, name, "DF name")


def build_select_ef_under_df(fid: bytes) -> bytes:
    """SELECT EF under the current DF (00 A4 02 0C), no response data requested."""
    return _build_select(SELECT_EF_UNDER_DF_HEADER, fid, "EF identifier")


def build_read_binary(offset: int, length: int, *, with_le: bool = False) -> bytes:
    """READ BINARY (00 B0) from the currently selected EF.

    The default form is ``00 B0 <offset> <length>`` with single-byte values.
    With ``with_le`` the command carries a 15-bit offset in P1/P2 and the
    length as Le (``00 B0 P1 P2 Le``), which is what the card expects on
    the wire.
    """
    if with_le:
        if not 0 <= offset <= MAX_OFFSET:
            raise InvalidParameter(f"offset out of range: {offset}")
        if not 1 <= length <= 256:
            raise InvalidParameter(f"length out of range: {length}")
        apdu = APDU(cla=0x00, ins=0xB0, p1=offset >> 8, p2=offset & 0xFF, le=length)
        return apdu.to_bytes()
    if not 0 <= offset <= 0xFF:
        raise InvalidParameter(f"offset out of range: {offset}")
    if not 0 <= length <= 0xFF:
        raise InvalidParameter(f"length out of range: {length}")
    return READ_BINARY_HEADER + bytes([offset, length])


class ISO7816:
    """ISO 7816-4 file access used by the read sequence.

    Each ``send_`` method issues exactly one APDU and returns the bytes to
    decode. With ``verify_status`` the status word must be 90 00 and is
    stripped; without it the raw response is returned untouched.
    """

    def __init__(
        self, transmit: Callable[[bytes], bytes], verify_status: bool = True,
    ) -> None:
        self._transmit = transmit
        self._verify_status = verify_status

    def _send(self, label: str, command: bytes) -> bytes:
        raw = self._transmit(command)
        if not self._verify_status:
            lg.log(PROTOCOL, "%s (%d bytes, status not checked)", label, len(raw))
            return raw
        resp = Response.from_bytes(raw)
        lg.log(PROTOCOL, "%s %s", label, format_sw(resp.sw1, resp.sw2))
        if not resp.success:
            raise StatusWordError(resp.sw, label)
        return resp.data

    # -- commands --

    def send_select_df(self, name: bytes) -> bytes:
        return self._send(f"SELECT DF {name.hex().upper()}", build_select_df(name))

    def send_select_ef(self, fid: bytes) -> bytes:
        return self._send(f"SELECT EF {fid.hex().upper()}", build_select_ef_under_df(fid))

    def send_read_binary(self, offset: int, length: int) -> bytes:
        """Read ``length`` bytes at ``offset`` of the current EF."""
        command = build_read_binary(offset, length, with_le=True)
        return self._send(f"READ BINARY offset={offset:04X} le={length:02X}", command)
