from __future__ import annotations

from dataclasses import dataclass

from tachoid.core.errors import InvalidParameter, TruncatedData

MAX_SHORT_DATA = 255
MAX_SHORT_LE = 256


@dataclass(frozen=True)
class APDU:
    """ISO 7816 short command APDU."""

    cla: int
    ins: int
    p1: int
    p2: int
    data: bytes = b""
    le: int | None = None

    def to_bytes(self) -> bytes:
        for name in ("cla", "ins", "p1", "p2"):
            value = getattr(self, name)
            if not 0 <= value <= 0xFF:
                raise InvalidParameter(f"{name} out of range: {value}")
        if len(self.data) > MAX_SHORT_DATA:
            raise InvalidParameter(
                f"command data too long for a short APDU: {len(self.data)} bytes"
            )
        if self.le is not None and not 0 <= self.le <= MAX_SHORT_LE:
            raise InvalidParameter(f"Le out of range for a short APDU: {self.le}")
        buf = bytearray([self.cla, self.ins, self.p1, self.p2])
        if self.data:
            buf.append(len(self.data))
            buf.extend(self.data)
        if self.le is not None:
            buf.append(0x00 if self.le == MAX_SHORT_LE else self.le)
        return bytes(buf)

    def __repr__(self) -> str:
        return self.to_bytes().hex(" ").upper()


@dataclass(frozen=True)
class Response:
    """ISO 7816 response APDU: body plus trailing status word."""

    data: bytes
    sw1: int
    sw2: int

    @classmethod
    def from_bytes(cls, raw: bytes) -> Response:
        if len(raw) < 2:
            raise TruncatedData(2, len(raw), "response")
        return cls(data=bytes(raw[:-2]), sw1=raw[-2], sw2=raw[-1])

    @property
    def sw(self) -> int:
        return (self.sw1 << 8) | self.sw2

    @property
    def success(self) -> bool:
        return self.sw1 == 0x90 and self.sw2 == 0x00

    def __repr__(self) -> str:
        sw = f"SW={self.sw:04X}"
        if self.data:
            return f"{self.data.hex(' ').upper()} {sw}"
        return sw
