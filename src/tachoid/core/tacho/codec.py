"""Field decoding for fixed-layout card records."""

from __future__ import annotations

import codecs

from tachoid.core.errors import InvalidBcdDigit, InvalidEncoding, InvalidParameter, TruncatedData

DEFAULT_ENCODING = "ascii"


def take_n(n: int, data: bytes, what: str = "data") -> tuple[bytes, bytes]:
    """Split the first ``n`` bytes off ``data`` and return (head, tail)."""
    if n < 0:
        raise InvalidParameter(f"cannot take {n} bytes")
    if len(data) < n:
        raise TruncatedData(n, len(data), what)
    return bytes(data[:n]), bytes(data[n:])


# Byte pairs that common multi-byte codecs (UTF-8, GBK, Shift JIS, EUC)
# turn into a single character.
_MULTIBYTE_PROBES = (b"\xc3\xa9", b"\x81\x40", b"\xa4\xa1", b"\x8e\xa1", b"A\x00")


def check_encoding(encoding: str) -> str:
    """Return the canonical name of a single-byte-per-character codec."""
    try:
        name = codecs.lookup(encoding).name
        lengths = [len(probe.decode(name, errors="replace")) for probe in _MULTIBYTE_PROBES]
    except (LookupError, UnicodeError) as exc:
        raise InvalidParameter(f"unknown text encoding: {encoding}") from exc
    if lengths != [len(probe) for probe in _MULTIBYTE_PROBES]:
        raise InvalidParameter(f"not a single-byte encoding: {encoding}")
    return name


def decode_text(raw: bytes, encoding: str = DEFAULT_ENCODING) -> str:
    """Decode fixed-width text and strip the padding around it."""
    try:
        text = raw.decode(encoding, errors="strict")
    except UnicodeDecodeError as exc:
        raise InvalidEncoding(raw, encoding) from exc
    return text.strip()


def decode_bcd(raw: bytes) -> str:
    """Decode packed BCD, high nibble first, into a digit string."""
    digits = []
    for i, byte in enumerate(raw):
        for position, nibble in ((2 * i, byte >> 4), (2 * i + 1, byte & 0x0F)):
            if nibble > 9:
                raise InvalidBcdDigit(raw, position, nibble)
            digits.append(str(nibble))
    return "".join(digits)
