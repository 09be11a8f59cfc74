"""Tachograph identification records and their byte layouts."""

from __future__ import annotations

import datetime
import enum
from dataclasses import dataclass

from tachoid.core.tacho.codec import DEFAULT_ENCODING, decode_bcd, decode_text, take_n


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------

class Rule(enum.Enum):
    """How the raw bytes of a field become a value."""

    RAW = "raw"
    TEXT = "text"
    BCD = "bcd"


@dataclass(frozen=True)
class Field:
    name: str
    length: int
    rule: Rule = Rule.RAW


@dataclass(frozen=True)
class RecordLayout:
    """Ordered fixed-width fields, applied left to right."""

    name: str
    fields: tuple[Field, ...]

    @property
    def length(self) -> int:
        return sum(f.length for f in self.fields)


CARD_IDENTIFICATION = RecordLayout("card identification", (
    Field("issuing_member_state", 1),
    Field("card_number", 16, Rule.TEXT),
))

CARD_HOLDER_IDENTIFICATION = RecordLayout("card holder identification", (
    Field("surname", 36, Rule.TEXT),
    Field("first_names", 36, Rule.TEXT),
    Field("birth_date", 4),
    Field("preferred_language", 2, Rule.TEXT),
))

BIRTH_DATE = RecordLayout("birth date", (
    Field("year", 2, Rule.BCD),
    Field("month", 1, Rule.BCD),
    Field("day", 1, Rule.BCD),
))


def decode_record(
    layout: RecordLayout, data: bytes, encoding: str = DEFAULT_ENCODING,
) -> dict[str, object]:
    """Slice ``data`` by ``layout`` and decode each field. Trailing bytes are ignored."""
    values: dict[str, object] = {}
    remaining = data
    for f in layout.fields:
        raw, remaining = take_n(f.length, remaining, f"{layout.name} {f.name}")
        if f.rule is Rule.TEXT:
            values[f.name] = decode_text(raw, encoding)
        elif f.rule is Rule.BCD:
            values[f.name] = decode_bcd(raw)
        else:
            values[f.name] = raw
    return values


# ---------------------------------------------------------------------------
# Records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BirthDate:
    """BCD birth date as digit strings (yyyy, mm, dd)."""

    year: str
    month: str
    day: str

    def as_date(self) -> datetime.date:
        return datetime.date(int(self.year), int(self.month), int(self.day))

    def __str__(self) -> str:
        return f"{self.year}-{self.month}-{self.day}"


@dataclass(frozen=True)
class CardIdentification:
    card_number: str


@dataclass(frozen=True)
class CardHolderIdentification:
    surname: str
    first_names: str
    birth_date: BirthDate
    preferred_language: str


@dataclass(frozen=True)
class DriverIdentity:
    """Both records of EF Identification, read in one session."""

    identification: CardIdentification
    holder: CardHolderIdentification


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------

def decode_birth_date(data: bytes) -> BirthDate:
    """Decode 4 BCD bytes: 2 for the year, 1 for the month, 1 for the day."""
    values = decode_record(BIRTH_DATE, data)
    return BirthDate(year=values["year"], month=values["month"], day=values["day"])


def parse_card_identification(
    data: bytes, encoding: str = DEFAULT_ENCODING,
) -> CardIdentification:
    # The issuing member state byte is sliced but not reported.
    values = decode_record(CARD_IDENTIFICATION, data, encoding)
    return CardIdentification(card_number=values["card_number"])


def parse_card_holder_identification(
    data: bytes, encoding: str = DEFAULT_ENCODING,
) -> CardHolderIdentification:
    values = decode_record(CARD_HOLDER_IDENTIFICATION, data, encoding)
    return CardHolderIdentification(
        surname=values["surname"],
        first_names=values["first_names"],
        birth_date=decode_birth_date(values["birth_date"]),
        preferred_language=values["preferred_language"],
    )
