"""Human-readable driver card identity formatting."""

from __future__ import annotations

from tachoid.core.tacho import CardHolderIdentification, CardIdentification


def format_identity(
    identification: CardIdentification, holder: CardHolderIdentification,
) -> list[str]:
    birth = holder.birth_date
    return [
        f"Driver card number: {identification.card_number}",
        f"First name: {holder.first_names}",
        f"Last name: {holder.surname}",
        f"Year: {birth.year}",
        f"month: {birth.month}",
        f"day: {birth.day}",
        f"Preferred language: {holder.preferred_language}",
    ]


def format_readers(readers: list) -> list[str]:
    if not readers:
        return ["No readers are connected"]
    return [f"  {i}. {reader}" for i, reader in enumerate(readers)]
