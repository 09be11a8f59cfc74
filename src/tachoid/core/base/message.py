from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Message:
    """Base class for requests sent to a terminal."""


@dataclass(frozen=True)
class Result:
    """Base class for typed results returned by a terminal."""
