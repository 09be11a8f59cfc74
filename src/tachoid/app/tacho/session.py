"""Tachograph card session.

Constructs the stack (Card -> Agent -> TachoTerminal), connects, reads
EF Identification, prints the result and disconnects.
"""

from __future__ import annotations

import logging

import click

from tachoid.app.tacho.display import format_identity, format_readers
from tachoid.core.base import Agent
from tachoid.core.errors import TachoError
from tachoid.core.smartcard import Card
from tachoid.core.tacho import GetATRMessage, ReadIdentityMessage, TachoTerminal
from tachoid.core.tacho.codec import DEFAULT_ENCODING
from tachoid.core.tacho.constants import DF_BY_GENERATION

lg = logging.getLogger(__name__)


def list_readers() -> bool:
    """Print the available readers with their index."""
    try:
        available = Card.list_readers()
    except TachoError as exc:
        lg.error("%s", exc)
        return False
    for line in format_readers(available):
        click.echo(line)
    return bool(available)


def _disconnect(terminal: TachoTerminal) -> None:
    try:
        terminal.disconnect()
    except TachoError as exc:
        lg.warning("%s", exc)


def session(
    reader: str | None = None,
    generation: int = 1,
    verify_status: bool = True,
    encoding: str = DEFAULT_ENCODING,
) -> bool:
    """Read and print the driver identity. Returns True on success."""
    card = Card()
    agent = Agent(card, reader=reader)
    terminal = TachoTerminal(agent, verify_status=verify_status)

    try:
        terminal.connect()
        atr = terminal.send(GetATRMessage()).atr
        lg.info("ATR: %s", atr.hex(" ").upper())
        result = terminal.send(ReadIdentityMessage(
            df_name=DF_BY_GENERATION[generation], encoding=encoding,
        ))
    except TachoError as exc:
        terminal.on_error(exc)
        return False
    finally:
        _disconnect(terminal)

    for line in format_identity(result.identification, result.holder):
        click.echo(line)
    return True
