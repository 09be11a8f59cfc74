# filename : scripts.py
# created  : 10/19/2026


import logging
import sys

import click

from tachoid.core.errors import InvalidParameter
from tachoid.core.smartcard.logging import configure
from tachoid.core.tacho.codec import check_encoding

lg = logging.getLogger(__name__)


def _encoding(ctx, param, value):
    try:
        return check_encoding(value)
    except InvalidParameter as exc:
        raise click.BadParameter(str(exc), ctx=ctx, param=param) from exc


@click.command()
@click.option("-v", "--verbose", is_flag=True, help="TRACE level (show raw APDUs).")
@click.option(
    "-r",
    "--reader",
    default=None,
    help="Reader index or name substring (default: first reader with a card).",
)
@click.option(
    "-g",
    "--generation",
    type=click.Choice(["1", "2"]),
    default="1",
    show_default=True,
    help="Tachograph application generation to select.",
)
@click.option(
    "--lenient",
    is_flag=True,
    help="Do not check response status words.",
)
@click.option(
    "-e",
    "--encoding",
    default="ascii",
    show_default=True,
    callback=_encoding,
    help="Single-byte text encoding of name fields.",
)
@click.option(
    "-l",
    "--list-readers",
    "list_only",
    is_flag=True,
    help="List readers and exit.",
)
def tachoid(verbose, reader, generation, lenient, encoding, list_only):
    """Read driver card and card holder identification from a tachograph card."""

    configure(verbose)

    from tachoid.app.main import main
    ok = main(
        reader=reader,
        generation=int(generation),
        lenient=lenient,
        encoding=encoding,
        list_only=list_only,
    )
    sys.exit(0 if ok else 1)
