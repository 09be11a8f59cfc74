# filename : main.py
# created  : 10/19/2026


import logging

from tachoid.app import tacho

lg = logging.getLogger(__name__)


def main(
    reader: str | None = None,
    generation: int = 1,
    lenient: bool = False,
    encoding: str = "ascii",
    list_only: bool = False,
) -> bool:
    lg.debug("tachoid v1")
    if list_only:
        return tacho.list_readers()
    return tacho.session(
        reader=reader,
        generation=generation,
        verify_status=not lenient,
        encoding=encoding,
    )
