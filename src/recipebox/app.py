from __future__ import annotations

from . import labels
from .catalog import Catalog
from .logger import get_logger
from .sessions import AdminSession, BrowseSession
from .sessions.common import write_lines
from .terminal import LineIO

log = get_logger("app")


def run_app(catalog: Catalog, io: LineIO, separator: str = labels.DEFAULT_SEPARATOR) -> int:
    """Run the role menu until the user exits; one session at a time."""
    if len(catalog):
        io.write(labels.SAMPLES_LOADED)

    running = True
    while running:
        io.write()
        io.write(labels.APP_TITLE)
        io.write()
        io.write(labels.WELCOME)
        write_lines(io, labels.ROLE_MENU)
        choice = io.read(labels.ENTER_CHOICE).strip()
        if choice == "1":
            AdminSession(catalog, io, separator=separator).run()
        elif choice == "2":
            BrowseSession(catalog, io).run()
        elif choice == "3":
            io.write(labels.GOODBYE)
            running = False
        else:
            log.debug(f"Unrecognized role choice {choice!r}")
            io.write(labels.INVALID_ROLE)
    return 0
