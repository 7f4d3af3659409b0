"""Project-wide logger helper.

Import `logger` and use standard levels (debug/info/warning/error).

Records go to the system log only.  Set ``FLOXWRAP_DEBUG`` to also trace to
stderr; the wrapped program owns stderr otherwise.
"""

from __future__ import annotations

import logging
import os
import sys
from logging.handlers import SYSLOG_UDP_PORT, SysLogHandler

from . import config

SYSLOG_FORMAT = "%(name)s[%(process)d]: %(message)s"
STDERR_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
SYSLOG_FACILITY = SysLogHandler.LOG_USER


def syslog_address() -> str | tuple[str, int]:
    """Return the first local syslog socket that exists, else UDP localhost."""
    for candidate in config.SYSLOG_SOCKETS:
        if os.path.exists(candidate):
            return candidate
    return ("localhost", SYSLOG_UDP_PORT)


def _syslog_handler() -> logging.Handler:
    """Return a syslog handler, or a :class:`~logging.NullHandler` if none connects.

    A failed syslog setup leaves only stderr from
    :pyfunc:`floxwrap.launcher.fatal`; the launch itself goes ahead.
    """
    for address in (syslog_address(), ("localhost", SYSLOG_UDP_PORT)):
        try:
            handler = SysLogHandler(address=address, facility=SYSLOG_FACILITY)
        except OSError:
            # Socket refusing connections, or localhost not resolvable.
            continue
        break
    else:
        return logging.NullHandler()
    handler.setFormatter(logging.Formatter(SYSLOG_FORMAT))
    return handler


def build_logger(name: str = config.PROG_NAME, debug: bool | None = None) -> logging.Logger:
    """Configure and return the named logger.

    Calling it again replaces the handlers instead of stacking new ones.
    """
    if debug is None:
        debug = bool(os.environ.get(config.DEBUG_ENV))

    log = logging.getLogger(name)
    for handler in list(log.handlers):
        log.removeHandler(handler)
        handler.close()

    log.addHandler(_syslog_handler())
    if debug:
        stream = logging.StreamHandler(sys.stderr)
        stream.setFormatter(logging.Formatter(STDERR_FORMAT))
        log.addHandler(stream)

    log.setLevel(logging.DEBUG if debug else logging.INFO)
    log.propagate = False
    return log


logger = build_logger()
