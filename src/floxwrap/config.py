from __future__ import annotations

"""Build-time configuration for floxwrap.

The two paths below are substituted by the packaging recipe when the wrapper
is built (for example ``substituteInPlace`` in a Nix derivation).  They are
deliberately *not* overridable from the environment: the wrapper must launch
exactly the program it was built for.
"""

from typing import Final

# -----------------------------------------------------------------------------
# Locale archive
# -----------------------------------------------------------------------------
LOCALE_ARCHIVE_ENV: Final[str] = "LOCALE_ARCHIVE"
LOCALE_ARCHIVE_DEFAULT: Final[str] = "/usr/lib/locale/locale-archive"

# -----------------------------------------------------------------------------
# Target executable – searched on PATH when it contains no slash.
# -----------------------------------------------------------------------------
TARGET_EXECUTABLE: Final[str] = "/usr/libexec/flox/flox"

# -----------------------------------------------------------------------------
# Diagnostics
# -----------------------------------------------------------------------------
PROG_NAME: Final[str] = "floxwrap"
EXIT_FAILURE: Final[int] = 1

# Only affects logging; never forwarded differently from any other variable.
DEBUG_ENV: Final[str] = "FLOXWRAP_DEBUG"

# Unix sockets tried in order (Linux, macOS, BSD).  UDP to localhost otherwise.
SYSLOG_SOCKETS: Final[tuple[str, ...]] = (
    "/dev/log",
    "/var/run/syslog",
    "/var/run/log",
)
