from __future__ import annotations

"""Launcher for the wrapped program.

Makes sure ``LOCALE_ARCHIVE`` points at a usable locale archive, then replaces
the current process with the target executable.  Binaries built by Nixpkgs
expect the variable to be set, which only holds on NixOS or under the nix
client tools, so copying them to other hosts or containers breaks
localisation without it.

Nothing here returns on success: :pyfunc:`os.execvp` swaps the process image
and the caller only ever sees the target's exit status.  The target receives
its own path as ``argv[0]``, not the name this wrapper was invoked under.
"""

import os
import sys
from typing import Mapping, MutableMapping, NoReturn, Sequence

from . import config
from .errors import EnvironmentSetFailure, ExecFailure, LaunchError
from .logger import logger


def fatal(kind: str, context: str, error: OSError) -> NoReturn:
    """Log *error* to syslog, print it to stderr and exit with failure."""

    detail = error.strerror or str(error)
    logger.error(
        "%s: %s: %s",
        kind,
        context,
        detail,
        extra={"kind": kind, "context": context, "detail": detail},
    )
    print(f"{config.PROG_NAME}: {context}: {detail}", file=sys.stderr)
    sys.exit(config.EXIT_FAILURE)


def ensure_locale_archive(
    environ: MutableMapping[str, str] | None = None,
    default: str = config.LOCALE_ARCHIVE_DEFAULT,
) -> bool:
    """Set ``LOCALE_ARCHIVE`` to *default* when absent.

    An empty value counts as set and is left alone.  Returns ``True`` when the
    variable was written.
    """

    env = os.environ if environ is None else environ
    if config.LOCALE_ARCHIVE_ENV in env:
        logger.debug(
            "%s already set to %r", config.LOCALE_ARCHIVE_ENV, env[config.LOCALE_ARCHIVE_ENV]
        )
        return False

    try:
        env[config.LOCALE_ARCHIVE_ENV] = default
    except OSError as exc:
        raise EnvironmentSetFailure("setenv", exc) from exc

    logger.debug("%s unset, defaulting to %s", config.LOCALE_ARCHIVE_ENV, default)
    return True


def exec_target(
    argv: Sequence[str],
    target: str = config.TARGET_EXECUTABLE,
    environ: Mapping[str, str] | None = None,
) -> NoReturn:
    """Replace this process with *target*, forwarding *argv* verbatim.

    The new image inherits :pydata:`os.environ` unless *environ* is given.
    """

    logger.debug("exec %s %r", target, list(argv))
    args = [target, *argv]
    try:
        if environ is None:
            os.execvp(target, args)
        else:
            os.execvpe(target, args, environ)
    except OSError as exc:
        raise ExecFailure(target, exc) from exc
    # execvp only comes back by raising; anything else is still a failed exec.
    raise ExecFailure(target, OSError(0, "exec returned unexpectedly"))


def launch(
    argv: Sequence[str],
    environ: MutableMapping[str, str] | None = None,
    target: str = config.TARGET_EXECUTABLE,
    default: str = config.LOCALE_ARCHIVE_DEFAULT,
) -> NoReturn:
    """Ensure the locale archive variable, then exec *target*."""

    try:
        ensure_locale_archive(environ, default)
        exec_target(argv, target, environ)
    except LaunchError as exc:
        fatal(exc.kind, exc.context, exc.error)


def main(argv: list[str] | None = None) -> NoReturn:  # noqa: D401
    """Console-script entrypoint; every argument belongs to the target."""

    args = sys.argv[1:] if argv is None else argv
    launch(args)


if __name__ == "__main__":
    main()
