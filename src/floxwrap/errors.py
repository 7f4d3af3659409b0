"""Fatal error kinds raised by the launcher.

Both kinds end the process through :pyfunc:`floxwrap.launcher.fatal`; nothing
catches them to retry.
"""

from __future__ import annotations


class LaunchError(Exception):
    """A system call the launcher depends on failed."""

    kind = "LaunchError"

    def __init__(self, context: str, error: OSError) -> None:
        super().__init__(context, error)
        self.context = context
        self.error = error

    @property
    def detail(self) -> str:
        """OS error text, e.g. ``"No such file or directory"``."""
        return self.error.strerror or str(self.error)

    def __str__(self) -> str:
        return f"{self.context}: {self.detail}"


class EnvironmentSetFailure(LaunchError):
    kind = "EnvironmentSetFailure"


class ExecFailure(LaunchError):
    kind = "ExecFailure"
