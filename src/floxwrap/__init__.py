"""floxwrap package.

Launch shim that defaults ``LOCALE_ARCHIVE`` before exec'ing the wrapped program.
"""

__all__ = [
    "config",
    "errors",
    "launcher",
    "logger",
]
