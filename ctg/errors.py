"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from CtgUserError.

Programming errors and bugs should NOT inherit from CtgUserError;
they propagate with full tracebacks.
"""

from __future__ import annotations


class CtgUserError(Exception):
    """
    Base class for all user-facing errors of the grammar generator.

    These errors indicate problems that the user can fix:
    malformed language or host tables, unknown hosts, unwritable output.
    """
    pass


class ConfigError(CtgUserError, ValueError):
    """Malformed table entry, with the dotted path of the offending field."""

    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        prefix = f"{'.'.join(path)}: " if path else ""
        super().__init__(prefix + message)


class UnknownHostError(CtgUserError):
    """Requested host language is not declared in the host table."""

    def __init__(self, name: str, known: list[str]):
        self.name = name
        self.known = known
        super().__init__(f"Unknown host language '{name}' (known: {', '.join(known) or 'none'})")


class GrammarWriteError(CtgUserError):
    """
    A generated document could not be written.
    The original OSError is available through __cause__.
    """
    pass


__all__ = ["CtgUserError", "ConfigError", "UnknownHostError", "GrammarWriteError"]
