"""
Exceptions raised by the highlighting pipeline.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from HiliteUserError.

Broken pipeline invariants are bugs, NOT user errors — they
inherit from RuntimeError and propagate with full tracebacks.
"""

from __future__ import annotations


class HiliteUserError(Exception):
    """
    Base class for all user-facing errors in hilite.

    These errors indicate problems that the user can fix:
    unknown profile keys, malformed profile files, bad themes, etc.
    """
    pass


class ConfigurationError(HiliteUserError):
    """Unknown profile/theme key, conflicting registration or invalid config data."""
    pass


class InternalInvariantError(RuntimeError):
    """
    A pipeline invariant was violated (sentinel collision, unrestored literal).
    Must never be reached in correct operation.
    """
    pass


__all__ = ["HiliteUserError", "ConfigurationError", "InternalInvariantError"]
