"""
Base exception for user-facing errors.

All expected errors that should be displayed to the user
as clean messages (without stack traces) must inherit from TplRootUserError.

Programming errors and bugs should NOT inherit from TplRootUserError:
they will propagate with full tracebacks.
"""

from __future__ import annotations


class TplRootUserError(Exception):
    """
    Base class for all user-facing errors in tplroot.

    These errors indicate problems that the user can fix:
    an invalid config file, unreadable sources, broken markup.
    """
    pass


class ConfigError(TplRootUserError):
    """Invalid configuration file or rule options."""
    pass


__all__ = ["TplRootUserError", "ConfigError"]
