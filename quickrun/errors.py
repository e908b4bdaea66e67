"""
Exception types raised by the launcher.

Only HomeDirectoryError escapes to the caller; the others are reported
through the logger where they occur.
"""


class QuickrunError(Exception):
    """Base class for launcher errors."""


class HomeDirectoryError(QuickrunError):
    """No home directory could be resolved for the user-local entry sources."""


class EmptyCommandError(QuickrunError):
    """A command line had no program token after splitting."""
