"""Utility layer errors."""


class UtilError(Exception):
    """Base utility error."""

    pass


class ConfigurationError(UtilError):
    """Raised when tally is wired up inconsistently.

    For example, when two counter tables are registered for the same
    participant type, or a registered table lacks a counter column.
    """

    pass
