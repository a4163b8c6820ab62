"""Starbs exception hierarchy.

Dispatch and the shaping helpers never catch or wrap exceptions; the
only errors raised by starbs itself come from configuration checks.
"""


class StarbsError(Exception):
    """Base for all starbs-specific errors."""


class ConfigurationError(StarbsError):
    """Raised when controller configuration is invalid.

    Typically raised by ``ControllerConfig`` at construction time.
    """
