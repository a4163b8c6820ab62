"""Controller configuration.

ControllerConfig is a frozen dataclass — immutable after creation,
IDE-autocompletable, validated once when built.
"""

from dataclasses import dataclass

from starbs.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class ControllerConfig:
    """How the JSON shaping helpers render their envelopes.

    All fields have defaults matching the classic envelope output::

        config = ControllerConfig(json_indent=2, json_ensure_ascii=False)
    """

    # JSON body layout
    json_indent: int = 4
    json_ensure_ascii: bool = True  # Escape non-ASCII as \uXXXX
    json_escape_slashes: bool = True  # Write "/" as "\/"
    json_content_type: str = "application/json"

    # Envelope keys
    success_key: str = "success"
    error_key: str = "error"

    def __post_init__(self) -> None:
        if self.json_indent < 0:
            msg = f"json_indent must be >= 0, got {self.json_indent}"
            raise ConfigurationError(msg)
        if not self.json_content_type.strip():
            msg = "json_content_type must not be empty"
            raise ConfigurationError(msg)
        if not self.success_key or not self.error_key:
            msg = "Envelope keys must not be empty"
            raise ConfigurationError(msg)
        if self.success_key == self.error_key:
            msg = f"success_key and error_key must differ, both are {self.success_key!r}"
            raise ConfigurationError(msg)


DEFAULT_CONFIG = ControllerConfig()
"""Shared default configuration used when none is given."""
