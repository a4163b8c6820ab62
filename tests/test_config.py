"""Tests for starbs.config — ControllerConfig frozen dataclass."""

import pytest

from starbs.config import DEFAULT_CONFIG, ControllerConfig
from starbs.errors import ConfigurationError


class TestControllerConfig:
    def test_defaults(self) -> None:
        cfg = ControllerConfig()

        assert cfg.json_indent == 4
        assert cfg.json_ensure_ascii is True
        assert cfg.json_escape_slashes is True
        assert cfg.json_content_type == "application/json"
        assert cfg.success_key == "success"
        assert cfg.error_key == "error"

    def test_default_instance(self) -> None:
        assert DEFAULT_CONFIG == ControllerConfig()

    def test_override(self) -> None:
        cfg = ControllerConfig(json_indent=0, success_key="data", error_key="errors")

        assert cfg.json_indent == 0
        assert cfg.success_key == "data"
        assert cfg.error_key == "errors"

    def test_frozen(self) -> None:
        cfg = ControllerConfig()

        with pytest.raises(AttributeError):
            cfg.json_indent = 2  # type: ignore[misc]


class TestValidation:
    def test_negative_indent(self) -> None:
        with pytest.raises(ConfigurationError, match="json_indent"):
            ControllerConfig(json_indent=-1)

    def test_blank_content_type(self) -> None:
        with pytest.raises(ConfigurationError, match="json_content_type"):
            ControllerConfig(json_content_type="  ")

    @pytest.mark.parametrize("keys", [{"success_key": ""}, {"error_key": ""}])
    def test_empty_envelope_key(self, keys: dict[str, str]) -> None:
        with pytest.raises(ConfigurationError, match="must not be empty"):
            ControllerConfig(**keys)

    def test_equal_envelope_keys(self) -> None:
        with pytest.raises(ConfigurationError, match="must differ"):
            ControllerConfig(success_key="result", error_key="result")
