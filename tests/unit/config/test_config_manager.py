"""Tests for configuration layering and validation."""
from __future__ import annotations

from pathlib import Path

import pytest

from foundry_markup.core.config import ConfigManager, deep_merge, load_config
from foundry_markup.core.exceptions import ConfigError


def write_yaml(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


# =============================================================================
# deep_merge
# =============================================================================


class TestDeepMerge:
    def test_nested_merge(self) -> None:
        assert deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}}) == {"a": 1, "b": {"c": 2, "d": 3}}

    def test_lists_replaced(self) -> None:
        assert deep_merge({"a": [1, 2]}, {"a": [3]}) == {"a": [3]}

    def test_inputs_not_mutated(self) -> None:
        base = {"b": {"c": 2}}
        deep_merge(base, {"b": {"c": 3}})
        assert base == {"b": {"c": 2}}


# =============================================================================
# Layering
# =============================================================================


class TestLoadConfig:
    def test_bundled_defaults(self) -> None:
        cfg = load_config()
        assert cfg["markup"]["max_depth"] == 8
        assert cfg["markup"]["save_types"] == ["fortitude", "reflex", "will"]
        assert cfg["logging"] == {"level": "WARNING", "file": None}

    def test_defaults_are_not_shared(self) -> None:
        load_config()["markup"]["max_depth"] = 99
        assert load_config()["markup"]["max_depth"] == 8

    def test_user_file_overrides(self, tmp_path) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", "markup:\n  max_depth: 3\n")
        cfg = ConfigManager(path).load_config()
        assert cfg["markup"]["max_depth"] == 3
        assert cfg["markup"]["link_class"] == "internal-journal-link"

    def test_config_path_from_environment(self, tmp_path, monkeypatch) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", "markup:\n  namespace: SF2E\n")
        monkeypatch.setenv("FOUNDRY_MARKUP_CONFIG", str(path))
        assert load_config()["markup"]["namespace"] == "SF2E"

    def test_empty_user_file(self, tmp_path) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", "")
        assert ConfigManager(path).load_config()["markup"]["max_depth"] == 8

    def test_env_overrides_file(self, tmp_path, monkeypatch) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", "markup:\n  max_depth: 3\n")
        monkeypatch.setenv("FOUNDRY_MARKUP_markup__max_depth", "5")
        monkeypatch.setenv("FOUNDRY_MARKUP_LOGGING__LEVEL", "DEBUG")
        cfg = ConfigManager(path).load_config()
        assert cfg["markup"]["max_depth"] == 5
        assert cfg["logging"]["level"] == "DEBUG"


# =============================================================================
# Failures
# =============================================================================


class TestConfigErrors:
    def test_missing_file(self, tmp_path) -> None:
        with pytest.raises(ConfigError, match="not found"):
            ConfigManager(tmp_path / "missing.yaml").load_config()

    def test_invalid_yaml(self, tmp_path) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", "markup: [unclosed\n")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            ConfigManager(path).load_config()

    def test_non_mapping(self, tmp_path) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", "- a\n- b\n")
        with pytest.raises(ConfigError, match="must contain a mapping"):
            ConfigManager(path).load_config()

    def test_schema_violation(self, tmp_path) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", "markup:\n  max_depth: -1\n")
        with pytest.raises(ConfigError) as exc_info:
            ConfigManager(path).load_config()
        assert exc_info.value.context == {"location": "markup.max_depth"}

    def test_unknown_key_rejected(self, tmp_path) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", "renderer:\n  theme: dark\n")
        with pytest.raises(ConfigError):
            ConfigManager(path).load_config()

    def test_validation_can_be_skipped(self, tmp_path) -> None:
        path = write_yaml(tmp_path / "cfg.yaml", "renderer:\n  theme: dark\n")
        assert ConfigManager(path).load_config(validate=False)["renderer"] == {"theme": "dark"}

    def test_malformed_env_key(self, monkeypatch) -> None:
        monkeypatch.setenv("FOUNDRY_MARKUP_markup____max_depth", "1")
        with pytest.raises(ConfigError, match="empty segment"):
            load_config()

    def test_config_error_is_value_error(self) -> None:
        assert issubclass(ConfigError, ValueError)


# =============================================================================
# Environment value coercion
# =============================================================================


class TestCoercion:
    @pytest.mark.parametrize(
        ("raw", "expected"),
        [
            ("true", True),
            ("False", False),
            ("12", 12),
            ("-3", -3),
            ("1.5", 1.5),
            ('["a", "b"]', ["a", "b"]),
            ('{"k": 1}', {"k": 1}),
            ("null", None),
            (" plain ", "plain"),
            ("[not json", "[not json"),
        ],
    )
    def test_coerce(self, raw: str, expected) -> None:
        assert ConfigManager()._coerce_type(raw) == expected

    def test_nested_env_override(self, monkeypatch) -> None:
        monkeypatch.setenv("FOUNDRY_MARKUP_markup__save_types", '["reflex"]')
        assert ConfigManager().env_overrides() == {"markup": {"save_types": ["reflex"]}}
