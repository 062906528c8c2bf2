"""
foundry-markup configuration management (YAML).
"""
from __future__ import annotations

import copy
import json
import logging
import os
import re
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import jsonschema
import yaml

from foundry_markup.data import read_json, read_yaml

from .exceptions import ConfigError

logger = logging.getLogger(__name__)

ENV_PREFIX = "FOUNDRY_MARKUP_"
CONFIG_PATH_ENV = "FOUNDRY_MARKUP_CONFIG"


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    Lists and scalars in ``override`` replace those in ``base``.

    Example:
        >>> deep_merge({"a": 1, "b": {"c": 2}}, {"b": {"d": 3}})
        {'a': 1, 'b': {'c': 2, 'd': 3}}
    """
    result: Dict[str, Any] = dict(base)
    for key, value in (override or {}).items():
        if isinstance(result.get(key), dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result


class ConfigManager:
    """Load, merge, and validate configuration.

    Configuration sources (highest to lowest priority):
    1. Environment variables: FOUNDRY_MARKUP_<section>__<key>
    2. User config file: explicit path, or FOUNDRY_MARKUP_CONFIG
    3. Bundled defaults: foundry_markup.data/config/defaults.yaml
    """

    def __init__(self, config_path: Optional[Union[str, Path]] = None) -> None:
        if config_path is None and os.environ.get(CONFIG_PATH_ENV):
            config_path = os.environ[CONFIG_PATH_ENV]
        self.config_path = Path(config_path) if config_path else None

    def load_yaml(self, path: Path) -> Dict[str, Any]:
        # Fail closed: a user config must never be silently ignored.
        if not path.exists():
            raise ConfigError(f"Config file not found: {path}", context={"path": str(path)})
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except yaml.YAMLError as exc:
            raise ConfigError(
                f"Invalid YAML in config file: {path}",
                context={"path": str(path), "reason": str(exc)},
            ) from exc
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigError(
                f"Config file must contain a mapping: {path}",
                context={"path": str(path)},
            )
        return data

    # ========== Environment overrides ==========

    def _as_bool(self, v: str) -> Optional[bool]:
        low = v.strip().lower()
        if low in {"true", "false"}:
            return low == "true"
        return None

    def _as_int(self, v: str) -> Optional[int]:
        if re.fullmatch(r"[-+]?\d+", v.strip() or " "):
            return int(v)
        return None

    def _as_float(self, v: str) -> Optional[float]:
        s = v.strip()
        if re.fullmatch(r"[-+]?\d*\.\d+", s) or re.fullmatch(r"[-+]?\d+\.\d*", s):
            return float(s)
        return None

    def _as_json(self, v: str) -> Optional[Any]:
        s = v.strip()
        if (s.startswith("{") and s.endswith("}")) or (s.startswith("[") and s.endswith("]")):
            try:
                return json.loads(s)
            except json.JSONDecodeError:
                return None
        return None

    def _coerce_type(self, value: str) -> Any:
        for caster in (self._as_bool, self._as_int, self._as_float, self._as_json):
            result = caster(value)
            if result is not None:
                return result
        if value.strip().lower() in {"null", "none"}:
            return None
        return value.strip()

    def _parse_env_key(self, raw: str) -> List[str]:
        segs = raw.split("__")
        if any(seg == "" for seg in segs):
            raise ConfigError(
                f"Malformed {ENV_PREFIX}* key: empty segment in '{raw}'.",
                context={"key": raw},
            )
        return [seg.lower() for seg in segs]

    def env_overrides(self) -> Dict[str, Any]:
        """Collect FOUNDRY_MARKUP_* variables into a nested override dict."""
        overrides: Dict[str, Any] = {}
        for key in sorted(os.environ.keys()):
            if not key.startswith(ENV_PREFIX) or key == CONFIG_PATH_ENV:
                continue
            raw = key[len(ENV_PREFIX):]
            if not raw:
                continue
            path = self._parse_env_key(raw)
            cursor = overrides
            for part in path[:-1]:
                cursor = cursor.setdefault(part, {})
                if not isinstance(cursor, dict):
                    raise ConfigError(
                        f"Conflicting {ENV_PREFIX}* keys at '{raw}'.",
                        context={"key": raw},
                    )
            cursor[path[-1]] = self._coerce_type(os.environ[key])
        return overrides

    # ========== Loading ==========

    def validate(self, config: Dict[str, Any]) -> None:
        schema = read_json("schemas", "config.schema.json")
        try:
            jsonschema.validate(instance=config, schema=schema)
        except jsonschema.ValidationError as exc:
            location = ".".join(str(p) for p in exc.absolute_path) or "<root>"
            raise ConfigError(
                f"Invalid configuration at {location}: {exc.message}",
                context={"location": location},
            ) from exc

    def load_config(self, validate: bool = True) -> Dict[str, Any]:
        """Return the merged configuration.

        Args:
            validate: Validate the merged result against the bundled schema

        Raises:
            ConfigError: On unreadable/invalid user config or schema violations
        """
        cfg = copy.deepcopy(read_yaml("config", "defaults.yaml"))
        if self.config_path is not None:
            logger.debug("Loading config overrides from %s", self.config_path)
            cfg = deep_merge(cfg, self.load_yaml(self.config_path))
        env = self.env_overrides()
        if env:
            logger.debug("Applying environment overrides: %s", ", ".join(sorted(env)))
            cfg = deep_merge(cfg, env)
        if validate:
            self.validate(cfg)
        return cfg


def load_config(config_path: Optional[Union[str, Path]] = None) -> Dict[str, Any]:
    """Load and validate configuration (convenience wrapper)."""
    return ConfigManager(config_path).load_config()


__all__ = ["ConfigManager", "deep_merge", "load_config"]
