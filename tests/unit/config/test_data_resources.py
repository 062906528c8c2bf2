"""Tests for bundled data access."""
from __future__ import annotations

from foundry_markup.data import get_data_path, read_json, read_yaml


def test_bundled_files_exist() -> None:
    assert get_data_path("config", "defaults.yaml").is_file()
    assert get_data_path("schemas", "config.schema.json").is_file()


def test_read_yaml_defaults() -> None:
    assert set(read_yaml("config", "defaults.yaml")) == {"markup", "logging"}


def test_read_json_schema() -> None:
    schema = read_json("schemas", "config.schema.json")
    assert schema["required"] == ["markup", "logging"]


def test_reads_are_cached() -> None:
    assert read_yaml("config", "defaults.yaml") is read_yaml("config", "defaults.yaml")
