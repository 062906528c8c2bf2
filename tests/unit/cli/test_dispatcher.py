"""Tests for CLI discovery, global flags and config handling."""
from __future__ import annotations

import json
import logging

import pytest

from foundry_markup import __version__
from foundry_markup.cli._dispatcher import build_parser, discover_commands, main


class TestDiscovery:
    def test_commands_discovered(self) -> None:
        assert set(discover_commands()) == {"localize", "render", "transform"}

    def test_command_modules_expose_contract(self) -> None:
        for info in discover_commands().values():
            assert info["summary"]
            assert callable(info["register_args"])
            assert callable(info["main"])

    def test_parser_registers_commands(self) -> None:
        args = build_parser().parse_args(["transform", "hello"])
        assert args.command == "transform"
        assert args.text == "hello"


class TestGlobalFlags:
    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out

    def test_no_command_prints_help(self, capsys) -> None:
        assert main([]) == 1
        assert "usage: foundry-markup" in capsys.readouterr().out

    def test_log_level_override(self) -> None:
        assert main(["--log-level", "debug", "transform", "x"]) == 0
        assert logging.getLogger("foundry_markup").level == logging.DEBUG

    def test_config_file_applies(self, tmp_path, capsys) -> None:
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("markup:\n  link_class: jump\n", encoding="utf-8")
        text = "@UUID[JournalEntry.X.JournalEntryPage.p1]{Intro}"
        assert main(["--config", str(cfg), "transform", text, "--page-id", "p1"]) == 0
        assert capsys.readouterr().out.strip() == '<a href="#" class="jump" data-page-id="p1">Intro</a>'

    def test_env_override_applies(self, monkeypatch, capsys) -> None:
        monkeypatch.setenv("FOUNDRY_MARKUP_markup__save_types", '["reflex"]')
        assert main(["transform", "@Check[will|dc:12]"]) == 0
        assert capsys.readouterr().out.strip() == "<strong>Will DC 12</strong>"

    def test_missing_config_file(self, tmp_path, capsys) -> None:
        assert main(["--config", str(tmp_path / "nope.yaml"), "transform", "x"]) == 1
        assert "Error: Config file not found" in capsys.readouterr().err

    def test_invalid_config_json_error(self, tmp_path, capsys) -> None:
        cfg = tmp_path / "cfg.yaml"
        cfg.write_text("markup:\n  max_depth: many\n", encoding="utf-8")
        assert main(["--config", str(cfg), "transform", "x", "--json"]) == 1
        payload = json.loads(capsys.readouterr().err)
        assert payload["error"] == "config_error"
        assert payload["code"] == "ConfigError"
        assert payload["context"] == {"location": "markup.max_depth"}
