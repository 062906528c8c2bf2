"""
foundry-markup CLI package.

Commands are auto-discovered from cli/commands/. Each command module
exposes SUMMARY, register_args(parser) and main(args) -> int.

Framework utilities for building CLI commands:
- _output: Output formatting (JSON/text modes)
- _args: Common argument registration helpers
- _utils: Config, engine and localization access for commands
"""
from ._output import OutputFormatter
from ._args import add_json_flag, add_localization_flag, parse_assignment
from ._utils import build_engine, get_config, get_localization

__all__ = [
    # Output formatting
    "OutputFormatter",
    # Argument helpers
    "add_json_flag",
    "add_localization_flag",
    "parse_assignment",
    # Utilities
    "build_engine",
    "get_config",
    "get_localization",
]
