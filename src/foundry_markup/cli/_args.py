"""Common CLI argument registration helpers."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_localization_flag(parser: argparse.ArgumentParser) -> None:
    """Add --localization flag pointing at a localization JSON file.

    Args:
        parser: ArgumentParser to add the flag to
    """
    parser.add_argument(
        "--localization",
        "-l",
        type=str,
        default=None,
        metavar="PATH",
        help="Localization JSON file (e.g. en.json from the pf2e system)",
    )


def parse_assignment(raw: str) -> tuple[str, str]:
    """Parse a ``name=value`` pair (argparse ``type=`` callable)."""
    name, sep, value = raw.partition("=")
    if not sep or not name.strip():
        raise argparse.ArgumentTypeError(f"expected name=value, got '{raw}'")
    return name.strip(), value


__all__ = ["add_json_flag", "add_localization_flag", "parse_assignment"]
