"""
foundry-markup localize command.

SUMMARY: Look up a localization key
"""

from __future__ import annotations

import argparse
import sys

from foundry_markup.cli import (
    OutputFormatter,
    add_json_flag,
    add_localization_flag,
    get_localization,
    parse_assignment,
)
from foundry_markup.core.exceptions import FoundryMarkupError
from foundry_markup.core.localization import is_found, localize, resolve

SUMMARY = "Look up a localization key"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("key", type=str, help="Dotted key, e.g. PF2E.TraitFire")
    add_localization_flag(parser)
    parser.add_argument(
        "--set",
        dest="replacements",
        action="append",
        type=parse_assignment,
        default=[],
        metavar="NAME=VALUE",
        help="Placeholder value for {NAME} (repeatable)",
    )
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        dictionary = get_localization(args)
    except FoundryMarkupError as e:
        formatter.error(e, error_code="localization_error")
        return 1

    replacements = dict(args.replacements or [])
    value = localize(dictionary, args.key, replacements or None)

    if formatter.json_mode:
        formatter.json_output(
            {
                "key": args.key,
                "value": value,
                "found": is_found(resolve(dictionary, args.key)),
            }
        )
    else:
        formatter.text(value)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
