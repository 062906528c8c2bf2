"""
foundry-markup transform command.

SUMMARY: Transform a rich-text string (argument or stdin)
"""

from __future__ import annotations

import argparse
import sys

from foundry_markup.cli import (
    OutputFormatter,
    add_json_flag,
    add_localization_flag,
    build_engine,
    get_localization,
)
from foundry_markup.core.exceptions import FoundryMarkupError
from foundry_markup.core.markup import ResolutionContext

SUMMARY = "Transform a rich-text string (argument or stdin)"


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "text",
        nargs="?",
        default=None,
        help="Text to transform; read from stdin when omitted",
    )
    add_localization_flag(parser)
    parser.add_argument(
        "--page-id",
        dest="page_ids",
        action="append",
        default=[],
        metavar="ID",
        help="Page id of the current journal, for @UUID links (repeatable)",
    )
    add_json_flag(parser)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        engine = build_engine(args)
        localization = get_localization(args)
    except FoundryMarkupError as e:
        formatter.error(e, error_code="transform_error")
        return 1

    text = args.text if args.text is not None else sys.stdin.read()
    context = ResolutionContext.build(page_ids=args.page_ids or [], localization=localization)
    html, report = engine.process(text, context)

    if formatter.json_mode:
        formatter.json_output({"html": html, "report": report.to_dict()})
    else:
        formatter.text(html)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
