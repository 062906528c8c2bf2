"""
foundry-markup render command.

SUMMARY: Render an exported journal, actor or item to HTML
"""

from __future__ import annotations

import argparse
import logging
import sys

from foundry_markup.cli import (
    OutputFormatter,
    add_json_flag,
    add_localization_flag,
    build_engine,
    get_localization,
)
from foundry_markup.core.documents import (
    Actor,
    DocumentGraph,
    Journal,
    load_document,
)
from foundry_markup.core.exceptions import DocumentFormatError, DocumentNotFoundError, FoundryMarkupError
from foundry_markup.core.render import RenderedDocument, render_actor, render_item, render_journal

SUMMARY = "Render an exported journal, actor or item to HTML"

logger = logging.getLogger(__name__)


def register_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("file", type=str, help="Exported Foundry document (JSON)")
    add_localization_flag(parser)
    parser.add_argument(
        "--journal",
        "-j",
        dest="journals",
        action="append",
        default=[],
        metavar="PATH",
        help="Additional journal to resolve cross-journal links against (repeatable)",
    )
    parser.add_argument(
        "--page",
        type=str,
        default=None,
        metavar="ID",
        help="Render only this journal page",
    )
    add_json_flag(parser)


def _load_graph(paths: list[str]) -> DocumentGraph:
    graph = DocumentGraph()
    for path in paths:
        document = load_document(path)
        if not isinstance(document, Journal):
            raise DocumentFormatError(
                f"--journal expects a journal export: {path}",
                context={"path": path},
            )
        graph.add(document)
    return graph


def _joined(value: object) -> object:
    if isinstance(value, list):
        return ", ".join(str(v) for v in value) or "-"
    return value


def _print_text(formatter: OutputFormatter, rendered: RenderedDocument) -> None:
    formatter.text(f"# {rendered.name}")
    for key, value in rendered.header.items():
        if isinstance(value, dict):
            formatter.text(f"  {key}:")
            for name, detail in value.items():
                formatter.text_kv(name, _joined(detail), prefix="    ")
            continue
        formatter.text_kv(key, _joined(value))
    for section in rendered.sections:
        formatter.text("")
        formatter.text(f"{'#' * (section.level + 1)} {section.name}")
        formatter.text(section.html)


def main(args: argparse.Namespace) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    try:
        engine = build_engine(args)
        localization = get_localization(args)
        document = load_document(args.file)
        graph = _load_graph(list(args.journals or []))

        if isinstance(document, Journal):
            if graph.get(document.id) is None:
                graph.add(document)
            if args.page and document.find_page(args.page) is None:
                raise DocumentNotFoundError(
                    f"Page '{args.page}' not found in journal '{document.name}'",
                    context={"page": args.page, "journal": document.id},
                )
            rendered = render_journal(document, engine, graph, localization, page_id=args.page)
        else:
            if args.page:
                logger.warning("--page only applies to journals; ignoring '%s'", args.page)
            if isinstance(document, Actor):
                rendered = render_actor(document, engine, graph, localization)
            else:
                rendered = render_item(document, engine, graph, localization)

        if rendered.report.has_issues:
            logger.info(rendered.report.summary())

        if formatter.json_mode:
            formatter.json_output(rendered.to_dict())
        else:
            _print_text(formatter, rendered)
        return 0
    except FoundryMarkupError as e:
        formatter.error(e, error_code="render_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    sys.exit(main(parser.parse_args()))
