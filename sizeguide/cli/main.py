"""Command-line entry point for sizeguide."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path

from ..config import DEFAULT_PANEL_CONFIG, load_storefront_config
from ..logging.safe_logger import configure_logging_with_redaction
from ..models.rich_text import decode_node
from ..services.errors import SizeGuideError
from ..services.storefront_client import StorefrontClient
from ..utils.content_markup import content_markup, empty_markup
from ..utils.field_parser import parse_fields
from ..utils.rich_text_renderer import render


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sizeguide",
        description="Render and fetch size guide documents from the Storefront API.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    render_cmd = sub.add_parser("render", help="Render a rich-text JSON document to HTML.")
    render_cmd.add_argument("--input", "-i", type=Path, required=True, help="Fichier JSON du document rich-text.")
    render_cmd.add_argument("--output", "-o", type=Path, help="Fichier HTML de sortie (stdout si omis).")

    fetch_cmd = sub.add_parser("fetch", help="Fetch the first metaobject and print its fields.")
    fetch_cmd.add_argument("--type", "-t", dest="document_type", default=DEFAULT_PANEL_CONFIG.document_type)
    fetch_cmd.add_argument("--html", action="store_true", help="Print the drawer markup instead of JSON.")
    fetch_cmd.add_argument("--settings", "-s", type=Path, help="Fichier YAML de configuration Storefront.")
    return parser


def _write(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text + "\n", encoding="utf-8")
    else:
        print(text)


def run_render(args: argparse.Namespace, parser: argparse.ArgumentParser) -> int:
    if not args.input.exists():
        parser.error(f"Input file not found: {args.input}")
    try:
        document = json.loads(args.input.read_text(encoding="utf-8"))
    except ValueError as e:
        parser.error(f"Invalid JSON document: {e}")

    _write(render(decode_node(document)), args.output)
    return 0


def run_fetch(args: argparse.Namespace) -> int:
    client = StorefrontClient(load_storefront_config(args.settings))
    try:
        documents = client.fetch_metaobjects(args.document_type, DEFAULT_PANEL_CONFIG.fetch_limit)
    except SizeGuideError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not documents:
        if args.html:
            print(empty_markup(DEFAULT_PANEL_CONFIG.empty_message))
        else:
            print("{}")
        return 0

    fields = parse_fields(documents[0].fields)
    if args.html:
        print(content_markup(fields, default_title=DEFAULT_PANEL_CONFIG.default_title))
    else:
        print(json.dumps(dict(fields), indent=2, ensure_ascii=False))
    return 0


def cli(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging_with_redaction(level=logging.WARNING)

    if args.command == "render":
        return run_render(args, parser)
    return run_fetch(args)


if __name__ == "__main__":  # pragma: no cover
    sys.exit(cli())
