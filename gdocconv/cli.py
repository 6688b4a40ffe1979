"""Command-line interface for gdocconv."""

import argparse
import sys
from pathlib import Path
from typing import Iterable, Optional

from . import __version__
from .config import ConverterOptions, load_options
from .convert import Converter
from .dom_model import dom_to_dict
from .indexes import build_list_info, build_object_info
from .io_utils import dump_tree, load_document, log, warn, write_text
from .models import Document
from .render import render_document


def _options_from_args(args: argparse.Namespace) -> ConverterOptions:
    options = load_options(Path(args.config)) if args.config else ConverterOptions()
    overrides: dict[str, bool] = {}
    if args.skip_blank_runs:
        overrides["skip_blank_runs"] = True
    if args.no_suggestions:
        overrides["render_suggestions"] = False
    if args.no_highlight:
        overrides["render_highlight"] = False
    if args.no_merge:
        overrides["merge_inline"] = False
    if overrides:
        options = options.model_copy(update=overrides)
    return options


def _handle_convert(args: argparse.Namespace) -> None:
    options = _options_from_args(args)

    log(f"reading {args.read_doc!r}", silent=args.silent)
    document = load_document(args.read_doc)
    log(f"got {document.title!r}", silent=args.silent)

    root = Converter(options).convert(document)
    if not root.children:
        warn(f"{args.read_doc}: document body produced no HTML")

    if args.dump_tree:
        dump_tree(Path(args.dump_tree), dom_to_dict(root))

    output = render_document(
        root,
        title=document.title,
        standalone=args.standalone,
        pretty=args.pretty,
    )
    if args.output:
        path = write_text(Path(args.output), output)
        log(f"wrote {path}", silent=args.silent)
    else:
        sys.stdout.write(output)


def _summarize(document: Document) -> list[str]:
    lists = build_list_info(document.lists)
    objects = build_object_info(document.inline_objects)
    ordered = sum(1 for tag in lists.values() if tag == "ol")
    return [
        f"title: {document.title}",
        f"elements: {len(document.body.content)}",
        f"lists: {len(lists)} ({ordered} ordered)",
        f"inline objects: {len(objects)}",
    ]


def _handle_validate(args: argparse.Namespace) -> None:
    document = load_document(args.read_doc)
    for line in _summarize(document):
        print(line)


def _add_convert_flags(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--config",
        help="YAML file with converter options.",
    )
    parser.add_argument(
        "--skip-blank-runs",
        dest="skip_blank_runs",
        action="store_true",
        help="Drop text runs that contain only whitespace.",
    )
    parser.add_argument(
        "--no-suggestions",
        dest="no_suggestions",
        action="store_true",
        help="Do not wrap suggested insertions and deletions in ins/del.",
    )
    parser.add_argument(
        "--no-highlight",
        dest="no_highlight",
        action="store_true",
        help="Do not wrap highlighted text in mark.",
    )
    parser.add_argument(
        "--no-merge",
        dest="no_merge",
        action="store_true",
        help="Give every styled run its own wrapper elements.",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gdocconv",
        description="Convert Google Docs API documents into HTML",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"gdocconv {__version__}",
        help="Show the gdocconv version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    convert_parser = subparsers.add_parser(
        "convert",
        help="Convert a document JSON file to HTML.",
        description="Read a documents.get payload and render it as HTML.",
    )
    convert_parser.add_argument(
        "--read-doc",
        dest="read_doc",
        required=True,
        help="Path to the document JSON, or - for stdin.",
    )
    convert_parser.add_argument(
        "--out",
        dest="output",
        help="Path to write the HTML to (default: stdout).",
    )
    convert_parser.add_argument(
        "--standalone",
        action="store_true",
        help="Wrap the output in a complete HTML page titled after the document.",
    )
    convert_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the output HTML.",
    )
    convert_parser.add_argument(
        "--dump-tree",
        dest="dump_tree",
        help="Also write the converted tree as JSON to this path.",
    )
    convert_parser.add_argument(
        "--silent",
        action="store_true",
        help="Don't log progress output.",
    )
    _add_convert_flags(convert_parser)
    convert_parser.set_defaults(func=_handle_convert)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that a document JSON file parses.",
        description="Validate a documents.get payload and print a summary.",
    )
    validate_parser.add_argument(
        "--read-doc",
        dest="read_doc",
        required=True,
        help="Path to the document JSON, or - for stdin.",
    )
    validate_parser.set_defaults(func=_handle_validate)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]
