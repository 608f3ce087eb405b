"""Command line entry point: render a record document as a resource tree."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from RestCLI.config import ConfigError, Settings, load_settings
from RestCLI.path_decoder import MalformedPathError
from RestCLI.record_filter import PatternError, filter_records, split_patterns
from RestCLI.record_loader import RecordLoadError, load_records, load_records_file
from RestCLI.tree_renderer import render_records

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="restcli-tree",
        description="Render resource records as a compressed nested tree.",
    )
    p.add_argument(
        "records",
        help="YAML record document (path -> attributes), or '-' for stdin.",
    )
    p.add_argument("-q", "--quiet", action="store_true", help="Disable logging.")
    p.add_argument(
        "-v",
        dest="verbosity",
        action="count",
        default=0,
        help="Increase log verbosity.",
    )
    p.add_argument(
        "-f", "--config",
        dest="config_path",
        default=None,
        help="Settings file (YAML).",
    )
    p.add_argument(
        "--root",
        default=None,
        help="Only render records at or below this path.",
    )
    p.add_argument(
        "--filter",
        dest="filter_raw",
        default=None,
        help="Comma-separated regex patterns; keep paths matching any of them.",
    )
    p.add_argument(
        "--indent",
        dest="indent_width",
        type=int,
        default=None,
        help="Spaces per nesting level (default 2).",
    )
    p.add_argument(
        "-o", "--output",
        default=None,
        help="Write the tree to this file instead of stdout.",
    )
    return p


def _log_level(quiet: bool, verbosity: int) -> int:
    if quiet:
        return logging.CRITICAL + 1
    if verbosity == 0:
        return logging.INFO
    return logging.DEBUG


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=_log_level(args.quiet, args.verbosity),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        settings = load_settings(args.config_path) if args.config_path else Settings()
    except ConfigError as exc:
        logger.error("%s", exc)
        return 1

    root = args.root if args.root is not None else settings.root
    indent_width = args.indent_width if args.indent_width is not None else settings.indent_width
    if indent_width < 1:
        logger.error("Indent width must be at least 1, got %d", indent_width)
        return 1

    patterns = (
        split_patterns(args.filter_raw)
        if args.filter_raw is not None
        else settings.filters
    )

    try:
        if args.records == "-":
            records = load_records(sys.stdin.read(), yes_no=settings.yes_no)
        else:
            records = load_records_file(args.records, yes_no=settings.yes_no)
        selected = filter_records(records, prefix=root, patterns=patterns)
        output = render_records(selected, indent_width=indent_width)
    except RecordLoadError as exc:
        logger.error("Load records %s fail: %s", args.records, exc)
        return 1
    except PatternError as exc:
        for err in exc.errors:
            logger.error("Invalid regex: %s", err)
        return 1
    except MalformedPathError as exc:
        logger.error("%s", exc)
        return 1

    logger.debug("Rendering %d of %d records", len(selected), len(records))

    if args.output:
        try:
            out_path = Path(args.output)
            out_path.parent.mkdir(parents=True, exist_ok=True)
            out_path.write_text(output, encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to write '%s': %s", args.output, exc)
            return 1
        logger.info("Tree saved to file: %s", args.output)
    else:
        sys.stdout.write(output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
