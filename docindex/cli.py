"""
CLI interface for docindex.

Parses the index files named on the command line and prints their entries.
"""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import TYPE_CHECKING

from docindex import __version__
from docindex.config import DEFAULT_CONFIG, OUTPUT_FORMATS, get_config_template, load_config
from docindex.errors import IndexFormatError
from docindex.formatter import format_index_entry
from docindex.ordering import sorted_entries
from docindex.parser import parse_idx_file

if TYPE_CHECKING:
    from typing import Any

    from docindex.entry import IndexEntry
    from docindex.parser import ParsedIndex

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="docindex",
        description="Inspect documentation index (.idx) files",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  docindex strutils.idx                     # Entries as JSON
  docindex a.idx b.idx --format idx --sort  # Re-serialize, sorted
  docindex strutils.idx --title-only        # Resolved title per file
        """,
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="FILE",
        help="Index files to parse",
    )
    parser.add_argument(
        "-o", "--output",
        help="Output file (default: stdout)",
    )
    parser.add_argument(
        "-c", "--config",
        metavar="FILE",
        help="YAML config file",
    )
    parser.add_argument(
        "--init-config",
        action="store_true",
        help="Print a config template and exit",
    )
    parser.add_argument(
        "--format",
        choices=OUTPUT_FORMATS,
        help="Output format (overrides config)",
    )
    parser.add_argument(
        "--sort",
        action="store_true",
        help="Sort entries by keyword, then link (style-insensitive)",
    )
    parser.add_argument(
        "--title-only",
        action="store_true",
        help="Only print the resolved title of each file",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Verbose output",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"docindex {__version__}",
    )

    return parser


def setup_logging(verbose: bool) -> None:
    """Configure logging based on verbosity."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def entry_to_dict(entry: IndexEntry) -> dict[str, Any]:
    """JSON-friendly view of an entry."""
    return {
        "kind": entry.kind.tag,
        "keyword": entry.keyword,
        "link": entry.link,
        "link_title": entry.link_title,
        "link_desc": entry.link_desc,
        "line": entry.line,
        "module": entry.module,
    }


def render(
    parsed: dict[str, ParsedIndex],
    output_config: dict[str, Any],
    title_only: bool = False,
) -> str:
    """
    Render parsed files for output.

    Args:
        parsed: Parse results keyed by file path.
        output_config: The ``output`` config section.
        title_only: Emit each file's resolved title instead of its entries.

    Returns:
        Text to print.
    """
    if title_only:
        selected = {path: [result.title] for path, result in parsed.items() if result.title.keyword}
    else:
        selected = {path: list(result.entries) for path, result in parsed.items()}

    if output_config.get("sort"):
        selected = {path: sorted_entries(entries) for path, entries in selected.items()}

    if output_config.get("format") == "idx":
        return "".join(
            format_index_entry(entry)
            for entries in selected.values()
            for entry in entries
        )

    data = {
        path: [entry_to_dict(entry) for entry in entries]
        for path, entries in selected.items()
    }
    return json.dumps(data, indent=output_config.get("indent"), ensure_ascii=False) + "\n"


def main(argv: list[str] | None = None) -> None:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.verbose)

    if args.init_config:
        print(get_config_template())
        return

    if not args.files:
        parser.error("no index files given")

    config = DEFAULT_CONFIG
    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            print(f"Error: Config file '{config_path}' does not exist", file=sys.stderr)
            sys.exit(1)
        try:
            config = load_config(config_path)
        except ValueError as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)

    output_config = dict(config["output"])
    if args.format:
        output_config["format"] = args.format
    if args.sort:
        output_config["sort"] = True

    encoding = config["input"].get("encoding", "utf-8")
    parsed: dict[str, ParsedIndex] = {}
    for name in args.files:
        path = Path(name)
        try:
            parsed[name] = parse_idx_file(path, encoding=encoding)
        except IndexFormatError as e:
            print(f"Error: {path}: {e}", file=sys.stderr)
            sys.exit(1)
        except OSError as e:
            print(f"Error: Could not read '{path}': {e}", file=sys.stderr)
            sys.exit(1)
        except UnicodeDecodeError as e:
            print(f"Error: Could not decode '{path}': {e}", file=sys.stderr)
            sys.exit(1)
        if not parsed[name].title.keyword:
            logger.warning("%s has no title entry", path)

    output = render(parsed, output_config, title_only=args.title_only)

    if args.output:
        with open(args.output, "w", encoding="utf-8") as f:
            f.write(output)
        if args.verbose:
            print(f"Output written to: {args.output}", file=sys.stderr)
    else:
        sys.stdout.write(output)


if __name__ == "__main__":
    main()
