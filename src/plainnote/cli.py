"""Command-line interface for plainnote.

    plainnote build [--notes DIR] [--out DIR] [--meta FILE] [--keep-going]
    plainnote compile [--config FILE] [--escape-html] FILE
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from plainnote import Notes, __version__
from plainnote.errors import PlainNoteError
from plainnote.site import build_site, load_site_config
from plainnote.utils.logger import get_logger

logger = get_logger(__name__)


def cmd_build(args: argparse.Namespace) -> int:
    """Build the static site."""
    config = load_site_config(args.config).with_overrides(
        notes_dir=args.notes,
        build_dir=args.out,
        meta_path=args.meta,
        keep_going=True if args.keep_going else None,
        escape_html=True if args.escape_html else None,
    )
    report = build_site(config)

    if not args.quiet:
        print(f"Built {len(report.built)} notes into {report.build_dir}")
        for filename in report.failed:
            print(f"Skipped: {filename}", file=sys.stderr)
    return 0


def cmd_compile(args: argparse.Namespace) -> int:
    """Compile a single note and print the HTML fragment."""
    config = load_site_config(args.config).with_overrides(
        escape_html=True if args.escape_html else None,
    )
    source = args.file.read_text(encoding="utf-8")
    print(Notes(config=config.note_config)(source, source_file=str(args.file)))
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plainnote", description="Publish plain-text notes as a static site"
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log every build step"
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="Only report errors"
    )

    subparsers = parser.add_subparsers(dest="cmd", required=True)

    parser_build = subparsers.add_parser("build", help="Build the site")
    parser_build.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: ./plainnote.toml if present)",
    )
    parser_build.add_argument("--notes", type=Path, default=None, help="Notes directory")
    parser_build.add_argument("--out", type=Path, default=None, help="Build directory")
    parser_build.add_argument(
        "--meta", type=Path, default=None, help="Creation-timestamp store"
    )
    parser_build.add_argument(
        "--keep-going",
        action="store_true",
        help="Skip notes that fail to parse instead of aborting",
    )
    parser_build.add_argument(
        "--escape-html",
        action="store_true",
        help="Escape HTML in note bodies instead of passing it through",
    )
    parser_build.set_defaults(func=cmd_build)

    parser_compile = subparsers.add_parser("compile", help="Compile one note to stdout")
    parser_compile.add_argument("file", type=Path, help="Note file")
    parser_compile.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config file (default: ./plainnote.toml if present)",
    )
    parser_compile.add_argument(
        "--escape-html",
        action="store_true",
        help="Escape HTML in the note body instead of passing it through",
    )
    parser_compile.set_defaults(func=cmd_compile)

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.ERROR
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    try:
        return args.func(args)
    except (PlainNoteError, OSError) as e:
        logger.debug("command failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
