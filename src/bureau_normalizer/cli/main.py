"""Main CLI entry point."""

import argparse
import logging
import sys
from pathlib import Path


def main(argv: list[str] | None = None) -> None:
    """Parse args and dispatch to subcommands."""
    parser = argparse.ArgumentParser(
        prog="bureau-normalizer",
        description="Normalize credit bureau responses into compact AI context",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # clean
    clean_parser = subparsers.add_parser("clean", help="Normalize one raw bureau response")
    clean_parser.add_argument(
        "--input",
        type=Path,
        required=True,
        help="Raw bureau response JSON file",
    )
    clean_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write normalized JSON to file (default: stdout)",
    )
    clean_parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to settings YAML",
    )
    clean_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Pretty-print with N spaces (overrides settings)",
    )
    clean_parser.add_argument(
        "--keep-empty",
        action="store_true",
        help="Keep null scalars in output (full fixed shape)",
    )
    clean_parser.add_argument(
        "--stats",
        action="store_true",
        help="Show size reduction and per-section record counts",
    )

    # sections
    subparsers.add_parser("sections", help="List repeated-record sections and their field maps")

    args = parser.parse_args(argv)

    if args.command == "clean":
        _run_clean(args)
    elif args.command == "sections":
        _run_sections(args)
    else:
        parser.print_help()


def _configure_logging(level: str, verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _run_clean(args: argparse.Namespace) -> None:
    """Run clean command."""
    from pydantic import ValidationError

    from bureau_normalizer.config import load_settings
    from bureau_normalizer.errors import InvalidInputError
    from bureau_normalizer.models.raw import RawDocument
    from bureau_normalizer.pipeline import normalize_document, reduction_stats

    try:
        settings = load_settings(args.config)
    except ValidationError as e:
        raise SystemExit(f"Invalid settings: {e}")
    _configure_logging(settings.log_level, args.verbose)

    try:
        text = args.input.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise SystemExit(f"Cannot read {args.input}: {e}")
    try:
        document = RawDocument.from_json(text)
    except InvalidInputError as e:
        raise SystemExit(f"Invalid input: {args.input}: {e}")
    payload = normalize_document(document)

    drop_empty = settings.drop_empty and not args.keep_empty
    indent = args.indent if args.indent is not None else settings.indent
    output = payload.to_prompt_json(drop_empty=drop_empty, indent=indent)

    if args.output:
        args.output.write_text(output, encoding="utf-8")
        print(f"Wrote normalized payload to {args.output}", file=sys.stderr)
    else:
        print(output)

    if args.stats:
        _print_stats(reduction_stats(document, payload, drop_empty=drop_empty))


def _print_stats(stats) -> None:
    """Print size reduction and record counts to stderr."""
    print(
        f"\n--- Reduction: {stats.raw_chars} -> {stats.normalized_chars} chars "
        f"({100 * stats.ratio:.1f}% removed) ---",
        file=sys.stderr,
    )
    for name, count in stats.section_counts.items():
        print(f"  {name}: {count}", file=sys.stderr)


def _run_sections(args: argparse.Namespace) -> None:
    """Run sections command."""
    from bureau_normalizer.parsing.sections import ALL_SECTIONS

    _configure_logging("WARNING", args.verbose)
    for section in ALL_SECTIONS:
        print(f"{section.name}: {section.anchor} (data key: {section.data_key or '-'})")
        for source, target in section.fields:
            print(f"  {source} -> {target}")


if __name__ == "__main__":
    main()
