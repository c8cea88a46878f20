"""Command line interface for gradient-slice."""

from __future__ import annotations

import argparse
import json
import logging
from itertools import islice
from pathlib import Path
from typing import Any, Sequence

from pydantic import ValidationError

from . import __version__
from .config import GradientConfig, load_config, validate_config_file
from .gradient import Gradient
from .indexing import span_at, total_windows, window_at
from .logging_utils import DEFAULT_LOG_LEVEL, configure_logging, log_event
from .sources import load_source, parse_hex

logger = logging.getLogger(__name__)


def _print_result(result: Any, as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, indent=2))
    else:
        print(result)


def _add_source_options(parser: argparse.ArgumentParser) -> None:
    group = parser.add_mutually_exclusive_group(required=True)
    group.add_argument("--text", help="Use the characters of TEXT as the source")
    group.add_argument("--hex", help="Use the bytes of a hex string (e.g. 1BADB002) as the source")
    group.add_argument("--file", type=Path, help="Load the source from a text/bytes/JSON/JSONL/CSV file")
    parser.add_argument(
        "--format",
        choices=["auto", "text", "bytes", "json", "jsonl", "csv"],
        help="Source file format (default: by suffix)",
    )
    parser.add_argument("--value-column", help="Column or key holding values in CSV/JSONL sources")
    parser.add_argument("--max-width", type=int, help="Longest window to produce")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gradient-slice",
        description="Enumerate every contiguous window of a sequence, shortest first.",
    )
    parser.add_argument("--config", type=Path, help="YAML or JSON file with default options")
    parser.add_argument(
        "--log-level", default=DEFAULT_LOG_LEVEL, help=f"Logging level (default: {DEFAULT_LOG_LEVEL})"
    )
    parser.add_argument("--json-logs", action="store_true", help="Emit JSON logs")

    subparsers = parser.add_subparsers(dest="command", required=True)

    windows = subparsers.add_parser("windows", help="List windows in enumeration order")
    _add_source_options(windows)
    windows.add_argument("--limit", type=int, help="Stop after this many windows")
    windows.add_argument("--separator", help="Separator placed between characters of text windows")
    windows.add_argument("--output", type=Path, help="Optional path to write the windows as JSON")
    windows.add_argument("--json", action="store_true", help="Emit windows as JSON")

    at = subparsers.add_parser("at", help="Show the window at a position of the enumeration")
    at.add_argument("index", type=int, help="Position in the enumeration (negative counts from the end)")
    _add_source_options(at)
    at.add_argument("--json", action="store_true", help="Emit the window as JSON")

    count = subparsers.add_parser("count", help="Count the windows of a sequence of length N")
    count.add_argument("n", type=int, help="Sequence length")
    count.add_argument("--max-width", type=int, help="Longest window to count")
    count.add_argument("--json", action="store_true", help="Emit the count as JSON")

    validate = subparsers.add_parser("validate", help="Validate a configuration file")
    validate.add_argument("config_file", type=Path, help="Path to configuration file")
    validate.add_argument("--json", action="store_true", help="Emit validation result as JSON")

    subparsers.add_parser("version", help="Display the installed version")

    return parser


def _resolve_config(args: argparse.Namespace) -> GradientConfig:
    return load_config(args.config).merged(
        max_width=getattr(args, "max_width", None),
        limit=getattr(args, "limit", None),
        source_format=getattr(args, "format", None),
        value_column=getattr(args, "value_column", None),
        separator=getattr(args, "separator", None),
    )


def _resolve_source(args: argparse.Namespace, config: GradientConfig) -> Sequence[Any]:
    if args.text is not None:
        return args.text
    if args.hex is not None:
        return parse_hex(args.hex)
    return load_source(args.file, source_format=config.source_format, value_column=config.value_column)


def _values(view: Any, source: Any, config: GradientConfig) -> Any:
    if isinstance(source, str):
        return view.join(config.separator)
    return list(view)


def _run_windows(args: argparse.Namespace, config: GradientConfig) -> None:
    source = _resolve_source(args, config)
    gradient = Gradient(source, max_width=config.max_width)
    total = total_windows(len(source), config.max_width)

    rows: list[dict[str, Any]] = []
    for view in islice(gradient, config.limit):
        rows.append({"start": gradient.start, "length": gradient.width, "values": _values(view, source, config)})
    log_event(logger, "windows", n=len(source), total=total, emitted=len(rows), json_logs=args.json_logs)

    payload = {"n": len(source), "total": total, "max_width": config.max_width, "windows": rows}
    if args.output:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        print(f"Wrote {len(rows)} windows to {args.output}")
    elif args.json:
        _print_result(payload, as_json=True)
    else:
        for row in rows:
            print(f"[{row['start']}, {row['start'] + row['length']}) {row['values']!r}")


def _run_at(args: argparse.Namespace, config: GradientConfig) -> None:
    source = _resolve_source(args, config)
    try:
        span = span_at(len(source), args.index, config.max_width)
    except IndexError as exc:
        raise SystemExit(str(exc)) from exc
    view = window_at(source, args.index, config.max_width)
    log_event(logger, "at", n=len(source), index=args.index, json_logs=args.json_logs)

    result = {"index": args.index, **span.as_dict(), "values": _values(view, source, config)}
    if args.json:
        _print_result(result, as_json=True)
    else:
        print(f"[{span.start}, {span.stop}) {result['values']!r}")


def main(argv: Sequence[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(level=args.log_level, json_logs=args.json_logs)

    try:
        if args.command == "windows":
            _run_windows(args, _resolve_config(args))
        elif args.command == "at":
            _run_at(args, _resolve_config(args))
        elif args.command == "count":
            if args.n < 0:
                raise SystemExit("Sequence length cannot be negative.")
            config = _resolve_config(args)
            total = total_windows(args.n, config.max_width)
            log_event(logger, "count", n=args.n, total=total, json_logs=args.json_logs)
            if args.json:
                _print_result({"n": args.n, "max_width": config.max_width, "total": total}, as_json=True)
            else:
                print(total)
        elif args.command == "validate":
            result = validate_config_file(args.config_file)
            _print_result(result.as_dict(), as_json=args.json)
        elif args.command == "version":
            print(__version__)
    except (FileNotFoundError, ValueError, ValidationError) as exc:
        raise SystemExit(str(exc)) from exc


if __name__ == "__main__":
    main()
