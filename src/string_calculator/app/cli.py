from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from string_calculator.adapters.factory import build_log_sink, build_result_store
from string_calculator.config.loader import load_config
from string_calculator.config.models import AppConfig, StoreConfig
from string_calculator.domain.errors import FormatError
from string_calculator.observability.logging import EVENT_FORMAT_ERROR, LogMessage
from string_calculator.usecases.calculator import StringCalculator

# Thin shell over StringCalculator; business rules live in usecases/ and domain/.


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sum comma-separated integers and record prime sums")
    parser.add_argument("inputs", nargs="+", metavar="INPUT", help="Comma-separated integers, e.g. '1,2, 3'")
    parser.add_argument("--config", help="Path to YAML config")
    parser.add_argument("--store-path", help="Record prime sums to this JSONL file (overrides config)")
    parser.add_argument(
        "--log-level",
        choices=["debug", "info", "error"],
        help="Override logging level",
    )
    return parser


_VALUE_FLAGS = ("--config", "--store-path", "--log-level")
_BARE_FLAGS = ("-h", "--help")


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    # Parse CLI arguments; caller passes argv for testability.
    args = list(sys.argv[1:] if argv is None else argv)
    return build_parser().parse_args(_mark_inputs(args))


def _mark_inputs(args: list[str]) -> list[str]:
    # Inputs such as "-1,5" look like options to argparse; a "--" before the
    # first argument that is not a known flag keeps them positional.
    idx = 0
    while idx < len(args):
        arg = args[idx]
        if arg == "--":
            return args
        if arg in _VALUE_FLAGS:
            idx += 2
            continue
        if arg in _BARE_FLAGS or arg.startswith(tuple(flag + "=" for flag in _VALUE_FLAGS)):
            idx += 1
            continue
        return args[:idx] + ["--"] + args[idx:]
    return args


def apply_overrides(config: AppConfig, args: argparse.Namespace) -> None:
    # CLI overrides take precedence over config.
    if args.store_path is not None:
        config.store = StoreConfig(kind="jsonl", path=args.store_path)
    if args.log_level is not None:
        config.logging.level = args.log_level


def run(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    config = load_config(Path(args.config) if args.config else None)
    apply_overrides(config, args)

    store = build_result_store(config.store)
    log_sink = build_log_sink(config.logging)
    calculator = StringCalculator(store, log_sink=log_sink)
    try:
        for text in args.inputs:
            try:
                total = calculator.add(text)
            except FormatError as exc:
                print(f"{exc}: {exc.token!r} at position {exc.index}", file=sys.stderr)
                if log_sink is not None:
                    log_sink.emit(
                        LogMessage(
                            level="error",
                            event=EVENT_FORMAT_ERROR,
                            detail={"input": text, "token": exc.token, "index": exc.index, "reason": exc.reason.value},
                        )
                    )
                return 1
            print(total)
    finally:
        _close(store)
        _close(log_sink)
    return 0


def _close(resource: object | None) -> None:
    close = getattr(resource, "close", None)
    if callable(close):
        close()
