#!/usr/bin/env python3
"""
Command line front end for the numeric display formatter.

    numdisplay format 1234567.891 --preset f32
    numdisplay roundtrip 0.3333333333 --min 1 --max 10
    numdisplay parse "−1 234.5"
    numdisplay latlon 59.329444
"""

import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from ..utils.constants import ROUND_TRIP_DECIMALS_LIMIT
from ..utils.parsing import parse_f64
from ..utils.responses import error, safe_execute, success
from .config import DisplayConfig, load_config
from .formatting import format_lat_lon, format_value
from .options import PRESETS
from .roundtrip import format_with_decimals_in_range


# Simple debug logging controlled by env var NUMDISPLAY_CLI_DEBUG
def _debug_enabled() -> bool:
    v = os.environ.get("NUMDISPLAY_CLI_DEBUG", "").strip().lower()
    return v not in ("", "0", "false", "no")


def _debug(msg: str) -> None:
    if _debug_enabled():
        print(f"[cli-debug] {msg}", file=sys.stderr)


def _read_value(text: str) -> Optional[float]:
    value = parse_f64(text)
    _debug(f"read {text!r} as {value!r}")
    return value


def _not_a_number(text: str) -> Dict[str, Any]:
    return error(f"Not a number: {text!r}", code="PARSE_FAILED", input=text)


def _cmd_format(args: argparse.Namespace, conf: DisplayConfig) -> Dict[str, Any]:
    value = _read_value(args.value)
    if value is None:
        return _not_a_number(args.value)
    options = conf.get_preset()
    if args.precision is not None:
        options = options.with_precision(args.precision)
    if args.decimals is not None:
        options = options.with_decimals(args.decimals)
    if args.always_sign:
        options = options.with_always_sign(True)
    if args.keep_zeros:
        options = options.with_strip_trailing_zeros(False)
    _debug(f"options: {options}")
    return success(format_value(value, options), value=value)


def _cmd_roundtrip(args: argparse.Namespace, conf: DisplayConfig) -> Dict[str, Any]:
    value = _read_value(args.value)
    if value is None:
        return _not_a_number(args.value)
    default_min, default_max = conf.get_decimal_range()
    min_decimals = default_min if args.min is None else args.min
    max_decimals = default_max if args.max is None else args.max
    if not 0 <= min_decimals <= max_decimals < ROUND_TRIP_DECIMALS_LIMIT:
        return error(
            f"Invalid decimal range {min_decimals}..{max_decimals}; "
            f"need 0 <= min <= max < {ROUND_TRIP_DECIMALS_LIMIT}",
            code="INVALID_RANGE",
        )
    text = format_with_decimals_in_range(value, (min_decimals, max_decimals))
    return success(text, value=value, decimal_range=[min_decimals, max_decimals])


def _cmd_parse(args: argparse.Namespace, conf: DisplayConfig) -> Dict[str, Any]:
    value = _read_value(args.text)
    if value is None:
        return _not_a_number(args.text)
    return success(value)


def _cmd_latlon(args: argparse.Namespace, conf: DisplayConfig) -> Dict[str, Any]:
    value = _read_value(args.value)
    if value is None:
        return _not_a_number(args.value)
    return success(format_lat_lon(value), value=value)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="numdisplay",
        description="Format numbers for display and read them back",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--json", action="store_true", help="Print a JSON response envelope")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")
    subparsers.required = True

    p = subparsers.add_parser("format", help="Format a value with a precision preset")
    p.add_argument("value")
    p.add_argument("--preset", choices=sorted(PRESETS), default=None,
                   help="Precision preset (default: NUMDISPLAY_PRESET or f64)")
    p.add_argument("--precision", type=int, default=None, help="Override the digit budget")
    p.add_argument("--decimals", type=int, default=None, help="Max decimals to show")
    p.add_argument("--always-sign", action="store_true", help="Show '+' for non-negative values")
    p.add_argument("--keep-zeros", action="store_true", help="Keep trailing fractional zeros")
    p.set_defaults(func=_cmd_format)

    p = subparsers.add_parser("roundtrip", help="Shortest decimals that still identify the value")
    p.add_argument("value")
    p.add_argument("--min", type=int, default=None, help="Fewest decimals to try")
    p.add_argument("--max", type=int, default=None, help="Most decimals to show")
    p.set_defaults(func=_cmd_roundtrip)

    p = subparsers.add_parser("parse", help="Parse displayed text back into a number")
    p.add_argument("text")
    p.set_defaults(func=_cmd_parse)

    p = subparsers.add_parser("latlon", help="Format a latitude or longitude")
    p.add_argument("value")
    p.set_defaults(func=_cmd_latlon)
    return parser


def _print_result(result: Dict[str, Any], as_json: bool) -> None:
    if as_json:
        print(json.dumps(result, ensure_ascii=False))
    elif result.get("success"):
        print(result.get("data"))
    else:
        print(f"error: {result.get('error')}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        conf = load_config(getattr(args, "preset", None))
    except ValueError as e:
        parser.error(str(e))
    logging.basicConfig(
        level=conf.get_log_level(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    _debug(f"command={args.command} preset={conf.preset_name}")
    result = safe_execute(args.func, args, conf)
    _print_result(result, args.json)
    return 0 if result.get("success") else 1


if __name__ == "__main__":
    sys.exit(main())
