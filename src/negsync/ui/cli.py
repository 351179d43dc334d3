# ruff: noqa: T201

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from negsync.adapters.neg_status import (
    NegStatusDecodeError,
    encode_neg_status,
    encode_port_name_map,
    parse_port_name_map,
)
from negsync.app import describe_neg_status, plan_neg_sync
from negsync.config import ConfigurationError, configure_logging, get_cli_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Inspect NEG status annotations")
    subparsers = parser.add_subparsers(dest="command", required=True)

    parse = subparsers.add_parser("parse", help="Decode a NEG status annotation value")
    parse.add_argument(
        "status",
        type=str,
        help="Annotation JSON, @path to read it from a file, or - for stdin",
    )

    diff = subparsers.add_parser("diff", help="Compute NEGs to create and delete")
    diff.add_argument(
        "--desired",
        type=str,
        required=True,
        help='Desired port -> NEG name JSON object, e.g. {"80": "neg-a"} (@path and - accepted)',
    )
    diff.add_argument(
        "--status",
        type=str,
        required=True,
        help="Current NEG status annotation JSON (@path and - accepted)",
    )

    return parser.parse_args(list(argv))


def _read_source(value: str) -> str:
    if value == "-":
        return sys.stdin.read()
    if value.startswith("@"):
        path = Path(value[1:])
        try:
            return path.read_text(encoding="utf-8")
        except OSError as exc:
            raise ValueError(f"Cannot read {path}: {exc}") from exc
    return value


def _run(args: argparse.Namespace) -> None:
    if args.command == "parse":
        status = describe_neg_status(_read_source(args.status))
        print(encode_neg_status(status))
    elif args.command == "diff":
        desired = parse_port_name_map(_read_source(args.desired))
        delta = plan_neg_sync(desired, _read_source(args.status))
        print(
            json.dumps(
                {
                    "to_add": encode_port_name_map(delta.to_add),
                    "to_remove": encode_port_name_map(delta.to_remove),
                }
            )
        )
    else:
        raise ValueError(f"Unsupported command: {args.command}")


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    try:
        config = get_cli_config()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        sys.exit(2)
    configure_logging(level=config.log_level)

    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    try:
        _run(parsed_args)
    except NegStatusDecodeError as exc:
        log.error("Malformed input (%s): %s", exc.kind, exc)  # noqa: TRY400
        sys.exit(2)
    except ValueError:
        log.exception("CLI validation error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    """Console script entry point."""
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
