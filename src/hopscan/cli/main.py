# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""hopscan CLI."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import IO

from ..config import HttpSettings, load_http_settings, load_pipeline_settings
from ..errors import UnknownPolicyError
from ..log import setup_logging
from ..redirects import REDIRECT_POLICIES, available_policies
from ..runtime import HopScan
from ..scan.sources import host_source

logger = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid positive integer: {value!r}") from None
    if parsed < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1: {value!r}")
    return parsed


def _positive_float(value: str) -> float:
    try:
        parsed = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number: {value!r}") from None
    if parsed <= 0:
        raise argparse.ArgumentTypeError(f"must be greater than 0: {value!r}")
    return parsed


def build_parser() -> argparse.ArgumentParser:
    pipeline = load_pipeline_settings()
    parser = argparse.ArgumentParser(
        description="Probe hostnames over http/https and report redirect status (requestURL,status,responseURL)"
    )
    parser.add_argument(
        "source",
        nargs="?",
        default=None,
        help="File with one hostname per line (default: standard input, also '-')",
    )
    parser.add_argument(
        "-w",
        "--workers",
        type=_positive_int,
        default=pipeline.workers,
        help=f"Number of concurrent probe workers (default: {pipeline.workers})",
    )
    parser.add_argument(
        "-p",
        "--policy",
        choices=available_policies(),
        default=None,
        help=f"Redirect policy (default: {pipeline.redirect_policy})",
    )
    parser.add_argument(
        "--scheme",
        dest="schemes",
        action="append",
        metavar="SCHEME",
        help="Scheme to probe each hostname with; repeatable (default: " + ",".join(pipeline.schemes) + ")",
    )
    parser.add_argument(
        "--timeout",
        type=_positive_float,
        default=None,
        help="Per-request timeout in seconds",
    )
    parser.add_argument(
        "--ignore-ssl-errors",
        action="store_true",
        help="Skip TLS verification (useful for lab/self-signed targets)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Logging level (default: HOPSCAN_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--list-policies",
        action="store_true",
        help="List available redirect policies and exit",
    )
    return parser


def _print_policies(stream: IO[str]) -> None:
    for name in available_policies():
        stream.write(f"{name}\t{REDIRECT_POLICIES[name].description}\n")


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level)

    if args.list_policies:
        _print_policies(sys.stdout)
        return 0

    settings: HttpSettings = load_http_settings()
    if args.ignore_ssl_errors:
        settings.verify_ssl = False
    if args.timeout is not None:
        settings.timeout = args.timeout

    schemes = [scheme.strip().lower() for scheme in (args.schemes or []) if scheme.strip()]
    source = host_source(args.source, sys.stdin)

    try:
        scanner = HopScan(args.policy, workers=args.workers, schemes=schemes or None, http_settings=settings)
    except UnknownPolicyError as exc:
        parser.error(str(exc))

    with scanner:
        summary = scanner.inspect(source, out=sys.stdout, err=sys.stderr)

    logger.info("Probed %d candidate URL(s): %d result(s), %d error(s)", summary.candidates, summary.results, summary.errors)
    return 0 if summary.completed else 1


if __name__ == "__main__":
    raise SystemExit(main())
