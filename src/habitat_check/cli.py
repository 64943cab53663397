"""Command-line entry point for the supervisor health check.

Usage:
    habitat-check [-u URL] [-s name.group ...] [-t SECONDS]
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from .check_executor import PLUGIN_NAME, run_check
from .check_state import CheckState
from .config import CheckConfig, ConfigurationError
from .logging_config import setup_logging


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=PLUGIN_NAME,
        description="Checks habitat supervisor for service health",
    )
    parser.add_argument("-u", "--supervisor-url", help="Supervisor URL (default http://127.0.0.1:9631)")
    parser.add_argument(
        "-s",
        "--service",
        action="append",
        dest="services",
        metavar="NAME.GROUP",
        help="Explicit service to check, in format service_name.service_group (repeatable)",
    )
    parser.add_argument("-t", "--timeout", type=int, help="Request timeout in seconds (default 15)")
    parser.add_argument(
        "--max-concurrency",
        type=int,
        help="Health requests allowed in flight at once (default 1)",
    )
    parser.add_argument("--log-level", help="Diagnostic log level written to stderr (default WARNING)")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the check once and return its exit code."""
    args = build_parser().parse_args(argv)

    try:
        setup_logging(args.log_level)
        config = CheckConfig.from_sources(
            supervisor_url=args.supervisor_url,
            services=args.services,
            timeout_seconds=args.timeout,
            max_concurrency=args.max_concurrency,
        )
    except ConfigurationError as exc:
        print(f"{PLUGIN_NAME} {CheckState.WARNING.name}: {exc}")
        return CheckState.WARNING.value

    result = asyncio.run(run_check(config))
    for line in result.output_lines():
        print(line)
    return result.exit_code


if __name__ == "__main__":
    sys.exit(main())
