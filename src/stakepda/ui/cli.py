from __future__ import annotations

import argparse
import logging
import sys
from signal import SIGINT, signal
from typing import TYPE_CHECKING

from dotenv import load_dotenv

from stakepda.app import reconcile_stake_credentials, run_reconciliation_daemon
from stakepda.config import ConfigurationError, configure_logging, get_reconcile_config

if TYPE_CHECKING:
    from collections.abc import Sequence
    from types import FrameType

log = logging.getLogger(__name__)


def _positive_int(value: str) -> int:
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"Invalid integer: {value}") from exc
    if parsed < 1:
        raise argparse.ArgumentTypeError("Value must be a positive integer")
    return parsed


def _parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Reconcile staker credentials against observed stake"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    run = subparsers.add_parser("run", help="Run a single reconciliation pass")
    run.add_argument(
        "--dry-run",
        action="store_true",
        help="Plan and log the upcoming actions without writing to the registry",
    )

    daemon = subparsers.add_parser("daemon", help="Run reconciliation passes on a schedule")
    daemon.add_argument(
        "--interval-seconds",
        type=_positive_int,
        default=None,
        help="Seconds between passes (defaults to config, else daily at midnight UTC)",
    )
    daemon.add_argument(
        "--max-passes",
        type=_positive_int,
        default=None,
        help="Stop after this many passes",
    )

    return parser.parse_args(list(argv))


def main(argv: Sequence[str] | None = None) -> None:
    """Main application entry point."""
    args_list = list(argv) if argv is not None else list(sys.argv[1:])
    parsed_args = _parse_args(args_list)

    configure_logging(level=logging.DEBUG if parsed_args.verbose else logging.INFO)

    try:
        if parsed_args.command == "run":
            report = reconcile_stake_credentials(dry_run=parsed_args.dry_run)
            if report is not None and parsed_args.dry_run:
                for spec in report.actions.add:
                    log.info("Would create: %s", spec.as_payload())
                for spec in report.actions.update:
                    log.info("Would update: %s", spec.as_payload())
            if report is not None and not report.ok:
                sys.exit(1)
        elif parsed_args.command == "daemon":
            interval = parsed_args.interval_seconds or get_reconcile_config().interval_seconds
            run_reconciliation_daemon(
                interval_seconds=interval,
                max_passes=parsed_args.max_passes,
            )
        else:
            raise ValueError(f"Unsupported command: {parsed_args.command}")  # noqa: TRY301
    except ConfigurationError:
        log.exception("Configuration error")
        sys.exit(2)
    except Exception:
        log.exception("Fatal error during reconciliation")
        sys.exit(1)


def sigint_handler(_signal_received: int, _frame: FrameType | None) -> None:
    """Handle SIGINT (Ctrl+C) gracefully."""
    log.info("Closed by user (Ctrl+C)")
    sys.exit(0)


def run() -> None:
    load_dotenv()
    signal(SIGINT, sigint_handler)
    main()


if __name__ == "__main__":
    run()
