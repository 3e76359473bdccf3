"""Command-line entry point for monitoring a single network interface."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from typing import Dict, List, Optional

from .console import ConsoleRenderer
from .counter_source import CounterSource
from .interfaces import describe_interfaces
from .monitor import InterfaceMonitor, MonitorOptions, MonitorStartupError
from .utils import DEFAULT_INTERVAL, HEADER_INTERVAL, PROC_NET_DEV

logger = logging.getLogger(__name__)

_EPILOG = """\
examples:
  netstat-monitor eth0              Monitor eth0 with default settings
  netstat-monitor ppp0 -i 1 -n 60   Monitor ppp0 every 1 second for 60 iterations

signals:
  SIGINT (Ctrl+C), SIGTERM          Gracefully exit and print summary
"""


def positive_int(text: str) -> int:
    try:
        value = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer: {value}")
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netstat-monitor",
        description=f"Monitor real-time network interface statistics from {PROC_NET_DEV}.",
        epilog=_EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "interface",
        help="Network interface to monitor (e.g. eth0, ppp0, lo).",
    )
    parser.add_argument(
        "-i",
        "--interval",
        type=positive_int,
        default=DEFAULT_INTERVAL,
        metavar="SECONDS",
        help=f"Update interval in seconds (default: {DEFAULT_INTERVAL}).",
    )
    parser.add_argument(
        "-n",
        "--count",
        type=positive_int,
        default=None,
        metavar="ITERATIONS",
        help="Number of iterations (default: unlimited).",
    )
    parser.add_argument(
        "--source",
        default=PROC_NET_DEV,
        metavar="PATH",
        help=f"Counter table to read (default: {PROC_NET_DEV}).",
    )
    parser.add_argument(
        "--header-every",
        type=positive_int,
        default=HEADER_INTERVAL,
        metavar="ROWS",
        help=f"Repeat column headers after this many rows (default: {HEADER_INTERVAL}).",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default="WARNING",
        help="Log level for diagnostic output.",
    )
    return parser


def install_signal_handlers(monitor: InterfaceMonitor) -> Dict[int, object]:
    """Route SIGINT/SIGTERM to ``monitor.stop``; returns the handlers replaced."""

    def _handle(signum, frame) -> None:
        monitor.stop()

    previous: Dict[int, object] = {}
    for signum in (signal.SIGINT, signal.SIGTERM):
        try:
            previous[signum] = signal.signal(signum, _handle)
        except (OSError, ValueError) as exc:
            logger.warning("Cannot install handler for %s: %s", signal.Signals(signum).name, exc)
    return previous


def restore_signal_handlers(previous: Dict[int, object]) -> None:
    for signum, handler in previous.items():
        signal.signal(signum, handler)


def report_missing_interface(exc: MonitorStartupError) -> None:
    print("Available interfaces:", file=sys.stderr)
    for info in describe_interfaces(exc.available_interfaces):
        print(f"  {info.describe()}", file=sys.stderr)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=getattr(logging, args.log_level))

    if not args.interface.strip():
        parser.error("interface name must not be empty")

    options = MonitorOptions(
        interface=args.interface,
        interval=args.interval,
        max_iterations=args.count,
        header_interval=args.header_every,
        source_path=args.source,
    )
    monitor = InterfaceMonitor(
        options,
        ConsoleRenderer(sys.stdout, sys.stderr),
        source=CounterSource(options.source_path),
    )

    previous_handlers = install_signal_handlers(monitor)
    try:
        monitor.run()
    except MonitorStartupError as exc:
        logger.error(str(exc))
        if exc.available_interfaces:
            report_missing_interface(exc)
        return 1
    finally:
        restore_signal_handlers(previous_handlers)

    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
