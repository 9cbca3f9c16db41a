"""
main.py - Entry point for the port sniffer CLI.

Parses the command line into a ScanConfig, runs the concurrent TCP
connect scan and prints the sorted list of open ports.

    port-sniffer 192.168.1.1
    port-sniffer -j 100 192.168.1.1
    port-sniffer -h
"""

import logging
import os
import sys
from typing import Optional, Sequence

# Third-party
from colorama import init as colorama_init, Fore, Style

# Project modules
from .config import USAGE, parse_arguments
from .errors import ArgumentError, HelpRequested
from .logger import LOGGER_NAME, setup_logger
from .report import print_report
from .scanner import PortScanner, ProgressTicker

logger = logging.getLogger(LOGGER_NAME)

EXIT_OK = 0
EXIT_FATAL = 1
EXIT_USAGE = 2
EXIT_INTERRUPTED = 130


def _program_name() -> str:
    if sys.argv and sys.argv[0]:
        return os.path.basename(sys.argv[0])
    return "port-sniffer"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run one scan session and return the process exit code."""
    args = sys.argv[1:] if argv is None else list(argv)

    # ── 1. Arguments (fail fast, nothing is scanned on bad input) ─────
    try:
        config = parse_arguments(args)
    except HelpRequested:
        print(USAGE)
        return EXIT_OK
    except ArgumentError as exc:
        logger.info("Argument error: %s", exc)
        print(
            f"{Fore.RED}{_program_name()} problem parsing arguments: {exc}"
            f"{Style.RESET_ALL}",
            file=sys.stderr,
        )
        return EXIT_USAGE

    # ── 2. Scan ───────────────────────────────────────────────────────
    logger.info("=== Scan session started ===")

    color = sys.stdout.isatty()
    scanner = PortScanner(
        threads=config.threads,
        progress=ProgressTicker(color=color),
    )
    open_ports = scanner.scan(config.address)

    # ── 3. Report ─────────────────────────────────────────────────────
    print_report(open_ports, color=color)

    logger.info(
        "=== Scan session finished - %s, %d open ports ===",
        config.address,
        len(open_ports),
    )
    return EXIT_OK


def run() -> None:
    """Console-script entry point: set up terminal and logging, then exit."""
    colorama_init(autoreset=True)
    setup_logger()
    try:
        code = main()
    except KeyboardInterrupt:
        print(
            f"\n\n{Fore.YELLOW}  [!] Scan interrupted by user (Ctrl+C)."
            f"  Shutting down …{Style.RESET_ALL}\n"
        )
        logger.warning("Scan interrupted by user (KeyboardInterrupt)")
        code = EXIT_INTERRUPTED
    except Exception as exc:
        print(f"\n{Fore.RED}  [✘] Fatal error: {exc}{Style.RESET_ALL}\n", file=sys.stderr)
        logger.critical("Fatal error: %s", exc, exc_info=True)
        code = EXIT_FATAL
    sys.exit(code)


# ══════════════════════════════════════════════════════════════════════ #
if __name__ == "__main__":
    run()
