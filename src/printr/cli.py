"""Command-line interface for printr."""

import argparse
import sys
from pathlib import Path
from typing import BinaryIO

from printr import __version__
from printr.exceptions import ConfigError, InputError, SpoolerError
from printr.logging_config import get_logger
from printr.outcome import PrintOutcome
from printr.printing.factory import BACKEND_NAMES
from printr.runner import PrintJobRunner

logger = get_logger(__name__)


class PrintrArgumentParser(argparse.ArgumentParser):
    """ArgumentParser whose usage errors exit with 1, the only failure code."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(1, f"{self.prog}: error: {message}\n")


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = PrintrArgumentParser(
        prog="printr",
        usage="%(prog)s [options] PRINTER [FILES ...]",
        description="Print RAW data to the given printer. The data is supplied via standard input or files.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  printr "Label Printer" label.zpl              Print a file
  printr "Label Printer" a.zpl b.zpl            Print files in order, stop at the first failure
  type label.zpl | printr "Label Printer"       Print standard input
  printr -c printr.yaml "Label Printer" x.prn   Use settings from a config file
""",
    )

    parser.add_argument(
        "printer",
        nargs="?",
        metavar="PRINTER",
        help="The printer to send the print job to.",
    )

    parser.add_argument(
        "files",
        nargs="*",
        type=Path,
        metavar="FILES",
        help="Optional argument. Prints the given files. If omitted the input will be read from Standard Input.",
    )

    parser.add_argument(
        "-V",
        "--version",
        action="store_true",
        help="Show version information and exit",
    )

    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to YAML configuration file (default: $PRINTR_CONFIG)",
    )

    parser.add_argument(
        "--backend",
        choices=BACKEND_NAMES,
        help="Spooler backend to use (default: platform spooler)",
    )

    parser.add_argument(
        "--document-name",
        help="Job name shown in the print queue",
    )

    # Logging options
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase verbosity (-v for verbose, -vv for debug)",
    )

    parser.add_argument(
        "-q",
        "--quiet",
        action="store_true",
        help="Suppress all output except errors",
    )

    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file (includes all levels)",
    )

    return parser


def open_input(path: Path) -> BinaryIO:
    """Open an input file for reading raw bytes.

    Raises:
        InputError: If the file cannot be opened
    """
    try:
        return open(path, "rb")
    except OSError as e:
        raise InputError(f"Failed to open file: {path}!", context={"reason": e.strerror}) from e


def print_inputs(runner: PrintJobRunner, printer: str, files: list[Path]) -> PrintOutcome:
    """Print standard input, or each file in turn until one fails.

    Raises:
        InputError: If a file cannot be opened; no later file is printed
    """
    if not files:
        logger.debug("Reading from standard input")
        return runner.run(printer, sys.stdin.buffer)

    outcome = PrintOutcome.OK
    for path in files:
        with open_input(path) as stream:
            logger.info("Printing %s", path)
            outcome = runner.run(printer, stream)
        if not outcome.ok:
            break
    return outcome


def build_runner(parsed: argparse.Namespace) -> PrintJobRunner:
    """Build a PrintJobRunner from the config file and CLI overrides."""
    from printr.config import Config, load_config, resolve_config_path
    from printr.printing.factory import get_backend, get_default_backend

    config = Config()
    config_path = resolve_config_path(parsed.config)
    if config_path is not None:
        config = load_config(config_path)
        logger.debug("Loaded configuration from %s", config_path)

    config = config.merged(backend=parsed.backend, document_name=parsed.document_name)

    if config.backend:
        backend = get_backend(config.backend)
    else:
        backend = get_default_backend()

    return PrintJobRunner(
        backend,
        buffer_size=config.buffer_size,
        document_name=config.document_name,
    )


def main(args: list[str] | None = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    parsed = parser.parse_args(args)

    # Setup logging based on CLI flags
    from printr.logging_config import setup_logging

    setup_logging(
        verbosity=parsed.verbose,
        quiet=parsed.quiet,
        log_file=parsed.log_file,
    )

    if parsed.version:
        print(f"printr {__version__}")
        return 0

    if parsed.printer is None:
        parser.print_help()
        return 0

    try:
        runner = build_runner(parsed)
    except ConfigError as e:
        logger.error("Configuration error: %s", e)
        return 1
    except FileNotFoundError as e:
        logger.error("%s", e)
        return 1
    except SpoolerError as e:
        logger.error("%s", e)
        return 1

    try:
        outcome = print_inputs(runner, parsed.printer, parsed.files)
    except InputError as e:
        logger.error("%s", e)
        return 1

    if not outcome.ok:
        logger.error("%s", outcome.message)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
