"""
Command line entry point.

Usage:
    dividends sales.txt
    dividends sales.txt --format json --output report.json
    python -m dividends sales.txt --log-level DEBUG

Exit codes:
    0  report written
    1  input, computation or output error (logged with context)
    2  no ledger file given
"""

import argparse
import logging
from pathlib import Path

from pydantic import ValidationError

from dividends import __version__
from dividends.config import get_settings
from dividends.domain.errors import (
    InexactArithmeticError,
    InputIOError,
    OutputIOError,
    UnknownProductError,
)
from dividends.services import DividendCalculator, LedgerParser, get_exporter

logger = logging.getLogger(__name__)


EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_NO_FILE = 2

NO_FILE_MESSAGE = "No file received."


def setup_logging(level: str = "INFO") -> None:
    """Configure root logging for the CLI."""
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s | %(name)s | %(levelname)s | %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dividends",
        description="Calculate sales representative dividends from a ledger file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Ledger format (one transaction per line, no header):
  <product>|<representative>|<quantity>
  A|R1|800000
        """,
    )

    parser.add_argument(
        "ledger",
        nargs="?",
        default="",
        help="Ledger file to process",
    )
    parser.add_argument(
        "--output", "-o",
        type=Path,
        default=None,
        help="Report file (default: DIVIDENDS_OUTPUT_PATH, suffix matching the format)",
    )
    parser.add_argument(
        "--format", "-f",
        dest="output_format",
        choices=["xml", "json"],
        default=None,
        help="Report format (default: DIVIDENDS_OUTPUT_FORMAT or xml)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: DIVIDENDS_LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the CLI and return the process exit code."""
    args = build_parser().parse_args(argv)

    try:
        settings = get_settings()
    except ValidationError as e:
        setup_logging(args.log_level or "INFO")
        for error in e.errors():
            field_name = "_".join(str(part) for part in error["loc"])
            logger.error(
                f"Invalid setting DIVIDENDS_{field_name.upper()}={error.get('input')!r}: {error['msg']}"
            )
        return EXIT_FAILURE

    setup_logging(args.log_level or settings.log_level)

    if not args.ledger:
        print(NO_FILE_MESSAGE)
        return EXIT_NO_FILE

    output_format = args.output_format or settings.output_format
    output_path = args.output or settings.output_path.with_suffix(f".{output_format}")

    calculator = DividendCalculator(
        parser=LedgerParser(encoding=settings.input_encoding),
        exporter=get_exporter(output_format),
    )

    try:
        result = calculator.run(Path(args.ledger), output_path)
    except InputIOError as e:
        logger.error(str(e))
        return EXIT_FAILURE
    except (UnknownProductError, InexactArithmeticError) as e:
        logger.error(f"Dividend calculation aborted: {e}")
        return EXIT_FAILURE
    except OutputIOError as e:
        logger.error(str(e))
        return EXIT_FAILURE

    logger.info(
        f"Processed {result.records_read} records "
        f"({len(result.rejected)} rejected): "
        f"{result.payout_count} dividends for {result.representative_count} representatives "
        f"written to {result.report_path}"
    )
    return EXIT_OK


if __name__ == "__main__":
    raise SystemExit(main())
