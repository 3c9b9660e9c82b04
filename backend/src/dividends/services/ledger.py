"""
Ledger file parser.

Reads a `|`-delimited ledger, one transaction per line and no header:

    A|R1|800000
    B|R2|1200000

Lines are only split here; validating fields is the aggregator's job.
"""

import logging
from pathlib import Path

from dividends.domain.errors import InputIOError

logger = logging.getLogger(__name__)


FIELD_DELIMITER = "|"


class LedgerParser:
    """
    Turns ledger text into field lists.

    Example:
        parser = LedgerParser()
        records = parser.read_records(Path("sales.txt"))
        # [["A", "R1", "800000"], ...]
    """

    def __init__(self, encoding: str = "utf-8", delimiter: str = FIELD_DELIMITER) -> None:
        self.encoding = encoding
        self.delimiter = delimiter

    def split_line(self, line: str) -> list[str]:
        """Split one ledger line into its fields, dropping the line terminator."""
        return line.rstrip("\r\n").split(self.delimiter)

    def parse_lines(self, lines: list[str]) -> list[list[str]]:
        """Split every non-blank line."""
        records: list[list[str]] = []
        for line_number, line in enumerate(lines, start=1):
            if not line.strip():
                logger.warning(f"Skipping blank line {line_number}")
                continue
            records.append(self.split_line(line))
        return records

    def read_records(self, path: Path) -> list[list[str]]:
        """
        Read and split a ledger file.

        Args:
            path: Ledger file on disk

        Returns:
            One field list per non-blank line, in file order

        Raises:
            InputIOError: If the file is missing, cannot be read, or cannot be decoded
                with the configured encoding
        """
        try:
            with open(path, encoding=self.encoding) as f:
                lines = f.readlines()
        except (OSError, UnicodeDecodeError, LookupError) as e:
            raise InputIOError(path, str(e)) from e

        records = self.parse_lines(lines)
        logger.info(f"Read {len(records)} records from {path}")
        return records
