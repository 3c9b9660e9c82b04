"""
Error taxonomy for the dividend pipeline.

Each error carries the context needed to act on it (raw line, product,
representative or file path). Where each one is handled:

- MalformedRecordError: caught by the aggregator, the record is skipped
- UnknownProductError, InexactArithmeticError: propagate and abort the computation
- InputIOError / OutputIOError: raised by the I/O services, reported by the CLI
"""

from collections.abc import Sequence
from pathlib import Path


class DividendError(Exception):
    """Base class for all dividend calculation errors."""


class MalformedRecordError(DividendError):
    """A ledger record has the wrong shape or a non-numeric quantity."""

    def __init__(self, fields: Sequence[str], reason: str) -> None:
        self.fields = tuple(fields)
        self.reason = reason
        super().__init__(f"{reason}. Invalid line: {'|'.join(self.fields)}")


class UnknownProductError(DividendError):
    """An aggregated product has no entry in the bonus schedule."""

    def __init__(self, product: str, representative: str) -> None:
        self.product = product
        self.representative = representative
        super().__init__(
            f"No bonus schedule for product '{product}' "
            f"(sold by representative '{representative}')"
        )


class InexactArithmeticError(DividendError):
    """A sum or dividend cannot be represented exactly."""

    def __init__(self, product: str, representative: str, reason: str) -> None:
        self.product = product
        self.representative = representative
        super().__init__(
            f"Cannot compute an exact result for product '{product}' "
            f"(representative '{representative}'): {reason}"
        )


class InputIOError(DividendError):
    """The ledger file is missing or unreadable."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Could not read input file {path}: {message}")


class OutputIOError(DividendError):
    """The report could not be written."""

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Could not export results to {path}: {message}")
