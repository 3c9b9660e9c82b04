"""
Dividend calculation orchestrator service.

Coordinates the full pipeline:
1. Ledger parsing
2. Aggregation by representative and product
3. Dividend computation against the bonus schedule
4. Report export

This is the primary interface used by the CLI.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from dividends.domain.aggregation import aggregate
from dividends.domain.dividend import compute_dividends
from dividends.domain.models import AggregateEntry, BonusSchedule, PayoutEntry, RejectedRecord
from dividends.domain.schedule import DEFAULT_SCHEDULE

from .export import ReportExporter, XmlReportExporter
from .ledger import LedgerParser

logger = logging.getLogger(__name__)


@dataclass
class CalculationResult:
    """
    Result of one pipeline run.

    Keeps the intermediate aggregate and the rejected records alongside
    the payouts so callers can report on them.
    """
    aggregate: AggregateEntry
    payouts: PayoutEntry
    rejected: list[RejectedRecord] = field(default_factory=list)
    records_read: int = 0
    report_path: Path | None = None

    @property
    def representative_count(self) -> int:
        return len(self.payouts)

    @property
    def payout_count(self) -> int:
        """Number of (representative, product) payouts."""
        return sum(len(by_product) for by_product in self.payouts.values())


class DividendCalculator:
    """
    Runs the ledger → aggregate → dividends → report pipeline.

    Example:
        calculator = DividendCalculator(exporter=JsonReportExporter())
        result = calculator.run(Path("sales.txt"), Path("dividends.json"))
        print(result.payouts)
    """

    def __init__(
        self,
        parser: LedgerParser | None = None,
        exporter: ReportExporter | None = None,
        schedule: BonusSchedule = DEFAULT_SCHEDULE,
    ) -> None:
        self.parser = parser or LedgerParser()
        self.exporter = exporter or XmlReportExporter()
        self.schedule = schedule

    def calculate(self, records: Iterable[Sequence[str]]) -> CalculationResult:
        """
        Aggregate split records and compute their dividends.

        Raises:
            UnknownProductError: If a product is missing from the schedule
        """
        records = list(records)
        rejected: list[RejectedRecord] = []

        sold = aggregate(records, rejected=rejected)
        payouts = compute_dividends(sold, self.schedule)

        if rejected:
            logger.info(f"Skipped {len(rejected)} of {len(records)} records")

        return CalculationResult(
            aggregate=sold,
            payouts=payouts,
            rejected=rejected,
            records_read=len(records),
        )

    def run(self, ledger_path: Path, report_path: Path) -> CalculationResult:
        """
        Process a ledger file end to end and write the report.

        Nothing is written unless reading and computation both succeed.

        Raises:
            InputIOError: If the ledger cannot be read
            UnknownProductError: If a product is missing from the schedule
            OutputIOError: If the report cannot be written
        """
        records = self.parser.read_records(ledger_path)
        result = self.calculate(records)
        result.report_path = self.exporter.export(result.payouts, report_path)
        return result
