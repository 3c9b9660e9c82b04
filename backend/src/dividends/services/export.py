"""
Report exporters for computed dividends.

Exporters only serialize a finished payout map; they hold no business
logic and can be swapped without touching the calculation.

XML layout (the default report):

    <dividends>
      <salesRepresentative name="R1">
        <product>A</product>
        <dividend>50000.00</dividend>
      </salesRepresentative>
    </dividends>

Design Decisions:
- Abstract exporter interface so new formats can be added
- Representatives and products are sorted for reproducible output
- Dividends are written with str(Decimal), never through float
- Files are written atomically (temp file, then rename)
"""

import logging
import xml.etree.ElementTree as ET
from abc import ABC, abstractmethod
from pathlib import Path

from dividends.domain.errors import OutputIOError
from dividends.domain.models import PayoutEntry
from dividends.schemas import DividendReport

logger = logging.getLogger(__name__)


class ReportExporter(ABC):
    """Abstract interface for dividend report formats."""

    format_name: str = ""

    @abstractmethod
    def render(self, payouts: PayoutEntry) -> bytes:
        """Serialize payouts to the report's byte representation."""
        pass

    def export(self, payouts: PayoutEntry, destination: Path) -> Path:
        """
        Render payouts and write them to a file.

        Args:
            payouts: {representative: {product: dividend}}
            destination: Report file path

        Returns:
            The path written

        Raises:
            OutputIOError: If the file cannot be written
        """
        content = self.render(payouts)

        temp_path = destination.with_name(destination.name + ".tmp")
        try:
            temp_path.write_bytes(content)
            temp_path.replace(destination)
        except OSError as e:
            temp_path.unlink(missing_ok=True)
            raise OutputIOError(destination, str(e)) from e

        logger.info(f"Exported {self.format_name} report to {destination} ({len(content)} bytes)")
        return destination


class XmlReportExporter(ReportExporter):
    """Pretty-printed XML report."""

    format_name = "xml"

    def __init__(self, indent: str = "    ") -> None:
        self.indent = indent

    def build_tree(self, payouts: PayoutEntry) -> ET.Element:
        """Build the <dividends> element tree."""
        report = DividendReport.from_payouts(payouts)

        root = ET.Element("dividends")
        for representative in report.representatives:
            representative_el = ET.SubElement(
                root, "salesRepresentative", {"name": representative.name}
            )
            for item in representative.dividends:
                ET.SubElement(representative_el, "product").text = item.product
                ET.SubElement(representative_el, "dividend").text = str(item.dividend)

        return root

    def render(self, payouts: PayoutEntry) -> bytes:
        root = self.build_tree(payouts)
        ET.indent(root, space=self.indent)
        return ET.tostring(root, encoding="utf-8", xml_declaration=True) + b"\n"


class JsonReportExporter(ReportExporter):
    """JSON report built from the pydantic report schema."""

    format_name = "json"

    def __init__(self, indent: int | None = 2) -> None:
        self.indent = indent

    def render(self, payouts: PayoutEntry) -> bytes:
        report = DividendReport.from_payouts(payouts)
        return report.model_dump_json(indent=self.indent).encode("utf-8") + b"\n"


EXPORTERS: dict[str, type[ReportExporter]] = {
    XmlReportExporter.format_name: XmlReportExporter,
    JsonReportExporter.format_name: JsonReportExporter,
}


def get_exporter(fmt: str) -> ReportExporter:
    """
    Create the exporter for a format name.

    Raises:
        ValueError: If the format is not supported
    """
    try:
        return EXPORTERS[fmt.lower()]()
    except KeyError:
        raise ValueError(
            f"Unsupported report format: {fmt}. Must be one of {sorted(EXPORTERS)}"
        ) from None
