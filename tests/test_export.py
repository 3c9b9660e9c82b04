import json
import xml.etree.ElementTree as ET
from decimal import Decimal

import pytest

from dividends.domain.errors import OutputIOError
from dividends.schemas import DividendReport
from dividends.services.export import JsonReportExporter, XmlReportExporter, get_exporter


class TestDividendReport:
    def test_sorted_by_representative_then_product(self, sample_payouts):
        report = DividendReport.from_payouts(sample_payouts)

        assert [r.name for r in report.representatives] == ["R1", "R2"]
        assert [d.product for d in report.representatives[0].dividends] == ["A", "C"]

    def test_empty(self):
        assert DividendReport.from_payouts({}).representatives == []


class TestXmlReportExporter:
    def test_tree_layout(self, sample_payouts):
        root = ET.fromstring(XmlReportExporter().render(sample_payouts))

        assert root.tag == "dividends"
        representatives = root.findall("salesRepresentative")
        assert [r.get("name") for r in representatives] == ["R1", "R2"]
        assert [(c.tag, c.text) for c in representatives[0]] == [
            ("product", "A"),
            ("dividend", "175000.00"),
            ("product", "C"),
            ("dividend", "20000.00"),
        ]

    def test_declaration_and_indent(self, sample_payouts):
        content = XmlReportExporter().render(sample_payouts).decode("utf-8")

        assert content.startswith("<?xml")
        assert "\n    <salesRepresentative" in content

    def test_empty_payouts(self):
        root = ET.fromstring(XmlReportExporter().render({}))
        assert root.tag == "dividends"
        assert len(root) == 0

    def test_export_writes_file(self, tmp_path, sample_payouts):
        destination = tmp_path / "dividends.xml"

        written = XmlReportExporter().export(sample_payouts, destination)

        assert written == destination
        assert destination.read_bytes() == XmlReportExporter().render(sample_payouts)
        assert not (tmp_path / "dividends.xml.tmp").exists()

    def test_export_to_missing_directory(self, tmp_path, sample_payouts):
        destination = tmp_path / "nope" / "dividends.xml"

        with pytest.raises(OutputIOError) as exc_info:
            XmlReportExporter().export(sample_payouts, destination)

        assert exc_info.value.path == destination


class TestJsonReportExporter:
    def test_dividends_are_strings(self, sample_payouts):
        data = json.loads(JsonReportExporter().render(sample_payouts))

        assert data == {
            "representatives": [
                {
                    "name": "R1",
                    "dividends": [
                        {"product": "A", "dividend": "175000.00"},
                        {"product": "C", "dividend": "20000.00"},
                    ],
                },
                {"name": "R2", "dividends": [{"product": "B", "dividend": "250000.00"}]},
            ]
        }
        assert Decimal(data["representatives"][1]["dividends"][0]["dividend"]) == Decimal("250000")


class TestGetExporter:
    @pytest.mark.parametrize(
        ("fmt", "expected"),
        [("xml", XmlReportExporter), ("json", JsonReportExporter), ("JSON", JsonReportExporter)],
    )
    def test_known_formats(self, fmt, expected):
        assert isinstance(get_exporter(fmt), expected)

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unsupported report format"):
            get_exporter("yaml")
