"""
Services package - Ledger input, report output and pipeline orchestration.
"""

from .calculator import CalculationResult, DividendCalculator
from .export import JsonReportExporter, ReportExporter, XmlReportExporter, get_exporter
from .ledger import LedgerParser

__all__ = [
    "CalculationResult",
    "DividendCalculator",
    "JsonReportExporter",
    "LedgerParser",
    "ReportExporter",
    "XmlReportExporter",
    "get_exporter",
]
