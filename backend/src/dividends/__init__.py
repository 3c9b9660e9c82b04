"""
Sales dividend calculator.

Turns a ledger of sales transactions into per-representative commission
payouts and writes them out as a report.
"""

__version__ = "1.0.0"
