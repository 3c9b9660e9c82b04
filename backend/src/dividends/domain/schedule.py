"""
Fixed commission constants.

The base rate and the per-product bonus tiers are compiled-in business
rules, not configuration. DEFAULT_SCHEDULE is built once at import time
and is read-only for the life of the process.
"""

from decimal import Decimal

from .models import BonusSchedule


# Flat commission on total quantity sold, regardless of product (1%)
BASE_RATE = Decimal("0.01")

DEFAULT_SCHEDULE = BonusSchedule.from_table({
    "A": {
        Decimal("10000000"): Decimal("25000"),
        Decimal("20000000"): Decimal("40000"),
    },
    "B": {
        Decimal("8000000"): Decimal("30000"),
        Decimal("16000000"): Decimal("50000"),
    },
    "C": {
        Decimal("5000000"): Decimal("20000"),
        Decimal("10000000"): Decimal("40000"),
    },
})
