"""
Domain models for sales dividend calculation.

These models represent the values flowing through the pipeline:
ledger records, bonus tiers and the per-product bonus schedule.

Design Decisions:
- Frozen dataclasses for immutable, typed domain objects
- Decimal for all quantities and monetary values to avoid floating-point errors
- Sums and dividends run in EXACT_CONTEXT; anything it cannot hold exactly is an error
- Aggregates and payouts are plain nested dicts keyed by representative, then product
- BonusSchedule is read-only after construction (mapping proxy over tuples)
"""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from decimal import (
    MAX_EMAX,
    MIN_EMIN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)
from types import MappingProxyType
from typing import TypeAlias


# Arithmetic context for quantities and dividends: a result that would need
# rounding raises Inexact instead of silently losing digits.
EXACT_CONTEXT = Context(
    prec=1000,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
)

# representative -> product -> summed quantity
AggregateEntry: TypeAlias = dict[str, dict[str, Decimal]]

# representative -> product -> total dividend
PayoutEntry: TypeAlias = dict[str, dict[str, Decimal]]


@dataclass(frozen=True)
class Record:
    """
    A single parsed ledger line.

    Example line: A|R1|800000 -> Record(product="A", representative="R1", quantity=Decimal("800000"))
    """
    product: str
    representative: str
    quantity: Decimal


@dataclass(frozen=True)
class RejectedRecord:
    """A ledger line the aggregator skipped, kept for diagnostics."""
    fields: tuple[str, ...]
    reason: str

    @property
    def raw_line(self) -> str:
        return "|".join(self.fields)


@dataclass(frozen=True)
class BonusTier:
    """
    One step of a product's bonus table.

    A representative earns `bonus` once their summed quantity for the
    product reaches `threshold` (inclusive).
    """
    threshold: Decimal
    bonus: Decimal

    def is_met_by(self, quantity: Decimal) -> bool:
        """True if the quantity meets or exceeds the threshold."""
        return quantity >= self.threshold


@dataclass(frozen=True)
class BonusSchedule(Mapping[str, tuple[BonusTier, ...]]):
    """
    Per-product bonus tiers, ordered ascending by threshold.

    Tiers may be supplied in any order; they are sorted once at
    construction and exposed as tuples behind a read-only mapping.

    Example:
        schedule = BonusSchedule.from_table({
            "A": {Decimal("10000000"): Decimal("25000")},
        })
        schedule["A"]  # (BonusTier(threshold=Decimal('10000000'), bonus=Decimal('25000')),)
    """
    tiers: Mapping[str, Iterable[BonusTier]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        """Freeze and sort the tier table."""
        ordered = {
            product: tuple(sorted(product_tiers, key=lambda tier: tier.threshold))
            for product, product_tiers in self.tiers.items()
        }
        object.__setattr__(self, "tiers", MappingProxyType(ordered))

    @classmethod
    def from_table(cls, table: Mapping[str, Mapping[Decimal, Decimal]]) -> "BonusSchedule":
        """Build a schedule from {product: {threshold: bonus}}."""
        return cls({
            product: [BonusTier(threshold=threshold, bonus=bonus) for threshold, bonus in rows.items()]
            for product, rows in table.items()
        })

    def __getitem__(self, product: str) -> tuple[BonusTier, ...]:
        return self.tiers[product]

    def __iter__(self) -> Iterator[str]:
        return iter(self.tiers)

    def __len__(self) -> int:
        return len(self.tiers)

    def __hash__(self) -> int:
        return hash(tuple(self.tiers.items()))
