"""
Dividend engine: base commission plus tiered bonus.

For every (representative, product) total:

    dividend = total * BASE_RATE + bonus

where bonus belongs to the highest tier whose threshold the total meets
or exceeds (0 when no tier is met).

Design Decisions:
- Pure functions, no I/O; easy to test in isolation
- A product missing from the schedule is a data-integrity fault and
  aborts the whole computation instead of defaulting to a zero bonus
"""

from collections.abc import Sequence
from decimal import Decimal, Inexact, Overflow, localcontext

from .errors import InexactArithmeticError, UnknownProductError
from .models import EXACT_CONTEXT, AggregateEntry, BonusSchedule, BonusTier, PayoutEntry
from .schedule import BASE_RATE, DEFAULT_SCHEDULE


def bonus_for(quantity: Decimal, tiers: Sequence[BonusTier]) -> Decimal:
    """
    Find the bonus earned by a summed quantity.

    Tiers are scanned in ascending threshold order and the last one met
    wins. A quantity equal to a threshold meets that tier.

    Args:
        quantity: Summed quantity for one representative and product
        tiers: The product's tiers, ascending by threshold

    Returns:
        Bonus amount, or Decimal(0) if below every threshold
    """
    bonus = Decimal(0)
    for tier in tiers:
        if tier.is_met_by(quantity):
            bonus = tier.bonus
    return bonus


def compute_dividend(quantity: Decimal, tiers: Sequence[BonusTier]) -> Decimal:
    """
    Base commission on the quantity plus its tier bonus.

    Raises:
        decimal.Inexact: If the result needs more digits than EXACT_CONTEXT holds
    """
    with localcontext(EXACT_CONTEXT):
        return quantity * BASE_RATE + bonus_for(quantity, tiers)


def compute_dividends(
    aggregate: AggregateEntry,
    schedule: BonusSchedule = DEFAULT_SCHEDULE,
) -> PayoutEntry:
    """
    Compute the dividend for every aggregated (representative, product) pair.

    Args:
        aggregate: {representative: {product: summed_quantity}}
        schedule: Bonus tiers per product

    Returns:
        {representative: {product: dividend}}, one entry per input pair

    Raises:
        UnknownProductError: If a product has no tiers in the schedule
        InexactArithmeticError: If a dividend cannot be held exactly
    """
    dividends: PayoutEntry = {}

    for representative, sold_by_product in aggregate.items():
        for product, sold in sold_by_product.items():
            if product not in schedule:
                raise UnknownProductError(product=product, representative=representative)

            try:
                dividend = compute_dividend(sold, schedule[product])
            except (Inexact, Overflow) as e:
                raise InexactArithmeticError(
                    product=product,
                    representative=representative,
                    reason=f"dividend exceeds {EXACT_CONTEXT.prec} significant digits",
                ) from e

            dividends.setdefault(representative, {})[product] = dividend

    return dividends
