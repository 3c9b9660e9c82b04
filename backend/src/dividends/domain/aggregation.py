"""
Aggregation of ledger records by representative and product.

Raw records arrive as already-split field lists from the ledger parser.
Each one is validated and its quantity added to the running total for its
(representative, product) pair.

Design Decisions:
- A malformed record never aborts the run: it is logged and skipped
- Wrong field count and non-numeric quantity are treated the same way
- Decimal addition in EXACT_CONTEXT keeps sums exact and independent of input order
"""

import logging
from collections.abc import Iterable, Sequence
from decimal import Decimal, Inexact, InvalidOperation, Overflow, localcontext

from .errors import InexactArithmeticError, MalformedRecordError
from .models import EXACT_CONTEXT, AggregateEntry, Record, RejectedRecord

logger = logging.getLogger(__name__)


# product | representative | quantity
RECORD_FIELD_COUNT = 3


def parse_record(fields: Sequence[str]) -> Record:
    """
    Validate a field list and convert it into a Record.

    Args:
        fields: Split ledger line, expected as (product, representative, quantity)

    Returns:
        Record with a Decimal quantity

    Raises:
        MalformedRecordError: If the field count is not 3 or the quantity
            is not a finite decimal number
    """
    if len(fields) != RECORD_FIELD_COUNT:
        raise MalformedRecordError(
            fields,
            f"Invalid record line, expected {RECORD_FIELD_COUNT} fields but got {len(fields)}",
        )

    product, representative, raw_quantity = (value.strip() for value in fields)

    try:
        quantity = Decimal(raw_quantity)
    except InvalidOperation:
        raise MalformedRecordError(
            fields, f"Invalid record line, quantity '{raw_quantity}' is not a number"
        ) from None

    if not quantity.is_finite():
        raise MalformedRecordError(
            fields, f"Invalid record line, quantity '{raw_quantity}' is not a number"
        )

    return Record(product=product, representative=representative, quantity=quantity)


def aggregate(
    records: Iterable[Sequence[str]],
    rejected: list[RejectedRecord] | None = None,
) -> AggregateEntry:
    """
    Sum sold quantities per representative and product.

    Malformed records are logged (one warning each, including the raw line)
    and left out of the totals.

    Args:
        records: Field lists as produced by the ledger parser
        rejected: Optional list that receives every skipped record

    Returns:
        {representative: {product: summed_quantity}}

    Raises:
        InexactArithmeticError: If a running sum cannot be held exactly
    """
    sold_by_representative: AggregateEntry = {}

    for fields in records:
        try:
            record = parse_record(fields)
        except MalformedRecordError as e:
            logger.warning(str(e))
            if rejected is not None:
                rejected.append(RejectedRecord(fields=e.fields, reason=e.reason))
            continue

        sold_by_product = sold_by_representative.setdefault(record.representative, {})
        try:
            with localcontext(EXACT_CONTEXT):
                sold_by_product[record.product] = (
                    sold_by_product.get(record.product, Decimal(0)) + record.quantity
                )
        except (Inexact, Overflow) as e:
            raise InexactArithmeticError(
                product=record.product,
                representative=record.representative,
                reason=f"sum exceeds {EXACT_CONTEXT.prec} significant digits",
            ) from e

    return sold_by_representative
