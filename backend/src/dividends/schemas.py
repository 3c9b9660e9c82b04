"""
Pydantic schemas for the serialized dividend report.

Monetary values are Decimals, which pydantic dumps to JSON as strings
to avoid floating point issues.
"""

from decimal import Decimal

from pydantic import BaseModel, Field

from dividends.domain.models import PayoutEntry


class ProductDividend(BaseModel):
    """Dividend earned on one product."""
    product: str
    dividend: Decimal


class RepresentativeDividends(BaseModel):
    """All dividends of one sales representative."""
    name: str = Field(..., description="Sales representative identifier")
    dividends: list[ProductDividend] = Field(default_factory=list)


class DividendReport(BaseModel):
    """Root of the dividend report."""
    representatives: list[RepresentativeDividends] = Field(default_factory=list)

    @classmethod
    def from_payouts(cls, payouts: PayoutEntry) -> "DividendReport":
        """Build a report sorted by representative, then product."""
        return cls(
            representatives=[
                RepresentativeDividends(
                    name=representative,
                    dividends=[
                        ProductDividend(product=product, dividend=dividend)
                        for product, dividend in sorted(payouts[representative].items())
                    ],
                )
                for representative in sorted(payouts)
            ]
        )
