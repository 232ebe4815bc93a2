"""Summary statistics over a collection of prices.

An empty input has a count of zero and no defined total, average, maximum
or minimum. Those fields are None rather than zero so that callers can tell
"no data" apart from a genuine zero price.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable, Optional


@dataclass(frozen=True, slots=True)
class PriceStatistics:
    """Count, sum, average, max and min of a price series.

    Example:
        >>> stats = PriceStatistics.of([Decimal("10"), Decimal("30")])
        >>> stats.count, stats.total, stats.average
        (2, Decimal('40'), Decimal('20'))
    """

    count: int
    total: Optional[Decimal] = None
    average: Optional[Decimal] = None
    maximum: Optional[Decimal] = None
    minimum: Optional[Decimal] = None

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError(f"count must be non-negative, got {self.count}")
        defined = (self.total, self.average, self.maximum, self.minimum)
        if self.count == 0 and any(value is not None for value in defined):
            raise ValueError("empty statistics cannot carry aggregate values")
        if self.count > 0 and any(value is None for value in defined):
            raise ValueError("non-empty statistics require every aggregate value")

    @property
    def is_empty(self) -> bool:
        """True when no prices were observed."""
        return self.count == 0

    @classmethod
    def empty(cls) -> PriceStatistics:
        return cls(count=0)

    @classmethod
    def of(cls, prices: Iterable[Decimal]) -> PriceStatistics:
        """Summarize prices in a single pass."""
        count = 0
        total = Decimal(0)
        maximum: Optional[Decimal] = None
        minimum: Optional[Decimal] = None

        for price in prices:
            count += 1
            total += price
            if maximum is None or price > maximum:
                maximum = price
            if minimum is None or price < minimum:
                minimum = price

        if count == 0:
            return cls.empty()

        return cls(
            count=count,
            total=total,
            average=total / count,
            maximum=maximum,
            minimum=minimum,
        )
