"""Even distribution of ticks over a fixed number of buckets.

The same distribution is used twice while rendering a bar: once to spread
the maximum over the character cells, and once more to spread a single
cell's capacity over the eight partial-block glyphs.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Region(Enum):
    """Bucket class that contains the end of the filled ticks."""

    LARGER = "larger"
    SMALLER = "smaller"


@dataclass(frozen=True)
class BucketShare:
    """One size class of buckets.

    Attributes:
        size: Ticks held by one bucket of this class.
        count: Number of buckets of this class.
    """

    size: int
    count: int

    @property
    def capacity(self) -> int:
        return self.size * self.count


@dataclass(frozen=True)
class Distribution:
    """Result of spreading ``total`` ticks over ``larger.count + smaller.count`` buckets.

    Larger buckets come first and hold exactly one tick more than the
    smaller buckets that follow them.

    Attributes:
        larger: The ``total % bucket_count`` buckets holding one extra tick.
        smaller: The remaining buckets.
        region: Class in which the filled ticks run out.
        remainder: Filled ticks that fall inside ``region``.
    """

    larger: BucketShare
    smaller: BucketShare
    region: Region
    remainder: int

    @property
    def covered_by_larger(self) -> int:
        return self.larger.capacity

    @property
    def bucket_count(self) -> int:
        return self.larger.count + self.smaller.count

    def to_dict(self) -> dict:
        """Plain dict view for JSON output."""
        return {
            "larger": {"size": self.larger.size, "count": self.larger.count},
            "smaller": {"size": self.smaller.size, "count": self.smaller.count},
            "region": self.region.value,
            "remainder": self.remainder,
        }


def distribute(total: int, filled: int, bucket_count: int) -> Distribution:
    """Spread ``total`` ticks over ``bucket_count`` buckets and locate ``filled``.

    Args:
        total: Ticks to distribute.
        filled: Ticks counted from the front of the buckets (0 <= filled <= total).
        bucket_count: Number of buckets, must be positive.

    Returns:
        Distribution describing both bucket classes and where ``filled`` ends.
    """
    assert bucket_count > 0, "bucket_count must be positive"
    assert 0 <= filled <= total, f"filled ({filled}) must be within 0..{total}"

    smaller_size = total // bucket_count
    # The remainder goes one tick at a time to the front buckets
    larger_count = total % bucket_count

    larger = BucketShare(size=smaller_size + 1, count=larger_count)
    smaller = BucketShare(size=smaller_size, count=bucket_count - larger_count)

    covered_by_larger = larger.capacity
    if filled <= covered_by_larger:
        region, remainder = Region.LARGER, filled
    else:
        region, remainder = Region.SMALLER, filled - covered_by_larger

    return Distribution(larger=larger, smaller=smaller, region=region, remainder=remainder)


__all__ = ["Region", "BucketShare", "Distribution", "distribute"]
