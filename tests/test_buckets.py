"""
Tests for the bucket distribution.
"""

import pytest

from eighth_bar.display.buckets import BucketShare, Distribution, Region, distribute


class TestDistribute:
    """Tests for distribute function."""

    def test_uneven_total_fills_single_larger_bucket(self):
        """10 ticks over 3 buckets: one bucket of 4, two of 3; 4 filled ends in the larger one."""
        result = distribute(10, 4, 3)

        assert result.larger == BucketShare(size=4, count=1)
        assert result.smaller == BucketShare(size=3, count=2)
        assert result.covered_by_larger == 4
        assert result.region is Region.LARGER
        assert result.remainder == 4

    def test_spills_into_smaller_region(self):
        """Filled ticks past the larger buckets are counted from the smaller ones."""
        result = distribute(10, 5, 3)

        assert result.region is Region.SMALLER
        assert result.remainder == 1

    def test_even_total_has_no_larger_buckets(self):
        """Exact division leaves the larger class empty."""
        result = distribute(9, 0, 3)

        assert result.larger == BucketShare(size=4, count=0)
        assert result.smaller == BucketShare(size=3, count=3)
        assert result.region is Region.LARGER
        assert result.remainder == 0

    def test_full_even_total_is_in_smaller_region(self):
        """All ticks filled with no larger buckets ends in the smaller class."""
        result = distribute(9, 9, 3)

        assert result.region is Region.SMALLER
        assert result.remainder == 9

    def test_fewer_ticks_than_buckets(self):
        """Smaller buckets hold nothing when total < bucket_count."""
        result = distribute(3, 1, 8)

        assert result.larger == BucketShare(size=1, count=3)
        assert result.smaller == BucketShare(size=0, count=5)
        assert result.region is Region.LARGER
        assert result.remainder == 1

    def test_zero_buckets_is_rejected(self):
        """A distribution over no buckets is a programming error."""
        with pytest.raises(AssertionError):
            distribute(5, 1, 0)

    def test_filled_above_total_is_rejected(self):
        """Filled ticks can never exceed the total."""
        with pytest.raises(AssertionError):
            distribute(5, 6, 2)

    def test_to_dict(self):
        """Test the JSON view of a distribution."""
        assert distribute(10, 4, 3).to_dict() == {
            "larger": {"size": 4, "count": 1},
            "smaller": {"size": 3, "count": 2},
            "region": "larger",
            "remainder": 4,
        }


class TestDistributionInvariants:
    """Properties that hold for every valid input."""

    @pytest.mark.parametrize("bucket_count", range(1, 13))
    def test_counts_and_capacity_are_conserved(self, bucket_count):
        """Bucket counts add up and no tick is lost or created."""
        for total in range(0, 40):
            for filled in range(0, total + 1):
                result = distribute(total, filled, bucket_count)

                assert result.bucket_count == bucket_count
                assert result.larger.capacity + result.smaller.capacity == total
                assert result.larger.size == result.smaller.size + 1
                assert result.larger.count == total % bucket_count

    @pytest.mark.parametrize("bucket_count", [1, 3, 8, 10])
    def test_remainder_fits_in_region(self, bucket_count):
        """The remainder never exceeds the capacity of its region."""
        for total in range(0, 50):
            for filled in range(0, total + 1):
                result = distribute(total, filled, bucket_count)
                share = result.larger if result.region is Region.LARGER else result.smaller

                assert 0 <= result.remainder <= share.capacity
                if result.region is Region.SMALLER:
                    assert result.remainder > 0

    def test_distribution_is_immutable(self):
        """Distributions are plain values."""
        result = distribute(10, 4, 3)

        assert isinstance(result, Distribution)
        with pytest.raises(AttributeError):
            result.remainder = 0
