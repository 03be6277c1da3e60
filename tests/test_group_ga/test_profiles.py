"""
Tests for attribute histograms and group profiles.
"""

import unittest

from group_ga.data_models import Record
from group_ga.profiles import Histogram, GroupProfile


class TestHistogram(unittest.TestCase):
    """Test Histogram counting and distance."""

    def test_insert_counts_values(self):
        """Test insert increments value count and total."""
        hist = Histogram()
        hist.insert("a")
        hist.insert("a")
        hist.insert("b")

        self.assertEqual(hist.counts, {"a": 2, "b": 1})
        self.assertEqual(hist.total, 3)
        self.assertEqual(hist.distinct(), 2)
        self.assertAlmostEqual(hist.proportion("a"), 2 / 3)
        self.assertEqual(hist.proportion("missing"), 0.0)

    def test_diff_with_itself_is_zero(self):
        """Test a histogram has no distance to itself."""
        hist = Histogram(["a", "b", "b", "c"])
        self.assertEqual(hist.diff(hist), 0.0)

    def test_diff_equal_distributions(self):
        """Test histograms with the same proportions but different totals."""
        small = Histogram(["a", "b"])
        large = Histogram(["a", "a", "b", "b"])
        self.assertAlmostEqual(small.diff(large), 0.0)

    def test_diff_cardinality_gap(self):
        """Test disjoint value sets of differing size return the size gap."""
        left = Histogram(["a", "b", "c", "d"])
        right = Histogram(["x"])

        self.assertEqual(left.diff(right), 3.0)
        self.assertEqual(right.diff(left), 3.0)

    def test_diff_ignores_proportions_on_cardinality_gap(self):
        """Test proportions do not matter when value counts differ."""
        left = Histogram(["a", "a", "a", "a", "b"])
        right = Histogram(["a"])
        self.assertEqual(left.diff(right), 1.0)

    def test_diff_sums_squared_proportion_gaps(self):
        """Test distance over matching value sets."""
        left = Histogram(["a", "a", "b"])
        right = Histogram(["a", "b"])

        expected = (2 / 3 - 1 / 2) ** 2 + (1 / 3 - 1 / 2) ** 2
        self.assertAlmostEqual(left.diff(right), expected)

    def test_diff_is_not_symmetric(self):
        """Test only the left histogram's values are visited."""
        left = Histogram(["a", "a", "a", "b"])
        right = Histogram(["a", "c"])

        self.assertAlmostEqual(left.diff(right), 0.125)
        self.assertAlmostEqual(right.diff(left), 0.3125)

    def test_empty_histograms(self):
        """Test empty histograms compare equal."""
        self.assertEqual(Histogram().diff(Histogram()), 0.0)
        self.assertEqual(Histogram(["a", "b"]).diff(Histogram()), 2.0)

    def test_lookup_does_not_add_values(self):
        """Test asking for an unseen value leaves the value set unchanged."""
        left = Histogram(["a", "b"])
        right = Histogram(["a", "c"])

        left.diff(right)
        self.assertEqual(right.proportion("b"), 0.0)
        self.assertEqual(right.distinct(), 2)
        self.assertNotIn("b", right.counts)


class TestGroupProfile(unittest.TestCase):
    """Test GroupProfile construction."""

    def setUp(self):
        """Set up test records."""
        self.records = [
            Record("Ada", "F", "Engineering", "Senior", "Acme", "Blue"),
            Record("Ben", "M", "Engineering", "Junior", "Globex", "Red"),
            Record("Cleo", "F", "Design", "Junior", "Acme", "Red"),
        ]

    def test_insert_fills_every_histogram(self):
        """Test each attribute value lands in its histogram."""
        profile = GroupProfile()
        profile.insert(self.records[0])

        self.assertEqual(profile.count, 1)
        self.assertEqual(profile.genders.counts, {"F": 1})
        self.assertEqual(profile.disciplines.counts, {"Engineering": 1})
        self.assertEqual(profile.seniorities.counts, {"Senior": 1})
        self.assertEqual(profile.clients.counts, {"Acme": 1})
        self.assertEqual(profile.teams.counts, {"Blue": 1})

    def test_from_records(self):
        """Test building a profile from a record list."""
        profile = GroupProfile.from_records(self.records)

        self.assertEqual(profile.count, 3)
        self.assertEqual(profile.genders.counts, {"F": 2, "M": 1})
        self.assertEqual(profile.histogram("discipline").distinct(), 2)
        self.assertEqual(profile.teams.total, 3)

    def test_unknown_attribute(self):
        """Test unknown attribute names are rejected."""
        profile = GroupProfile()
        with self.assertRaises(KeyError):
            profile.histogram("salary")


if __name__ == '__main__':
    unittest.main()
