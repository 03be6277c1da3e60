"""
Attribute histograms and group profiles.

A GroupProfile summarizes a set of records as one Histogram per tracked
attribute. The profile of the whole population is the reference that group
profiles are compared against.
"""

from collections import Counter
from typing import Dict, Hashable, Iterable

from .data_models import ATTRIBUTES, Record


class Histogram:
    """Frequency table over the observed values of one attribute"""

    def __init__(self, values: Iterable[Hashable] = ()):
        self.counts: Counter = Counter()
        self.total = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Hashable) -> None:
        self.counts[value] += 1
        self.total += 1

    def distinct(self) -> int:
        """Number of distinct values observed."""
        return len(self.counts)

    def proportion(self, value: Hashable) -> float:
        if self.total == 0:
            return 0.0
        return self.counts[value] / self.total

    def diff(self, other: "Histogram") -> float:
        """
        Distance between two value distributions.

        When the histograms hold a different number of distinct values the
        distance is just the absolute difference of those numbers, whatever
        the proportions. Otherwise it is the sum, over the values of this
        histogram, of the squared difference between the value's proportion
        here and in `other` (0 when `other` never saw it).

        Values only present in `other` are not visited, so the distance is
        not symmetric when both sides have the same number of distinct values
        but different value sets.

        Args:
            other: Histogram to compare against

        Returns:
            Non-negative distance, 0.0 for identical distributions
        """
        cardinality_gap = abs(self.distinct() - other.distinct())
        if cardinality_gap > 0:
            return float(cardinality_gap)

        score = 0.0
        for value in self.counts:
            score += (self.proportion(value) - other.proportion(value)) ** 2
        return score

    def __len__(self) -> int:
        return self.total

    def __repr__(self) -> str:
        return f"Histogram(total={self.total}, counts={self.counts!r})"


class GroupProfile:
    """One Histogram per tracked attribute plus the number of records"""

    def __init__(self):
        self.histograms: Dict[str, Histogram] = {
            attribute: Histogram() for attribute in ATTRIBUTES
        }
        self.count = 0

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> "GroupProfile":
        profile = cls()
        for record in records:
            profile.insert(record)
        return profile

    def insert(self, record: Record) -> None:
        self.count += 1
        for attribute, histogram in self.histograms.items():
            histogram.insert(record.attribute(attribute))

    def histogram(self, attribute: str) -> Histogram:
        return self.histograms[attribute]

    @property
    def genders(self) -> Histogram:
        return self.histograms["gender"]

    @property
    def disciplines(self) -> Histogram:
        return self.histograms["discipline"]

    @property
    def seniorities(self) -> Histogram:
        return self.histograms["seniority"]

    @property
    def clients(self) -> Histogram:
        return self.histograms["client"]

    @property
    def teams(self) -> Histogram:
        return self.histograms["team"]

    def __repr__(self) -> str:
        return f"GroupProfile(count={self.count})"
