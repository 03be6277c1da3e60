"""
Console reporting for group assignments.

Formats per-generation progress lines and the final grouping report. The
report layout depends on the fitness strategy: a flat listing for the
similarity strategy, scored per-group blocks for the diversity strategy.
"""

from typing import List, Optional, Sequence

from .data_models import Chromosome, Record
from .fitness import FitnessStrategy, partition


def format_progress(index: int, score: float, chromosome: Optional[Chromosome] = None) -> str:
    """Progress line for one generation, optionally with the chromosome."""
    line = f"Gen {index:>4} - best: {score:.5f}"
    if chromosome is not None:
        line += f" - {list(chromosome)}"
    return line


def format_flat_listing(chromosome: Chromosome, records: Sequence[Record]) -> List[str]:
    """
    Members in ascending group id order, each group under a header.

    Group headers number the non-empty groups from 1.
    """
    tagged = sorted(zip(chromosome, range(len(records))), key=lambda pair: pair[0])

    lines = []
    current = None
    number = 0
    for group_id, record_index in tagged:
        if group_id != current:
            current = group_id
            number += 1
            lines.append(f"= Group #{number}")
        lines.append(str(records[record_index]))
    return lines


def format_scored_groups(
    chromosome: Chromosome,
    records: Sequence[Record],
    strategy: FitnessStrategy
) -> List[str]:
    """One block per non-empty group with its size and diagnostic score, then its members."""
    groups = partition(chromosome, records)
    scores = strategy.group_scores(chromosome)

    lines = []
    for number, group_id in enumerate(sorted(groups), start=1):
        members = groups[group_id]
        lines.append(f"= Group #{number} ({len(members)} members, score: {scores[group_id]:.2f})")
        for record in members:
            lines.append(f"  {record}")
    return lines


def format_report(
    chromosome: Chromosome,
    records: Sequence[Record],
    strategy: FitnessStrategy
) -> str:
    """Final grouping report for the active strategy."""
    if strategy.higher_is_better:
        lines = format_scored_groups(chromosome, records, strategy)
    else:
        lines = format_flat_listing(chromosome, records)
    return "\n".join(lines)


def group_sizes(chromosome: Chromosome, group_count: int) -> List[int]:
    """Number of members of each group id in range(group_count)."""
    sizes = [0] * group_count
    for group_id in chromosome:
        if 0 <= group_id < group_count:
            sizes[group_id] += 1
    return sizes
