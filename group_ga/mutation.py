"""
Mutation operator for the group partitioning GA.

Point mutation: move one record to a random group.
"""

from typing import Dict, Sequence

import numpy as np

from .data_models import Chromosome


def mutate(
    chromosome: Chromosome,
    group_ids: Sequence[int],
    rng: np.random.Generator
) -> Chromosome:
    """
    Reassign one random position to a random group.

    The position is drawn uniformly from [0, length) and the new group id
    uniformly from `group_ids`. The drawn id may equal the current one, in
    which case the result equals the input.

    Args:
        chromosome: Chromosome to mutate (left untouched)
        group_ids: Allowed group ids, e.g. range(group_count)
        rng: Random number generator

    Returns:
        New mutated chromosome

    Raises:
        ValueError: If the chromosome or the group id range is empty
    """
    if not chromosome:
        raise ValueError("Cannot mutate an empty chromosome")

    if len(group_ids) == 0:
        raise ValueError("Group id range is empty")

    position = int(rng.integers(0, len(chromosome)))
    value = int(group_ids[int(rng.integers(0, len(group_ids)))])

    mutated = list(chromosome)
    mutated[position] = value
    return tuple(mutated)


def mutation_statistics(original: Chromosome, mutated: Chromosome) -> Dict:
    """
    Calculate statistics about a mutation.

    Args:
        original: Chromosome before mutation
        mutated: Chromosome after mutation

    Returns:
        Dictionary with the number of changed genes and the change rate
    """
    if len(original) != len(mutated):
        raise ValueError("Chromosomes must have equal length")

    changed = sum(1 for before, after in zip(original, mutated) if before != after)

    return {
        'total_genes': len(original),
        'genes_changed': changed,
        'change_rate': changed / max(len(original), 1),
    }
