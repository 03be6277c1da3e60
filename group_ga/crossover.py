"""
Crossover operator for the group partitioning GA.

Single-point crossover over group-id chromosomes.
"""

import numpy as np

from .data_models import Chromosome


def crossover(
    mother: Chromosome,
    father: Chromosome,
    rng: np.random.Generator
) -> Chromosome:
    """
    Combine two parents at a random split point.

    The child takes the mother's genes before the split point and the
    father's genes from it onwards. The split point is drawn uniformly from
    [0, length).

    Args:
        mother: First parent
        father: Second parent, same length as the mother
        rng: Random number generator

    Returns:
        New child chromosome

    Raises:
        ValueError: If the parents are empty or differ in length
    """
    if len(mother) != len(father):
        raise ValueError(
            f"Parents must have equal length, got {len(mother)} and {len(father)}"
        )

    if not mother:
        raise ValueError("Cannot cross over empty chromosomes")

    # A single gene has no interior split point
    if len(mother) == 1:
        return tuple(mother)

    split = int(rng.integers(0, len(mother)))
    return tuple(mother[:split]) + tuple(father[split:])
