"""
Selection for the group partitioning GA.

Ranks a population with the active fitness strategy and extracts the
survivors that breed the next generation.
"""

import math
from typing import List, Sequence, Tuple

from .config_loader import ConfigurationError
from .data_models import Chromosome
from .fitness import FitnessStrategy


def survivor_count(population_size: int, survival_rate: float) -> int:
    """Number of survivors kept from a population of the given size."""
    return math.floor(population_size * survival_rate)


def rank_population(
    population: Sequence[Chromosome],
    strategy: FitnessStrategy
) -> List[Tuple[Chromosome, float]]:
    """
    Score and sort a population, best first.

    Each chromosome is scored exactly once. Ties keep population order, so
    ranking is deterministic for a given population.

    Args:
        population: Chromosomes to rank
        strategy: Fitness strategy providing scores and their direction

    Returns:
        List of (chromosome, score) pairs, best first
    """
    scores = [strategy.evaluate(chromosome) for chromosome in population]
    order = sorted(range(len(population)), key=lambda i: (strategy.sort_key(scores[i]), i))
    return [(population[i], scores[i]) for i in order]


def fittest(
    population: Sequence[Chromosome],
    strategy: FitnessStrategy,
    survival_rate: float
) -> List[Chromosome]:
    """
    Select the survivors of a population.

    Args:
        population: Chromosomes to select from
        strategy: Fitness strategy used for ranking
        survival_rate: Fraction of the population to keep

    Returns:
        The floor(len(population) * survival_rate) best chromosomes, best first

    Raises:
        ConfigurationError: If the rate leaves no survivors
    """
    count = survivor_count(len(population), survival_rate)
    if count < 1:
        raise ConfigurationError(
            f"survival_rate {survival_rate} leaves no survivors "
            f"from a population of {len(population)}"
        )

    ranked = rank_population(population, strategy)
    return [chromosome for chromosome, _ in ranked[:count]]
