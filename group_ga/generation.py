"""
Generation controller for the group partitioning GA.

A Generation owns one population together with the parameters, fitness
strategy and random generator used to breed the next one. Advancing builds a
brand-new Generation; populations are never edited in place.
"""

from typing import Callable, List, Optional, Sequence, Tuple

import numpy as np

from .config_loader import ConfigurationError, validate_parameters
from .crossover import crossover
from .data_models import Chromosome, GAParameters, Record
from .fitness import FitnessStrategy
from .mutation import mutate
from .selection import fittest, rank_population


def random_population(
    population_size: int,
    chromosome_length: int,
    group_count: int,
    rng: np.random.Generator
) -> List[Chromosome]:
    """Draw every gene independently and uniformly from range(group_count)."""
    genes = rng.integers(0, group_count, size=(population_size, chromosome_length))
    return [tuple(int(gene) for gene in row) for row in genes]


class Generation:
    """
    One population of candidate group assignments.

    Attributes:
        records: Records being partitioned (shared, never copied)
        strategy: Fitness strategy used for ranking
        params: Genetic parameters
        rng: Random number generator shared by all descendants
        population: Chromosomes of this generation
        index: Generation number, starting at 0
    """

    def __init__(
        self,
        records: Sequence[Record],
        strategy: FitnessStrategy,
        params: GAParameters,
        rng: Optional[np.random.Generator] = None,
        population: Optional[List[Chromosome]] = None,
        index: int = 0
    ):
        validate_parameters(params, len(records))

        if strategy.group_count != params.group_count:
            raise ConfigurationError(
                f"Strategy scores {strategy.group_count} groups "
                f"but parameters ask for {params.group_count}"
            )

        self.records = records
        self.strategy = strategy
        self.params = params
        self.rng = rng if rng is not None else np.random.default_rng(params.random_seed)
        self.index = index

        if population is None:
            population = random_population(
                params.population_size, len(records), params.group_count, self.rng
            )

        if len(population) != params.population_size:
            raise ConfigurationError(
                f"Population holds {len(population)} chromosomes, "
                f"expected {params.population_size}"
            )

        for chromosome in population:
            if len(chromosome) != len(records):
                raise ValueError(
                    f"Chromosome length {len(chromosome)} does not match "
                    f"record count {len(records)}"
                )

        self.population = population

    @property
    def group_ids(self) -> range:
        return range(self.params.group_count)

    def ranked(self) -> List[Tuple[Chromosome, float]]:
        """All chromosomes with their scores, best first."""
        return rank_population(self.population, self.strategy)

    def fittest(self, strategy: Optional[FitnessStrategy] = None) -> List[Chromosome]:
        """
        Survivors of this generation, best first.

        Args:
            strategy: Optional strategy overriding the generation's own
        """
        return fittest(self.population, strategy or self.strategy, self.params.survival_rate)

    def best(self) -> Tuple[Chromosome, float]:
        """Best chromosome of the population and its score."""
        return self.ranked()[0]

    def next_gen(self) -> "Generation":
        """
        Breed the next generation.

        Survivors are selected once. The first `elite_count` survivors are
        copied unchanged; every other slot takes a random survivor as mother,
        crosses it with a random survivor with probability `crossover_rate`
        and mutates the result with probability `mutation_rate`.

        Returns:
            New Generation replacing this one
        """
        params = self.params
        rng = self.rng
        survivors = self.fittest()

        population: List[Chromosome] = list(survivors[:params.elite_count])

        while len(population) < params.population_size:
            mother = survivors[int(rng.integers(0, len(survivors)))]

            if rng.random() < params.crossover_rate:
                father = survivors[int(rng.integers(0, len(survivors)))]
                child = crossover(mother, father, rng)
            else:
                child = mother

            if rng.random() < params.mutation_rate:
                child = mutate(child, self.group_ids, rng)

            population.append(child)

        return Generation(
            self.records,
            self.strategy,
            params,
            rng=rng,
            population=population,
            index=self.index + 1
        )

    def __len__(self) -> int:
        return len(self.population)

    def __repr__(self) -> str:
        return (
            f"Generation(index={self.index}, population={len(self.population)}, "
            f"strategy={self.strategy.name})"
        )


GenerationCallback = Callable[[int, Chromosome, float], None]


def evolve(
    generation: Generation,
    generations: int,
    callback: Optional[GenerationCallback] = None
) -> Generation:
    """
    Run a fixed number of generations.

    The callback receives the generation index, its best chromosome and that
    chromosome's score before each generation is advanced.

    Args:
        generation: Starting generation
        generations: Number of generations to advance
        callback: Optional per-generation progress hook

    Returns:
        The final generation
    """
    if generations < 0:
        raise ConfigurationError(f"generations must be non-negative, got: {generations}")

    for _ in range(generations):
        if callback is not None:
            best, score = generation.best()
            callback(generation.index, best, score)
        generation = generation.next_gen()

    return generation
