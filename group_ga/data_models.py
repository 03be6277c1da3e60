"""
Data models for the group partitioning GA.

Core data structures representing individual records, chromosomes and the
per-run genetic parameters.
"""

import math
from dataclasses import dataclass, asdict, fields
from typing import Optional, Any


ATTRIBUTES = ("gender", "discipline", "seniority", "client", "team")
RECORD_COLUMNS = ("name",) + ATTRIBUTES
STRATEGY_NAMES = ("similarity", "diversity")

# One group id per record
Chromosome = tuple[int, ...]


@dataclass(frozen=True)
class Record:
    """
    A single individual to be placed in a group.

    Attributes:
        name: Unique identifier of the individual
        gender, discipline, seniority, client, team: Categorical attributes
    """
    name: str
    gender: str
    discipline: str
    seniority: str
    client: str
    team: str

    def attribute(self, attribute: str) -> str:
        """Get the value of one tracked attribute by name."""
        if attribute not in ATTRIBUTES:
            raise KeyError(f"Unknown attribute: {attribute}")
        return getattr(self, attribute)

    def __str__(self) -> str:
        return (
            f"{self.name} ({self.gender}, {self.discipline}, {self.seniority}, "
            f"{self.client}, {self.team})"
        )


@dataclass
class GAParameters:
    """
    Genetic parameters for a single run.

    Attributes:
        population_size: Number of chromosomes per generation
        group_count: Number of groups to partition records into
        generations: Number of generations to run
        crossover_rate: Probability that a slot is filled by crossover
        mutation_rate: Probability that a slot is mutated after breeding
        survival_rate: Fraction of the ranked population kept as parents
        elite_count: Best survivors copied unchanged into the next population
        strategy: Fitness strategy name ("similarity" or "diversity")
        random_seed: Seed for the random generator (None for a fresh seed)
    """
    population_size: int = 150
    group_count: int = 9
    generations: int = 300
    crossover_rate: float = 0.5
    mutation_rate: float = 0.5
    survival_rate: float = 0.2
    elite_count: int = 0
    strategy: str = "similarity"
    random_seed: Optional[int] = None

    @property
    def survivor_count(self) -> int:
        """Number of chromosomes kept by selection each generation."""
        return math.floor(self.population_size * self.survival_rate)

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)
