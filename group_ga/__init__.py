"""
Balanced group partitioning with a genetic algorithm

This package splits a list of people into a fixed number of groups so that
group sizes are balanced and each group either mirrors the attribute mix of
the whole population or is as diverse as possible inside.

Key Features:
- Two interchangeable fitness strategies (similarity, diversity)
- Explicit, seedable random generator threaded through every operator
- Fixed-length generation loop with survivor selection, single-point
  crossover and point mutation
- YAML run configuration with command-line overrides

Modules:
- data_models: Core data structures (Record, GAParameters)
- profiles: Attribute histograms and group profiles
- fitness: Fitness strategies
- selection: Population ranking and survivor selection
- crossover: Single-point crossover
- mutation: Point mutation
- generation: Generation controller and evolution loop
- io_utils: CSV record loading and assignment export
- report: Console progress and grouping report
- visualization_utils: Convergence and group composition plots
- config_loader: Run configuration loading and validation
- cli: Command-line interface
"""

__version__ = "0.1.0"
__author__ = "Group Balancing Team"

from .data_models import Record, GAParameters, ATTRIBUTES
from .profiles import Histogram, GroupProfile
from .fitness import (
    FitnessStrategy,
    DistributionalSimilarity,
    DiversityCount,
    create_fitness_strategy,
)
from .selection import fittest, rank_population
from .crossover import crossover
from .mutation import mutate
from .generation import Generation, evolve
from .config_loader import ConfigurationError
from .io_utils import InputParseError, load_records

__all__ = [
    "Record",
    "GAParameters",
    "ATTRIBUTES",
    "Histogram",
    "GroupProfile",
    "FitnessStrategy",
    "DistributionalSimilarity",
    "DiversityCount",
    "create_fitness_strategy",
    "fittest",
    "rank_population",
    "crossover",
    "mutate",
    "Generation",
    "evolve",
    "ConfigurationError",
    "InputParseError",
    "load_records",
]
