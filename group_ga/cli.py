"""
CLI module for the group partitioning GA.

Loads records and run configuration, runs the fixed-length generation loop
and prints the final grouping.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from .config_loader import ConfigurationError, build_parameters, print_config_summary
from .data_models import GAParameters, Record, STRATEGY_NAMES
from .fitness import create_fitness_strategy
from .generation import Generation, evolve
from .io_utils import (
    InputParseError,
    load_records,
    save_assignment_to_csv,
    save_history_to_csv,
    validate_records,
)
from .report import format_progress, format_report


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="group-ga",
        description="Partition people into balanced groups with a genetic algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  group-ga people.csv                               # Default run (similarity strategy)
  group-ga people.csv --strategy diversity          # Maximize diversity inside groups
  group-ga people.csv -g 4 -n 100 --seed 7          # 4 groups, 100 generations, fixed seed
  group-ga people.csv --config run.yaml             # Parameters from a YAML file
  cat people.csv | group-ga -                       # Read records from stdin
  group-ga people.csv --output groups.csv --plot run.png
        """
    )

    parser.add_argument(
        'input',
        nargs='?',
        default='-',
        help="CSV file with records, or '-' for stdin (default: stdin)"
    )
    parser.add_argument('--config', '-c', metavar='PATH', help='YAML run configuration file')
    parser.add_argument('--strategy', '-s', choices=STRATEGY_NAMES, help='Fitness strategy')
    parser.add_argument('--groups', '-g', type=int, dest='group_count', metavar='N',
                        help='Number of groups')
    parser.add_argument('--population', '-p', type=int, dest='population_size', metavar='N',
                        help='Population size')
    parser.add_argument('--generations', '-n', type=int, metavar='N',
                        help='Number of generations')
    parser.add_argument('--crossover-rate', type=float, metavar='P',
                        help='Crossover probability per slot')
    parser.add_argument('--mutation-rate', type=float, metavar='P',
                        help='Mutation probability per slot')
    parser.add_argument('--survival-rate', type=float, metavar='P',
                        help='Fraction of the population kept as parents')
    parser.add_argument('--elite', type=int, dest='elite_count', metavar='N',
                        help='Best survivors copied unchanged each generation')
    parser.add_argument('--seed', type=int, dest='random_seed', metavar='N',
                        help='Random seed for reproducible runs')
    parser.add_argument('--output', '-o', metavar='PATH',
                        help='Write the final assignment to a CSV file')
    parser.add_argument('--history', metavar='PATH',
                        help='Write the best score per generation to a CSV file')
    parser.add_argument('--plot', metavar='PATH',
                        help='Save a convergence and group composition plot (PNG)')
    parser.add_argument('--overwrite', action='store_true',
                        help='Overwrite existing output files')
    parser.add_argument('--quiet', '-q', action='store_true',
                        help='Do not print per-generation progress')
    parser.add_argument('--verbose', '-v', action='store_true',
                        help='Include the best chromosome in progress lines')

    return parser


def run(records: List[Record], params: GAParameters, args: argparse.Namespace) -> Generation:
    """
    Run the optimisation loop and print the result.

    Args:
        records: Loaded records
        params: Validated parameters
        args: Parsed command-line arguments (output options)

    Returns:
        The final generation
    """
    strategy = create_fitness_strategy(params.strategy, records, params.group_count)
    rng = np.random.default_rng(params.random_seed)
    generation = Generation(records, strategy, params, rng=rng)

    history = []

    def on_generation(index, best, score):
        history.append((index, score))
        if not args.quiet:
            print(format_progress(index, score, best if args.verbose else None))

    generation = evolve(generation, params.generations, on_generation)

    best, score = generation.best()
    history.append((generation.index, score))

    print()
    print("=" * 60)
    print(f"RESULT (strategy: {strategy.name}, score: {score:.5f})")
    print("=" * 60)
    print(format_report(best, records, strategy))

    if args.output:
        path = save_assignment_to_csv(best, records, args.output, overwrite=args.overwrite)
        print(f"\nAssignment written to: {path}")

    if args.history:
        path = save_history_to_csv(history, args.history, overwrite=args.overwrite)
        print(f"History written to: {path}")

    if args.plot:
        from .visualization_utils import save_run_plot
        path = save_run_plot(best, records, strategy, history, args.plot)
        print(f"Plot written to: {path}")

    return generation


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the group GA CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    overrides = {
        name: getattr(args, name)
        for name in ('strategy', 'group_count', 'population_size', 'generations',
                     'crossover_rate', 'mutation_rate', 'survival_rate',
                     'elite_count', 'random_seed')
    }

    try:
        params = build_parameters(args.config, overrides)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 1

    try:
        records = load_records(args.input)
    except InputParseError as e:
        print(f"Could not read records: {e}")
        return 1

    for output in (args.output, args.history, args.plot):
        if output and Path(output).exists() and not args.overwrite:
            print(f"Error: Output file already exists: {output} (use --overwrite)")
            return 1

    warning = validate_records(records)
    if warning and not args.quiet:
        print(f"Warning: {warning}")

    if not args.quiet:
        print(f"Loaded {len(records)} records")
        print_config_summary(params)
        print()

    try:
        run(records, params, args)
    except ConfigurationError as e:
        print(f"Invalid configuration: {e}")
        return 1
    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
