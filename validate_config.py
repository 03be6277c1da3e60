#!/usr/bin/env python3
"""
Configuration Validation Tool

Validates YAML run configuration files for the group partitioning GA and
provides detailed feedback about parameter values and potential issues.
"""

import sys
import argparse
from pathlib import Path
from typing import Dict, Any, Optional

# Add current directory to path for imports
sys.path.append(str(Path(__file__).parent))

from group_ga.config_loader import (
    ConfigurationError,
    load_config,
    validate_config,
    validate_parameters,
)
from group_ga.data_models import GAParameters
from group_ga.io_utils import InputParseError, load_records


class ConfigValidator:
    """Run configuration validator with detailed feedback"""

    def __init__(self):
        self.warnings = []
        self.errors = []
        self.recommendations = []

    def validate_comprehensive(self, config_path: str,
                               records_path: Optional[str] = None) -> Dict[str, Any]:
        """Perform comprehensive validation with detailed feedback"""
        try:
            config = load_config(config_path)
        except ConfigurationError as e:
            return {
                'valid': False,
                'errors': [f"Failed to load configuration: {e}"],
                'warnings': [],
                'recommendations': [],
                'summary': {}
            }

        self.warnings = []
        self.errors = []
        self.recommendations = []

        # Basic validation
        self.errors.extend(validate_config(config))
        if self.errors:
            return self._result({})

        params = GAParameters(**config)
        try:
            validate_parameters(params)
        except ConfigurationError as e:
            self.errors.append(str(e))
            return self._result({})

        # Advanced validation
        self._validate_rates(params)
        self._validate_population(params)

        record_count = None
        if records_path:
            try:
                record_count = len(load_records(records_path))
            except InputParseError as e:
                self.errors.append(f"Failed to load records: {e}")
            else:
                self._validate_against_records(params, record_count)

        return self._result(self._generate_summary(params, record_count))

    def _result(self, summary: Dict[str, Any]) -> Dict[str, Any]:
        return {
            'valid': len(self.errors) == 0,
            'errors': self.errors,
            'warnings': self.warnings,
            'recommendations': self.recommendations,
            'summary': summary
        }

    def _validate_rates(self, params: GAParameters):
        """Check genetic rates for degenerate settings"""
        if params.mutation_rate == 0:
            self.warnings.append("mutation_rate is 0: no new group ids enter the population")

        if params.crossover_rate == 0 and params.mutation_rate == 0:
            self.warnings.append("No crossover and no mutation: generations only copy survivors")

        if params.survivor_count == 1:
            self.warnings.append("Only one survivor per generation: the population collapses to copies")
        elif params.survival_rate > 0.8:
            self.warnings.append(f"High survival_rate ({params.survival_rate}) weakens selection pressure")

        if params.random_seed is None:
            self.recommendations.append("Set random_seed for reproducible runs")

    def _validate_population(self, params: GAParameters):
        """Check population size and run length"""
        if params.population_size < 10:
            self.warnings.append(f"Small population ({params.population_size}) explores little")

        if params.generations == 0:
            self.warnings.append("generations is 0: the initial random population is reported")
        elif params.generations > 10000:
            self.warnings.append(f"Many generations ({params.generations}) may take a long time")

    def _validate_against_records(self, params: GAParameters, record_count: int):
        """Check parameters against the records to partition"""
        if params.group_count > record_count:
            self.warnings.append(
                f"More groups ({params.group_count}) than records ({record_count}): "
                "some groups must stay empty"
            )
        elif record_count / params.group_count < 2:
            self.warnings.append(
                f"Fewer than 2 records per group on average ({record_count}/{params.group_count})"
            )

    def _generate_summary(self, params: GAParameters,
                          record_count: Optional[int]) -> Dict[str, Any]:
        """Generate configuration summary"""
        summary = {
            'search': {
                'strategy': params.strategy,
                'group_count': params.group_count,
                'population_size': params.population_size,
                'generations': params.generations,
                'survivors': params.survivor_count,
                'elites': params.elite_count,
            },
            'rates': {
                'crossover': params.crossover_rate,
                'mutation': params.mutation_rate,
                'survival': params.survival_rate,
                'random_seed': params.random_seed if params.random_seed is not None else 'random',
            }
        }

        if record_count is not None:
            summary['records'] = {
                'count': record_count,
                'ideal_group_size': round(record_count / params.group_count, 2),
            }

        return summary


def main():
    """Main validation function"""
    parser = argparse.ArgumentParser(
        description="Validate YAML run configuration files for the group partitioning GA",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    parser.add_argument(
        'config_file',
        nargs='?',
        default='config.yaml',
        help='Configuration file to validate (default: config.yaml)'
    )

    parser.add_argument(
        '--records', '-r',
        metavar='CSV',
        help='Records CSV to check the configuration against'
    )

    parser.add_argument(
        '--verbose', '-v',
        action='store_true',
        help='Show detailed validation information'
    )

    parser.add_argument(
        '--warnings-only', '-w',
        action='store_true',
        help='Show only warnings and errors (no recommendations)'
    )

    args = parser.parse_args()

    validator = ConfigValidator()
    result = validator.validate_comprehensive(args.config_file, args.records)

    # Print results
    print("=" * 60)
    print("CONFIGURATION VALIDATION REPORT")
    print("=" * 60)
    print(f"File: {args.config_file}")
    print(f"Status: {'VALID' if result['valid'] else 'INVALID'}")
    print()

    if result['errors']:
        print("ERRORS:")
        for error in result['errors']:
            print(f"  - {error}")
        print()

    if result['warnings']:
        print("WARNINGS:")
        for warning in result['warnings']:
            print(f"  - {warning}")
        print()

    if result['recommendations'] and not args.warnings_only:
        print("RECOMMENDATIONS:")
        for rec in result['recommendations']:
            print(f"  - {rec}")
        print()

    if result['summary'] and args.verbose:
        print("SUMMARY:")
        for section, data in result['summary'].items():
            print(f"  {section.title()}:")
            for key, value in data.items():
                print(f"    {key}: {value}")
        print()

    if not args.verbose and 'search' in result['summary']:
        search = result['summary']['search']
        print(f"Strategy: {search['strategy']}, Groups: {search['group_count']}, "
              f"Population: {search['population_size']}, Generations: {search['generations']}")

    print("=" * 60)

    sys.exit(0 if result['valid'] else 1)


if __name__ == "__main__":
    main()
