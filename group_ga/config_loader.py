"""
Configuration Loading System

Loads YAML run configuration files and merges them with built-in defaults
and command-line overrides into validated GAParameters.
"""

import yaml
from pathlib import Path
from typing import Dict, Any, List, Optional, Union

from .data_models import GAParameters, STRATEGY_NAMES


class ConfigurationError(Exception):
    """Raised when configuration is invalid"""
    pass


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """
    Load run configuration from a YAML file.

    Parameters may sit under a top-level `ga:` section or directly at the
    top level of the file.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Flat dictionary of GA parameters found in the file

    Raises:
        ConfigurationError: If the file is missing, unreadable or not a mapping
    """
    try:
        with open(config_path, 'r') as f:
            config = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigurationError(f"Configuration file not found: {config_path}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigurationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ConfigurationError("Configuration file must contain a mapping")

    if 'ga' in config:
        if not isinstance(config['ga'], dict):
            raise ConfigurationError("'ga' must be a dictionary")
        return dict(config['ga'])

    return config


def validate_config(config: Dict[str, Any]) -> List[str]:
    """
    Validate a flat parameter dictionary.

    Returns:
        List of error messages (empty if valid)
    """
    errors = []
    known = set(GAParameters.field_names())

    for key in config:
        if key not in known:
            errors.append(f"Unknown parameter: '{key}'")

    for key in ('population_size', 'group_count', 'generations', 'elite_count'):
        if key in config and (not isinstance(config[key], int) or isinstance(config[key], bool)):
            errors.append(f"'{key}' must be an integer, got: {config[key]!r}")

    for key in ('crossover_rate', 'mutation_rate', 'survival_rate'):
        if key not in config:
            continue
        value = config[key]
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            errors.append(f"'{key}' must be a number, got: {value!r}")
        elif not 0.0 <= value <= 1.0:
            errors.append(f"'{key}' must be between 0 and 1, got: {value}")

    if 'strategy' in config and config['strategy'] not in STRATEGY_NAMES:
        errors.append(
            f"Invalid strategy: '{config['strategy']}'. Must be one of: {', '.join(STRATEGY_NAMES)}"
        )

    seed = config.get('random_seed')
    if seed is not None and (not isinstance(seed, int) or isinstance(seed, bool) or seed < 0):
        errors.append(f"'random_seed' must be a non-negative integer, got: {seed!r}")

    return errors


def validate_parameters(params: GAParameters, record_count: Optional[int] = None) -> None:
    """
    Check a parameter combination before any search starts.

    Args:
        params: Parameters to check
        record_count: Number of records to partition, if known

    Raises:
        ConfigurationError: On the first invalid value found
    """
    if params.group_count <= 1:
        raise ConfigurationError(f"group_count must be greater than 1, got: {params.group_count}")

    if params.population_size <= 0:
        raise ConfigurationError(
            f"population_size must be a positive integer, got: {params.population_size}"
        )

    if params.generations < 0:
        raise ConfigurationError(f"generations must be non-negative, got: {params.generations}")

    for name in ('crossover_rate', 'mutation_rate', 'survival_rate'):
        value = getattr(params, name)
        if not 0.0 <= value <= 1.0:
            raise ConfigurationError(f"{name} must be between 0 and 1, got: {value}")

    if params.survivor_count < 1:
        raise ConfigurationError(
            f"survival_rate {params.survival_rate} leaves no survivors "
            f"from a population of {params.population_size}"
        )

    if params.elite_count < 0 or params.elite_count > params.survivor_count:
        raise ConfigurationError(
            f"elite_count must be between 0 and the survivor count "
            f"({params.survivor_count}), got: {params.elite_count}"
        )

    if params.strategy not in STRATEGY_NAMES:
        raise ConfigurationError(
            f"Invalid strategy: '{params.strategy}'. Must be one of: {', '.join(STRATEGY_NAMES)}"
        )

    if record_count is not None and record_count < 1:
        raise ConfigurationError("At least one record is required")


def build_parameters(config_path: Optional[Union[str, Path]] = None,
                     overrides: Optional[Dict[str, Any]] = None) -> GAParameters:
    """
    Merge defaults, YAML file and overrides into validated parameters.

    Args:
        config_path: Optional YAML run configuration
        overrides: Values taking precedence over the file (None values are ignored)

    Returns:
        Validated GAParameters

    Raises:
        ConfigurationError: If any source holds invalid values
    """
    config: Dict[str, Any] = {}

    if config_path is not None:
        config.update(load_config(config_path))

    if overrides:
        config.update({key: value for key, value in overrides.items() if value is not None})

    errors = validate_config(config)
    if errors:
        raise ConfigurationError("; ".join(errors))

    params = GAParameters(**config)
    validate_parameters(params)
    return params


def print_config_summary(params: GAParameters) -> None:
    """Print a summary of the run parameters"""
    print("Configuration Summary:")
    print(f"  Strategy: {params.strategy}")
    print(f"  Groups: {params.group_count}")
    print(f"  Population: {params.population_size} "
          f"(survivors: {params.survivor_count}, elites: {params.elite_count})")
    print(f"  Generations: {params.generations}")
    print(f"  Rates: crossover={params.crossover_rate}, mutation={params.mutation_rate}, "
          f"survival={params.survival_rate}")
    seed = params.random_seed if params.random_seed is not None else "random"
    print(f"  Random seed: {seed}")
