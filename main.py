#!/usr/bin/env python3
"""
Group GA CLI - Minimal entry point.

Partitions the people listed in a CSV file into balanced groups.

Usage:
    python3 main.py people.csv
    python3 main.py people.csv --config config.yaml
    python3 main.py --help

Examples:
    # Groups that mirror the whole population
    python3 main.py data/sample_people.csv --groups 4 --seed 1

    # Groups that are as diverse as possible
    python3 main.py data/sample_people.csv --strategy diversity
"""

import sys
from pathlib import Path

# Add project root to path if needed
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from group_ga.cli import main


if __name__ == '__main__':
    sys.exit(main())
