"""
Tests for the standalone configuration validator.
"""

import unittest
import tempfile
import shutil
from pathlib import Path

import yaml

from validate_config import ConfigValidator


class TestConfigValidator(unittest.TestCase):
    """Test errors, warnings and recommendations of ConfigValidator."""

    def setUp(self):
        """Create temporary directory."""
        self.temp_dir = Path(tempfile.mkdtemp())
        self.validator = ConfigValidator()

    def tearDown(self):
        """Clean up temporary directory."""
        shutil.rmtree(self.temp_dir)

    def write_config(self, values):
        path = self.temp_dir / "config.yaml"
        with open(path, 'w') as f:
            yaml.safe_dump({'ga': values}, f)
        return str(path)

    def test_default_run_without_elites(self):
        """Test the no-elitism default gets no recommendation."""
        path = self.write_config({'group_count': 3, 'random_seed': 7})
        result = self.validator.validate_comprehensive(path)

        self.assertTrue(result['valid'])
        self.assertEqual(result['summary']['search']['elites'], 0)
        self.assertEqual(result['recommendations'], [])
        self.assertFalse(any('elite' in w for w in result['warnings']))

    def test_missing_seed_recommended(self):
        """Test a run without a seed is flagged as not reproducible."""
        path = self.write_config({'group_count': 3})
        result = self.validator.validate_comprehensive(path)

        self.assertTrue(result['valid'])
        self.assertEqual(result['recommendations'], ["Set random_seed for reproducible runs"])

    def test_invalid_rate(self):
        """Test an out-of-range rate is reported as an error."""
        path = self.write_config({'mutation_rate': 2.0})
        result = self.validator.validate_comprehensive(path)

        self.assertFalse(result['valid'])
        self.assertTrue(any('mutation_rate' in e for e in result['errors']))

    def test_more_groups_than_records(self):
        """Test the records check warns when groups must stay empty."""
        records = self.temp_dir / "people.csv"
        records.write_text(
            "name,gender,discipline,seniority,client,team\n"
            "Ada,F,Engineering,Senior,Acme,Blue\n"
            "Ben,M,Design,Junior,Globex,Red\n"
        )
        path = self.write_config({'group_count': 3, 'random_seed': 1})
        result = self.validator.validate_comprehensive(path, str(records))

        self.assertTrue(result['valid'])
        self.assertEqual(result['summary']['records']['count'], 2)
        self.assertTrue(any('More groups' in w for w in result['warnings']))

    def test_missing_file(self):
        """Test an unreadable configuration is invalid."""
        result = self.validator.validate_comprehensive(str(self.temp_dir / "none.yaml"))
        self.assertFalse(result['valid'])
        self.assertIn("Failed to load configuration", result['errors'][0])


if __name__ == '__main__':
    unittest.main()
