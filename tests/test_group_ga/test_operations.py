"""
Tests for GA operations: selection, crossover, and mutation.
"""

import unittest
import numpy as np

from group_ga.config_loader import ConfigurationError
from group_ga.crossover import crossover
from group_ga.data_models import Record
from group_ga.fitness import DistributionalSimilarity, DiversityCount
from group_ga.mutation import mutate, mutation_statistics
from group_ga.selection import fittest, rank_population, survivor_count


class TestCrossover(unittest.TestCase):
    """Test single-point crossover."""

    def setUp(self):
        """Set up test parents."""
        self.mother = (0, 0, 0, 0, 0, 0, 0, 0)
        self.father = (1, 1, 1, 1, 1, 1, 1, 1)
        self.rng = np.random.default_rng(42)

    def test_child_length(self):
        """Test children keep the parents' length."""
        for _ in range(50):
            child = crossover(self.mother, self.father, self.rng)
            self.assertEqual(len(child), len(self.mother))

    def test_child_is_prefix_of_mother_and_suffix_of_father(self):
        """Test child genes switch from mother to father exactly once."""
        for _ in range(50):
            child = crossover(self.mother, self.father, self.rng)
            split = child.index(1) if 1 in child else len(child)
            self.assertLess(split, len(child))
            self.assertEqual(child[:split], self.mother[:split])
            self.assertEqual(child[split:], self.father[split:])

    def test_self_crossover(self):
        """Test crossing a chromosome with itself reproduces it."""
        parent = (2, 0, 1, 1, 2, 0)
        for _ in range(20):
            self.assertEqual(crossover(parent, parent, self.rng), parent)

    def test_single_gene(self):
        """Test single-gene parents return the mother's gene."""
        for _ in range(10):
            self.assertEqual(crossover((3,), (5,), self.rng), (3,))

    def test_parents_untouched(self):
        """Test parents are not modified."""
        mother = (0, 1, 2)
        father = (2, 1, 0)
        crossover(mother, father, self.rng)
        self.assertEqual(mother, (0, 1, 2))
        self.assertEqual(father, (2, 1, 0))

    def test_length_mismatch(self):
        """Test parents of different length are rejected."""
        with self.assertRaises(ValueError):
            crossover((0, 1, 2), (0, 1), self.rng)

    def test_empty_parents(self):
        """Test empty parents are rejected."""
        with self.assertRaises(ValueError):
            crossover((), (), self.rng)

    def test_reproducible(self):
        """Test same seed gives same children."""
        rng_a = np.random.default_rng(7)
        rng_b = np.random.default_rng(7)
        children_a = [crossover(self.mother, self.father, rng_a) for _ in range(10)]
        children_b = [crossover(self.mother, self.father, rng_b) for _ in range(10)]
        self.assertEqual(children_a, children_b)


class TestMutation(unittest.TestCase):
    """Test point mutation."""

    def setUp(self):
        """Set up test chromosome."""
        self.chromosome = (0, 1, 2, 0, 1, 2, 0, 1)
        self.rng = np.random.default_rng(42)

    def test_at_most_one_change(self):
        """Test mutation changes at most one gene, within range."""
        group_ids = range(3)
        for _ in range(100):
            mutated = mutate(self.chromosome, group_ids, self.rng)
            self.assertEqual(len(mutated), len(self.chromosome))

            stats = mutation_statistics(self.chromosome, mutated)
            self.assertLessEqual(stats['genes_changed'], 1)
            for gene in mutated:
                self.assertIn(gene, group_ids)

    def test_original_untouched(self):
        """Test mutation returns a new chromosome."""
        original = tuple(self.chromosome)
        mutate(self.chromosome, range(3), self.rng)
        self.assertEqual(self.chromosome, original)

    def test_value_drawn_from_range(self):
        """Test new values come from the given range."""
        chromosome = (0,) * 20
        seen = set()
        for _ in range(200):
            seen.update(mutate(chromosome, range(5, 8), self.rng))
        self.assertTrue(seen - {0} <= {5, 6, 7})
        self.assertTrue({5, 6, 7} <= seen)

    def test_invalid_inputs(self):
        """Test empty chromosome or empty range are rejected."""
        with self.assertRaises(ValueError):
            mutate((), range(3), self.rng)
        with self.assertRaises(ValueError):
            mutate(self.chromosome, range(0), self.rng)

    def test_mutation_statistics(self):
        """Test change counting."""
        stats = mutation_statistics((0, 1, 2, 3), (0, 1, 1, 3))
        self.assertEqual(stats['total_genes'], 4)
        self.assertEqual(stats['genes_changed'], 1)
        self.assertAlmostEqual(stats['change_rate'], 0.25)


class TestSelection(unittest.TestCase):
    """Test ranking and survivor selection."""

    def setUp(self):
        """Set up population over two fully different records."""
        self.records = [
            Record("Ada", "F", "Engineering", "Senior", "Acme", "Blue"),
            Record("Ben", "M", "Design", "Junior", "Globex", "Red"),
        ]
        # Similarity scores: 12, 28, 28, 12; diversity scores: 14, 18, 18, 14
        self.population = [(0, 0), (0, 1), (1, 0), (1, 1)]
        self.similarity = DistributionalSimilarity(self.records, group_count=2)
        self.diversity = DiversityCount(self.records, group_count=2)

    def test_survivor_count(self):
        """Test survivor count is floored."""
        self.assertEqual(survivor_count(10, 0.5), 5)
        self.assertEqual(survivor_count(150, 0.2), 30)
        self.assertEqual(survivor_count(4, 0.2), 0)

    def test_rank_ascending(self):
        """Test lower-is-better ranking with index tie-break."""
        ranked = rank_population(self.population, self.similarity)
        self.assertEqual([c for c, _ in ranked], [(0, 0), (1, 1), (0, 1), (1, 0)])
        self.assertEqual([s for _, s in ranked], [12.0, 12.0, 28.0, 28.0])

    def test_rank_descending(self):
        """Test higher-is-better ranking with index tie-break."""
        ranked = rank_population(self.population, self.diversity)
        self.assertEqual([c for c, _ in ranked], [(0, 1), (1, 0), (0, 0), (1, 1)])
        self.assertEqual([s for _, s in ranked], [18.0, 18.0, 14.0, 14.0])

    def test_fittest_count_and_order(self):
        """Test survivors are the best floor(size * rate) chromosomes."""
        survivors = fittest(self.population, self.similarity, 0.75)
        self.assertEqual(survivors, [(0, 0), (1, 1), (0, 1)])

        for chromosome in survivors:
            self.assertIn(chromosome, self.population)

    def test_fittest_respects_direction(self):
        """Test the strategy decides which end of the ranking survives."""
        records = [
            Record("Ada", "F", "Engineering", "Senior", "Acme", "Blue"),
            Record("Ben", "M", "Engineering", "Senior", "Acme", "Blue"),
            Record("Cleo", "F", "Design", "Junior", "Globex", "Red"),
        ]
        population = [(0, 0, 0), (0, 1, 0), (0, 0, 1)]
        similarity = DistributionalSimilarity(records, group_count=2)
        diversity = DiversityCount(records, group_count=2)

        best_similar = fittest(population, similarity, 0.34)[0]
        best_diverse = fittest(population, diversity, 0.34)[0]

        scores = [similarity.evaluate(c) for c in population]
        self.assertEqual(similarity.evaluate(best_similar), min(scores))
        scores = [diversity.evaluate(c) for c in population]
        self.assertEqual(diversity.evaluate(best_diverse), max(scores))

    def test_zero_survivors(self):
        """Test a rate leaving no survivors is a configuration error."""
        with self.assertRaises(ConfigurationError):
            fittest(self.population, self.similarity, 0.2)

    def test_population_untouched(self):
        """Test selection does not reorder the population."""
        before = list(self.population)
        fittest(self.population, self.similarity, 0.5)
        self.assertEqual(self.population, before)


if __name__ == '__main__':
    unittest.main()
