"""
Visualization utilities for the group partitioning GA.

Plots the convergence of the best score across generations and the
composition of each group in the final assignment.
"""

from pathlib import Path
from typing import Sequence, Tuple, Union

import matplotlib
matplotlib.use('Agg')
import matplotlib.pyplot as plt
import numpy as np

from .data_models import ATTRIBUTES, Chromosome, Record
from .fitness import FitnessStrategy
from .report import group_sizes


class AssignmentVisualizer:
    """Plots for a finished run"""

    def __init__(self, records: Sequence[Record], strategy: FitnessStrategy):
        self.records = records
        self.strategy = strategy

    def plot_convergence(self, history: Sequence[Tuple[int, float]], ax: plt.Axes = None):
        """Plot best score per generation"""
        if ax is None:
            fig, ax = plt.subplots(figsize=(10, 5))

        if not history:
            ax.text(0.5, 0.5, "No history", ha='center', va='center', transform=ax.transAxes)
            return

        indices, scores = zip(*history)
        ax.plot(indices, scores, color="tab:blue", linewidth=1.5)

        direction = "higher" if self.strategy.higher_is_better else "lower"
        ax.set_xlabel('Generation')
        ax.set_ylabel(f'Best score ({direction} is better)')
        ax.set_title(f'Convergence ({self.strategy.name})')
        ax.grid(True, alpha=0.3)

    def plot_group_sizes(self, chromosome: Chromosome, ax: plt.Axes = None):
        """Plot member count per group against the ideal size"""
        if ax is None:
            fig, ax = plt.subplots(figsize=(8, 5))

        sizes = group_sizes(chromosome, self.strategy.group_count)
        group_ids = range(len(sizes))

        x = np.arange(len(group_ids))
        ax.bar(x, sizes, alpha=0.7)
        ax.axhline(self.strategy.ideal_size, color="red", linestyle='--', label='Ideal size')

        ax.set_xticks(x)
        ax.set_xticklabels([str(group_id) for group_id in group_ids])
        ax.set_xlabel('Group')
        ax.set_ylabel('Members')
        ax.set_title('Group Sizes')
        ax.legend()

    def plot_attribute_spread(self, chromosome: Chromosome, ax: plt.Axes = None):
        """Plot distinct value counts per attribute and group as a heatmap"""
        if ax is None:
            fig, ax = plt.subplots(figsize=(8, 5))

        profiles = self.strategy.group_profiles(chromosome)
        group_ids = sorted(profiles)

        spread = np.zeros((len(ATTRIBUTES), len(group_ids)))
        for column, group_id in enumerate(group_ids):
            for row, attribute in enumerate(ATTRIBUTES):
                spread[row, column] = profiles[group_id].histogram(attribute).distinct()

        im = ax.imshow(spread, cmap='YlGn', aspect='auto')
        ax.set_yticks(np.arange(len(ATTRIBUTES)))
        ax.set_yticklabels(ATTRIBUTES)
        ax.set_xticks(np.arange(len(group_ids)))
        ax.set_xticklabels([str(group_id) for group_id in group_ids])
        ax.set_xlabel('Group')
        ax.set_title('Distinct Values per Group')
        plt.colorbar(im, ax=ax)

    def plot_summary(
        self,
        chromosome: Chromosome,
        history: Sequence[Tuple[int, float]],
        save_path: Union[str, Path],
        figsize: Tuple[int, int] = (14, 10)
    ) -> Path:
        """
        Save a three-panel summary figure.

        Args:
            chromosome: Final best assignment
            history: (generation index, best score) pairs
            save_path: PNG output path
            figsize: Figure size (width, height) in inches

        Returns:
            Path of the saved figure
        """
        save_path = Path(save_path)
        save_path.parent.mkdir(parents=True, exist_ok=True)

        fig = plt.figure(figsize=figsize)
        gs = fig.add_gridspec(2, 2, height_ratios=[1, 1])

        self.plot_convergence(history, fig.add_subplot(gs[0, :]))
        self.plot_group_sizes(chromosome, fig.add_subplot(gs[1, 0]))
        self.plot_attribute_spread(chromosome, fig.add_subplot(gs[1, 1]))

        plt.tight_layout()
        plt.savefig(save_path, dpi=150, bbox_inches='tight')
        plt.close(fig)

        return save_path


def save_run_plot(
    chromosome: Chromosome,
    records: Sequence[Record],
    strategy: FitnessStrategy,
    history: Sequence[Tuple[int, float]],
    output_path: Union[str, Path]
) -> Path:
    """Convenience wrapper around AssignmentVisualizer.plot_summary."""
    visualizer = AssignmentVisualizer(records, strategy)
    return visualizer.plot_summary(chromosome, history, output_path)
