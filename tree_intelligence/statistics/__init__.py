"""
Statistics module for family tree analysis.

Collects aggregate figures across the whole tree: member and link counts,
generation depth, average family size, largest branch, gender distribution
and orphan count, plus the number of inferred relations and suggestions.

Main components:
    - StatisticsCollector: Base class for creating custom statistics collectors
    - StatisticsPipeline: Orchestrates running multiple collectors
    - TreeStats: Typed summary built from the collected Stats
    - Built-in collectors: see tree_intelligence.statistics.collectors
"""

from tree_intelligence.statistics.base import StatisticsCollector, register_collector, get_collector_registry
from tree_intelligence.statistics.model import (
    BranchCount,
    GenderDistribution,
    Stats,
    StatsInput,
    StatValue,
    TreeStats,
)
from tree_intelligence.statistics.pipeline import StatisticsPipeline, compute_tree_stats

# Import collectors to ensure they're registered
from tree_intelligence.statistics import collectors

__all__ = [
    'StatisticsCollector',
    'register_collector',
    'get_collector_registry',
    'StatisticsPipeline',
    'compute_tree_stats',
    'Stats',
    'StatsInput',
    'StatValue',
    'TreeStats',
    'BranchCount',
    'GenderDistribution',
    'collectors',
]
