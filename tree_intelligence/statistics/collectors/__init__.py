"""
Built-in statistics collectors.

Import collectors here to automatically register them.
"""

from tree_intelligence.statistics.collectors.counts import CountsCollector
from tree_intelligence.statistics.collectors.generations import GenerationsCollector
from tree_intelligence.statistics.collectors.family_size import FamilySizeCollector
from tree_intelligence.statistics.collectors.branches import BranchesCollector
from tree_intelligence.statistics.collectors.gender import GenderCollector
from tree_intelligence.statistics.collectors.orphans import OrphansCollector
from tree_intelligence.statistics.collectors.geography import GeographyCollector
from tree_intelligence.statistics.collectors.derived import DerivedCollector

__all__ = [
    'CountsCollector',
    'GenerationsCollector',
    'FamilySizeCollector',
    'BranchesCollector',
    'GenderCollector',
    'OrphansCollector',
    'GeographyCollector',
    'DerivedCollector',
]
