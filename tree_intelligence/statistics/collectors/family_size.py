"""
Family size collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from tree_intelligence.statistics.base import StatisticsCollector, register_collector
from tree_intelligence.statistics.model import Stats, StatsInput

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class FamilySizeCollector(StatisticsCollector):
    """
    Average number of children per parent, over parents with at least one child.

    This is the tree's average branching factor rather than a per-person
    sibling count.
    """
    collector_id: str = "family_size"

    def collect(self, data: StatsInput, existing_stats: Stats) -> Stats:
        stats = Stats()
        sizes = [len(children) for children in data.snapshot.graph.children_of.values() if children]

        average = round(sum(sizes) / len(sizes), 1) if sizes else 0
        stats.add_value('family', 'average_family_size', average)
        stats.add_value('family', 'parents_with_children', len(sizes))
        if sizes:
            stats.add_value('family', 'largest_family_size', max(sizes))
        return stats
