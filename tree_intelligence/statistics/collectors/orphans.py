"""
Orphan member collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from tree_intelligence.statistics.base import StatisticsCollector, register_collector
from tree_intelligence.statistics.model import Stats, StatsInput

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class OrphansCollector(StatisticsCollector):
    """Counts members that are not an endpoint of any link."""
    collector_id: str = "orphans"

    def collect(self, data: StatsInput, existing_stats: Stats) -> Stats:
        stats = Stats()
        graph = data.snapshot.graph
        orphan_ids = [m.id for m in data.snapshot.members if not graph.is_linked(m.id)]
        stats.add_value('orphans', 'count', len(orphan_ids))
        stats.add_value('orphans', 'member_ids', orphan_ids)
        return stats
