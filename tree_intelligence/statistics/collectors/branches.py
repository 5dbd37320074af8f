"""
Family branch collector.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging

from tree_intelligence.statistics.base import StatisticsCollector, register_collector
from tree_intelligence.statistics.model import Stats, StatsInput

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class BranchesCollector(StatisticsCollector):
    """
    Counts members per family_branch label.

    Statistics collected:
        - branch_counts: label -> member count
        - largest_branch: {'name', 'count'} of the most populous label, the
          first one seen on ties; None when no member has a label
    """
    collector_id: str = "branches"

    def collect(self, data: StatsInput, existing_stats: Stats) -> Stats:
        stats = Stats()
        counts = Counter(m.family_branch for m in data.snapshot.members if m.family_branch)

        largest = None
        for name, count in counts.items():
            if largest is None or count > largest['count']:
                largest = {'name': name, 'count': count}

        stats.add_value('branches', 'branch_counts', dict(counts))
        stats.add_value('branches', 'largest_branch', largest)
        return stats
