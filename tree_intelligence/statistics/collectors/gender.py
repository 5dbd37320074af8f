"""
Gender statistics collector.
"""
from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
import logging

from tree_intelligence.member import Gender
from tree_intelligence.statistics.base import StatisticsCollector, register_collector
from tree_intelligence.statistics.model import Stats, StatsInput

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class GenderCollector(StatisticsCollector):
    """
    Collects the gender distribution of the tree (male/female/other/unknown).
    """
    collector_id: str = "gender"

    def collect(self, data: StatsInput, existing_stats: Stats) -> Stats:
        stats = Stats()
        counts = Counter(m.gender for m in data.snapshot.members)

        stats.add_value('gender', 'male', counts[Gender.MALE])
        stats.add_value('gender', 'female', counts[Gender.FEMALE])
        stats.add_value('gender', 'other', counts[Gender.OTHER])
        stats.add_value('gender', 'unknown', counts[Gender.UNKNOWN])

        total = len(data.snapshot.members)
        if total > 0:
            stats.add_value('gender', 'male_percentage', round(100 * counts[Gender.MALE] / total, 1))
            stats.add_value('gender', 'female_percentage', round(100 * counts[Gender.FEMALE] / total, 1))

        logger.info(f"Gender: {counts[Gender.MALE]} male, {counts[Gender.FEMALE]} female, "
                    f"{counts[Gender.OTHER]} other, {counts[Gender.UNKNOWN]} unknown")
        return stats
