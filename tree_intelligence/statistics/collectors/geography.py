"""
Geography collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from tree_intelligence.statistics.base import StatisticsCollector, register_collector
from tree_intelligence.statistics.model import Stats, StatsInput

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class GeographyCollector(StatisticsCollector):
    """
    Reserves the countries_represented statistic.

    Always empty: Member records carry no residence country.
    """
    collector_id: str = "geography"

    def collect(self, data: StatsInput, existing_stats: Stats) -> Stats:
        stats = Stats()
        # TODO: count members per country once Member gains a residence_country field
        stats.add_value('geography', 'countries_represented', [])
        return stats
