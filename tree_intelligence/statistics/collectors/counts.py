"""
Member and link count collector.
"""
from __future__ import annotations

from dataclasses import dataclass
import logging

from tree_intelligence.statistics.base import StatisticsCollector, register_collector
from tree_intelligence.statistics.model import Stats, StatsInput

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class CountsCollector(StatisticsCollector):
    """
    Counts members and links.

    Statistics collected:
        - members: total, real (with an account), virtual (placeholders)
        - links: total, parent, spouse
    """
    collector_id: str = "counts"

    def collect(self, data: StatsInput, existing_stats: Stats) -> Stats:
        stats = Stats()
        members = data.snapshot.members
        links = data.snapshot.links

        virtual = sum(1 for m in members if m.is_virtual)
        stats.add_value('members', 'total', len(members))
        stats.add_value('members', 'real', len(members) - virtual)
        stats.add_value('members', 'virtual', virtual)

        parent_links = sum(1 for link in links if link.is_parent)
        stats.add_value('links', 'total', len(links))
        stats.add_value('links', 'parent', parent_links)
        stats.add_value('links', 'spouse', len(links) - parent_links)

        logger.info(f"Counts: {len(members)} members ({virtual} virtual), {len(links)} links")
        return stats
