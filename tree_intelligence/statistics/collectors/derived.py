"""
Collector folding in the outputs of the inference and suggestion components.
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
class DerivedCollector(StatisticsCollector):
    """
    Statistics collected:
        - inferred_relations: number of inferred relations
        - suggestions: number of link suggestions
        - relations_by_kind / suggestions_by_kind: breakdowns by kind
    """
    collector_id: str = "derived"

    def collect(self, data: StatsInput, existing_stats: Stats) -> Stats:
        stats = Stats()
        stats.add_value('derived', 'inferred_relations', len(data.relations))
        stats.add_value('derived', 'suggestions', len(data.suggestions))
        stats.add_value('derived', 'relations_by_kind',
                        dict(Counter(r.relation.value for r in data.relations)))
        stats.add_value('derived', 'suggestions_by_kind',
                        dict(Counter(s.kind.value for s in data.suggestions)))
        return stats
