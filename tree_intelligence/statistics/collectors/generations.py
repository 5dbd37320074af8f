"""
Generation depth collector.
"""
from __future__ import annotations

from collections import deque
from dataclasses import dataclass
import logging
from typing import Dict

from tree_intelligence.statistics.base import StatisticsCollector, register_collector
from tree_intelligence.statistics.model import Stats, StatsInput

logger = logging.getLogger(__name__)


@register_collector
@dataclass
class GenerationsCollector(StatisticsCollector):
    """
    Layers the tree into generations with a multi-source BFS.

    Roots are members with no recorded parent and all start at generation 0.
    A member's generation is fixed the first time it is reached, one more
    than the parent that reached it. Disconnected components each count from
    their own roots.

    Statistics collected:
        - count: 1 + deepest generation, 0 when there are no links
        - roots: number of root members
        - member_generations: member id -> generation for every reached member
    """
    collector_id: str = "generations"

    def collect(self, data: StatsInput, existing_stats: Stats) -> Stats:
        stats = Stats()
        graph = data.snapshot.graph

        roots = [m.id for m in data.snapshot.members if not graph.parents(m.id)]
        generation_of = self._layer(graph, roots)

        if not data.snapshot.links or not generation_of:
            count = 0
        else:
            count = max(generation_of.values()) + 1

        stats.add_value('generations', 'count', count)
        stats.add_value('generations', 'roots', len(roots))
        stats.add_value('generations', 'member_generations', generation_of)

        logger.info(f"Generations: {count} from {len(roots)} roots")
        return stats

    def _layer(self, graph, roots) -> Dict[str, int]:
        generation_of: Dict[str, int] = {root: 0 for root in roots}
        queue = deque(roots)
        while queue:
            current = queue.popleft()
            for child_id in sorted(graph.children(current)):
                if child_id not in generation_of:
                    generation_of[child_id] = generation_of[current] + 1
                    queue.append(child_id)
        return generation_of
