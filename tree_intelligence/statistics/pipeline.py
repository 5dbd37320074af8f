"""
Pipeline for running statistics collectors.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Any, Dict, Iterable, List, Optional, Union

from tree_intelligence.config import EngineConfig, resolve_config
from tree_intelligence.app_hooks import report_step
from tree_intelligence.inference.model import InferredRelation
from tree_intelligence.link import Link
from tree_intelligence.member import Member
from tree_intelligence.snapshot import TreeSnapshot
from tree_intelligence.statistics.base import StatisticsCollector, get_collector_registry
from tree_intelligence.statistics.model import Stats, StatsInput, TreeStats
from tree_intelligence.suggestions.model import LinkSuggestion

logger = logging.getLogger(__name__)


@dataclass
class StatisticsPipeline:
    """
    Pipeline for running statistics collectors on a tree.

    Attributes:
        collectors: List of collector instances to run
        config: Engine configuration (collector toggles)
        app_hooks: Optional application hooks for progress reporting
    """
    collectors: List[StatisticsCollector] = field(default_factory=list)
    config: Optional[EngineConfig] = None
    app_hooks: Optional[Any] = field(default=None)

    def __post_init__(self) -> None:
        """
        Initialize collectors from registry if none provided.

        If no collectors are explicitly provided, automatically loads
        all registered collectors from the global registry.
        """
        self.config = resolve_config(self.config)
        if not self.collectors:
            self._load_collectors_from_registry()

    def _load_collectors_from_registry(self) -> None:
        """
        Instantiate each registered collector with its enabled setting from config.
        """
        for collector_id, collector_cls in get_collector_registry().items():
            enabled = self.config.collector_enabled(collector_id)
            self.collectors.append(collector_cls(enabled=enabled, app_hooks=self.app_hooks))
            logger.debug(f"Loaded collector: {collector_id} (enabled={enabled})")

    def run(self, data: StatsInput) -> Stats:
        """
        Run all enabled collectors.

        A collector that raises is logged and skipped; the others still run.

        Args:
            data: Snapshot plus inferred relations and suggestions

        Returns:
            Stats object with all collected values
        """
        stats = Stats()

        enabled_collectors = [c for c in self.collectors if c.enabled and self.config.collector_enabled(c.collector_id)]
        total_collectors = len(enabled_collectors)
        report_step(self.app_hooks, logger, info="Collecting tree statistics", target=total_collectors, reset_counter=True)

        for collector_num, collector in enumerate(enabled_collectors, start=1):
            try:
                logger.debug(f"Running collector ({collector_num}/{total_collectors}): {collector.collector_id}")
                collector_stats = collector.collect(data, stats)
                stats.merge(collector_stats)
            except Exception as e:
                logger.error(f"Error in collector {collector.collector_id}: {e}", exc_info=True)
            report_step(self.app_hooks, logger, plus_step=1)

        return stats


def compute_tree_stats(
    members: Iterable[Union[Member, Dict[str, Any]]],
    links: Iterable[Union[Link, Dict[str, Any]]],
    relations: Iterable[InferredRelation] = (),
    suggestions: Iterable[LinkSuggestion] = (),
    config: Optional[EngineConfig] = None,
) -> TreeStats:
    """
    Compute aggregate statistics for a tree.

    Args:
        members: Members of the tree (Member objects or host records)
        links: PARENT/SPOUSE links (Link objects or host records)
        relations: Output of infer_relations
        suggestions: Output of suggest_missing_links
        config: Optional engine configuration

    Returns:
        TreeStats; zeroed for an empty tree
    """
    data = StatsInput(
        snapshot=TreeSnapshot.build(members, links),
        relations=tuple(relations),
        suggestions=tuple(suggestions),
    )
    stats = StatisticsPipeline(config=config).run(data)
    return TreeStats.from_stats(stats)
