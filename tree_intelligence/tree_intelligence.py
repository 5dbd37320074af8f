from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union
import logging

from .app_hooks import AppHooks
from .config import EngineConfig
from .inference import InferencePipeline, InferredRelation, RelationView, relations_for
from .link import Link
from .member import Member
from .snapshot import TreeSnapshot
from .statistics import Stats, StatsInput, StatisticsPipeline, TreeStats
from .suggestions import LinkSuggestion, SuggestionPipeline

logger = logging.getLogger(__name__)


class TreeIntelligence:
    """
    High-level interface running inference, suggestions and statistics on one snapshot.

    Each component builds its own graph index from the same members and
    links; statistics then fold in the relations and suggestions.

    Example:
        ti = TreeIntelligence(members=members, links=links)
        ti.relations        # List[InferredRelation]
        ti.suggestions      # List[LinkSuggestion]
        ti.stats            # TreeStats
        ti.relations_for("carol")
    """

    def __init__(
        self,
        members: Optional[Iterable[Union[Member, Dict[str, Any]]]] = None,
        links: Optional[Iterable[Union[Link, Dict[str, Any]]]] = None,
        config_dict: Optional[Dict[str, Any]] = None,
        config_file: Optional[Path] = None,
        app_hooks: Optional[AppHooks] = None,
    ) -> None:
        """
        Initialize and, when members are given, analyze right away.

        Args:
            members: Members of the tree (Member objects or host records)
            links: PARENT/SPOUSE links (Link objects or host records)
            config_dict: Dictionary of configuration overrides
            config_file: Path to YAML config file
            app_hooks: Optional application hooks for progress reporting
        """
        self.app_hooks = app_hooks

        if config_dict:
            self.config = EngineConfig.from_dict(config_dict)
        elif config_file:
            self.config = EngineConfig.from_yaml(config_file)
        else:
            self.config = EngineConfig.default()

        self.relations: List[InferredRelation] = []
        self.suggestions: List[LinkSuggestion] = []
        self.raw_stats: Optional[Stats] = None
        self.stats: Optional[TreeStats] = None

        if members is not None:
            self.analyze(members, links or [])

    def analyze(
        self,
        members: Iterable[Union[Member, Dict[str, Any]]],
        links: Iterable[Union[Link, Dict[str, Any]]],
    ) -> TreeStats:
        """
        Run all three components on a snapshot.

        Host records are converted once so every component sees the same data.

        Returns:
            TreeStats for the snapshot
        """
        member_list = [Member.coerce(m) for m in members]
        link_list = [Link.coerce(link) for link in links]
        logger.info(f"Analyzing tree of {len(member_list)} members and {len(link_list)} links")

        self.relations = InferencePipeline(config=self.config, app_hooks=self.app_hooks).run(member_list, link_list).relations
        self.suggestions = SuggestionPipeline(config=self.config, app_hooks=self.app_hooks).run(member_list, link_list).suggestions

        data = StatsInput(
            snapshot=TreeSnapshot.build(member_list, link_list),
            relations=tuple(self.relations),
            suggestions=tuple(self.suggestions),
        )
        self.raw_stats = StatisticsPipeline(config=self.config, app_hooks=self.app_hooks).run(data)
        self.stats = TreeStats.from_stats(self.raw_stats)
        return self.stats

    def relations_for(self, member_id: str) -> List[RelationView]:
        """Inferred relations of one member, from their side."""
        return relations_for(member_id, self.relations)

    def to_dict(self) -> Dict[str, Any]:
        """
        Export all results in the host application's shape.

        Returns:
            Dictionary with 'relations', 'suggestions' and 'stats'
        """
        return {
            'relations': [r.to_dict() for r in self.relations],
            'suggestions': [s.to_dict() for s in self.suggestions],
            'stats': self.stats.to_dict() if self.stats else None,
        }
