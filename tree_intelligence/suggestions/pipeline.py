from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from tree_intelligence.app_hooks import AppHooks, report_step
from tree_intelligence.config import EngineConfig, resolve_config
from tree_intelligence.link import Link
from tree_intelligence.member import Member
from tree_intelligence.snapshot import TreeSnapshot

from .defaults import get_default_detectors
from .detectors import SuggestionDetector
from .model import LinkSuggestion

logger = logging.getLogger(__name__)


@dataclass
class SuggestionResult:
    suggestions: List[LinkSuggestion] = field(default_factory=list)
    detector_counts: Dict[str, int] = field(default_factory=dict)  # detector_id -> suggestions found


class SuggestionPipeline:
    """Runs the suggestion detectors over one snapshot, concatenating their output in order."""

    def __init__(self, config: Optional[EngineConfig] = None, detectors: Optional[Sequence[SuggestionDetector]] = None,
                 app_hooks: Optional[AppHooks] = None) -> None:
        self.config = resolve_config(config)
        self.app_hooks = app_hooks
        if detectors is None:
            detectors = get_default_detectors(self.config, app_hooks=app_hooks)
        self.detectors = list(detectors)

        for detector in self.detectors:
            detector.app_hooks = app_hooks

    def run(
        self,
        members: Iterable[Union[Member, Dict[str, Any]]],
        links: Iterable[Union[Link, Dict[str, Any]]],
    ) -> SuggestionResult:
        snapshot = TreeSnapshot.build(members, links)
        suggestions: List[LinkSuggestion] = []
        detector_counts: Dict[str, int] = {}

        enabled = [d for d in self.detectors if d.enabled and self.config.detector_enabled(d.detector_id)]
        report_step(self.app_hooks, logger, info="Looking for missing links", target=len(enabled), reset_counter=True)

        for detector_num, detector in enumerate(enabled, start=1):
            logger.debug(f"Running detector ({detector_num}/{len(enabled)}): {detector.detector_id}")
            found = detector.detect(snapshot)
            detector_counts[detector.detector_id] = len(found)
            suggestions.extend(found)
            report_step(self.app_hooks, logger, plus_step=1)

        logger.info(f"Found {len(suggestions)} link suggestions for {len(snapshot.members)} members")
        return SuggestionResult(suggestions=suggestions, detector_counts=detector_counts)


def suggest_missing_links(
    members: Iterable[Union[Member, Dict[str, Any]]],
    links: Iterable[Union[Link, Dict[str, Any]]],
    config: Optional[EngineConfig] = None,
) -> List[LinkSuggestion]:
    """
    Detect orphans, missing spouse links, unlinked same-surname members and age inconsistencies.

    Args:
        members: Members of the tree (Member objects or host records)
        links: PARENT/SPOUSE links (Link objects or host records)
        config: Optional engine configuration

    Returns:
        List of LinkSuggestion
    """
    return SuggestionPipeline(config=config).run(members, links).suggestions
