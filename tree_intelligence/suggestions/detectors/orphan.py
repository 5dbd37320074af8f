from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List

from tree_intelligence.snapshot import TreeSnapshot
from tree_intelligence.suggestions.model import LinkSuggestion, SuggestionKind
from .base import SuggestionDetector, register_detector

logger = logging.getLogger(__name__)


@register_detector
@dataclass
class OrphanDetector(SuggestionDetector):
    """Flags members that are not an endpoint of any link."""
    detector_id: str = "orphan"

    def detect(self, snapshot: TreeSnapshot) -> List[LinkSuggestion]:
        suggestions = []
        for member in snapshot.members:
            if snapshot.graph.is_linked(member.id):
                continue
            suggestions.append(LinkSuggestion(
                kind=SuggestionKind.ORPHAN,
                severity="info",
                message=f"{member.display_name} has no family link. Attach them to the tree.",
                involved_ids=(member.id,),
            ))
        logger.debug(f"Found {len(suggestions)} orphan members")
        return suggestions
