from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import FrozenSet, List, Set

from tree_intelligence.link import ProposedLink, RelationType
from tree_intelligence.snapshot import TreeSnapshot
from tree_intelligence.suggestions.model import LinkSuggestion, SuggestionKind
from .base import SuggestionDetector, register_detector

logger = logging.getLogger(__name__)


@register_detector
@dataclass
class SpouseMissingDetector(SuggestionDetector):
    """
    Proposes a SPOUSE link between two co-parents with no recorded spouse.

    For a parent p with no spouse, any other parent p2 of one of p's
    children is a candidate if p2 has no spouse either. Parents that already
    have a spouse are left alone so the proposal never contradicts existing
    data. Each pair is proposed once; pairs involving an unknown member id
    are skipped.
    """
    detector_id: str = "spouse_missing"

    def detect(self, snapshot: TreeSnapshot) -> List[LinkSuggestion]:
        graph = snapshot.graph
        suggestions = []
        proposed: Set[FrozenSet[str]] = set()

        for parent_id in sorted(graph.children_of):
            if graph.has_spouse(parent_id):
                continue
            for child_id in sorted(graph.children(parent_id)):
                for other_id in sorted(graph.parents(child_id)):
                    if other_id == parent_id or graph.has_spouse(other_id):
                        continue
                    pair = frozenset((parent_id, other_id))
                    if pair in proposed:
                        continue

                    parent = snapshot.member(parent_id)
                    other = snapshot.member(other_id)
                    if parent is None or other is None:
                        continue

                    proposed.add(pair)
                    suggestions.append(LinkSuggestion(
                        kind=SuggestionKind.SPOUSE_MISSING,
                        severity="warning",
                        message=(f"{parent.display_name} and {other.display_name} share children "
                                 f"but are not linked as spouses."),
                        involved_ids=(parent_id, other_id),
                        proposed_link=ProposedLink(from_id=parent_id, to_id=other_id,
                                                   relation_type=RelationType.SPOUSE),
                    ))
        logger.debug(f"Found {len(suggestions)} missing spouse links")
        return suggestions
