from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
import logging
from typing import Dict, List, Tuple

from tree_intelligence.member import Member
from tree_intelligence.snapshot import TreeSnapshot
from tree_intelligence.suggestions.model import LinkSuggestion, SuggestionKind
from .base import SuggestionDetector, register_detector

logger = logging.getLogger(__name__)


@register_detector
@dataclass
class SameNameUnlinkedDetector(SuggestionDetector):
    """
    Flags members sharing a surname with no direct link between them.

    Members are grouped by lower-cased, trimmed last name. A group yielding
    at most max_pairs unlinked pairs gets one suggestion per pair; a larger
    group gets a single summary suggestion so common surnames do not flood
    the output.
    """
    detector_id: str = "same_name_unlinked"
    max_pairs: int = 5

    def detect(self, snapshot: TreeSnapshot) -> List[LinkSuggestion]:
        groups: Dict[str, List[Member]] = {}
        for member in snapshot.members:
            key = member.normalized_last_name
            if key:
                groups.setdefault(key, []).append(member)

        suggestions = []
        for key, group in groups.items():
            if len(group) < 2:
                continue

            unlinked: List[Tuple[Member, Member]] = [
                (a, b) for a, b in combinations(group, 2)
                if not snapshot.graph.are_directly_linked(a.id, b.id)
            ]
            if not unlinked:
                continue

            if len(unlinked) <= self.max_pairs:
                for a, b in unlinked:
                    suggestions.append(LinkSuggestion(
                        kind=SuggestionKind.SAME_NAME_UNLINKED,
                        severity="info",
                        message=(f'{a.display_name} and {b.display_name} share the surname '
                                 f'"{a.last_name.strip()}" but are not directly linked.'),
                        involved_ids=(a.id, b.id),
                    ))
            else:
                logger.debug(f"Surname '{key}': {len(unlinked)} unlinked pairs, collapsing")
                suggestions.append(LinkSuggestion(
                    kind=SuggestionKind.SAME_NAME_UNLINKED,
                    severity="info",
                    message=(f'{len(group)} members share the surname "{group[0].last_name.strip()}" '
                             f'and {len(unlinked)} pairs of them are not directly linked.'),
                    involved_ids=tuple(m.id for m in group),
                ))
        return suggestions
