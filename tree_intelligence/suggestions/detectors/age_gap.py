from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import List

from tree_intelligence.date_utils import DAYS_PER_YEAR, round_half_up, years_between
from tree_intelligence.snapshot import TreeSnapshot
from tree_intelligence.suggestions.model import LinkSuggestion, SuggestionKind
from .base import SuggestionDetector, register_detector

logger = logging.getLogger(__name__)


@register_detector
@dataclass
class AgeInconsistencyDetector(SuggestionDetector):
    """
    Check PARENT links for implausible birth date gaps.

    When both parent and child have a birth date and the child is born less
    than min_gap_years after the parent:
    - gap <= 0: error, the child is not younger than the parent
    - otherwise: warning, reporting the gap rounded to whole years
    """
    detector_id: str = "age_inconsistency"
    min_gap_years: float = 12
    days_per_year: float = DAYS_PER_YEAR

    def detect(self, snapshot: TreeSnapshot) -> List[LinkSuggestion]:
        graph = snapshot.graph
        suggestions = []
        for parent_id in sorted(graph.children_of):
            parent = snapshot.member(parent_id)
            if parent is None or parent.birth_date is None:
                continue

            for child_id in sorted(graph.children(parent_id)):
                child = snapshot.member(child_id)
                if child is None or child.birth_date is None:
                    continue

                gap = years_between(parent.birth_date, child.birth_date, self.days_per_year)
                if gap >= self.min_gap_years:
                    continue

                if gap <= 0:
                    severity = "error"
                    message = (f"{child.display_name} is older than or the same age as "
                               f"their parent {parent.display_name}.")
                else:
                    severity = "warning"
                    message = (f"Only {round_half_up(gap)} years apart between parent "
                               f"{parent.display_name} and child {child.display_name}.")
                suggestions.append(LinkSuggestion(
                    kind=SuggestionKind.AGE_INCONSISTENCY,
                    severity=severity,
                    message=message,
                    involved_ids=(parent_id, child_id),
                ))
        logger.debug(f"Found {len(suggestions)} parent/child age inconsistencies")
        return suggestions
