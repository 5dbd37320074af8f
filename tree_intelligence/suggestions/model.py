from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Literal, Optional, Tuple

from tree_intelligence.link import ProposedLink

Severity = Literal["info", "warning", "error"]


class SuggestionKind(Enum):
    ORPHAN = "ORPHAN"
    SPOUSE_MISSING = "SPOUSE_MISSING"
    SAME_NAME_UNLINKED = "SAME_NAME_UNLINKED"
    AGE_INCONSISTENCY = "AGE_INCONSISTENCY"


@dataclass(frozen=True)
class LinkSuggestion:
    """
    A structural anomaly found in the tree.

    Attributes:
        kind (SuggestionKind): What was detected.
        severity (Severity): 'info', 'warning' or 'error'.
        message (str): Human-readable explanation.
        involved_ids (Tuple[str, ...]): Members concerned.
        proposed_link (Optional[ProposedLink]): Edge the host may create if the user accepts.
    """
    kind: SuggestionKind
    severity: Severity
    message: str
    involved_ids: Tuple[str, ...] = ()
    proposed_link: Optional[ProposedLink] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            'type': self.kind.value,
            'severity': self.severity,
            'message': self.message,
            'involvedIds': list(self.involved_ids),
        }
        if self.proposed_link is not None:
            data['suggestedAction'] = self.proposed_link.to_dict()
        return data
