from __future__ import annotations

from dataclasses import dataclass
import logging

from tree_intelligence.inference.model import RelationSink
from tree_intelligence.labels import RelationKind, gendered_label
from tree_intelligence.snapshot import TreeSnapshot
from .base import InferenceRule, register_rule
from .uncles_aunts import iter_parent_siblings

logger = logging.getLogger(__name__)


@register_rule
@dataclass
class CousinRule(InferenceRule):
    """Children of an uncle or aunt are cousins."""
    rule_id: str = "cousins"

    def apply(self, snapshot: TreeSnapshot, sink: RelationSink) -> int:
        graph = snapshot.graph
        added = 0
        for member_id, parent_id, grandparent_id, uncle_id in iter_parent_siblings(graph):
            for cousin_id in sorted(graph.children(uncle_id)):
                label = gendered_label(RelationKind.COUSIN, snapshot.gender_of(cousin_id))
                if sink.add(member_id, cousin_id, RelationKind.COUSIN, label,
                            [member_id, parent_id, grandparent_id, uncle_id, cousin_id]):
                    added += 1
        return added
