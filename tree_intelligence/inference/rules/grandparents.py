from __future__ import annotations

from dataclasses import dataclass
import logging

from tree_intelligence.inference.model import RelationSink
from tree_intelligence.labels import RelationKind, gendered_label
from tree_intelligence.snapshot import TreeSnapshot
from .base import InferenceRule, register_rule

logger = logging.getLogger(__name__)


@register_rule
@dataclass
class GrandparentRule(InferenceRule):
    """
    Every parent -> child -> grandchild chain gives a grandparent and a grandchild relation.

    Each side is labelled from its own recorded gender.
    """
    rule_id: str = "grandparents"

    def apply(self, snapshot: TreeSnapshot, sink: RelationSink) -> int:
        graph = snapshot.graph
        added = 0
        for grandparent_id in sorted(graph.children_of):
            for child_id in sorted(graph.children(grandparent_id)):
                for grandchild_id in sorted(graph.children(child_id)):
                    gp_label = gendered_label(RelationKind.GRANDPARENT, snapshot.gender_of(grandparent_id))
                    if sink.add(grandparent_id, grandchild_id, RelationKind.GRANDPARENT, gp_label,
                                [grandparent_id, child_id, grandchild_id]):
                        added += 1

                    gc_label = gendered_label(RelationKind.GRANDCHILD, snapshot.gender_of(grandchild_id))
                    if sink.add(grandchild_id, grandparent_id, RelationKind.GRANDCHILD, gc_label,
                                [grandchild_id, child_id, grandparent_id]):
                        added += 1
        return added
