from __future__ import annotations

from dataclasses import dataclass
from itertools import combinations
import logging

from tree_intelligence.inference.model import RelationSink
from tree_intelligence.labels import RelationKind, sibling_label
from tree_intelligence.snapshot import TreeSnapshot
from .base import InferenceRule, register_rule

logger = logging.getLogger(__name__)


@register_rule
@dataclass
class SiblingRule(InferenceRule):
    """
    Children sharing at least one parent are siblings.

    Two shared parents make a full sibling, one makes a half sibling. The
    path goes through the parent that revealed the pair.
    """
    rule_id: str = "siblings"

    def apply(self, snapshot: TreeSnapshot, sink: RelationSink) -> int:
        graph = snapshot.graph
        added = 0
        for parent_id in sorted(graph.children_of):
            children = sorted(graph.children(parent_id))
            if len(children) < 2:
                continue
            for a, b in combinations(children, 2):
                shared = len(graph.parents(a) & graph.parents(b))
                if sink.add(a, b, RelationKind.SIBLING, sibling_label(shared), [a, parent_id, b]):
                    added += 1
        return added
