from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Iterator, Tuple

from tree_intelligence.graph import FamilyGraph
from tree_intelligence.inference.model import RelationSink
from tree_intelligence.labels import RelationKind, gendered_label
from tree_intelligence.snapshot import TreeSnapshot
from .base import InferenceRule, register_rule

logger = logging.getLogger(__name__)


def iter_parent_siblings(graph: FamilyGraph) -> Iterator[Tuple[str, str, str, str]]:
    """
    Walk member -> parent -> grandparent -> other child of that grandparent.

    Yields:
        (member_id, parent_id, grandparent_id, uncle_id) with uncle_id != parent_id
    """
    for member_id in sorted(graph.parents_of):
        for parent_id in sorted(graph.parents(member_id)):
            for grandparent_id in sorted(graph.parents(parent_id)):
                for uncle_id in sorted(graph.children(grandparent_id)):
                    if uncle_id != parent_id:
                        yield member_id, parent_id, grandparent_id, uncle_id


@register_rule
@dataclass
class UncleAuntRule(InferenceRule):
    """
    A parent's sibling (through a shared parent) is an uncle or aunt.

    Emits UNCLE_AUNT from the uncle's side and NEPHEW_NIECE from the
    member's side, each labelled from that side's gender.
    """
    rule_id: str = "uncles_aunts"

    def apply(self, snapshot: TreeSnapshot, sink: RelationSink) -> int:
        added = 0
        for member_id, parent_id, grandparent_id, uncle_id in iter_parent_siblings(snapshot.graph):
            uncle_label = gendered_label(RelationKind.UNCLE_AUNT, snapshot.gender_of(uncle_id))
            if sink.add(uncle_id, member_id, RelationKind.UNCLE_AUNT, uncle_label,
                        [uncle_id, grandparent_id, parent_id, member_id]):
                added += 1

            nephew_label = gendered_label(RelationKind.NEPHEW_NIECE, snapshot.gender_of(member_id))
            if sink.add(member_id, uncle_id, RelationKind.NEPHEW_NIECE, nephew_label,
                        [member_id, parent_id, grandparent_id, uncle_id]):
                added += 1
        return added
