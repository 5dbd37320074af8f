"""
graph.py - read-only family graph index.

FamilyGraph is built from the raw link list on every call and discarded
afterwards. Each component builds its own instance; none of them share or
mutate one.

Module: tree_intelligence.graph
"""
from __future__ import annotations

__all__ = ['FamilyGraph']

import logging
from collections import defaultdict
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, FrozenSet, Iterable, Mapping, Optional, Set, Union

from .link import Link, coerce_links

logger = logging.getLogger(__name__)

IdSet = FrozenSet[str]
_EMPTY: IdSet = frozenset()


@dataclass(frozen=True)
class FamilyGraph:
    """
    Adjacency index over PARENT and SPOUSE links.

    Attributes:
        children_of: Parent id -> ids of their children.
        parents_of: Child id -> ids of their parents.
        spouse_of: Member id -> spouse id (last SPOUSE link wins per endpoint).
        linked_ids: Every id that is an endpoint of any link.
        direct_pairs: Unordered id pairs joined by any link, either direction.
    """
    children_of: Mapping[str, IdSet]
    parents_of: Mapping[str, IdSet]
    spouse_of: Mapping[str, str]
    linked_ids: IdSet
    direct_pairs: FrozenSet[FrozenSet[str]]

    @classmethod
    def build(cls, links: Iterable[Union[Link, Dict[str, Any]]]) -> FamilyGraph:
        """
        Build the index from a link list.

        Args:
            links: Link objects or host link records, in stored order

        Returns:
            FamilyGraph
        """
        children: Dict[str, Set[str]] = defaultdict(set)
        parents: Dict[str, Set[str]] = defaultdict(set)
        spouses: Dict[str, str] = {}
        linked: Set[str] = set()
        pairs: Set[FrozenSet[str]] = set()

        for link in coerce_links(links):
            linked.add(link.from_id)
            linked.add(link.to_id)
            pairs.add(frozenset((link.from_id, link.to_id)))
            if link.is_parent:
                children[link.from_id].add(link.to_id)
                parents[link.to_id].add(link.from_id)
            else:
                for member_id, spouse_id in ((link.from_id, link.to_id), (link.to_id, link.from_id)):
                    previous = spouses.get(member_id)
                    if previous is not None and previous != spouse_id:
                        logger.debug(f"Spouse of {member_id} overwritten: {previous} -> {spouse_id}")
                    spouses[member_id] = spouse_id

        return cls(
            children_of=MappingProxyType({k: frozenset(v) for k, v in children.items()}),
            parents_of=MappingProxyType({k: frozenset(v) for k, v in parents.items()}),
            spouse_of=MappingProxyType(spouses),
            linked_ids=frozenset(linked),
            direct_pairs=frozenset(pairs),
        )

    def children(self, member_id: str) -> IdSet:
        return self.children_of.get(member_id, _EMPTY)

    def parents(self, member_id: str) -> IdSet:
        return self.parents_of.get(member_id, _EMPTY)

    def spouse(self, member_id: str) -> Optional[str]:
        return self.spouse_of.get(member_id)

    def has_spouse(self, member_id: str) -> bool:
        return member_id in self.spouse_of

    def is_linked(self, member_id: str) -> bool:
        return member_id in self.linked_ids

    def are_directly_linked(self, a: str, b: str) -> bool:
        return frozenset((a, b)) in self.direct_pairs
