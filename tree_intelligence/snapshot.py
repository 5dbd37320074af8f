"""
snapshot.py - one consistent view of members and links for a single call.

Module: tree_intelligence.snapshot
"""
from __future__ import annotations

__all__ = ['TreeSnapshot']

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Iterable, Mapping, Optional, Tuple, Union

from .graph import FamilyGraph
from .link import Link, coerce_links
from .member import Gender, Member

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TreeSnapshot:
    """
    Members, links and the graph index built from them.

    Built fresh by each component on every call; nothing in it is mutated
    after construction.
    """
    members: Tuple[Member, ...]
    links: Tuple[Link, ...]
    graph: FamilyGraph
    member_map: Mapping[str, Member]

    @classmethod
    def build(
        cls,
        members: Iterable[Union[Member, Dict[str, Any]]],
        links: Iterable[Union[Link, Dict[str, Any]]],
    ) -> TreeSnapshot:
        member_list = tuple(Member.coerce(m) for m in members)
        link_list = tuple(coerce_links(links))
        return cls(
            members=member_list,
            links=link_list,
            graph=FamilyGraph.build(link_list),
            member_map=MappingProxyType({m.id: m for m in member_list}),
        )

    def member(self, member_id: str) -> Optional[Member]:
        member = self.member_map.get(member_id)
        if member is None:
            logger.debug(f"No member record for id {member_id}")
        return member

    def gender_of(self, member_id: str) -> Gender:
        """Recorded gender, UNKNOWN for unknown ids."""
        member = self.member(member_id)
        return member.gender if member else Gender.UNKNOWN
