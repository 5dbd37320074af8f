"""
link.py - tree_intelligence family links.

Provides the Link record (PARENT or SPOUSE edge between two members), the
ProposedLink a suggestion may carry, and two helpers the host application
uses around link management:
    - resolve_links_for: a member's direct links from their own perspective
    - validate_new_link: pre-check before persisting a new link

Module: tree_intelligence.link
"""
from __future__ import annotations

__all__ = ['RelationType', 'Link', 'ProposedLink', 'ResolvedLink', 'InvalidLinkError',
           'coerce_links', 'resolve_links_for', 'validate_new_link']

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional, Union

from .member import Member

logger = logging.getLogger(__name__)


class RelationType(Enum):
    """Primitive edge types. PARENT is directed (parent -> child), SPOUSE is symmetric."""
    PARENT = "PARENT"
    SPOUSE = "SPOUSE"

    @classmethod
    def parse(cls, value: Any) -> RelationType:
        if isinstance(value, RelationType):
            return value
        try:
            return cls(str(value).strip().upper())
        except ValueError:
            raise ValueError(f"Unknown relation type: {value!r}")


class InvalidLinkError(ValueError):
    """Raised when a new link would be invalid against the current snapshot."""


@dataclass(frozen=True)
class Link:
    """
    A stored family link.

    Attributes:
        id (str): Link identifier.
        from_id (str): Parent (PARENT) or one partner (SPOUSE).
        to_id (str): Child (PARENT) or the other partner (SPOUSE).
        relation_type (RelationType): Edge type.
    """
    id: str
    from_id: str
    to_id: str
    relation_type: RelationType

    @property
    def is_parent(self) -> bool:
        return self.relation_type is RelationType.PARENT

    @property
    def is_spouse(self) -> bool:
        return self.relation_type is RelationType.SPOUSE

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Link:
        """
        Create a link from a host record (fromUserId/toUserId/relationType or snake_case).

        Raises:
            ValueError: If an endpoint is missing or the relation type is unknown
        """
        from_id = data.get('fromUserId', data.get('from_id'))
        to_id = data.get('toUserId', data.get('to_id'))
        if from_id is None or to_id is None:
            raise ValueError(f"Link record without endpoints: {data!r}")
        relation_type = RelationType.parse(data.get('relationType', data.get('relation_type')))
        return cls(
            id=str(data.get('id', "")),
            from_id=str(from_id),
            to_id=str(to_id),
            relation_type=relation_type,
        )

    @classmethod
    def coerce(cls, value: Union[Link, Dict[str, Any]]) -> Link:
        if isinstance(value, Link):
            return value
        return cls.from_dict(value)


@dataclass(frozen=True)
class ProposedLink:
    """An edge the host may persist as a new Link if the user accepts it."""
    from_id: str
    to_id: str
    relation_type: RelationType

    def to_dict(self) -> Dict[str, str]:
        return {
            'fromUserId': self.from_id,
            'toUserId': self.to_id,
            'relationType': self.relation_type.value,
        }


@dataclass(frozen=True)
class ResolvedLink:
    """
    A direct link seen from one member's side.

    resolved_type is PARENT when the member is the parent, CHILD when the
    member is the child, and SPOUSE for spouse links.
    """
    link_id: str
    relation_type: RelationType
    resolved_type: str
    related_id: str
    related_member: Optional[Member] = None


def coerce_links(links: Iterable[Union[Link, Dict[str, Any]]]) -> List[Link]:
    """Convert host link records to Link objects, preserving order."""
    return [Link.coerce(link) for link in links]


def resolve_links_for(
    member_id: str,
    links: Iterable[Union[Link, Dict[str, Any]]],
    members: Iterable[Union[Member, Dict[str, Any]]] = (),
) -> List[ResolvedLink]:
    """
    List the direct links of a member, resolved from their perspective.

    Args:
        member_id: Member whose links are wanted
        links: All links of the snapshot
        members: Members of the snapshot, used to attach the related record

    Returns:
        List of ResolvedLink in link order; related_member is None for unknown ids
    """
    member_map = {m.id: m for m in (Member.coerce(m) for m in members)}
    resolved = []
    for link in coerce_links(links):
        if member_id not in (link.from_id, link.to_id):
            continue
        is_from = link.from_id == member_id
        if link.is_parent:
            resolved_type = 'PARENT' if is_from else 'CHILD'
        else:
            resolved_type = 'SPOUSE'
        related_id = link.to_id if is_from else link.from_id
        resolved.append(ResolvedLink(
            link_id=link.id,
            relation_type=link.relation_type,
            resolved_type=resolved_type,
            related_id=related_id,
            related_member=member_map.get(related_id),
        ))
    return resolved


def validate_new_link(
    members: Iterable[Union[Member, Dict[str, Any]]],
    links: Iterable[Union[Link, Dict[str, Any]]],
    from_id: str,
    to_id: str,
    relation_type: Union[RelationType, str],
) -> ProposedLink:
    """
    Check that a new link can be added to the snapshot.

    Args:
        members: Members of the snapshot
        links: Existing links of the snapshot
        from_id: Source member id
        to_id: Target member id
        relation_type: PARENT or SPOUSE

    Returns:
        ProposedLink describing the validated edge

    Raises:
        InvalidLinkError: If a member is unknown, the link is a self-link,
            or an identical link already exists
    """
    relation_type = RelationType.parse(relation_type)
    known_ids = {m.id for m in (Member.coerce(m) for m in members)}
    if from_id not in known_ids:
        raise InvalidLinkError(f"Source member {from_id} not found")
    if to_id not in known_ids:
        raise InvalidLinkError(f"Target member {to_id} not found")
    if from_id == to_id:
        raise InvalidLinkError(f"Member {from_id} cannot be linked to themselves")
    for link in coerce_links(links):
        if link.from_id == from_id and link.to_id == to_id and link.relation_type is relation_type:
            raise InvalidLinkError(
                f"{relation_type.value} link {from_id} -> {to_id} already exists (link {link.id})"
            )
    return ProposedLink(from_id=from_id, to_id=to_id, relation_type=relation_type)
