from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, List, Sequence, Set, Tuple

from tree_intelligence.labels import RelationKind


@dataclass(frozen=True)
class InferredRelation:
    """
    A kinship relation derived from PARENT/SPOUSE links.

    Attributes:
        from_id (str): Member the label describes.
        to_id (str): Member the relation points to.
        relation (RelationKind): Kind of relation.
        label (str): Human-readable, gender-aware label for from_id.
        path (Tuple[str, ...]): Member ids proving the relation, in order.
    """
    from_id: str
    to_id: str
    relation: RelationKind
    label: str
    path: Tuple[str, ...] = ()

    @property
    def key(self) -> Tuple[FrozenSet[str], RelationKind]:
        """Canonical dedup key: unordered pair plus kind."""
        return frozenset((self.from_id, self.to_id)), self.relation

    def to_dict(self) -> Dict[str, Any]:
        return {
            'fromId': self.from_id,
            'toId': self.to_id,
            'relation': self.relation.value,
            'label': self.label,
            'path': list(self.path),
        }


@dataclass(frozen=True)
class RelationView:
    """An inferred relation seen from one member: kind, label and the other member."""
    relation: RelationKind
    label: str
    member_id: str


@dataclass
class RelationSink:
    """
    Collects inferred relations for one call.

    Rejects self-relations and keeps only the first relation seen for each
    unordered pair and kind.
    """
    relations: List[InferredRelation] = field(default_factory=list)
    _seen: Set[Tuple[FrozenSet[str], RelationKind]] = field(default_factory=set)

    def add(self, from_id: str, to_id: str, relation: RelationKind, label: str, path: Sequence[str]) -> bool:
        """
        Add a relation if it is new.

        Returns:
            bool: True if the relation was added
        """
        if from_id == to_id:
            return False
        candidate = InferredRelation(from_id=from_id, to_id=to_id, relation=relation, label=label, path=tuple(path))
        if candidate.key in self._seen:
            return False
        self._seen.add(candidate.key)
        self.relations.append(candidate)
        return True

    def __len__(self) -> int:
        return len(self.relations)
