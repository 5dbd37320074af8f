"""
Data models for statistics module.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple, Union

from tree_intelligence.inference.model import InferredRelation
from tree_intelligence.snapshot import TreeSnapshot
from tree_intelligence.suggestions.model import LinkSuggestion


StatValue = Union[int, float, str, None, List[Any], Dict[str, Any]]


@dataclass
class Stats:
    """
    Container for statistical results collected from a tree.

    Statistics are organized into categories (e.g., 'members', 'generations')
    with named values within each category.
    """
    categories: Dict[str, Dict[str, StatValue]] = field(default_factory=dict)

    def add_value(self, category: str, name: str, value: StatValue) -> None:
        """Add a statistical value to a category."""
        self.categories.setdefault(category, {})[name] = value

    def get_value(self, category: str, name: str, default: Optional[StatValue] = None) -> Optional[StatValue]:
        """Get a statistical value from a category."""
        return self.categories.get(category, {}).get(name, default)

    def get_category(self, category: str) -> Dict[str, StatValue]:
        """Get all values in a category."""
        return self.categories.get(category, {})

    def merge(self, other: Stats) -> None:
        """Merge another Stats object into this one."""
        for category, values in other.categories.items():
            self.categories.setdefault(category, {}).update(values)

    def to_dict(self) -> Dict[str, Dict[str, StatValue]]:
        """Convert to a plain dictionary."""
        return {category: dict(values) for category, values in self.categories.items()}


@dataclass(frozen=True)
class StatsInput:
    """
    Everything the collectors read: the snapshot plus the outputs of the
    inference and suggestion components.
    """
    snapshot: TreeSnapshot
    relations: Tuple[InferredRelation, ...] = ()
    suggestions: Tuple[LinkSuggestion, ...] = ()


@dataclass(frozen=True)
class BranchCount:
    name: str
    count: int


@dataclass(frozen=True)
class GenderDistribution:
    male: int = 0
    female: int = 0
    other: int = 0
    unknown: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {'male': self.male, 'female': self.female, 'other': self.other, 'unknown': self.unknown}


@dataclass(frozen=True)
class TreeStats:
    """
    Aggregate statistics for one tree snapshot.

    countries_represented is always empty: members carry no residence country.
    """
    total_members: int = 0
    real_members: int = 0
    virtual_members: int = 0
    total_links: int = 0
    parent_links: int = 0
    spouse_links: int = 0
    generations: int = 0
    average_family_size: float = 0
    largest_branch: Optional[BranchCount] = None
    gender_distribution: GenderDistribution = field(default_factory=GenderDistribution)
    countries_represented: Tuple[Dict[str, Any], ...] = ()
    orphan_count: int = 0
    inferred_relations_count: int = 0
    suggestions_count: int = 0

    @classmethod
    def from_stats(cls, stats: Stats) -> TreeStats:
        """Build from the categories filled by the built-in collectors; absent values stay zero."""
        branch = stats.get_value('branches', 'largest_branch')
        gender = stats.get_category('gender')
        return cls(
            total_members=stats.get_value('members', 'total', 0),
            real_members=stats.get_value('members', 'real', 0),
            virtual_members=stats.get_value('members', 'virtual', 0),
            total_links=stats.get_value('links', 'total', 0),
            parent_links=stats.get_value('links', 'parent', 0),
            spouse_links=stats.get_value('links', 'spouse', 0),
            generations=stats.get_value('generations', 'count', 0),
            average_family_size=stats.get_value('family', 'average_family_size', 0),
            largest_branch=BranchCount(name=branch['name'], count=branch['count']) if branch else None,
            gender_distribution=GenderDistribution(
                male=gender.get('male', 0),
                female=gender.get('female', 0),
                other=gender.get('other', 0),
                unknown=gender.get('unknown', 0),
            ),
            countries_represented=tuple(stats.get_value('geography', 'countries_represented', [])),
            orphan_count=stats.get_value('orphans', 'count', 0),
            inferred_relations_count=stats.get_value('derived', 'inferred_relations', 0),
            suggestions_count=stats.get_value('derived', 'suggestions', 0),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Render in the host application's camelCase shape."""
        return {
            'totalMembers': self.total_members,
            'realMembers': self.real_members,
            'virtualMembers': self.virtual_members,
            'totalLinks': self.total_links,
            'parentLinks': self.parent_links,
            'spouseLinks': self.spouse_links,
            'generations': self.generations,
            'averageSiblings': self.average_family_size,
            'largestBranch': (
                {'name': self.largest_branch.name, 'count': self.largest_branch.count}
                if self.largest_branch else None
            ),
            'genderDistribution': self.gender_distribution.to_dict(),
            'countriesRepresented': list(self.countries_represented),
            'orphanCount': self.orphan_count,
            'inferredRelationsCount': self.inferred_relations_count,
            'suggestionsCount': self.suggestions_count,
        }
