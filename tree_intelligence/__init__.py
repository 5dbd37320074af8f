"""tree_intelligence package: relation inference, link suggestions and statistics for family trees."""

from tree_intelligence.member import Gender, Member
from tree_intelligence.link import (
    InvalidLinkError,
    Link,
    ProposedLink,
    RelationType,
    ResolvedLink,
    resolve_links_for,
    validate_new_link,
)
from tree_intelligence.graph import FamilyGraph
from tree_intelligence.snapshot import TreeSnapshot
from tree_intelligence.labels import RelationKind
from tree_intelligence.config import EngineConfig
from tree_intelligence.inference import InferredRelation, RelationView, infer_relations, relations_for
from tree_intelligence.suggestions import LinkSuggestion, SuggestionKind, suggest_missing_links
from tree_intelligence.statistics import TreeStats, compute_tree_stats
from tree_intelligence.tree_intelligence import TreeIntelligence

__all__ = [
    "EngineConfig",
    "FamilyGraph",
    "Gender",
    "InferredRelation",
    "InvalidLinkError",
    "Link",
    "LinkSuggestion",
    "Member",
    "ProposedLink",
    "RelationKind",
    "RelationType",
    "RelationView",
    "ResolvedLink",
    "SuggestionKind",
    "TreeIntelligence",
    "TreeSnapshot",
    "TreeStats",
    "compute_tree_stats",
    "infer_relations",
    "relations_for",
    "resolve_links_for",
    "suggest_missing_links",
    "validate_new_link",
]
