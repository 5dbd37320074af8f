"""
Relation kinds and their human-readable labels.

Gendered labels are looked up in a RelationKind x Gender table. The table is
checked for completeness when the module is imported, so a missing case fails
at import rather than producing a silent default.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict

from .member import Gender


class RelationKind(Enum):
    SIBLING = "SIBLING"
    GRANDPARENT = "GRANDPARENT"
    GRANDCHILD = "GRANDCHILD"
    UNCLE_AUNT = "UNCLE_AUNT"
    NEPHEW_NIECE = "NEPHEW_NIECE"
    COUSIN = "COUSIN"


FULL_SIBLING = "full sibling"
HALF_SIBLING = "half sibling"

GENDERED_LABELS: Dict[RelationKind, Dict[Gender, str]] = {
    RelationKind.GRANDPARENT: {
        Gender.MALE: "grandfather",
        Gender.FEMALE: "grandmother",
        Gender.OTHER: "grandparent",
        Gender.UNKNOWN: "grandparent",
    },
    RelationKind.GRANDCHILD: {
        Gender.MALE: "grandson",
        Gender.FEMALE: "granddaughter",
        Gender.OTHER: "grandchild",
        Gender.UNKNOWN: "grandchild",
    },
    RelationKind.UNCLE_AUNT: {
        Gender.MALE: "uncle",
        Gender.FEMALE: "aunt",
        Gender.OTHER: "uncle/aunt",
        Gender.UNKNOWN: "uncle/aunt",
    },
    RelationKind.NEPHEW_NIECE: {
        Gender.MALE: "nephew",
        Gender.FEMALE: "niece",
        Gender.OTHER: "nephew/niece",
        Gender.UNKNOWN: "nephew/niece",
    },
    RelationKind.COUSIN: {
        Gender.MALE: "cousin",
        Gender.FEMALE: "cousin",
        Gender.OTHER: "cousin",
        Gender.UNKNOWN: "cousin",
    },
}

# Sibling labels depend on shared parents, not gender
UNGENDERED_KINDS = frozenset({RelationKind.SIBLING})


def _check_label_table() -> None:
    missing = [
        f"{kind.value}/{gender.value}"
        for kind in RelationKind
        if kind not in UNGENDERED_KINDS
        for gender in Gender
        if gender not in GENDERED_LABELS.get(kind, {})
    ]
    if missing:
        raise ValueError(f"Missing relation labels: {', '.join(missing)}")


_check_label_table()


def gendered_label(kind: RelationKind, gender: Gender) -> str:
    """Label for a gendered relation kind, as seen from a member of the given gender."""
    return GENDERED_LABELS[kind][gender]


def sibling_label(shared_parents: int) -> str:
    """'full sibling' when two or more parents are shared, else 'half sibling'."""
    return FULL_SIBLING if shared_parents >= 2 else HALF_SIBLING
