"""
Shared pytest fixtures: member/link factories and small example families.
"""
from __future__ import annotations

from itertools import count

import pytest

from tree_intelligence.date_utils import parse_date
from tree_intelligence.link import Link, RelationType
from tree_intelligence.member import Gender, Member


@pytest.fixture
def make_member():
    """Create a Member with sensible defaults."""
    def _create_member(member_id: str, first_name: str = None, last_name: str = None,
                       gender: str = None, birth_date: str = None, family_branch: str = None,
                       is_virtual: bool = False) -> Member:
        return Member(
            id=member_id,
            first_name=first_name if first_name is not None else member_id.capitalize(),
            last_name=last_name,
            email=f"{member_id}@example.org",
            gender=Gender.parse(gender),
            is_virtual=is_virtual,
            birth_date=parse_date(birth_date),
            family_branch=family_branch,
        )

    return _create_member


@pytest.fixture
def make_link():
    """Create PARENT or SPOUSE links with generated ids."""
    ids = count(1)

    class _Links:
        @staticmethod
        def parent(parent_id: str, child_id: str) -> Link:
            return Link(id=f"L{next(ids)}", from_id=parent_id, to_id=child_id, relation_type=RelationType.PARENT)

        @staticmethod
        def spouse(a: str, b: str) -> Link:
            return Link(id=f"L{next(ids)}", from_id=a, to_id=b, relation_type=RelationType.SPOUSE)

    return _Links()


@pytest.fixture
def two_parent_family(make_member, make_link):
    """Alice and Bob (roots) both parent Carol and Dave. No spouse link."""
    members = [
        make_member("alice", gender="FEMALE"),
        make_member("bob", gender="MALE"),
        make_member("carol", gender="FEMALE"),
        make_member("dave", gender="MALE"),
    ]
    links = [
        make_link.parent("alice", "carol"),
        make_link.parent("alice", "dave"),
        make_link.parent("bob", "carol"),
        make_link.parent("bob", "dave"),
    ]
    return members, links


@pytest.fixture
def unmarried_coparents(make_member, make_link):
    """Alice+Bob parent Carol; Carol and Diane parent Eric. No spouse links."""
    members = [
        make_member("alice", gender="FEMALE"),
        make_member("bob", gender="MALE"),
        make_member("carol", gender="FEMALE"),
        make_member("diane", gender="FEMALE"),
        make_member("eric", gender="MALE"),
    ]
    links = [
        make_link.parent("alice", "carol"),
        make_link.parent("bob", "carol"),
        make_link.parent("carol", "eric"),
        make_link.parent("diane", "eric"),
    ]
    return members, links


@pytest.fixture
def three_generations(make_member, make_link):
    """
    George+Grace parent Paul and Mary.
    Paul+Pam parent Zoe; Mary+Mark parent Leo. All couples are linked as spouses.
    Lone has no link.
    """
    members = [
        make_member("george", gender="MALE", last_name="Durand", family_branch="Durand"),
        make_member("grace", gender="FEMALE", last_name="Durand", family_branch="Durand"),
        make_member("paul", gender="MALE", last_name="Durand", family_branch="Durand"),
        make_member("mary", gender="FEMALE", last_name="Durand", family_branch="Durand"),
        make_member("pam", gender="FEMALE", last_name="Okoro", family_branch="Okoro"),
        make_member("mark", gender="MALE", last_name="Bell"),
        make_member("zoe", gender="FEMALE", last_name="Durand"),
        make_member("leo", gender="MALE", last_name="Bell"),
        make_member("lone", gender="OTHER", is_virtual=True),
    ]
    links = [
        make_link.parent("george", "paul"),
        make_link.parent("grace", "paul"),
        make_link.parent("george", "mary"),
        make_link.parent("grace", "mary"),
        make_link.parent("paul", "zoe"),
        make_link.parent("pam", "zoe"),
        make_link.parent("mary", "leo"),
        make_link.parent("mark", "leo"),
        make_link.spouse("george", "grace"),
        make_link.spouse("paul", "pam"),
        make_link.spouse("mary", "mark"),
    ]
    return members, links
