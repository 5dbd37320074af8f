"""
Tests for individual suggestion detectors.
"""
from __future__ import annotations

from tree_intelligence.link import RelationType
from tree_intelligence.snapshot import TreeSnapshot
from tree_intelligence.suggestions.detectors import (
    AgeInconsistencyDetector,
    OrphanDetector,
    SameNameUnlinkedDetector,
    SpouseMissingDetector,
    get_detector_registry,
)
from tree_intelligence.suggestions.model import SuggestionKind


def test_builtin_detectors_registered_in_order():
    assert list(get_detector_registry()) == ["orphan", "spouse_missing", "same_name_unlinked", "age_inconsistency"]


class TestOrphanDetector:
    """Tests for OrphanDetector."""

    def test_unlinked_member_flagged(self, three_generations):
        found = OrphanDetector().detect(TreeSnapshot.build(*three_generations))

        assert len(found) == 1
        assert found[0].kind is SuggestionKind.ORPHAN
        assert found[0].severity == "info"
        assert found[0].involved_ids == ("lone",)
        assert found[0].message == "Lone has no family link. Attach them to the tree."

    def test_spouse_link_is_enough(self, make_member, make_link):
        snapshot = TreeSnapshot.build([make_member("a"), make_member("b")], [make_link.spouse("a", "b")])
        assert OrphanDetector().detect(snapshot) == []


class TestSpouseMissingDetector:
    """Tests for SpouseMissingDetector."""

    def test_one_proposal_per_couple(self, unmarried_coparents):
        found = SpouseMissingDetector().detect(TreeSnapshot.build(*unmarried_coparents))

        assert [s.involved_ids for s in found] == [("alice", "bob"), ("carol", "diane")]
        for suggestion in found:
            assert suggestion.severity == "warning"
            assert suggestion.proposed_link.relation_type is RelationType.SPOUSE
            assert "share children but are not linked as spouses" in suggestion.message
        assert (found[1].proposed_link.from_id, found[1].proposed_link.to_id) == ("carol", "diane")

    def test_two_shared_children_still_one_proposal(self, two_parent_family):
        found = SpouseMissingDetector().detect(TreeSnapshot.build(*two_parent_family))
        assert len(found) == 1
        assert set(found[0].involved_ids) == {"alice", "bob"}

    def test_married_parent_not_proposed(self, make_member, make_link):
        members = [make_member(m) for m in ("a", "b", "c", "kid")]
        links = [make_link.parent("a", "kid"), make_link.parent("b", "kid"), make_link.spouse("a", "c")]
        assert SpouseMissingDetector().detect(TreeSnapshot.build(members, links)) == []

    def test_linked_couple_not_proposed(self, three_generations):
        assert SpouseMissingDetector().detect(TreeSnapshot.build(*three_generations)) == []

    def test_unknown_member_skipped(self, make_member, make_link):
        members = [make_member("a"), make_member("kid")]
        links = [make_link.parent("a", "kid"), make_link.parent("ghost", "kid")]
        assert SpouseMissingDetector().detect(TreeSnapshot.build(members, links)) == []


class TestSameNameUnlinkedDetector:
    """Tests for SameNameUnlinkedDetector."""

    def test_pairs_listed_individually(self, three_generations):
        found = SameNameUnlinkedDetector().detect(TreeSnapshot.build(*three_generations))

        pairs = {frozenset(s.involved_ids) for s in found}
        assert pairs == {
            frozenset(("paul", "mary")),
            frozenset(("george", "zoe")),
            frozenset(("grace", "zoe")),
            frozenset(("mary", "zoe")),
        }
        assert all(s.severity == "info" for s in found)
        assert 'share the surname "Durand"' in found[0].message

    def test_surname_match_ignores_case_and_spaces(self, make_member):
        members = [make_member("a", last_name="Nounga"), make_member("b", last_name=" nounga ")]
        found = SameNameUnlinkedDetector().detect(TreeSnapshot.build(members, []))
        assert len(found) == 1

    def test_large_group_collapses(self, make_member):
        members = [make_member(f"n{i}", last_name="Nounga") for i in range(10)]
        found = SameNameUnlinkedDetector().detect(TreeSnapshot.build(members, []))

        assert len(found) == 1
        assert len(found[0].involved_ids) == 10
        assert found[0].message == '10 members share the surname "Nounga" and 45 pairs of them are not directly linked.'

    def test_pair_limit_is_configurable(self, make_member):
        members = [make_member(f"n{i}", last_name="Nounga") for i in range(3)]
        snapshot = TreeSnapshot.build(members, [])
        assert len(SameNameUnlinkedDetector(max_pairs=3).detect(snapshot)) == 3
        assert len(SameNameUnlinkedDetector(max_pairs=2).detect(snapshot)) == 1

    def test_members_without_surname_ignored(self, make_member):
        members = [make_member("a"), make_member("b"), make_member("c", last_name="  ")]
        assert SameNameUnlinkedDetector().detect(TreeSnapshot.build(members, [])) == []


class TestAgeInconsistencyDetector:
    """Tests for AgeInconsistencyDetector."""

    def _detect(self, make_member, make_link, parent_birth, child_birth, **kwargs):
        members = [make_member("parent", birth_date=parent_birth), make_member("child", birth_date=child_birth)]
        snapshot = TreeSnapshot.build(members, [make_link.parent("parent", "child")])
        return AgeInconsistencyDetector(**kwargs).detect(snapshot)

    def test_small_gap_is_warning(self, make_member, make_link):
        found = self._detect(make_member, make_link, "2000-01-01", "2008-06-01")

        assert len(found) == 1
        assert found[0].severity == "warning"
        assert "Only 8 years apart" in found[0].message
        assert found[0].involved_ids == ("parent", "child")

    def test_child_older_is_error(self, make_member, make_link):
        found = self._detect(make_member, make_link, "2000-01-01", "1995-01-01")

        assert len(found) == 1
        assert found[0].severity == "error"
        assert "older than or the same age as" in found[0].message

    def test_same_birth_date_is_error(self, make_member, make_link):
        found = self._detect(make_member, make_link, "1990-01-01", "1990-01-01")
        assert found[0].severity == "error"

    def test_plausible_gap_not_flagged(self, make_member, make_link):
        assert self._detect(make_member, make_link, "1960-01-01", "1990-01-01") == []

    def test_missing_date_not_flagged(self, make_member, make_link):
        assert self._detect(make_member, make_link, None, "1990-01-01") == []
        assert self._detect(make_member, make_link, "1960-01-01", "not a date") == []

    def test_threshold_is_configurable(self, make_member, make_link):
        assert self._detect(make_member, make_link, "2000-01-01", "2008-06-01", min_gap_years=8) == []


def test_orphans_are_exactly_unlinked_members(three_generations):
    members, links = three_generations
    found = OrphanDetector().detect(TreeSnapshot.build(members, links))

    endpoints = {link.from_id for link in links} | {link.to_id for link in links}
    assert {s.involved_ids[0] for s in found} == {m.id for m in members if m.id not in endpoints}
