"""
Tests for the inference pipeline and its public helpers.
"""
from __future__ import annotations

from collections import Counter

from tree_intelligence.config import EngineConfig
from tree_intelligence.inference import InferencePipeline, infer_relations, relations_for
from tree_intelligence.labels import RelationKind


class RecordingHooks:
    def __init__(self):
        self.calls = []

    def report_step(self, info="", target=None, reset_counter=False, plus_step=0):
        self.calls.append((info, target, reset_counter, plus_step))


class TestInferRelations:
    """Tests for infer_relations."""

    def test_single_full_sibling_pair(self, two_parent_family):
        relations = infer_relations(*two_parent_family)

        assert len(relations) == 1
        assert relations[0].relation is RelationKind.SIBLING
        assert relations[0].label == "full sibling"
        assert {relations[0].from_id, relations[0].to_id} == {"carol", "dave"}

    def test_three_generations(self, three_generations):
        relations = infer_relations(*three_generations)

        counts = Counter(r.relation for r in relations)
        assert counts == {
            RelationKind.SIBLING: 1,
            RelationKind.GRANDPARENT: 4,
            RelationKind.GRANDCHILD: 4,
            RelationKind.UNCLE_AUNT: 2,
            RelationKind.NEPHEW_NIECE: 2,
            RelationKind.COUSIN: 1,
        }

    def test_grandparents_without_spouse_links(self, unmarried_coparents):
        relations = infer_relations(*unmarried_coparents)
        grand = [r for r in relations if r.relation in (RelationKind.GRANDPARENT, RelationKind.GRANDCHILD)]
        assert len(grand) == 4

    def test_no_self_relations_and_no_duplicates(self, three_generations):
        relations = infer_relations(*three_generations)

        assert all(r.from_id != r.to_id for r in relations)
        keys = [r.key for r in relations]
        assert len(keys) == len(set(keys))

    def test_deterministic(self, three_generations):
        members, links = three_generations
        first = infer_relations(members, links)
        second = infer_relations(list(reversed(members)), list(reversed(links)))
        assert {r.key: r.label for r in first} == {r.key: r.label for r in second}

    def test_inputs_not_mutated(self, three_generations):
        members, links = three_generations
        members_before, links_before = list(members), list(links)
        infer_relations(members, links)
        assert members == members_before
        assert links == links_before

    def test_empty_tree(self):
        assert infer_relations([], []) == []

    def test_host_records(self):
        members = [{"id": i, "firstName": i, "gender": "FEMALE"} for i in ("a", "b", "c")]
        links = [
            {"id": "l1", "fromUserId": "a", "toUserId": "b", "relationType": "PARENT"},
            {"id": "l2", "fromUserId": "b", "toUserId": "c", "relationType": "PARENT"},
        ]
        labels = {r.label for r in infer_relations(members, links)}
        assert labels == {"grandmother", "granddaughter"}

    def test_to_dict(self, two_parent_family):
        data = infer_relations(*two_parent_family)[0].to_dict()
        assert data["relation"] == "SIBLING"
        assert data["label"] == "full sibling"
        assert len(data["path"]) == 3


class TestInferencePipeline:
    """Tests for InferencePipeline configuration and progress reporting."""

    def test_disabled_rule_is_skipped(self, three_generations):
        config = EngineConfig.from_dict({"rules_enabled": {"cousins": False}})
        result = InferencePipeline(config=config).run(*three_generations)

        assert "cousins" not in result.rule_counts
        assert all(r.relation is not RelationKind.COUSIN for r in result.relations)

    def test_rule_counts(self, three_generations):
        result = InferencePipeline().run(*three_generations)
        assert result.rule_counts == {"siblings": 1, "grandparents": 8, "uncles_aunts": 4, "cousins": 1}
        assert sum(result.rule_counts.values()) == len(result.relations)

    def test_reports_progress(self, two_parent_family):
        hooks = RecordingHooks()
        InferencePipeline(app_hooks=hooks).run(*two_parent_family)

        assert hooks.calls[0] == ("Inferring relations", 4, True, 0)
        assert sum(call[3] for call in hooks.calls) == 4


class TestRelationsFor:
    """Tests for relations_for."""

    def test_views_point_at_other_member(self, three_generations):
        relations = infer_relations(*three_generations)
        views = relations_for("zoe", relations)

        seen = {(v.relation, v.member_id): v.label for v in views}
        assert seen[(RelationKind.COUSIN, "leo")] == "cousin"
        assert seen[(RelationKind.GRANDPARENT, "george")] == "grandfather"
        assert seen[(RelationKind.GRANDCHILD, "grace")] == "granddaughter"
        assert seen[(RelationKind.UNCLE_AUNT, "mary")] == "aunt"
        assert all(v.member_id != "zoe" for v in views)

    def test_unknown_member(self, three_generations):
        assert relations_for("nobody", infer_relations(*three_generations)) == []

    def test_sibling_seen_from_both_sides(self, two_parent_family):
        relations = infer_relations(*two_parent_family)

        carol = relations_for("carol", relations)
        dave = relations_for("dave", relations)
        assert [(v.relation, v.member_id) for v in carol] == [(RelationKind.SIBLING, "dave")]
        assert [(v.relation, v.member_id) for v in dave] == [(RelationKind.SIBLING, "carol")]
