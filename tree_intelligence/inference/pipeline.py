from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from tree_intelligence.app_hooks import AppHooks, report_step
from tree_intelligence.config import EngineConfig, resolve_config
from tree_intelligence.link import Link
from tree_intelligence.member import Member
from tree_intelligence.snapshot import TreeSnapshot

from .model import InferredRelation, RelationSink, RelationView
from .rules import InferenceRule, get_rule_registry

logger = logging.getLogger(__name__)


@dataclass
class InferenceResult:
    relations: List[InferredRelation] = field(default_factory=list)
    rule_counts: Dict[str, int] = field(default_factory=dict)  # rule_id -> relations added


class InferencePipeline:
    """
    Runs the inference rules over one snapshot.

    Rules share a RelationSink, so a relation found by an earlier rule is not
    added again by a later one.
    """
    def __init__(self, config: Optional[EngineConfig] = None, rules: Optional[Sequence[InferenceRule]] = None,
                 app_hooks: Optional[AppHooks] = None) -> None:
        self.config = resolve_config(config)
        self.app_hooks = app_hooks
        if rules is None:
            rules = [rule_cls(app_hooks=app_hooks) for rule_cls in get_rule_registry().values()]
        self.rules = list(rules)

        for rule in self.rules:
            rule.app_hooks = app_hooks

    def run(
        self,
        members: Iterable[Union[Member, Dict[str, Any]]],
        links: Iterable[Union[Link, Dict[str, Any]]],
    ) -> InferenceResult:
        snapshot = TreeSnapshot.build(members, links)
        sink = RelationSink()
        rule_counts: Dict[str, int] = {}

        enabled_rules = [r for r in self.rules if r.enabled and self.config.rule_enabled(r.rule_id)]
        report_step(self.app_hooks, logger, info="Inferring relations", target=len(enabled_rules), reset_counter=True)

        for rule_num, rule in enumerate(enabled_rules, start=1):
            logger.debug(f"Running inference rule ({rule_num}/{len(enabled_rules)}): {rule.rule_id}")
            rule_counts[rule.rule_id] = rule.apply(snapshot, sink)
            report_step(self.app_hooks, logger, plus_step=1)

        logger.info(f"Inferred {len(sink)} relations from {len(snapshot.members)} members and {len(snapshot.links)} links")
        return InferenceResult(relations=sink.relations, rule_counts=rule_counts)


def infer_relations(
    members: Iterable[Union[Member, Dict[str, Any]]],
    links: Iterable[Union[Link, Dict[str, Any]]],
    config: Optional[EngineConfig] = None,
) -> List[InferredRelation]:
    """
    Derive sibling, grandparent, uncle/aunt and cousin relations.

    Args:
        members: Members of the tree (Member objects or host records)
        links: PARENT/SPOUSE links (Link objects or host records)
        config: Optional engine configuration

    Returns:
        Deduplicated list of InferredRelation; order is not significant
    """
    return InferencePipeline(config=config).run(members, links).relations


def relations_for(member_id: str, relations: Iterable[InferredRelation]) -> List[RelationView]:
    """
    Project inferred relations onto one member.

    Args:
        member_id: Member to look up
        relations: Output of infer_relations

    Returns:
        RelationView per relation involving the member, pointing at the other member
    """
    return [
        RelationView(
            relation=r.relation,
            label=r.label,
            member_id=r.to_id if r.from_id == member_id else r.from_id,
        )
        for r in relations
        if member_id in (r.from_id, r.to_id)
    ]
