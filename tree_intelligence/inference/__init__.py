"""Inference module: derive secondary kinship relations from a family tree snapshot.

Given members and primitive PARENT/SPOUSE links, the pipeline derives:
    - Siblings (full or half, by number of shared parents)
    - Grandparents and grandchildren
    - Uncles/aunts and nephews/nieces
    - Cousins

Core classes:
    - InferencePipeline: Runs the registered rules over one snapshot
    - InferredRelation: A derived relation with label and proof path
    - RelationView: A relation seen from one member

Example:
    >>> from tree_intelligence.inference import infer_relations, relations_for
    >>> relations = infer_relations(members, links)
    >>> for view in relations_for("carol", relations):
    ...     print(view.relation, view.label, view.member_id)
"""

from .model import InferredRelation
from .model import RelationView
from .model import RelationSink
from .pipeline import InferencePipeline
from .pipeline import InferenceResult
from .pipeline import infer_relations
from .pipeline import relations_for
from .rules import InferenceRule
from .rules import register_rule
from .rules import get_rule_registry

__all__ = [
    'InferredRelation',
    'RelationView',
    'RelationSink',
    'InferencePipeline',
    'InferenceResult',
    'infer_relations',
    'relations_for',
    'InferenceRule',
    'register_rule',
    'get_rule_registry',
]
