"""Inference rules: derive secondary kinship relations from PARENT/SPOUSE links.

Built-in rules (run in this order):
    - SiblingRule: full and half siblings
    - GrandparentRule: grandparents and grandchildren
    - UncleAuntRule: uncles/aunts and nephews/nieces
    - CousinRule: first cousins

Extensibility:
    Create custom rules by:
        1. Subclass InferenceRule
        2. Implement apply(snapshot, sink) -> int
        3. Use @register_rule decorator for automatic registration
"""

from .base import InferenceRule
from .base import register_rule
from .base import get_rule_registry
from .siblings import SiblingRule
from .grandparents import GrandparentRule
from .uncles_aunts import UncleAuntRule
from .cousins import CousinRule

__all__ = [
    'InferenceRule',
    'register_rule',
    'get_rule_registry',
    'SiblingRule',
    'GrandparentRule',
    'UncleAuntRule',
    'CousinRule',
]
