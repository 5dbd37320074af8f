"""
Base classes for relation inference rules.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Any, Dict, Type

from tree_intelligence.inference.model import RelationSink
from tree_intelligence.snapshot import TreeSnapshot

logger = logging.getLogger(__name__)

# Rule Registry
_RULE_REGISTRY: Dict[str, Type['InferenceRule']] = {}


def register_rule(cls: Type['InferenceRule']) -> Type['InferenceRule']:
    """
    Decorator to register an inference rule class in the global registry.

    Rules run in registration order.

    Usage:
        @register_rule
        @dataclass
        class MyRule(InferenceRule):
            rule_id: str = "my_rule"
            ...
    """
    rule_id = getattr(cls, 'rule_id', None)
    if rule_id:
        _RULE_REGISTRY[rule_id] = cls
        logger.debug(f"Registered inference rule: {rule_id}")
    else:
        logger.warning(f"Rule {cls.__name__} missing 'rule_id' attribute, not registered")
    return cls


def get_rule_registry() -> Dict[str, Type['InferenceRule']]:
    """Get the global rule registry."""
    return _RULE_REGISTRY.copy()


@dataclass
class InferenceRule(ABC):
    """
    Base class for relation inference rules.

    A rule reads the snapshot's graph index and adds relations to the shared
    sink. It never modifies the snapshot.

    Attributes:
        rule_id: Unique identifier for this rule
        enabled: Whether this rule is enabled (can be set via config)
        app_hooks: Optional application hooks for progress reporting
    """
    rule_id: str = ""
    enabled: bool = True
    app_hooks: Any = None

    def __post_init__(self):
        """Validate rule configuration."""
        if not self.rule_id:
            raise ValueError(f"{self.__class__.__name__} must define rule_id")

    @abstractmethod
    def apply(self, snapshot: TreeSnapshot, sink: RelationSink) -> int:
        """
        Derive relations from the snapshot.

        Args:
            snapshot: Members, links and graph index for this call
            sink: Shared relation collector

        Returns:
            Number of relations added to the sink
        """
        pass
