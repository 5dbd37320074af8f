"""
Base classes for statistics collectors.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Any, Dict, Type

from tree_intelligence.statistics.model import Stats, StatsInput

logger = logging.getLogger(__name__)

# Collector Registry
_COLLECTOR_REGISTRY: Dict[str, Type['StatisticsCollector']] = {}


def register_collector(cls: Type['StatisticsCollector']) -> Type['StatisticsCollector']:
    """
    Decorator to register a collector class in the global registry.

    Usage:
        @register_collector
        @dataclass
        class MyCollector(StatisticsCollector):
            collector_id: str = "my_collector"
            ...
    """
    collector_id = getattr(cls, 'collector_id', None)
    if collector_id:
        _COLLECTOR_REGISTRY[collector_id] = cls
        logger.debug(f"Registered statistics collector: {collector_id}")
    else:
        logger.warning(f"Collector {cls.__name__} missing 'collector_id' attribute, not registered")
    return cls


def get_collector_registry() -> Dict[str, Type['StatisticsCollector']]:
    """Get the global collector registry."""
    return _COLLECTOR_REGISTRY.copy()


@dataclass
class StatisticsCollector(ABC):
    """
    Base class for statistics collectors.

    Collectors analyze a tree and produce aggregate statistics.
    They don't modify the data, only analyze it.

    Attributes:
        collector_id: Unique identifier for this collector
        enabled: Whether this collector is enabled (can be set via config)
        app_hooks: Optional application hooks for progress reporting
    """
    collector_id: str = ""
    enabled: bool = True
    app_hooks: Any = None

    @abstractmethod
    def collect(self, data: StatsInput, existing_stats: Stats) -> Stats:
        """
        Collect statistics from the tree.

        Args:
            data: Snapshot plus inferred relations and suggestions
            existing_stats: Statistics collected so far by earlier collectors

        Returns:
            Stats object with collected values
        """
        pass

    def __post_init__(self):
        """Validate collector configuration."""
        if not self.collector_id:
            raise ValueError(f"{self.__class__.__name__} must define collector_id")
