"""
Base classes for link suggestion detectors.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
import logging
from typing import Any, Dict, List, Type

from tree_intelligence.snapshot import TreeSnapshot
from tree_intelligence.suggestions.model import LinkSuggestion

logger = logging.getLogger(__name__)

# Detector Registry
_DETECTOR_REGISTRY: Dict[str, Type['SuggestionDetector']] = {}


def register_detector(cls: Type['SuggestionDetector']) -> Type['SuggestionDetector']:
    """
    Decorator to register a detector class in the global registry.

    Detectors run in registration order.

    Usage:
        @register_detector
        @dataclass
        class MyDetector(SuggestionDetector):
            detector_id: str = "my_detector"
            ...
    """
    detector_id = getattr(cls, 'detector_id', None)
    if detector_id:
        _DETECTOR_REGISTRY[detector_id] = cls
        logger.debug(f"Registered suggestion detector: {detector_id}")
    else:
        logger.warning(f"Detector {cls.__name__} missing 'detector_id' attribute, not registered")
    return cls


def get_detector_registry() -> Dict[str, Type['SuggestionDetector']]:
    """Get the global detector registry."""
    return _DETECTOR_REGISTRY.copy()


@dataclass
class SuggestionDetector(ABC):
    """
    Base class for suggestion detectors.

    Detectors look for anomalies in a snapshot and describe them as
    LinkSuggestion objects. They never modify the snapshot.

    Attributes:
        detector_id: Unique identifier for this detector
        enabled: Whether this detector is enabled (can be set via config)
        app_hooks: Optional application hooks for progress reporting
    """
    detector_id: str = ""
    enabled: bool = True
    app_hooks: Any = None

    def __post_init__(self):
        """Validate detector configuration."""
        if not self.detector_id:
            raise ValueError(f"{self.__class__.__name__} must define detector_id")

    @abstractmethod
    def detect(self, snapshot: TreeSnapshot) -> List[LinkSuggestion]:
        """
        Find anomalies in the snapshot.

        Args:
            snapshot: Members, links and graph index for this call

        Returns:
            Suggestions found, in a stable order
        """
        pass
