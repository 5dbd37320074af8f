"""Suggestion detectors: find structural anomalies in a family tree.

Built-in detectors (run in this order):
    - OrphanDetector: members with no link at all
    - SpouseMissingDetector: co-parents not linked as spouses
    - SameNameUnlinkedDetector: same-surname members with no direct link
    - AgeInconsistencyDetector: implausible parent/child birth gaps

Extensibility:
    Create custom detectors by:
        1. Subclass SuggestionDetector
        2. Implement detect(snapshot) -> list[LinkSuggestion]
        3. Use @register_detector decorator for automatic registration
"""

from .base import SuggestionDetector
from .base import register_detector
from .base import get_detector_registry
from .orphan import OrphanDetector
from .spouse_missing import SpouseMissingDetector
from .same_name import SameNameUnlinkedDetector
from .age_gap import AgeInconsistencyDetector

__all__ = [
    'SuggestionDetector',
    'register_detector',
    'get_detector_registry',
    'OrphanDetector',
    'SpouseMissingDetector',
    'SameNameUnlinkedDetector',
    'AgeInconsistencyDetector',
]
