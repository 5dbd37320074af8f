"""Suggestions module: detect structurally suspicious data in a family tree.

Detected anomalies:
    - ORPHAN: member with no link at all (info)
    - SPOUSE_MISSING: co-parents not linked as spouses, with a proposed SPOUSE link (warning)
    - SAME_NAME_UNLINKED: same-surname members with no direct link (info)
    - AGE_INCONSISTENCY: parent/child birth gap below the plausible minimum (warning or error)

Example:
    >>> from tree_intelligence.suggestions import suggest_missing_links
    >>> for suggestion in suggest_missing_links(members, links):
    ...     print(f"{suggestion.severity}: {suggestion.message}")
"""

from .model import LinkSuggestion
from .model import SuggestionKind
from .model import Severity
from .pipeline import SuggestionPipeline
from .pipeline import SuggestionResult
from .pipeline import suggest_missing_links
from .detectors import SuggestionDetector
from .detectors import register_detector
from .detectors import get_detector_registry
from .defaults import get_default_detectors

__all__ = [
    'LinkSuggestion',
    'SuggestionKind',
    'Severity',
    'SuggestionPipeline',
    'SuggestionResult',
    'suggest_missing_links',
    'SuggestionDetector',
    'register_detector',
    'get_detector_registry',
    'get_default_detectors',
]
