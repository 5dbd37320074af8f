"""
Default suggestion detectors configuration.
"""
from __future__ import annotations

from typing import Any, List

from tree_intelligence.config import EngineConfig
from .detectors import SuggestionDetector, get_detector_registry


# Detector parameter mapping: maps config fields to detector constructor parameters
DETECTOR_PARAM_MAP = {
    'same_name_unlinked': {
        'max_pairs': 'same_name_pair_limit',
    },
    'age_inconsistency': {
        'min_gap_years': 'min_parent_age_gap_years',
        'days_per_year': 'days_per_year',
    },
}


def get_default_detectors(config: EngineConfig, app_hooks: Any = None) -> List[SuggestionDetector]:
    """
    Create the registered detectors with parameters taken from config.

    Detectors disabled in config are left out.

    Args:
        config: EngineConfig instance with detector parameters.
        app_hooks: Optional application hooks passed to each detector.

    Returns:
        List[SuggestionDetector]: Configured detectors in registration order.
    """
    detectors = []
    for detector_id, detector_cls in get_detector_registry().items():
        if not config.detector_enabled(detector_id):
            continue

        param_map = DETECTOR_PARAM_MAP.get(detector_id, {})
        kwargs = {param_name: getattr(config, config_key) for param_name, config_key in param_map.items()}
        detectors.append(detector_cls(app_hooks=app_hooks, **kwargs))

    return detectors
