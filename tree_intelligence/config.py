from __future__ import annotations

import copy
from functools import lru_cache
import logging
from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, Optional
import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path(__file__).parent / "config.yaml"


def _load_yaml(yaml_path: Path) -> Dict[str, Any]:
    if not yaml_path or not Path(yaml_path).exists():
        raise FileNotFoundError(f"Configuration file not found: {yaml_path}")
    try:
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing {yaml_path}: {e}")
    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {yaml_path}")
    return data


@lru_cache(maxsize=None)
def _read_packaged_defaults() -> Dict[str, Any]:
    if not DEFAULT_CONFIG_PATH.exists():
        return {}
    logger.debug(f"Reading packaged defaults from {DEFAULT_CONFIG_PATH}")
    return _load_yaml(DEFAULT_CONFIG_PATH)


def _packaged_defaults() -> Dict[str, Any]:
    """Packaged config.yaml, read once per process. Callers get their own copy."""
    return copy.deepcopy(_read_packaged_defaults())


@dataclass
class EngineConfig:
    """
    Configuration for the tree intelligence engine.

    Defaults match the packaged config.yaml. Unit toggles default to enabled
    for any id not listed.

    Attributes:
        min_parent_age_gap_years: Smallest plausible parent/child birth gap.
        days_per_year: Year length used to convert day gaps to years.
        same_name_pair_limit: Max unlinked pairs reported individually per surname.
        rules_enabled: Inference rule_id -> enabled.
        detectors_enabled: Suggestion detector_id -> enabled.
        collectors_enabled: Statistics collector_id -> enabled.
    """
    min_parent_age_gap_years: float = 12
    days_per_year: float = 365.25
    same_name_pair_limit: int = 5
    rules_enabled: Dict[str, bool] = field(default_factory=dict)
    detectors_enabled: Dict[str, bool] = field(default_factory=dict)
    collectors_enabled: Dict[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in ("rules_enabled", "detectors_enabled", "collectors_enabled"):
            toggles = getattr(self, name)
            if toggles is None:
                setattr(self, name, {})
            elif not isinstance(toggles, dict):
                raise ValueError(f"{name} must be a mapping of id to bool, got {type(toggles).__name__}")
        if self.days_per_year <= 0:
            raise ValueError(f"days_per_year must be positive, got {self.days_per_year}")
        if self.same_name_pair_limit < 0:
            raise ValueError(f"same_name_pair_limit must not be negative, got {self.same_name_pair_limit}")

    @classmethod
    def default(cls) -> EngineConfig:
        """Configuration from the packaged config.yaml."""
        return cls.from_dict({})

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> EngineConfig:
        """
        Load configuration from a YAML file.

        Keys missing from the file take their packaged default.

        Args:
            yaml_path: Path to YAML config file.

        Returns:
            EngineConfig: Configuration instance loaded from YAML.
        """
        config = cls.from_dict(_load_yaml(Path(yaml_path)))
        logger.info(f"Loaded engine config from {yaml_path}")
        return config

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> EngineConfig:
        """
        Create configuration from a dictionary.

        Keys missing from the dictionary fall back to the packaged config.yaml
        when present, otherwise to the dataclass defaults. Unknown keys are
        ignored with a warning.

        Args:
            config_dict: Dictionary with configuration values.

        Returns:
            EngineConfig: Configuration instance.
        """
        known = {f.name for f in fields(cls)}
        for key in config_dict:
            if key not in known:
                logger.warning(f"Ignoring unknown configuration key '{key}'")

        defaults = _packaged_defaults()
        values = {k: v for k, v in defaults.items() if k in known}
        values.update({k: v for k, v in config_dict.items() if k in known})
        return cls(**values)

    def rule_enabled(self, rule_id: str) -> bool:
        # default: enabled unless explicitly false
        return self.rules_enabled.get(rule_id, True)

    def detector_enabled(self, detector_id: str) -> bool:
        return self.detectors_enabled.get(detector_id, True)

    def collector_enabled(self, collector_id: str) -> bool:
        return self.collectors_enabled.get(collector_id, True)


def resolve_config(config: Optional[EngineConfig]) -> EngineConfig:
    """Return the given config, or the packaged default when None."""
    return config if config is not None else EngineConfig.default()
