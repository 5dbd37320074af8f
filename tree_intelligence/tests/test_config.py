import builtins

import pytest

from tree_intelligence.config import EngineConfig
from tree_intelligence.inference import infer_relations
from tree_intelligence.statistics import compute_tree_stats
from tree_intelligence.suggestions import suggest_missing_links


def test_default_config_matches_packaged_yaml():
    config = EngineConfig.default()
    assert config.min_parent_age_gap_years == 12
    assert config.days_per_year == 365.25
    assert config.same_name_pair_limit == 5
    assert config.rule_enabled("cousins") is True
    assert config.detector_enabled("orphan") is True
    assert config.collector_enabled("generations") is True


def test_unknown_ids_default_to_enabled():
    config = EngineConfig()
    assert config.rule_enabled("not_a_rule") is True
    assert config.detector_enabled("not_a_detector") is True
    assert config.collector_enabled("not_a_collector") is True


def test_from_dict_overrides_and_defaults():
    config = EngineConfig.from_dict({"min_parent_age_gap_years": 14, "rules_enabled": {"cousins": False}})
    assert config.min_parent_age_gap_years == 14
    assert config.same_name_pair_limit == 5
    assert config.rule_enabled("cousins") is False
    assert config.rule_enabled("siblings") is True


def test_from_dict_ignores_unknown_keys(caplog):
    config = EngineConfig.from_dict({"colour": "blue"})
    assert not hasattr(config, "colour")
    assert "colour" in caplog.text


def test_from_yaml(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("same_name_pair_limit: 2\ndetectors_enabled:\n  orphan: false\n", encoding="utf-8")
    config = EngineConfig.from_yaml(path)
    assert config.same_name_pair_limit == 2
    assert config.detector_enabled("orphan") is False
    assert config.min_parent_age_gap_years == 12


def test_from_yaml_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        EngineConfig.from_yaml(tmp_path / "missing.yaml")


def test_from_yaml_malformed(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("rules_enabled: [unclosed\n", encoding="utf-8")
    with pytest.raises(ValueError):
        EngineConfig.from_yaml(path)


def test_invalid_year_length():
    with pytest.raises(ValueError):
        EngineConfig(days_per_year=0)


def test_empty_toggle_section(tmp_path):
    path = tmp_path / "engine.yaml"
    path.write_text("rules_enabled:\ndetectors_enabled:\ncollectors_enabled:\n", encoding="utf-8")
    config = EngineConfig.from_yaml(path)
    assert config.rule_enabled("siblings") is True
    assert config.detector_enabled("orphan") is True
    assert config.collector_enabled("counts") is True


def test_toggle_section_must_be_mapping():
    with pytest.raises(ValueError):
        EngineConfig(rules_enabled=["siblings"])


def test_default_config_reads_packaged_file_once(monkeypatch):
    EngineConfig.default()

    opened = []
    real_open = builtins.open

    def recording_open(file, *args, **kwargs):
        opened.append(str(file))
        return real_open(file, *args, **kwargs)

    monkeypatch.setattr(builtins, "open", recording_open)
    for _ in range(3):
        infer_relations([], [])
        suggest_missing_links([], [])
        compute_tree_stats([], [])
        EngineConfig.from_dict({"same_name_pair_limit": 3})

    assert opened == []


def test_default_configs_are_independent():
    first = EngineConfig.default()
    first.rules_enabled["cousins"] = False
    assert EngineConfig.default().rule_enabled("cousins") is True
