import json
import logging

import pytest

from islandgen import ConfigurationError, DEFAULT_CONFIG, GeneratorConfig, load_config
from islandgen.safe_parse import to_float, to_int, to_vec3


def test_defaults_are_valid():
    cfg = DEFAULT_CONFIG.validate()
    assert (cfg.rows, cfg.cols) == (32, 32)
    assert (cfg.noise_min, cfg.noise_max, cfg.min_threshold) == (0.0, 1.25, 0.4)
    assert cfg.frequency == 1.8
    assert (cfg.scale_min, cfg.scale_max) == (0.8, 1.8)


def test_safe_parse_helpers():
    assert to_int("7") == 7
    assert to_int("bad", default=3) == 3
    assert to_int(None, default=4) == 4
    assert to_float("1.5") == 1.5
    assert to_float("nan", default=2.5) == 2.5
    assert to_vec3(0.25) == (0.25, 0.25, 0.25)
    assert to_vec3([1, "x", 3]) == (1.0, 0.0, 3.0)
    assert to_vec3([1, 2]) == (0.0, 0.0, 0.0)


def test_from_dict_coerces_and_warns(caplog):
    with caplog.at_level(logging.WARNING):
        cfg = GeneratorConfig.from_dict({
            "rows": "16", "frequency": "fast", "padding": 0.1, "colour": "red",
        })
    assert cfg.rows == 16
    assert cfg.frequency == 1.8
    assert cfg.padding == (0.1, 0.1, 0.1)
    assert "frequency" in caplog.text
    assert "colour" in caplog.text


def test_load_config_roundtrip(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps(GeneratorConfig(rows=8, min_threshold=0.5).to_dict()), encoding="utf-8")
    cfg = load_config(str(path))
    assert cfg.rows == 8
    assert cfg.min_threshold == 0.5


def test_load_config_validates(tmp_path):
    path = tmp_path / "cfg.json"
    path.write_text(json.dumps({"noise_min": 2.0, "noise_max": 1.0}), encoding="utf-8")
    with pytest.raises(ConfigurationError):
        load_config(str(path))


@pytest.mark.parametrize("kwargs", [
    {"rows": 0},
    {"noise_min": 1.25},
    {"min_threshold": 1.25},
    {"min_threshold": -0.1},
    {"frequency": 0.0},
    {"row_spacing": -1.0},
    {"scale_min": 0.0},
    {"scale_min": 2.0, "scale_max": 1.0},
    {"padding": (-0.1, 0.0, 0.0)},
    {"base_marker": ""},
])
def test_validate_rejects(kwargs):
    with pytest.raises(ConfigurationError):
        GeneratorConfig(**kwargs).validate()
