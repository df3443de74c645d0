"""
Unit tests for ArrayOpsConfig validation and file loading.
"""

import json

import pytest
from pydantic import ValidationError

from array_ops import ArrayOpsConfig, DEFAULT_CONFIG, load_config


class TestArrayOpsConfig:
    """Defaults and validation."""

    def test_defaults(self):
        assert DEFAULT_CONFIG.stable_algorithm == 'merge'
        assert DEFAULT_CONFIG.unstable_algorithm == 'quick'
        assert DEFAULT_CONFIG.insertion_threshold == 16
        assert DEFAULT_CONFIG.pivot_seed == 0
        assert DEFAULT_CONFIG.shuffle_seed is None

    def test_unstable_algorithm_cannot_be_stable_sort(self):
        with pytest.raises(ValidationError):
            ArrayOpsConfig(stable_algorithm='quick')

    @pytest.mark.parametrize("field", ['stable_algorithm', 'unstable_algorithm'])
    def test_quadratic_sorter_not_configurable(self, field):
        with pytest.raises(ValidationError):
            ArrayOpsConfig(**{field: 'insertion'})

    def test_threshold_must_be_positive(self):
        with pytest.raises(ValidationError):
            ArrayOpsConfig(insertion_threshold=0)

    def test_config_is_frozen(self):
        with pytest.raises(ValidationError):
            DEFAULT_CONFIG.pivot_seed = 3


class TestLoadConfig:
    """YAML and JSON files."""

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "array_ops.yaml"
        path.write_text("unstable_algorithm: heap\ninsertion_threshold: 4\n", encoding="utf-8")
        config = load_config(path)
        assert config.unstable_algorithm == 'heap'
        assert config.insertion_threshold == 4

    def test_load_json(self, tmp_path):
        path = tmp_path / "array_ops.json"
        path.write_text(json.dumps({"shuffle_seed": 12}), encoding="utf-8")
        assert load_config(path).shuffle_seed == 12

    @pytest.mark.parametrize("name", ["empty.yaml", "empty.json"])
    def test_empty_file_gives_defaults(self, tmp_path, name):
        path = tmp_path / name
        path.write_text("", encoding="utf-8")
        assert load_config(path) == ArrayOpsConfig()

    def test_invalid_values_propagate(self, tmp_path):
        path = tmp_path / "bad.yml"
        path.write_text("stable_algorithm: bubble\n", encoding="utf-8")
        with pytest.raises(ValidationError):
            load_config(path)
