"""
Tests for segver.config.loader module.

Tests configuration loading and merging including:
- Built-in defaults
- Explicit and discovered config files
- Deep merge behavior
- Pattern resolution
- Error handling
"""

from __future__ import annotations

import pytest

from segver.config import BUILTIN_CONFIG, load_effective_config, resolve_pattern
from segver.exceptions import ConfigError
from segver.logging import DefaultLogger
from segver.versioning import SEMVER_PATTERN, SIMPLE_PATTERN, parse

JAVA = r"^(?P<d1>\d+)\.(?P<d2>\d+)\.(?P<d3>\d+)(?:_(?P<d4>\d+))?-(?P<d5>\d+)$"


class TestConfigLoading:
    """Tests for basic configuration loading."""

    def test_builtins_without_file(self, tmp_test_dir):
        """No segver.yaml anywhere above start_dir yields the built-ins."""
        config = load_effective_config(start_dir=tmp_test_dir)

        assert config == BUILTIN_CONFIG
        assert config["patterns"]["simple"] == SIMPLE_PATTERN.pattern
        assert config["patterns"]["semver"] == SEMVER_PATTERN.pattern

    def test_builtins_not_shared(self, tmp_test_dir):
        config = load_effective_config(start_dir=tmp_test_dir)
        config["patterns"]["mine"] = "x"
        assert "mine" not in BUILTIN_CONFIG["patterns"]

    def test_explicit_file(self, create_yaml_file):
        path = create_yaml_file(
            "custom.yaml",
            {"patterns": {"java": JAVA}, "defaults": {"pattern": "java"}},
        )

        config = load_effective_config(path)

        assert config["patterns"]["java"] == JAVA
        assert config["defaults"]["pattern"] == "java"

    def test_discovers_file_upward(self, tmp_test_dir, create_yaml_file):
        create_yaml_file("segver.yaml", {"defaults": {"numbers_only": True}})
        nested = tmp_test_dir / "a" / "b"
        nested.mkdir(parents=True)

        config = load_effective_config(start_dir=nested)

        assert config["defaults"]["numbers_only"] is True

    def test_empty_file_is_allowed(self, tmp_test_dir):
        path = tmp_test_dir / "segver.yaml"
        path.write_text("")

        assert load_effective_config(path) == BUILTIN_CONFIG

    def test_verbose_logging(self, create_yaml_file, capsys):
        path = create_yaml_file("segver.yaml", {"patterns": {"java": JAVA}})

        load_effective_config(path, logger=DefaultLogger(verbose=True))

        out = capsys.readouterr().out
        assert "[CONFIG] Loading:" in out
        assert "[CONFIG] Patterns available: java, semver, simple" in out


class TestConfigMerging:
    """Tests for configuration merging behavior."""

    def test_dict_deep_merge(self, create_yaml_file):
        """Built-in patterns survive when the file adds new ones."""
        path = create_yaml_file("segver.yaml", {"patterns": {"java": JAVA}})

        config = load_effective_config(path)

        assert set(config["patterns"]) == {"simple", "semver", "java"}
        assert config["defaults"]["pattern"] == "simple"

    def test_scalar_override(self, create_yaml_file):
        path = create_yaml_file(
            "segver.yaml", {"patterns": {"simple": r"^(?P<d1>\d+)$"}}
        )

        config = load_effective_config(path)

        assert config["patterns"]["simple"] == r"^(?P<d1>\d+)$"


class TestConfigErrors:
    """Tests for configuration error handling."""

    def test_missing_explicit_file(self, tmp_test_dir):
        with pytest.raises(ConfigError):
            load_effective_config(tmp_test_dir / "nonexistent.yaml")

    def test_invalid_yaml(self, tmp_test_dir):
        path = tmp_test_dir / "segver.yaml"
        path.write_text("patterns: [unclosed\n")

        with pytest.raises(ConfigError) as excinfo:
            load_effective_config(path)
        assert excinfo.value.__cause__ is not None

    def test_top_level_must_be_mapping(self, tmp_test_dir):
        path = tmp_test_dir / "segver.yaml"
        path.write_text("- a\n- b\n")

        with pytest.raises(ConfigError):
            load_effective_config(path)

    def test_patterns_must_be_mapping(self, create_yaml_file):
        path = create_yaml_file("segver.yaml", {"patterns": ["a", "b"]})

        with pytest.raises(ConfigError):
            load_effective_config(path)

    def test_pattern_must_be_string(self, create_yaml_file):
        path = create_yaml_file("segver.yaml", {"patterns": {"bad": 5}})

        with pytest.raises(ConfigError):
            load_effective_config(path)


class TestResolvePattern:
    """Tests for resolve_pattern()."""

    def test_named_pattern(self, create_yaml_file):
        config = load_effective_config(
            create_yaml_file("segver.yaml", {"patterns": {"java": JAVA}})
        )

        pattern = resolve_pattern("java", config)

        assert parse("1.8.0_372-3", pattern).raw == "1.8.0_372-3"

    def test_default_pattern(self):
        pattern = resolve_pattern(None, BUILTIN_CONFIG)
        assert pattern.pattern == SIMPLE_PATTERN.pattern

    def test_literal_regex(self):
        pattern = resolve_pattern(r"^v(?P<d1>\d+)$", BUILTIN_CONFIG)
        assert parse("v3", pattern).major == 3

    def test_invalid_regex(self):
        with pytest.raises(ConfigError):
            resolve_pattern(r"^(\d+$", BUILTIN_CONFIG)
