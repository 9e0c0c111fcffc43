"""Tests for the configuration system."""

import json

import pytest

from typed_xmlrpc.shared.config import (
    ConfigError,
    ConfigValidationError,
    ConversionConfig,
    ParserConfig,
    TreeConfig,
)


class TestTreeConfig:
    """Test suite for TreeConfig."""

    def test_default_configuration(self):
        """Test default tree configuration values."""
        config = TreeConfig()

        assert config.huge_tree is False
        assert config.max_input_size_bytes is None
        assert config.resolve_entities is False
        assert config.no_network is True
        assert config.encoding is None

    def test_tree_config_validation_failures(self):
        """Test tree configuration validation failures."""
        with pytest.raises(ValueError, match="max_input_size_bytes must be > 0 or None"):
            TreeConfig(max_input_size_bytes=0)

        with pytest.raises(ValueError, match="encoding cannot be blank"):
            TreeConfig(encoding="  ")


class TestConversionConfig:
    """Test suite for ConversionConfig."""

    def test_default_configuration(self):
        config = ConversionConfig()

        assert config.strip_numeric_whitespace is True
        assert config.strip_method_name is True


class TestParserConfig:
    """Test suite for the aggregate ParserConfig."""

    def test_default_configuration(self):
        config = ParserConfig()

        assert config.tree == TreeConfig()
        assert config.conversion == ConversionConfig()
        assert config.logging_level is None
        assert config.name is None

    def test_invalid_logging_level_raises(self):
        with pytest.raises(ConfigValidationError, match="logging_level must be one of") as excinfo:
            ParserConfig(logging_level="LOUD")

        assert excinfo.value.field_name == "logging_level"

    def test_validation_error_is_config_error(self):
        with pytest.raises(ConfigError):
            ParserConfig(logging_level="LOUD")

    def test_config_is_immutable(self):
        config = ParserConfig()

        with pytest.raises(AttributeError):
            config.name = "changed"  # type: ignore

    def test_override_nested_fields(self):
        """Test component__field override notation."""
        config = ParserConfig()
        new_config = config.override(
            tree__huge_tree=True,
            conversion__strip_method_name=False,
            logging_level="DEBUG",
        )

        assert new_config.tree.huge_tree is True
        assert new_config.conversion.strip_method_name is False
        assert new_config.logging_level == "DEBUG"
        # Original is untouched
        assert config.tree.huge_tree is False
        assert config.logging_level is None

    def test_override_with_invalid_value_raises(self):
        with pytest.raises(ConfigValidationError, match="max_input_size_bytes"):
            ParserConfig().override(tree__max_input_size_bytes=-1)

    def test_override_with_unknown_component_raises(self):
        with pytest.raises(ConfigValidationError, match="Unknown configuration component"):
            ParserConfig().override(network__timeout=3)

    def test_override_with_unknown_field_raises(self):
        with pytest.raises(ConfigValidationError):
            ParserConfig().override(tree__no_such_field=True)

    def test_json_round_trip(self):
        config = ParserConfig(
            tree=TreeConfig(huge_tree=True, max_input_size_bytes=4096),
            logging_level="INFO",
            name="gateway",
        )

        data = json.loads(config.to_json())
        assert data["tree"]["max_input_size_bytes"] == 4096
        assert data["name"] == "gateway"

        assert ParserConfig.from_json(config.to_json()) == config

    def test_from_dict_with_invalid_data_raises(self):
        with pytest.raises(ConfigValidationError, match="Invalid configuration data"):
            ParserConfig.from_dict({"tree": {"unknown": 1}})

        with pytest.raises(ConfigValidationError, match="Invalid configuration data"):
            ParserConfig.from_dict({"tree": {"max_input_size_bytes": 0}})

    def test_presets(self):
        assert ParserConfig.default() == ParserConfig()
        assert ParserConfig.deep_nesting().tree.huge_tree is True
