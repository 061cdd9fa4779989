"""
Process-wide sentinel configuration
"""

import logging

import pytest

from classenforcer import (
    EnforcerConfig,
    EnforcerError,
    configure,
    get_config,
    reset_config,
    set_config,
    set_prop,
)
from classenforcer.core.errors import codes


CONSTANT_KINDS = ["default_constant", "default-constant", "constant", "default_constant_value"]
FIELD_KINDS = [
    "default_property",
    "default-property",
    "property",
    "default_property_value",
    "field",
    "default_field",
    "default_field_value",
]


class TestConfigure:

    @pytest.mark.parametrize("kind", CONSTANT_KINDS)
    def test_constant_kinds(self, kind):
        assert configure(kind, "TODO") is True
        assert get_config().constant_sentinel == "TODO"
        assert get_config().field_sentinel == "abstract"

    @pytest.mark.parametrize("kind", FIELD_KINDS)
    def test_field_kinds(self, kind):
        assert configure(kind, "TODO") is True
        assert get_config().field_sentinel == "TODO"
        assert get_config().constant_sentinel == "abstract"

    @pytest.mark.parametrize("kind", ["sentinel", "CONSTANT", "", None, 3, ("constant",)])
    def test_unrecognized_kind_changes_nothing(self, kind):
        before = get_config()
        assert configure(kind, "TODO") is False
        assert get_config() is before

    def test_replaces_config_object(self):
        before = get_config()
        configure("constant", "TODO")
        after = get_config()

        assert after is not before
        assert before.constant_sentinel == "abstract"

    def test_set_prop_alias(self):
        assert set_prop("property", "x") is True
        assert get_config().field_sentinel == "x"
        assert set_prop("version", "1.0") is False

    def test_falsy_field_sentinel_warns(self, caplog):
        with caplog.at_level(logging.WARNING, logger="classenforcer"):
            configure("field", 0)
        assert "field_sentinel" in caplog.text


class TestGlobalConfig:

    def test_lazy_default(self):
        assert get_config() == EnforcerConfig.default()

    def test_set_and_reset(self):
        custom = EnforcerConfig(constant_sentinel="X", field_sentinel="Y")
        set_config(custom)
        assert get_config() is custom

        reset_config()
        assert get_config() == EnforcerConfig.default()

    def test_set_rejects_invalid_config(self):
        before = get_config()
        with pytest.raises(EnforcerError) as exc_info:
            set_config(EnforcerConfig(unresolved_fields="sometimes"))

        assert exc_info.value.error_code == codes.CONFIG_INVALID
        assert get_config() is before


class TestEnforcerConfig:

    def test_frozen(self):
        config = EnforcerConfig.default()
        with pytest.raises(AttributeError):
            config.field_sentinel = "x"

    def test_accessors_normalized_to_tuple(self):
        config = EnforcerConfig(singleton_accessors=["instance", "get_instance"])
        assert config.singleton_accessors == ("instance", "get_instance")

    def test_with_values(self):
        config = EnforcerConfig.default().with_values(field_sentinel=0)
        assert config.field_sentinel == 0
        assert config.constant_sentinel == "abstract"

    def test_to_dict(self):
        assert EnforcerConfig.default().to_dict() == {
            "constant_sentinel": "abstract",
            "field_sentinel": "abstract",
            "singleton_accessors": ["get_instance"],
            "unresolved_fields": "skip",
        }
