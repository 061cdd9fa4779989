"""
YAML loading and configuration validation
"""

import logging

import pytest

import classenforcer.config.loader as loader_module
from classenforcer import EnforcerConfig, EnforcerError, load_config, validate_config
from classenforcer.core.errors import codes


def _write(tmp_path, text):
    path = tmp_path / "config.yml"
    path.write_text(text, encoding="utf-8")
    return path


class TestLoadConfig:

    def test_defaults_without_file(self, tmp_path, monkeypatch):
        monkeypatch.setattr(loader_module, "DEFAULT_CONFIG_PATH", tmp_path / "missing.yml")
        assert load_config() == EnforcerConfig.default()

    def test_default_location_used(self, tmp_path, monkeypatch):
        path = _write(tmp_path, "constant_sentinel: TODO\n")
        monkeypatch.setattr(loader_module, "DEFAULT_CONFIG_PATH", path)
        assert load_config().constant_sentinel == "TODO"

    def test_values_merged_over_defaults(self, tmp_path):
        path = _write(tmp_path, "field_sentinel: PENDING\nunresolved_fields: raise\n")
        config = load_config(path)

        assert config.field_sentinel == "PENDING"
        assert config.unresolved_fields == "raise"
        assert config.constant_sentinel == "abstract"

    def test_enforcer_section_and_aliases(self, tmp_path):
        path = _write(tmp_path, (
            "enforcer:\n"
            "  default_constant_value: TBD\n"
            "  default_property_value: TBD\n"
            "  singleton_accessors: [instance, get_instance]\n"
        ))
        config = load_config(path)

        assert config.constant_sentinel == "TBD"
        assert config.field_sentinel == "TBD"
        assert config.singleton_accessors == ("instance", "get_instance")

    def test_empty_file_gives_defaults(self, tmp_path):
        assert load_config(_write(tmp_path, "")) == EnforcerConfig.default()

    def test_unknown_keys_ignored(self, tmp_path, caplog):
        path = _write(tmp_path, "colour: blue\n")
        with caplog.at_level(logging.WARNING, logger="classenforcer"):
            config = load_config(path)

        assert config == EnforcerConfig.default()
        assert "colour" in caplog.text

    def test_missing_explicit_path(self, tmp_path):
        with pytest.raises(EnforcerError) as exc_info:
            load_config(tmp_path / "nope.yml")
        assert exc_info.value.error_code == codes.CONFIG_INVALID

    def test_invalid_yaml(self, tmp_path):
        with pytest.raises(EnforcerError) as exc_info:
            load_config(_write(tmp_path, "field_sentinel: [unclosed\n"))
        assert exc_info.value.error_code == codes.CONFIG_INVALID
        assert exc_info.value.cause is not None

    def test_non_mapping_root(self, tmp_path):
        with pytest.raises(EnforcerError):
            load_config(_write(tmp_path, "- a\n- b\n"))

    def test_error_level_issue_rejected(self, tmp_path):
        with pytest.raises(EnforcerError) as exc_info:
            load_config(_write(tmp_path, "unresolved_fields: sometimes\n"))
        assert "unresolved_fields" in exc_info.value.details["issues"]


class TestValidateConfig:

    def test_default_is_clean(self):
        assert validate_config(EnforcerConfig.default()) == []

    @pytest.mark.parametrize("sentinel", [0, "", False])
    def test_falsy_field_sentinel_warns(self, sentinel):
        issues = validate_config(EnforcerConfig(field_sentinel=sentinel))
        assert [(i.level, i.path) for i in issues] == [("warn", "field_sentinel")]

    def test_none_constant_sentinel_warns(self):
        issues = validate_config(EnforcerConfig(constant_sentinel=None))
        assert [(i.level, i.path) for i in issues] == [("warn", "constant_sentinel")]

    def test_bad_accessor_name(self):
        issues = validate_config(EnforcerConfig(singleton_accessors=("get instance",)))
        assert issues[0].level == "error"
        assert issues[0].path == "singleton_accessors"

    def test_issue_str(self):
        issues = validate_config(EnforcerConfig(unresolved_fields="never"))
        text = str(issues[0])
        assert text.startswith("[error] [unresolved_fields]")
        assert "Hint:" in text
