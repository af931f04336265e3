import dataclasses

import pytest

from web_json.utils.config import DEFAULT_CONFIG, JsonHelperConfig, load_config


def test_load_config_missing_file_uses_defaults(tmp_path):
    config = load_config(str(tmp_path / "missing.yaml"), environ={})
    assert config == JsonHelperConfig()
    assert config.content_type == "application/json"
    assert not (tmp_path / "missing.yaml").exists()


def test_load_config_reads_yaml(tmp_path):
    path = tmp_path / "web_json.yaml"
    path.write_text(
        "web_json:\n"
        "  content_type: 'application/json; charset=utf-8'\n"
        "  log_level: DEBUG\n"
    )
    config = load_config(str(path), environ={})
    assert config.content_type == "application/json; charset=utf-8"
    assert config.log_level == "DEBUG"


def test_load_config_partial_yaml_keeps_other_defaults(tmp_path):
    path = tmp_path / "web_json.yaml"
    path.write_text("web_json:\n  log_level: WARNING\n")
    config = load_config(str(path), environ={})
    assert config.content_type == DEFAULT_CONFIG.content_type
    assert config.log_level == "WARNING"


def test_load_config_ignores_unknown_keys(tmp_path):
    path = tmp_path / "web_json.yaml"
    path.write_text("web_json:\n  content_type: application/hal+json\n  pretty: true\n")
    config = load_config(str(path), environ={})
    assert config == JsonHelperConfig(content_type="application/hal+json")


@pytest.mark.parametrize(
    "contents",
    [
        "web_json: [not, a, mapping]\n",
        "web_json: {content_type: [unclosed\n",
        "- just\n- a\n- list\n",
    ],
)
def test_load_config_bad_file_falls_back_to_defaults(tmp_path, contents):
    path = tmp_path / "web_json.yaml"
    path.write_text(contents)
    assert load_config(str(path), environ={}) == DEFAULT_CONFIG


def test_load_config_empty_file_uses_defaults(tmp_path):
    path = tmp_path / "web_json.yaml"
    path.write_text("")
    assert load_config(str(path), environ={}) == DEFAULT_CONFIG


def test_environment_overrides_file(tmp_path):
    path = tmp_path / "web_json.yaml"
    path.write_text("web_json:\n  content_type: application/hal+json\n")
    environ = {
        "WEB_JSON_CONTENT_TYPE": "application/json; charset=utf-8",
        "WEB_JSON_LOG_LEVEL": "ERROR",
    }
    config = load_config(str(path), environ=environ)
    assert config.content_type == "application/json; charset=utf-8"
    assert config.log_level == "ERROR"


def test_empty_environment_values_are_ignored(tmp_path):
    config = load_config(str(tmp_path / "missing.yaml"), environ={"WEB_JSON_CONTENT_TYPE": ""})
    assert config.content_type == "application/json"


def test_config_is_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_CONFIG.content_type = "text/plain"
