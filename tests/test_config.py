import pytest

from featuredoc.core.config import FeatureDocConfig, load_config
from featuredoc.core.errors import ConfigError


def test_missing_file_gives_defaults(tmp_path):
    config = load_config(tmp_path / "absent.yaml")
    assert config == FeatureDocConfig()
    assert config.feature_label is None


def test_load_yaml(tmp_path):
    path = tmp_path / ".featuredoc.yaml"
    path.write_text(
        "feature_label: '<code>{feature}</code>'\n"
        "manifest_name: Cargo.toml\n"
        "start_marker: '<!-- begin -->'\n",
        encoding="utf-8",
    )
    config = load_config(path)

    assert config.feature_label == "<code>{feature}</code>"
    assert config.start_marker == "<!-- begin -->"
    assert config.end_marker == FeatureDocConfig().end_marker


def test_empty_file_gives_defaults(tmp_path):
    path = tmp_path / ".featuredoc.yaml"
    path.write_text("", encoding="utf-8")
    assert load_config(path) == FeatureDocConfig()


@pytest.mark.parametrize("content, expected", [
    ("- a\n- b\n", "must be a mapping"),
    ("colour: red\n", "Unknown keys"),
    ("feature_label: plain\n", "feature_label must contain"),
    ("start_marker: 3\n", "must be a string"),
    ("start_marker: same\nend_marker: same\n", "distinct"),
    ("feature_label: [unclosed\n", "Failed to load config"),
    ("default_marker: null\n", "'default_marker' .* must be a string"),
    ("manifest_name: null\n", "'manifest_name' .* must be a string"),
    ("1: x\nfoo: y\n", "Unknown keys .*: 1, foo"),
])
def test_invalid_configs(tmp_path, content, expected):
    path = tmp_path / ".featuredoc.yaml"
    path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError, match=expected):
        load_config(path)


def test_override_ignores_none():
    base = FeatureDocConfig(feature_label="**{feature}**")
    assert base.override(feature_label=None) is base
    assert base.override(feature_label="_{feature}_").feature_label == "_{feature}_"


def test_null_feature_label_means_default(tmp_path):
    path = tmp_path / ".featuredoc.yaml"
    path.write_text("feature_label: null\n", encoding="utf-8")
    assert load_config(path).feature_label is None


def test_explicit_missing_file_is_an_error(tmp_path):
    with pytest.raises(ConfigError, match="Config file not found"):
        load_config(tmp_path / "absent.yaml", required=True)
