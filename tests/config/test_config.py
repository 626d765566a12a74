"""
Unit tests for the configuration helpers in weightdag.config.
"""

import pytest

from weightdag.config import ConfigAccessor, ConfigError, DAGOptions, load_options


@pytest.fixture
def config_file(tmp_path):
    path = tmp_path / "weightdag.cfg"
    path.write_text(
        """
[dag]
memoize = no
warn_on_rejected_edge = True

[other]
key = value
"""
    )
    return path


@pytest.mark.short
def test_config_accessor_get(config_file):
    config = ConfigAccessor(config_file)

    assert config.get("other", "key") == "value"
    assert config.get("other", "missing", default="fallback") == "fallback"
    assert config.get("nosection", "key") is None
    assert sorted(config.sections()) == ["dag", "other"]


@pytest.mark.short
def test_config_accessor_missing_file(tmp_path):
    config = ConfigAccessor(tmp_path / "nothing.cfg")

    assert config.sections() == []
    assert config.get_bool("dag", "memoize", True) is True


@pytest.mark.short
def test_load_options(config_file):
    options = load_options(config_file)

    assert options == DAGOptions(memoize=False, warn_on_rejected_edge=True)


@pytest.mark.short
def test_load_options_defaults(tmp_path):
    assert load_options(tmp_path / "nothing.cfg") == DAGOptions()


@pytest.mark.short
def test_invalid_boolean(tmp_path):
    path = tmp_path / "weightdag.cfg"
    path.write_text("[dag]\nmemoize = sometimes\n")

    with pytest.raises(ConfigError, match="memoize"):
        load_options(path)
