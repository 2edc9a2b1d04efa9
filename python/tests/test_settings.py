from pathlib import Path
from unittest.mock import patch

import pytest

from net_sriov.commands.errors import ConfigurationError
from net_sriov.settings import DEFAULT_SETTINGS, load_settings


@pytest.fixture
def settings_file(tmp_path):
    path = tmp_path / "config.yaml"

    def write(content):
        path.write_text(content)
        return path

    return write


class TestLoadSettings:
    """Test cases for reading the YAML settings file."""

    def test_missing_default_file(self, tmp_path):
        with patch('net_sriov.settings.DEFAULT_SETTINGS_FILE', tmp_path / "missing.yaml"):
            assert load_settings() == DEFAULT_SETTINGS

    def test_missing_explicit_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Settings file not found"):
            load_settings(tmp_path / "missing.yaml")

    def test_full_file(self, settings_file):
        path = settings_file("""
sysfs_net_dir: /tmp/net
config_dir: /tmp/sriov.d
strict_exit_codes: true
""")
        settings = load_settings(path)

        assert settings['sysfs_net_dir'] == Path("/tmp/net")
        assert settings['config_dir'] == Path("/tmp/sriov.d")
        assert settings['strict_exit_codes'] is True

    def test_partial_file_keeps_defaults(self, settings_file):
        settings = load_settings(settings_file("config_dir: /srv/sriov.d\n"))

        assert settings['config_dir'] == Path("/srv/sriov.d")
        assert settings['sysfs_net_dir'] == DEFAULT_SETTINGS['sysfs_net_dir']
        assert settings['strict_exit_codes'] is False

    def test_empty_file(self, settings_file):
        assert load_settings(settings_file("")) == DEFAULT_SETTINGS

    @pytest.mark.parametrize("content,message", [
        ("config_dir: [unclosed\n", "Invalid YAML"),
        ("- a\n- b\n", "dictionary at root level"),
        ("colour: blue\n", "Unknown settings"),
        ("config_dir: 5\n", "non-empty path"),
        ("strict_exit_codes: maybe\n", "true or false"),
    ])
    def test_invalid_files(self, settings_file, content, message):
        with pytest.raises(ConfigurationError, match=message):
            load_settings(settings_file(content))
