from pathlib import Path
from typing import Any, Dict

import yaml

from .commands.errors import ConfigurationError
from .commands.persist_config import SRIOV_CONFIG_DIR
from .commands.sysfs import SYS_CLASS_NET

DEFAULT_SETTINGS_FILE = Path('/etc/net-sriov-tools/config.yaml')

DEFAULT_SETTINGS = {
    'sysfs_net_dir': SYS_CLASS_NET,
    'config_dir': SRIOV_CONFIG_DIR,
    'strict_exit_codes': False,
}

def load_settings(file_path: str | Path | None = None) -> Dict[str, Any]:
    """
    Load settings from a YAML file.
    Expected YAML format:
    ---
    sysfs_net_dir: /sys/class/net
    config_dir: /etc/network/sriov.d
    strict_exit_codes: false

    A missing default settings file yields the defaults; a missing file that
    was asked for explicitly is an error.
    """
    settings = dict(DEFAULT_SETTINGS)
    path = Path(file_path) if file_path else DEFAULT_SETTINGS_FILE

    try:
        with open(path, 'r') as file:
            data = yaml.safe_load(file)
    except FileNotFoundError:
        if file_path:
            raise ConfigurationError(f"Settings file not found: {path}")
        return settings
    except OSError as e:
        raise ConfigurationError(f"Could not read settings file {path}: {e}")
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Invalid YAML format in {path}: {e}")

    if data is None:
        return settings
    if not isinstance(data, dict):
        raise ConfigurationError(f"Settings file {path} must contain a dictionary at root level")

    unknown = sorted(set(data) - set(DEFAULT_SETTINGS))
    if unknown:
        raise ConfigurationError(f"Unknown settings in {path}: {', '.join(map(str, unknown))}")

    for key in ('sysfs_net_dir', 'config_dir'):
        if key in data:
            if not isinstance(data[key], str) or not data[key]:
                raise ConfigurationError(f"'{key}' must be a non-empty path")
            settings[key] = Path(data[key])

    if 'strict_exit_codes' in data:
        if not isinstance(data['strict_exit_codes'], bool):
            raise ConfigurationError("'strict_exit_codes' must be true or false")
        settings['strict_exit_codes'] = data['strict_exit_codes']

    return settings
