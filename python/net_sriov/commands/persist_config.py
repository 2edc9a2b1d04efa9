import os
import sys
from pathlib import Path
from typing import Any, Dict

from .cmd import BaseCmd
from .devices import get_total_vfs
from .errors import ConfigurationError, PartialFailureError, SysfsReadError, SysfsWriteError
from .sysfs import (NUM_VFS_ATTR, SYS_CLASS_NET, device_dir, list_interface_names, parse_count, read_attr,
                    write_attr)

SRIOV_CONFIG_DIR = Path('/etc/network/sriov.d')

def save_configuration(net_dir: Path, config_dir: Path, verbose=False):
    """
    Writes the current VF count of every SR-IOV capable interface to
    <config_dir>/<interface>, one decimal number per file.

    Every interface is handled independently; failures are reported as they
    happen and summarized by a PartialFailureError at the end.
    """
    config_dir = Path(config_dir)
    if not config_dir.exists():
        try:
            os.makedirs(config_dir)
        except OSError as e:
            raise ConfigurationError(f"Failed to create configuration directory: {e}") from e

    try:
        names = list_interface_names(net_dir)
    except SysfsReadError as e:
        raise SysfsReadError("Failed to read network interfaces.") from e

    failed = []
    for interface in names:
        if not get_total_vfs(net_dir, interface, verbose):
            continue

        config_file_path = config_dir / interface
        try:
            num_vfs = read_attr(device_dir(net_dir, interface) / NUM_VFS_ATTR)
        except SysfsReadError as e:
            print(f"Failed to read current VFs for interface {interface}: {e}", file=sys.stderr)
            failed.append(interface)
            continue

        try:
            with open(config_file_path, 'w') as f:
                f.write(f"{num_vfs}\n")
            print(f"Configuration for interface {interface} saved to {config_file_path}")
        except OSError as e:
            print(f"Failed to write configuration for interface {interface}: {e}", file=sys.stderr)
            failed.append(interface)

    if failed:
        raise PartialFailureError(f"Failed to save configuration for: {', '.join(failed)}")

def load_configuration(net_dir: Path, config_dir: Path, verbose=False):
    """
    Applies every saved VF count from config_dir to sriov_numvfs of the
    interface the file is named after.
    """
    try:
        entries = sorted(os.listdir(config_dir))
    except OSError as e:
        raise ConfigurationError("Failed to read configuration directory.") from e

    failed = []
    for interface in entries:
        config_file_path = Path(config_dir) / interface
        try:
            with open(config_file_path, 'r') as f:
                content = f.read()
        except (OSError, UnicodeDecodeError):
            print(f"Failed to read configuration file for interface {interface}", file=sys.stderr)
            failed.append(interface)
            continue

        num_vfs = parse_count(content, source=config_file_path, verbose=verbose)
        numvfs_path = device_dir(net_dir, interface) / NUM_VFS_ATTR
        try:
            write_attr(numvfs_path, str(num_vfs))
            print(f"Applied configuration for interface {interface}")
        except SysfsWriteError as e:
            print(f"Failed to apply configuration for interface {interface}: {e}", file=sys.stderr)
            failed.append(interface)

    if failed:
        raise PartialFailureError(f"Failed to apply configuration for: {', '.join(failed)}")

class SaveConfigCmd(BaseCmd):
    """ Command to snapshot VF counts into the configuration directory. """

    command = "save"

    def name(self) -> str:
        return "Save SR-IOV Configuration"

    def description(self) -> str:
        return "Save the current configuration of all SR-IOV capable network interfaces"

    def execute(self, env: Dict[str, Any]) -> bool:
        save_configuration(env.get('sysfs_net_dir', SYS_CLASS_NET), env.get('config_dir', SRIOV_CONFIG_DIR),
                           env.get('verbose', False))
        return True

class LoadConfigCmd(BaseCmd):
    """ Command to re-apply saved VF counts. """

    command = "load"

    def name(self) -> str:
        return "Load SR-IOV Configuration"

    def description(self) -> str:
        return f"Load SR-IOV configurations from {SRIOV_CONFIG_DIR} and apply them"

    def execute(self, env: Dict[str, Any]) -> bool:
        load_configuration(env.get('sysfs_net_dir', SYS_CLASS_NET), env.get('config_dir', SRIOV_CONFIG_DIR),
                           env.get('verbose', False))
        return True
