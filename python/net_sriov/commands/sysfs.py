import os
import re
import sys
from pathlib import Path
from typing import List

from .errors import SysfsReadError, SysfsWriteError

SYS_CLASS_NET = Path('/sys/class/net')
NOT_AVAILABLE = 'N/A'

TOTAL_VFS_ATTR = 'sriov_totalvfs'
NUM_VFS_ATTR = 'sriov_numvfs'
PCI_SLOT_KEY = 'PCI_SLOT_NAME='

def device_dir(net_dir: Path, interface: str) -> Path:
    return Path(net_dir) / interface / 'device'

def read_attr(path: Path) -> str:
    """
    Reads a sysfs attribute and returns its content without surrounding whitespace.

    Raises:
        SysfsReadError: the attribute is missing or cannot be read.
    """
    try:
        return Path(path).read_text().strip()
    except (OSError, UnicodeDecodeError) as e:
        raise SysfsReadError(f"Could not read {path}: {e}") from e

def parse_count(content: str, source="", verbose=False) -> int:
    """
    Parses a decimal VF count. Anything that is not a non-negative integer
    counts as 0; the fallback is only reported in verbose mode.
    """
    value = content.strip()
    if re.fullmatch(r'\+?[0-9]+', value):
        return int(value)
    if verbose:
        print(f"Warning: could not parse VF count '{value}' from {source or 'input'}, using 0",
              file=sys.stderr)
    return 0

def read_count(path: Path, verbose=False) -> int:
    return parse_count(read_attr(path), source=path, verbose=verbose)

def write_attr(path: Path, value: str):
    try:
        Path(path).write_text(value)
    except OSError as e:
        raise SysfsWriteError(f"Could not write {value} to {path}: {e}") from e

def read_pci_slot_name(dev_dir: Path) -> str:
    """
    Returns the PCI slot address from the device uevent file.
    N/A when the file cannot be read, empty when it has no PCI_SLOT_NAME line.
    """
    try:
        content = (Path(dev_dir) / 'uevent').read_text()
    except (OSError, UnicodeDecodeError):
        return NOT_AVAILABLE

    for line in content.splitlines():
        if line.startswith(PCI_SLOT_KEY):
            return line[len(PCI_SLOT_KEY):]
    return ""

def read_driver_name(dev_dir: Path) -> str:
    # driver is a symlink like ../../../bus/pci/drivers/ixgbevf
    try:
        target = os.readlink(Path(dev_dir) / 'driver')
    except OSError:
        return NOT_AVAILABLE
    return Path(target).name

def list_interface_names(net_dir: Path) -> List[str]:
    try:
        return sorted(os.listdir(net_dir))
    except OSError as e:
        raise SysfsReadError(f"Could not list {net_dir}: {e}") from e
