import pytest
from pathlib import Path
import sys
import os

# Add the parent directory to the path so we can import the package
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))


class FakeSysfs:
    """Builds a /sys/class/net lookalike with device attributes and driver symlinks."""

    def __init__(self, root: Path):
        self.net_dir = root / "sys" / "class" / "net"
        self.drivers_dir = root / "sys" / "bus" / "pci" / "drivers"
        self.net_dir.mkdir(parents=True)
        self.drivers_dir.mkdir(parents=True)

    def add_interface(self, name, address="aa:bb:cc:dd:ee:00", total_vfs=None, num_vfs=None,
                      pci_slot="0000:01:00.0", driver=None, uevent=None):
        iface_dir = self.net_dir / name
        device_dir = iface_dir / "device"
        device_dir.mkdir(parents=True)
        if address is not None:
            (iface_dir / "address").write_text(f"{address}\n")
        if total_vfs is not None:
            (device_dir / "sriov_totalvfs").write_text(f"{total_vfs}\n")
        if num_vfs is not None:
            (device_dir / "sriov_numvfs").write_text(f"{num_vfs}\n")
        if uevent is None and pci_slot is not None:
            uevent = f"DRIVER={driver or 'ixgbe'}\nPCI_CLASS=20000\nPCI_SLOT_NAME={pci_slot}\n"
        if uevent is not None:
            (device_dir / "uevent").write_text(uevent)
        if driver is not None:
            target = self.drivers_dir / driver
            target.mkdir(exist_ok=True)
            (device_dir / "driver").symlink_to(target)
        return iface_dir

    def numvfs(self, name) -> str:
        return (self.net_dir / name / "device" / "sriov_numvfs").read_text()


@pytest.fixture
def sysfs(tmp_path):
    return FakeSysfs(tmp_path)


@pytest.fixture
def config_dir(tmp_path):
    return tmp_path / "etc" / "network" / "sriov.d"


@pytest.fixture
def env(sysfs, config_dir):
    """Shared command environment pointing at the fake sysfs tree."""
    return {
        'sysfs_net_dir': sysfs.net_dir,
        'config_dir': config_dir,
        'verbose': False,
    }
