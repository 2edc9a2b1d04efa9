from pathlib import Path
from typing import Dict, List, Optional

from .errors import SysfsReadError
from .sysfs import (NUM_VFS_ATTR, TOTAL_VFS_ATTR, device_dir, list_interface_names, parse_count,
                    read_attr, read_count, read_driver_name, read_pci_slot_name)


class SriovInterface:
    """Represents an SR-IOV capable network interface (physical function)."""

    def __init__(self, name: str, address: str, pci_address: str, total_vfs: int, num_vfs: int):
        self.name = name
        self.address = address
        self.pci_address = pci_address
        self.total_vfs = total_vfs
        self.num_vfs = num_vfs

    def to_dict(self) -> Dict:
        return {
            "Name": self.name,
            "Addr": self.address,
            "PCIeAddr": self.pci_address,
            "Max-VF": self.total_vfs,
            "Inuse-VF": self.num_vfs
        }

    def __str__(self) -> str:
        return f"SriovInterface(name={self.name}, vfs={self.num_vfs}/{self.total_vfs})"


class VirtualFunction:
    """Represents a VF network interface created on top of a physical function."""

    def __init__(self, name: str, address: str, pci_address: str, driver: str):
        self.name = name
        self.address = address
        self.pci_address = pci_address
        self.driver = driver

    def to_dict(self) -> Dict:
        return {
            "Name": self.name,
            "Addr": self.address,
            "PCIeAddr": self.pci_address,
            "Driver": self.driver
        }

    def __str__(self) -> str:
        return f"VirtualFunction(name={self.name}, driver={self.driver})"


def vf_interface_name(interface: str, index: int) -> str:
    return f"{interface}v{index}"

def get_total_vfs(net_dir: Path, interface: str, verbose=False) -> Optional[int]:
    """
    Returns the VF capacity of an interface, or None when the interface does
    not expose sriov_totalvfs at all.
    """
    path = device_dir(net_dir, interface) / TOTAL_VFS_ATTR
    if not path.exists():
        return None
    try:
        return read_count(path, verbose)
    except SysfsReadError:
        return None

def read_interface(net_dir: Path, interface: str, verbose=False) -> Optional[SriovInterface]:
    """
    Reads an interface from sysfs.

    Returns:
        The interface, or None if it is not SR-IOV capable (no sriov_totalvfs
        attribute or a capacity of 0).
    """
    total_vfs = get_total_vfs(net_dir, interface, verbose)
    if not total_vfs:
        return None

    dev_dir = device_dir(net_dir, interface)
    try:
        address = read_attr(Path(net_dir) / interface / 'address')
    except SysfsReadError:
        address = ""
    try:
        num_vfs = read_count(dev_dir / NUM_VFS_ATTR, verbose)
    except SysfsReadError:
        num_vfs = 0

    return SriovInterface(interface, address, read_pci_slot_name(dev_dir), total_vfs, num_vfs)

def get_sriov_interfaces(net_dir: Path, verbose=False) -> List[SriovInterface]:
    """
    Scans the network device directory for SR-IOV capable interfaces.

    Raises:
        SysfsReadError: the network device directory cannot be listed.
    """
    interfaces = []
    for name in list_interface_names(net_dir):
        interface = read_interface(net_dir, name, verbose)
        if interface is not None:
            interfaces.append(interface)
    return interfaces

def get_virtual_functions(net_dir: Path, interface: str, verbose=False) -> List[VirtualFunction]:
    """
    Lists the VFs of an interface by probing {interface}v0 .. v{total-1}.
    VFs without a readable address are skipped.

    Raises:
        SysfsReadError: the capacity of the interface cannot be read.
    """
    total_vfs = parse_count(read_attr(device_dir(net_dir, interface) / TOTAL_VFS_ATTR),
                            source=interface, verbose=verbose)

    functions = []
    for index in range(total_vfs):
        vf_name = vf_interface_name(interface, index)
        try:
            address = read_attr(Path(net_dir) / vf_name / 'address')
        except SysfsReadError:
            continue
        vf_dev_dir = device_dir(net_dir, vf_name)
        functions.append(VirtualFunction(vf_name, address, read_pci_slot_name(vf_dev_dir),
                                         read_driver_name(vf_dev_dir)))
    return functions
