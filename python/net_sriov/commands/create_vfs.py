from argparse import ArgumentParser, ArgumentTypeError
from pathlib import Path
from typing import Any, Dict

from .cmd import BaseCmd
from .errors import PreconditionError, SysfsReadError, SysfsWriteError
from .sysfs import NUM_VFS_ATTR, SYS_CLASS_NET, TOTAL_VFS_ATTR, device_dir, read_count, write_attr

def vf_count(value: str) -> int:
    try:
        count = int(value)
    except ValueError:
        raise ArgumentTypeError(f"invalid VF count: '{value}'")
    if count < 0:
        raise ArgumentTypeError(f"VF count must not be negative: '{value}'")
    return count

def create_sriov_devices(net_dir: Path, interface: str, nums: int, verbose=False):
    """
    Sets the number of VFs of an interface.

    The request must not exceed sriov_totalvfs, and a nonzero count can only
    be set while no VFs are active. Writing 0 always goes through so existing
    VFs can be removed.

    Raises:
        SysfsReadError: capacity or active count cannot be read.
        PreconditionError: the request is rejected, nothing is written.
        SysfsWriteError: the kernel refused the new count.
    """
    dev_dir = device_dir(net_dir, interface)

    try:
        max_vfs = read_count(dev_dir / TOTAL_VFS_ATTR, verbose)
    except SysfsReadError as e:
        raise SysfsReadError(f"Failed to read total VFs for interface: {interface}") from e

    if nums > max_vfs:
        raise PreconditionError(f"Requested VFs exceed the maximum supported VFs for interface: {interface}")

    try:
        inuse_vfs = read_count(dev_dir / NUM_VFS_ATTR, verbose)
    except SysfsReadError as e:
        raise SysfsReadError(f"Failed to read in-use VFs for interface: {interface}") from e

    if inuse_vfs > 0 and nums > 0:
        raise PreconditionError(f"Interface: {interface} has {inuse_vfs} in-use VFs, please remove them first")

    try:
        write_attr(dev_dir / NUM_VFS_ATTR, str(nums))
    except SysfsWriteError as e:
        raise SysfsWriteError(f"Failed to set the number of VFs for interface: {interface}") from e

    print(f"Created {nums} SR-IOV devices for interface: {interface}")

class CreateCmd(BaseCmd):
    """ Command to create VFs on an interface. """

    command = "create"

    def name(self) -> str:
        return "Create SR-IOV Devices"

    def description(self) -> str:
        return "Create SR-IOV devices for a network interface"

    def add_arguments(self, parser: ArgumentParser):
        parser.add_argument(
            "interface",
            help="Network interface to create SR-IOV devices for"
        )
        parser.add_argument(
            "nums",
            type=vf_count,
            help="Number of SR-IOV devices to create"
        )

    def execute(self, env: Dict[str, Any]) -> bool:
        create_sriov_devices(env.get('sysfs_net_dir', SYS_CLASS_NET), env['interface'], env['nums'],
                             env.get('verbose', False))
        return True
