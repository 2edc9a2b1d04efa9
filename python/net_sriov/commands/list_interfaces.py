import sys
from argparse import ArgumentParser
from pathlib import Path
from typing import Any, Dict

from .cmd import BaseCmd
from .devices import get_sriov_interfaces, get_virtual_functions
from .errors import SysfsReadError
from .output import OUTPUT_JSON, print_records
from .sysfs import SYS_CLASS_NET

INTERFACE_HEADERS = ["Name", "Addr", "PCIeAddr", "Max-VF", "Inuse-VF"]
DEVICE_HEADERS = ["Name", "Addr", "PCIeAddr", "Driver"]

def list_sriov_capable_interfaces(net_dir: Path, output: str | None = None, verbose=False) -> bool:
    """
    Prints all SR-IOV capable interfaces. An unreadable network directory is
    reported and rendered as an empty list.
    """
    success = True
    try:
        interfaces = get_sriov_interfaces(net_dir, verbose)
    except SysfsReadError:
        print("Failed to read network interfaces.", file=sys.stderr)
        interfaces = []
        success = False

    print_records(INTERFACE_HEADERS, interfaces, output)
    return success

def list_sriov_devices(net_dir: Path, interface: str, output: str | None = None, verbose=False):
    try:
        functions = get_virtual_functions(net_dir, interface, verbose)
    except SysfsReadError as e:
        raise SysfsReadError(f"Failed to read SR-IOV devices for interface: {interface}") from e

    print_records(DEVICE_HEADERS, functions, output)

class ListCmd(BaseCmd):
    """ Command to list SR-IOV interfaces or the VFs of one interface. """

    command = "list"

    def name(self) -> str:
        return "List SR-IOV Devices"

    def description(self) -> str:
        return "List SR-IOV capable network interfaces"

    def add_arguments(self, parser: ArgumentParser):
        parser.add_argument(
            "interface",
            nargs="?",
            help="Specific network interface to list SR-IOV devices for"
        )
        parser.add_argument(
            "--output",
            choices=[OUTPUT_JSON],
            help="Output format"
        )

    def execute(self, env: Dict[str, Any]) -> bool:
        net_dir = env.get('sysfs_net_dir', SYS_CLASS_NET)
        output = env.get('output')
        verbose = env.get('verbose', False)

        interface = env.get('interface')
        if interface:
            list_sriov_devices(net_dir, interface, output, verbose)
            return True
        return list_sriov_capable_interfaces(net_dir, output, verbose)
