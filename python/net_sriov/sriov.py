import argparse
import sys
from typing import Any, Dict, List

from . import __version__
from .commands import get_all_commands, get_command
from .commands.cmd import BaseCmd
from .commands.errors import ConfigurationError, SriovError
from .settings import load_settings

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="net-sriov-tools",
        description="PXVIRT SR-IOV Network Interface Card Manager",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  net-sriov-tools list                     # List SR-IOV capable interfaces
  net-sriov-tools list eth0 --output json  # List VFs of eth0 as JSON
  net-sriov-tools create eth0 4            # Create 4 VFs on eth0
  net-sriov-tools save                     # Save VF counts of all interfaces
  net-sriov-tools load                     # Re-apply saved VF counts
        """
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}"
    )

    parser.add_argument(
        "--config",
        metavar="FILE.yaml",
        help="Read settings from this YAML file"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Warn about sysfs values that could not be parsed"
    )

    parser.add_argument(
        "--strict-exit-codes",
        action="store_true",
        default=None,
        help="Exit with a non-zero code that identifies the kind of failure"
    )

    subparsers = parser.add_subparsers(dest="subcommand", metavar="COMMAND")
    for command in get_all_commands():
        subparser = subparsers.add_parser(command.command, help=command.description(),
                                          description=command.description())
        command.add_arguments(subparser)

    return parser

def run_command(command: BaseCmd, env: Dict[str, Any]) -> int:
    """
    Executes a command and maps the outcome to an exit code.
    Diagnostics go to stderr.
    """
    try:
        success = command.execute(env)
    except SriovError as e:
        print(e, file=sys.stderr)
        return e.exit_code
    return 0 if success else 1

def main(argv: List[str] | None = None) -> int:
    """
    Parse command line arguments and execute the requested command.

    Returns 0 unless strict exit codes are enabled.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.subcommand is None:
        parser.print_help()
        print("")
        return 0

    try:
        settings = load_settings(args.config)
    except ConfigurationError as e:
        print(e, file=sys.stderr)
        return e.exit_code if args.strict_exit_codes else 0

    strict = settings['strict_exit_codes'] if args.strict_exit_codes is None else args.strict_exit_codes

    env = dict(settings)
    env.update({key: value for key, value in vars(args).items()
                if key not in ('config', 'strict_exit_codes')})

    exit_code = run_command(get_command(args.subcommand), env)
    return exit_code if strict else 0

if __name__ == "__main__":
    sys.exit(main())
