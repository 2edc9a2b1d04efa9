from pathlib import Path
import pkgutil
import sys
from importlib import import_module
import inspect

from .cmd import BaseCmd

all_commands = []
command_map = {}

def get_all_commands():
    return all_commands

def get_command(name: str) -> BaseCmd | None:
    return command_map.get(name)

def create_command_instance(command_class):
    """Create an instance of a command class, handling special cases."""
    try:
        return command_class()
    except TypeError:
        print(f"Could not instantiate {command_class.__name__}: requires constructor parameters", file=sys.stderr)
        return None

for (_, name, _) in pkgutil.iter_modules([str(Path(__file__).parent)]):
    imported_module = import_module('.' + name, package=__name__)

    for i in dir(imported_module):
        attribute = getattr(imported_module, i)
        if (inspect.isclass(attribute) and not inspect.isabstract(attribute) and issubclass(attribute, BaseCmd)
                and attribute.__module__ == imported_module.__name__):
            instance = create_command_instance(attribute)
            if instance and instance.command:
                all_commands.append(instance)

command_map = {cmd.command: cmd for cmd in all_commands}
