from abc import ABC, abstractmethod
from argparse import ArgumentParser
from typing import Any, Dict

class BaseCmd(ABC):
    """ Base class for all commands."""

    # Subcommand name on the command line
    command: str = ""

    def name(self) -> str:
        return self.__class__.__name__

    def description(self) -> str:
        return "No description provided."

    def add_arguments(self, parser: ArgumentParser):
        pass

    @abstractmethod
    def execute(self, env: Dict[str, Any]) -> bool:
        return False
