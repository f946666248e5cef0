import os
import sys
from abc import ABC, abstractmethod
from typing import List, Optional
from rich.console import Console
from vortex_cursor.config import USAGE
from vortex_cursor.initializer import SetupAborted, init_vortex_cursor

console = Console(highlight=False, emoji=False, soft_wrap=True)
err_console = Console(stderr=True, highlight=False, emoji=False, soft_wrap=True)


class Command(ABC):
    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def execute(self):
        """Executes the command in the current working directory."""
        pass


class InitCommand(Command):
    def __init__(self):
        super().__init__("init")

    def execute(self):
        init_vortex_cursor(os.getcwd())


class CommandRegistry:
    def __init__(self):
        self.commands = {}

    def register(self, command: Command):
        self.commands[command.name] = command

    def get(self, name: Optional[str]) -> Optional[Command]:
        return self.commands.get(name)


def create_registry() -> CommandRegistry:
    registry = CommandRegistry()
    registry.register(InitCommand())
    return registry


def main(argv: Optional[List[str]] = None) -> int:
    argv = sys.argv[1:] if argv is None else argv
    command = create_registry().get(argv[0] if argv else None)

    if command is None:
        console.print(USAGE, markup=False)
        return 1

    try:
        command.execute()
    except SetupAborted as e:
        err_console.print(f"❌ {e}", markup=False)
        return 1
    except KeyboardInterrupt:
        err_console.print("\nAborted.")
        return 1
    except Exception as e:
        err_console.print(f"Error: {e}", markup=False)
        return 1
    return 0
