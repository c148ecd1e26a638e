"""
registry.py
Maps protocol command names (INSERT, REMOVE, ...) to handlers.
Each command declares how many arguments it takes; optional validators
check the raw argument tokens before the handler runs.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from trie_autocompleter.core.errors import InvalidInputError

Handler = Callable[..., Any]
Validator = Callable[[List[str]], Optional[str]]


class UnknownCommandError(InvalidInputError):
    """The first token of a line is not a registered command."""


@dataclass
class Command:
    name: str
    handler: Handler
    arity: int
    usage: str = ""


class CommandRegistry:
    """
    Registry of protocol commands.
    Supports:
     - command handlers with a fixed argument count
     - input validators returning an error message or None
    Handler exceptions are not swallowed here; the CLI decides which ones
    are recoverable.
    """

    def __init__(self):
        self.commands: Dict[str, Command] = {}
        self.validators: Dict[str, Validator] = {}

    # COMMANDS ----------------------------------------------------------------
    def add_command(self, name: str, handler: Handler, arity: int = 0, usage: str = "") -> None:
        self.commands[name] = Command(name, handler, arity, usage or name)

    def get(self, name: str) -> Optional[Command]:
        return self.commands.get(name)

    def names(self) -> List[str]:
        return sorted(self.commands)

    def __contains__(self, name: str) -> bool:
        return name in self.commands

    # VALIDATORS --------------------------------------------------------------
    def add_validator(self, name: str, validator: Validator) -> None:
        """Validator returns None if the arguments are fine, else a message."""
        self.validators[name] = validator

    def validate(self, name: str, args: List[str]) -> Optional[str]:
        cmd = self.commands.get(name)
        if cmd is None:
            return f"unknown command: {name}"
        if len(args) != cmd.arity:
            return f"usage: {cmd.usage}"
        validator = self.validators.get(name)
        if validator is None:
            return None
        return validator(args)

    # DISPATCH ----------------------------------------------------------------
    def dispatch(self, name: str, args: List[str]) -> Any:
        if name not in self.commands:
            raise UnknownCommandError(f"unknown command: {name}")
        problem = self.validate(name, args)
        if problem:
            raise InvalidInputError(problem)
        return self.commands[name].handler(*args)
