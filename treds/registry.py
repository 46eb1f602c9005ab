"""Registry of the commands the server understands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Dict, List

ValidationHook = Callable[[List[str]], None]
"""Checks a command's arguments; raises CommandError when they are wrong."""

ExecutionHook = Callable[[List[str], Any], str]
"""Runs a command against a store and returns the reply text."""


class CommandError(Exception):
    """Raised for unknown or duplicate commands and for invalid arguments."""


@dataclass(frozen=True)
class CommandRegistration:
    """A named command with its argument check and its action."""

    name: str
    validate: ValidationHook
    execute: ExecutionHook
    is_write: bool = False


class CommandRegistry:
    """Maps command names to their registrations."""

    def __init__(self) -> None:
        self._commands: Dict[str, CommandRegistration] = {}

    def add(self, registration: CommandRegistration) -> None:
        """Register a command; a name may be registered only once."""
        if registration.name in self._commands:
            raise CommandError(
                f"command with name {registration.name} already present"
            )
        self._commands[registration.name] = registration

    def retrieve(self, name: str) -> CommandRegistration:
        """Look a command up by name, ignoring case."""
        try:
            return self._commands[name.upper()]
        except KeyError:
            raise CommandError(
                f"command with name {name} not found in registry"
            ) from None

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.upper() in self._commands

    def __len__(self) -> int:
        return len(self._commands)