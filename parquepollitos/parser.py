"""Turns the player's typed lines into commands."""

from __future__ import annotations

from .commands import Command, CommandList
from .console import Console

_PROMPT = ">>>>"


class Parser:
    """Reads a command word and an optional second word from the player."""

    def __init__(self, commands: CommandList | None = None) -> None:
        self.commands = commands if commands is not None else CommandList()

    def next_command(self, console: Console) -> Command:
        """Read lines until one starts with a known word; return its command.

        The second word of the line becomes the command's argument.
        Raises EOFError when the input runs out.
        """
        prompt = _PROMPT
        while True:
            words = console.read_line(prompt).split()
            prompt = ""
            first = words[0] if words else ""
            second = words[1] if len(words) > 1 else ""
            command = self.commands.get(first)
            if command is not None:
                command.argument = second
                return command
            console.write("El comando que ingresaste no es valido!\nIntenta de nuevo :)")