"""Commands the player types and the list of known command words."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .console import Console


class Command(ABC):
    """A command word with an optional second word."""

    def __init__(self, word: str = "", argument: str = "") -> None:
        self.word = word
        self.argument = argument

    def has_argument(self) -> bool:
        return self.argument != ""

    @abstractmethod
    def execute(self, console: Console) -> None:
        """Carry out the command, talking to the player through the console."""


class CommandList:
    """Ordered mapping of command words to commands."""

    def __init__(self) -> None:
        self._entries: list[tuple[str, Command]] = []

    def add(self, word: str, command: Command) -> None:
        self._entries.append((word, command))

    def replace(self, index: int, word: str, command: Command) -> None:
        """Put a word and command in place of the entry at an index."""
        self._entries[index] = (word, command)

    def index_of(self, word: str) -> int:
        """Return the position of a word; raise ValueError if it is unknown."""
        for index, (known, _) in enumerate(self._entries):
            if known == word:
                return index
        raise ValueError(f"unknown command: {word!r}")

    def get(self, word: str) -> Command | None:
        """Return the command for a word, or None if the word is unknown."""
        try:
            return self._entries[self.index_of(word)][1]
        except ValueError:
            return None

    def __contains__(self, word: object) -> bool:
        return any(known == word for known, _ in self._entries)

    def __iter__(self) -> Iterator[str]:
        return (word for word, _ in self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def help_text(self) -> str:
        """Return the list of command words with usage notes."""
        text = "Los comandos que puedes usar son:\n"
        text += "".join(f"\t{word}\n" for word in self)
        text += (
            "\t-> El comando de movimiento consiste en dos palabras. \n"
            "\t-> Los otros comandos no van seguido de una segunda palabra."
        )
        return text