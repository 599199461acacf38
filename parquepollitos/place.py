"""Places in the park, joined by exits to the four compass points."""

from __future__ import annotations

from dataclasses import dataclass, field

from .item import Item

_DIRECTIONS = {"n": 0, "s": 1, "e": 2, "o": 3}


def exit_index(direction: str) -> int:
    """Return the exit slot for a direction letter: n, s, e or o.

    Raises ValueError for any other letter.
    """
    try:
        return _DIRECTIONS[direction]
    except KeyError:
        raise ValueError(f"unknown direction: {direction!r}") from None


@dataclass(eq=False)
class Place:
    """A zone of the park with exits, rewards and a number of keys needed to enter."""

    description: str = "Espacio del parque "
    keys_required: int = 0
    exits: list[Place | None] = field(default_factory=lambda: [None] * 4, repr=False)
    rewards: list[Item] = field(default_factory=list)

    def exit(self, direction: str) -> Place | None:
        """Return the place reached by going in a direction, or None."""
        try:
            return self.exits[exit_index(direction)]
        except ValueError:
            return None

    def set_exits(
        self,
        north: Place | None,
        south: Place | None,
        east: Place | None,
        west: Place | None,
    ) -> None:
        self.exits = [north, south, east, west]

    def add_reward(self, item: Item) -> None:
        self.rewards.append(item)

    def take_reward(self, index: int) -> Item:
        """Remove and return the reward at an index."""
        return self.rewards.pop(index)

    def reward(self, index: int) -> Item:
        return self.rewards[index]

    def long_description(self) -> str:
        """Return the description with the rewards on offer."""
        lines = [
            self.description,
            "En esta zona del parque tenemos: ",
            "Un enemigo",
            "Un pollo.",
            "Al rescatar al pollo podrás obtener lo siguiente:",
        ]
        lines.extend(f"\t{item.name}" for item in self.rewards)
        return "\n".join(lines)