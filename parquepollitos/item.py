"""Items that characters carry and places hand out."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class Item:
    """A named object worth a number of points."""

    points: int = 50
    name: str = "hacha"
    feature: str = "objeto perron"

    def describe(self) -> str:
        """Return the item's description card."""
        return "\n".join(
            [
                "------------ DESCRIPCION DEL ITEM ------------",
                f"Nombre del Item: {self.name}",
                f"Caracteristicas:{self.feature}",
                f"Valor:{self.points} puntos",
                "---------------------------------",
            ]
        )

    def __add__(self, other: Item) -> Item:
        """Return an item like this one holding the points of both."""
        if not isinstance(other, Item):
            return NotImplemented
        return Item(self.points + other.points, self.name, self.feature)