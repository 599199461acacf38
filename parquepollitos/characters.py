"""The player, the enemies and the chicks."""

from __future__ import annotations

from dataclasses import dataclass, field

from .item import Item
from .place import Place

_RULE = "---------------------------------------------------------------------"
_KEY_NAME = "Llave"
_LOCKED_ZONE_KEYS = 4


@dataclass(eq=False)
class Character:
    """Someone in the park with a score, a position and an inventory."""

    name: str = "Nico"
    score: int = 100
    position: Place | None = None
    inventory: list[Item] = field(default_factory=list, kw_only=True)

    def add_item(self, item: Item) -> None:
        self.inventory.append(item)

    def item(self, index: int) -> Item:
        return self.inventory[index]

    def location_description(self) -> str:
        return self.position.description

    def inventory_report(self) -> str:
        """Return the description of every item carried."""
        parts = ["------------ INVENTARIO ------------"]
        parts.extend(item.describe() for item in self.inventory)
        parts.append("------------ FIN INVENTARIO ------------")
        return "\n".join(parts)

    def status(self) -> str:
        """Return name, inventory size, score and position."""
        return "\n".join(
            [
                "------------ DESCRIPCION DEL Personaje ------------",
                f"Nombre del Personaje: {self.name}",
                f"Cantidad en Inventario:{len(self.inventory)}",
                f"Valor:{self.score} puntos",
                f"Posicion:{self.location_description()}",
                "---------------------------------",
            ]
        )

    def attack(self, blow: int, enemy: Character) -> str:
        """Return the message for one of the three blows; empty for any other."""
        messages = {
            1: f"{enemy.name} ha sido herido de una patada y aranazo",
            2: f"Haz utilizado tus items en {enemy.name}",
            3: f"Has mordido con rabia a {enemy.name}",
        }
        message = messages.get(blow)
        if message is None:
            return ""
        return "\n".join([_RULE, message, _RULE])

    def count_keys(self) -> int:
        return sum(1 for item in self.inventory if item.name == _KEY_NAME)

    def walk(self, direction: str) -> bool:
        """Move through an exit if it is open; return whether the move happened."""
        target = self.position.exit(direction)
        if target is None:
            return False
        if target.keys_required == 0 or (
            target.keys_required == _LOCKED_ZONE_KEYS
            and self.count_keys() == _LOCKED_ZONE_KEYS
        ):
            self.position = target
            return True
        return False

    def lose_points(self, damage: int) -> None:
        self.score -= damage


@dataclass(eq=False)
class Enemy(Character):
    """A rival guarding a chick."""

    danger_level: int = 0

    def dialogue(self) -> str:
        return "\n".join(
            [
                "------------ ENEMIGO ------------",
                f"Nivel de peligro del enemigo: {self.danger_level}",
                f"Hola Nico, soy: {self.name}",
                f"Como veras, mi puntaje es de:{self.score}",
                "---------------------------------",
            ]
        )


@dataclass(eq=False)
class Chick(Character):
    """A lost chick that rewards its rescuer."""

    value: int = 1
    color: str = "azul"

    def features(self) -> str:
        return "\n".join(
            [
                "------------ DESCRIPCION DEL POLLO ------------",
                f"Color del pollo:{self.color}",
                f"Valor:{self.value} puntos",
                "---------------------------------",
            ]
        )