"""The commands the player can run: help, inventory, movement and fights."""

from __future__ import annotations

from typing import Iterator

from .characters import Character, Chick, Enemy
from .commands import Command, CommandList
from .console import Console

_RULE = "---------------------------------------------------------------------"
_FIGHT_BANNER = "--------------------------------PELEA--------------------------------"
_ROUNDS = 3
_WINNING_BLOWS = 6
_VICTORY_POINTS = 100
_DAMAGE = 10


class HelpCommand(Command):
    """Explains the mission and lists the known command words."""

    def __init__(self, commands: CommandList) -> None:
        super().__init__("ayuda")
        self.commands = commands

    def execute(self, console: Console) -> None:
        console.write(
            "Te encuentras en un parque y tu mision es recuperar a los pollitos perdidos en este."
        )
        console.write(
            "Recuerda que para recuperarlos tendras que vencer a tus enemigos en el camino"
        )
        console.write(self.commands.help_text())


class InventoryCommand(Command):
    """Shows what the player carries."""

    def __init__(self, commands: CommandList, player: Character) -> None:
        super().__init__("si")
        self.commands = commands
        self.player = player

    def execute(self, console: Console) -> None:
        console.write("inventario")
        console.write(self.player.inventory_report())


class MoveCommand(Command):
    """Moves the player through the exit named by the second word."""

    def __init__(self, player: Character) -> None:
        super().__init__("movimiento")
        self.player = player

    def execute(self, console: Console) -> None:
        if not self.has_argument():
            console.write("A donde quieres ir?... necesitamos una direccion ...")
            console.write("Puede ser n para norte, s para sur, e para este y o para oeste")
            return
        if self.player.walk(self.argument[0]):
            console.write(f"Te has movido hacia el {self.argument}")
            console.write(f"Ahora estas en: {self.player.location_description()}")
        else:
            console.write(
                "No hay salida en esa direccion o no tienes la llave para abrir, "
                "busca otra salida... o la llave..."
            )


class FightCommand(Command):
    """A fight against an enemy to rescue a chick."""

    def __init__(self, player: Character, enemy: Enemy, chick: Chick) -> None:
        super().__init__("pelea")
        self.player = player
        self.enemy = enemy
        self.chick = chick

    @staticmethod
    def _options(console: Console) -> Iterator[int]:
        """Yield the whole numbers the player types, any number per line."""
        while True:
            for token in console.read_line().split():
                try:
                    yield int(token)
                except ValueError:
                    console.write("Opcion no valida")

    def execute(self, console: Console) -> None:
        player = self.player
        console.write(_FIGHT_BANNER)
        console.write(f"Hola {player.name} salva a los pollos")
        console.write(_RULE)
        console.write(
            f"{player.name} si derrotas al enemigo, el pollo te dara un Item especial, "
            f"si fallas tus golpes te bajaran puntos {player.location_description()}"
        )
        console.write(self.enemy.dialogue())
        console.write(_RULE)

        options = self._options(console)
        total = 0
        rounds = 0
        while True:
            console.write(_RULE)
            console.write("Opciones de pelea:")
            console.write("1. Patada y aranazo")
            console.write("2. Utilizacion de Items")
            console.write("3. Mordida con rabia >:[")
            console.write(_RULE)
            console.write("Ingresa la accion que deseas realizar")
            option = next(options)

            message = player.attack(option, self.enemy)
            if message:
                console.write(message)
            total += option
            console.write(f"Golpes {total}")
            rounds += 1

            if rounds == _ROUNDS:
                if total >= _WINNING_BLOWS:
                    self._win(console)
                    return
                console.write("El enemigo es demasiado fuerte y te bajo 10 puntos")
                console.write("Sigue la batalla")
                player.lose_points(_DAMAGE)
                console.write(player.score)
                rounds = 0
                total = 0

    def _win(self, console: Console) -> None:
        player = self.player
        console.write(f"Has derrotado a {self.enemy.name}!!!!")
        player.score += _VICTORY_POINTS
        console.write(f"Tu puntaje ahora es de {player.score}")
        console.write(f"Haz recuperado al pollito {self.chick.name}")
        gift = self.chick.item(0)
        console.write(f"Como agradecimieno el pollito te ha dado: {gift.name}")

        place = player.position
        key = player.item(0)
        if place.rewards:
            key.points = (place.reward(0) + key).points
        console.write(
            f"Por derrotar al enemigo ahora tienes una llave de: {key.points} puntos"
        )
        player.add_item(gift)
        if place.rewards:
            place.take_reward(0)