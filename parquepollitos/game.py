"""The park game: its world, its rules and its main loop."""

from __future__ import annotations

import argparse

from .actions import FightCommand, HelpCommand, MoveCommand
from .characters import Character, Chick, Enemy
from .commands import Command
from .console import Console
from .item import Item
from .parser import Parser
from .place import Place

_KEY_NAME = "Llave"
_KEY_FEATURE = "Pedazo para abrir puerta final"
_WINNING_KEY_POINTS = 100
_FIGHT_SLOT = 1

_ZONES = [
    ("Plaza principal del Parque", 0),
    ("Zona de Juegos, muchos lugares para jugar", 0),
    ("Lago de agua azul", 0),
    ("Aqui vienen a un picnic", 0),
    ("Zona para jugar con la arena", 0),
    ("Uy, un arbol caido. Zona final", 4),
]
_ITEM_NAMES = ["pelota", "hoja", "pluma", "peluche"]
_ITEM_DESCRIPTIONS = [
    "objeto para diversion",
    "para jugar",
    "premio",
    "lo que te encuentras en un parque",
]
_CHICK_COLORS = ["Azul", "Rosa", "Rojo", "Amarillo", "Morado"]
_CHICK_NAMES = ["Juan", "Marianas", "Nolberto", "Paola", "Jukari"]
_ENEMY_NAMES = ["Iker", "Carlos", "Javier", "Israel", "Alfonso"]


class Game:
    """The park, the player, the chicks to rescue and the enemies guarding them."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console if console is not None else Console()
        self.parser = Parser()
        self._create_elements()
        self._create_commands()

    def _create_elements(self) -> None:
        self.zones = [Place(text, keys) for text, keys in _ZONES]

        self.player = Character("Nico", 0, self.zones[0])
        self.player.add_item(Item(0, _KEY_NAME, _KEY_FEATURE))

        self.chicks: list[Chick] = []
        self.objects: list[Item] = []
        self.keys: list[Item] = []
        for index, (name, color, item_name, item_text) in enumerate(
            zip(_CHICK_NAMES, _CHICK_COLORS, _ITEM_NAMES, _ITEM_DESCRIPTIONS)
        ):
            zone = self.zones[index + 1]
            chick = Chick(
                name=name, score=20 + index * 2, position=zone, value=10, color=color
            )
            gift = Item(10, item_name, item_text)
            chick.add_item(gift)
            key = Item(25, _KEY_NAME, _KEY_FEATURE)
            zone.add_reward(key)
            self.chicks.append(chick)
            self.objects.append(gift)
            self.keys.append(key)

        self.rivals = [
            Enemy(name=name, score=10 * index, position=self.zones[index + 1], danger_level=index)
            for index, name in enumerate(_ENEMY_NAMES)
        ]

        square, playground, lake, picnic, sandpit, fallen_tree = self.zones
        square.set_exits(sandpit, lake, playground, picnic)
        sandpit.set_exits(None, square, playground, None)
        playground.set_exits(None, None, fallen_tree, sandpit)
        lake.set_exits(square, None, picnic, None)
        picnic.set_exits(None, None, None, square)
        fallen_tree.set_exits(None, None, None, playground)

    def _create_commands(self) -> None:
        commands = self.parser.commands
        commands.add("movimiento", MoveCommand(self.player))
        commands.add("pelea", FightCommand(self.player, self.rivals[0], self.chicks[0]))
        commands.add("ayuda", HelpCommand(commands))

    def intro_text(self) -> str:
        return "\n".join(
            [
                "Te encuentras en un parque",
                "Tienes una mision especial ",
                "Recorre el parque y recuperalos...",
                "Si necesitas ayuda teclea la palabra: ayuda",
            ]
        )

    def ending_text(self) -> str:
        return "\n".join(
            [
                "Gracias por jugar",
                f"{self.player.name}Has rescatado a todos los pollos!!!",
                "Estatus final -----",
                self.player.status(),
                self.player.inventory_report(),
                "FIN",
            ]
        )

    def process(self, command: Command) -> bool:
        """Run a command under the rules of the current zone; return True once the game is won."""
        console = self.console
        position = self.player.position
        fought = False

        if command.word == "pelea" and position is self.zones[0]:
            console.write("No puedes pelear en este lugar")
        elif any(position is zone for zone in self.zones[1:5]):
            index = next(i for i, zone in enumerate(self.zones) if zone is position)
            if index == 1:
                console.write("e")
            self.parser.commands.replace(
                _FIGHT_SLOT,
                "pelea",
                FightCommand(self.player, self.rivals[index - 1], self.chicks[index - 1]),
            )
            command.execute(console)
            fought = True
        else:
            command.execute(console)

        if not fought:
            return False

        console.write(self.player.status())
        console.write("\n--------------------------------------------------\n")
        console.write("Sigue explorando!")
        if self.player.item(0).points != _WINNING_KEY_POINTS:
            return False

        self.player.position = self.zones[5]
        console.write("\nGANASTE")
        console.write("\nFELICIDADES\n")
        console.write("Presiona una tecla para continuar")
        try:
            console.read_line()
        except EOFError:
            pass
        return True

    def play(self) -> None:
        """Run the game until every chick is rescued.

        Raises EOFError if the input runs out first.
        """
        self.console.write(self.intro_text())
        finished = False
        while not finished:
            finished = self.process(self.parser.next_command(self.console))
        self.console.write(self.ending_text())


def main(argv: list[str] | None = None) -> int:
    """Start the game on the terminal."""
    argparse.ArgumentParser(
        prog="parquepollitos",
        description="Rescata a los pollitos perdidos en el parque.",
    ).parse_args(argv)
    try:
        Game().play()
    except (EOFError, KeyboardInterrupt):
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())