# parquepollitos

A small text adventure played in the terminal. Its texts are in Spanish.
You are Nico, in a park whose chicks have gone missing. Walk between the
park's zones, fight the bully guarding each one and rescue the chick there.
Every rescue adds the zone's key piece (25 points) to the key you carry;
once the key is worth 100 points you are taken to the fallen tree at the end
of the park and the game is won.

## Installing

```
pip install .
```

## Playing

```
parquepollitos
```

The command takes no options besides `-h`/`--help`. It exits with status 0
when the game is won, and with status 1 if the input ends or the game is
interrupted first.

At the `>>>>` prompt type one of these commands:

- `movimiento <dir>` moves you: `n` north, `s` south, `e` east, `o` west.
  Only the first letter of the second word counts. Without a direction you
  are asked for one.
- `pelea` starts a fight with the bully of the zone you are in. You cannot
  fight in the main square.
- `ayuda` shows the story and the list of commands.

Any other first word is rejected and you are asked again.

In the four zones around the square, whatever command you type starts the
zone's fight, and your status is shown when it ends.

### Fights

Each round you enter a whole number; 1, 2 and 3 are the three attacks
(kick and scratch, use items, angry bite). After three rounds whose numbers
add up to at least 6 the enemy is beaten: you gain 100 points, the chick
gives you its item and the zone's key piece is added to your key. Otherwise
you lose 10 points and three new rounds begin. Words that are not numbers
are rejected.

## Using it from Python

```python
import io

from parquepollitos.console import Console
from parquepollitos.game import Game

output = io.StringIO()
game = Game(Console(stdin=io.StringIO("ayuda\n"), stdout=output))
command = game.parser.next_command(game.console)
game.process(command)
print(output.getvalue())
```

- `parquepollitos.console.Console(stdin=None, stdout=None)` writes lines with
  `write(*args)` and reads them with `read_line(prompt)`, which raises
  `EOFError` when the input is exhausted. It uses the terminal unless other
  streams are given.
- `parquepollitos.game.Game(console=None)` builds the park. `play()` runs the
  game to the end and raises `EOFError` if the input runs out;
  `process(command)` runs one command and returns `True` once the game is won;
  `intro_text()` and `ending_text()` return the opening and closing texts.
- `parquepollitos.parser.Parser.next_command(console)` reads lines until one
  starts with a known command word and returns that command, its second word
  set as the argument.
- `parquepollitos.commands` holds the `Command` base class and `CommandList`,
  the ordered list of command words.
- `parquepollitos.actions` holds `HelpCommand`, `MoveCommand`, `FightCommand`
  and `InventoryCommand`, which shows the player's items. The game does not
  put `InventoryCommand` in its list of commands, so there is no command in
  play to show the inventory; it is shown in the closing text.
- `parquepollitos.characters` (`Character`, `Enemy`, `Chick`),
  `parquepollitos.place` (`Place`, `exit_index`) and `parquepollitos.item`
  (`Item`) model the park.

## What it does not do

The game cannot be saved or resumed, and the fallen tree cannot be reached
by walking: it is entered only by winning.

## Running the tests

```
pip install .[test]
pytest
```