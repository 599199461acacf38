import io
import sys

from parquepollitos.console import Console
from parquepollitos.game import Game, main


def make_game(text=""):
    out = io.StringIO()
    return Game(Console(io.StringIO(text), out)), out


def test_world_layout():
    game, _ = make_game()
    zones = game.zones
    assert game.player.position is zones[0]
    assert zones[0].exit("n") is zones[4]
    assert zones[0].exit("s") is zones[2]
    assert zones[1].exit("e") is zones[5]
    assert zones[5].exit("o") is zones[1]
    assert zones[5].keys_required == 4
    assert game.player.item(0).name == "Llave"
    assert game.player.item(0).points == 0
    assert all(zone.reward(0).points == 25 for zone in zones[1:5])


def test_chicks_and_rivals_are_placed():
    game, _ = make_game()
    for index, chick in enumerate(game.chicks):
        assert chick.position is game.zones[index + 1]
    assert [chick.item(0).name for chick in game.chicks] == ["pelota", "hoja", "pluma", "peluche"]
    assert [rival.position for rival in game.rivals] == game.zones[1:]
    assert game.rivals[4].name == "Alfonso"


def test_registered_commands():
    game, _ = make_game()
    assert list(game.parser.commands) == ["movimiento", "pelea", "ayuda"]


def test_no_fighting_in_main_square():
    game, out = make_game()
    assert game.process(game.parser.commands.get("pelea")) is False
    assert "No puedes pelear en este lugar" in out.getvalue()
    assert game.player.position is game.zones[0]


def test_move_from_main_square():
    game, _ = make_game()
    move = game.parser.commands.get("movimiento")
    move.argument = "e"
    assert game.process(move) is False
    assert game.player.position is game.zones[1]


def test_any_command_in_a_guarded_zone_sets_up_its_fight():
    game, out = make_game()
    game.player.position = game.zones[3]
    assert game.process(game.parser.commands.get("ayuda")) is False
    assert "Sigue explorando!" in out.getvalue()
    fight = game.parser.commands.get("pelea")
    assert fight.enemy is game.rivals[2]
    assert fight.chick is game.chicks[2]


def test_fight_in_lake_earns_key_points():
    game, _ = make_game("3 3 3\n")
    game.player.position = game.zones[2]
    fight = game.parser.commands.get("pelea")
    assert game.process(fight) is False
    assert game.player.item(0).points == 25
    assert game.chicks[0].item(0) in game.player.inventory
    assert game.zones[2].rewards == []
    assert game.parser.commands.get("pelea").enemy is game.rivals[1]


def test_full_key_wins_the_game():
    game, out = make_game()
    game.player.position = game.zones[1]
    game.player.item(0).points = 100
    assert game.process(game.parser.commands.get("ayuda")) is True
    assert game.player.position is game.zones[5]
    assert "GANASTE" in out.getvalue()


def test_play_until_the_end():
    game, out = make_game("ayuda\nmovimiento e\npelea\n3 3 3\n\n")
    game.player.item(0).points = 75
    game.play()
    text = out.getvalue()
    assert text.startswith(game.intro_text())
    assert text.rstrip().endswith("FIN")
    assert "Gracias por jugar" in text
    assert game.player.position is game.zones[5]
    assert game.player.score == 100


def test_intro_and_ending_text():
    game, _ = make_game()
    assert "Si necesitas ayuda teclea la palabra: ayuda" in game.intro_text()
    ending = game.ending_text()
    assert "NicoHas rescatado a todos los pollos!!!" in ending
    assert game.player.status() in ending


def test_main_stops_when_input_ends(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main([]) == 1
    assert "Te encuentras en un parque" in capsys.readouterr().out