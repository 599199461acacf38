import pytest

from parquepollitos.characters import Character, Chick, Enemy
from parquepollitos.item import Item
from parquepollitos.place import Place


def key():
    return Item(25, "Llave", "Pedazo para abrir puerta final")


@pytest.fixture
def park():
    plaza = Place("Plaza principal del Parque")
    games = Place("Zona de Juegos, muchos lugares para jugar")
    final = Place("Uy, un arbol caido. Zona final", 4)
    odd = Place("Zona rara", 2)
    plaza.set_exits(odd, None, games, None)
    games.set_exits(None, None, final, plaza)
    return plaza, games, final, odd


def test_walk_through_open_exit(park):
    plaza, games, _, _ = park
    nico = Character("Nico", 0, plaza)
    assert nico.walk("e") is True
    assert nico.position is games
    assert nico.location_description() == games.description


def test_walk_without_exit_stays(park):
    plaza, _, _, _ = park
    nico = Character("Nico", 0, plaza)
    assert nico.walk("s") is False
    assert nico.walk("q") is False
    assert nico.position is plaza


def test_locked_zone_needs_four_keys(park):
    _, games, final, _ = park
    nico = Character("Nico", 0, games)
    for _ in range(3):
        nico.add_item(key())
    assert nico.walk("e") is False
    assert nico.position is games
    nico.add_item(key())
    assert nico.walk("e") is True
    assert nico.position is final


def test_zone_with_other_key_count_never_opens(park):
    plaza, _, _, _ = park
    nico = Character("Nico", 0, plaza)
    for _ in range(4):
        nico.add_item(key())
    assert nico.walk("n") is False


def test_count_keys_only_counts_keys():
    nico = Character("Nico", 0)
    nico.add_item(key())
    nico.add_item(Item(10, "pelota", "objeto para diversion"))
    nico.add_item(key())
    assert nico.count_keys() == 2
    assert nico.item(1).name == "pelota"


def test_item_out_of_range_raises():
    with pytest.raises(IndexError):
        Character().item(0)


def test_lose_points():
    nico = Character("Nico", 30)
    nico.lose_points(10)
    nico.lose_points(10)
    assert nico.score == 10


def test_defaults():
    nico = Character()
    assert (nico.name, nico.score, nico.inventory) == ("Nico", 100, [])


@pytest.mark.parametrize(
    "blow, fragment",
    [
        (1, "Iker ha sido herido de una patada y aranazo"),
        (2, "Haz utilizado tus items en Iker"),
        (3, "Has mordido con rabia a Iker"),
    ],
)
def test_attack_messages(blow, fragment):
    enemy = Enemy("Iker", 0, None, 0)
    text = Character().attack(blow, enemy)
    assert text.splitlines()[1] == fragment


def test_attack_unknown_blow_is_silent():
    assert Character().attack(9, Enemy("Iker")) == ""


def test_inventory_report_contains_each_item():
    nico = Character("Nico", 0)
    items = [key(), Item(10, "hoja", "para jugar")]
    for item in items:
        nico.add_item(item)
    report = nico.inventory_report()
    assert report.startswith("------------ INVENTARIO ------------")
    assert report.endswith("------------ FIN INVENTARIO ------------")
    for item in items:
        assert item.describe() in report


def test_status_shows_details(park):
    plaza, _, _, _ = park
    nico = Character("Nico", 40, plaza)
    nico.add_item(key())
    lines = nico.status().splitlines()
    assert "Nombre del Personaje: Nico" in lines
    assert "Cantidad en Inventario:1" in lines
    assert "Valor:40 puntos" in lines
    assert f"Posicion:{plaza.description}" in lines


def test_enemy_dialogue():
    enemy = Enemy("Carlos", 10, None, 1)
    lines = enemy.dialogue().splitlines()
    assert "Nivel de peligro del enemigo: 1" in lines
    assert "Hola Nico, soy: Carlos" in lines
    assert "Como veras, mi puntaje es de:10" in lines


def test_chick_features_and_inheritance():
    chick = Chick("Juan", 20, None, 10, "Azul")
    chick.add_item(Item(10, "pelota", "objeto para diversion"))
    lines = chick.features().splitlines()
    assert "Color del pollo:Azul" in lines
    assert "Valor:10 puntos" in lines
    assert chick.item(0).name == "pelota"
    assert chick.name == "Juan"


def test_chick_defaults():
    chick = Chick()
    assert (chick.value, chick.color) == (1, "azul")