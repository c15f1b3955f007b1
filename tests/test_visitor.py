from patternkit.visitor import (
    NPC,
    Attacker,
    ClothFactory,
    Diesel,
    Gas,
    MilitaryFactory,
    Player,
    SettingVisitor,
    SystemEnv,
)


def test_single_visitor(capsys):
    gas = Gas(density=100)
    diesel = Diesel(energy=897)
    assert gas.accept(ClothFactory()) == "clothFactory: use gas with density 100"
    assert diesel.accept(MilitaryFactory()) == (
        "militaryFactory: use diesel with inner energy 897"
    )
    assert capsys.readouterr().out.splitlines() == [
        "clothFactory: use gas with density 100",
        "militaryFactory: use diesel with inner energy 897",
    ]


GAME_OBJECTS = [
    Player("snow dance", 100),
    NPC("groceries", True),
    SystemEnv("made by china", "v1.2.11"),
    Player("fire dragon", 120),
]


def test_setting_visitor():
    visitor = SettingVisitor()
    assert [obj.accept(visitor) for obj in GAME_OBJECTS] == [
        "Game Player: Name:snow dance ,Level:100",
        "Game NPC: Name:groceries ,Immortal:true",
        "Game Env: Mark:made by china ,Version:v1.2.11",
        "Game Player: Name:fire dragon ,Level:120",
    ]


def test_attacker_visitor():
    attacker = Attacker()
    assert [obj.accept(attacker) for obj in GAME_OBJECTS] == [
        " Attack Player : snow dance",
        " Attack NPC: groceries",
        "Unsupported target game env",
        " Attack Player : fire dragon",
    ]


def test_named_attacker_and_mortal_npc():
    assert NPC("guard", False).accept(SettingVisitor()) == "Game NPC: Name:guard ,Immortal:false"
    assert NPC("guard", False).accept(Attacker("hero")) == "hero Attack NPC: guard"