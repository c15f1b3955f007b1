import dataclasses

import pytest

from patternkit.memento import GamePlayer, RoleStatusCaretaker


def test_game_archive():
    player = GamePlayer(hp=1000, mp=232, level=20)
    keeper = RoleStatusCaretaker()
    keeper.save_status(player.create("第一次存档"))

    player.hp, player.mp, player.level = 500, 10, 30
    assert player.status() == "Current Level :30 HP:500, MP:10"
    keeper.save_status(player.create("第二次存档"))

    player.load(keeper.retrieve_status("第一次存档"))
    assert player.status() == "Current Level :20 HP:1000, MP:232"

    player.load(keeper.retrieve_status("第二次存档"))
    assert (player.hp, player.mp, player.level) == (500, 10, 30)


def test_snapshot_is_independent():
    player = GamePlayer(hp=1, mp=2, level=3)
    memento = player.create("a")
    player.hp = 99
    assert memento.hp == 1
    with pytest.raises(dataclasses.FrozenInstanceError):
        memento.hp = 5


def test_save_replaces_same_tag():
    keeper = RoleStatusCaretaker()
    keeper.save_status(GamePlayer(hp=1).create("slot"))
    keeper.save_status(GamePlayer(hp=2).create("slot"))
    assert keeper.retrieve_status("slot").hp == 2
    assert len(keeper.mementos) == 1


def test_missing_tag():
    with pytest.raises(KeyError):
        RoleStatusCaretaker().retrieve_status("none")


def test_save_prints(capsys):
    memento = GamePlayer().create("x")
    RoleStatusCaretaker().save_status(memento)
    assert capsys.readouterr().out == f"Game File x  Saved at {memento.time_mark}\n"