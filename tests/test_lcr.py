import pytest

from makalu.lcr import Dice, DiceFace, Game, Player


class ScriptedRng:
    def __init__(self, values):
        self._values = iter(values)

    def randrange(self, stop):
        return next(self._values)


class ScriptedDice:
    def __init__(self, faces):
        self._faces = iter(faces)
        self.rolled = 0

    def roll(self):
        self.rolled += 1
        return next(self._faces)


def make_game(count=3):
    game = Game()
    for i in range(count):
        game.join(f"P{i}")
    return game


def test_dice_faces():
    dice = Dice(ScriptedRng(range(6)))
    faces = [dice.roll() for _ in range(6)]
    assert [str(face) for face in faces] == [
        "right",
        "left",
        "center",
        "DoNothing",
        "DoNothing",
        "DoNothing",
    ]


def test_real_dice_gives_known_faces():
    dice = Dice()
    assert all(dice.roll() in DiceFace for _ in range(50))


def test_players_start_with_three_tokens():
    game = make_game()
    assert [p.tokens for p in game.players] == [3, 3, 3]


def test_join_links_ring():
    game = make_game(3)
    p0, p1, p2 = game.players
    assert p0.right is p1 and p1.right is p2 and p2.right is p0
    assert p0.left is p2 and p1.left is p0 and p2.left is p1


def test_next_turn_cycles_right():
    game = make_game(3)
    names = [game.next_turn().name for _ in range(4)]
    assert names == ["P0", "P1", "P2", "P0"]


def test_next_turn_without_players():
    with pytest.raises(ValueError):
        Game().next_turn()


def test_finished_with_several_holders():
    assert make_game().finished() is None


def test_finished_with_single_holder():
    game = make_game()
    game.players[0].tokens = 0
    game.players[2].tokens = 0
    assert game.finished() is game.players[1]


def test_roll_dice_moves_tokens():
    game = make_game()
    p0, p1, p2 = game.players
    before = sum(p.tokens for p in game.players)
    faces = [DiceFace.RIGHT, DiceFace.LEFT, DiceFace.CENTER]
    result = p0.roll_dice(ScriptedDice(faces))
    assert result == faces
    assert p0.tokens == 0
    assert p1.tokens == 4
    assert p2.tokens == 4
    assert sum(p.tokens for p in game.players) == before - 1


def test_blank_faces_keep_tokens():
    game = make_game()
    p0 = game.players[0]
    p0.roll_dice(ScriptedDice([DiceFace.NOTHING] * 3))
    assert [p.tokens for p in game.players] == [3, 3, 3]


@pytest.mark.parametrize("tokens, expected", [(5, 3), (2, 2), (0, 0)])
def test_dice_count_is_capped(tokens, expected):
    game = make_game()
    player = game.players[0]
    player.tokens = tokens
    dice = ScriptedDice([DiceFace.NOTHING] * 10)
    assert len(player.roll_dice(dice)) == expected
    assert dice.rolled == expected


def test_lone_player_cannot_pass():
    player = Player("solo")
    with pytest.raises(RuntimeError):
        player.roll_dice(ScriptedDice([DiceFace.RIGHT]))