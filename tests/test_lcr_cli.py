import io
import random

from makalu.lcr_cli import main, play


class _FixedRng:
    """Always rolls the same die index."""

    def __init__(self, value):
        self.value = value

    def randrange(self, stop):
        return self.value


def _run(lines, rng):
    out = io.StringIO()
    winner = play(lines, out, rng)
    return winner, out.getvalue()


def test_all_center_rolls_leave_last_player_winning():
    winner, text = _run(["3", "", ""], _FixedRng(2))
    assert winner == "P2"
    assert "You got: [center center center]" in text
    assert text.rstrip().endswith("Winner:  P2")


def test_exit_stops_the_game():
    winner, text = _run(["3", "Exit"], _FixedRng(0))
    assert winner is None
    assert "You killed the game :(" in text
    assert "You got:" not in text


def test_player_count_is_asked_again_until_large_enough():
    winner, text = _run(["2", "x", "3", "Exit"], _FixedRng(0))
    assert winner is None
    assert text.count("Note: enter number more than 2.") == 3
    assert "player: P2 joined." in text
    assert "player: P3 joined." not in text


def test_runs_out_of_input_without_winner():
    winner, text = _run(["4"], _FixedRng(2))
    assert winner is None
    assert "Winner" not in text
    assert "player: P3 joined." in text


def test_passing_tokens_keeps_total_constant():
    winner, text = _run(["3"] + [""] * 6, _FixedRng(0))
    assert winner is None
    token_lines = [line for line in text.splitlines() if line.endswith(" tokens") and ", have " in line]
    last_round = token_lines[-3:]
    total = sum(int(line.split()[3]) for line in last_round)
    assert total == 9


def test_seeded_game_has_a_winner():
    winner, text = _run(["4"] + [""] * 5000, random.Random(7))
    assert winner in {"P0", "P1", "P2", "P3"}
    assert text.rstrip().endswith(f"Winner:  {winner}")


def test_main_reads_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("3\nExit\n"))
    assert main(["--seed", "1"]) == 0
    captured = capsys.readouterr().out
    assert "Welcome to LCR dice game :D" in captured
    assert "You killed the game :(" in captured