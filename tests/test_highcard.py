import pytest

from dojo.poker.highcard import (
    compare_poker_hand,
    count_player_one_wins_in_file,
    highest_rank,
    nth_high_card,
    player_one_win_count,
    player_one_win_percentage,
    player_one_win_rate_in_file,
    player_one_wins,
    player_one_wins_by_highest,
    winner_by_rank_sum,
)


@pytest.mark.parametrize(
    "game, expected",
    [
        ("8C TS KC 9H 4S 7D 2S 5D 3S QC", True),
        ("8C TS KC 9H 4S 7D 2S 5D 3S AC", False),
        ("8C TS KC 9H 4S 7D 2S 5D 3S AS", False),
        ("8C TS QC 9H 4S 7D 2S 5D 3S KS", False),
        ("8C TS QC 9H 4S 7D 2S 5D KS 3S", False),
        ("8C TS 2C 9H 4S 7D 3S JS 5D 2S", False),
        ("8C TS 2C 9H 4S 7D 3S 9S 5D 2S", True),
        ("8C TS 2C 9H 4S 7D 3S TS 5D 2S", True),
        ("8C TS 5C 7H 4S 9D 3S TS 5D 2S", False),
    ],
)
def test_player_one_wins(game, expected):
    assert player_one_wins(game) is expected


def test_win_percentage_one_win():
    assert player_one_win_percentage(["8C TS 2C 9H 4S 7D 3S 9S 5D 2S"]) == 100.0


def test_win_percentage_one_loss():
    assert player_one_win_percentage(["8C TS 2C 9H 4S 7D 3S JS 5D 2S"]) == 0.0


def test_win_percentage_no_games():
    assert player_one_win_percentage([]) == 0.0


def test_win_percentage_two_wins():
    games = ["8C TS 2C 9H 4S 7D 3S 9S 5D 2S", "8C TS 2C 9H 4S 7D 3S 9S 5D 2S"]
    assert player_one_win_percentage(games) == 100.0


def test_win_percentage_half():
    games = ["8C TS 2C 9H 4S 7D 3S 9S 5D 2S", "8C TS 2C 9H 4S 7D 3S 9S 5D KS"]
    assert player_one_win_percentage(games) == 50.0


def test_win_percentage_rounds_to_two_decimals():
    games = [
        "8C TS 2C 9H 4S 7D 3S 9S 5D 2S",
        "8C TS 2C 9H 4S 7D 3S 9S 5D 2S",
        "8C TS 2C 9H 4S 7D 3S 9S 5D KS",
    ]
    assert player_one_win_percentage(games) == 66.67


@pytest.mark.parametrize(
    "game, expected",
    [
        ("AC 2C TC JC 5C KC JC 6C 2C QC", True),
        ("KC 2C TC JC 5C AC JC 6C 2C QC", False),
        ("KC 2C TC JC 5C TC JC 6C 2C QC", True),
        ("2C AC TC JC 5C KC JC 6C 2C QC", True),
        ("KC AC TC JC 5C AC JC 6C 2C QC", False),
        ("5C 4S KC 3H 2S QD 5S 4D 3S 2C", True),
        ("9C 4S 2C 3H 2S 8D 5S 4D 3S 2C", True),
        ("AC 4S 2C 3H 2S 8D 5S 4D 3S 2C", True),
    ],
)
def test_player_one_wins_by_highest(game, expected):
    assert player_one_wins_by_highest(game) is expected


WIN = "3H 7H 6S KC JS QH TD JC 2D 8S"
LOSE = "3H 7H 6S 2C JS QH TD JC 2D 8S"


@pytest.mark.parametrize(
    "games, expected",
    [
        ([], 0),
        ([WIN], 1),
        ([LOSE], 0),
        ([WIN, WIN], 2),
        ([WIN, WIN, LOSE], 2),
        ([LOSE, WIN], 1),
        ([LOSE, WIN, WIN], 2),
    ],
)
def test_player_one_win_count(games, expected):
    assert player_one_win_count(games) == expected


def test_highest_rank():
    assert highest_rank(["8C", "TS", "AC", "9H", "4S"]) == 14
    assert highest_rank(["8C", "TS", "2C", "9H", "4S"]) == 10


def test_highest_rank_of_empty_hand():
    assert highest_rank([]) == 0


def _write(tmp_path, name, text):
    path = tmp_path / name
    path.write_text(text)
    return path


def test_count_wins_in_empty_file(tmp_path):
    assert count_player_one_wins_in_file(_write(tmp_path, "empty.txt", "")) == 0


def test_count_wins_one_game_win(tmp_path):
    path = _write(tmp_path, "win.txt", "AC 4S 2C 3H 2S 8D 5S 4D 3S 2C")
    assert count_player_one_wins_in_file(path) == 1


def test_count_wins_one_game_lose(tmp_path):
    path = _write(tmp_path, "lose.txt", "8D 5S 4D 3S 2C AC 4S 2C 3H 2S")
    assert count_player_one_wins_in_file(path) == 0


def test_count_wins_two_games_win(tmp_path):
    text = "AC 4S 2C 3H 2S 8D 5S 4D 3S 2C\n9C 4S 2C 3H 2S 8D 5S 4D 3S 2C\n"
    assert count_player_one_wins_in_file(_write(tmp_path, "two.txt", text)) == 2


def test_count_wins_two_games_lose(tmp_path):
    text = "8D 5S 4D 3S 2C AC 4S 2C 3H 2S\n8D 5S 4D 3S 2C 9C 4S 2C 3H 2S"
    assert count_player_one_wins_in_file(_write(tmp_path, "two.txt", text)) == 0


def test_count_wins_missing_file(tmp_path):
    assert count_player_one_wins_in_file(tmp_path / "missing.txt") == 0


def test_win_rate_in_empty_file(tmp_path):
    assert player_one_win_rate_in_file(_write(tmp_path, "empty.txt", "")) == 0.0


def test_win_rate_one_game_win(tmp_path):
    path = _write(tmp_path, "one_game_with_win.txt", WIN)
    assert player_one_win_rate_in_file(path) == 1.0


def test_win_rate_one_game_lose(tmp_path):
    path = _write(tmp_path, "one_game_with_lose.txt", LOSE)
    assert player_one_win_rate_in_file(path) == 0.0


def test_win_rate_win_and_lose(tmp_path):
    path = _write(tmp_path, "two_game_win_lose.txt", f"{WIN}\n{LOSE}")
    assert player_one_win_rate_in_file(path) == 0.5


def test_win_rate_in_file_with_bad_line_is_an_error(tmp_path):
    path = _write(tmp_path, "bad.txt", f"{WIN}\nAC KC")
    with pytest.raises(ValueError):
        player_one_win_rate_in_file(path)


@pytest.mark.parametrize(
    "game, expected",
    [
        ("8C TS KC 9H 4S 7D 2S 5D 3S AC", "lose"),
        ("AC TS KC 9H 4S 7D 2S 5D 3S KC", "win"),
        ("JC TS KC 9H AS 7D 2S 5D 3S KC", "win"),
        ("2C TS KC 9H 4S 7D 2S 5D 3S QC", "win"),
        ("2C TS QC 9H 4S 7D 2S 5D 3S JC", "win"),
        ("2C 9S 6C JH 4S 7D 2S 4D 3S 5C", "win"),
        ("2C 3S 6C 9H 4S 7D 2S 4D 3S 5C", "win"),
        ("AC 3S 6C TH 4S AD 2S 4D 3S 5C", "win"),
        ("AC 3S 6C 9H 4S AD 2S TD 3S 5C", "lose"),
    ],
)
def test_compare_poker_hand(game, expected):
    assert compare_poker_hand(game) == expected


def test_nth_high_card():
    hand = ["8C", "TS", "AC", "9H", "4S"]
    assert nth_high_card(hand, 1) == 14
    assert nth_high_card(hand, 2) == 10


@pytest.mark.parametrize("nth", [0, 6])
def test_nth_high_card_out_of_range(nth):
    with pytest.raises(ValueError):
        nth_high_card(["8C", "TS", "AC", "9H", "4S"], nth)


@pytest.mark.parametrize(
    "cards, expected",
    [
        (["8C", "TS", "KC", "9H", "4S", "7D", "2S", "5D", "3S", "AC"], "p1"),
        (["3H", "7H", "6S", "KC", "JS", "QH", "TD", "JC", "2D", "8S"], "p2"),
        (["TD", "8C", "4H", "7C", "TC", "KC", "4C", "3H", "7S", "KS"], "p2"),
    ],
)
def test_winner_by_rank_sum(cards, expected):
    assert winner_by_rank_sum(cards) == expected