"""Deciding poker games by high cards, and counting the first player's wins."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from pathlib import Path

from dojo.poker.cards import HAND_SIZE, hand_ranks, split_game


def _read_games(path: str | Path) -> list[str]:
    """One game per line; a missing file holds no games."""
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        return []
    return text.splitlines()


def highest_rank(hand: Iterable[str]) -> int:
    """Highest rank value in the hand, 0 for an empty hand."""
    return max(hand_ranks(hand), default=0)


def player_one_wins_by_highest(game: str) -> bool:
    """Whether the first player's highest card beats the second's."""
    first, second = split_game(game)
    return highest_rank(first) > highest_rank(second)


def player_one_win_count(games: Iterable[str]) -> int:
    """Number of games the first player wins by highest card."""
    return sum(1 for game in games if player_one_wins_by_highest(game))


def count_player_one_wins_in_file(path: str | Path) -> int:
    """Wins by highest card over the games in a file, one game per line."""
    return player_one_win_count(_read_games(path))


def player_one_win_rate_in_file(path: str | Path) -> float:
    """Share of the file's games won by highest card; 0.0 for an empty or missing file."""
    games = _read_games(path)
    if not games:
        return 0.0
    return player_one_win_count(games) / len(games)


def nth_high_card(hand: Sequence[str], nth: int) -> int:
    """Rank of the ``nth`` highest card, counting from 1."""
    ranks = sorted(hand_ranks(hand))
    if not 1 <= nth <= len(ranks):
        raise ValueError(f"nth must be between 1 and {len(ranks)}, got {nth}")
    return ranks[-nth]


def compare_poker_hand(game: str) -> str:
    """"win" if the first player has the higher top card, or on a tie the higher second card."""
    first, second = split_game(game)
    top_first, top_second = nth_high_card(first, 1), nth_high_card(second, 1)
    if top_first == top_second:
        won = nth_high_card(first, 2) > nth_high_card(second, 2)
    else:
        won = top_first > top_second
    return "win" if won else "lose"


def player_one_wins(game: str) -> bool:
    """Compare the highest cards, then the second highest, then the third."""
    first, second = split_game(game)
    ranks_first = sorted(hand_ranks(first))
    ranks_second = sorted(hand_ranks(second))
    for position in (4, 3):
        if ranks_first[position] != ranks_second[position]:
            return ranks_first[position] > ranks_second[position]
    return ranks_first[2] > ranks_second[2]


def player_one_win_percentage(games: Sequence[str]) -> float:
    """Percentage of games the first player wins, rounded to two decimals (halves up)."""
    if not games:
        return 0.0
    wins = sum(1 for game in games if player_one_wins(game))
    percent = wins / len(games) * 100
    return math.floor(percent * 100 + 0.5) / 100


def winner_by_rank_sum(cards: Sequence[str]) -> str:
    """"p1" if the first five cards add up to more than the rest, otherwise "p2"."""
    ranks = hand_ranks(cards)
    return "p1" if sum(ranks[:HAND_SIZE]) > sum(ranks[HAND_SIZE:]) else "p2"