"""Deciding poker games by pairs and three of a kind before high cards."""

from __future__ import annotations

import math
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from itertools import combinations
from pathlib import Path

from dojo.poker.cards import HAND_SIZE, hand_ranks, rank, split_game


def _read_games(path: str | Path) -> list[str]:
    """One game per line; a missing file holds no games."""
    try:
        text = Path(path).read_text()
    except FileNotFoundError:
        return []
    return text.splitlines()


def _same_rank(first: str, second: str) -> bool:
    return first[:1] == second[:1]


@dataclass
class Hand:
    cards: list[str] = field(default_factory=list)

    def high_card(self) -> int:
        """Highest rank in the hand, 0 for an empty hand."""
        return max(hand_ranks(self.cards), default=0)

    def three_of_a_kind(self) -> int:
        """Rank of the first card followed by exactly two more of its rank, else 0."""
        for index, card in enumerate(self.cards):
            later = sum(1 for other in self.cards[index + 1 :] if _same_rank(card, other))
            if later == 2:
                return rank(card)
        return 0

    def pair(self) -> int:
        """Rank of the first pair found scanning the cards in order, else 0."""
        for first, second in combinations(self.cards, 2):
            if _same_rank(first, second):
                return rank(first)
        return 0


def pair_rank(ranks: Iterable[int]) -> int:
    """Highest rank that occurs at least twice, or 0."""
    return max((value for value, count in Counter(ranks).items() if count >= 2), default=0)


def game_score(cards: Sequence[str]) -> float:
    """1.0 if the first five cards beat the rest, 0.0 on a loss or a draw.

    The higher pair wins; without pairs the cards are compared from the highest down.
    """
    first = sorted(hand_ranks(cards[:HAND_SIZE]))
    second = sorted(hand_ranks(cards[HAND_SIZE:]))

    pair_first, pair_second = pair_rank(first), pair_rank(second)
    if pair_first or pair_second:
        return 1.0 if pair_first > pair_second else 0.0

    for mine, theirs in zip(reversed(first), reversed(second)):
        if mine != theirs:
            return 1.0 if mine > theirs else 0.0
    return 0.0


def win_percentage(games: Sequence[str]) -> float:
    """Percentage of games the first player wins, truncated to two decimals."""
    if not games:
        return 0.0
    wins = sum(game_score(game.split()) for game in games)
    percent = 100.0 * (wins / len(games))
    return math.floor(percent * 100) / 100


def pair_score(hand: Sequence[str]) -> int:
    """Rank of the first pair in the hand, or 0."""
    return Hand(list(hand)).pair()


def player_one_wins_by_pair(game: str) -> bool:
    first, second = split_game(game)
    return pair_score(first) > pair_score(second)


def player_one_wins(hand1: Hand, hand2: Hand) -> bool:
    """Three of a kind beats a pair, which beats the highest card."""
    if hand1.three_of_a_kind() > 0 or hand2.three_of_a_kind() > 0:
        return hand1.three_of_a_kind() > hand2.three_of_a_kind()
    if hand1.pair() > 0 or hand2.pair() > 0:
        return hand1.pair() > hand2.pair()
    return hand1.high_card() > hand2.high_card()


def win_rate_in_file(path: str | Path) -> float:
    """Share of the file's games the first player wins; 0.0 for an empty or missing file."""
    games = _read_games(path)
    if not games:
        return 0.0
    wins = 0
    for game in games:
        first, second = split_game(game)
        if player_one_wins(Hand(first), Hand(second)):
            wins += 1
    return wins / len(games)