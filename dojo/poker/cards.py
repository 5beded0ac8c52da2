"""Playing cards written as two characters, rank then suit ("TS", "AC"), and games of two hands."""

from __future__ import annotations

from collections.abc import Iterable

_RANK_ORDER = "23456789TJQKA"
_RANKS = {symbol: value for value, symbol in enumerate(_RANK_ORDER, start=2)}

HAND_SIZE = 5
GAME_SIZE = 2 * HAND_SIZE


def rank(card: str) -> int:
    """Value of the card's rank: 2 to 9, T=10, J=11, Q=12, K=13, A=14; 0 if unknown."""
    if not card:
        raise ValueError("a card needs at least a rank character")
    return _RANKS.get(card[0], 0)


def parse_card(card: str) -> tuple[int, str]:
    """Split a card into its rank value and its suit letter."""
    if len(card) < 2:
        raise ValueError(f"card {card!r} needs a rank and a suit")
    return rank(card), card[1]


def split_game(game: str) -> tuple[list[str], list[str]]:
    """Split a line of ten cards into the first player's hand and the second's."""
    cards = game.split()
    if len(cards) != GAME_SIZE:
        raise ValueError(f"a game has {GAME_SIZE} cards, got {len(cards)}")
    return cards[:HAND_SIZE], cards[HAND_SIZE:]


def hand_ranks(hand: Iterable[str]) -> list[int]:
    """Rank values of the cards, in the order given."""
    return [rank(card) for card in hand]


def hand_rank(cards: Iterable[str]) -> str:
    """Category of a hand; every valid hand is scored as a high card.

    Raises ValueError for an empty hand or a card whose rank is unknown.
    """
    hand = list(cards)
    if not hand:
        raise ValueError("a hand needs at least one card")
    unknown = [card for card in hand if rank(card) == 0]
    if unknown:
        raise ValueError(f"unknown card rank in {unknown!r}")
    return "high_card"