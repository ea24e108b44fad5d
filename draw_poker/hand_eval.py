from __future__ import annotations

from collections import Counter
from enum import IntEnum
from typing import List, Sequence, Tuple

from .cards import Card, Rank

ACE_HIGH = 14


class Category(IntEnum):
    """Hand categories; each value is the number of points the hand scores."""

    NOTHING = 0
    PAIR = 1
    TWO_PAIR = 3
    THREE_OF_A_KIND = 5
    STRAIGHT = 10
    FLUSH = 15
    FULL_HOUSE = 18
    FOUR_OF_A_KIND = 20
    STRAIGHT_FLUSH = 30
    ROYAL_FLUSH = 40

    @property
    def points(self) -> int:
        return int(self)

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Category.NOTHING: "Nothing",
    Category.PAIR: "Pair",
    Category.TWO_PAIR: "Two Pair",
    Category.THREE_OF_A_KIND: "Three of a Kind",
    Category.STRAIGHT: "Straight",
    Category.FLUSH: "Flush",
    Category.FULL_HOUSE: "Full House",
    Category.FOUR_OF_A_KIND: "Four of a Kind",
    Category.STRAIGHT_FLUSH: "Straight Flush",
    Category.ROYAL_FLUSH: "Royal Flush",
}


def _is_consecutive(ranks_asc: Sequence[int]) -> bool:
    return all(ranks_asc[i] + 1 == ranks_asc[i + 1] for i in range(len(ranks_asc) - 1))


def _detect_straight(ranks: Sequence[int]) -> Tuple[bool, int]:
    """Return (is_straight, top_rank); an Ace may close the run as 14 (10-J-Q-K-A)."""
    ranks_asc = sorted(set(ranks))
    if len(ranks_asc) != 5:
        return (False, 0)
    if _is_consecutive(ranks_asc):
        return (True, ranks_asc[-1])
    if Rank.ACE in ranks_asc:
        ace_high = sorted(ACE_HIGH if rank == Rank.ACE else rank for rank in ranks_asc)
        if _is_consecutive(ace_high):
            return (True, ace_high[-1])
    return (False, 0)


def classify_hand(cards: Sequence[Card]) -> Category:
    """Classify a 5-card hand. The result does not depend on card order."""
    if len(cards) != 5:
        raise ValueError(f"A scored hand has exactly 5 cards, got {len(cards)}")

    rank_counts = Counter(int(card.rank) for card in cards)
    suit_counts = Counter(int(card.suit) for card in cards)
    counts: List[int] = list(rank_counts.values())

    if 4 in counts:
        return Category.FOUR_OF_A_KIND

    # With quads ruled out, two distinct ranks over five cards is a 3+2 split.
    if len(rank_counts) == 2:
        return Category.FULL_HOUSE

    is_flush = len(suit_counts) == 1
    is_straight, top_rank = _detect_straight(list(rank_counts))

    if is_flush and is_straight:
        return Category.ROYAL_FLUSH if top_rank == ACE_HIGH else Category.STRAIGHT_FLUSH
    if is_flush:
        return Category.FLUSH
    if is_straight:
        return Category.STRAIGHT

    if 3 in counts:
        return Category.THREE_OF_A_KIND

    pairs = counts.count(2)
    if pairs == 2:
        return Category.TWO_PAIR
    if pairs == 1:
        return Category.PAIR
    return Category.NOTHING


def check_hand(cards: Sequence[Card]) -> int:
    """Return the points scored by a 5-card hand."""
    return classify_hand(cards).points
