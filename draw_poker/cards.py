from __future__ import annotations

import random
from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Iterator, List, Optional

from .errors import DeckExhausted, InvalidCardCode

DECK_SIZE = 52
CARDS_PER_SUIT = 13


class Suit(IntEnum):
    SPADES = 0
    HEARTS = 1
    DIAMONDS = 2
    CLUBS = 3


class Rank(IntEnum):
    ACE = 1
    TWO = 2
    THREE = 3
    FOUR = 4
    FIVE = 5
    SIX = 6
    SEVEN = 7
    EIGHT = 8
    NINE = 9
    TEN = 10
    JACK = 11
    QUEEN = 12
    KING = 13


SUIT_TO_SYMBOL = {
    Suit.SPADES: "♠",
    Suit.HEARTS: "♥",
    Suit.DIAMONDS: "♦",
    Suit.CLUBS: "♣",
}

_FACE_LABELS = {
    Rank.ACE: "A",
    Rank.JACK: "J",
    Rank.QUEEN: "Q",
    Rank.KING: "K",
}


@dataclass(frozen=True)
class Card:
    """A playing card identified by its code in [1, 52].

    Codes 1-13 are Spades, 14-26 Hearts, 27-39 Diamonds and 40-52 Clubs,
    each run going Ace through King.
    """

    code: int

    def __post_init__(self) -> None:
        if isinstance(self.code, bool) or not isinstance(self.code, int):
            raise InvalidCardCode(f"Card code must be an integer, got {self.code!r}")
        if not 1 <= self.code <= DECK_SIZE:
            raise InvalidCardCode(f"Card code {self.code} outside [1, {DECK_SIZE}]")

    @classmethod
    def from_code(cls, code: int) -> "Card":
        return cls(code)

    @property
    def suit(self) -> Suit:
        return Suit((self.code - 1) // CARDS_PER_SUIT)

    @property
    def rank(self) -> Rank:
        # King lands on a multiple of 13.
        return Rank(self.code % CARDS_PER_SUIT or CARDS_PER_SUIT)

    @property
    def rank_label(self) -> str:
        return _FACE_LABELS.get(self.rank, str(int(self.rank)))

    @property
    def suit_name(self) -> str:
        return self.suit.name.capitalize()

    def display(self, long: bool = False) -> str:
        """Format as 'A♠', or 'A of Spades' when long=True."""
        if long:
            return f"{self.rank_label} of {self.suit_name}"
        return f"{self.rank_label}{SUIT_TO_SYMBOL[self.suit]}"

    def __str__(self) -> str:
        return self.display()


class Deck:
    """Draw pile of card codes; the top of the pile is the end of the list."""

    def __init__(self, codes: Optional[Iterable[int]] = None, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()
        self.codes: List[int] = list(range(1, DECK_SIZE + 1)) if codes is None else list(codes)

    def shuffle(self) -> None:
        self.rng.shuffle(self.codes)

    def draw(self, n: int) -> List[int]:
        """Pop exactly n codes from the top, in removal order, or raise if the deck is short."""
        if n < 0:
            raise ValueError(f"Cannot draw a negative number of cards ({n})")
        if len(self.codes) < n:
            raise DeckExhausted(f"Cannot draw {n} card(s), only {len(self.codes)} left")
        return [self.codes.pop() for _ in range(n)]

    def push(self, codes: Iterable[int]) -> None:
        self.codes.extend(codes)

    def __len__(self) -> int:
        return len(self.codes)

    def __iter__(self) -> Iterator[int]:
        return iter(self.codes)
