from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .cards import Card, Deck
from .draw import HAND_SIZE, MAX_EXCHANGE, change_cards, deal, generate_deck, reset_deck
from .errors import IndexOutOfRange, InvalidStateTransition
from .hand_eval import Category, classify_hand

logger = logging.getLogger(__name__)


class Phase(Enum):
    IDLE = "idle"
    DEALT = "dealt"


@dataclass(frozen=True)
class RoundResult:
    hand: Tuple[Card, ...]
    discarded: Tuple[int, ...]
    category: Category

    @property
    def points(self) -> int:
        return self.category.points


class GameSession:
    """
    One player's game: a deck, the current hand, the discard pile, the cards
    picked for exchange and the running score.

    Rounds go IDLE -> deal() -> DEALT -> commit() -> IDLE. Any operation
    called in the wrong phase raises InvalidStateTransition before touching
    state, so deck, hand and discard always partition codes 1..52.
    """

    def __init__(self, rng: Optional[random.Random] = None, deck: Optional[Deck] = None):
        self.deck = deck if deck is not None else generate_deck(rng)
        self._hand: Optional[List[Card]] = None
        self._discard: List[int] = []
        self._selection: List[int] = []
        self.score = 0
        self.rounds = 0
        self.last_result: Optional[RoundResult] = None

    @property
    def phase(self) -> Phase:
        return Phase.IDLE if self._hand is None else Phase.DEALT

    @property
    def hand(self) -> Optional[List[Card]]:
        return None if self._hand is None else list(self._hand)

    @property
    def selection(self) -> Tuple[int, ...]:
        return tuple(self._selection)

    @property
    def discard(self) -> Tuple[int, ...]:
        return tuple(self._discard)

    @property
    def deck_size(self) -> int:
        return len(self.deck)

    def partition(self) -> List[int]:
        """Every code currently owned by deck, hand and discard, sorted."""
        hand_codes = [card.code for card in self._hand] if self._hand is not None else []
        return sorted(list(self.deck) + hand_codes + self._discard)

    def _require(self, phase: Phase, operation: str) -> None:
        if self.phase is not phase:
            raise InvalidStateTransition(f"{operation}() needs phase {phase.value}, session is {self.phase.value}")

    def deal(self) -> List[Card]:
        self._require(Phase.IDLE, "deal")
        self._hand = deal(self.deck)
        self._selection.clear()
        logger.debug("Round %d dealt: %s", self.rounds + 1, " ".join(card.display() for card in self._hand))
        return list(self._hand)

    def toggle_select(self, index: int) -> None:
        """Select or unselect a hand slot; a fourth pick evicts the oldest one."""
        self._require(Phase.DEALT, "toggle_select")
        if isinstance(index, bool) or not isinstance(index, int) or not 0 <= index < HAND_SIZE:
            raise IndexOutOfRange(f"Hand index {index!r} outside [0, {HAND_SIZE - 1}]")
        if index in self._selection:
            self._selection.remove(index)
            return
        if len(self._selection) == MAX_EXCHANGE:
            self._selection.pop(0)
        self._selection.append(index)

    def clear_selection(self) -> None:
        self._require(Phase.DEALT, "clear_selection")
        self._selection.clear()

    def commit(self) -> int:
        """Exchange the selected cards, score the hand and close the round."""
        self._require(Phase.DEALT, "commit")
        assert self._hand is not None
        if self._selection:
            change_cards(self.deck, self._hand, self._selection, self._discard)
            self._selection.clear()

        category = classify_hand(self._hand)
        self.score += category.points
        self.rounds += 1
        self.last_result = RoundResult(
            hand=tuple(self._hand),
            discarded=tuple(self._discard),
            category=category,
        )
        logger.info(
            "Round %d: %s for %d point(s), total %d",
            self.rounds,
            category.label,
            category.points,
            self.score,
        )

        reset_deck(self.deck, self._hand, self._discard)
        self._hand = None
        return category.points
