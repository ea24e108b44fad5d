from __future__ import annotations

import logging
import random
from typing import Iterable, List, Optional

from .cards import Card, Deck
from .errors import DeckExhausted, IndexOutOfRange

logger = logging.getLogger(__name__)

HAND_SIZE = 5
MAX_EXCHANGE = 3


def generate_deck(rng: Optional[random.Random] = None) -> Deck:
    """Return a fresh deck holding codes 1..52 in ascending order."""
    return Deck(rng=rng)


def deal(deck: Deck) -> List[Card]:
    """Shuffle the deck in place and pop a 5-card hand from its top."""
    if len(deck) < HAND_SIZE:
        raise DeckExhausted(f"Cannot deal {HAND_SIZE} cards, only {len(deck)} left")
    deck.shuffle()
    hand = [Card(code) for code in deck.draw(HAND_SIZE)]
    logger.debug("Dealt %s, %d card(s) left in deck", [card.code for card in hand], len(deck))
    return hand


def _validate_indices(indices: Iterable[int], hand_size: int) -> List[int]:
    requested = list(indices)
    if len(requested) > MAX_EXCHANGE:
        raise IndexOutOfRange(f"At most {MAX_EXCHANGE} cards can be exchanged, got {len(requested)}")
    seen = set()
    for idx in requested:
        if isinstance(idx, bool) or not isinstance(idx, int):
            raise IndexOutOfRange(f"Hand index must be an integer, got {idx!r}")
        if not 0 <= idx < hand_size:
            raise IndexOutOfRange(f"Hand index {idx} outside [0, {hand_size - 1}]")
        if idx in seen:
            raise IndexOutOfRange(f"Hand index {idx} requested more than once")
        seen.add(idx)
    return requested


def change_cards(
    deck: Deck,
    hand: List[Card],
    indices: Iterable[int],
    discard: Optional[List[int]] = None,
) -> List[int]:
    """
    Replace the cards at `indices` with cards popped from the deck.

    The request is validated in full before anything moves, so a failure
    leaves deck, hand and discard untouched. Replacements go back into the
    same slots, so the order of `indices` only decides which deck card lands
    where. Returns the discarded codes, also appended to `discard` if given.
    """
    requested = _validate_indices(indices, HAND_SIZE)
    if len(hand) != HAND_SIZE:
        raise ValueError(f"Hand must hold {HAND_SIZE} cards, got {len(hand)}")
    if len(deck) < len(requested):
        raise DeckExhausted(f"Cannot exchange {len(requested)} card(s), only {len(deck)} left")

    discarded: List[int] = []
    for idx in requested:
        discarded.append(hand[idx].code)
        hand[idx] = Card(deck.draw(1)[0])

    if discard is not None:
        discard.extend(discarded)
    if discarded:
        logger.debug("Exchanged slots %s, discarded %s", requested, discarded)
    return discarded


def reset_deck(deck: Deck, hand: List[Card], discard: List[int]) -> None:
    """Return the discard pile and then the hand to the deck, emptying both."""
    deck.push(discard)
    deck.push(card.code for card in hand)
    discard.clear()
    hand.clear()
    logger.debug("Deck reset to %d card(s)", len(deck))
