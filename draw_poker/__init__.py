from .cards import Card, Deck, Rank, Suit
from .draw import change_cards, deal, generate_deck, reset_deck
from .errors import DeckExhausted, GameError, IndexOutOfRange, InvalidCardCode, InvalidStateTransition
from .hand_eval import Category, check_hand, classify_hand
from .session import GameSession, Phase, RoundResult

__all__ = [
    "Card",
    "Category",
    "Deck",
    "DeckExhausted",
    "GameError",
    "GameSession",
    "IndexOutOfRange",
    "InvalidCardCode",
    "InvalidStateTransition",
    "Phase",
    "Rank",
    "RoundResult",
    "Suit",
    "change_cards",
    "check_hand",
    "classify_hand",
    "deal",
    "generate_deck",
    "reset_deck",
]
