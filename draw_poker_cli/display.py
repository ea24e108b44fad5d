from __future__ import annotations

from typing import List, Sequence

from draw_poker import Card, Category, GameSession, Phase, RoundResult

WELCOME_TEXT = """Single Player Poker

Five-card draw against the deck. You are dealt five cards, may swap up to
three of them once, and the final hand is scored.

Press p to open the table, t for the tutorial, q to quit."""

CURSOR_MARK = "▲"


def card_label(card: Card, selected: bool) -> str:
    """Button text for a hand slot, tagged when picked for exchange."""
    tag = "SWAP" if selected else ""
    return f"{card.display()}\n{card.display(long=True)}\n{tag}"


def hand_str(cards: Sequence[Card]) -> str:
    return " ".join(card.display() for card in cards)


def score_table() -> List[str]:
    """Rows of the scoring table, best hand first."""
    rows = [f"{cat.label:<16}{cat.points:>3}" for cat in sorted(Category, reverse=True)]
    return ["Hand             Pts", "-" * 20] + rows


def tutorial_text() -> str:
    lines = [
        "How to play",
        "",
        "enter      deal a hand, then confirm your exchange",
        "up / down  move the cursor over your hand",
        "space      mark or unmark the card under the cursor",
        "1-5        mark or unmark a card directly",
        "c          clear all marks",
        "q          quit",
        "",
        "Up to three cards can be marked. Marking a fourth drops the",
        "oldest mark. Marked cards are discarded and replaced once, then",
        "the hand is scored and returned to the deck.",
        "",
    ]
    return "\n".join(lines + score_table())


def status_text(session: GameSession) -> str:
    title = f"Rounds played: {session.rounds} | Deck: {session.deck_size}"
    if session.phase is Phase.IDLE:
        prompt = "Press enter (or Deal) for a new hand."
    else:
        picked = len(session.selection)
        prompt = f"Mark up to 3 cards to swap ({picked} marked), then press enter (or Confirm)."
    return f"{title}\n{prompt}"


def score_text(session: GameSession) -> str:
    lines = ["Score", f"Total: {session.score}"]
    last = session.last_result
    if last is not None:
        lines.append(f"Last: {last.category.label} (+{last.points})")
    return "\n".join(lines)


def result_line(result: RoundResult) -> str:
    return f"Final hand {hand_str(result.hand)}: {result.category.label} (+{result.points})."
