"""Tests for the round state machine (draw_poker/session.py)."""

import random

import pytest

from draw_poker import (
    Category,
    Deck,
    DeckExhausted,
    GameSession,
    IndexOutOfRange,
    InvalidStateTransition,
    Phase,
)

FULL_DECK = list(range(1, 53))


def snapshot(session):
    return (
        session.phase,
        session.hand,
        session.selection,
        session.discard,
        list(session.deck),
        session.score,
        session.rounds,
    )


class TestPhases:
    """Test legal and illegal transitions."""

    def test_new_session_is_idle(self, session):
        assert session.phase is Phase.IDLE
        assert session.hand is None
        assert session.score == 0
        assert session.partition() == FULL_DECK

    def test_deal_moves_to_dealt(self, session):
        hand = session.deal()
        assert session.phase is Phase.DEALT
        assert len(hand) == 5
        assert session.hand == hand
        assert session.selection == ()
        assert session.deck_size == 47
        assert session.partition() == FULL_DECK

    def test_commit_moves_to_idle(self, session):
        session.deal()
        session.commit()
        assert session.phase is Phase.IDLE
        assert session.hand is None
        assert session.discard == ()
        assert session.deck_size == 52
        assert session.partition() == FULL_DECK

    def test_deal_twice_rejected(self, session):
        session.deal()
        before = snapshot(session)
        with pytest.raises(InvalidStateTransition):
            session.deal()
        assert snapshot(session) == before

    @pytest.mark.parametrize("operation", ["commit", "clear_selection"])
    def test_idle_rejects(self, session, operation):
        before = snapshot(session)
        with pytest.raises(InvalidStateTransition):
            getattr(session, operation)()
        assert snapshot(session) == before

    def test_toggle_in_idle_rejected(self, session):
        with pytest.raises(InvalidStateTransition):
            session.toggle_select(0)
        assert session.selection == ()

    def test_hand_is_a_copy(self, session):
        session.deal()
        session.hand.clear()
        assert len(session.hand) == 5


class TestSelection:
    """Test marking cards for exchange."""

    def test_toggle_adds_and_removes(self, session):
        session.deal()
        session.toggle_select(2)
        assert session.selection == (2,)
        session.toggle_select(2)
        assert session.selection == ()

    def test_fourth_pick_evicts_oldest(self, session):
        session.deal()
        for index in (4, 0, 2):
            session.toggle_select(index)
        session.toggle_select(1)
        assert session.selection == (0, 2, 1)

    def test_unselect_then_fill(self, session):
        session.deal()
        for index in (0, 1, 2):
            session.toggle_select(index)
        session.toggle_select(0)
        session.toggle_select(3)
        assert session.selection == (1, 2, 3)

    @pytest.mark.parametrize("index", [-1, 5, 10, "1", True])
    def test_bad_index_rejected(self, session, index):
        session.deal()
        session.toggle_select(1)
        with pytest.raises(IndexOutOfRange):
            session.toggle_select(index)
        assert session.selection == (1,)

    def test_clear_selection(self, session):
        session.deal()
        session.toggle_select(1)
        session.toggle_select(3)
        session.clear_selection()
        assert session.selection == ()
        assert session.phase is Phase.DEALT

    def test_deal_starts_with_empty_selection(self, session):
        session.deal()
        session.toggle_select(0)
        session.commit()
        session.deal()
        assert session.selection == ()


def stacked_session(codes):
    """A session whose deal lands `codes` in hand, in order, with no shuffle effect."""
    # The rest of the deck sits below the hand so exchanges draw from it.
    rest = [code for code in FULL_DECK if code not in codes]
    deck = Deck(codes=rest + list(reversed(codes)), rng=NoShuffle())
    return GameSession(deck=deck)


class NoShuffle(random.Random):
    def shuffle(self, x, *args, **kwargs):
        return None


class TestCommit:
    """Test exchanging and scoring at the end of a round."""

    def test_commit_without_selection_scores_dealt_hand(self):
        session = stacked_session([40, 49, 50, 51, 52])
        session.deal()
        assert session.commit() == 40
        assert session.score == 40
        assert session.last_result.category is Category.ROYAL_FLUSH
        assert session.last_result.discarded == ()
        assert [card.code for card in session.last_result.hand] == [40, 49, 50, 51, 52]

    def test_commit_exchanges_selected_cards(self):
        session = stacked_session([10, 8, 42, 17, 26])
        session.deal()
        session.toggle_select(0)
        session.toggle_select(3)
        session.commit()
        result = session.last_result
        assert result.discarded == (10, 17)
        final = [card.code for card in result.hand]
        assert final[1] == 8 and final[2] == 42 and final[4] == 26
        assert final[0] == 52 and final[3] == 51
        assert session.partition() == FULL_DECK

    def test_score_accumulates(self):
        session = stacked_session([1, 4, 18, 14, 45])
        session.deal()
        assert session.commit() == 1
        assert session.rounds == 1
        session.deal()
        session.commit()
        assert session.score == 1 + session.last_result.points
        assert session.rounds == 2

    def test_exhausted_exchange_mutates_nothing(self):
        deck = Deck(codes=[1, 2, 3, 4, 5, 6], rng=NoShuffle())
        session = GameSession(deck=deck)
        session.deal()
        session.toggle_select(0)
        session.toggle_select(1)
        before = snapshot(session)
        with pytest.raises(DeckExhausted):
            session.commit()
        assert snapshot(session) == before
        assert session.phase is Phase.DEALT


class TestInvariant:
    """Deck, hand and discard always hold codes 1..52 exactly once."""

    def test_random_play(self):
        rng = random.Random(2024)
        session = GameSession(rng=random.Random(99))
        for _ in range(300):
            if session.phase is Phase.IDLE:
                session.deal()
            else:
                action = rng.randrange(4)
                if action == 0:
                    session.commit()
                elif action == 1:
                    session.clear_selection()
                else:
                    session.toggle_select(rng.randrange(5))
            assert session.partition() == FULL_DECK
            assert len(session.selection) <= 3

    def test_errors_keep_invariant(self, session):
        for call in (session.commit, lambda: session.toggle_select(0)):
            with pytest.raises(InvalidStateTransition):
                call()
            assert session.partition() == FULL_DECK
        session.deal()
        with pytest.raises(IndexOutOfRange):
            session.toggle_select(7)
        assert session.partition() == FULL_DECK

    def test_seeded_sessions_repeat(self):
        a = GameSession(rng=random.Random(5))
        b = GameSession(rng=random.Random(5))
        assert a.deal() == b.deal()
