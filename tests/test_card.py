"""
Unit tests for card primitives.
"""

import copy
import pickle
import pytest
from spades_rules.card import Card, Suit, Rank, create_deck
from spades_rules.hand import Hand
from spades_rules.trick import Trick


class TestCard:
    """Test card functionality."""

    def test_card_creation(self):
        card = Card(Suit.SPADES, Rank.ACE)
        assert card.suit == Suit.SPADES
        assert card.rank == Rank.ACE
        assert str(card) == "A♠"
        assert repr(card) == "Card(SPADES, ACE)"

    def test_number_card_str(self):
        assert str(Card(Suit.HEARTS, Rank.TEN)) == "10♥"
        assert str(Card(Suit.CLUBS, Rank.TWO)) == "2♣"

    def test_card_equality(self):
        assert Card(Suit.SPADES, Rank.ACE) == Card(Suit.SPADES, Rank.ACE)
        assert Card(Suit.SPADES, Rank.ACE) != Card(Suit.HEARTS, Rank.ACE)
        assert Card(Suit.SPADES, Rank.ACE) != "A♠"

    def test_card_is_immutable(self):
        card = Card(Suit.CLUBS, Rank.TWO)
        with pytest.raises(AttributeError):
            card.rank = Rank.ACE
        assert card.rank == Rank.TWO

    def test_rank_ordering(self):
        assert Rank.TWO < Rank.THREE
        assert Rank.ACE > Rank.KING
        assert max(Rank) == Rank.ACE
        assert Rank.TWO <= Rank.THREE
        assert Rank.TWO <= Rank.TWO
        assert Rank.ACE >= Rank.KING
        assert Rank.ACE >= Rank.ACE
        assert not Rank.KING >= Rank.ACE
        assert sorted([Rank.KING, Rank.TWO, Rank.TEN]) == [Rank.TWO, Rank.TEN, Rank.KING]

    def test_card_copy_and_pickle(self):
        card = Card(Suit.SPADES, Rank.ACE)
        assert copy.copy(card) == card
        assert copy.deepcopy(card) == card
        restored = pickle.loads(pickle.dumps(card))
        assert restored == card
        assert hash(restored) == hash(card)

    def test_hand_and_trick_copy_and_pickle(self):
        hand = Hand(require_full=False)
        hand.add(Card(Suit.SPADES, Rank.ACE))
        hand.add(Card(Suit.HEARTS, Rank.TWO))
        hand.play(Card(Suit.SPADES, Rank.ACE))

        clone = copy.deepcopy(hand)
        assert clone.cards() == hand.cards()
        assert clone.playables() == [Card(Suit.HEARTS, Rank.TWO)]
        clone.play(Card(Suit.HEARTS, Rank.TWO))
        assert hand.playables() == [Card(Suit.HEARTS, Rank.TWO)]

        trick = Trick(1)
        trick.add(Card(Suit.CLUBS, Rank.TEN), 1)
        restored = pickle.loads(pickle.dumps(trick))
        assert restored.cards() == trick.cards()
        assert restored.winner() == Card(Suit.CLUBS, Rank.TEN)


class TestDeck:
    """Test deck construction."""

    def test_deck_creation(self):
        deck = create_deck()
        assert len(deck) == 52
        assert len(set(deck)) == 52

    def test_deck_order(self):
        deck = create_deck()
        assert deck[0] == Card(Suit.CLUBS, Rank.TWO)
        assert deck[-1] == Card(Suit.SPADES, Rank.ACE)


if __name__ == "__main__":
    pytest.main([__file__])
