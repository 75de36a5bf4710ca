"""
Unit tests for numpy encodings.
"""

import inspect
import numpy as np
import pytest
from spades_rules.card import Card, Suit, Rank, create_deck
from spades_rules.encoding import (
    card_index, encode_cards, encode_trick, index_to_card, legal_move_mask
)
from spades_rules.hand import Hand
from spades_rules.trick import Trick


class TestCardIndex:

    def test_bounds(self):
        assert card_index(Card(Suit.CLUBS, Rank.TWO)) == 0
        assert card_index(Card(Suit.SPADES, Rank.ACE)) == 51

    def test_deck_order_matches_index(self):
        deck = create_deck()
        assert [card_index(card) for card in deck] == list(range(52))
        assert [index_to_card(i) for i in range(52)] == deck

    def test_signatures_documented(self):
        assert index_to_card.__doc__
        assert inspect.signature(encode_trick).parameters["trick"].annotation == "Trick"
        mask_params = inspect.signature(legal_move_mask).parameters
        assert mask_params["hand"].annotation == "Hand"
        assert mask_params["trick"].annotation == "Trick"

    def test_index_out_of_range(self):
        for index in (-1, 52):
            with pytest.raises(ValueError):
                index_to_card(index)


class TestEncoding:

    def test_encode_cards(self):
        vector = encode_cards([Card(Suit.HEARTS, Rank.KING), Card(Suit.CLUBS, Rank.TWO)])
        assert vector.shape == (52,)
        assert vector.dtype == np.float32
        assert vector.sum() == 2
        assert vector[0] == 1

    def test_encode_trick(self):
        trick = Trick(3)
        trick.add(Card(Suit.CLUBS, Rank.TWO), 3)
        trick.add(Card(Suit.SPADES, Rank.ACE), 0)
        matrix = encode_trick(trick)
        assert matrix.shape == (4, 52)
        assert matrix[3, 0] == 1
        assert matrix[0, 51] == 1
        assert matrix[1].sum() == 0
        assert matrix[2].sum() == 0

    def test_legal_move_mask(self):
        hand = Hand()
        for rank in Rank:
            hand.add(Card(Suit.CLUBS, rank))
        trick = Trick(0)
        trick.add(Card(Suit.CLUBS, Rank.TWO), 0)
        trick.add(Card(Suit.CLUBS, Rank.KING), 1)

        mask = legal_move_mask(hand, trick)
        assert mask.dtype == bool
        assert mask.sum() == len(hand.get_moves(trick)) == 1
        assert mask[card_index(Card(Suit.CLUBS, Rank.ACE))]


if __name__ == "__main__":
    pytest.main([__file__])
