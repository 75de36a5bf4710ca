"""
Encoding module for the Spades rules engine.
Converts cards, tricks, and legal moves into numpy vectors for bots and analysis.
"""

import numpy as np
from typing import TYPE_CHECKING, Iterable
from spades_rules.card import Card, Suit, Rank
from spades_rules.rules import DECK_SIZE, NUM_SEATS

if TYPE_CHECKING:
    from spades_rules.hand import Hand
    from spades_rules.trick import Trick

SUIT_TO_INDEX = {suit: i for i, suit in enumerate(Suit)}
RANK_TO_INDEX = {rank: i for i, rank in enumerate(Rank)}

_SUITS = list(Suit)
_RANKS = list(Rank)


def card_index(card: Card) -> int:
    """Position of a card in the 52-slot vector (suit-major, rank-minor)."""
    return SUIT_TO_INDEX[card.suit] * len(_RANKS) + RANK_TO_INDEX[card.rank]


def index_to_card(index: int) -> Card:
    """Card at a position of the 52-slot vector; inverse of card_index."""
    if not 0 <= index < DECK_SIZE:
        raise ValueError(f"Card index must be in range [0, {DECK_SIZE - 1}], got {index}")
    suit_idx, rank_idx = divmod(index, len(_RANKS))
    return Card(_SUITS[suit_idx], _RANKS[rank_idx])


def encode_cards(cards: Iterable[Card]) -> np.ndarray:
    """52 binary features, one per card present."""
    vector = np.zeros(DECK_SIZE, dtype=np.float32)
    for card in cards:
        vector[card_index(card)] = 1
    return vector


def encode_trick(trick: "Trick") -> np.ndarray:
    """One 52-card one-hot row per seat; rows for seats yet to play are zero."""
    matrix = np.zeros((NUM_SEATS, DECK_SIZE), dtype=np.float32)
    for seat, card in trick.cards():
        matrix[seat, card_index(card)] = 1
    return matrix


def legal_move_mask(hand: "Hand", trick: "Trick") -> np.ndarray:
    """
    Boolean mask over the deck of the cards a hand may play into a trick.

    Raises whatever Hand.get_moves raises.
    """
    mask = np.zeros(DECK_SIZE, dtype=bool)
    for card in hand.get_moves(trick):
        mask[card_index(card)] = True
    return mask
