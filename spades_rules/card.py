"""
Card module for the Spades rules engine.
Defines Card, Suit, and Rank with the ordering used for trick resolution.
"""

from dataclasses import dataclass
from enum import Enum
from functools import total_ordering
from typing import List


class Suit(Enum):
    """Card suits. Spades is the trump suit."""
    CLUBS = "♣"
    DIAMONDS = "♦"
    HEARTS = "♥"
    SPADES = "♠"

    def __str__(self):
        return self.value


@total_ordering
class Rank(Enum):
    """Card ranks with proper ordering (2 lowest, Ace highest)."""
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
    ACE = 14

    def __str__(self):
        if self.value <= 10:
            return str(self.value)
        return {11: "J", 12: "Q", 13: "K", 14: "A"}[self.value]

    def __lt__(self, other):
        if not isinstance(other, Rank):
            return NotImplemented
        return self.value < other.value


@dataclass(frozen=True)
class Card:
    """An immutable playing card identified by suit and rank."""
    suit: Suit
    rank: Rank

    def __str__(self):
        return f"{self.rank}{self.suit}"

    def __repr__(self):
        return f"Card({self.suit.name}, {self.rank.name})"


def create_deck() -> List[Card]:
    """Create a standard 52-card deck, ordered by suit then rank."""
    deck = []
    for suit in Suit:
        for rank in Rank:
            deck.append(Card(suit, rank))
    return deck
