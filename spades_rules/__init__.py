"""
Spades rules engine.
Tracks a player's hand and the current trick, resolves trick winners and
derives legal moves.
"""

from .card import Card, Suit, Rank, create_deck
from .errors import (
    SpadesRulesError, InvalidSeat, TurnOrderError, SeatOutOfRange,
    SeatAlreadyPlayed, OutOfTurn, HandFull, LegalityError, HandIncomplete,
    NoPlayableMoves, CardNotInHand, CardAlreadyPlayed
)
from .rules import NUM_SEATS, HAND_SIZE, DECK_SIZE, TRUMP_SUIT
from .trick import Trick
from .hand import Hand, HandCard

__all__ = [
    'Card',
    'Suit',
    'Rank',
    'create_deck',
    'Trick',
    'Hand',
    'HandCard',
    'NUM_SEATS',
    'HAND_SIZE',
    'DECK_SIZE',
    'TRUMP_SUIT',
    'SpadesRulesError',
    'InvalidSeat',
    'TurnOrderError',
    'SeatOutOfRange',
    'SeatAlreadyPlayed',
    'OutOfTurn',
    'HandFull',
    'LegalityError',
    'HandIncomplete',
    'NoPlayableMoves',
    'CardNotInHand',
    'CardAlreadyPlayed'
]
