"""
Rules module for the Spades rules engine.
Contains rule constants and the ordered table of legal-move filters.
"""

from numbers import Integral
from typing import Callable, List, Optional, Tuple
from spades_rules.card import Card, Suit


# Table constants
NUM_SEATS = 4
HAND_SIZE = 13
DECK_SIZE = NUM_SEATS * HAND_SIZE

TRUMP_SUIT = Suit.SPADES

MovePredicate = Callable[[Card, Card, Card], bool]


def is_valid_seat(seat) -> bool:
    """Check that a seat index names one of the four table positions."""
    return isinstance(seat, Integral) and not isinstance(seat, bool) and 0 <= seat < NUM_SEATS


def follows_suit_and_wins(card: Card, leader: Card, winner: Card) -> bool:
    """Card follows the leading suit and outranks the current winner."""
    return card.suit == leader.suit and card.rank > winner.rank


def follows_suit(card: Card, leader: Card, winner: Card) -> bool:
    """Card follows the leading suit, winning or not."""
    return card.suit == leader.suit


def trumps_and_wins(card: Card, leader: Card, winner: Card) -> bool:
    """Card is a trump that outranks the current winner."""
    return card.suit == TRUMP_SUIT and card.rank > winner.rank


def any_card(card: Card, leader: Card, winner: Card) -> bool:
    """Any card may be discarded."""
    return True


# Evaluated top to bottom, first non-empty bucket wins.
MOVE_PRIORITY: Tuple[Tuple[MovePredicate, str], ...] = (
    (follows_suit_and_wins, "follow suit and win"),
    (follows_suit, "follow suit"),
    (trumps_and_wins, "trump to win"),
    (any_card, "discard any card"),
)


def filter_moves(playables: List[Card], leader: Card,
                 winner: Card) -> Tuple[List[Card], Optional[str]]:
    """
    Select the legal moves from a player's playable cards.

    Args:
        playables: Cards the player still holds and may play
        leader: First card played in the trick
        winner: Card currently winning the trick

    Returns:
        Tuple of (legal cards, description of the rule that selected them).
        The list is empty and the description None if no rule matched.
    """
    for predicate, description in MOVE_PRIORITY:
        moves = [card for card in playables if predicate(card, leader, winner)]
        if moves:
            return moves, description
    return [], None


def highest_of_suit(plays: List[Tuple[int, Card]], suit: Suit) -> Optional[Tuple[int, Card]]:
    """
    Return the (seat, card) play holding the highest card of a suit.

    Plays are scanned in the order given; the earliest of equal ranks wins.
    Returns None if no card of the suit was played.
    """
    suited = [play for play in plays if play[1].suit == suit]
    if not suited:
        return None
    return max(suited, key=lambda play: play[1].rank.value)
