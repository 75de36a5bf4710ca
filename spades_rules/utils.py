"""
Utility module for the Spades rules engine.
Contains logging setup and display formatting helpers.
"""

import logging
from typing import List, Optional
from spades_rules.card import Card, Suit


def setup_logging(log_file: Optional[str] = None, level: int = logging.INFO):
    """Set up logging for an application embedding the engine."""
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def format_hand(hand: List[Card], sort_by_suit: bool = True) -> str:
    """
    Format a hand of cards for display.

    Args:
        hand: List of cards
        sort_by_suit: Whether to group by suit (spades first) then rank

    Returns:
        Formatted string representation
    """
    if not hand:
        return "Empty hand"

    if not sort_by_suit:
        return ', '.join(str(card) for card in hand)

    by_suit = {}
    for card in hand:
        by_suit.setdefault(card.suit, []).append(card)

    suit_strings = []
    for suit in (Suit.SPADES, Suit.HEARTS, Suit.DIAMONDS, Suit.CLUBS):
        if suit in by_suit:
            cards = sorted(by_suit[suit], key=lambda c: c.rank.value)
            suit_strings.append(f"{suit.name[0]}: {' '.join(str(c) for c in cards)}")

    return ' | '.join(suit_strings)


def format_trick(trick) -> str:
    """Format a trick as seat: card pairs in play order, marking the winner."""
    plays = trick.cards()
    if not plays:
        return "No cards played"

    winning_seat = trick.winning_seat()
    parts = []
    for seat, card in plays:
        marker = "*" if seat == winning_seat else ""
        parts.append(f"Seat {seat}: {card}{marker}")
    return ', '.join(parts)
