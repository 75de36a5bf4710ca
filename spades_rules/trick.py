"""
Trick module for the Spades rules engine.
Tracks the cards played in one round and resolves the current winner.
"""

import logging
from typing import List, Optional, Tuple
from spades_rules.card import Card, Suit
from spades_rules.errors import InvalidSeat, OutOfTurn, SeatAlreadyPlayed, SeatOutOfRange
from spades_rules.rules import NUM_SEATS, TRUMP_SUIT, highest_of_suit, is_valid_seat

logger = logging.getLogger(__name__)


class Trick:
    """
    A single trick: one card from each of the four seats.

    Cards are stored by seat and must arrive in turn order, starting with the
    leading seat and moving clockwise.
    """

    def __init__(self, lead: int):
        if not is_valid_seat(lead):
            raise InvalidSeat(lead)
        self.lead = int(lead)
        self.slots: List[Optional[Card]] = [None] * NUM_SEATS

    def size(self) -> int:
        """Number of cards played so far, counted from the leading seat."""
        for i in range(NUM_SEATS):
            if self.slots[(self.lead + i) % NUM_SEATS] is None:
                return i
        return NUM_SEATS

    def __len__(self):
        return self.size()

    def is_empty(self) -> bool:
        return self.slots[self.lead] is None

    def is_full(self) -> bool:
        return self.size() == NUM_SEATS

    def next_seat(self) -> Optional[int]:
        """Seat due to play next, or None once every seat has played."""
        if self.is_full():
            return None
        return (self.lead + self.size()) % NUM_SEATS

    def add(self, card: Card, position: int):
        """
        Play a card from a seat.

        Args:
            card: Card being played
            position: Seat playing the card

        Raises:
            SeatOutOfRange: If position is not a seat index
            SeatAlreadyPlayed: If the seat already played in this trick
            OutOfTurn: If it is another seat's turn
        """
        if not is_valid_seat(position):
            logger.debug(f"Rejected {card}: seat {position!r} out of range")
            raise SeatOutOfRange(position)
        if self.slots[position] is not None:
            logger.debug(f"Rejected {card}: seat {position} already played")
            raise SeatAlreadyPlayed(position, self.slots[position])
        expected = (self.lead + self.size()) % NUM_SEATS
        if position != expected:
            logger.debug(f"Rejected {card}: seat {position} out of turn, seat {expected} is due")
            raise OutOfTurn(position, expected)
        self.slots[position] = card
        logger.debug(f"Seat {position} plays {card}")

    def leader(self) -> Optional[Card]:
        """Card played by the leading seat; its suit must be followed."""
        return self.slots[self.lead]

    def led_suit(self) -> Optional[Suit]:
        leader = self.leader()
        return leader.suit if leader is not None else None

    def winner(self) -> Optional[Card]:
        """
        Return the card currently winning the trick.

        The trick need not be full. Returns None if no card has been played.
        The highest spade wins if any spade was played, otherwise the highest
        card of the leading suit.
        """
        play = self.winning_play()
        return play[1] if play is not None else None

    def winning_play(self) -> Optional[Tuple[int, Card]]:
        """(seat, card) of the play currently winning the trick, or None."""
        leader = self.leader()
        if leader is None:
            return None

        played = self.cards()
        trump = highest_of_suit(played, TRUMP_SUIT)
        if trump is not None:
            return trump

        # The leader always follows its own suit, so a winner exists
        return highest_of_suit(played, leader.suit)

    def winning_seat(self) -> Optional[int]:
        """Seat that played the current winning card, or None."""
        play = self.winning_play()
        return play[0] if play is not None else None

    def card_at(self, seat: int) -> Optional[Card]:
        if not is_valid_seat(seat):
            raise SeatOutOfRange(seat)
        return self.slots[seat]

    def cards(self) -> List[Tuple[int, Card]]:
        """(seat, card) pairs in the order they were played."""
        played = []
        for i in range(self.size()):
            seat = (self.lead + i) % NUM_SEATS
            played.append((seat, self.slots[seat]))
        return played

    def __str__(self):
        if self.is_empty():
            return f"Trick(lead={self.lead}, empty)"
        plays = ", ".join(f"{seat}:{card}" for seat, card in self.cards())
        return f"Trick(lead={self.lead}, {plays})"
