"""
Hand module for the Spades rules engine.
Holds one player's cards and derives which of them may legally be played.
"""

import logging
from dataclasses import dataclass
from typing import Iterator, List, Optional
from spades_rules.card import Card
from spades_rules.errors import (
    CardAlreadyPlayed, CardNotInHand, HandFull, HandIncomplete, NoPlayableMoves
)
from spades_rules.rules import HAND_SIZE, filter_moves
from spades_rules.trick import Trick
from spades_rules.utils import format_hand

logger = logging.getLogger(__name__)


@dataclass
class HandCard:
    """A held card and whether it is still available to play."""
    card: Card
    playable: bool = True


class Hand:
    """Represents the cards dealt to a single player."""

    def __init__(self, require_full: bool = True):
        """
        Args:
            require_full: Refuse to derive moves until all 13 cards are dealt.
                Pass False to allow moves from a short hand.
        """
        self.slots: List[Optional[HandCard]] = [None] * HAND_SIZE
        self.size = 0
        self.require_full = require_full

    def add(self, card: Card):
        """
        Deal a card into the hand, marked playable.

        Raises:
            HandFull: If the hand already holds 13 cards
        """
        if self.size >= HAND_SIZE:
            raise HandFull(card, HAND_SIZE)
        self.slots[self.size] = HandCard(card)
        self.size += 1

    def _held(self) -> Iterator[HandCard]:
        for entry in self.slots[:self.size]:
            yield entry

    def cards(self) -> List[Card]:
        """All cards dealt to this hand, played or not, in deal order."""
        return [entry.card for entry in self._held()]

    def playables(self) -> List[Card]:
        """Cards not yet played, in deal order."""
        return [entry.card for entry in self._held() if entry.playable]

    def is_full(self) -> bool:
        return self.size == HAND_SIZE

    def play(self, card: Card) -> Card:
        """
        Mark a held card as played.

        The card keeps its slot so the hand stays fully dealt for the rest
        of the round; it is simply no longer offered as a move.

        Raises:
            CardNotInHand: If the card was never dealt to this hand
            CardAlreadyPlayed: If the card was already played
        """
        for entry in self._held():
            if entry.card == card:
                if not entry.playable:
                    raise CardAlreadyPlayed(card)
                entry.playable = False
                return card
        raise CardNotInHand(card)

    def get_moves(self, trick: Trick) -> List[Card]:
        """
        Get the cards that may legally be played into a trick.

        Args:
            trick: The trick in progress

        Returns:
            Legal cards, in deal order

        Raises:
            HandIncomplete: If the hand must be full and is not
            NoPlayableMoves: If the hand has no cards left to play
        """
        if self.require_full and self.size != HAND_SIZE:
            raise HandIncomplete(self.size, HAND_SIZE)

        playables = self.playables()

        leader = trick.leader()
        winner = trick.winner()
        if leader is None or winner is None:
            if not playables:
                raise NoPlayableMoves()
            return playables

        moves, rule = filter_moves(playables, leader, winner)
        if not moves:
            raise NoPlayableMoves()
        logger.debug(f"{len(moves)} moves against {winner} (led {leader}): {rule}")
        return moves

    def is_legal(self, card: Card, trick: Trick) -> bool:
        """Check whether a card is among the legal moves for this trick."""
        return card in self.get_moves(trick)

    def __len__(self):
        return self.size

    def __contains__(self, card):
        return any(entry.card == card for entry in self._held())

    def __iter__(self):
        return iter(self.cards())

    def __str__(self):
        return format_hand(self.playables())
