"""
Exceptions raised by the Spades rules engine.

Every error derives from ValueError so callers that already treat rule
violations as ValueError keep working.
"""


class SpadesRulesError(ValueError):
    """Base class for all rule violations."""


class InvalidSeat(SpadesRulesError):
    """A trick was created with a leading seat outside [0, 3]."""

    def __init__(self, seat):
        self.seat = seat
        super().__init__(f"Lead seat must be in range [0, 3], got {seat!r}")


class TurnOrderError(SpadesRulesError):
    """A card was added to a trick in violation of turn order."""


class SeatOutOfRange(TurnOrderError):
    def __init__(self, seat):
        self.seat = seat
        super().__init__(f"Seat {seat!r} out of range, valid range is 0..=3")


class SeatAlreadyPlayed(TurnOrderError):
    def __init__(self, seat, card):
        self.seat = seat
        self.card = card
        super().__init__(f"Seat {seat} already played {card}, replace not allowed")


class OutOfTurn(TurnOrderError):
    def __init__(self, seat, expected):
        self.seat = seat
        self.expected = expected
        super().__init__(f"Seat {seat} played out of turn, expected seat {expected}")


class HandFull(SpadesRulesError):
    def __init__(self, card, capacity: int):
        self.card = card
        super().__init__(f"Cannot add {card}: hand already holds {capacity} cards")


class LegalityError(SpadesRulesError):
    """Legal moves could not be derived; indicates an upstream invariant violation."""


class HandIncomplete(LegalityError):
    def __init__(self, size: int, expected: int):
        self.size = size
        self.expected = expected
        super().__init__(
            f"Hand holds {size} cards, moves require a fully dealt hand of {expected}"
        )


class NoPlayableMoves(LegalityError):
    def __init__(self):
        super().__init__("No playable moves")


class CardNotInHand(SpadesRulesError):
    def __init__(self, card):
        self.card = card
        super().__init__(f"Card {card} not in hand")


class CardAlreadyPlayed(SpadesRulesError):
    def __init__(self, card):
        self.card = card
        super().__init__(f"Card {card} has already been played")
