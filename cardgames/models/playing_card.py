"""Standard playing card with suit, rank and derived color."""

import logging
from enum import IntEnum
from typing import Any, Iterator, Mapping

from cardgames.exceptions import InvalidArgument

from .card import Card, gated
from .visibility import VisibilityMode

logger = logging.getLogger(__name__)


class Suit(IntEnum):
    """Card suit."""

    DIAMONDS = 0
    CLUBS = 1
    HEARTS = 2
    SPADES = 3
    RED_JOKER = 4
    BLACK_JOKER = 5


class Rank(IntEnum):
    """Card rank, in ascending default strength.

    Values are ordinals only. Numeric weights live in RankValues.
    """

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12


class Color(IntEnum):
    """Card color, derived from suit."""

    RED = 0
    BLACK = 1


SUIT_COLORS: dict[Suit, Color] = {
    Suit.DIAMONDS: Color.RED,
    Suit.HEARTS: Color.RED,
    Suit.RED_JOKER: Color.RED,
    Suit.CLUBS: Color.BLACK,
    Suit.SPADES: Color.BLACK,
    Suit.BLACK_JOKER: Color.BLACK,
}

JOKER_SUITS = frozenset({Suit.RED_JOKER, Suit.BLACK_JOKER})

# Two through ten count their pips; face cards continue upward from ten
DEFAULT_RANK_VALUES: dict[Rank, int] = {rank: rank + 2 for rank in Rank}


def _check_weight(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidArgument(f"Rank value must be an int, got {value!r}")
    return value


class RankValues:
    """Numeric weights of ranks, keyed by rank.

    A table starts from the default weights (TWO=2 ... ACE=14). Game
    variants override individual weights without changing rank identity.
    """

    def __init__(self, overrides: Mapping[Rank, int] | None = None):
        """Initialize rank weights.

        Args:
            overrides: Weights replacing the defaults for some ranks.
        """
        self._values: dict[Rank, int] = dict(DEFAULT_RANK_VALUES)
        for rank, value in (overrides or {}).items():
            self.set(rank, value)

    def get(self, rank: Rank) -> int:
        """Get the weight of a rank.

        Raises:
            InvalidArgument: If rank is not a Rank.
        """
        if not isinstance(rank, Rank):
            raise InvalidArgument(f"Unknown rank: {rank!r}")
        return self._values[rank]

    def set(self, rank: Rank, value: int) -> None:
        """Override the weight of a rank.

        Raises:
            InvalidArgument: If rank is not a Rank or value is not an int.
        """
        if not isinstance(rank, Rank):
            raise InvalidArgument(f"Unknown rank: {rank!r}")
        self._values[rank] = _check_weight(value)

    def reset(self) -> None:
        """Restore the default weights."""
        self._values = dict(DEFAULT_RANK_VALUES)

    def copy(self) -> "RankValues":
        """Create an independent copy of this table."""
        return RankValues(self._values)

    def __getitem__(self, rank: Rank) -> int:
        return self.get(rank)

    def __iter__(self) -> Iterator[Rank]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RankValues):
            return NotImplemented
        return self._values == other._values

    def __repr__(self) -> str:
        changed = {
            r.name: v for r, v in self._values.items() if v != DEFAULT_RANK_VALUES[r]
        }
        return f"RankValues({changed!r})"


class PlayingCard(Card):
    """A card with a suit and a rank.

    Suit, rank, rank weight and color are only returned to requesters the
    card's visibility admits. Jokers have no rank.
    """

    def __init__(
        self,
        suit: Suit,
        rank: Rank | None,
        owner: Any = None,
        visibility: VisibilityMode | None = None,
        rank_values: RankValues | None = None,
    ):
        """Initialize playing card.

        Args:
            suit: Card suit.
            rank: Card rank. None for jokers and only for jokers.
            owner: Owning player, or None if unowned.
            visibility: Visibility mode. Defaults to OWNER_ONLY when an
                owner is given, otherwise HIDDEN.
            rank_values: Weight table. Each card gets its own default
                table if not provided.

        Raises:
            InvalidArgument: If suit or rank is not recognized.
        """
        super().__init__(owner=owner, visibility=visibility)
        if rank is not None and not isinstance(rank, Rank):
            raise InvalidArgument(f"Unknown rank: {rank!r}")
        self._rank = rank
        self._rank_values = rank_values if rank_values is not None else RankValues()
        self._suit: Suit | None = None
        self._color: Color | None = None
        self.set_suit(suit)

    def set_suit(self, suit: Suit) -> None:
        """Set the suit and recompute the color.

        Raises:
            InvalidArgument: If suit is not a Suit, or a rankless card is
                given a non-joker suit, or a ranked card a joker suit.
                The card is left unchanged.
        """
        if not isinstance(suit, Suit):
            raise InvalidArgument(f"Unknown suit: {suit!r}")
        if self._rank is None and suit not in JOKER_SUITS:
            raise InvalidArgument(f"A card without rank must be a joker, got {suit.name}")
        if self._rank is not None and suit in JOKER_SUITS:
            raise InvalidArgument(f"A joker has no rank, got {self._rank.name}")
        color = SUIT_COLORS[suit]
        with self._lock:
            logger.debug("%r: suit %s -> %s", self, self._suit, suit.name)
            self._suit = suit
            self._color = color

    def set_rank_value(self, value: int) -> None:
        """Override the weight of this card's rank.

        Raises:
            InvalidArgument: If value is not an int or the card has no rank.
        """
        if self._rank is None:
            raise InvalidArgument("A card without rank has no rank value")
        _check_weight(value)
        with self._lock:
            logger.debug("%r: rank value of %s -> %d", self, self._rank.name, value)
            self._rank_values.set(self._rank, value)

    @gated
    def get_suit(self, requester: Any) -> Suit:
        """Get the suit."""
        return self._suit

    @gated
    def get_rank(self, requester: Any) -> Rank | None:
        """Get the rank (None for a rankless joker)."""
        return self._rank

    @gated
    def get_rank_value(self, requester: Any) -> int | None:
        """Get the numeric weight of the rank (None for a rankless joker)."""
        if self._rank is None:
            return None
        return self._rank_values.get(self._rank)

    @gated
    def get_color(self, requester: Any) -> Color:
        """Get the color."""
        return self._color

    @gated
    def is_red(self, requester: Any) -> bool:
        return self._color is Color.RED

    @gated
    def is_black(self, requester: Any) -> bool:
        return self._color is Color.BLACK

    @gated
    def is_joker(self, requester: Any) -> bool:
        return self._suit in JOKER_SUITS
