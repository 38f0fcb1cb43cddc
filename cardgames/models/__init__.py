"""Card models."""

from .card import Card, gated
from .player import Player
from .playing_card import (
    DEFAULT_RANK_VALUES,
    SUIT_COLORS,
    Color,
    PlayingCard,
    Rank,
    RankValues,
    Suit,
)
from .visibility import VisibilityMode, can_view

__all__ = [
    "Card",
    "gated",
    "Player",
    "PlayingCard",
    "Rank",
    "RankValues",
    "Suit",
    "Color",
    "SUIT_COLORS",
    "DEFAULT_RANK_VALUES",
    "VisibilityMode",
    "can_view",
]
