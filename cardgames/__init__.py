"""Playing cards with viewer-dependent visibility."""

from cardgames.exceptions import AccessDenied, CardError, IllegalState, InvalidArgument
from cardgames.models import (
    Card,
    Color,
    Player,
    PlayingCard,
    Rank,
    RankValues,
    Suit,
    VisibilityMode,
    can_view,
)
from cardgames.config import Config, configure, load_config
from cardgames.utils import setup_logging

__all__ = [
    "AccessDenied",
    "CardError",
    "IllegalState",
    "InvalidArgument",
    "Card",
    "Color",
    "Player",
    "PlayingCard",
    "Rank",
    "RankValues",
    "Suit",
    "VisibilityMode",
    "can_view",
    "Config",
    "configure",
    "load_config",
    "setup_logging",
]
