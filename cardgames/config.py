"""Configuration management."""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, field_validator

from cardgames.models.playing_card import PlayingCard, Rank, RankValues, Suit
from cardgames.models.visibility import VisibilityMode
from cardgames.utils.logger import LEVELS, setup_logging

logger = logging.getLogger(__name__)


class CardsConfig(BaseModel):
    """Card configuration.

    Names are matched case-insensitively against the enum member names,
    e.g. ``owner_only`` or ``ACE``.
    """

    # None keeps the owner-dependent default (OWNER_ONLY / HIDDEN)
    default_visibility: str | None = None
    rank_values: dict[str, int] = {}

    @field_validator("default_visibility")
    @classmethod
    def _check_visibility(cls, v: str | None) -> str | None:
        if v is None:
            return None
        name = v.upper()
        if name not in VisibilityMode.__members__:
            raise ValueError(f"Unknown visibility mode: {v}")
        return name

    @field_validator("rank_values")
    @classmethod
    def _check_ranks(cls, v: dict[str, int]) -> dict[str, int]:
        checked = {}
        for key, value in v.items():
            name = key.upper()
            if name not in Rank.__members__:
                raise ValueError(f"Unknown rank: {key}")
            checked[name] = value
        return checked

    @property
    def visibility(self) -> VisibilityMode | None:
        """Configured default visibility, if any."""
        if self.default_visibility is None:
            return None
        return VisibilityMode[self.default_visibility]


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"

    @field_validator("level")
    @classmethod
    def _check_level(cls, v: str) -> str:
        name = v.upper()
        if name not in LEVELS:
            raise ValueError(f"Unknown logging level: {v}")
        return name


class Config(BaseModel):
    """Root configuration."""

    cards: CardsConfig = CardsConfig()
    logging: LoggingConfig = LoggingConfig()

    def rank_values(self) -> RankValues:
        """Build a new weight table with the configured overrides."""
        return RankValues({Rank[name]: v for name, v in self.cards.rank_values.items()})

    def new_card(
        self,
        suit: Suit,
        rank: Rank | None,
        owner: Any = None,
    ) -> PlayingCard:
        """Create a playing card using the configured defaults.

        Args:
            suit: Card suit.
            rank: Card rank (None for a rankless joker).
            owner: Owning player, or None if unowned.

        Returns:
            New PlayingCard with its own weight table.
        """
        return PlayingCard(
            suit,
            rank,
            owner=owner,
            visibility=self.cards.visibility,
            rank_values=self.rank_values(),
        )


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None or missing, uses default config.

    Returns:
        Config object.

    Raises:
        pydantic.ValidationError: If the file content is not a valid config.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.is_file():
        logger.debug("Config file %s not found, using defaults", config_path)
        return Config()

    with open(config_path, encoding="utf-8") as f:
        data = yaml.safe_load(f)

    return Config.model_validate(data) if data else Config()


def configure(path: Path | str | None = None) -> Config:
    """Load configuration and apply its logging settings.

    Args:
        path: Path to config file. If None or missing, uses default config.

    Returns:
        The loaded Config, for building cards with `Config.new_card`.
    """
    config = load_config(path)
    setup_logging(config.logging.level)
    logger.debug("Loaded config from %s", path)
    return config
