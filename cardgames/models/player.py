"""Player identity model."""

from pydantic import BaseModel


class Player(BaseModel, frozen=True):
    """Identity token for a player.

    Cards only compare players for equality, so two tokens with the same
    fields are the same player.
    """

    player_id: int
    name: str = "Player"

    def __str__(self) -> str:
        return f"Player{self.player_id}[{self.name}]"
