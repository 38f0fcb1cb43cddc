"""Visibility modes and the view permission decision."""

from enum import IntEnum
from typing import Any

from cardgames.exceptions import IllegalState, InvalidArgument


class VisibilityMode(IntEnum):
    """Who can see the details of a card."""

    PUBLIC = 0  # Everybody
    OWNER_ONLY = 1  # Only the owner
    EXCLUDING_OWNER = 2  # Everybody except the owner
    HIDDEN = 3  # Nobody


def can_view(mode: VisibilityMode, owner: Any, requester: Any) -> bool:
    """Decide whether a requester may see a card's details.

    An absent owner never equals a requester, so OWNER_ONLY admits nobody
    and EXCLUDING_OWNER admits everybody.

    Args:
        mode: Visibility mode of the card.
        owner: Owning player, or None if unowned.
        requester: Player attempting to view the card.

    Returns:
        True if the requester may view the card.

    Raises:
        InvalidArgument: If requester is None.
        IllegalState: If mode is not a VisibilityMode.
    """
    if requester is None:
        raise InvalidArgument("Requester must not be None")
    if not isinstance(mode, VisibilityMode):
        raise IllegalState(f"Unknown visibility mode: {mode!r}")

    if mode is VisibilityMode.PUBLIC:
        return True
    if mode is VisibilityMode.OWNER_ONLY:
        return owner is not None and requester == owner
    if mode is VisibilityMode.EXCLUDING_OWNER:
        return owner is None or requester != owner
    if mode is VisibilityMode.HIDDEN:
        return False
    raise IllegalState(f"Unhandled visibility mode: {mode.name}")
