"""Base card with viewer-dependent visibility."""

import functools
import logging
import threading
from typing import Any, Callable, TypeVar

from cardgames.exceptions import AccessDenied

from .visibility import VisibilityMode, can_view

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def gated(method: F) -> F:
    """Guard an accessor with the card's permission check.

    The wrapped method takes the requester as its first argument. The check
    and the read run under the card's lock, and the body is never entered
    when the check fails.
    """

    @functools.wraps(method)
    def wrapper(self: "Card", requester: Any, *args: Any, **kwargs: Any) -> Any:
        with self._lock:
            self.check_permission(requester)
            return method(self, requester, *args, **kwargs)

    return wrapper  # type: ignore[return-value]


class Card:
    """A card owned by at most one player.

    Details of subclasses are read through `gated` accessors. Owner and
    visibility are administrative state and can be changed by anyone
    holding the card.

    Each read is consistent on its own. To read several details from one
    state, hold the card with ``with card:`` around the reads.
    """

    def __init__(
        self,
        owner: Any = None,
        visibility: VisibilityMode | None = None,
    ):
        """Initialize card.

        Args:
            owner: Owning player, or None if unowned.
            visibility: Visibility mode. Defaults to OWNER_ONLY when an
                owner is given, otherwise HIDDEN.
        """
        self._lock = threading.RLock()
        if visibility is None:
            visibility = (
                VisibilityMode.HIDDEN if owner is None else VisibilityMode.OWNER_ONLY
            )
        self._visibility = visibility
        self._owner = owner

    @property
    def owner(self) -> Any:
        """Owning player, or None."""
        return self._owner

    @property
    def visibility(self) -> VisibilityMode:
        """Current visibility mode."""
        return self._visibility

    def set_owner(self, owner: Any) -> None:
        """Hand the card to another player (None to unown it)."""
        with self._lock:
            logger.debug("%r: owner %s -> %s", self, self._owner, owner)
            self._owner = owner

    def set_visibility(self, visibility: VisibilityMode) -> None:
        """Change who can see the card."""
        with self._lock:
            logger.debug("%r: visibility %r -> %r", self, self._visibility, visibility)
            self._visibility = visibility

    def is_visible_from(self, requester: Any) -> bool:
        """Check if the requester can see the details of this card."""
        with self._lock:
            return can_view(self._visibility, self._owner, requester)

    def check_permission(self, requester: Any) -> None:
        """Verify that the requester may view this card.

        Raises:
            AccessDenied: If the requester does not have permission.
            InvalidArgument: If requester is None.
        """
        if not self.is_visible_from(requester):
            raise AccessDenied(f"{requester} does not have access to this card")

    def __enter__(self) -> "Card":
        """Hold the card's lock so several reads see one consistent state."""
        self._lock.acquire()
        return self

    def __exit__(self, *args: Any) -> None:
        """Release the card's lock."""
        self._lock.release()

    def __repr__(self) -> str:
        return f"{type(self).__name__}(id=0x{id(self):x})"
