"""Tests for the base card permission gate."""

import logging
import threading
from typing import Any

import pytest

from cardgames.exceptions import AccessDenied, IllegalState, InvalidArgument
from cardgames.models.card import Card, gated
from cardgames.models.player import Player
from cardgames.models.visibility import VisibilityMode, can_view

P1 = Player(player_id=1, name="alice")
P2 = Player(player_id=2, name="bob")


class SecretCard(Card):
    """Card with a single protected value, counting reads."""

    def __init__(self, secret: str, **kwargs: Any):
        super().__init__(**kwargs)
        self._secret = secret
        self.reads = 0

    @gated
    def get_secret(self, requester: Any) -> str:
        self.reads += 1
        return self._secret


class TestCardDefaults:
    """Tests for constructor defaults."""

    def test_no_owner_is_hidden(self):
        """Test that an unowned card defaults to HIDDEN."""
        card = Card()
        assert card.owner is None
        assert card.visibility == VisibilityMode.HIDDEN

    def test_owner_is_owner_only(self):
        """Test that an owned card defaults to OWNER_ONLY."""
        card = Card(owner=P1)
        assert card.owner == P1
        assert card.visibility == VisibilityMode.OWNER_ONLY

    def test_explicit_visibility(self):
        """Test that an explicit mode wins over the defaults."""
        assert Card(visibility=VisibilityMode.PUBLIC).visibility == VisibilityMode.PUBLIC
        card = Card(owner=P1, visibility=VisibilityMode.EXCLUDING_OWNER)
        assert card.visibility == VisibilityMode.EXCLUDING_OWNER


class TestCheckPermission:
    """Tests for check_permission and is_visible_from."""

    @pytest.mark.parametrize("mode", list(VisibilityMode))
    @pytest.mark.parametrize("owner", [P1, None])
    @pytest.mark.parametrize("requester", [P1, P2])
    def test_matches_can_view(self, mode, owner, requester):
        """Test that the gate denies exactly when can_view says no."""
        card = Card(owner=owner, visibility=mode)
        allowed = can_view(mode, owner, requester)

        assert card.is_visible_from(requester) is allowed
        if allowed:
            assert card.check_permission(requester) is None
        else:
            with pytest.raises(AccessDenied):
                card.check_permission(requester)

    def test_none_requester(self):
        """Test that a missing requester is an argument error."""
        card = Card(visibility=VisibilityMode.PUBLIC)
        with pytest.raises(InvalidArgument):
            card.check_permission(None)

    def test_access_denied_is_not_invalid_argument(self):
        """Test that denial is distinguishable from bad arguments."""
        card = Card(owner=P1)
        with pytest.raises(AccessDenied) as exc_info:
            card.check_permission(P2)
        assert not isinstance(exc_info.value, InvalidArgument)
        assert isinstance(exc_info.value, PermissionError)

    def test_unknown_visibility(self):
        """Test that a corrupted mode surfaces as IllegalState."""
        card = Card(owner=P1)
        card.set_visibility("everyone")
        with pytest.raises(IllegalState):
            card.check_permission(P1)


class TestAdministration:
    """Tests for owner and visibility changes."""

    def test_change_hands(self):
        """Test that passing a card to another player moves access."""
        card = Card(owner=P1)
        assert card.is_visible_from(P1)

        card.set_owner(P2)
        assert card.owner == P2
        assert not card.is_visible_from(P1)
        assert card.is_visible_from(P2)

    def test_unown(self):
        """Test that removing the owner locks OWNER_ONLY for everybody."""
        card = Card(owner=P1)
        card.set_owner(None)
        assert not card.is_visible_from(P1)
        assert not card.is_visible_from(P2)

    def test_set_visibility(self):
        """Test that changing the mode takes effect immediately."""
        card = Card(owner=P1)
        card.set_visibility(VisibilityMode.PUBLIC)
        assert card.is_visible_from(P2)
        card.set_visibility(VisibilityMode.HIDDEN)
        assert not card.is_visible_from(P1)

    def test_setters_not_gated(self):
        """Test that setters work even when nobody can view the card."""
        card = Card()
        card.set_owner(P2)
        card.set_visibility(VisibilityMode.EXCLUDING_OWNER)
        assert card.is_visible_from(P1)

    def test_setters_log(self, caplog):
        """Test that administrative changes are logged at debug level."""
        card = Card()
        with caplog.at_level(logging.DEBUG, logger="cardgames.models.card"):
            card.set_owner(P1)
            card.set_visibility(VisibilityMode.PUBLIC)
        assert len(caplog.records) == 2


class TestGated:
    """Tests for the gated accessor decorator."""

    def test_allowed(self):
        """Test that an admitted requester gets the value."""
        card = SecretCard("x", owner=P1)
        assert card.get_secret(P1) == "x"
        assert card.reads == 1

    def test_denied_never_reads(self):
        """Test that the accessor body does not run on denial."""
        card = SecretCard("x", owner=P1)
        with pytest.raises(AccessDenied):
            card.get_secret(P2)
        assert card.reads == 0

    def test_none_requester_never_reads(self):
        """Test that the accessor body does not run on a bad requester."""
        card = SecretCard("x", visibility=VisibilityMode.PUBLIC)
        with pytest.raises(InvalidArgument):
            card.get_secret(None)
        assert card.reads == 0

    def test_wraps_metadata(self):
        """Test that the wrapper keeps the accessor's name."""
        assert SecretCard.get_secret.__name__ == "get_secret"

    def test_repr_hides_details(self):
        """Test that repr does not disclose protected values."""
        card = SecretCard("top-secret", owner=P1)
        assert "top-secret" not in repr(card)
        assert "SecretCard" in repr(card)


class TestHoldingCard:
    """Tests for holding a card across several reads."""

    def test_context_returns_card(self):
        """Test that gated reads work while the card is held."""
        card = SecretCard("x", owner=P1)
        with card as held:
            assert held is card
            assert held.get_secret(P1) == "x"
            assert held.is_visible_from(P1)

    def test_blocks_other_threads(self):
        """Test that changes from another thread wait until release."""
        card = Card(owner=P1)
        worker = threading.Thread(target=card.set_owner, args=(P2,))

        with card:
            worker.start()
            worker.join(timeout=0.1)
            assert worker.is_alive()
            assert card.owner == P1

        worker.join()
        assert card.owner == P2

    def test_released_on_error(self):
        """Test that the card is released when a read inside fails."""
        card = SecretCard("x", owner=P1)
        with pytest.raises(AccessDenied):
            with card:
                card.get_secret(P2)

        worker = threading.Thread(target=card.set_owner, args=(P2,))
        worker.start()
        worker.join(timeout=5)
        assert not worker.is_alive()
        assert card.get_secret(P2) == "x"
