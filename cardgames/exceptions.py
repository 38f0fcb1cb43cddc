"""Errors raised by card models."""


class CardError(Exception):
    """Base class for card errors."""


class InvalidArgument(CardError, ValueError):
    """An argument was absent or not a recognized value."""


class AccessDenied(CardError, PermissionError):
    """The requester may not view this card's details."""


class IllegalState(CardError, RuntimeError):
    """A card reached a state that should be impossible to construct."""
