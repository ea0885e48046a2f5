from __future__ import annotations


class TokenError(ValueError):
    """Base class for failures while reading a shared game token."""


class MalformedToken(TokenError):
    """A board token is not a list of well-formed, in-range piece tokens."""


class InvalidToken(TokenError):
    """One of the shared fields (board, size or set) could not be decoded."""
