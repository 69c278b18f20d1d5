"""Exceptions raised while decoding boards and notation."""

from __future__ import annotations


class InvalidNotationError(ValueError):
    """Raised when a piece, location or square notation cannot be parsed."""


class InvalidBoardError(ValueError):
    """Raised when a board string or board id cannot be decoded."""
