"""Exception hierarchy for eosintf.

Decoding itself never raises; these cover the edges where text or other
external input is turned into interface IDs.
"""

from __future__ import annotations


class EosIntfError(Exception):
    """Base exception for all eosintf errors."""

    def __init__(self, message: str, value: str | None = None) -> None:
        self.value = value
        super().__init__(message)


class InvalidIntfIdError(EosIntfError, ValueError):
    """Text could not be parsed as an interface ID."""
