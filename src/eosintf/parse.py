"""Parse interface IDs from text (CLI arguments, stdin, log lines)."""

from __future__ import annotations

from eosintf.exceptions import InvalidIntfIdError


def parse_intf_id(text: str) -> int:
    """Parse an interface ID written in decimal or with a 0x/0o/0b prefix.

    Negative values are returned as-is; the decoder masks them to 32 bits.

    Raises:
        InvalidIntfIdError: If the text is empty or not an integer literal.
    """
    stripped = text.strip()
    if not stripped:
        raise InvalidIntfIdError("Empty interface ID", value=text)
    try:
        return int(stripped, 0)
    except ValueError:
        pass
    # int(x, 0) rejects zero-padded decimals such as "0042"
    digits = stripped[1:] if stripped[0] in "+-" else stripped
    if digits.isdigit() and digits.isascii():
        return int(stripped, 10)
    raise InvalidIntfIdError(
        f"Invalid interface ID {stripped!r}: expected decimal or 0x-prefixed hex",
        value=text,
    )
