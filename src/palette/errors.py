from __future__ import annotations

"""Exception types raised by the palette library."""


class InvalidColorFormat(ValueError):
    """Raised when color text or components do not match the expected encoding.

    Subclasses :class:`ValueError` so callers that already guard user input
    with ``except ValueError`` keep working.
    """


__all__ = ["InvalidColorFormat"]
