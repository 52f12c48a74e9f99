"""Exceptions raised while converting Draft.js content to HTML.

Well-formed content never raises; these cover input that breaks the
document model's own invariants (ranges out of order or out of bounds,
entity keys missing from the entity map, raw dicts of the wrong shape).
"""

from __future__ import annotations


class DraftConversionError(ValueError):
    """Base class for all conversion errors."""


class InvalidBlockError(DraftConversionError):
    """A block (or raw content dict) violates the document model."""

    def __init__(self, message: str, block_key: str = "") -> None:
        self.block_key = block_key
        if block_key:
            message = f"block {block_key!r}: {message}"
        super().__init__(message)


class MissingEntityError(DraftConversionError, KeyError):
    """An entity range references a key that is not in the entity map."""

    def __init__(self, entity_key: object) -> None:
        self.entity_key = entity_key
        super().__init__(f"entity {entity_key!r} not found in entity map")

    def __str__(self) -> str:
        return str(self.args[0])
