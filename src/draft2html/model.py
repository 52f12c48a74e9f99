"""Document model for Draft.js raw content.

Converts the raw JSON structure produced by ``convertToRaw`` into the
dataclasses consumed by :mod:`draft2html.block`::

    {
        "blocks": [{"key": "...", "type": "unstyled", "text": "...",
                    "inlineStyleRanges": [...], "entityRanges": [...]}],
        "entityMap": {"0": {"type": "LINK", "data": {"url": "..."}}},
    }
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping

from draft2html.errors import InvalidBlockError


# ---------------------------------------------------------------------------
# Ranges and entities
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EntityRange:
    offset: int
    length: int
    key: Any

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> EntityRange:
        return cls(
            offset=_int_field(raw, "offset"),
            length=_int_field(raw, "length"),
            key=raw.get("key"),
        )


@dataclass(frozen=True)
class InlineStyleRange:
    offset: int
    length: int
    style: str

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> InlineStyleRange:
        return cls(
            offset=_int_field(raw, "offset"),
            length=_int_field(raw, "length"),
            style=str(raw.get("style", "")),
        )


@dataclass(frozen=True)
class Entity:
    """An out-of-line object (link, image, ...) referenced from a block.

    ``mutability`` is not used for rendering; it is kept for callers that
    wrap the rendered blocks themselves.
    """

    type: str
    data: dict[str, Any] = field(default_factory=dict)
    mutability: str = "MUTABLE"

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Entity:
        return cls(
            type=str(raw.get("type", "")),
            data=dict(raw.get("data") or {}),
            mutability=str(raw.get("mutability", "MUTABLE")),
        )


# ---------------------------------------------------------------------------
# Blocks
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Block:
    """One paragraph-like unit with its own text and metadata ranges.

    ``key`` only labels errors and log lines. ``depth`` and ``data`` are not
    used for rendering; they are kept for callers that wrap blocks themselves
    (list nesting, per-block attributes).
    """

    type: str = "unstyled"
    text: str = ""
    entity_ranges: tuple[EntityRange, ...] = ()
    inline_style_ranges: tuple[InlineStyleRange, ...] = ()
    key: str = ""
    depth: int = 0
    data: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> Block:
        if not isinstance(raw, Mapping):
            raise InvalidBlockError(f"expected a mapping, got {type(raw).__name__}")
        key = str(raw.get("key", ""))
        text = raw.get("text") or ""
        if not isinstance(text, str):
            raise InvalidBlockError("text must be a string", key)
        try:
            entity_ranges = tuple(
                EntityRange.from_dict(r) for r in raw.get("entityRanges") or []
            )
            style_ranges = tuple(
                InlineStyleRange.from_dict(r) for r in raw.get("inlineStyleRanges") or []
            )
        except InvalidBlockError as exc:
            raise InvalidBlockError(str(exc), key) from exc
        return cls(
            type=raw.get("type") or "unstyled",
            text=text,
            entity_ranges=entity_ranges,
            inline_style_ranges=style_ranges,
            key=key,
            depth=int(raw.get("depth") or 0),
            data=dict(raw.get("data") or {}),
        )


@dataclass
class RawContent:
    """A whole document: ordered blocks plus the shared entity map."""

    blocks: list[Block] = field(default_factory=list)
    entity_map: dict[str, Entity] = field(default_factory=dict)

    @classmethod
    def from_dict(cls, raw: Mapping[str, Any]) -> RawContent:
        if not isinstance(raw, Mapping):
            raise InvalidBlockError(
                f"raw content must be an object, got {type(raw).__name__}"
            )
        blocks_raw = raw.get("blocks") or []
        if not isinstance(blocks_raw, list):
            raise InvalidBlockError("'blocks' must be a list")
        return cls(
            blocks=[Block.from_dict(b) for b in blocks_raw],
            entity_map=entity_map_from_dict(raw.get("entityMap") or {}),
        )


def entity_map_from_dict(raw: Mapping[Any, Any]) -> dict[str, Entity]:
    """Build an entity map keyed by ``str(key)``."""
    entities: dict[str, Entity] = {}
    for key, value in raw.items():
        entities[str(key)] = value if isinstance(value, Entity) else Entity.from_dict(value)
    return entities


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _int_field(raw: Mapping[str, Any], name: str) -> int:
    if not isinstance(raw, Mapping):
        raise InvalidBlockError(f"range must be an object, got {raw!r}")
    value = raw.get(name)
    if isinstance(value, bool) or not isinstance(value, int):
        raise InvalidBlockError(f"range {name!r} must be an integer, got {value!r}")
    return value
