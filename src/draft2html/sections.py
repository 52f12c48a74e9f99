"""Partition a block's text into entity sections and inline style sections.

Two section types are produced, and they do not share an end convention:

* :class:`EntitySection` has an *inclusive* ``end``. The trailing section
  after the last entity range ends at ``block_length`` itself.
* :class:`StyleSection` has an *exclusive* ``end``.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from draft2html.errors import InvalidBlockError
from draft2html.model import Block, EntityRange

_logger = logging.getLogger(__name__)

BOLD = "BOLD"
ITALIC = "ITALIC"
UNDERLINE = "UNDERLINE"
COLOR = "COLOR"
FONTSIZE = "FONTSIZE"

COLOR_PREFIX = "color-"
FONTSIZE_PREFIX = "fontsize-"

# Attribute groups compared by the two style passes.
STYLE_PROPERTY_ATTRIBUTES = (COLOR, FONTSIZE)
STYLE_TAG_ATTRIBUTES = (BOLD, ITALIC, UNDERLINE)

# Order in which attributes are reported by get_styles_at_offset.
_OFFSET_STYLE_ORDER = (COLOR, FONTSIZE, UNDERLINE, ITALIC, BOLD)


# ---------------------------------------------------------------------------
# Section records
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EntitySection:
    """Characters ``start..end`` (inclusive) sharing one entity, or none."""

    start: int
    end: int
    entity_key: Any = None

    @property
    def has_entity(self) -> bool:
        return self.entity_key is not None


@dataclass(frozen=True)
class StyleSection:
    """Characters ``start..end-1`` sharing the values of the compared attributes."""

    start: int
    end: int
    styles: dict[str, Any] = field(default_factory=dict)
    text: str = ""


# ---------------------------------------------------------------------------
# Per-character style index
# ---------------------------------------------------------------------------

@dataclass
class InlineStyles:
    """Value of every inline attribute at every offset of a block."""

    length: int
    values: dict[str, list[Any]]

    @classmethod
    def empty(cls, length: int) -> InlineStyles:
        return cls(
            length=length,
            values={attr: [None] * length for attr in _OFFSET_STYLE_ORDER},
        )

    def __getitem__(self, attribute: str) -> list[Any]:
        return self.values[attribute]


def get_style_array_for_block(block: Block) -> InlineStyles:
    """Expand the block's inline style ranges into an :class:`InlineStyles` index.

    Later ranges overwrite earlier ones for the same attribute and offset.
    Unknown style tokens are skipped.
    """
    length = len(block.text)
    inline_styles = InlineStyles.empty(length)

    for style_range in block.inline_style_ranges:
        start = style_range.offset
        stop = start + style_range.length
        if start < 0 or style_range.length < 0 or stop > length:
            raise InvalidBlockError(
                f"inline style range {style_range.style!r} [{start}, {stop}) "
                f"outside text of length {length}",
                block.key,
            )

        style = style_range.style
        if style.startswith(COLOR_PREFIX):
            attribute, value = COLOR, style
        elif style.startswith(FONTSIZE_PREFIX):
            attribute, value = FONTSIZE, style[len(FONTSIZE_PREFIX):]
        elif style in STYLE_TAG_ATTRIBUTES:
            attribute, value = style, True
        else:
            _logger.debug("ignoring unsupported inline style %r", style)
            continue

        column = inline_styles[attribute]
        for i in range(start, stop):
            column[i] = value

    return inline_styles


def get_styles_at_offset(inline_styles: InlineStyles, offset: int) -> dict[str, Any]:
    """Return the attributes set at *offset*, keyed by attribute name."""
    styles: dict[str, Any] = {}
    for attribute in _OFFSET_STYLE_ORDER:
        value = inline_styles[attribute][offset]
        if value:
            styles[attribute] = value
    return styles


def same_style_as_previous(
    inline_styles: InlineStyles,
    styles: Sequence[str],
    index: int,
) -> bool:
    """True when every attribute in *styles* has the same value at *index* and *index - 1*."""
    if not 0 < index < inline_styles.length:
        return False
    return all(
        inline_styles[style][index] == inline_styles[style][index - 1]
        for style in styles
    )


# ---------------------------------------------------------------------------
# Sectionizers
# ---------------------------------------------------------------------------

def get_entity_sections(
    entity_ranges: Sequence[EntityRange],
    block_length: int,
) -> list[EntitySection]:
    """Cover ``[0, block_length)`` with entity sections, filling the gaps.

    Ranges must be sorted by offset and disjoint.
    """
    sections: list[EntitySection] = []
    last_offset = 0
    for r in entity_ranges:
        if r.length <= 0:
            raise InvalidBlockError(f"entity range at {r.offset} has length {r.length}")
        if r.offset < last_offset:
            raise InvalidBlockError(
                f"entity range at {r.offset} overlaps or precedes offset {last_offset}"
            )
        if r.offset + r.length > block_length:
            raise InvalidBlockError(
                f"entity range [{r.offset}, {r.offset + r.length}) "
                f"outside text of length {block_length}"
            )
        if r.offset > last_offset:
            sections.append(EntitySection(start=last_offset, end=r.offset - 1))
        sections.append(
            EntitySection(start=r.offset, end=r.offset + r.length - 1, entity_key=r.key)
        )
        last_offset = r.offset + r.length

    if last_offset < block_length or not sections:
        sections.append(EntitySection(start=last_offset, end=block_length))
    return sections


def get_inline_style_sections(
    block: Block,
    styles: Sequence[str],
    start: int,
    end: int,
    inline_styles: Optional[InlineStyles] = None,
) -> list[StyleSection]:
    """Split ``[start, end)`` into runs where the *styles* attributes don't change.

    Each section records the full style snapshot at its first offset.
    """
    text = block.text
    if not text:
        return []
    if inline_styles is None:
        inline_styles = get_style_array_for_block(block)

    sections: list[StyleSection] = []
    run_start = start
    run_styles: dict[str, Any] = {}
    chars: list[str] = []

    for i in range(start, end):
        if i != start and same_style_as_previous(inline_styles, styles, i):
            chars.append(text[i])
            continue
        if chars:
            sections.append(StyleSection(run_start, i, run_styles, "".join(chars)))
        run_start = i
        run_styles = get_styles_at_offset(inline_styles, i)
        chars = [text[i]]

    if chars:
        sections.append(StyleSection(run_start, run_start + len(chars), run_styles, "".join(chars)))
    return sections
