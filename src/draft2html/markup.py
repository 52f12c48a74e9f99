"""HTML fragments for block tags, inline styles and entities."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from draft2html.errors import MissingEntityError
from draft2html.escaping import render_text
from draft2html.model import Entity
from draft2html.sections import (
    BOLD,
    COLOR,
    COLOR_PREFIX,
    FONTSIZE,
    ITALIC,
    UNDERLINE,
    StyleSection,
)

# ---------------------------------------------------------------------------
# Block tags
# ---------------------------------------------------------------------------

BLOCK_TYPE_TAGS: dict[str, str] = {
    "header-one": "h1",
    "header-two": "h2",
    "header-three": "h3",
    "header-four": "h4",
    "header-five": "h5",
    "header-six": "h6",
    "unordered-list-item": "ul",
    "ordered-list-item": "ol",
    "blockquote": "blockquote",
}

DEFAULT_BLOCK_TAG = "p"


def get_block_tag(block_type: Optional[str]) -> str:
    """Return the HTML tag wrapping a block of *block_type*."""
    return block_type and BLOCK_TYPE_TAGS.get(block_type) or DEFAULT_BLOCK_TAG


# ---------------------------------------------------------------------------
# Inline styles
# ---------------------------------------------------------------------------

_INLINE_TAGS = {
    BOLD: "strong",
    ITALIC: "em",
    UNDERLINE: "ins",
}

# Innermost first: BOLD ends up as the outermost tag.
INLINE_TAG_ORDER = (UNDERLINE, ITALIC, BOLD)


def add_inline_style_markup(style: str, content: str) -> str:
    """Wrap *content* in the tag for *style*; other styles leave it unchanged."""
    tag = _INLINE_TAGS.get(style)
    if tag is None:
        return content
    return f"<{tag}>{content}</{tag}>"


def add_style_property_markup(styles: Optional[Mapping[str, Any]], content: str) -> str:
    """Wrap *content* in a ``<span style="...">`` for COLOR and FONTSIZE."""
    if not styles or not (styles.get(COLOR) or styles.get(FONTSIZE)):
        return content
    properties = ""
    if styles.get(COLOR):
        properties += f"color: {_css_color(styles[COLOR])};"
    if styles.get(FONTSIZE):
        properties += f"font-size: {styles[FONTSIZE]};"
    return f'<span style="{properties}">{content}</span>'


def get_style_tag_section_markup(section: StyleSection) -> str:
    """Escaped text of *section* wrapped in its BOLD/ITALIC/UNDERLINE tags."""
    text = render_text(section.text)
    for style in INLINE_TAG_ORDER:
        if section.styles.get(style):
            text = add_inline_style_markup(style, text)
    return text


def _css_color(value: str) -> str:
    if value.startswith(COLOR_PREFIX):
        return value[len(COLOR_PREFIX):]
    return value


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------

def lookup_entity(entity_map: Mapping[str, Entity], entity_key: Any) -> Entity:
    """Fetch *entity_key* from *entity_map*, falling back to ``str(entity_key)``.

    Raw JSON stores entity map keys as strings and range keys as integers.
    """
    for key in (entity_key, str(entity_key)):
        if key in entity_map:
            return entity_map[key]
    raise MissingEntityError(entity_key)


def get_entity_markup(
    entity_map: Mapping[str, Entity],
    entity_key: Any,
    text: str = "",
) -> str:
    """Markup for *text* covered by the entity *entity_key*.

    Links wrap the text, images replace it, anything else is returned as is.
    """
    entity = lookup_entity(entity_map, entity_key)
    if entity.type == "LINK":
        return f'<a href="{entity.data.get("url", "")}">{text}</a>'
    if entity.type == "IMAGE":
        return f'<img src="{entity.data.get("src", "")}" />'
    return text
