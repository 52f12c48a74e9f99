"""Render a single Draft.js block to HTML.

A block is rendered in three nested passes:

1. split into entity sections (links, images, plain text);
2. each entity section split into runs sharing COLOR / FONTSIZE, which become
   ``<span style="...">`` wrappers;
3. each of those split into runs sharing BOLD / ITALIC / UNDERLINE, which
   become ``<strong>``, ``<em>`` and ``<ins>`` tags around the escaped text.

The joined result is wrapped in the block's tag (see :func:`get_block_tag`).
"""

from __future__ import annotations

import logging
from typing import Any, Mapping, Union

from draft2html.errors import InvalidBlockError
from draft2html.markup import (
    add_style_property_markup,
    get_block_tag,
    get_entity_markup,
    get_style_tag_section_markup,
)
from draft2html.model import Block, Entity, entity_map_from_dict
from draft2html.sections import (
    STYLE_PROPERTY_ATTRIBUTES,
    STYLE_TAG_ATTRIBUTES,
    EntitySection,
    InlineStyles,
    StyleSection,
    get_entity_sections,
    get_inline_style_sections,
    get_style_array_for_block,
)

_logger = logging.getLogger(__name__)

BlockInput = Union[Block, Mapping[str, Any]]
EntityMapInput = Mapping[Any, Any]


def _coerce(block: BlockInput, entity_map: EntityMapInput) -> tuple[Block, dict[str, Entity]]:
    """Accept raw dicts (as produced by ``convertToRaw``) as well as model objects."""
    if not isinstance(block, Block):
        block = Block.from_dict(block)
    return block, entity_map_from_dict(entity_map or {})


def is_atomic_entity_block(block: Block) -> bool:
    """True for an empty block whose only content is an entity (e.g. an image)."""
    return bool(block.entity_ranges) and not block.text


def _get_inline_style_section_markup(
    block: Block,
    inline_styles: InlineStyles,
    style_section: StyleSection,
) -> str:
    tag_sections = get_inline_style_sections(
        block,
        STYLE_TAG_ATTRIBUTES,
        style_section.start,
        style_section.end,
        inline_styles,
    )
    content = "".join(get_style_tag_section_markup(s) for s in tag_sections)
    return add_style_property_markup(style_section.styles, content)


def _get_entity_section_markup(
    block: Block,
    entity_map: Mapping[str, Entity],
    inline_styles: InlineStyles,
    entity_section: EntitySection,
) -> str:
    # The inclusive end is passed on as the style pass's exclusive bound, so
    # the section's last character is not rendered. Only the trailing
    # section, which ends at len(text), needs clamping.
    stop = min(entity_section.end, len(block.text))
    style_sections = get_inline_style_sections(
        block,
        STYLE_PROPERTY_ATTRIBUTES,
        entity_section.start,
        stop,
        inline_styles,
    )
    text = "".join(
        _get_inline_style_section_markup(block, inline_styles, s) for s in style_sections
    )
    if entity_section.has_entity:
        text = get_entity_markup(entity_map, entity_section.entity_key, text)
    return text


def get_block_inner_markup(block: BlockInput, entity_map: EntityMapInput) -> str:
    """Markup for the content of *block*, without the surrounding block tag."""
    block, entity_map = _coerce(block, entity_map)
    if is_atomic_entity_block(block):
        return get_entity_markup(entity_map, block.entity_ranges[0].key, "")

    inline_styles = get_style_array_for_block(block)
    try:
        sections = get_entity_sections(block.entity_ranges, len(block.text))
    except InvalidBlockError as exc:
        raise InvalidBlockError(str(exc), block.key) from exc
    return "".join(
        _get_entity_section_markup(block, entity_map, inline_styles, section)
        for section in sections
    )


def get_block_markup(block: BlockInput, entity_map: EntityMapInput) -> str:
    """Return the HTML for *block*, terminated by a newline.

    *block* and the values of *entity_map* may be model objects or the raw
    dicts of Draft.js content.
    """
    block, entity_map = _coerce(block, entity_map)
    tag = get_block_tag(block.type)
    _logger.debug("rendering block %r as <%s>", block.key, tag)
    return f"<{tag}>{get_block_inner_markup(block, entity_map)}</{tag}>\n"
