"""Convert Draft.js raw content to HTML."""

__version__ = "0.1.0"

from draft2html.block import get_block_inner_markup, get_block_markup
from draft2html.converter import Converter
from draft2html.errors import DraftConversionError, InvalidBlockError, MissingEntityError
from draft2html.markup import add_inline_style_markup, add_style_property_markup, get_block_tag
from draft2html.model import Block, Entity, EntityRange, InlineStyleRange, RawContent
from draft2html.sections import get_styles_at_offset, same_style_as_previous

__all__ = [
    "Block",
    "Converter",
    "DraftConversionError",
    "Entity",
    "EntityRange",
    "InlineStyleRange",
    "InvalidBlockError",
    "MissingEntityError",
    "RawContent",
    "__version__",
    "add_inline_style_markup",
    "add_style_property_markup",
    "get_block_inner_markup",
    "get_block_markup",
    "get_block_tag",
    "get_styles_at_offset",
    "same_style_as_previous",
]
