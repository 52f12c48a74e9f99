"""Tests for block tags, inline style markup and entity markup."""

from __future__ import annotations

import pytest

from draft2html.errors import MissingEntityError
from draft2html.markup import (
    add_inline_style_markup,
    add_style_property_markup,
    get_block_tag,
    get_entity_markup,
    get_style_tag_section_markup,
)
from draft2html.model import Entity
from draft2html.sections import StyleSection


class TestBlockTag:
    @pytest.mark.parametrize(
        "block_type, tag",
        [
            ("header-one", "h1"),
            ("header-two", "h2"),
            ("header-three", "h3"),
            ("header-four", "h4"),
            ("header-five", "h5"),
            ("header-six", "h6"),
            ("unordered-list-item", "ul"),
            ("ordered-list-item", "ol"),
            ("blockquote", "blockquote"),
        ],
    )
    def test_known_types(self, block_type: str, tag: str) -> None:
        assert get_block_tag(block_type) == tag

    @pytest.mark.parametrize("block_type", ["unstyled", "atomic", "code-block", "", None])
    def test_fallback_to_paragraph(self, block_type) -> None:
        assert get_block_tag(block_type) == "p"


class TestInlineStyleMarkup:
    @pytest.mark.parametrize(
        "style, expected",
        [
            ("BOLD", "<strong>x</strong>"),
            ("ITALIC", "<em>x</em>"),
            ("UNDERLINE", "<ins>x</ins>"),
            ("COLOR", "x"),
            ("STRIKETHROUGH", "x"),
        ],
    )
    def test_single_style(self, style: str, expected: str) -> None:
        assert add_inline_style_markup(style, "x") == expected

    def test_nesting_order(self) -> None:
        section = StyleSection(0, 2, {"UNDERLINE": True, "ITALIC": True, "BOLD": True}, "hi")
        assert get_style_tag_section_markup(section) == "<strong><em><ins>hi</ins></em></strong>"

    def test_nesting_order_ignores_dict_order(self) -> None:
        section = StyleSection(0, 2, {"BOLD": True, "ITALIC": True}, "hi")
        assert get_style_tag_section_markup(section) == "<strong><em>hi</em></strong>"

    def test_text_is_escaped(self) -> None:
        section = StyleSection(0, 3, {"BOLD": True}, "a<b")
        assert get_style_tag_section_markup(section) == "<strong>a&lt;b</strong>"

    def test_style_properties_ignored(self) -> None:
        section = StyleSection(0, 1, {"COLOR": "color-red", "FONTSIZE": "12"}, "x")
        assert get_style_tag_section_markup(section) == "x"


class TestStylePropertyMarkup:
    def test_color(self) -> None:
        assert add_style_property_markup({"COLOR": "red"}, "x") == '<span style="color: red;">x</span>'

    def test_color_token_prefix_stripped(self) -> None:
        result = add_style_property_markup({"COLOR": "color-rgb(0,0,0)"}, "x")
        assert result == '<span style="color: rgb(0,0,0);">x</span>'

    def test_font_size(self) -> None:
        assert add_style_property_markup({"FONTSIZE": "24"}, "x") == '<span style="font-size: 24;">x</span>'

    def test_color_and_font_size(self) -> None:
        result = add_style_property_markup({"COLOR": "color-blue", "FONTSIZE": "10"}, "x")
        assert result == '<span style="color: blue;font-size: 10;">x</span>'

    @pytest.mark.parametrize("styles", [None, {}, {"BOLD": True}])
    def test_no_properties(self, styles) -> None:
        assert add_style_property_markup(styles, "x") == "x"


class TestEntityMarkup:
    @pytest.fixture
    def entity_map(self) -> dict[str, Entity]:
        return {
            "0": Entity("LINK", {"url": "https://example.com"}),
            "1": Entity("IMAGE", {"src": "pic.png"}),
            "2": Entity("MENTION", {"name": "ana"}),
        }

    def test_link(self, entity_map) -> None:
        assert get_entity_markup(entity_map, 0, "site") == '<a href="https://example.com">site</a>'

    def test_image_discards_text(self, entity_map) -> None:
        assert get_entity_markup(entity_map, 1, "ignored") == '<img src="pic.png" />'

    def test_unknown_type_passes_text(self, entity_map) -> None:
        assert get_entity_markup(entity_map, "2", "@ana") == "@ana"

    def test_integer_keyed_map(self) -> None:
        entity_map = {7: Entity("LINK", {"url": "u"})}
        assert get_entity_markup(entity_map, 7, "t") == '<a href="u">t</a>'

    def test_missing_key_raises(self, entity_map) -> None:
        with pytest.raises(MissingEntityError) as info:
            get_entity_markup(entity_map, 42, "x")
        assert info.value.entity_key == 42
        assert "42" in str(info.value)
