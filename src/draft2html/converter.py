"""High-level Draft.js-to-HTML conversion orchestrator.

Ties together the document model and the block renderer into a single
public API for converting raw content dicts, JSON text or files to HTML.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Union

from draft2html.block import get_block_markup
from draft2html.model import RawContent

_logger = logging.getLogger(__name__)

RawInput = Union[RawContent, Mapping[str, Any]]


class Converter:
    """Convert Draft.js raw content to HTML.

    Usage::

        converter = Converter()
        converter.convert_file("content.json", "content.html")

        # or from a dict produced by convertToRaw()
        html = converter.convert({"blocks": [...], "entityMap": {}})
    """

    def __init__(self, block_separator: str = "") -> None:
        self.block_separator = block_separator

    def convert(self, raw: RawInput) -> str:
        """Convert raw content to HTML.

        Args:
            raw: A :class:`RawContent` or the dict form of it.

        Returns:
            The markup of every block, in order.
        """
        content = raw if isinstance(raw, RawContent) else RawContent.from_dict(raw)
        _logger.debug(
            "converting %d blocks, %d entities",
            len(content.blocks),
            len(content.entity_map),
        )
        return self.block_separator.join(
            get_block_markup(block, content.entity_map) for block in content.blocks
        )

    def convert_json(self, json_text: str) -> str:
        """Parse *json_text* as raw content and convert it to HTML."""
        return self.convert(json.loads(json_text))

    def convert_file(
        self,
        input_path: str | Path,
        output_path: str | Path,
        *,
        encoding: str = "utf-8",
    ) -> None:
        """Read a raw content JSON file and write the HTML output.

        Args:
            input_path: Path to the input ``.json`` file.
            output_path: Path for the output ``.html`` file.
            encoding: Text encoding of both files.
        """
        input_path = Path(input_path)
        output_path = Path(output_path)

        html = self.convert_json(input_path.read_text(encoding=encoding))

        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(html, encoding=encoding)
        _logger.info("wrote %s", output_path)
