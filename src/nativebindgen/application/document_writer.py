#!/usr/bin/env python3

"""JSON rendering of the ABI document."""

import json
from pathlib import Path
from typing import TextIO

from ..domain.models.abi import OutputDocument
from ..infrastructure.logging import get_logger

logger = get_logger(__name__)


def render_document(document: OutputDocument, indent: int | None = 2) -> str:
    """Encode the document as JSON text."""
    return json.dumps(document.to_dict(), indent=indent, ensure_ascii=False)


def write_document(
    document: OutputDocument,
    output_file: Path,
    indent: int | None = 2,
    echo: TextIO | None = None,
) -> str:
    """Write the document to ``output_file`` and optionally echo it.

    Args:
        document: Finalized extraction result
        output_file: Destination JSON file
        indent: JSON indentation
        echo: Stream that also receives the document, or None

    Returns:
        The rendered JSON text
    """
    text = render_document(document, indent)

    output_file.write_text(text + "\n", encoding="utf-8")
    logger.info(f"Wrote {output_file} ({len(text)} bytes)")

    if echo is not None:
        echo.write(text + "\n")
        echo.flush()

    return text
