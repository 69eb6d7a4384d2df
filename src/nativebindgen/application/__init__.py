#!/usr/bin/env python3

"""Application layer: extraction orchestration and output."""

from .document_writer import render_document, write_document
from .extractor import AbiExtractor, extract_header

__all__ = ["AbiExtractor", "extract_header", "render_document", "write_document"]
