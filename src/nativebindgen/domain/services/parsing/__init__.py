#!/usr/bin/env python3

"""Parsing services turning libclang cursors into ABI models."""

from .cursor_classifier import CursorClassifier
from .declaration_classifier import DeclarationClassifier
from .field_collector import FieldCollector
from .type_serializer import TypeSerializer

__all__ = [
    "CursorClassifier",
    "DeclarationClassifier",
    "FieldCollector",
    "TypeSerializer",
]
