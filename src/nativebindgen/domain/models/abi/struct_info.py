#!/usr/bin/env python3

"""Struct information model for record layouts."""

from dataclasses import dataclass, field
from typing import Any

from .field_info import FieldInfo


@dataclass
class StructInfo:
    """Layout of a defined, named struct, class or union."""

    name: str
    size: int
    fields: list[FieldInfo] = field(default_factory=list)
    source_file: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "size": self.size,
            "fields": [f.to_dict() for f in self.fields],
            "fileName": self.source_file,
        }
