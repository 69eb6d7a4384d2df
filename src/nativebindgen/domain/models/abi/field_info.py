#!/usr/bin/env python3

"""Field information model for record layouts."""

from dataclasses import dataclass
from typing import Any

from .type_node import TypeNode


@dataclass
class FieldInfo:
    """One direct member of a record, in declaration order."""

    name: str
    size: int
    offset: int  # bytes; bit-fields are truncated to their containing byte
    type: TypeNode

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "size": self.size,
            "offset": self.offset,
            "type": self.type.to_dict(),
        }
