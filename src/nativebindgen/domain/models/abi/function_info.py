#!/usr/bin/env python3

"""Function information model for free-function signatures."""

from dataclasses import dataclass
from typing import Any

from .type_node import FunctionType


@dataclass
class FunctionInfo:
    """Canonical signature of a free function."""

    name: str
    signature: FunctionType
    source_file: str = ""

    @property
    def variadic(self) -> bool:
        return self.signature.variadic

    def to_dict(self) -> dict[str, Any]:
        return {**self.signature.signature_dict(), "fileName": self.source_file}
