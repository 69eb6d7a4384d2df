#!/usr/bin/env python3

"""Aggregate result of one header extraction."""

from dataclasses import dataclass, field
from typing import Any

from .constant_info import ConstantInfo
from .function_info import FunctionInfo
from .struct_info import StructInfo


@dataclass
class OutputDocument:
    """Three name-keyed symbol tables.

    Adding an entry under an existing name replaces it; the last declaration
    visited wins.
    """

    structs: dict[str, StructInfo] = field(default_factory=dict)
    functions: dict[str, FunctionInfo] = field(default_factory=dict)
    constants: dict[str, ConstantInfo] = field(default_factory=dict)

    def add_struct(self, info: StructInfo) -> None:
        self.structs[info.name] = info

    def add_function(self, info: FunctionInfo) -> None:
        self.functions[info.name] = info

    def add_constant(self, info: ConstantInfo) -> None:
        self.constants[info.name] = info

    def to_dict(self) -> dict[str, Any]:
        """Plain-data form ready for JSON encoding."""
        return {
            "structs": {name: info.to_dict() for name, info in self.structs.items()},
            "functions": {name: info.to_dict() for name, info in self.functions.items()},
            "constants": {name: info.to_dict() for name, info in self.constants.items()},
        }
