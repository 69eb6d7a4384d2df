#!/usr/bin/env python3

"""Constant information model for enumerators and global variables."""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from .type_node import TypeNode


class ValueState(Enum):
    """Whether a constant carries a compile-time value.

    A declaration that was never seen has no ConstantInfo at all, so
    together with this flag there are three distinguishable outcomes.
    """

    EVALUATED = "evaluated"
    UNEVALUABLE = "unevaluable"


ConstantValue = int | float | str


@dataclass
class ConstantInfo:
    """An enumerator or a global variable, with its value when known."""

    name: str
    type: TypeNode
    value: ConstantValue | None = None
    state: ValueState = ValueState.UNEVALUABLE
    source_file: str = ""

    @classmethod
    def evaluated(
        cls, name: str, type_node: TypeNode, value: ConstantValue, source_file: str
    ) -> "ConstantInfo":
        return cls(name, type_node, value, ValueState.EVALUATED, source_file)

    @classmethod
    def unevaluable(cls, name: str, type_node: TypeNode, source_file: str) -> "ConstantInfo":
        return cls(name, type_node, None, ValueState.UNEVALUABLE, source_file)

    @property
    def has_value(self) -> bool:
        return self.state is ValueState.EVALUATED

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {"type": self.type.to_dict()}
        if self.has_value:
            out["value"] = self.value
        out["fileName"] = self.source_file
        return out
