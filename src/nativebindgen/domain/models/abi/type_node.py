#!/usr/bin/env python3

"""Type model for serialized native types.

A ``TypeNode`` is one of a closed set of frozen dataclasses, one per
``TypeNodeKind``. Record and enum references hold a name only, so a node
never contains the fields of the record it refers to. Consumers resolve the
name through the structs table; this keeps serialization finite on
self-referential and mutually-referential records.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Union


class TypeNodeKind(Enum):
    """Discriminator of the serialized type variants."""

    PRIMITIVE = "Primitive"
    POINTER = "Pointer"
    FUNCTION = "Function"
    STRUCT = "Struct"
    ENUM = "Enum"
    ARRAY = "Array"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class PrimitiveType:
    """Built-in scalar type, spelled platform-independently."""

    name: str

    kind: ClassVar[TypeNodeKind] = TypeNodeKind.PRIMITIVE

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "name": self.name}


@dataclass(frozen=True)
class PointerType:
    """Pointer to another type."""

    pointee: TypeNode

    kind: ClassVar[TypeNodeKind] = TypeNodeKind.POINTER

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "pointee": self.pointee.to_dict()}


@dataclass(frozen=True)
class FunctionType:
    """Function prototype.

    ``variadic`` is serialized only when True.
    """

    arg_types: tuple[TypeNode, ...]
    return_type: TypeNode
    variadic: bool = False

    kind: ClassVar[TypeNodeKind] = TypeNodeKind.FUNCTION

    def signature_dict(self) -> dict[str, Any]:
        """Signature fields without the ``kind`` discriminator."""
        out: dict[str, Any] = {
            "argTypes": [arg.to_dict() for arg in self.arg_types],
            "returnType": self.return_type.to_dict(),
        }
        if self.variadic:
            out["variadic"] = True
        return out

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, **self.signature_dict()}


@dataclass(frozen=True)
class StructRef:
    """Reference to a struct, class or union by canonical name."""

    name: str

    kind: ClassVar[TypeNodeKind] = TypeNodeKind.STRUCT

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "name": self.name}


@dataclass(frozen=True)
class EnumRef:
    """Reference to an enumeration by canonical name."""

    name: str

    kind: ClassVar[TypeNodeKind] = TypeNodeKind.ENUM

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "name": self.name}


@dataclass(frozen=True)
class ArrayType:
    """Fixed-size array; ``size`` counts elements, not bytes."""

    element_type: TypeNode
    size: int

    kind: ClassVar[TypeNodeKind] = TypeNodeKind.ARRAY

    def to_dict(self) -> dict[str, Any]:
        return {
            "kind": self.kind.value,
            "elementType": self.element_type.to_dict(),
            "size": self.size,
        }


@dataclass(frozen=True)
class UnknownType:
    """Type shape the model does not represent."""

    kind_id: int
    kind_name: str

    kind: ClassVar[TypeNodeKind] = TypeNodeKind.UNKNOWN

    def to_dict(self) -> dict[str, Any]:
        return {"kind": self.kind.value, "id": self.kind_id, "name": self.kind_name}


TypeNode = Union[
    PrimitiveType, PointerType, FunctionType, StructRef, EnumRef, ArrayType, UnknownType
]

TYPE_NODE_CLASSES: dict[TypeNodeKind, type] = {
    cls.kind: cls
    for cls in (PrimitiveType, PointerType, FunctionType, StructRef, EnumRef, ArrayType, UnknownType)
}

if set(TYPE_NODE_CLASSES) != set(TypeNodeKind):
    missing = sorted(k.value for k in set(TypeNodeKind) - set(TYPE_NODE_CLASSES))
    raise TypeError(f"TypeNodeKind without a variant class: {missing}")
