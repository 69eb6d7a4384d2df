#!/usr/bin/env python3

"""ABI description models."""

from .constant_info import ConstantInfo, ConstantValue, ValueState
from .field_info import FieldInfo
from .function_info import FunctionInfo
from .kind_constants import (
    FUNCTION_SCOPE_CURSOR_KINDS,
    PRIMITIVE_SPELLINGS,
    RECORD_CURSOR_KINDS,
    SUGAR_TYPE_KINDS,
    UNSIGNED_INTEGER_KINDS,
)
from .output_document import OutputDocument
from .struct_info import StructInfo
from .type_node import (
    ArrayType,
    EnumRef,
    FunctionType,
    PointerType,
    PrimitiveType,
    StructRef,
    TypeNode,
    TypeNodeKind,
    UnknownType,
)

__all__ = [
    "ArrayType",
    "ConstantInfo",
    "ConstantValue",
    "EnumRef",
    "FieldInfo",
    "FunctionInfo",
    "FunctionType",
    "FUNCTION_SCOPE_CURSOR_KINDS",
    "OutputDocument",
    "PointerType",
    "PRIMITIVE_SPELLINGS",
    "PrimitiveType",
    "RECORD_CURSOR_KINDS",
    "StructInfo",
    "StructRef",
    "SUGAR_TYPE_KINDS",
    "TypeNode",
    "TypeNodeKind",
    "UNSIGNED_INTEGER_KINDS",
    "UnknownType",
    "ValueState",
]
