#!/usr/bin/env python3

"""Serialization of libclang types into the TypeNode model.

Records and enums are emitted as name references and never expanded, which
is what bounds the recursion: the only recursive cases are pointers,
function signatures and arrays, and each of those strictly shrinks the type
being looked at. A record that points to itself, or two records that point
to each other, serialize to a finite ``Pointer{Struct{name}}``.
"""

from collections.abc import Callable

from clang.cindex import Type, TypeKind

from ....infrastructure.clang_frontend import type_kind_spelling
from ....infrastructure.logging import get_logger
from ...models.abi import (
    PRIMITIVE_SPELLINGS,
    SUGAR_TYPE_KINDS,
    ArrayType,
    EnumRef,
    FunctionType,
    PointerType,
    PrimitiveType,
    StructRef,
    TypeNode,
    UnknownType,
)
from .cursor_classifier import CursorClassifier

logger = get_logger(__name__)


class TypeSerializer:
    """Maps a libclang ``Type`` to a ``TypeNode``.

    Dispatch order:
    1. primitive kinds, via the fixed spelling table
    2. typedef/elaborated sugar, looked through to the canonical type
    3. pointer, function (with or without prototype), record, enum,
       constant array
    4. anything else becomes ``UnknownType`` and the walk carries on
    """

    def __init__(self) -> None:
        self._handlers: dict[TypeKind, Callable[[Type], TypeNode]] = {
            TypeKind.POINTER: self._serialize_pointer,
            TypeKind.FUNCTIONPROTO: self._serialize_function,
            TypeKind.FUNCTIONNOPROTO: self._serialize_unprototyped_function,
            TypeKind.RECORD: self._serialize_record,
            TypeKind.ENUM: self._serialize_enum,
            TypeKind.CONSTANTARRAY: self._serialize_array,
        }
        for sugar_kind in SUGAR_TYPE_KINDS:
            self._handlers[sugar_kind] = self._serialize_sugar

    def serialize(self, type_: Type) -> TypeNode:
        """Serialize ``type_`` (normally already canonical).

        Args:
            type_: libclang type handle

        Returns:
            TypeNode describing the type's shape
        """
        primitive_name = PRIMITIVE_SPELLINGS.get(type_.kind)
        if primitive_name is not None:
            return PrimitiveType(primitive_name)

        handler = self._handlers.get(type_.kind)
        if handler is None:
            return self._serialize_unknown(type_)
        return handler(type_)

    def _serialize_pointer(self, type_: Type) -> TypeNode:
        return PointerType(self.serialize(type_.get_pointee()))

    def _serialize_function(self, type_: Type) -> FunctionType:
        return FunctionType(
            arg_types=tuple(self.serialize(arg) for arg in type_.argument_types()),
            return_type=self.serialize(type_.get_result()),
            variadic=bool(type_.is_function_variadic()),
        )

    def _serialize_unprototyped_function(self, type_: Type) -> FunctionType:
        # K&R declarations such as ``int f();`` carry no parameter list
        return FunctionType(arg_types=(), return_type=self.serialize(type_.get_result()))

    def _serialize_record(self, type_: Type) -> TypeNode:
        declared_type = type_.get_declaration().type
        return StructRef(CursorClassifier.type_name(declared_type))

    def _serialize_enum(self, type_: Type) -> TypeNode:
        return EnumRef(CursorClassifier.type_name(type_))

    def _serialize_array(self, type_: Type) -> TypeNode:
        return ArrayType(
            element_type=self.serialize(type_.get_array_element_type()),
            size=int(type_.get_array_size()),
        )

    def _serialize_sugar(self, type_: Type) -> TypeNode:
        canonical = type_.get_canonical()
        if canonical.kind in SUGAR_TYPE_KINDS:
            # Canonicalization made no progress
            return self._serialize_unknown(type_)
        return self.serialize(canonical)

    def _serialize_unknown(self, type_: Type) -> TypeNode:
        kind_name = type_kind_spelling(type_.kind)
        logger.debug(f"Unrecognized type kind {kind_name} for '{type_.spelling}'")
        return UnknownType(kind_id=int(type_.kind.value), kind_name=kind_name)
