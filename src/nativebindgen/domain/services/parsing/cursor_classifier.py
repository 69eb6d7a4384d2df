#!/usr/bin/env python3

"""Cursor classification and naming helpers.

Forward declarations and anonymous records both show up in the cursor tree
looking much like real definitions. The checks here are two-pronged:

- a record is a definition only if its definition cursor exists AND is the
  cursor itself (a later re-declaration after the body points elsewhere);
- a record is anonymous if libclang flags it OR its name spelling carries a
  compiler-synthesized marker such as ``(anonymous struct at ...)``.
"""

from clang.cindex import Cursor, Type

from ....infrastructure.config import get_anonymous_markers
from ...models.abi import FUNCTION_SCOPE_CURSOR_KINDS


class CursorClassifier:
    """Stateless predicates and accessors over libclang cursors and types."""

    @staticmethod
    def is_forward_declaration(cursor: Cursor) -> bool:
        """Check if cursor is a declaration without a body.

        Args:
            cursor: Record declaration cursor

        Returns:
            True if the unit has no definition, or the definition is a
            different cursor
        """
        definition = cursor.get_definition()
        if definition is None:
            return True
        return definition != cursor

    @staticmethod
    def type_name(type_: Type) -> str:
        """Name of a record or enum type as referenced from other types.

        Resolves through the type's declaration so that a typedef'd record is
        named by its tag. Falls back to the type spelling when the
        declaration has no usable name.
        """
        declared_name = type_.get_declaration().displayname
        return declared_name if declared_name else type_.spelling

    @staticmethod
    def is_anonymous(cursor: Cursor) -> bool:
        """Check if a record declaration has no user-given name."""
        if cursor.is_anonymous():
            return True
        name = CursorClassifier.type_name(cursor.type)
        return any(marker in name for marker in get_anonymous_markers())

    @staticmethod
    def is_function_local(cursor: Cursor) -> bool:
        """Check if a declaration lives inside a function or method body."""
        parent = cursor.semantic_parent
        return parent is not None and parent.kind in FUNCTION_SCOPE_CURSOR_KINDS

    @staticmethod
    def source_file(cursor: Cursor) -> str:
        """File the cursor was declared in, or "" for built-ins."""
        location_file = cursor.location.file
        return location_file.name if location_file is not None else ""
