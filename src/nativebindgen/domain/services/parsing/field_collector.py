#!/usr/bin/env python3

"""Collection of a record's direct fields."""

from clang.cindex import Cursor, CursorKind

from ....infrastructure.logging import get_logger
from ...models.abi import FieldInfo
from .type_serializer import TypeSerializer

logger = get_logger(__name__)


class FieldCollector:
    """Walks exactly one level below a record declaration.

    Nested record bodies are not entered: a field whose type is another
    record is described by a name reference, and the nested record's own
    fields belong to that record's entry.
    """

    def __init__(self, type_serializer: TypeSerializer):
        self.type_serializer = type_serializer

    def collect(self, record_cursor: Cursor) -> list[FieldInfo]:
        """Describe every field declared directly in ``record_cursor``.

        Args:
            record_cursor: Accepted record definition

        Returns:
            Fields in declaration order
        """
        fields = []
        for child in record_cursor.get_children():
            if child.kind == CursorKind.FIELD_DECL:
                fields.append(self.parse_field(child))
        return fields

    def parse_field(self, field_cursor: Cursor) -> FieldInfo:
        """Describe one field declaration.

        The offset is the field's bit offset divided by 8 and rounded toward
        zero, which drops the bit position of bit-fields.
        """
        field_type = field_cursor.type
        bit_offset = field_cursor.get_field_offsetof()
        info = FieldInfo(
            name=field_cursor.spelling,
            size=field_type.get_size(),
            offset=int(bit_offset / 8),
            type=self.type_serializer.serialize(field_type.get_canonical()),
        )
        if field_cursor.is_bitfield():
            logger.debug(
                f"Bit-field {info.name} at bit {bit_offset} reported at byte offset {info.offset}"
            )
        return info
