#!/usr/bin/env python3

"""Declaration classification walk over a translation unit.

The walk is depth-first and pre-order. It enters every node's children,
including namespaces, ``extern "C"`` blocks and record bodies, so that
declarations nested anywhere are found. Each classified declaration writes
one entry into the OutputDocument passed down the walk; field lists are
gathered by FieldCollector's single-level sub-walk, never by this walk.
"""

from clang.cindex import Cursor, CursorKind

from ....infrastructure.clang_frontend import enum_constant_value, evaluate_constant
from ....infrastructure.logging import ProgressTracker, get_logger, log_timing
from ...models.abi import (
    RECORD_CURSOR_KINDS,
    UNSIGNED_INTEGER_KINDS,
    ConstantInfo,
    FunctionInfo,
    FunctionType,
    OutputDocument,
    StructInfo,
)
from .cursor_classifier import CursorClassifier
from .field_collector import FieldCollector
from .type_serializer import TypeSerializer

logger = get_logger(__name__)


class DeclarationClassifier:
    """Populates an OutputDocument from a cursor tree.

    Handles:
    - record definitions (struct, class, union) with their field layout
    - free functions
    - enumerators
    - global and static member variables, with their value when it can be
      evaluated; function-local variables are ignored
    """

    def __init__(
        self,
        type_serializer: TypeSerializer | None = None,
        field_collector: FieldCollector | None = None,
        tracker: ProgressTracker | None = None,
    ):
        self.type_serializer = type_serializer or TypeSerializer()
        self.field_collector = field_collector or FieldCollector(self.type_serializer)
        self.tracker = tracker or ProgressTracker(logger)

    @log_timing
    def classify(self, root: Cursor, document: OutputDocument | None = None) -> OutputDocument:
        """Walk everything below ``root`` and return the populated document.

        Args:
            root: Translation unit cursor (or any subtree root)
            document: Document to write into; a new one is created if omitted

        Returns:
            The populated document
        """
        if document is None:
            document = OutputDocument()

        with self.tracker.track_operation("classify declarations"):
            for child in root.get_children():
                self._visit(child, root, document)

        self.tracker.report_summary()
        return document

    def _visit(self, cursor: Cursor, parent: Cursor, document: OutputDocument) -> None:
        self.tracker.count_declaration()
        self.classify_cursor(cursor, parent, document)

        for child in cursor.get_children():
            self._visit(child, cursor, document)

    def classify_cursor(self, cursor: Cursor, parent: Cursor, document: OutputDocument) -> None:
        """Record ``cursor`` in ``document`` if it is a declaration of interest."""
        kind = cursor.kind

        if kind in RECORD_CURSOR_KINDS:
            self.classify_record(cursor, document)
        elif kind == CursorKind.FUNCTION_DECL:
            self.classify_function(cursor, document)
        elif kind == CursorKind.ENUM_CONSTANT_DECL:
            self.classify_enumerator(cursor, parent, document)
        elif kind == CursorKind.VAR_DECL:
            self.classify_variable(cursor, document)

    def classify_record(self, cursor: Cursor, document: OutputDocument) -> None:
        """Add a named record definition with its layout."""
        if CursorClassifier.is_forward_declaration(cursor):
            logger.debug(f"Skipping forward declaration of '{cursor.spelling}'")
            return
        if CursorClassifier.is_anonymous(cursor):
            logger.debug("Skipping anonymous record")
            return

        record_type = cursor.type
        info = StructInfo(
            name=CursorClassifier.type_name(record_type),
            size=record_type.get_size(),
            fields=self.field_collector.collect(cursor),
            source_file=CursorClassifier.source_file(cursor),
        )
        if info.name in document.structs:
            logger.debug(f"Struct '{info.name}' redeclared; keeping the later declaration")
        document.add_struct(info)
        self.tracker.count_entry("structs")

    def classify_function(self, cursor: Cursor, document: OutputDocument) -> None:
        """Add a free function's canonical signature."""
        name = cursor.spelling
        signature = self.type_serializer.serialize(cursor.type.get_canonical())
        if not isinstance(signature, FunctionType):
            logger.warning(
                f"Function '{name}' has an unrecognized signature ({signature.kind.value}); skipped"
            )
            return

        if name in document.functions:
            logger.debug(f"Function '{name}' redeclared; keeping the later declaration")
        document.add_function(
            FunctionInfo(name=name, signature=signature, source_file=CursorClassifier.source_file(cursor))
        )
        self.tracker.count_entry("functions")

    def classify_enumerator(
        self, cursor: Cursor, parent: Cursor, document: OutputDocument
    ) -> None:
        """Add an enumerator typed as its enclosing enum.

        The value is read unsigned when the enum's canonical underlying type
        is unsigned, so typedef'd bases such as ``uint8_t`` keep large values.
        """
        if parent.kind == CursorKind.ENUM_DECL:
            owner_type = parent.type
            unsigned = parent.enum_type.get_canonical().kind in UNSIGNED_INTEGER_KINDS
        else:
            owner_type = cursor.type
            unsigned = False

        document.add_constant(
            ConstantInfo.evaluated(
                name=cursor.spelling,
                type_node=self.type_serializer.serialize(owner_type.get_canonical()),
                value=enum_constant_value(cursor, unsigned),
                source_file=CursorClassifier.source_file(cursor),
            )
        )
        self.tracker.count_entry("constants")

    def classify_variable(self, cursor: Cursor, document: OutputDocument) -> None:
        """Add a global variable, with its value if it evaluates at compile time."""
        name = cursor.spelling
        if CursorClassifier.is_function_local(cursor):
            logger.debug(f"Skipping local variable '{name}'")
            return

        type_node = self.type_serializer.serialize(cursor.type.get_canonical())
        source_file = CursorClassifier.source_file(cursor)

        result = evaluate_constant(cursor)
        if result.has_value and result.value is not None:
            info = ConstantInfo.evaluated(name, type_node, result.value, source_file)
        else:
            logger.debug(f"Variable '{name}' not evaluable ({result.kind.name})")
            info = ConstantInfo.unevaluable(name, type_node, source_file)

        document.add_constant(info)
        self.tracker.count_entry("constants")
