#!/usr/bin/env python3

"""Header-to-ABI extraction orchestrator (Application Layer).

Wires the modular components together:
- clang_frontend: library loading, parsing, diagnostics
- DeclarationClassifier: the declaration walk
- TypeSerializer / FieldCollector: type and layout description
"""

from pathlib import Path
from time import time

from clang.cindex import Index, TranslationUnit

from ..domain.models.abi import OutputDocument
from ..domain.services.parsing import DeclarationClassifier, FieldCollector, TypeSerializer
from ..exceptions import ParseFailure
from ..infrastructure import clang_frontend
from ..infrastructure.config import get_config
from ..infrastructure.logging import ProgressTracker, get_logger, log_timing

logger = get_logger(__name__)


class AbiExtractor:
    """Extracts the ABI description of one header.

    Used as a context manager: entering parses the header, exiting releases
    the translation unit and index.

    Example:
        with AbiExtractor(Path("api.h"), ["-Iinclude"]) as extractor:
            document = extractor.extract()
    """

    def __init__(
        self,
        header_path: Path,
        clang_args: list[str] | None = None,
        libclang_path: Path | None = None,
    ):
        """Initialize extractor.

        Args:
            header_path: Header to parse
            clang_args: Compiler arguments (include paths, language flags)
            libclang_path: Explicit libclang shared library, if any
        """
        self.header_path = header_path
        self.clang_args = list(clang_args or [])
        self.libclang_path = libclang_path
        self.settings = get_config()
        self.index: Index | None = None
        self.translation_unit: TranslationUnit | None = None
        self.diagnostics: list[str] = []
        self.tracker = ProgressTracker(logger)

    def __enter__(self) -> "AbiExtractor":
        """Context manager entry - loads libclang and parses the header.

        Raises:
            LibclangUnavailableError: If libclang cannot be loaded
            ParseFailure: If the header cannot be parsed
        """
        start = time()
        clang_frontend.configure_libclang(self.libclang_path)

        self.index = Index.create()
        self.translation_unit = clang_frontend.parse_header(
            self.index,
            self.header_path,
            self.clang_args,
            skip_function_bodies=self.settings["SKIP_FUNCTION_BODIES"],
        )
        self.diagnostics = clang_frontend.format_diagnostics(self.translation_unit)

        if self.settings["FAIL_ON_ERROR_DIAGNOSTICS"] and clang_frontend.has_error_diagnostics(
            self.translation_unit
        ):
            raise ParseFailure(
                str(self.header_path), "error diagnostics reported", self.diagnostics
            )

        logger.info(
            f"Parsed {self.header_path} in {time() - start:.3f}s "
            f"({len(self.diagnostics)} diagnostics)"
        )
        return self

    def __exit__(
        self, exc_type: type | None, exc_val: Exception | None, exc_tb: object | None
    ) -> None:
        """Context manager exit - drops the translation unit and index."""
        self.translation_unit = None
        self.index = None
        logger.debug("Translation unit released")

    @log_timing
    def extract(self) -> OutputDocument:
        """Run the declaration walk over the parsed unit.

        Returns:
            The populated OutputDocument
        """
        if self.translation_unit is None:
            raise RuntimeError("AbiExtractor.extract() called outside its context")

        serializer = TypeSerializer()
        classifier = DeclarationClassifier(serializer, FieldCollector(serializer), self.tracker)
        document = classifier.classify(self.translation_unit.cursor)

        if self.settings["LOG_MEMORY_USAGE"]:
            self.tracker.log_memory_usage()

        logger.info(
            f"Extracted {len(document.structs)} structs, {len(document.functions)} functions, "
            f"{len(document.constants)} constants"
        )
        return document


def extract_header(
    header_path: Path,
    clang_args: list[str] | None = None,
    libclang_path: Path | None = None,
) -> tuple[OutputDocument, list[str]]:
    """Parse and extract in one call.

    Returns:
        The document and the formatted diagnostics
    """
    with AbiExtractor(header_path, clang_args, libclang_path) as extractor:
        return extractor.extract(), extractor.diagnostics
