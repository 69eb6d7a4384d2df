#!/usr/bin/env python3

"""Query facade over libclang.

Everything the extractor needs from the C/C++ front-end goes through here:
- locating and loading the libclang shared library
- parsing a header into a translation unit
- formatting diagnostics
- compile-time evaluation of variable initializers
- enumerator values, read with the signedness of the enum's underlying type

The Python bindings do not expose ``clang_Cursor_Evaluate``, so the
evaluation entry points (and the unsigned enumerator accessor) are registered on ``clang.cindex.conf.lib`` on first
use. Evaluation results own native memory and are only reachable through
the ``evaluate()`` context manager, which disposes them on every exit path.
"""

import glob
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from ctypes import c_char_p, c_double, c_int, c_longlong, c_uint, c_ulonglong, c_void_p
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Any

import clang.cindex
from clang.cindex import (
    Cursor,
    Diagnostic,
    Index,
    LibclangError,
    TranslationUnit,
    TranslationUnitLoadError,
    TypeKind,
)

from ..exceptions import LibclangUnavailableError, ParseFailure
from .logging import get_logger, log_timing

logger = get_logger(__name__)


class EvalResultKind(IntEnum):
    """Mirror of libclang's ``CXEvalResultKind``."""

    UNEXPOSED = 0
    INT = 1
    FLOAT = 2
    OBJC_STR_LITERAL = 3
    STR_LITERAL = 4
    CF_STR = 5
    OTHER = 6

    @classmethod
    def _missing_(cls, value: object) -> "EvalResultKind":
        return cls.OTHER


# Result kinds that produce a recordable constant value
VALUE_KINDS = frozenset({EvalResultKind.INT, EvalResultKind.FLOAT, EvalResultKind.STR_LITERAL})


@dataclass(frozen=True)
class EvaluationResult:
    """Outcome of evaluating one declaration at compile time."""

    kind: EvalResultKind
    value: int | float | str | None = None

    @property
    def has_value(self) -> bool:
        return self.kind in VALUE_KINDS


_EXTRA_FUNCTIONS: tuple[tuple[str, list[Any], Any], ...] = (
    ("clang_Cursor_Evaluate", [Cursor], c_void_p),
    ("clang_EvalResult_getKind", [c_void_p], c_int),
    ("clang_EvalResult_isUnsignedInt", [c_void_p], c_uint),
    ("clang_EvalResult_getAsLongLong", [c_void_p], c_longlong),
    ("clang_EvalResult_getAsUnsigned", [c_void_p], c_ulonglong),
    ("clang_EvalResult_getAsDouble", [c_void_p], c_double),
    ("clang_EvalResult_getAsStr", [c_void_p], c_char_p),
    ("clang_EvalResult_dispose", [c_void_p], None),
    ("clang_getEnumConstantDeclUnsignedValue", [Cursor], c_ulonglong),
)

_libclang_configured = False
_extra_functions_registered = False


def libclang_search_paths() -> list[str]:
    """Well-known libclang locations for the current platform, preferred first."""
    paths: list[str] = []

    if sys.platform == "darwin":
        paths.append("/opt/homebrew/opt/llvm/lib/libclang.dylib")
        paths.extend(sorted(glob.glob("/opt/homebrew/Cellar/llvm/*/lib/libclang.dylib"), reverse=True))
        paths.append("/usr/local/opt/llvm/lib/libclang.dylib")
        paths.append("/Library/Developer/CommandLineTools/usr/lib/libclang.dylib")
    elif sys.platform == "linux":
        paths.extend(sorted(glob.glob("/usr/lib/llvm-*/lib/libclang.so*"), reverse=True))
        paths.append("/usr/lib64/libclang.so")
        paths.append("/usr/lib/libclang.so")
        paths.append("/usr/local/lib/libclang.so")
    elif sys.platform == "win32":
        paths.append(r"C:\Program Files\LLVM\bin\libclang.dll")

    return paths


def _library_loads() -> bool:
    try:
        clang.cindex.Config().get_cindex_library()
    except LibclangError as e:
        logger.debug(f"libclang not loadable: {e}")
        return False
    return True


def configure_libclang(library_path: Path | None = None) -> None:
    """Make sure ``clang.cindex`` can load a libclang shared library.

    An explicit ``library_path`` wins; otherwise the default loader is tried
    (it honours LD_LIBRARY_PATH and friends), then the well-known install
    locations.

    Raises:
        LibclangUnavailableError: If no library can be loaded
    """
    global _libclang_configured

    if _libclang_configured:
        return

    if library_path is not None:
        if not clang.cindex.Config.loaded:
            clang.cindex.Config.set_library_file(str(library_path))
        if not _library_loads():
            raise LibclangUnavailableError(f"Cannot load libclang from {library_path}")
        _libclang_configured = True
        return

    if _library_loads():
        _libclang_configured = True
        return

    for candidate in libclang_search_paths():
        if not Path(candidate).is_file() or clang.cindex.Config.loaded:
            continue
        logger.debug(f"Trying libclang at {candidate}")
        clang.cindex.Config.set_library_file(candidate)
        if _library_loads():
            logger.info(f"Using libclang from {candidate}")
            _libclang_configured = True
            return

    raise LibclangUnavailableError(
        "libclang shared library not found; set LIBCLANG_PATH to its location"
    )


def is_libclang_available() -> bool:
    """Check whether a libclang library can be loaded."""
    try:
        configure_libclang()
    except LibclangUnavailableError:
        return False
    return True


@log_timing
def parse_header(
    index: Index,
    header_path: Path,
    args: list[str],
    skip_function_bodies: bool = True,
) -> TranslationUnit:
    """Parse ``header_path`` into a translation unit.

    Raises:
        ParseFailure: If libclang cannot produce a translation unit
    """
    options = TranslationUnit.PARSE_NONE
    if skip_function_bodies:
        options |= TranslationUnit.PARSE_SKIP_FUNCTION_BODIES

    logger.debug(f"Parsing {header_path} with args {args}")
    try:
        return index.parse(str(header_path), args=args, options=options)
    except TranslationUnitLoadError as e:
        raise ParseFailure(str(header_path), str(e)) from e


def format_diagnostics(translation_unit: TranslationUnit) -> list[str]:
    """Render every diagnostic of the unit the way clang prints them."""
    return [diagnostic.format() for diagnostic in translation_unit.diagnostics]


def has_error_diagnostics(translation_unit: TranslationUnit) -> bool:
    """True if any diagnostic is an error or fatal error."""
    return any(d.severity >= Diagnostic.Error for d in translation_unit.diagnostics)


def type_kind_spelling(kind: TypeKind) -> str:
    """libclang's own spelling of a type kind, e.g. ``LValueReference``."""
    return str(kind.spelling)


def _native_library() -> Any:
    global _extra_functions_registered

    lib = clang.cindex.conf.lib
    if not _extra_functions_registered:
        for name, argtypes, restype in _EXTRA_FUNCTIONS:
            function = getattr(lib, name)
            function.argtypes = argtypes
            function.restype = restype
        _extra_functions_registered = True
    return lib


@contextmanager
def evaluate(cursor: Cursor) -> Iterator[int | None]:
    """Evaluate ``cursor`` and yield the raw result handle.

    The handle is None when libclang could not evaluate the declaration at
    all. It is disposed when the block exits, however it exits.
    """
    lib = _native_library()
    handle = lib.clang_Cursor_Evaluate(cursor)
    try:
        yield handle
    finally:
        if handle:
            lib.clang_EvalResult_dispose(handle)


def evaluate_constant(cursor: Cursor) -> EvaluationResult:
    """Evaluate a declaration's initializer.

    Integers come back as Python ints with their signedness preserved,
    floating values as floats and string literals as str. Any other outcome
    carries no value.
    """
    with evaluate(cursor) as handle:
        if not handle:
            return EvaluationResult(EvalResultKind.UNEXPOSED)

        lib = _native_library()
        kind = EvalResultKind(lib.clang_EvalResult_getKind(handle))

        if kind == EvalResultKind.INT:
            if lib.clang_EvalResult_isUnsignedInt(handle):
                return EvaluationResult(kind, int(lib.clang_EvalResult_getAsUnsigned(handle)))
            return EvaluationResult(kind, int(lib.clang_EvalResult_getAsLongLong(handle)))

        if kind == EvalResultKind.FLOAT:
            return EvaluationResult(kind, float(lib.clang_EvalResult_getAsDouble(handle)))

        if kind == EvalResultKind.STR_LITERAL:
            return EvaluationResult(kind, _decode_literal(lib.clang_EvalResult_getAsStr(handle)))

        return EvaluationResult(kind)


def _decode_literal(raw: bytes | None) -> str:
    if raw is None:
        return ""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        logger.warning(f"String literal is not valid UTF-8 ({e}); undecodable bytes replaced")
        return raw.decode("utf-8", errors="replace")


def enum_constant_value(cursor: Cursor, unsigned: bool) -> int:
    """Value of an enumerator declaration.

    ``Cursor.enum_value`` chooses signedness from the enum's declared
    underlying type without looking through typedefs, so ``uint8_t`` based
    enums come back negative. The caller decides from the canonical type.
    """
    if not unsigned:
        return int(cursor.enum_value)
    return int(_native_library().clang_getEnumConstantDeclUnsignedValue(cursor))
