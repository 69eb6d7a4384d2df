"""Pytest configuration and shared fixtures."""

import sys
from collections.abc import Callable, Iterator
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest
from clang.cindex import CursorKind, TypeKind

# Add src directory to path for imports
src_path = Path(__file__).parent.parent / "src"
if str(src_path) not in sys.path:
    sys.path.insert(0, str(src_path))

from nativebindgen.infrastructure.clang_frontend import is_libclang_available
from nativebindgen.infrastructure.logging import LoggerSetup


def _make_type(
    kind: TypeKind,
    spelling: str = "",
    size: int = 0,
    declaration_name: str | None = None,
) -> Mock:
    """Mock of ``clang.cindex.Type``; canonical form is itself."""
    type_ = Mock()
    type_.kind = kind
    type_.spelling = spelling
    type_.get_size.return_value = size
    type_.get_canonical.return_value = type_

    declaration = Mock()
    declaration.displayname = declaration_name or ""
    declaration.type = type_
    type_.get_declaration.return_value = declaration
    return type_


def _make_record_type(name: str, size: int = 0) -> Mock:
    return _make_type(TypeKind.RECORD, spelling=f"struct {name}", size=size, declaration_name=name)


def _make_cursor(
    kind: CursorKind,
    spelling: str = "",
    type_: Mock | None = None,
    children: list[Any] | None = None,
    file_name: str | None = "test.h",
    **attributes: Any,
) -> Mock:
    """Mock of ``clang.cindex.Cursor``.

    By default the cursor is its own definition, not anonymous and not a
    bit-field.
    """
    cursor = Mock()
    cursor.kind = kind
    cursor.spelling = spelling
    cursor.displayname = spelling
    cursor.type = type_ if type_ is not None else _make_type(TypeKind.INVALID)
    cursor.get_children.return_value = list(children or [])
    cursor.get_definition.return_value = cursor
    cursor.is_anonymous.return_value = False
    cursor.is_bitfield.return_value = False
    if file_name is None:
        cursor.location.file = None
    else:
        cursor.location.file.name = file_name
    for attribute, value in attributes.items():
        setattr(cursor, attribute, value)
    return cursor


@pytest.fixture
def make_type() -> Callable[..., Mock]:
    """Factory for mocked libclang types."""
    return _make_type


@pytest.fixture
def make_record_type() -> Callable[..., Mock]:
    """Factory for mocked record types named through their declaration."""
    return _make_record_type


@pytest.fixture
def make_cursor() -> Callable[..., Mock]:
    """Factory for mocked libclang cursors."""
    return _make_cursor


@pytest.fixture(scope="session")
def libclang_available() -> bool:
    """Whether the libclang shared library can be loaded."""
    return is_libclang_available()


@pytest.fixture
def requires_libclang(libclang_available: bool) -> None:
    """Skip the test when libclang is not installed."""
    if not libclang_available:
        pytest.skip("libclang shared library not available")


@pytest.fixture
def write_header(tmp_path: Path) -> Callable[[str, str], Path]:
    """Write header text into the test's temporary directory."""

    def _write(source: str, name: str = "test.h") -> Path:
        path = tmp_path / name
        path.write_text(source, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def reset_logging() -> Iterator[None]:
    """Restore the logging setup after a test that initializes it."""
    yield
    LoggerSetup.reset()
