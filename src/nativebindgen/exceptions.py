#!/usr/bin/env python3

"""Exceptions raised by nativebindgen.

Only fatal conditions are exceptions. Unrecognized types, non-evaluable
constants and warning diagnostics are absorbed during the walk and show up
as reduced fidelity in the output document.
"""


class NativeBindgenError(Exception):
    """Base class for nativebindgen errors."""


class LibclangUnavailableError(NativeBindgenError):
    """No usable libclang shared library could be loaded."""


class ParseFailure(NativeBindgenError):
    """The front-end could not produce a usable translation unit.

    Attributes:
        header_path: Header that failed to parse
        diagnostics: Formatted diagnostics collected before the failure
    """

    def __init__(self, header_path: str, message: str, diagnostics: list[str] | None = None):
        super().__init__(f"Unable to parse translation unit {header_path}: {message}")
        self.header_path = header_path
        self.diagnostics = diagnostics or []
