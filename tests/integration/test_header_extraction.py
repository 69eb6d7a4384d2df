#!/usr/bin/env python3

"""End-to-end extraction of real headers through libclang.

Skipped when no libclang shared library can be loaded.
"""

import pytest

from nativebindgen.application import extract_header, render_document

pytestmark = [pytest.mark.integration, pytest.mark.usefixtures("requires_libclang")]

INT = {"kind": "Primitive", "name": "signed int"}


def _extract(write_header, source, args=None, name="test.h"):
    document, _ = extract_header(write_header(source, name), args or [])
    return document.to_dict()


def test_point_struct(write_header):
    result = _extract(write_header, "struct Point { int x; int y; };\n")

    point = result["structs"]["Point"]
    assert point["size"] == 8
    assert point["fields"] == [
        {"name": "x", "size": 4, "offset": 0, "type": INT},
        {"name": "y", "size": 4, "offset": 4, "type": INT},
    ]
    assert point["fileName"].endswith("test.h")


def test_enum_constants(write_header):
    result = _extract(write_header, "enum Color { RED, GREEN = 5 };\n")

    assert result["constants"]["RED"]["type"] == {"kind": "Enum", "name": "Color"}
    assert result["constants"]["RED"]["value"] == 0
    assert result["constants"]["GREEN"]["value"] == 5


def test_functions(write_header):
    result = _extract(
        write_header,
        "int add(int a, int b);\nvoid log_msg(const char *fmt, ...);\n",
    )

    assert result["functions"]["add"]["argTypes"] == [INT, INT]
    assert result["functions"]["add"]["returnType"] == INT
    assert "variadic" not in result["functions"]["add"]
    assert result["functions"]["log_msg"]["variadic"] is True
    (fmt,) = result["functions"]["log_msg"]["argTypes"]
    assert fmt["kind"] == "Pointer"
    assert fmt["pointee"]["name"].endswith("char")


def test_constants(write_header):
    result = _extract(
        write_header,
        'static const char *NAME = "x";\nextern int counter;\nstatic const int ZERO = 0;\n',
    )

    assert result["constants"]["NAME"]["value"] == "x"
    assert "value" not in result["constants"]["counter"]
    assert result["constants"]["ZERO"]["value"] == 0


def test_forward_and_anonymous_records_absent(write_header):
    result = _extract(
        write_header,
        "struct Opaque;\n"
        "struct Outer { union { int i; float f; } u; };\n",
    )

    assert "Opaque" not in result["structs"]
    assert list(result["structs"]) == ["Outer"]
    assert result["structs"]["Outer"]["size"] == 4


def test_self_referential_struct(write_header):
    result = _extract(write_header, "struct Node { struct Node *next; int value; };\n")

    assert result["structs"]["Node"]["fields"][0]["type"] == {
        "kind": "Pointer",
        "pointee": {"kind": "Struct", "name": "Node"},
    }


def test_arrays_and_typedefs(write_header):
    result = _extract(
        write_header,
        "typedef unsigned int u32;\nstruct Buf { u32 len; char data[16]; };\n",
    )

    fields = result["structs"]["Buf"]["fields"]
    assert fields[0]["type"] == {"kind": "Primitive", "name": "unsigned int"}
    assert fields[1]["type"]["kind"] == "Array"
    assert fields[1]["type"]["size"] == 16
    assert fields[1]["type"]["elementType"]["name"].endswith("char")
    assert fields[1]["size"] == 16


def test_bitfield_offsets_truncate(write_header):
    result = _extract(
        write_header,
        "struct Flags { unsigned a : 3; unsigned b : 10; unsigned c : 7; };\n",
    )

    offsets = [field["offset"] for field in result["structs"]["Flags"]["fields"]]
    assert offsets == [0, 0, 1]


def test_cpp_namespace(write_header):
    result = _extract(
        write_header,
        "namespace geo { struct Vec { double x, y; }; double length(Vec v); }\n",
        args=["-xc++", "-std=c++17"],
        name="geo.hpp",
    )

    assert result["structs"]["Vec"]["size"] == 16
    assert result["functions"]["length"]["argTypes"] == [{"kind": "Struct", "name": "Vec"}]


def test_enumerators_over_unsigned_typedef_base(write_header):
    result = _extract(
        write_header,
        "typedef unsigned char uint8_t;\n"
        "enum A : uint8_t { X = 0xFF };\n"
        "enum B : unsigned char { Y = 0xFF };\n"
        "enum C : signed char { Z = -1 };\n",
        args=["-xc++", "-std=c++17"],
        name="enums.hpp",
    )

    assert result["constants"]["X"]["value"] == 255
    assert result["constants"]["Y"]["value"] == 255
    assert result["constants"]["Z"]["value"] == -1


def test_unprototyped_function(write_header):
    result = _extract(write_header, "int old();\nint neu(void);\n", args=["-std=c89"])

    assert result["functions"]["old"]["argTypes"] == []
    assert result["functions"]["old"]["returnType"] == INT
    assert result["functions"]["neu"]["argTypes"] == []


def test_locals_in_parsed_bodies_are_ignored(write_header, monkeypatch):
    monkeypatch.setenv("NATIVEBINDGEN_SKIP_FUNCTION_BODIES", "false")

    result = _extract(
        write_header,
        "static const int LIMIT = 7;\n"
        "static inline int f(void) { int tmp = 3; static int calls; return tmp + calls; }\n",
    )

    assert list(result["constants"]) == ["LIMIT"]
    assert result["constants"]["LIMIT"]["value"] == 7
    assert "f" in result["functions"]


def test_record_redeclarations_keep_one_definition(write_header):
    result = _extract(write_header, "struct S;\nstruct S { int a; };\nstruct S;\n")

    assert list(result["structs"]) == ["S"]
    assert result["structs"]["S"]["size"] == 4
    assert result["structs"]["S"]["fields"] == [
        {"name": "a", "size": 4, "offset": 0, "type": INT}
    ]


def test_same_record_name_in_two_namespaces(write_header):
    result = _extract(
        write_header,
        "namespace a { struct S { int x; }; }\nnamespace b { struct S { double y; }; }\n",
        args=["-xc++", "-std=c++17"],
        name="ns.hpp",
    )

    assert list(result["structs"]) == ["S"]
    assert result["structs"]["S"]["size"] == 8
    assert result["structs"]["S"]["fields"][0]["name"] == "y"


def test_empty_header(write_header):
    document, diagnostics = extract_header(write_header("\n"), [])

    assert diagnostics == []
    assert document.to_dict() == {"structs": {}, "functions": {}, "constants": {}}
    assert render_document(document).startswith("{")
