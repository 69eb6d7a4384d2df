#!/usr/bin/env python3

"""libclang kind tables used to classify cursors and types.

Primitive spellings are fixed and platform-independent: they keep
signedness and width explicit ("signed int" rather than "int") so binding
generators never have to guess what a plain ``char`` or ``long`` means.
"""

from clang.cindex import CursorKind, TypeKind

PRIMITIVE_SPELLINGS: dict[TypeKind, str] = {
    TypeKind.VOID: "void",
    TypeKind.BOOL: "bool",
    # Unsigned integers
    TypeKind.CHAR_U: "unsigned char",
    TypeKind.UCHAR: "unsigned char",
    TypeKind.USHORT: "unsigned short",
    TypeKind.UINT: "unsigned int",
    TypeKind.ULONG: "unsigned long",
    TypeKind.ULONGLONG: "unsigned long long",
    TypeKind.UINT128: "unsigned __int128",
    # Signed integers
    TypeKind.CHAR_S: "signed char",
    TypeKind.SCHAR: "signed char",
    TypeKind.SHORT: "signed short",
    TypeKind.INT: "signed int",
    TypeKind.LONG: "signed long",
    # TODO: LongLong has always been emitted as "unsigned long long"; switch to
    # "signed long long" together with the binding generators that read it.
    TypeKind.LONGLONG: "unsigned long long",
    TypeKind.INT128: "signed __int128",
    # Character types
    TypeKind.WCHAR: "wchar_t",
    TypeKind.CHAR16: "char16_t",
    TypeKind.CHAR32: "char32_t",
    # Floating point
    TypeKind.FLOAT: "float",
    TypeKind.DOUBLE: "double",
    TypeKind.LONGDOUBLE: "long double",
}

# Sugar that is looked through before the shape of a type is decided
SUGAR_TYPE_KINDS = frozenset({TypeKind.TYPEDEF, TypeKind.ELABORATED})

# Declarations whose body has a byte layout
RECORD_CURSOR_KINDS = frozenset(
    {
        CursorKind.STRUCT_DECL,
        CursorKind.CLASS_DECL,
        CursorKind.UNION_DECL,
    }
)

# Underlying enum types whose enumerators are read as unsigned
UNSIGNED_INTEGER_KINDS = frozenset(
    {
        TypeKind.BOOL,
        TypeKind.CHAR_U,
        TypeKind.UCHAR,
        TypeKind.CHAR16,
        TypeKind.CHAR32,
        TypeKind.USHORT,
        TypeKind.UINT,
        TypeKind.ULONG,
        TypeKind.ULONGLONG,
        TypeKind.UINT128,
    }
)

# Semantic parents that make a variable local rather than global
FUNCTION_SCOPE_CURSOR_KINDS = frozenset(
    {
        CursorKind.FUNCTION_DECL,
        CursorKind.CXX_METHOD,
        CursorKind.CONSTRUCTOR,
        CursorKind.DESTRUCTOR,
        CursorKind.CONVERSION_FUNCTION,
        CursorKind.FUNCTION_TEMPLATE,
        CursorKind.OBJC_INSTANCE_METHOD_DECL,
        CursorKind.OBJC_CLASS_METHOD_DECL,
    }
)
