"""C言語の型表記."""

from __future__ import annotations

from typing import TypeAlias

# ポインタ・配列・構造体などの複合型は文字列でそのまま渡す
CType: TypeAlias = str

C_INT: CType = "int"
C_FLOAT: CType = "float"
C_DOUBLE: CType = "double"
C_CHAR: CType = "char"
C_VOID: CType = "void"
C_BOOL: CType = "bool"
C_LONG: CType = "long"
C_SHORT: CType = "short"
C_UNSIGNED: CType = "unsigned"
C_SIGNED: CType = "signed"

PRIMITIVE_TYPES: tuple[CType, ...] = (
    C_INT,
    C_FLOAT,
    C_DOUBLE,
    C_CHAR,
    C_VOID,
    C_BOOL,
    C_LONG,
    C_SHORT,
    C_UNSIGNED,
    C_SIGNED,
)
