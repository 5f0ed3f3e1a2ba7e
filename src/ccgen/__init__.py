"""C言語のソースコードを組み立てるライブラリ."""

from .c_types import (
    C_BOOL,
    C_CHAR,
    C_DOUBLE,
    C_FLOAT,
    C_INT,
    C_LONG,
    C_SHORT,
    C_SIGNED,
    C_UNSIGNED,
    C_VOID,
    PRIMITIVE_TYPES,
    CType,
)
from .context import Context
from .errors import EmissionOrderError
from .function import CFunction, FunctionState, StrictCFunction

__all__ = [
    "CType",
    "C_INT",
    "C_FLOAT",
    "C_DOUBLE",
    "C_CHAR",
    "C_VOID",
    "C_BOOL",
    "C_LONG",
    "C_SHORT",
    "C_UNSIGNED",
    "C_SIGNED",
    "PRIMITIVE_TYPES",
    "CFunction",
    "StrictCFunction",
    "FunctionState",
    "Context",
    "EmissionOrderError",
]
