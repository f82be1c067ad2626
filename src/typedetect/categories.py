"""Semantic categories and the membership tables behind every predicate."""

from enum import Enum
from types import MappingProxyType
from typing import FrozenSet, Mapping

from typedetect.codes import TypeCode


class Category(str, Enum):
    """Semantic categories a type code can belong to."""
    NUMERIC = "numeric"
    TEXT = "text"
    STRING = "string"
    CHAR = "char"
    BOOLEAN = "boolean"
    DATETIME = "datetime"


NUMERIC_CODES: FrozenSet[TypeCode] = frozenset({
    TypeCode.BYTE, TypeCode.SBYTE,
    TypeCode.INT16, TypeCode.UINT16,
    TypeCode.INT32, TypeCode.UINT32,
    TypeCode.INT64, TypeCode.UINT64,
    TypeCode.DECIMAL, TypeCode.DOUBLE, TypeCode.SINGLE,
})

ABSENT_CODES: FrozenSet[TypeCode] = frozenset({TypeCode.EMPTY, TypeCode.DBNULL})

STRICT: Mapping[Category, FrozenSet[TypeCode]] = MappingProxyType({
    Category.NUMERIC: NUMERIC_CODES,
    Category.TEXT: frozenset({TypeCode.CHAR, TypeCode.STRING}),
    Category.STRING: frozenset({TypeCode.STRING}),
    Category.CHAR: frozenset({TypeCode.CHAR}),
    Category.BOOLEAN: frozenset({TypeCode.BOOLEAN}),
    Category.DATETIME: frozenset({TypeCode.DATETIME}),
})

# Values: None and DBNull are both absent, except that a nullable boolean
# only admits DBNull.
VALUE_NULLABLE: Mapping[Category, FrozenSet[TypeCode]] = MappingProxyType({
    category: codes | (
        frozenset({TypeCode.DBNULL}) if category is Category.BOOLEAN else ABSENT_CODES
    )
    for category, codes in STRICT.items()
})

# Types: only the DBNull type counts as absent. NoneType is not nullable.
TYPE_NULLABLE: Mapping[Category, FrozenSet[TypeCode]] = MappingProxyType({
    category: codes | {TypeCode.DBNULL}
    for category, codes in STRICT.items()
})


def accepts(table: Mapping[Category, FrozenSet[TypeCode]], category: Category, code: TypeCode) -> bool:
    """Check whether ``code`` is a member of ``category`` in ``table``."""
    return code in table[category]
