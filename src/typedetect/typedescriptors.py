"""Type-based type detection.

Same predicates as :mod:`typedetect.objects`, applied to a type descriptor
(a Python type or a ``numpy.dtype``) instead of a value:

    >>> is_numeric(int)
    True
    >>> is_datetime_nullable(datetime)
    True

On this path only ``DBNullType`` counts as nullable; ``type(None)`` does not.
Anything that is not a type descriptor, ``None`` included, is rejected by
every predicate.
"""

from typing import Any

from typedetect.categories import STRICT, TYPE_NULLABLE, Category, accepts
from typedetect.codes import TypeCode, type_code_of


def type_code(tp: Any) -> TypeCode:
    """Get the type code of a type descriptor."""
    return type_code_of(tp)


def is_base_type(tp: Any) -> bool:
    """Check if a type is a base type: bool, char, string or a number."""
    return is_text(tp) or is_numeric(tp) or is_bool(tp)


def is_base_type_nullable(tp: Any) -> bool:
    """Check if a type is a base type or ``DBNullType``."""
    return is_text_nullable(tp) or is_numeric_nullable(tp) or is_bool_nullable(tp)


def is_numeric(tp: Any) -> bool:
    """
    Check if a type is a number type: signed and unsigned 8 to 64 bit
    integers, single and double precision floats, or ``Decimal``.
    """
    return accepts(STRICT, Category.NUMERIC, type_code_of(tp))


def is_numeric_nullable(tp: Any) -> bool:
    return accepts(TYPE_NULLABLE, Category.NUMERIC, type_code_of(tp))


def is_text(tp: Any) -> bool:
    """Check if a type is a char or string type."""
    return accepts(STRICT, Category.TEXT, type_code_of(tp))


def is_text_nullable(tp: Any) -> bool:
    return accepts(TYPE_NULLABLE, Category.TEXT, type_code_of(tp))


def is_string(tp: Any) -> bool:
    return accepts(STRICT, Category.STRING, type_code_of(tp))


def is_string_nullable(tp: Any) -> bool:
    return accepts(TYPE_NULLABLE, Category.STRING, type_code_of(tp))


def is_char(tp: Any) -> bool:
    return accepts(STRICT, Category.CHAR, type_code_of(tp))


def is_char_nullable(tp: Any) -> bool:
    return accepts(TYPE_NULLABLE, Category.CHAR, type_code_of(tp))


def is_bool(tp: Any) -> bool:
    """Check if a type is ``bool`` or ``numpy.bool_``."""
    return accepts(STRICT, Category.BOOLEAN, type_code_of(tp))


def is_bool_nullable(tp: Any) -> bool:
    return accepts(TYPE_NULLABLE, Category.BOOLEAN, type_code_of(tp))


def is_datetime(tp: Any) -> bool:
    return accepts(STRICT, Category.DATETIME, type_code_of(tp))


def is_datetime_nullable(tp: Any) -> bool:
    """Check if a type is a datetime type or ``DBNullType``."""
    return accepts(TYPE_NULLABLE, Category.DATETIME, type_code_of(tp))
