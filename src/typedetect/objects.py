"""Value-based type detection.

Each predicate looks at the concrete type of the value it is given:

    >>> is_numeric(42)
    True
    >>> is_text("hi")
    True
    >>> is_numeric_nullable(None)
    True

Strict predicates reject ``None`` with :class:`NullValueError`. The
``*_nullable`` variants also accept ``None`` and :data:`DBNull`, so they can
be used directly on database query results. ``is_bool_nullable`` is the one
exception: it accepts ``DBNull`` but not ``None``.
"""

import logging
from typing import Any

from typedetect.categories import STRICT, VALUE_NULLABLE, Category, accepts
from typedetect.codes import TypeCode, value_code_of
from typedetect.errors import NullValueError

logger = logging.getLogger(__name__)


def _strict(predicate: str, category: Category, value: Any) -> bool:
    if value is None:
        logger.debug("%s() called with None", predicate)
        raise NullValueError(predicate)
    return accepts(STRICT, category, value_code_of(value))


def _nullable(category: Category, value: Any) -> bool:
    return accepts(VALUE_NULLABLE, category, value_code_of(value))


def type_code(value: Any) -> TypeCode:
    """Get the type code of a value."""
    return value_code_of(value)


def is_base_type(value: Any) -> bool:
    """
    Check if a value is a base type: bool, char, string or a number.

    Strings count as base types; containers do not.
    """
    if value is None:
        logger.debug("is_base_type() called with None")
        raise NullValueError("is_base_type")
    return is_text(value) or is_numeric(value) or is_bool(value)


def is_base_type_nullable(value: Any) -> bool:
    """
    Check if a value is a base type, ``None`` or ``DBNull``.
    """
    return is_text_nullable(value) or is_numeric_nullable(value) or is_bool_nullable(value)


def is_numeric(value: Any) -> bool:
    """
    Check if a value is a number: signed and unsigned 8 to 64 bit integers,
    single and double precision floats, or ``Decimal``.
    """
    return _strict("is_numeric", Category.NUMERIC, value)


def is_numeric_nullable(value: Any) -> bool:
    """Check if a value is a number, ``None`` or ``DBNull``."""
    return _nullable(Category.NUMERIC, value)


def is_text(value: Any) -> bool:
    """Check if a value is a char or a string."""
    return _strict("is_text", Category.TEXT, value)


def is_text_nullable(value: Any) -> bool:
    """Check if a value is a char, a string, ``None`` or ``DBNull``."""
    return _nullable(Category.TEXT, value)


def is_string(value: Any) -> bool:
    return _strict("is_string", Category.STRING, value)


def is_string_nullable(value: Any) -> bool:
    return _nullable(Category.STRING, value)


def is_char(value: Any) -> bool:
    """Check if a value is a single character (``ctypes.c_char`` or ``c_wchar``)."""
    return _strict("is_char", Category.CHAR, value)


def is_char_nullable(value: Any) -> bool:
    return _nullable(Category.CHAR, value)


def is_bool(value: Any) -> bool:
    """Check if a value is a boolean. Integers 0 and 1 are not."""
    return _strict("is_bool", Category.BOOLEAN, value)


def is_bool_nullable(value: Any) -> bool:
    """
    Check if a value is a boolean or ``DBNull``.

    ``None`` is not accepted here, unlike every other nullable predicate.
    """
    return _nullable(Category.BOOLEAN, value)


def is_datetime(value: Any) -> bool:
    """Check if a value is a ``datetime`` or ``numpy.datetime64``."""
    return _strict("is_datetime", Category.DATETIME, value)


def is_datetime_nullable(value: Any) -> bool:
    """Check if a value is a datetime, ``None`` or ``DBNull``."""
    return _nullable(Category.DATETIME, value)
