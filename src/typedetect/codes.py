"""Type codes: the concrete runtime representation behind a value or type.

Every predicate in typedetect starts by reducing its input to a single
:class:`TypeCode`. Resolution is by exact concrete type, never by
``isinstance``: ``bool`` is not an ``int`` here and a ``datetime`` subclass
is not a ``datetime``.

Numpy scalar types resolve through their dtype, so platform aliases such as
``numpy.longlong`` and ``numpy.int64`` share a code.
"""

import ctypes
import logging
import warnings
import weakref
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any, Dict, Tuple

import numpy as np

logger = logging.getLogger(__name__)


class TypeCode(str, Enum):
    """Concrete runtime representations known to typedetect."""
    EMPTY = "empty"
    DBNULL = "dbnull"
    BOOLEAN = "boolean"
    CHAR = "char"
    STRING = "string"
    BYTE = "byte"
    SBYTE = "sbyte"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    SINGLE = "single"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DATETIME = "datetime"
    OBJECT = "object"


class DBNullType:
    """Type of the :data:`DBNull` sentinel.

    Marks a NULL coming back from a database query, as opposed to ``None``
    meaning "no value at all". Only one instance ever exists.
    """

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "DBNull"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "DBNull"

    def __copy__(self) -> "DBNullType":
        return self

    def __deepcopy__(self, memo: Dict[int, Any]) -> "DBNullType":
        return self


DBNull = DBNullType()


# Host types with a fixed code, matched by identity.
EXACT_CODES: Dict[type, TypeCode] = {
    type(None): TypeCode.EMPTY,
    DBNullType: TypeCode.DBNULL,
    bool: TypeCode.BOOLEAN,
    ctypes.c_char: TypeCode.CHAR,
    ctypes.c_wchar: TypeCode.CHAR,
    str: TypeCode.STRING,
    int: TypeCode.INT64,
    float: TypeCode.DOUBLE,
    Decimal: TypeCode.DECIMAL,
    datetime: TypeCode.DATETIME,
}

# Numpy scalars: (dtype kind, item size) -> code. Size 0 means "any size".
NUMPY_CODES: Dict[Tuple[str, int], TypeCode] = {
    ("b", 1): TypeCode.BOOLEAN,
    ("u", 1): TypeCode.BYTE,
    ("i", 1): TypeCode.SBYTE,
    ("i", 2): TypeCode.INT16,
    ("u", 2): TypeCode.UINT16,
    ("i", 4): TypeCode.INT32,
    ("u", 4): TypeCode.UINT32,
    ("i", 8): TypeCode.INT64,
    ("u", 8): TypeCode.UINT64,
    ("f", 4): TypeCode.SINGLE,
    ("f", 8): TypeCode.DOUBLE,
    ("U", 0): TypeCode.STRING,
    ("M", 0): TypeCode.DATETIME,
}


def _numpy_code(tp: type) -> TypeCode:
    # Abstract scalar classes (np.integer, np.floating, ...) are not concrete
    # representations; numpy either rejects them or maps them to a default.
    with warnings.catch_warnings():
        warnings.simplefilter("ignore", DeprecationWarning)
        try:
            dtype = np.dtype(tp)
        except (TypeError, ValueError):
            return TypeCode.OBJECT
    if dtype.type is not tp:
        return TypeCode.OBJECT

    size = dtype.itemsize if dtype.kind in "biuf" else 0
    return NUMPY_CODES.get((dtype.kind, size), TypeCode.OBJECT)


def _resolve(tp: type, hashable: bool) -> TypeCode:
    code = EXACT_CODES.get(tp) if hashable else None
    if code is None and issubclass(tp, np.generic):
        code = _numpy_code(tp)
    if code is None or code is TypeCode.OBJECT:
        logger.debug("No type code for %s.%s", tp.__module__, tp.__qualname__)
        return TypeCode.OBJECT
    return code


# Resolved codes, keyed weakly so classes built at runtime can still be freed.
_resolved: "weakref.WeakKeyDictionary[type, TypeCode]" = weakref.WeakKeyDictionary()


def _code_for_type(tp: type) -> TypeCode:
    try:
        return _resolved[tp]
    except KeyError:
        pass
    except TypeError:
        # Metaclass defines __eq__ without __hash__; none of the known types do.
        return _resolve(tp, hashable=False)

    code = _resolve(tp, hashable=True)
    _resolved[tp] = code
    return code


def type_code_of(tp: Any) -> TypeCode:
    """
    Resolve a type descriptor to its :class:`TypeCode`.

    Accepts a Python type or a ``numpy.dtype``. Anything else, ``None``
    included, resolves to ``TypeCode.OBJECT``.
    """
    if isinstance(tp, np.dtype):
        tp = tp.type
    if not isinstance(tp, type):
        return TypeCode.OBJECT
    return _code_for_type(tp)


def value_code_of(value: Any) -> TypeCode:
    """Resolve a value to the :class:`TypeCode` of its concrete type."""
    return _code_for_type(type(value))
