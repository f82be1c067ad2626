"""typedetect - Runtime type classification predicates."""

import logging

__version__ = "0.1.0"

from typedetect import objects, typedescriptors
from typedetect.categories import Category
from typedetect.codes import DBNull, DBNullType, TypeCode
from typedetect.config import Settings, configure_logging, get_settings
from typedetect.errors import NullValueError, TypeDetectError
from typedetect.objects import (
    is_base_type,
    is_base_type_nullable,
    is_bool,
    is_bool_nullable,
    is_char,
    is_char_nullable,
    is_datetime,
    is_datetime_nullable,
    is_numeric,
    is_numeric_nullable,
    is_string,
    is_string_nullable,
    is_text,
    is_text_nullable,
    type_code,
)
from typedetect.report import PREDICATES, TypeReport, describe, describe_type

# Type-based family, also reachable as typedetect.types.
types = typedescriptors

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "objects",
    "typedescriptors",
    "types",
    "Category",
    "DBNull",
    "DBNullType",
    "TypeCode",
    "Settings",
    "configure_logging",
    "get_settings",
    "NullValueError",
    "TypeDetectError",
    "is_base_type",
    "is_base_type_nullable",
    "is_bool",
    "is_bool_nullable",
    "is_char",
    "is_char_nullable",
    "is_datetime",
    "is_datetime_nullable",
    "is_numeric",
    "is_numeric_nullable",
    "is_string",
    "is_string_nullable",
    "is_text",
    "is_text_nullable",
    "type_code",
    "PREDICATES",
    "TypeReport",
    "describe",
    "describe_type",
]
