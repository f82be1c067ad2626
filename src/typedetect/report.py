"""Reports listing every category a value or type belongs to."""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Mapping, Tuple

from typedetect import objects, typedescriptors
from typedetect.codes import TypeCode

Predicate = Callable[[Any], bool]

# Predicate name -> (value predicate, type predicate), in report order.
PREDICATES: Mapping[str, Tuple[Predicate, Predicate]] = {
    name: (getattr(objects, name), getattr(typedescriptors, name))
    for name in (
        "is_base_type",
        "is_base_type_nullable",
        "is_numeric",
        "is_numeric_nullable",
        "is_text",
        "is_text_nullable",
        "is_string",
        "is_string_nullable",
        "is_char",
        "is_char_nullable",
        "is_bool",
        "is_bool_nullable",
        "is_datetime",
        "is_datetime_nullable",
    )
}


@dataclass
class TypeReport:
    """Classification of a single value or type."""
    subject: str
    code: TypeCode
    nullable: bool
    categories: List[str] = field(default_factory=list)

    @property
    def recognized(self) -> bool:
        return self.code is not TypeCode.OBJECT

    def to_dict(self) -> Dict[str, Any]:
        return {
            "subject": self.subject,
            "code": self.code.value,
            "nullable": self.nullable,
            "recognized": self.recognized,
            "categories": self.categories,
        }


def _type_name(tp: Any) -> str:
    if isinstance(tp, type):
        return tp.__qualname__ if tp.__module__ == "builtins" else f"{tp.__module__}.{tp.__qualname__}"
    return repr(tp)


def describe(value: Any) -> TypeReport:
    """
    Run every value predicate against ``value``.

    For ``None`` only the nullable predicates are evaluated, since the strict
    ones reject it.
    """
    code = objects.type_code(value)
    categories = [
        name
        for name, (predicate, _) in PREDICATES.items()
        if (value is not None or name.endswith("_nullable")) and predicate(value)
    ]
    return TypeReport(
        subject=_type_name(type(value)),
        code=code,
        nullable=code in (TypeCode.EMPTY, TypeCode.DBNULL),
        categories=categories,
    )


def describe_type(tp: Any) -> TypeReport:
    """Run every type predicate against the type descriptor ``tp``."""
    code = typedescriptors.type_code(tp)
    return TypeReport(
        subject=_type_name(tp),
        code=code,
        nullable=code is TypeCode.DBNULL,
        categories=[name for name, (_, predicate) in PREDICATES.items() if predicate(tp)],
    )
