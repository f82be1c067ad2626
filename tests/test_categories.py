"""Tests for the category membership tables."""

import pytest

from typedetect.categories import (
    NUMERIC_CODES,
    STRICT,
    TYPE_NULLABLE,
    VALUE_NULLABLE,
    Category,
    accepts,
)
from typedetect.codes import TypeCode


class TestTables:
    """Tests for table contents."""

    def test_every_category_has_a_row(self):
        for table in (STRICT, VALUE_NULLABLE, TYPE_NULLABLE):
            assert set(table) == set(Category)

    def test_numeric_codes(self):
        assert len(NUMERIC_CODES) == 11
        assert TypeCode.BOOLEAN not in NUMERIC_CODES
        assert TypeCode.CHAR not in NUMERIC_CODES

    def test_text_is_string_and_char(self):
        assert STRICT[Category.TEXT] == STRICT[Category.STRING] | STRICT[Category.CHAR]

    def test_value_nullable_rows(self):
        """Test that value rows add both absent codes, except booleans."""
        for category, codes in STRICT.items():
            added = VALUE_NULLABLE[category] - codes
            if category is Category.BOOLEAN:
                assert added == {TypeCode.DBNULL}
            else:
                assert added == {TypeCode.EMPTY, TypeCode.DBNULL}

    def test_type_nullable_rows(self):
        for category, codes in STRICT.items():
            assert TYPE_NULLABLE[category] - codes == {TypeCode.DBNULL}

    def test_object_is_never_accepted(self):
        for table in (STRICT, VALUE_NULLABLE, TYPE_NULLABLE):
            for category in Category:
                assert accepts(table, category, TypeCode.OBJECT) is False


class TestImmutability:
    """Tests that the tables cannot be modified."""

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            STRICT[Category.NUMERIC] = frozenset()  # type: ignore[index]
        with pytest.raises(TypeError):
            VALUE_NULLABLE[Category.TEXT] = frozenset()  # type: ignore[index]

    def test_rows_are_frozen(self):
        with pytest.raises(AttributeError):
            STRICT[Category.NUMERIC].add(TypeCode.OBJECT)  # type: ignore[attr-defined]
