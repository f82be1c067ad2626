"""Pytest fixtures for typedetect tests."""

import ctypes
import logging
from datetime import datetime
from decimal import Decimal
from typing import Any, Dict, List

import numpy as np
import pytest

from typedetect.config import get_settings


class Opaque:
    """A user-defined type no predicate should recognize."""


@pytest.fixture
def sample_values() -> Dict[str, List[Any]]:
    """Sample values for each semantic category."""
    return {
        "numeric": [
            np.uint8(1),
            np.int8(-1),
            np.int16(-300),
            np.uint16(300),
            np.int32(-70000),
            np.uint32(70000),
            np.int64(-(2 ** 40)),
            np.uint64(2 ** 40),
            np.float32(1.5),
            np.float64(2.5),
            42,
            3.14,
            Decimal("19.99"),
        ],
        "string": ["hi", "", np.str_("numpy text")],
        "char": [ctypes.c_wchar("a"), ctypes.c_char(b"a")],
        "bool": [True, False, np.bool_(True)],
        "datetime": [datetime(2024, 1, 31, 12, 30), np.datetime64("2024-01-31")],
        "other": [
            Opaque(),
            object(),
            [1, 2],
            {"a": 1},
            (1,),
            b"bytes",
            1 + 2j,
            np.float16(1.0),
            np.array([1, 2, 3]),
            datetime(2024, 1, 31).date(),
        ],
    }


@pytest.fixture
def supported_values(sample_values) -> List[Any]:
    """Every value with a recognized, non-absent type."""
    return [
        value
        for name, values in sample_values.items()
        if name != "other"
        for value in values
    ]


@pytest.fixture(autouse=True)
def fresh_settings():
    """Drop cached settings around every test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def package_logger():
    """The ``typedetect`` logger, restored after the test."""
    logger = logging.getLogger("typedetect")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)
