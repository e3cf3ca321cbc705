"""Quiz mode and question count parsing."""

from __future__ import annotations

from enum import Enum

from lexica.constants.defaults import DEFAULT_TEST_COUNT, MIN_TEST_COUNT
from lexica.core.example import parse_positive_int
from lexica.core.result import Result, fail_invalid_input, succeed
from lexica.core.types import TestCount


class TestMode(str, Enum):
    """What a quiz asks about."""

    __test__ = False  # not a pytest test class

    MEANINGS = "meanings"
    EXAMPLES = "examples"


def parse_test_mode(value: object) -> Result[TestMode]:
    if isinstance(value, TestMode):
        return succeed(value)
    try:
        return succeed(TestMode(value))
    except ValueError:
        return fail_invalid_input("Invalid test mode")


def parse_test_count(value: object) -> Result[TestCount]:
    parsed = parse_positive_int(value, MIN_TEST_COUNT)
    if parsed is None:
        return fail_invalid_input("Invalid test count")
    return succeed(TestCount(parsed))


def default_test_count() -> TestCount:
    return TestCount(DEFAULT_TEST_COUNT)
