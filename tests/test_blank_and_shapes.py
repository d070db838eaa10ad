import asyncio
import dataclasses
import datetime as dt
import enum
import io
import queue
from decimal import Decimal
from fractions import Fraction

import pytest
from pydantic import BaseModel

from url_values.flattening.blank import is_blank, is_blank_field, is_zero
from url_values.flattening.shapes import Shape, classify, elements, scalar_text


class _Color(enum.Enum):
    RED = "red"


class _Level(enum.IntEnum):
    HIGH = 3


@dataclasses.dataclass
class _Point:
    x: int = 0


class _Model(BaseModel):
    x: int = 0


@pytest.mark.parametrize("value", ["", None, False, [], (), {}, set(), b""])
def test_is_blank_true(value: object) -> None:
    assert is_blank(value)


@pytest.mark.parametrize("value", ["a", True, 0, 0.0, [0], {"a": None}, " ", _Point()])
def test_is_blank_false(value: object) -> None:
    assert not is_blank(value)


@pytest.mark.parametrize("value", [0, 0.0, 0j, Decimal(0), Fraction(0), False, "", []])
def test_is_zero_true(value: object) -> None:
    assert is_zero(value)


@pytest.mark.parametrize("value", [1, -0.5, Decimal("0.1"), True, "0", [0]])
def test_is_zero_false(value: object) -> None:
    assert not is_zero(value)


def test_is_blank_field_combines_both_rules() -> None:
    assert is_blank_field(0)
    assert is_blank_field("")
    assert is_blank_field(None)
    assert not is_blank_field(2)
    assert not is_blank_field("false")


def _generator():
    yield 1


async def _coroutine() -> None:
    return


@pytest.mark.parametrize(
    ("value", "shape"),
    [
        (None, Shape.ABSENT),
        (_Point(), Shape.RECORD),
        (_Model(), Shape.RECORD),
        ({"a": 1}, Shape.MAPPING),
        ([1, 2], Shape.SEQUENCE),
        ((1, 2), Shape.SEQUENCE),
        (frozenset({1}), Shape.SEQUENCE),
        ("text", Shape.SCALAR),
        (b"bytes", Shape.SCALAR),
        (7, Shape.SCALAR),
        (1.5, Shape.SCALAR),
        (True, Shape.SCALAR),
        (_Color.RED, Shape.SCALAR),
        (Decimal("1.2"), Shape.SCALAR),
        (dt.date(2024, 1, 2), Shape.SCALAR),
        (lambda: 2, Shape.UNSUPPORTED),
        (print, Shape.UNSUPPORTED),
        (_Point, Shape.UNSUPPORTED),
        (_generator(), Shape.UNSUPPORTED),
        (iter([1]), Shape.UNSUPPORTED),
        (queue.Queue(), Shape.UNSUPPORTED),
        (io.StringIO(), Shape.UNSUPPORTED),
        (pytest, Shape.UNSUPPORTED),
    ],
)
def test_classify(value: object, shape: Shape) -> None:
    assert classify(value) is shape


def test_classify_coroutine_and_async_queue_are_unsupported() -> None:
    coroutine = _coroutine()
    try:
        assert classify(coroutine) is Shape.UNSUPPORTED
    finally:
        coroutine.close()
    assert classify(asyncio.Queue()) is Shape.UNSUPPORTED


@pytest.mark.parametrize(
    ("value", "text"),
    [
        (True, "true"),
        (False, "false"),
        (120, "120"),
        (-7, "-7"),
        (1.5, "1.5"),
        (100.0, "100"),
        (1e21, "1e+21"),
        ("45%", "45%"),
        (b"caf\xc3\xa9", "café"),
        (_Color.RED, "red"),
        (_Level.HIGH, "3"),
        (Decimal("1.20"), "1.20"),
        (dt.datetime(2006, 1, 2, 15, 4, 5, tzinfo=dt.UTC), "2006-01-02T15:04:05+00:00"),
        (dt.date(2024, 1, 2), "2024-01-02"),
    ],
)
def test_scalar_text(value: object, text: str) -> None:
    assert scalar_text(value) == text


def test_elements_orders_sets_by_text() -> None:
    assert elements({"b", "c", "a"}) == ["a", "b", "c"]
    assert elements((3, 1, 2)) == [3, 1, 2]


def test_elements_breaks_text_ties_by_type() -> None:
    assert elements({"1", 1}) == [1, "1"]
    assert elements(frozenset({1, "1"})) == [1, "1"]
