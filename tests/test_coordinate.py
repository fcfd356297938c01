"""Test Coordinate."""

import math
import pathlib as pl

import pydantic as pc
import pytest as pt
import tomlkit as tk

from piecewise import Coordinate, InputNaN


def test_coordinate_from_toml():
    """Test loading Coordinate from TOML."""
    toml_path = pl.Path(__file__).parent / "assets" / "coordinate.toml"
    with toml_path.open("rt", encoding="utf-8") as fp:
        data = tk.load(fp)

    point = Coordinate.model_validate(data)

    assert point.x == 100.0
    assert point.y == 0.75


def test_coordinate_validation():
    """Test Coordinate validation."""
    point = Coordinate(x=50, y=0.5)
    assert point.x == 50.0
    assert isinstance(point.x, float)
    assert point.y == 0.5

    # NaN is wrapped by pydantic when using the model constructor directly
    with pt.raises(pc.ValidationError):
        Coordinate(x=math.nan, y=0.0)


@pt.mark.parametrize("x, y", [(math.nan, 1.0), (1.0, math.nan), ("nan", 0.0)])
def test_coordinate_new_rejects_nan(x, y):
    with pt.raises(InputNaN):
        Coordinate.new(x, y)


def test_coordinate_allows_infinity():
    point = Coordinate.new(math.inf, -math.inf)
    assert point.x == math.inf
    assert point.y == -math.inf


def test_coordinate_from_pair():
    assert Coordinate.from_pair((1, 2)) == Coordinate(x=1.0, y=2.0)
    assert Coordinate.model_validate([3.0, 4.0]) == Coordinate(x=3.0, y=4.0)

    with pt.raises(InputNaN):
        Coordinate.from_pair([0.0, float("nan")])

    with pt.raises(ValueError):
        Coordinate.model_validate([1.0, 2.0, 3.0])


def test_coordinate_zero_and_unchecked():
    """Test the zero and unchecked constructors."""
    assert Coordinate.zero() == Coordinate(x=0.0, y=0.0)

    point = Coordinate.new_unchecked(90.0, 36.0)
    assert point == Coordinate.new(90.0, 36.0)
    assert point.as_pair() == (90.0, 36.0)


def test_coordinate_ordering_uses_x_only():
    low = Coordinate.new(0.0, 100.0)
    high = Coordinate.new(1.0, -100.0)

    assert low < high
    assert high > low
    assert low <= Coordinate.new(0.0, -5.0)
    assert low >= Coordinate.new(0.0, 5.0)
    assert sorted([high, low]) == [low, high]

    # Equality still compares both components
    assert low != Coordinate.new(0.0, -5.0)


def test_coordinate_is_frozen():
    point = Coordinate.new(1.0, 2.0)
    with pt.raises(pc.ValidationError):
        point.x = 5.0
    assert hash(point) == hash(Coordinate.new(1.0, 2.0))


def test_coordinate_serializes_as_pair():
    point = Coordinate.new(0, 18)
    assert point.model_dump() == (0.0, 18.0)
    assert point.model_dump_json() == "[0.0,18.0]"
