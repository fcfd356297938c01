# System
import bisect
import itertools
import logging
import math
import typing as ty

# Third Party
import numpy as np
import pydantic as pc

# Internal
from .coordinate import Coordinate
from .errors import (
    InputEmpty,
    InputNaN,
    InputUndefined,
    NotInDomain,
    unwrap_validation_error,
)
from .types import NUMBERS_ONLY, Pair


def _raise_construction_error(error: pc.ValidationError) -> ty.NoReturn:
    cause = unwrap_validation_error(error)
    if cause is not None:
        raise cause from error
    raise error


class Piecewise(pc.RootModel[tuple[Coordinate, ...]]):
    """A piecewise linear function defined by control points.

    Points are stored sorted by x. Two points may share an x only when they
    also share a y. Instances are immutable and safe to evaluate from
    several threads at once.
    """

    model_config = pc.ConfigDict(frozen=True, ser_json_inf_nan="constants")

    root: tuple[Coordinate, ...] = pc.Field(
        description="Control points, sorted ascending by x"
    )

    @pc.field_validator("root")
    @classmethod
    def validate_points(
        cls, points: tuple[Coordinate, ...]
    ) -> tuple[Coordinate, ...]:
        """Sort points by x and reject vertical discontinuities."""
        if len(points) == 0:
            raise InputEmpty()
        if len(points) == 1:
            logging.debug(
                f"Piecewise function built from 1 point at x={points[0].x}."
            )
            return points

        # sorted() is stable, so equal x keep their input order
        points = tuple(sorted(points, key=lambda point: point.x))

        for left, right in itertools.pairwise(points):
            if left.x == right.x and left.y != right.y:
                raise InputUndefined(left.x)

        logging.debug(
            f"Piecewise function spanning [{points[0].x}, {points[-1].x}] "
            f"built from {len(points)} points."
        )
        return points

    @classmethod
    def from_points(cls, points: ty.Iterable) -> "Piecewise":
        """Build a piecewise function from coordinates or (x, y) pairs.

        Raises:
            InputEmpty: no points were given.
            InputNaN: a point has a NaN component.
            InputUndefined: two points share x but differ in y.
        """
        try:
            return cls.model_validate(tuple(points))
        except pc.ValidationError as e:
            _raise_construction_error(e)

    @classmethod
    def loads(cls, data: str | bytes) -> "Piecewise":
        """Deserialize from a JSON array of [x, y] pairs in any order.

        Only JSON numbers are accepted as coordinate values.
        """
        try:
            return cls.model_validate_json(data, context={NUMBERS_ONLY: True})
        except pc.ValidationError as e:
            _raise_construction_error(e)

    def dumps(self) -> str:
        """Serialize to a JSON array of [x, y] pairs sorted by x."""
        return self.model_dump_json()

    def to_pairs(self) -> list[Pair]:
        return [point.as_pair() for point in self.root]

    @property
    def points(self) -> tuple[Coordinate, ...]:
        return self.root

    @property
    def min_x(self) -> float:
        return self.root[0].x

    @property
    def max_x(self) -> float:
        return self.root[-1].x

    @property
    def domain(self) -> tuple[float, float]:
        return self.min_x, self.max_x

    def y_at_x(self, value) -> float:
        """Evaluate the function at ``value`` by linear interpolation.

        Control points are returned exactly, without interpolation.

        Raises:
            InputNaN: ``value`` is NaN.
            NotInDomain: ``value`` lies outside [min_x, max_x].
        """
        value = float(value)
        if math.isnan(value):
            raise InputNaN()

        points = self.root
        index = bisect.bisect_left(points, value, key=lambda point: point.x)

        if index < len(points) and points[index].x == value:
            return points[index].y

        # index is the insertion point: points[index - 1].x < value < points[index].x
        if index == 0 or index >= len(points):
            raise NotInDomain(value)

        x1, y1 = points[index - 1].as_pair()
        x2, y2 = points[index].as_pair()

        slope = (y1 - y2) / (x1 - x2)
        return slope * (value - x1) + y1

    __call__ = y_at_x

    def sample(self, num_samples: int = 512) -> tuple[np.ndarray, np.ndarray]:
        """Evaluate the function on an evenly spaced grid over its domain.

        Returns:
            Tuple of (xs, ys) arrays of length ``num_samples``
        """
        if num_samples < 1:
            raise ValueError(f"num_samples must be positive, got {num_samples}")
        if not (math.isfinite(self.min_x) and math.isfinite(self.max_x)):
            raise ValueError(
                f"Cannot sample an unbounded domain {list(self.domain)}"
            )

        xs = np.linspace(start=self.min_x, stop=self.max_x, num=num_samples)
        # Guard against rounding past the end points
        xs = np.clip(xs, self.min_x, self.max_x)
        ys = np.array([self.y_at_x(x) for x in xs], dtype=float)
        return xs, ys

    def __len__(self) -> int:
        return len(self.root)

    def __iter__(self) -> ty.Iterator[Coordinate]:
        return iter(self.root)

    def __getitem__(self, index: int) -> Coordinate:
        return self.root[index]

    def __contains__(self, value) -> bool:
        """Whether ``value`` lies within the domain."""
        value = float(value)
        return self.min_x <= value <= self.max_x
