# Third Party
import pydantic as pc

# Internal
from .errors import unwrap_validation_error
from .types import NotNanFloat, Pair


class Coordinate(pc.BaseModel):
    """A single (x, y) control point of a piecewise function.

    Neither component may be NaN. Coordinates compare equal when both
    components match, but order (``<``, ``<=``, ``>``, ``>=``) by x alone.
    """

    model_config = pc.ConfigDict(frozen=True, ser_json_inf_nan="constants")

    x: NotNanFloat = pc.Field(description="Domain value")
    y: NotNanFloat = pc.Field(description="Function value at x")

    @pc.model_validator(mode="before")
    @classmethod
    def validate_pair(cls, data):
        """Accept a two-element sequence in place of a mapping."""
        if isinstance(data, (list, tuple)):
            if len(data) != 2:
                raise ValueError(
                    f"A coordinate needs exactly two values, got {len(data)}"
                )
            return {"x": data[0], "y": data[1]}
        return data

    @pc.model_serializer(mode="plain")
    def serialize_pair(self) -> Pair:
        return (self.x, self.y)

    @classmethod
    def new(cls, x, y) -> "Coordinate":
        """Create a coordinate, raising InputNaN if either value is NaN."""
        try:
            return cls(x=x, y=y)
        except pc.ValidationError as e:
            cause = unwrap_validation_error(e)
            if cause is not None:
                raise cause from e
            raise

    @classmethod
    def from_pair(cls, pair) -> "Coordinate":
        x, y = pair
        return cls.new(x, y)

    @classmethod
    def new_unchecked(cls, x: float, y: float) -> "Coordinate":
        """Create a coordinate WITHOUT validation.

        Unsafe: only for literal constants known not to contain NaN. Never
        pass untrusted input here; a NaN stored this way breaks the ordering
        every Piecewise relies on.
        """
        return cls.model_construct(x=x, y=y)

    @classmethod
    def zero(cls) -> "Coordinate":
        return cls.new_unchecked(0.0, 0.0)

    def as_pair(self) -> Pair:
        return (self.x, self.y)

    def __lt__(self, other: "Coordinate") -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.x < other.x

    def __le__(self, other: "Coordinate") -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.x <= other.x

    def __gt__(self, other: "Coordinate") -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.x > other.x

    def __ge__(self, other: "Coordinate") -> bool:
        if not isinstance(other, Coordinate):
            return NotImplemented
        return self.x >= other.x
