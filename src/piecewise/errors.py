"""Error taxonomy for piecewise construction and evaluation."""

import pydantic as pc


class PiecewiseError(ValueError):
    """Base class for all piecewise function errors."""

    message = "Piecewise function error"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.message)


class _PositionedError(PiecewiseError):
    """An error tied to a particular x value."""

    detail = "{message}: {x}"

    def __init__(self, x: float | None = None):
        self.x = x
        if x is None:
            super().__init__()
        else:
            super().__init__(self.detail.format(message=self.message, x=x))

    def __reduce__(self):
        return type(self), (self.x,)


class InputEmpty(PiecewiseError):
    message = "The provided segment is empty"


class InputUndefined(_PositionedError):
    message = "The function is undefined"
    detail = "{message}: conflicting y values at x={x}"


class InputNaN(PiecewiseError):
    message = "The value provided is NaN"


class NotInDomain(_PositionedError):
    message = "The value is not in the domain"


def unwrap_validation_error(error: pc.ValidationError) -> PiecewiseError | None:
    """Return the first PiecewiseError raised inside a pydantic validator.

    Pydantic wraps exceptions raised by validators in a ValidationError and
    keeps the original under the ``error`` key of the error context.
    """
    for details in error.errors():
        cause = details.get("ctx", {}).get("error")
        if isinstance(cause, PiecewiseError):
            return cause
    return None
