from .coordinate import Coordinate
from .errors import (
    InputEmpty,
    InputNaN,
    InputUndefined,
    NotInDomain,
    PiecewiseError,
)
from .piecewise_function import Piecewise
from .presets import (
    PiecewisePreset,
    list_piecewise_presets,
    load_piecewise_preset,
)
from .settings import PiecewiseSettings, get_settings

__all__ = [
    "Coordinate",
    "Piecewise",
    "PiecewiseError",
    "InputEmpty",
    "InputNaN",
    "InputUndefined",
    "NotInDomain",
    "PiecewisePreset",
    "load_piecewise_preset",
    "list_piecewise_presets",
    "PiecewiseSettings",
    "get_settings",
]

__version__ = "2026.10.0"
