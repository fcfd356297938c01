# System
import logging
import pathlib as pl

# Third Party
import numpy as np
import pydantic as pc
import tomlkit as tk

# Internal
from .piecewise_function import Piecewise
from .settings import get_settings


class PiecewisePreset(pc.BaseModel):
    """A named piecewise function stored as a TOML file."""

    model_config = pc.ConfigDict(frozen=True)

    name: str = pc.Field(description="Display name of the preset")
    description: str = pc.Field(description="Description of the preset")
    points: Piecewise = pc.Field(description="Control points as [x, y] pairs")

    def sample(self, num_samples: int | None = None) -> tuple[np.ndarray, np.ndarray]:
        """Sample the preset, using the configured sample count by default."""
        if num_samples is None:
            num_samples = get_settings().sample_count
        return self.points.sample(num_samples)


def _preset_directory(directory: pl.Path | str | None) -> pl.Path:
    if directory is None:
        return get_settings().preset_directory
    return pl.Path(directory)


def load_piecewise_preset(
    preset_name: str, directory: pl.Path | str | None = None
) -> PiecewisePreset:
    """Load a specific piecewise function preset from its individual file."""
    preset_file = _preset_directory(directory) / f"{preset_name}.toml"

    if not preset_file.exists():
        available = list(list_piecewise_presets(directory).keys())
        raise KeyError(
            f"Piecewise preset '{preset_name}' not found. "
            f"Available presets: {available}"
        )

    try:
        with preset_file.open("rt", encoding="utf-8") as fp:
            raw_data = tk.load(fp)
        preset = PiecewisePreset.model_validate(raw_data)
    except Exception as e:
        raise ValueError(f"Invalid preset file '{preset_name}.toml': {e}") from e

    logging.info(f"Loaded piecewise preset '{preset_name}' from {preset_file}.")
    return preset


def list_piecewise_presets(directory: pl.Path | str | None = None) -> dict[str, str]:
    """
    List all available piecewise function presets.

    Returns:
        Dictionary mapping preset names to descriptions
    """
    preset_files = _preset_directory(directory).glob("*.toml")

    presets = {}
    for preset_file in preset_files:
        preset_name = preset_file.stem
        try:
            with preset_file.open("rt", encoding="utf-8") as fp:
                preset_data = tk.load(fp)
                presets[preset_name] = str(preset_data["description"])
        except (KeyError, OSError, ValueError):
            logging.warning(f"Skipping malformed preset file: {preset_file}.")
            continue

    return presets
