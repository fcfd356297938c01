import pathlib as pl
import typing as ty

import pydantic as pc
import pydantic_settings as ps

ASSETS_DIRECTORY = pl.Path(__file__).parent / "assets"


class PiecewiseSettings(ps.BaseSettings):
    """Library-wide settings, read from the environment or a TOML file."""

    model_config = ps.SettingsConfigDict(
        env_prefix="PIECEWISE_",
        populate_by_name=True,
    )

    # TOML file consulted after init kwargs and the environment
    config_file: ty.ClassVar[pl.Path | str | None] = None

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls,
        init_settings,
        env_settings,
        dotenv_settings,
        file_secret_settings,
    ):
        sources = [init_settings, env_settings]

        if cls.config_file is not None:
            sources.append(
                ps.TomlConfigSettingsSource(settings_cls, toml_file=cls.config_file)
            )

        sources.append(file_secret_settings)
        return tuple(sources)

    preset_directory: pl.Path = pc.Field(
        default=ASSETS_DIRECTORY,
        description="Directory containing piecewise function presets (*.toml)",
    )
    sample_count: pc.PositiveInt = pc.Field(
        default=512, description="Default number of samples taken from a preset"
    )


def get_settings(**overrides) -> PiecewiseSettings:
    return PiecewiseSettings(**overrides)
