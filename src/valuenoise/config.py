"""Noise configuration models and TOML loading."""

import tomllib
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from .types import Interpolation


class NoiseConfig(BaseModel):
    """Parameters of a value noise field."""

    width: int = Field(default=256, gt=0, description="Field width in cells")
    height: int = Field(default=256, gt=0, description="Field height in cells")
    interpolation: Interpolation = Field(
        default=Interpolation.LINEAR, description="Kernel between lattice points"
    )
    wavelength: int = Field(
        default=32, gt=0, description="Lattice spacing of the first octave"
    )
    octaves: int = Field(default=4, ge=1, description="Number of octaves")
    factor: float = Field(
        default=0.5, ge=0.0, allow_inf_nan=False, description="Amplitude multiplier per octave"
    )
    seed: int | None = Field(default=None, description="Random seed (None = unseeded)")
    on_degenerate: Literal["zero", "raise"] = Field(
        default="zero", description="Constant field handling during normalization"
    )


class Config(BaseModel):
    """Complete configuration file contents."""

    noise: NoiseConfig = Field(default_factory=NoiseConfig)


def load_config(config_path: Path) -> Config:
    """Load configuration from a TOML file.

    Args:
        config_path: Path to the TOML config file.

    Returns:
        Parsed Config object.

    Raises:
        FileNotFoundError: If config file doesn't exist.
        tomllib.TOMLDecodeError: If TOML is malformed.
        pydantic.ValidationError: If values are out of range.
    """
    with open(config_path, "rb") as f:
        data = tomllib.load(f)
    return Config.model_validate(data)
