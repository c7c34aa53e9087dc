"""Core types for value noise generation."""

from enum import Enum
from typing import Protocol

import numpy as np
from numpy.typing import NDArray
from pydantic import BaseModel, Field

from .exceptions import ConfigurationError


class Interpolation(str, Enum):
    """Interpolation kernel used to fill the space between lattice points."""

    LINEAR = "linear"
    CUBIC = "cubic"


# Lattice padding per axis, on top of ceil(dim / spacing)
LATTICE_PADDING: dict[Interpolation, int] = {
    Interpolation.LINEAR: 2,
    Interpolation.CUBIC: 4,
}


class RandomSource(Protocol):
    """Source of uniform floats in [0, 1).

    numpy.random.Generator satisfies this protocol.
    """

    def random(self, size: tuple[int, ...]) -> NDArray[np.float64]: ...


class OctaveSpec(BaseModel, frozen=True):
    """Immutable spacing and amplitude of a single octave."""

    index: int = Field(ge=0)
    spacing: int = Field(gt=0, description="Distance between lattice points in cells")
    amplitude: float = Field(ge=0.0, description="Maximum lattice value")


def parse_interpolation(value: "Interpolation | str") -> Interpolation:
    """Resolve an interpolation kernel from an enum member or its name.

    Raises:
        ConfigurationError: If the kernel is not recognized.
    """
    if isinstance(value, Interpolation):
        return value
    if isinstance(value, str):
        try:
            return Interpolation(value.strip().lower())
        except ValueError:
            pass
    raise ConfigurationError(
        f"Unknown interpolation {value!r}, expected one of "
        f"{[kind.value for kind in Interpolation]}"
    )
