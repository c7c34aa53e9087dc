"""Random lattice generation."""

import numpy as np
from numpy.typing import NDArray

from .exceptions import ConfigurationError
from .types import RandomSource


def generate_lattice(
    width: int,
    height: int,
    max_value: float,
    rng: RandomSource,
) -> NDArray[np.float64]:
    """Generate a lattice of independent random values in [0, max_value).

    Note that depending on the interpolation the values derived from the
    lattice can end up outside of this range.

    Args:
        width: Number of lattice points along x.
        height: Number of lattice points along y.
        max_value: Exclusive upper bound of the lattice values.
        rng: Random source, consumed for width * height draws.

    Returns:
        Lattice array of shape (height, width).

    Raises:
        ConfigurationError: If a dimension is below 1 or max_value is negative.
    """
    if width < 1 or height < 1:
        raise ConfigurationError(
            f"Lattice dimensions must be at least 1, got {width}x{height}"
        )
    if max_value < 0:
        raise ConfigurationError(f"Lattice max value cannot be negative: {max_value}")

    draws = np.asarray(rng.random((height, width)), dtype=np.float64)
    return draws * max_value
