"""Single octave synthesis: a random lattice interpolated to full resolution."""

import math

import numpy as np
import structlog
from numpy.typing import NDArray

from .exceptions import ConfigurationError, LatticeBoundsError
from .interpolation import bicubic, bilinear
from .lattice import generate_lattice
from .types import LATTICE_PADDING, Interpolation, RandomSource, parse_interpolation

logger = structlog.get_logger()

# Neighborhood offsets relative to the quad origin, per axis
_CUBIC_OFFSETS = np.arange(-1, 3)


def lattice_shape(
    width: int,
    height: int,
    spacing: int,
    interpolation: Interpolation,
) -> tuple[int, int]:
    """Lattice (height, width) needed to cover an output field.

    Args:
        width: Output width in cells.
        height: Output height in cells.
        spacing: Distance between lattice points in cells.
        interpolation: Kernel, which determines the padding.

    Returns:
        Lattice shape as (rows, columns).
    """
    padding = LATTICE_PADDING[interpolation]
    return (
        math.ceil(height / spacing) + padding,
        math.ceil(width / spacing) + padding,
    )


def build_octave_lattice(
    width: int,
    height: int,
    spacing: int,
    amplitude: float,
    interpolation: Interpolation,
    rng: RandomSource,
) -> NDArray[np.float64]:
    """Draw the padded random lattice for one octave.

    This is the only step of an octave that consumes randomness.
    """
    _check_octave_params(width, height, spacing, amplitude)
    interpolation = parse_interpolation(interpolation)
    rows, cols = lattice_shape(width, height, spacing, interpolation)
    return generate_lattice(cols, rows, amplitude, rng)


def evaluate_octave(
    lattice: NDArray[np.float64],
    width: int,
    height: int,
    spacing: int,
    interpolation: Interpolation,
) -> NDArray[np.float64]:
    """Interpolate a lattice to a full resolution field.

    Pure function of its arguments, safe to run concurrently.

    Args:
        lattice: Padded lattice of shape (rows, columns).
        width: Output width in cells.
        height: Output height in cells.
        spacing: Distance between lattice points in cells.
        interpolation: Kernel used between lattice points.

    Returns:
        Field of shape (height, width).

    Raises:
        LatticeBoundsError: If the lattice does not cover every neighborhood.
    """
    interpolation = parse_interpolation(interpolation)
    xs = np.arange(width)
    ys = np.arange(height)

    # Offset of each coordinate within its lattice quad
    weight_x = (xs % spacing) / (spacing + 1)
    weight_y = (ys % spacing) / (spacing + 1)

    if interpolation is Interpolation.LINEAR:
        quad_x = xs // spacing
        quad_y = ys // spacing
        _check_coverage(lattice, quad_y[-1] + 1, quad_x[-1] + 1)

        row0 = quad_y[:, None]
        col0 = quad_x[None, :]
        return bilinear(
            lattice[row0, col0],
            lattice[row0, col0 + 1],
            lattice[row0 + 1, col0],
            lattice[row0 + 1, col0 + 1],
            weight_x[None, :],
            weight_y[:, None],
        )

    # The leading padding point shifts the quad origin by one
    quad_x = xs // spacing + 1
    quad_y = ys // spacing + 1
    _check_coverage(lattice, quad_y[-1] + 2, quad_x[-1] + 2)

    cols = quad_x[:, None] + _CUBIC_OFFSETS[None, :]
    rows = quad_y[:, None] + _CUBIC_OFFSETS[None, :]

    octave = np.empty((height, width), dtype=np.float64)
    for y in range(height):
        # (4 rows, width, 4 cols) -> (width, 4 rows, 4 cols)
        knots = lattice[rows[y]][:, cols].transpose(1, 0, 2)
        octave[y] = bicubic(knots, weight_x, weight_y[y])

    return octave


def synthesize_octave(
    width: int,
    height: int,
    spacing: int,
    amplitude: float,
    interpolation: Interpolation | str,
    rng: RandomSource,
) -> NDArray[np.float64]:
    """Generate one octave of value noise.

    Args:
        width: Output width in cells.
        height: Output height in cells.
        spacing: Distance between lattice points in cells.
        amplitude: Exclusive upper bound of the lattice values.
        interpolation: Kernel used between lattice points.
        rng: Random source for the lattice.

    Returns:
        Field of shape (height, width). Cubic octaves can overshoot
        [0, amplitude).
    """
    interpolation = parse_interpolation(interpolation)
    lattice = build_octave_lattice(width, height, spacing, amplitude, interpolation, rng)
    octave = evaluate_octave(lattice, width, height, spacing, interpolation)

    logger.debug(
        "octave_synthesized",
        spacing=spacing,
        amplitude=amplitude,
        interpolation=interpolation.value,
        lattice_shape=lattice.shape,
    )
    return octave


def _check_octave_params(width: int, height: int, spacing: int, amplitude: float) -> None:
    if width < 1 or height < 1:
        raise ConfigurationError(f"Field dimensions must be at least 1, got {width}x{height}")
    if spacing < 1:
        raise ConfigurationError(f"Octave spacing must be at least 1, got {spacing}")
    if amplitude < 0:
        raise ConfigurationError(f"Octave amplitude cannot be negative: {amplitude}")


def _check_coverage(lattice: NDArray[np.float64], max_row: int, max_col: int) -> None:
    """Fail if the highest sampled lattice index falls outside the lattice."""
    rows, cols = lattice.shape
    if max_row >= rows or max_col >= cols:
        raise LatticeBoundsError(
            f"Lattice {rows}x{cols} too small, needs index ({max_row}, {max_col})"
        )
