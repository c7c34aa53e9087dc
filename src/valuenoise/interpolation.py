"""Interpolation kernels.

All kernels work on plain floats as well as numpy arrays, so a whole octave
can be evaluated in a single vectorized pass. Cubic kernels expect the knots
along the trailing axis.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray

from .exceptions import KnotCountError

# Catmull-Rom basis, rows produce the spline coefficients c0..c3
CATMULL_ROM_BASIS = np.array(
    [
        [0.0, 1.0, 0.0, 0.0],
        [-0.5, 0.0, 0.5, 0.0],
        [1.0, -2.5, 2.0, -0.5],
        [-0.5, 1.5, -1.5, 0.5],
    ],
    dtype=np.float64,
)


def lerp(a: ArrayLike, b: ArrayLike, weight: ArrayLike) -> NDArray[np.float64]:
    """Linearly interpolate between a and b."""
    a = np.asarray(a, dtype=np.float64)
    b = np.asarray(b, dtype=np.float64)
    return a * (1 - weight) + b * weight


def bilinear(
    bottom_left: ArrayLike,
    bottom_right: ArrayLike,
    top_left: ArrayLike,
    top_right: ArrayLike,
    weight_x: ArrayLike,
    weight_y: ArrayLike,
) -> NDArray[np.float64]:
    """Interpolate between the four corners of a lattice quad.

    Weights are not clamped; values outside [0, 1] extrapolate.

    Args:
        bottom_left: Value at the quad origin.
        bottom_right: Value one step along x.
        top_left: Value one step along y.
        top_right: Value one step along both axes.
        weight_x: Offset within the quad along x.
        weight_y: Offset within the quad along y.

    Returns:
        Interpolated value(s).
    """
    bottom = lerp(bottom_left, bottom_right, weight_x)
    top = lerp(top_left, top_right, weight_x)
    return lerp(bottom, top, weight_y)


def cubic(knots: ArrayLike, weight: ArrayLike) -> NDArray[np.float64]:
    """Catmull-Rom interpolation between the two inner of four knots.

    At weight 0 the result is knots[1], at weight 1 it is knots[2]. The
    result can overshoot the range of the knots.

    Args:
        knots: Array whose trailing axis holds exactly 4 knots.
        weight: Position between knots[1] and knots[2].

    Returns:
        Interpolated value(s), shaped like knots without the trailing axis.

    Raises:
        KnotCountError: If the trailing axis does not hold 4 knots.
    """
    knots = np.asarray(knots, dtype=np.float64)
    if knots.ndim == 0 or knots.shape[-1] != 4:
        raise KnotCountError(f"Number of knots must be 4, got shape {knots.shape}")

    c0, c1, c2, c3 = np.moveaxis(knots @ CATMULL_ROM_BASIS.T, -1, 0)
    return ((c3 * weight + c2) * weight + c1) * weight + c0


def bicubic(
    knots4x4: ArrayLike,
    weight_x: ArrayLike,
    weight_y: ArrayLike,
) -> NDArray[np.float64]:
    """Bicubic interpolation over a 4x4 neighborhood.

    Each row is interpolated along x first, then the four row results along y.

    Args:
        knots4x4: Array whose two trailing axes are (row, column), rows
            ordered bottom to top and columns left to right.
        weight_x: Position within the central quad along x.
        weight_y: Position within the central quad along y.

    Returns:
        Interpolated value(s).

    Raises:
        KnotCountError: If the trailing axes are not 4x4.
    """
    knots4x4 = np.asarray(knots4x4, dtype=np.float64)
    if knots4x4.ndim < 2 or knots4x4.shape[-2:] != (4, 4):
        raise KnotCountError(
            f"Number of knots must be 4 in each dimension, got shape {knots4x4.shape}"
        )

    # Broadcast the x weight across the row axis
    rows = cubic(knots4x4, np.expand_dims(weight_x, -1))
    return cubic(rows, weight_y)
