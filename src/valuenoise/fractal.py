"""Fractal accumulation: octaves of halving spacing summed into one field.

Each octave halves the spacing of the previous one and scales its amplitude
by a constant factor, so the first octave sets the coarse shape and later
octaves add progressively finer detail.
"""

import math
from concurrent import futures

import numpy as np
import structlog
from numpy.typing import NDArray

from .exceptions import ConfigurationError
from .octave import build_octave_lattice, evaluate_octave
from .types import Interpolation, OctaveSpec, RandomSource, parse_interpolation

logger = structlog.get_logger()


def octave_schedule(
    base_spacing: int,
    octave_count: int,
    amplitude_factor: float,
) -> list[OctaveSpec]:
    """Compute spacing and amplitude for every octave.

    Octave i uses spacing floor(base_spacing * 0.5**i) and amplitude
    amplitude_factor**i. Spacings that would drop below 1 are held at 1.

    Args:
        base_spacing: Spacing of the first, coarsest octave.
        octave_count: Number of octaves.
        amplitude_factor: Amplitude multiplier between octaves.

    Returns:
        One OctaveSpec per octave, coarsest first.

    Raises:
        ConfigurationError: If octave_count < 1, base_spacing < 1 or
            amplitude_factor is negative or not finite.
    """
    if octave_count < 1:
        raise ConfigurationError("octave count must be at least 1")
    if base_spacing < 1:
        raise ConfigurationError(f"Base spacing must be at least 1, got {base_spacing}")
    if not (math.isfinite(amplitude_factor) and amplitude_factor >= 0):
        raise ConfigurationError(
            f"Amplitude factor must be finite and non-negative, got {amplitude_factor}"
        )

    specs = []
    for i in range(octave_count):
        spacing = max(int(base_spacing * 0.5**i), 1)
        # Start at 1 for the first octave and scale by the factor for each following one
        specs.append(OctaveSpec(index=i, spacing=spacing, amplitude=amplitude_factor**i))
    return specs


def accumulate(
    width: int,
    height: int,
    interpolation: Interpolation | str,
    base_spacing: int,
    octave_count: int,
    amplitude_factor: float,
    rng: RandomSource,
    workers: int = 1,
) -> NDArray[np.float64]:
    """Generate all octaves and sum them cell-wise.

    Lattices are drawn from rng in octave order before any octave is
    evaluated, so the result is identical for every worker count.

    Args:
        width: Output width in cells.
        height: Output height in cells.
        interpolation: Kernel used between lattice points.
        base_spacing: Spacing of the first octave.
        octave_count: Number of octaves, at least 1.
        amplitude_factor: Amplitude multiplier between octaves.
        rng: Random source shared by all octaves.
        workers: Threads used to evaluate octaves. 1 evaluates inline.

    Returns:
        Summed field of shape (height, width), not normalized.
    """
    interpolation = parse_interpolation(interpolation)
    if workers < 1:
        raise ConfigurationError(f"Worker count must be at least 1, got {workers}")

    specs = octave_schedule(base_spacing, octave_count, amplitude_factor)
    underflowed = [spec.index for spec in specs if base_spacing * 0.5**spec.index < 1]
    if underflowed:
        logger.warning("spacing_underflow", octaves=underflowed, clamped_to=1)

    lattices = [
        build_octave_lattice(width, height, spec.spacing, spec.amplitude, interpolation, rng)
        for spec in specs
    ]

    def evaluate(index: int) -> NDArray[np.float64]:
        return evaluate_octave(lattices[index], width, height, specs[index].spacing, interpolation)

    if workers == 1 or len(specs) == 1:
        octaves = [evaluate(i) for i in range(len(specs))]
    else:
        with futures.ThreadPoolExecutor(max_workers=workers) as executor:
            # map preserves octave order; the with block joins every worker
            octaves = list(executor.map(evaluate, range(len(specs))))

    result = np.zeros((height, width), dtype=np.float64)
    for octave in octaves:
        result += octave

    logger.debug(
        "octaves_accumulated",
        octave_count=len(specs),
        spacings=[spec.spacing for spec in specs],
        workers=workers,
    )
    return result
