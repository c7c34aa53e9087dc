"""Normalized multi-octave value noise field."""

import numpy as np
import structlog
from numpy.typing import NDArray

from .config import NoiseConfig
from .exceptions import ConfigurationError
from .fractal import accumulate, octave_schedule
from .normalize import DegeneratePolicy, normalize
from .types import Interpolation, RandomSource, parse_interpolation

logger = structlog.get_logger()


class ValueNoiseField:
    """2D value noise normalized to [0, 1].

    The field is generated once at construction and is read-only afterwards.
    Values are stored in an array of shape (height, width), but all accessors
    take coordinates in (x, y) order.
    """

    def __init__(
        self,
        width: int,
        height: int,
        interpolation: Interpolation | str,
        wavelength: int,
        octaves: int,
        factor: float = 0.5,
        *,
        rng: RandomSource | None = None,
        workers: int = 1,
        on_degenerate: DegeneratePolicy = "zero",
    ):
        """Generate a new field.

        Args:
            width: Number of cells along x.
            height: Number of cells along y.
            interpolation: Kernel used between lattice points.
            wavelength: Distance between lattice points on the first octave,
                the one with the lowest level of detail.
            octaves: Number of levels of detail; the wavelength is halved for
                each additional octave, down to a minimum of 1.
            factor: Amplitude multiplier for each following octave.
            rng: Random source. A fresh unseeded generator if None.
            workers: Threads used to evaluate octaves.
            on_degenerate: Handling of a constant accumulated field.

        Raises:
            ConfigurationError: If any parameter is invalid.
        """
        if width < 1 or height < 1:
            raise ConfigurationError(f"Field dimensions must be at least 1, got {width}x{height}")
        if wavelength < 1:
            raise ConfigurationError(f"Wavelength must be at least 1, got {wavelength}")
        if octaves < 1:
            raise ConfigurationError("octave count must be at least 1")

        self._width = width
        self._height = height
        self._interpolation = parse_interpolation(interpolation)
        self._wavelength = wavelength
        self._factor = factor
        self._spacings = tuple(
            spec.spacing for spec in octave_schedule(wavelength, octaves, factor)
        )

        if rng is None:
            rng = np.random.default_rng()

        summed = accumulate(
            width,
            height,
            self._interpolation,
            wavelength,
            octaves,
            factor,
            rng,
            workers=workers,
        )
        values = normalize(summed, on_degenerate=on_degenerate).astype(np.float32)
        values.setflags(write=False)
        self._values = values

        logger.info(
            "noise_field_generated",
            width=width,
            height=height,
            interpolation=self._interpolation.value,
            octaves=octaves,
        )

    @classmethod
    def from_config(
        cls,
        config: NoiseConfig,
        rng: RandomSource | None = None,
        workers: int = 1,
    ) -> "ValueNoiseField":
        """Generate a field from a NoiseConfig.

        The config seed is used only when no rng is given.
        """
        if rng is None and config.seed is not None:
            rng = np.random.default_rng(config.seed)
        return cls(
            config.width,
            config.height,
            config.interpolation,
            config.wavelength,
            config.octaves,
            config.factor,
            rng=rng,
            workers=workers,
            on_degenerate=config.on_degenerate,
        )

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def shape(self) -> tuple[int, int]:
        """Array shape as (height, width)."""
        return self._values.shape

    @property
    def interpolation(self) -> Interpolation:
        return self._interpolation

    @property
    def octave_spacings(self) -> tuple[int, ...]:
        """Lattice spacing used by each octave, coarsest first."""
        return self._spacings

    def value(self, x: int, y: int) -> float:
        """Get the value at (x, y).

        Raises:
            IndexError: If the coordinates are outside the field.
        """
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Coordinates ({x}, {y}) outside field {self._width}x{self._height}"
            )
        return float(self._values[y, x])

    def __getitem__(self, coords: tuple[int, int]) -> float:
        x, y = coords
        return self.value(x, y)

    def to_array(self) -> NDArray[np.float32]:
        """Copy of all values, shape (height, width)."""
        return self._values.copy()

    def to_array_clamped(self, threshold: float) -> NDArray[np.float32]:
        """Copy of all values with values above threshold replaced by it."""
        return np.minimum(self._values, np.float32(threshold))

    def to_array_clamped_below(self, threshold: float) -> NDArray[np.float32]:
        """Copy of all values with values below threshold replaced by it."""
        return np.maximum(self._values, np.float32(threshold))

    def to_array_discretized(self, buckets: int) -> NDArray[np.int32]:
        """Bucket index of every value when [0, 1] is split into equal buckets.

        A value of exactly 1 falls into the last bucket.

        Raises:
            ConfigurationError: If buckets < 1.
        """
        if buckets < 1:
            raise ConfigurationError(f"Bucket count must be at least 1, got {buckets}")
        indices = np.floor(self._values.astype(np.float64) * buckets).astype(np.int32)
        return np.minimum(indices, buckets - 1)

    def __repr__(self) -> str:
        return (
            f"ValueNoiseField(width={self._width}, height={self._height}, "
            f"interpolation={self._interpolation.value!r}, wavelength={self._wavelength}, "
            f"octaves={len(self._spacings)}, factor={self._factor})"
        )
