"""Range normalization of accumulated fields."""

from typing import Literal

import numpy as np
import structlog
from numpy.typing import NDArray

from .exceptions import ConfigurationError, DegenerateRangeError

logger = structlog.get_logger()

DegeneratePolicy = Literal["zero", "raise"]


def normalize(
    field: NDArray[np.floating],
    on_degenerate: DegeneratePolicy = "zero",
) -> NDArray[np.float64]:
    """Rescale a field linearly so its minimum maps to 0 and maximum to 1.

    Args:
        field: Input field of any shape.
        on_degenerate: What to do when the field is constant: "zero" returns
            an all-zero field, "raise" raises DegenerateRangeError.

    Returns:
        New array of the same shape with values in [0, 1].

    Raises:
        DegenerateRangeError: If the field contains non-finite values, or is
            constant and on_degenerate is "raise".
    """
    if on_degenerate not in ("zero", "raise"):
        raise ConfigurationError(f"Unknown degenerate range policy: {on_degenerate!r}")

    values = np.asarray(field, dtype=np.float64)
    if values.size == 0:
        raise DegenerateRangeError("Cannot normalize an empty field")
    if not np.all(np.isfinite(values)):
        raise DegenerateRangeError("Cannot normalize a field with non-finite values")

    min_value = values.min()
    max_value = values.max()
    value_range = max_value - min_value

    if value_range == 0:
        if on_degenerate == "raise":
            raise DegenerateRangeError(f"Field is constant at {min_value}, range is zero")
        logger.warning("degenerate_range", value=float(min_value), shape=values.shape)
        return np.zeros_like(values)

    return (values - min_value) / value_range
