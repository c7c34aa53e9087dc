"""Field persistence: save and load generated noise."""

import json
from datetime import datetime, timezone
from pathlib import Path

import numpy as np
import structlog
from numpy.typing import NDArray
from PIL import Image

from .config import NoiseConfig
from .field import ValueNoiseField

logger = structlog.get_logger()

FORMAT_VERSION = 1


def save_field(path: Path, field: ValueNoiseField, config: NoiseConfig) -> None:
    """Save a generated field to disk.

    Uses numpy's compressed .npz format for efficient storage.

    Args:
        path: Output path, used as given (.npz is conventional).
        field: Generated noise field.
        config: Configuration the field was generated from.
    """
    metadata = {
        "version": FORMAT_VERSION,
        "width": field.width,
        "height": field.height,
        "interpolation": field.interpolation.value,
        "wavelength": config.wavelength,
        "octaves": config.octaves,
        "octave_spacings": list(field.octave_spacings),
        "factor": config.factor,
        "seed": config.seed,
        "generated_at": datetime.now(timezone.utc).isoformat(),
    }

    # Written through a handle so numpy does not append an .npz suffix
    with open(path, "wb") as f:
        np.savez_compressed(
            f,
            values=field.to_array(),
            metadata=json.dumps(metadata).encode("utf-8"),
        )

    file_size = path.stat().st_size / 1024
    logger.info("field_saved", path=str(path), size_kb=round(file_size, 1))


def load_field(path: Path) -> tuple[NDArray[np.float32], dict]:
    """Load a field from disk.

    Args:
        path: Path to .npz file.

    Returns:
        Tuple of (values array of shape (height, width), metadata dict).

    Raises:
        FileNotFoundError: If file doesn't exist.
        ValueError: If file format is invalid.
    """
    if not path.exists():
        raise FileNotFoundError(f"Field file not found: {path}")

    with np.load(path) as data:
        if "values" not in data:
            raise ValueError("Invalid field file: missing 'values' array")
        values = data["values"]

        if "metadata" in data:
            metadata = json.loads(data["metadata"].tobytes().decode("utf-8"))
        else:
            metadata = {}

    logger.info("field_loaded", path=str(path), width=values.shape[1], height=values.shape[0])
    return values, metadata


def save_preview(path: Path, values: NDArray[np.floating]) -> None:
    """Write values in [0, 1] as an 8-bit grayscale image.

    Row 0 of the array (y = 0) becomes the top row of the image.
    """
    pixels = (np.clip(values, 0.0, 1.0) * 255).round().astype(np.uint8)
    Image.fromarray(pixels).save(path)
    logger.info("preview_saved", path=str(path))
