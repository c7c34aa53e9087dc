"""Deterministic multi-octave 2D value noise.

Builds noise fields by interpolating random lattices at halving spacings
(bilinear or Catmull-Rom bicubic), summing the octaves and normalizing the
result into [0, 1].
"""

from .config import Config, NoiseConfig, load_config
from .exceptions import (
    ConfigurationError,
    DegenerateRangeError,
    InvariantError,
    KnotCountError,
    LatticeBoundsError,
    NoiseError,
)
from .field import ValueNoiseField
from .fractal import accumulate, octave_schedule
from .interpolation import bicubic, bilinear, cubic, lerp
from .lattice import generate_lattice
from .normalize import normalize
from .octave import build_octave_lattice, evaluate_octave, synthesize_octave
from .persistence import load_field, save_field, save_preview
from .types import Interpolation, OctaveSpec, RandomSource

__all__ = [
    # Types
    "Interpolation",
    "OctaveSpec",
    "RandomSource",
    # Pipeline
    "generate_lattice",
    "lerp",
    "bilinear",
    "cubic",
    "bicubic",
    "build_octave_lattice",
    "evaluate_octave",
    "synthesize_octave",
    "octave_schedule",
    "accumulate",
    "normalize",
    # Field
    "ValueNoiseField",
    # Config
    "Config",
    "NoiseConfig",
    "load_config",
    # Persistence
    "save_field",
    "load_field",
    "save_preview",
    # Exceptions
    "NoiseError",
    "ConfigurationError",
    "InvariantError",
    "KnotCountError",
    "LatticeBoundsError",
    "DegenerateRangeError",
]
