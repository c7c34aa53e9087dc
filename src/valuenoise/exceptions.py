"""Custom exceptions for value noise generation."""


class NoiseError(Exception):
    """Base exception for noise generation errors."""

    pass


class ConfigurationError(NoiseError, ValueError):
    """Raised when generation parameters are invalid."""

    pass


class InvariantError(NoiseError):
    """Raised when an internal invariant is violated.

    These indicate a bug in index or padding arithmetic, not bad input.
    """

    pass


class KnotCountError(InvariantError):
    """Raised when a cubic kernel receives other than 4 knots per axis."""

    pass


class LatticeBoundsError(InvariantError):
    """Raised when a lattice is too small for the cells sampled from it."""

    pass


class DegenerateRangeError(NoiseError):
    """Raised when a field has no usable value range to normalize."""

    pass
