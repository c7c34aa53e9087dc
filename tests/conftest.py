"""Shared test fixtures for noise tests."""

import tempfile
from pathlib import Path

import numpy as np
import pytest


class CountingSource:
    """Random source that records how many values were drawn."""

    def __init__(self, seed: int = 0):
        self._rng = np.random.default_rng(seed)
        self.draws = 0

    def random(self, size):
        values = self._rng.random(size)
        self.draws += values.size
        return values


class ConstantSource:
    """Random source that always returns the same value."""

    def __init__(self, value: float = 0.5):
        self.value = value

    def random(self, size):
        return np.full(size, self.value)


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded numpy generator."""
    return np.random.default_rng(1234)


@pytest.fixture
def counting_source() -> CountingSource:
    """Seeded random source that counts draws."""
    return CountingSource(seed=99)


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def sample_config_toml():
    """Sample noise config as TOML string."""
    return """
[noise]
width = 24
height = 16
interpolation = "cubic"
wavelength = 8
octaves = 3
factor = 0.6
seed = 7
"""


@pytest.fixture
def config_file(temp_dir, sample_config_toml):
    """Create a temporary config file."""
    config_path = temp_dir / "noise.toml"
    config_path.write_text(sample_config_toml)
    return config_path
