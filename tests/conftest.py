"""Shared fixtures for the Prism test suite."""

import numpy as np
import pytest

from prism_colorspace import COLOR_SPACES


@pytest.fixture
def rng():
    """Deterministic generator so failures are reproducible."""
    return np.random.default_rng(1931)


@pytest.fixture
def linear_colors(rng):
    """A batch of in-gamut linear RGB colors, shape (64, 3)."""
    return rng.uniform(0.0, 1.0, size=(64, 3))


@pytest.fixture(params=sorted(COLOR_SPACES))
def preset(request):
    """Every registered color space preset in turn."""
    return COLOR_SPACES[request.param]
