"""Shared fixtures for tests."""

import jax

# Gradient checks compare against finite differences; run in double precision
jax.config.update("jax_enable_x64", True)

import pytest
import jax.random as random

from kitchensink.kernels.gaussian import GaussianKernel
from kitchensink.kernels.laplace import LaplaceKernel
from kitchensink.models.sink import Sink


@pytest.fixture
def rng_key():
    """Random number generator key."""
    return random.PRNGKey(42)


@pytest.fixture
def sample_data_2d(rng_key):
    """Sample 2D data for testing."""
    key1, key2 = random.split(rng_key)
    X = random.normal(key1, (10, 5))
    Y = random.normal(key2, (8, 5))
    return X, Y


@pytest.fixture
def gaussian_kernel():
    """Gaussian kernel for testing."""
    return GaussianKernel(sigma=1.0)


@pytest.fixture
def laplace_kernel():
    """Laplace kernel for testing."""
    return LaplaceKernel(sigma=1.0)


@pytest.fixture
def sink(gaussian_kernel):
    """Small sink with random weights: 64 features, 3 inputs, 2 outputs."""
    model = Sink(64, gaussian_kernel, input_dim=3, output_dim=2, seed=7)
    model.randomize_parameters()
    return model


@pytest.fixture
def sample_inputs(rng_key):
    """Inputs matching the ``sink`` fixture."""
    return random.normal(rng_key, (23, 3))
