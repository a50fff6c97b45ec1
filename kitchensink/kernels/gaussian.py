"""Gaussian (RBF) kernel and its random-feature generator."""

import jax.numpy as jnp
import jax.random as random
from jax import jit
from functools import partial
from jaxtyping import Array, Float

from .base import check_generate_dims


class GaussianKernel:
    """
    Radial Basis Function (Gaussian) kernel.

    k(x, y) = exp(-||x - y||² / (2σ²))

    Its spectral density is N(0, I/σ²), so random projection rows are
    i.i.d. normal draws scaled by 1/σ.

    Parameters:
        sigma: Bandwidth parameter (length scale)
    """

    def __init__(self, sigma: float = 1.0):
        if sigma <= 0:
            raise ValueError("sigma must be positive")
        self._sigma = float(sigma)

    @property
    def sigma(self) -> float:
        """Kernel bandwidth parameter."""
        return self._sigma

    def __repr__(self) -> str:
        return f"GaussianKernel(sigma={self._sigma})"

    def generate(
        self,
        n_features: int,
        input_dim: int,
        key: Array
    ) -> Float[Array, "n_features input_dim"]:
        """
        Sample projection rows W ~ N(0, I/σ²).

        Parameters:
            n_features: Number of random features
            input_dim: Input dimensionality
            key: jax.random key

        Returns:
            Projection matrix of shape (n_features, input_dim)
        """
        check_generate_dims(n_features, input_dim)
        return random.normal(key, (n_features, input_dim)) / self._sigma

    @partial(jit, static_argnums=(0,))
    def __call__(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        """
        Compute the exact RBF kernel matrix.

        Uses the identity:
        ||x - y||² = ||x||² + ||y||² - 2<x, y>

        Parameters:
            X: First set of points, shape (n, d)
            Y: Second set of points, shape (m, d)

        Returns:
            Kernel matrix of shape (n, m)
        """
        X_sqnorm = jnp.sum(X ** 2, axis=1, keepdims=True)  # (n, 1)
        Y_sqnorm = jnp.sum(Y ** 2, axis=1, keepdims=True)  # (m, 1)

        sq_distances = X_sqnorm + Y_sqnorm.T - 2 * jnp.dot(X, Y.T)  # (n, m)
        # Rounding can push tiny distances below zero
        sq_distances = jnp.maximum(sq_distances, 0.0)

        return jnp.exp(-sq_distances / (2 * self._sigma ** 2))

    def diagonal(self, X: Float[Array, "n d"]) -> Float[Array, "n"]:
        """Diagonal of K(X, X) - always 1 for RBF."""
        return jnp.ones(X.shape[0])
