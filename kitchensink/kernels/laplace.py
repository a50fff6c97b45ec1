"""Laplace kernel and its random-feature generator."""

import jax.numpy as jnp
import jax.random as random
from jax import jit
from functools import partial
from jaxtyping import Array, Float

from .base import check_generate_dims


class LaplaceKernel:
    """
    Laplace kernel.

    k(x, y) = exp(-||x - y||₁ / σ)

    The kernel factorises over dimensions and each factor is the
    characteristic function of a Cauchy distribution, so projection rows
    are i.i.d. standard Cauchy draws scaled by 1/σ.

    Parameters:
        sigma: Bandwidth parameter
    """

    def __init__(self, sigma: float = 1.0):
        if sigma <= 0:
            raise ValueError("sigma must be positive")
        self._sigma = float(sigma)

    @property
    def sigma(self) -> float:
        return self._sigma

    def __repr__(self) -> str:
        return f"LaplaceKernel(sigma={self._sigma})"

    def generate(
        self,
        n_features: int,
        input_dim: int,
        key: Array
    ) -> Float[Array, "n_features input_dim"]:
        check_generate_dims(n_features, input_dim)
        return random.cauchy(key, (n_features, input_dim)) / self._sigma

    @partial(jit, static_argnums=(0,))
    def __call__(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        """Exact Laplace kernel matrix of shape (n, m)."""
        l1 = jnp.sum(jnp.abs(X[:, None, :] - Y[None, :, :]), axis=-1)
        return jnp.exp(-l1 / self._sigma)

    def diagonal(self, X: Float[Array, "n d"]) -> Float[Array, "n"]:
        return jnp.ones(X.shape[0])
