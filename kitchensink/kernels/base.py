"""Base kernel protocols and interfaces."""

from numbers import Integral
from typing import Protocol, runtime_checkable
from jaxtyping import Array, Float

from ..errors import PreconditionError


@runtime_checkable
class KernelSpec(Protocol):
    """Protocol for kernels with a closed-form random-feature generator."""

    def generate(
        self,
        n_features: int,
        input_dim: int,
        key: Array
    ) -> Float[Array, "n_features input_dim"]:
        """
        Draw one random projection direction per feature.

        Rows are sampled from the spectral density of the kernel, so that
        cos(w.x + b) features approximate it in expectation (Bochner).

        Parameters:
            n_features: Number of random features (rows)
            input_dim: Dimensionality of the inputs (columns)
            key: jax.random key; the same key gives the same matrix

        Returns:
            Projection matrix of shape (n_features, input_dim)
        """
        ...


@runtime_checkable
class ExactKernel(Protocol):
    """Protocol for kernels that can also be evaluated exactly."""

    def __call__(
        self,
        X: Float[Array, "n d"],
        Y: Float[Array, "m d"]
    ) -> Float[Array, "n m"]:
        """
        Compute kernel matrix between X and Y.

        Parameters:
            X: First set of points, shape (n, d)
            Y: Second set of points, shape (m, d)

        Returns:
            Kernel matrix of shape (n, m)
        """
        ...

    @property
    def sigma(self) -> float:
        """Kernel bandwidth parameter."""
        ...


def check_generate_dims(n_features: int, input_dim: int):
    """Reject malformed dimensions passed to ``generate``."""
    for name, value in (("n_features", n_features), ("input_dim", input_dim)):
        if isinstance(value, bool) or not isinstance(value, Integral) or value <= 0:
            raise PreconditionError(f"{name} must be a positive integer, got {value!r}")
