"""Random Fourier feature map.

z(x) = sqrt(2/D) * cos(Wx + b)

where W holds one random projection row per feature and b the phase
offsets. For a shift-invariant kernel k, z(x)ᵀz(y) is an unbiased Monte
Carlo estimate of k(x, y) (Rahimi & Recht, 2007).
"""

import jax.numpy as jnp
from jax import jit, vmap
from jaxtyping import Array, Float


def normalization(n_features: int) -> float:
    """Feature scale sqrt(2 / n_features)."""
    return float(jnp.sqrt(2.0 / n_features))


def compute_feature(
    x: Float[Array, "d"],
    projection_row: Float[Array, "d"],
    phase: float,
    norm: float
) -> Float[Array, ""]:
    """Value of a single feature: norm * cos(x·w + b)."""
    return norm * jnp.cos(jnp.dot(x, projection_row) + phase)


@jit
def feature_map(
    x: Float[Array, "d"],
    projections: Float[Array, "D d"],
    phases: Float[Array, "D"]
) -> Float[Array, "D"]:
    """
    Featurize a single input.

    Parameters:
        x: Input vector, shape (d,)
        projections: Projection matrix, shape (D, d)
        phases: Phase offsets, shape (D,)

    Returns:
        Feature vector of shape (D,)
    """
    norm = jnp.sqrt(2.0 / projections.shape[0])
    return vmap(compute_feature, in_axes=(None, 0, 0, None))(
        x, projections, phases, norm
    )


@jit
def feature_map_batch(
    X: Float[Array, "n d"],
    projections: Float[Array, "D d"],
    phases: Float[Array, "D"]
) -> Float[Array, "n D"]:
    """Featurize every row of X."""
    return vmap(feature_map, in_axes=(0, None, None))(X, projections, phases)


def approximate_kernel(
    X: Float[Array, "n d"],
    Y: Float[Array, "m d"],
    projections: Float[Array, "D d"],
    phases: Float[Array, "D"]
) -> Float[Array, "n m"]:
    """
    Approximate kernel matrix via random features.

    K(X, Y) ≈ z(X) @ z(Y).T
    """
    phi_X = feature_map_batch(X, projections, phases)
    phi_Y = feature_map_batch(Y, projections, phases)
    return jnp.dot(phi_X, phi_Y.T)
