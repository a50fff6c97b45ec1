"""Linear read-out from random features and its weight gradient.

The prediction is linear in the weights, y_j = Σ_i z_i W_ij, so
dy_j/dW_ij = z_i and the loss gradient with respect to W is the outer
product of the feature vector and dLoss/dy. Weights are flattened
row-major (feature-major): W[i, j] lives at index i * output_dim + j.
"""

from jax import jit
import jax.numpy as jnp
from jaxtyping import Array, Float

from ..features import feature_map


@jit
def predict_featurized(
    features: Float[Array, "D"],
    weights: Float[Array, "D k"]
) -> Float[Array, "k"]:
    """Dense matrix-vector product out[j] = Σ_i features[i] * weights[i, j]."""
    return jnp.dot(features, weights)


@jit
def predict(
    x: Float[Array, "d"],
    projections: Float[Array, "D d"],
    phases: Float[Array, "D"],
    weights: Float[Array, "D k"]
) -> Float[Array, "k"]:
    """Featurize x and apply the linear read-out. Assumes shapes are valid."""
    return predict_featurized(feature_map(x, projections, phases), weights)


@jit
def deriv(
    features: Float[Array, "D"],
    d_loss_d_pred: Float[Array, "k"]
) -> Float[Array, "Dk"]:
    """
    Gradient of the loss with respect to the flattened weights.

    Parameters:
        features: Feature vector for one sample, shape (D,)
        d_loss_d_pred: Gradient of the loss with respect to the prediction, shape (k,)

    Returns:
        dLoss/dWeight of shape (D * k,), row-major
    """
    return jnp.outer(features, d_loss_d_pred).ravel()
