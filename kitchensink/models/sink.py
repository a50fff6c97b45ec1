"""Random kitchen sink model: random Fourier features plus a linear read-out."""

from dataclasses import dataclass
from typing import Optional

import jax.numpy as jnp
import jax.random as random
import numpy as np
from jaxtyping import Array, Float

from ..errors import DimensionMismatch, PreconditionError
from ..features import feature_map
from ..kernels.base import KernelSpec
from ..prediction.batch import batch_predict
from ..utils.buffers import check_length, write_into
from . import linear
from .base import Capability


class Sink:
    """
    Random kitchen sink regression model.

    Approximates a kernel machine with an explicit feature map
    z(x) = sqrt(2/D) * cos(Wx + b) followed by a linear read-out:

        y = z(x)ᵀ A

    W (projections, D x d) is drawn once from the kernel's spectral density
    and b (phases, D) uniformly from [0, 2π). Both are frozen for the lifetime
    of the model; only A (weights, D x k) is trained. Prediction cost is
    O(D·(d + k)) regardless of the training-set size.

    Reference:
        Rahimi & Recht (2008). "Weighted Sums of Random Kitchen Sinks"

    Parameters:
        n_features: Number of random features (D)
        kernel: Kernel spec supplying the projection rows
        input_dim: Input dimensionality (d)
        output_dim: Output dimensionality (k)
        key: jax.random key for all random draws (default: PRNGKey(seed))
        seed: Seed used when no key is given
        grain_size: Rows per chunk for batched prediction
    """

    capabilities = frozenset({Capability.LINEAR, Capability.CONVEX})

    def __init__(
        self,
        n_features: int,
        kernel: KernelSpec,
        input_dim: int,
        output_dim: int,
        key: Optional[Array] = None,
        seed: int = 0,
        grain_size: int = 500
    ):
        for name, value in (
            ("n_features", n_features),
            ("input_dim", input_dim),
            ("output_dim", output_dim),
        ):
            if value <= 0:
                raise PreconditionError(f"{name} must be positive, got {value}")
        if grain_size <= 0:
            raise ValueError("grain_size must be positive")

        self._n_features = n_features
        self._kernel = kernel
        self._input_dim = input_dim
        self._output_dim = output_dim
        self._grain_size = grain_size

        if key is None:
            key = random.PRNGKey(seed)
        key_W, key_b, self._key = random.split(key, 3)

        projections = kernel.generate(n_features, input_dim, key_W)
        if projections.shape != (n_features, input_dim):
            raise PreconditionError(
                f"kernel generated projections of shape {projections.shape}, "
                f"expected {(n_features, input_dim)}"
            )
        self._projections = projections
        self._weights = jnp.zeros((n_features, output_dim))
        self._phases = random.uniform(
            key_b,
            (n_features,),
            minval=0,
            maxval=2 * jnp.pi
        )

    @property
    def n_features(self) -> int:
        """Number of random features."""
        return self._n_features

    @property
    def input_dim(self) -> int:
        return self._input_dim

    @property
    def output_dim(self) -> int:
        return self._output_dim

    @property
    def kernel(self) -> KernelSpec:
        return self._kernel

    @property
    def grain_size(self) -> int:
        """Rows per chunk used by the batch driver."""
        return self._grain_size

    @property
    def projections(self) -> Float[Array, "D d"]:
        """Projection matrix; row i is the direction for feature i."""
        return self._projections

    @property
    def phases(self) -> Float[Array, "D"]:
        return self._phases

    @property
    def weights(self) -> Float[Array, "D k"]:
        """Current weight matrix (read-only view; use set_parameters to change)."""
        return self._weights

    def __repr__(self) -> str:
        return (
            f"Sink(n_features={self._n_features}, kernel={self._kernel!r}, "
            f"input_dim={self._input_dim}, output_dim={self._output_dim})"
        )

    # Parameters

    def num_parameters(self) -> int:
        """Number of trainable parameters, n_features * output_dim."""
        return self._n_features * self._output_dim

    def parameters(self, out: Optional[np.ndarray] = None):
        """
        Flattened weights in row-major order.

        Weight (i, j) is stored at index i * output_dim + j.

        Parameters:
            out: Optional writable buffer of length num_parameters()

        Returns:
            Flat parameter vector (``out`` if supplied)
        """
        if out is not None:
            check_length(out, self.num_parameters(), "parameter", PreconditionError)
        return write_into(self._weights.ravel(), out)

    def set_parameters(self, parameters) -> None:
        """Replace the weights from a flat row-major vector."""
        parameters = jnp.array(parameters)
        check_length(parameters, self.num_parameters(), "parameter", PreconditionError)
        self._weights = parameters.reshape(self._n_features, self._output_dim)

    def randomize_parameters(self, key: Optional[Array] = None) -> None:
        """
        Draw every weight from a standard normal.

        Without ``key`` the model's own key is split, so two models built
        from the same seed stay in step across repeated calls.
        """
        if key is None:
            self._key, key = random.split(self._key)
        self._weights = random.normal(key, (self._n_features, self._output_dim))

    # Prediction

    def predict(self, input, output: Optional[np.ndarray] = None):
        """
        Predict the output for a single input.

        Parameters:
            input: Input vector of length input_dim
            output: Optional writable buffer of length output_dim

        Returns:
            Prediction of shape (output_dim,); ``output`` if supplied

        Raises:
            DimensionMismatch: if input or output has the wrong shape
        """
        x = jnp.asarray(input)
        check_length(x, self._input_dim, "input", DimensionMismatch)
        if output is not None:
            check_length(output, self._output_dim, "output", DimensionMismatch)
        y = linear.predict(x, self._projections, self._phases, self._weights)
        return write_into(y, output)

    def predict_batch(
        self,
        inputs: Float[Array, "n d"],
        outputs: Optional[np.ndarray] = None,
        show_progress: bool = False
    ):
        """
        Predict every row of ``inputs``.

        Parameters:
            inputs: Input rows, shape (n, input_dim)
            outputs: Optional writable buffer of shape (n, output_dim)
            show_progress: Whether to show a progress bar

        Returns:
            Predictions of shape (n, output_dim)
        """
        return batch_predict(
            self.new_batch_predictor(),
            inputs,
            outputs,
            self._input_dim,
            self._output_dim,
            self._grain_size,
            show_progress=show_progress
        )

    def new_batch_predictor(self) -> "BatchPredictor":
        """Snapshot of the model usable by the batch driver."""
        return BatchPredictor(
            projections=self._projections,
            phases=self._phases,
            weights=self._weights
        )

    # Training integration

    def new_featurizer(self) -> "Sink":
        # Featurizing touches no mutable state, so the sink serves as its own featurizer
        return self

    def featurize(self, input, feature: Optional[np.ndarray] = None):
        """
        Random feature vector for ``input``.

        Parameters:
            input: Input vector of length input_dim
            feature: Optional writable buffer of length n_features

        Returns:
            Feature vector of shape (n_features,)
        """
        z = feature_map(jnp.asarray(input), self._projections, self._phases)
        return write_into(z, feature)

    def new_loss_deriver(self) -> "LossDeriver":
        return LossDeriver(n_features=self._n_features, output_dim=self._output_dim)


@dataclass(frozen=True, eq=False)
class BatchPredictor:
    """
    Immutable predictor over frozen model arrays.

    Holds no scratch memory, so ``new_predictor`` returns the instance
    itself and replicas can run side by side.
    """
    projections: Float[Array, "D d"]
    phases: Float[Array, "D"]
    weights: Float[Array, "D k"]

    def new_predictor(self) -> "BatchPredictor":
        return self

    def apply(self, x: Float[Array, "d"]) -> Float[Array, "k"]:
        return linear.predict(x, self.projections, self.phases, self.weights)

    def predict(self, input, output: Optional[np.ndarray] = None):
        return write_into(self.apply(jnp.asarray(input)), output)


@dataclass(frozen=True)
class LossDeriver:
    """
    Prediction and weight gradient on featurized inputs.

    Used by gradient-based trainers that featurize once and then evaluate
    many parameter vectors.

    Parameters:
        n_features: Number of random features
        output_dim: Output dimensionality
    """
    n_features: int
    output_dim: int

    def _weights(self, parameters) -> Float[Array, "D k"]:
        return jnp.asarray(parameters).reshape(self.n_features, self.output_dim)

    def predict(
        self,
        parameters,
        featurized_input,
        pred_output: Optional[np.ndarray] = None
    ):
        """Prediction from a feature vector and flat parameters."""
        y = linear.predict_featurized(
            jnp.asarray(featurized_input),
            self._weights(parameters)
        )
        return write_into(y, pred_output)

    def deriv(
        self,
        parameters,
        featurized_input,
        pred_output,
        d_loss_d_pred,
        d_loss_d_weight: Optional[np.ndarray] = None
    ):
        """
        Gradient of the loss with respect to the flat parameters.

        The prediction is linear in the weights, so the gradient depends
        only on the features and dLoss/dPrediction; ``parameters`` and
        ``pred_output`` are accepted for interface compatibility.

        Parameters:
            parameters: Flat weight vector
            featurized_input: Feature vector, shape (n_features,)
            pred_output: Prediction for this input
            d_loss_d_pred: Gradient of the loss with respect to the prediction
            d_loss_d_weight: Optional writable buffer of length n_features * output_dim

        Returns:
            dLoss/dWeight, flat and row-major
        """
        grad = linear.deriv(jnp.asarray(featurized_input), jnp.asarray(d_loss_d_pred))
        return write_into(grad, d_loss_d_weight)
