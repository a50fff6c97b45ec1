"""Chunked batch prediction driver."""

from typing import Optional

import jax.numpy as jnp
import numpy as np
from jax import vmap
from tqdm import tqdm
from jaxtyping import Array, Float

from ..errors import DimensionMismatch
from ..models.base import PredictorFactory
from ..utils.buffers import write_into


def batch_predict(
    factory: PredictorFactory,
    inputs: Float[Array, "n d"],
    outputs: Optional[np.ndarray],
    input_dim: int,
    output_dim: int,
    grain_size: int,
    show_progress: bool = False
):
    """
    Predict every row of ``inputs``.

    Rows are processed in chunks of ``grain_size``. Each chunk gets its own
    predictor from ``factory.new_predictor()`` and is evaluated with vmap.

    Parameters:
        factory: Object producing independent predictors
        inputs: Input rows, shape (n, input_dim)
        outputs: Optional writable buffer of shape (n, output_dim)
        input_dim: Expected number of input columns
        output_dim: Expected number of output columns
        grain_size: Rows per chunk
        show_progress: Whether to show a progress bar

    Returns:
        Predictions of shape (n, output_dim); ``outputs`` if it was supplied
    """
    if grain_size <= 0:
        raise ValueError("grain_size must be positive")

    inputs = jnp.asarray(inputs)
    if inputs.ndim != 2 or inputs.shape[1] != input_dim:
        raise DimensionMismatch(
            f"input dimension mismatch: expected (n, {input_dim}), got {inputs.shape}"
        )
    n_rows = inputs.shape[0]
    if outputs is not None and np.shape(outputs) != (n_rows, output_dim):
        raise DimensionMismatch(
            f"output dimension mismatch: expected ({n_rows}, {output_dim}), "
            f"got {np.shape(outputs)}"
        )

    if n_rows == 0:
        result = jnp.zeros((0, output_dim))
    else:
        iterator = range(0, n_rows, grain_size)
        if show_progress:
            iterator = tqdm(iterator, desc="Predicting")

        predictions = []
        for start_idx in iterator:
            end_idx = min(start_idx + grain_size, n_rows)
            predictor = factory.new_predictor()
            predictions.append(vmap(predictor.apply)(inputs[start_idx:end_idx]))
        result = jnp.concatenate(predictions)

    return write_into(result, outputs)
