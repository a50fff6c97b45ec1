"""Helpers for caller-supplied output buffers.

JAX arrays are immutable, so results are always computed as new arrays.
When a caller passes a writable numpy buffer, the result is copied into it
and the buffer itself is returned.
"""

from typing import Optional, Type

import numpy as np
from jaxtyping import Array


def check_length(
    buffer,
    expected: int,
    name: str,
    error: Type[Exception],
):
    """Raise ``error`` unless ``buffer`` is one-dimensional with ``expected`` entries."""
    shape = np.shape(buffer)
    if len(shape) != 1 or shape[0] != expected:
        raise error(f"{name} dimension mismatch: expected ({expected},), got {shape}")


def write_into(value: Array, out: Optional[np.ndarray]):
    """Copy ``value`` into ``out`` if given, otherwise return ``value`` unchanged."""
    if out is None:
        return value
    if not isinstance(out, np.ndarray):
        raise TypeError(
            f"output buffer must be a writable numpy array, got {type(out).__name__}"
        )
    out[...] = np.asarray(value).reshape(out.shape)
    return out
