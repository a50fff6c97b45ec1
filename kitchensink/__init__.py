"""
kitchensink - Random Kitchen Sinks

A JAX implementation of random Fourier feature models: a randomized
feature map approximating a shift-invariant kernel, followed by a linear
read-out that external gradient-based trainers can fit.
"""

__version__ = "0.1.0"

# Errors
from .errors import KitchenSinkError, DimensionMismatch, PreconditionError

# Kernels
from .kernels import KernelSpec, GaussianKernel, LaplaceKernel, kernel_from_name

# Feature map
from .features import feature_map, feature_map_batch, approximate_kernel

# Models
from .models import (
    Capability,
    has_capability,
    Sink,
    BatchPredictor,
    LossDeriver,
)

# Prediction
from .prediction import batch_predict

# Configuration
from .config import SinkConfig

__all__ = [
    # Version
    "__version__",
    # Errors
    "KitchenSinkError",
    "DimensionMismatch",
    "PreconditionError",
    # Kernels
    "KernelSpec",
    "GaussianKernel",
    "LaplaceKernel",
    "kernel_from_name",
    # Feature map
    "feature_map",
    "feature_map_batch",
    "approximate_kernel",
    # Models
    "Capability",
    "has_capability",
    "Sink",
    "BatchPredictor",
    "LossDeriver",
    # Prediction
    "batch_predict",
    # Configuration
    "SinkConfig",
]
