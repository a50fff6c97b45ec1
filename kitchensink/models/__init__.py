"""Model implementations for kitchensink."""

from .base import Capability, has_capability
from .sink import Sink, BatchPredictor, LossDeriver

__all__ = [
    "Capability",
    "has_capability",
    "Sink",
    "BatchPredictor",
    "LossDeriver",
]
