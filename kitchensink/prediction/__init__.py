"""Batched prediction for kitchensink."""

from .batch import batch_predict

__all__ = ["batch_predict"]
