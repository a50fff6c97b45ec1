"""Interfaces between the sink model and external trainers / batch drivers."""

from enum import Enum
from typing import Optional, Protocol, runtime_checkable

import numpy as np
from jaxtyping import Array, Float


class Capability(Enum):
    """Properties of a model that a training routine may exploit."""

    LINEAR = "linear"   # prediction is a linear function of the parameters
    CONVEX = "convex"   # loss is convex in the parameters for a convex loss


def has_capability(model, capability: Capability) -> bool:
    """True if ``model`` declares ``capability`` in its ``capabilities`` set."""
    return capability in getattr(model, "capabilities", frozenset())


@runtime_checkable
class Predictor(Protocol):
    """Single-sample predictor used by the batch driver."""

    def apply(self, x: Float[Array, "d"]) -> Float[Array, "k"]:
        """Pure prediction for one input."""
        ...

    def predict(self, input, output: Optional[np.ndarray] = None):
        ...


@runtime_checkable
class PredictorFactory(Protocol):
    """Manufactures independent predictors, one per batch chunk."""

    def new_predictor(self) -> Predictor:
        ...


@runtime_checkable
class Featurizer(Protocol):
    def featurize(self, input, feature: Optional[np.ndarray] = None):
        ...


@runtime_checkable
class LossDeriverProtocol(Protocol):
    def predict(self, parameters, featurized_input, pred_output=None):
        ...

    def deriv(
        self,
        parameters,
        featurized_input,
        pred_output,
        d_loss_d_pred,
        d_loss_d_weight=None
    ):
        ...


@runtime_checkable
class ParameterModel(Protocol):
    """Flat parameter vocabulary an optimizer needs."""

    def num_parameters(self) -> int:
        ...

    def parameters(self, out: Optional[np.ndarray] = None):
        ...

    def set_parameters(self, parameters) -> None:
        ...

    def randomize_parameters(self, key=None) -> None:
        ...
