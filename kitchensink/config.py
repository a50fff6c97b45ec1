"""Hyperparameter configuration for kitchensink."""

from dataclasses import dataclass, fields
from typing import Any, Mapping
import warnings

from .kernels import kernel_from_name
from .models.sink import Sink


@dataclass
class SinkConfig:
    """
    Hyperparameters of a random kitchen sink model.

    Example usage:

        config = SinkConfig(n_features=512, input_dim=3, sigma=0.5)
        sink = config.build()
        sink.randomize_parameters()
        y = sink.predict([0.1, 0.2, 0.3])

    Parameters:
        n_features: Number of random features
        input_dim: Input dimensionality
        output_dim: Output dimensionality
        kernel: Kernel name ("gaussian"/"rbf" or "laplace")
        sigma: Kernel bandwidth
        seed: Random seed for reproducibility
        grain_size: Rows per chunk for batched prediction
    """
    n_features: int = 256
    input_dim: int = 1
    output_dim: int = 1
    kernel: str = "gaussian"
    sigma: float = 1.0
    seed: int = 42
    grain_size: int = 500

    def __post_init__(self):
        """Validate hyperparameters."""
        for name in ("n_features", "input_dim", "output_dim", "grain_size"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")
        # Fails early on unknown names and bad sigma
        kernel_from_name(self.kernel, self.sigma)
        if self.n_features < self.input_dim:
            warnings.warn(
                f"n_features ({self.n_features}) is smaller than input_dim "
                f"({self.input_dim}); the kernel approximation will be coarse"
            )

    @classmethod
    def from_dict(cls, values: Mapping[str, Any]) -> "SinkConfig":
        """
        Build a config from a mapping, ignoring unknown keys.

        Parameters:
            values: Mapping of field names to values

        Returns:
            SinkConfig instance
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            warnings.warn(f"Ignoring unknown config keys: {unknown}")
        return cls(**{k: v for k, v in values.items() if k in known})

    def build(self) -> Sink:
        """Construct a Sink with these hyperparameters."""
        return Sink(
            n_features=self.n_features,
            kernel=kernel_from_name(self.kernel, self.sigma),
            input_dim=self.input_dim,
            output_dim=self.output_dim,
            seed=self.seed,
            grain_size=self.grain_size
        )
