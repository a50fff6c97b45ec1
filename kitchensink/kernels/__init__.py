"""Kernel specifications for kitchensink."""

from .base import KernelSpec, ExactKernel
from .gaussian import GaussianKernel
from .laplace import LaplaceKernel

_KERNELS = {
    "gaussian": GaussianKernel,
    "rbf": GaussianKernel,
    "laplace": LaplaceKernel,
}


def kernel_from_name(name: str, sigma: float = 1.0) -> KernelSpec:
    """
    Build a kernel spec from its name.

    Parameters:
        name: "gaussian" (alias "rbf") or "laplace"
        sigma: Kernel bandwidth

    Returns:
        Kernel spec instance
    """
    try:
        cls = _KERNELS[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown kernel {name!r}; expected one of {sorted(_KERNELS)}"
        ) from None
    return cls(sigma=sigma)


__all__ = [
    "KernelSpec",
    "ExactKernel",
    "GaussianKernel",
    "LaplaceKernel",
    "kernel_from_name",
]
