"""Error types for kitchensink.

Two tiers are distinguished:

- ``DimensionMismatch``: a caller handed a public prediction entry point an
  input or output of the wrong shape. Recoverable; no result is produced.
- ``PreconditionError``: a programming error such as a parameter vector of
  the wrong length. The operation is abandoned before any work is done.
"""


class KitchenSinkError(Exception):
    """Base class for all kitchensink errors."""


class DimensionMismatch(KitchenSinkError, ValueError):
    """Input or output buffer does not match the model dimensions."""


class PreconditionError(KitchenSinkError, RuntimeError):
    """A caller contract was violated (wrong parameter length, bad shape)."""
