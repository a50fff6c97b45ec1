"""Benchmark exact kernel evaluation against random-feature prediction."""

import time
import jax.numpy as jnp
import jax.random as random
from kitchensink.kernels.gaussian import GaussianKernel
from kitchensink.models.sink import Sink


def benchmark_exact_kernel(n_samples: int = 1000, input_dim: int = 10):
    """Time an exact Gaussian gram matrix against n_samples training points."""
    key = random.PRNGKey(42)
    X = random.normal(key, (n_samples, input_dim))

    kernel = GaussianKernel(sigma=1.0)

    # Warm up
    _ = kernel(X, X).block_until_ready()

    start = time.time()
    kernel(X, X).block_until_ready()
    elapsed = time.time() - start

    print(f"Exact kernel: {n_samples}x{n_samples} matrix, {input_dim} inputs")
    print(f"Time: {elapsed:.4f} seconds")

    return elapsed


def benchmark_sink_predict(
    n_samples: int = 1000,
    input_dim: int = 10,
    n_features: int = 256
):
    """Time batched random-feature prediction for n_samples inputs."""
    key = random.PRNGKey(42)
    X = random.normal(key, (n_samples, input_dim))

    sink = Sink(n_features, GaussianKernel(sigma=1.0), input_dim, output_dim=1, seed=42)
    sink.randomize_parameters()

    # Warm up
    _ = sink.predict_batch(X).block_until_ready()

    start = time.time()
    sink.predict_batch(X).block_until_ready()
    elapsed = time.time() - start

    print(f"Sink predict: {n_samples} inputs, {input_dim} input dims, {n_features} features")
    print(f"Time: {elapsed:.4f} seconds")
    print(f"Throughput: {n_samples / elapsed:.2f} predictions/second")

    return elapsed


def compare_sink_vs_exact():
    """Compare random-feature prediction against exact kernel evaluation."""
    sizes = [100, 500, 1000, 2000]

    print("=" * 60)
    print("Random Kitchen Sink vs Exact Gaussian Kernel")
    print("=" * 60)

    for n in sizes:
        print(f"\nSize: {n}")
        print("-" * 60)

        exact_time = benchmark_exact_kernel(n_samples=n)
        sink_time = benchmark_sink_predict(n_samples=n, n_features=256)

        speedup = exact_time / sink_time
        print(f"Speedup: {speedup:.2f}x")


if __name__ == "__main__":
    compare_sink_vs_exact()
