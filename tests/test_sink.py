"""Tests for the Sink model."""

import pytest
import numpy as np
import jax.numpy as jnp
import jax.random as random

from kitchensink.errors import DimensionMismatch, PreconditionError
from kitchensink.kernels.gaussian import GaussianKernel
from kitchensink.kernels.laplace import LaplaceKernel
from kitchensink.models.base import (
    Capability,
    Featurizer,
    LossDeriverProtocol,
    ParameterModel,
    Predictor,
    PredictorFactory,
    has_capability,
)
from kitchensink.models.sink import Sink


class _WrongShapeKernel:
    def generate(self, n_features, input_dim, key):
        return jnp.zeros((n_features + 1, input_dim))


def test_construction_shapes(gaussian_kernel):
    model = Sink(10, gaussian_kernel, input_dim=4, output_dim=3)

    assert model.n_features == 10
    assert model.input_dim == 4
    assert model.output_dim == 3
    assert model.projections.shape == (10, 4)
    assert model.phases.shape == (10,)
    assert model.weights.shape == (10, 3)
    assert jnp.all(model.weights == 0)
    assert jnp.all((model.phases >= 0) & (model.phases < 2 * jnp.pi))


def test_zero_weights_predict_zero(gaussian_kernel):
    model = Sink(10, gaussian_kernel, input_dim=2, output_dim=3)
    assert jnp.allclose(model.predict([0.3, -0.1]), 0.0)


def test_num_parameters(sink):
    assert sink.num_parameters() == 64 * 2
    assert sink.parameters().shape == (128,)


def test_predict_matches_featurized_path(sink, sample_inputs):
    """Full prediction equals featurize followed by the featurized predictor."""
    featurizer = sink.new_featurizer()
    deriver = sink.new_loss_deriver()
    params = sink.parameters()

    for x in sample_inputs:
        direct = sink.predict(x)
        z = featurizer.featurize(x)
        via_features = deriver.predict(params, z)
        assert direct.shape == (2,)
        assert jnp.allclose(direct, via_features, atol=1e-10)


def test_parameter_round_trip_keeps_predictions(sink, sample_inputs):
    before = sink.predict_batch(sample_inputs)
    sink.set_parameters(sink.parameters())
    after = sink.predict_batch(sample_inputs)
    assert jnp.array_equal(before, after)


def test_parameters_are_row_major(gaussian_kernel):
    model = Sink(4, gaussian_kernel, input_dim=1, output_dim=3)
    model.set_parameters(jnp.arange(12.0))

    for i in range(4):
        for j in range(3):
            assert model.weights[i, j] == i * 3 + j


def test_parameters_into_buffer(sink):
    buf = np.empty(sink.num_parameters())
    result = sink.parameters(buf)

    assert result is buf
    assert np.allclose(buf, np.asarray(sink.weights).ravel())


def test_parameter_size_mismatch_is_precondition_error(sink):
    with pytest.raises(PreconditionError):
        sink.parameters(np.empty(sink.num_parameters() + 1))
    with pytest.raises(PreconditionError):
        sink.set_parameters(jnp.zeros(sink.num_parameters() - 1))
    with pytest.raises(PreconditionError):
        sink.set_parameters(jnp.zeros((64, 2)))


def test_set_parameters_copies_input(sink):
    params = np.ones(sink.num_parameters())
    sink.set_parameters(params)
    params[:] = 5.0
    assert jnp.all(sink.weights == 1.0)


def test_seeded_construction_is_reproducible(gaussian_kernel):
    a = Sink(32, gaussian_kernel, input_dim=3, output_dim=2, seed=11)
    b = Sink(32, gaussian_kernel, input_dim=3, output_dim=2, seed=11)
    c = Sink(32, gaussian_kernel, input_dim=3, output_dim=2, seed=12)

    assert jnp.array_equal(a.projections, b.projections)
    assert jnp.array_equal(a.phases, b.phases)
    assert not jnp.array_equal(a.projections, c.projections)

    for _ in range(2):
        a.randomize_parameters()
        b.randomize_parameters()
        assert jnp.array_equal(a.weights, b.weights)


def test_injected_key_matches_seed(gaussian_kernel):
    a = Sink(8, gaussian_kernel, input_dim=2, output_dim=1, key=random.PRNGKey(5))
    b = Sink(8, gaussian_kernel, input_dim=2, output_dim=1, seed=5)
    assert jnp.array_equal(a.projections, b.projections)
    assert jnp.array_equal(a.phases, b.phases)


def test_randomize_parameters(sink):
    before = sink.weights
    sink.randomize_parameters()
    assert not jnp.array_equal(before, sink.weights)

    sink.randomize_parameters(key=random.PRNGKey(0))
    first = sink.weights
    sink.randomize_parameters(key=random.PRNGKey(0))
    assert jnp.array_equal(first, sink.weights)


def test_randomize_keeps_random_basis(sink):
    projections, phases = sink.projections, sink.phases
    sink.randomize_parameters()
    sink.set_parameters(jnp.zeros(sink.num_parameters()))
    assert jnp.array_equal(projections, sink.projections)
    assert jnp.array_equal(phases, sink.phases)


@pytest.mark.parametrize("bad_input", [
    [0.1, 0.2, 0.3, 0.4],
    [0.1, 0.2],
    [[0.1, 0.2, 0.3]],
])
def test_predict_input_mismatch(sink, bad_input):
    with pytest.raises(DimensionMismatch):
        sink.predict(bad_input)


def test_predict_output_mismatch(sink):
    with pytest.raises(DimensionMismatch):
        sink.predict([0.1, 0.2, 0.3], np.empty(3))
    # Dimension errors are also ValueErrors for callers that catch broadly
    with pytest.raises(ValueError):
        sink.predict([0.1, 0.2, 0.3], np.empty(1))


def test_predict_into_buffer(sink):
    out = np.zeros(2)
    result = sink.predict([0.1, 0.2, 0.3], out)

    assert result is out
    assert np.allclose(out, np.asarray(sink.predict([0.1, 0.2, 0.3])))


def test_predict_does_not_change_parameters(sink, sample_inputs):
    params = sink.parameters()
    sink.predict(sample_inputs[0])
    sink.predict_batch(sample_inputs)
    assert jnp.array_equal(params, sink.parameters())


def test_featurize_into_buffer(sink):
    buf = np.empty(sink.n_features)
    result = sink.featurize([0.1, 0.2, 0.3], buf)
    assert result is buf
    assert np.all(np.abs(buf) <= np.sqrt(2.0 / sink.n_features) + 1e-12)


def test_capabilities(sink):
    assert has_capability(sink, Capability.LINEAR)
    assert has_capability(sink, Capability.CONVEX)
    assert not has_capability(object(), Capability.LINEAR)


def test_trainer_protocols(sink):
    assert isinstance(sink, ParameterModel)
    assert isinstance(sink.new_featurizer(), Featurizer)
    assert isinstance(sink.new_loss_deriver(), LossDeriverProtocol)

    batch = sink.new_batch_predictor()
    assert isinstance(batch, PredictorFactory)
    assert isinstance(batch.new_predictor(), Predictor)


def test_invalid_dimensions(gaussian_kernel):
    with pytest.raises(PreconditionError):
        Sink(0, gaussian_kernel, input_dim=2, output_dim=1)
    with pytest.raises(PreconditionError):
        Sink(4, gaussian_kernel, input_dim=2, output_dim=0)


def test_kernel_shape_mismatch():
    with pytest.raises(PreconditionError, match="projections"):
        Sink(4, _WrongShapeKernel(), input_dim=2, output_dim=1)


def test_laplace_sink(laplace_kernel):
    model = Sink(16, laplace_kernel, input_dim=2, output_dim=1, seed=3)
    model.randomize_parameters()
    y = model.predict([0.5, -0.5])
    assert y.shape == (1,)
    assert jnp.isfinite(y).all()
