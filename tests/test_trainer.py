import copy

import numpy as np
import pytest

from neuronet.dataset import generate_gate
from neuronet.errors import DimensionMismatch
from neuronet.loss import SquaredError
from neuronet.model import Network
from neuronet.optimizer import SGD
from neuronet.trainer import Trainer


def make_trainer(network, speed=0.7, moment=0.3):
    return Trainer(network, SquaredError(), SGD(learning_rate=speed, momentum=moment))


def test_and_gate_converges(and_examples, rng):
    network = Network([2, 2, 1], rng=rng)
    final_epoch = network.train(and_examples, 50000, speed=0.7, moment=0.3, tolerance=0.002)

    assert 0 < final_epoch < 50000, "training should converge before exhausting the epoch budget"
    for inputs, ideals in and_examples:
        output = network.run(inputs)
        assert abs(output[0] - ideals[0]) < 0.1, f"{inputs} -> {output}, expected {ideals}"


def test_default_settings_classify_and_gate(and_examples, rng):
    network = Network([2, 2, 1], rng=rng)
    network.train(and_examples, 10000)

    for inputs, ideals in and_examples:
        assert network.predict(inputs)[0] == int(ideals[0])


def test_convergence_stops_on_current_epoch(and_examples, rng):
    result = make_trainer(Network([2, 2, 1], rng=rng)).train(
        and_examples, 100, tolerance=10.0, show_progress=False)

    assert result.converged
    assert result.final_epoch == 0
    assert len(result.loss_history) == 1


def test_exhausted_budget_reports_max_epochs(and_examples, rng):
    result = make_trainer(Network([2, 2, 1], rng=rng)).train(
        and_examples, 5, tolerance=0.0, show_progress=False)

    assert not result.converged
    assert result.final_epoch == 5
    assert len(result.loss_history) == 5


def test_zero_epochs(and_examples, rng):
    network = Network([2, 2, 1], rng=rng)
    assert network.train(and_examples, 0) == 0


def test_progress_callback_every_interval(and_examples, rng):
    events = []
    result = make_trainer(Network([2, 2, 1], rng=rng)).train(
        and_examples, 250, log_interval=100, tolerance=0.0,
        on_progress=lambda epoch, error: events.append((epoch, error)), show_progress=False)

    assert [epoch for epoch, _ in events] == [0, 100, 200]
    for epoch, error in events:
        assert error == result.loss_history[epoch]


def test_epoch_error_is_mean_squared_error(rng):
    examples = generate_gate("or")
    network = Network([2, 2, 1], rng=rng)

    # replay one epoch by hand on an independent copy
    replay = copy.deepcopy(network)
    optimizer = SGD(learning_rate=0.7, momentum=0.3)
    total = 0.0
    for inputs, ideals in examples:
        state = replay.forward(inputs)
        replay.backward(state, ideals, optimizer)
        total += float(np.sum((ideals - state.outputs[-1]) ** 2))

    result = make_trainer(network).train(examples, 1, tolerance=0.0, show_progress=False)
    assert result.loss_history[0] == pytest.approx(total / len(examples))


def test_error_trends_down(rng):
    examples = generate_gate("or")
    result = make_trainer(Network([2, 2, 1], rng=rng)).train(
        examples, 6000, tolerance=0.0, show_progress=False)
    history = result.loss_history

    start = next(i for i, error in enumerate(history) if error < 0.2)
    for n in range(start, len(history) - 1000, 1000):
        assert history[n + 1000] <= history[n] * 1.05 + 1e-4, f"error grew between epoch {n} and {n + 1000}"
    assert history[-1] < history[0]


def test_empty_training_set_rejected(rng):
    with pytest.raises(DimensionMismatch):
        Network([2, 1], rng=rng).train([], 10)


def test_training_is_deterministic(and_examples):
    first = Network([2, 3, 1], rng=np.random.default_rng(3))
    second = Network([2, 3, 1], rng=np.random.default_rng(3))

    assert first.train(and_examples, 300) == second.train(and_examples, 300)
    np.testing.assert_array_equal(first.run([1.0, 1.0]), second.run([1.0, 1.0]))


def test_bad_example_rejected_before_any_update(rng):
    network = Network([2, 2, 1], rng=rng)
    before = [(s.weight, s.bias) for layer in network.layers for n in layer for s in n.synapses]

    with pytest.raises(DimensionMismatch):
        network.train([([0.0, 1.0], [1.0]), ([0.0, 1.0, 2.0], [1.0])], 1)
    with pytest.raises(DimensionMismatch):
        network.train([([0.0, 1.0], [1.0]), ([1.0, 1.0], [1.0, 0.0])], 1)

    after = [(s.weight, s.bias) for layer in network.layers for n in layer for s in n.synapses]
    assert after == before, "weights must not change when the training set is malformed"


@pytest.mark.parametrize("log_interval", [0, -5])
def test_non_positive_log_interval_rejected(and_examples, rng, log_interval):
    with pytest.raises(ValueError):
        Network([2, 2, 1], rng=rng).train(and_examples, 10, log_interval=log_interval)
