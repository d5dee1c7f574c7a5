import matplotlib

matplotlib.use("Agg")

import numpy as np
import pytest

from neuronet.dataset import generate_gate
from neuronet.model import Network


@pytest.fixture
def rng():
    """Seeded generator so weight initialization is reproducible."""
    return np.random.default_rng(1)


@pytest.fixture
def and_examples():
    return generate_gate("and")


@pytest.fixture
def small_network(rng):
    return Network([2, 3, 2, 1], rng=rng)


@pytest.fixture
def zero_weights():
    """Returns a helper that clears every weight and bias of a network."""
    def clear(network):
        for layer in network.layers:
            for neuron in layer:
                for synapse in neuron.synapses:
                    synapse.weight = 0.0
                    synapse.bias = 0.0
        return network
    return clear
