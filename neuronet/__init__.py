'''
Name: NeuroNet
Topic: back-propagation with momentum
Author: CHEN, KE-RONG
Date: 2025/07/02
'''
from .model import Network, ForwardState
from .layers import Synapse, Neuron, Layer, sigmoid, sigmoid_derivative
from .loss import SquaredError
from .optimizer import SGD
from .trainer import Trainer, TrainingResult
from .errors import NeuroNetError, InvalidTopology, DimensionMismatch
