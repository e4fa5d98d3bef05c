"""
Building blocks of the networks: activations, per-node parameters and
the Fluctuator.
"""

from ctrnn.components.activation import (
    ACTIVATIONS,
    ActivationFunc,
    get_activation,
    inverse_sigmoid,
    relu,
    sigmoid,
)
from ctrnn.components.fluctuator import Fluctuator, FluctuatorConfig
from ctrnn.components.node import Node

__all__ = [
    "ACTIVATIONS",
    "ActivationFunc",
    "Fluctuator",
    "FluctuatorConfig",
    "Node",
    "get_activation",
    "inverse_sigmoid",
    "relu",
    "sigmoid",
]
