"""
ctrnn - Continuous-Time Recurrent Neural Networks with reward-adaptive parameters.

Quick Start:
============

    from ctrnn import RLCTRNN, RLCTRNNConfig, FluctuatorConfig

    net = RLCTRNN(2, RLCTRNNConfig(fluctuator=FluctuatorConfig(initial_amplitude=0.5)))
    net.set_weight(0, 1, 1.0)
    net.set_weight(1, 0, 1.0)

    voltages = net.init_voltage()
    for t in range(1000):
        voltages = net.update(0.1, voltages, inputs=[0.2])
        reward = score(net.get_outputs(voltages))   # caller-defined
        net.reinforce(0.1, reward)

Internal code should use explicit imports for clarity:

    from ctrnn.components.fluctuator import Fluctuator, FluctuatorConfig
    from ctrnn.networks.rlctrnn import RLCTRNN, RLCTRNNConfig
"""

__version__ = "0.1.0"

from ctrnn.components import (
    ACTIVATIONS,
    Fluctuator,
    FluctuatorConfig,
    Node,
    get_activation,
    inverse_sigmoid,
    relu,
    sigmoid,
)
from ctrnn.errors import (
    ConfigurationError,
    CTRNNError,
    DimensionMismatchError,
    NodeIndexError,
    UnsupportedOperationError,
)
from ctrnn.config import BaseConfig, ConfigValidationError
from ctrnn.networks import (
    CTRNN,
    CTRNNConfig,
    NetworkConfig,
    ParameterSnapshot,
    RLCTRNN,
    RLCTRNNConfig,
)

__all__ = [
    "__version__",
    # Activations
    "ACTIVATIONS",
    "get_activation",
    "inverse_sigmoid",
    "relu",
    "sigmoid",
    # Components
    "Fluctuator",
    "FluctuatorConfig",
    "Node",
    # Networks
    "CTRNN",
    "CTRNNConfig",
    "NetworkConfig",
    "ParameterSnapshot",
    "RLCTRNN",
    "RLCTRNNConfig",
    # Configuration and errors
    "BaseConfig",
    "ConfigValidationError",
    "ConfigurationError",
    "CTRNNError",
    "DimensionMismatchError",
    "NodeIndexError",
    "UnsupportedOperationError",
]
