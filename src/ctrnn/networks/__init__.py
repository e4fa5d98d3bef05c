"""
Network variants.

Both integrate the same CTRNN equation (see ``ctrnn.networks.base``):
- CTRNN: constant parameters
- RLCTRNN: every parameter is a reward-adaptive Fluctuator
"""

from ctrnn.networks.base import (
    NetworkConfig,
    ParameterSnapshot,
    RecurrentNetwork,
    euler_step,
)
from ctrnn.networks.ctrnn import CTRNN, CTRNNConfig
from ctrnn.networks.rlctrnn import RLCTRNN, RLCTRNNConfig

__all__ = [
    "CTRNN",
    "CTRNNConfig",
    "NetworkConfig",
    "ParameterSnapshot",
    "RLCTRNN",
    "RLCTRNNConfig",
    "RecurrentNetwork",
    "euler_step",
]
