"""
Fixed-parameter Continuous-Time Recurrent Neural Network.

The plain CTRNN holds constant weights, biases and time constants as
tensors. It shares the update equation of ``RecurrentNetwork`` and adds an
optional internally held state for callers that prefer ``tick()`` over
threading voltages themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence

import torch

from ctrnn.components.node import Node
from ctrnn.errors import (
    DimensionMismatchError,
    validate_index,
    validate_positive,
)
from ctrnn.mixins.resettable_mixin import ResettableMixin
from ctrnn.networks.base import NetworkConfig, RecurrentNetwork
from ctrnn.units import TimeConstant, TimeStep, Voltage, VoltageLike, VoltageTensor

logger = logging.getLogger(__name__)


@dataclass
class CTRNNConfig(NetworkConfig):
    """Configuration for the fixed-parameter CTRNN (see NetworkConfig)."""


class CTRNN(ResettableMixin, RecurrentNetwork):
    """
    Fully connected CTRNN with constant parameters.

    Example:
        ```python
        net = CTRNN(3)
        net.set_weight(0, 2, 1.0)
        net.set_weight(1, 2, 1.0)  # node 2 gets excited from nodes 0 and 1

        for _ in range(100):
            net.tick(dt=0.1, inputs=[0.5, 0.5])
        ```

    Args:
        n_nodes: Number of nodes, fixed for the network's lifetime
        config: CTRNNConfig with initial parameters and dtype/device
    """

    def __init__(self, n_nodes: int, config: Optional[CTRNNConfig] = None):
        super().__init__(n_nodes, config or CTRNNConfig())
        cfg = self.config
        kwargs = {"dtype": self.dtype, "device": self.device}

        # weights[i, j] is the weight going from node j TO node i
        self.register_buffer("weights", torch.full((n_nodes, n_nodes), cfg.initial_weight, **kwargs))
        self.register_buffer("biases", torch.full((n_nodes,), cfg.initial_bias, **kwargs))
        self.register_buffer(
            "time_constants", torch.full((n_nodes,), cfg.initial_time_constant, **kwargs)
        )
        self.register_buffer("state", torch.zeros(n_nodes, **kwargs))

        logger.debug("Built CTRNN with %d nodes", n_nodes)

    @classmethod
    def from_nodes(
        cls,
        nodes: Sequence[Node],
        weights: Optional[VoltageLike] = None,
        config: Optional[CTRNNConfig] = None,
    ) -> "CTRNN":
        """Build a network from per-node parameters and an optional weight matrix.

        Args:
            nodes: One Node per network node
            weights: [n, n] matrix, row = target, column = source
            config: Dtype/device and defaults; initial_* fields are overridden

        Raises:
            DimensionMismatchError: weights is not [len(nodes), len(nodes)]
            ConfigurationError: a node has a non-positive time constant
                (when validation is enabled)
        """
        net = cls(len(nodes), config)
        for index, node in enumerate(nodes):
            net.set_bias(index, node.bias)
            net.set_time_constant(index, node.time_constant)
        if weights is not None:
            matrix = torch.as_tensor(weights, dtype=net.dtype, device=net.device)
            if tuple(matrix.shape) != (net.n_nodes, net.n_nodes):
                raise DimensionMismatchError(
                    f"weights has shape {tuple(matrix.shape)}, "
                    f"expected ({net.n_nodes}, {net.n_nodes})"
                )
            net.weights.copy_(matrix)
        return net

    # =========================================================================
    # Parameters
    # =========================================================================

    def set_bias(self, index: int, value: Voltage) -> None:
        """Set the bias of one node."""
        index = validate_index(index, self.n_nodes, name="bias")
        self.biases[index] = value

    def set_time_constant(self, index: int, value: TimeConstant) -> None:
        """Set the time constant τ of one node.

        Raises:
            ConfigurationError: value is not positive (when validation is enabled)
        """
        index = validate_index(index, self.n_nodes, name="time constant")
        if self.config.validate:
            validate_positive(value, "time_constant")
        self.time_constants[index] = value

    def set_weight(self, source: int, target: int, value: float) -> None:
        """Set the weight of the connection from ``source`` to ``target``."""
        source = validate_index(source, self.n_nodes, name="source")
        target = validate_index(target, self.n_nodes, name="target")
        self.weights[target, source] = value

    def get_bias(self, index: int) -> Voltage:
        index = validate_index(index, self.n_nodes, name="bias")
        return self.biases[index].item()

    def get_time_constant(self, index: int) -> TimeConstant:
        index = validate_index(index, self.n_nodes, name="time constant")
        return self.time_constants[index].item()

    def get_weight(self, source: int, target: int) -> float:
        source = validate_index(source, self.n_nodes, name="source")
        target = validate_index(target, self.n_nodes, name="target")
        return self.weights[target, source].item()

    def nodes(self) -> List[Node]:
        """Per-node parameters as Node records."""
        return [
            Node(bias=b, time_constant=tau)
            for b, tau in zip(self.biases.tolist(), self.time_constants.tolist())
        ]

    def weight_matrix(self) -> torch.Tensor:
        return self.weights.clone()

    def bias_vector(self) -> torch.Tensor:
        return self.biases.clone()

    def time_constant_vector(self) -> torch.Tensor:
        return self.time_constants.clone()

    # =========================================================================
    # Held state
    # =========================================================================

    def tick(
        self,
        dt: Optional[TimeStep] = None,
        inputs: Optional[VoltageLike] = None,
    ) -> VoltageTensor:
        """Advance the internally held state by one step and return it."""
        next_state = self.update(self.config.dt if dt is None else dt, self.state, inputs)
        self.state.copy_(next_state)
        return VoltageTensor(self.state.clone())

    def reset_state(self) -> None:
        """Zero the held voltages; parameters are kept."""
        self.state.zero_()
