"""
Reinforcement-Adaptive CTRNN (RLCTRNN).

Every scalar parameter of the network, each weight, bias and time constant,
is a Fluctuator: an oscillating value that searches around its center and
adapts under a scalar reward. A network of N nodes owns N² + 2N
independent Fluctuators.

**Forward pass vs. adaptation**:
================================
``update()`` is the forward pass only. It reads every Fluctuator once
(a snapshot) and never advances or anneals them. Adaptation is driven by
the caller after observing the effect of a tick:

    voltages = net.init_voltage()
    for t in range(steps):
        voltages = net.update(dt, voltages, inputs)
        reward = task.score(net.get_outputs(voltages))   # caller-defined
        net.reinforce(dt, reward)

``reinforce()`` broadcasts one reward to every parameter. For per-node or
per-connection credit assignment use ``reinforce_bias()``,
``reinforce_time_constant()`` and ``reinforce_weight()``.

**Time constants**:
Time-constant Fluctuators oscillate like any other parameter. With a large
exploration amplitude their value can cross zero, which makes the Euler
step singular; this is not guarded at tick time.
"""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Iterator, List, Optional

import torch

from ctrnn.components.fluctuator import Fluctuator, FluctuatorConfig
from ctrnn.errors import validate_index, validate_positive
from ctrnn.networks.base import NetworkConfig, RecurrentNetwork
from ctrnn.units import Reward, TimeConstant, TimeStep, Voltage

logger = logging.getLogger(__name__)


@dataclass
class RLCTRNNConfig(NetworkConfig):
    """Configuration for the reward-adaptive CTRNN.

    Attributes:
        fluctuator: Shared configuration of every parameter Fluctuator
            (ranges, rates, initial amplitude, period policy)

    The seed (from BaseConfig) seeds the RNG shared by all Fluctuators,
    which is only used when ``fluctuator.randomize_period`` is set.
    """

    fluctuator: FluctuatorConfig = field(default_factory=FluctuatorConfig)


class RLCTRNN(RecurrentNetwork):
    """
    Fully connected CTRNN whose parameters are Fluctuators.

    Example:
        ```python
        net = RLCTRNN(6)
        net.set_bias(0, 1.1)
        net.set_weight(0, 2, 1.0)  # node 2 gets excited from node 0
        ```

    Args:
        n_nodes: Number of nodes, fixed for the network's lifetime
        config: RLCTRNNConfig with initial centers, Fluctuator config and dtype/device
    """

    def __init__(self, n_nodes: int, config: Optional[RLCTRNNConfig] = None):
        super().__init__(n_nodes, config or RLCTRNNConfig())
        cfg = self.config
        flux = cfg.fluctuator
        self._rng = random.Random(cfg.seed)

        self._biases: List[Fluctuator] = [
            Fluctuator(cfg.initial_bias, flux, self._rng) for _ in range(n_nodes)
        ]
        self._time_constants: List[Fluctuator] = [
            Fluctuator(cfg.initial_time_constant, flux, self._rng) for _ in range(n_nodes)
        ]
        # _weights[i][j] is the weight going from node j TO node i
        self._weights: List[List[Fluctuator]] = [
            [Fluctuator(cfg.initial_weight, flux, self._rng) for _ in range(n_nodes)]
            for _ in range(n_nodes)
        ]

        logger.debug(
            "Built RLCTRNN with %d nodes (%d fluctuators)", n_nodes, self.n_fluctuators
        )

    @property
    def n_fluctuators(self) -> int:
        """Number of adaptive parameters, N² + 2N."""
        return self.n_nodes * self.n_nodes + 2 * self.n_nodes

    # =========================================================================
    # Setters (reposition a center, keep the oscillation state)
    # =========================================================================

    def set_bias(self, index: int, value: Voltage) -> None:
        """Move the bias center of one node.

        Can be thought of as how stimulated a neuron must be to activate.
        """
        index = validate_index(index, self.n_nodes, name="bias")
        self._biases[index].center = float(value)

    def set_time_constant(self, index: int, value: TimeConstant) -> None:
        """Move the time-constant center of one node.

        Raises:
            ConfigurationError: value is not positive (when validation is enabled)
        """
        index = validate_index(index, self.n_nodes, name="time constant")
        if self.config.validate:
            validate_positive(value, "time_constant")
        self._time_constants[index].center = float(value)

    def set_weight(self, source: int, target: int, value: float) -> None:
        """Move the center of the weight from ``source`` to ``target``."""
        source = validate_index(source, self.n_nodes, name="source")
        target = validate_index(target, self.n_nodes, name="target")
        self._weights[target][source].center = float(value)

    # =========================================================================
    # Getters (current oscillated values)
    # =========================================================================

    def get_bias(self, index: int) -> Voltage:
        index = validate_index(index, self.n_nodes, name="bias")
        return self._biases[index].get()

    def get_time_constant(self, index: int) -> TimeConstant:
        index = validate_index(index, self.n_nodes, name="time constant")
        return self._time_constants[index].get()

    def get_weight(self, source: int, target: int) -> float:
        source = validate_index(source, self.n_nodes, name="source")
        target = validate_index(target, self.n_nodes, name="target")
        return self._weights[target][source].get()

    def weight_matrix(self) -> torch.Tensor:
        values = [flux.get() for row in self._weights for flux in row]
        return self._tensor(values).reshape(self.n_nodes, self.n_nodes)

    def bias_vector(self) -> torch.Tensor:
        return self._tensor([flux.get() for flux in self._biases])

    def time_constant_vector(self) -> torch.Tensor:
        return self._tensor([flux.get() for flux in self._time_constants])

    def _tensor(self, values: List[float]) -> torch.Tensor:
        return torch.tensor(values, dtype=self.dtype, device=self.device)

    # =========================================================================
    # Reward application
    # =========================================================================

    def fluctuators(self) -> Iterator[Fluctuator]:
        """Iterate over biases, time constants, then weights row by row."""
        yield from self._biases
        yield from self._time_constants
        for row in self._weights:
            yield from row

    def reinforce(self, dt: TimeStep, reward: Reward) -> None:
        """Feed one reward to every Fluctuator and advance them by dt."""
        logger.debug("Broadcasting reward %.4g (dt=%s) to %d fluctuators", reward, dt, self.n_fluctuators)
        for flux in self.fluctuators():
            flux.update(dt, reward)

    def reinforce_bias(self, index: int, dt: TimeStep, reward: Reward) -> float:
        """Reward one bias Fluctuator; returns its credited perturbation."""
        index = validate_index(index, self.n_nodes, name="bias")
        return self._biases[index].update(dt, reward)

    def reinforce_time_constant(self, index: int, dt: TimeStep, reward: Reward) -> float:
        """Reward one time-constant Fluctuator; returns its credited perturbation."""
        index = validate_index(index, self.n_nodes, name="time constant")
        return self._time_constants[index].update(dt, reward)

    def reinforce_weight(self, source: int, target: int, dt: TimeStep, reward: Reward) -> float:
        """Reward the weight from ``source`` to ``target``; returns its credited perturbation."""
        source = validate_index(source, self.n_nodes, name="source")
        target = validate_index(target, self.n_nodes, name="target")
        return self._weights[target][source].update(dt, reward)

    def reset_exploration(self) -> None:
        """Reset amplitude and phase of every Fluctuator, keeping all centers."""
        for flux in self.fluctuators():
            flux.reset_state()
