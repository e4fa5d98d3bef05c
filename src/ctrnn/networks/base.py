"""
Recurrent Network Base - Shared CTRNN Dynamics.

Both network variants integrate the same leaky-integrator equation and only
differ in where their parameters come from (constant tensors vs. Fluctuators).

**Node Dynamics**:
==================
.. math::

    \\tau_i \\frac{dv_i}{dt} = \\sum_j w_{ij} \\, \\sigma(v_j + b_j) - v_i

Discretized with one explicit Euler step per tick:

    next_i = v_i + dt * (sum_i - v_i) / tau_i + input_i

Where:
- v: voltages, owned and threaded by the caller
- w: weights, ``w[i][j]`` is the weight going from node j TO node i
- b: biases
- tau: time constants (must be > 0)
- σ: activation (sigmoid unless configured otherwise)

The whole next vector is computed from one parameter snapshot and the
unmodified prior voltages, so results never depend on iteration order.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Callable, Optional, Union

import torch
import torch.nn as nn

from ctrnn.components.activation import get_activation
from ctrnn.config.base import BaseConfig
from ctrnn.config.validation import ValidatedConfig
from ctrnn.constants import (
    DEFAULT_BIAS,
    DEFAULT_DT,
    DEFAULT_TIME_CONSTANT,
    DEFAULT_WEIGHT,
)
from ctrnn.errors import (
    ConfigurationError,
    DimensionMismatchError,
    UnsupportedOperationError,
    validate_vector_length,
)
from ctrnn.units import OutputTensor, TimeStep, VoltageLike, VoltageTensor


@dataclass
class NetworkConfig(BaseConfig, ValidatedConfig):
    """Configuration shared by both network variants.

    Attributes:
        dt: Integration step used by forward() and tick() when none is given (default: 0.1)
        initial_bias: Bias of every node at construction (default: 0.0)
        initial_time_constant: Time constant of every node at construction (default: 1.0)
            Must be positive when validation is enabled.
        initial_weight: Every entry of the weight matrix at construction (default: 0.0)
            The network is fully connected; absent connections are zero weights.
        activation: Registry name ("sigmoid", "relu") or a tensor -> tensor
            callable bound to this network (default: "sigmoid")
        validate: Check fields here and time constants passed to setters (default: True)
    """

    dt: float = DEFAULT_DT
    initial_bias: float = DEFAULT_BIAS
    initial_time_constant: float = DEFAULT_TIME_CONSTANT
    initial_weight: float = DEFAULT_WEIGHT
    activation: Union[str, Callable] = "sigmoid"
    validate: bool = True

    _validation_rules = {
        'dt': ('non_negative', 'finite'),
        'initial_bias': ('finite',),
        'initial_time_constant': ('positive', 'finite'),
        'initial_weight': ('finite',),
    }

    def __post_init__(self) -> None:
        if self.validate:
            self.validate_config()
            get_activation(self.activation)
            self.get_torch_dtype()


@dataclass(frozen=True)
class ParameterSnapshot:
    """Network parameters read at one instant.

    Attributes:
        weights: [n_nodes, n_nodes], row = target, column = source
        biases: [n_nodes]
        time_constants: [n_nodes]
    """

    weights: torch.Tensor
    biases: torch.Tensor
    time_constants: torch.Tensor


def euler_step(
    snapshot: ParameterSnapshot,
    voltages: torch.Tensor,
    inputs: torch.Tensor,
    dt: float,
    activation: Callable[[torch.Tensor], torch.Tensor],
) -> torch.Tensor:
    """One explicit Euler step of the CTRNN equation.

    Returns a new tensor; ``voltages`` is not modified.
    """
    rates = activation(voltages + snapshot.biases)
    total = snapshot.weights @ rates
    delta = (total - voltages) / snapshot.time_constants
    return voltages + delta * dt + inputs


class RecurrentNetwork(nn.Module, ABC):
    """
    Abstract base class for fully connected CTRNNs of fixed size.

    Provides:
    - Voltage/input coercion and the dimension contract
    - The output map and the Euler update on top of ``snapshot()``
    - ``init_voltage()``

    Subclasses implement ``snapshot()`` and the parameter setters.
    """

    def __init__(self, n_nodes: int, config: NetworkConfig):
        super().__init__()
        if isinstance(n_nodes, bool) or not isinstance(n_nodes, int) or n_nodes < 0:
            raise ConfigurationError(f"n_nodes must be a non-negative int, got {n_nodes!r}")
        self.n_nodes = n_nodes
        self.config = config
        self.activation = get_activation(config.activation)
        self.device = config.get_torch_device()
        self.dtype = config.get_torch_dtype()

    @abstractmethod
    def weight_matrix(self) -> torch.Tensor:
        """Current weights [n_nodes, n_nodes], row = target, column = source."""

    @abstractmethod
    def bias_vector(self) -> torch.Tensor:
        """Current biases [n_nodes]."""

    @abstractmethod
    def time_constant_vector(self) -> torch.Tensor:
        """Current time constants [n_nodes]."""

    def snapshot(self) -> ParameterSnapshot:
        """Current weights, biases and time constants read together."""
        return ParameterSnapshot(
            weights=self.weight_matrix(),
            biases=self.bias_vector(),
            time_constants=self.time_constant_vector(),
        )

    def add_node(self) -> None:
        """Topology is fixed at construction."""
        raise UnsupportedOperationError(
            f"{self.__class__.__name__} has a fixed size of {self.n_nodes} nodes; "
            "build a new network to change it"
        )

    def init_voltage(self) -> VoltageTensor:
        """All-zero voltage vector, the canonical starting state."""
        return VoltageTensor(torch.zeros(self.n_nodes, dtype=self.dtype, device=self.device))

    def get_outputs(self, voltages: VoltageLike) -> OutputTensor:
        """Activation of every node, activation(v_i + b_i)."""
        v = self._as_voltages(voltages)
        return OutputTensor(self.activation(v + self.bias_vector()))

    def update(
        self,
        dt: TimeStep,
        voltages: VoltageLike,
        inputs: Optional[VoltageLike] = None,
    ) -> VoltageTensor:
        """
        Advance voltages by one tick.

        Args:
            dt: Integration step (≥ 0)
            voltages: Current voltages, length n_nodes
            inputs: External input added to each node after integration,
                length ≤ n_nodes; missing entries count as 0.0
                (a 1-D vector, never a scalar or a nested list)

        Returns:
            Next voltages [n_nodes]. Parameters are read, never modified.

        Raises:
            DimensionMismatchError: voltages length != n_nodes, or inputs
                longer than n_nodes, or either is not 1-D
        """
        v = self._as_voltages(voltages)
        x = self._as_inputs(inputs)
        return VoltageTensor(euler_step(self.snapshot(), v, x, float(dt), self.activation))

    def _as_vector(self, values: VoltageLike, name: str) -> torch.Tensor:
        v = torch.as_tensor(values, dtype=self.dtype, device=self.device)
        if v.dim() != 1:
            raise DimensionMismatchError(
                f"{name} must be a 1-D vector, got shape {tuple(v.shape)}"
            )
        return v

    def _as_voltages(self, voltages: VoltageLike) -> torch.Tensor:
        v = self._as_vector(voltages, "voltages")
        validate_vector_length(v.shape[0], self.n_nodes, name="voltages")
        return v

    def _as_inputs(self, inputs: Optional[VoltageLike]) -> torch.Tensor:
        padded = torch.zeros(self.n_nodes, dtype=self.dtype, device=self.device)
        if inputs is None:
            return padded
        x = self._as_vector(inputs, "inputs")
        validate_vector_length(x.shape[0], self.n_nodes, name="inputs", allow_shorter=True)
        padded[: x.shape[0]] = x
        return padded

    def forward(
        self,
        voltages: VoltageLike,
        inputs: Optional[VoltageLike] = None,
        dt: Optional[TimeStep] = None,
    ) -> VoltageTensor:
        """Same as ``update()``, with dt defaulting to ``config.dt``."""
        return self.update(self.config.dt if dt is None else dt, voltages, inputs)

    def extra_repr(self) -> str:
        return f"n_nodes={self.n_nodes}, dtype={self.dtype}"
