"""Unit types for the quantities flowing through a CTRNN tick.

Keeps voltages, time constants and rewards apart in signatures.
Uses Python's NewType for zero-runtime-cost type checking with mypy/pyright.

Example usage:
    from ctrnn.units import Reward, TimeStep

    def reinforce(dt: TimeStep, reward: Reward) -> None:
        ...
"""

from typing import NewType, Sequence, Union

import torch

# =============================================================================
# SCALAR UNITS
# =============================================================================

Voltage = NewType("Voltage", float)
"""Membrane potential of one node (dimensionless)."""

TimeConstant = NewType("TimeConstant", float)
"""Per-node relaxation time τ, in the same unit as the timestep. Must be > 0."""

TimeStep = NewType("TimeStep", float)
"""Integration step dt (≥ 0)."""

Reward = NewType("Reward", float)
"""Scalar reinforcement signal.

- Positive: shrinks exploration amplitude, drifts centers along the perturbation
- Negative: grows exploration amplitude, drifts centers against the perturbation
"""

# =============================================================================
# TENSOR TYPES
# =============================================================================

VoltageTensor = NewType("VoltageTensor", torch.Tensor)
"""Tensor of voltages [n_nodes]."""

OutputTensor = NewType("OutputTensor", torch.Tensor)
"""Tensor of activations [n_nodes]."""

VoltageLike = Union[torch.Tensor, Sequence[float]]
"""Anything accepted as a voltage or input vector (list, tuple, ndarray, tensor)."""

__all__ = [
    "Voltage",
    "TimeConstant",
    "TimeStep",
    "Reward",
    "VoltageTensor",
    "OutputTensor",
    "VoltageLike",
]
