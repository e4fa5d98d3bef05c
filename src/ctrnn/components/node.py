"""Per-neuron parameter container for the fixed-parameter CTRNN."""

from __future__ import annotations

from dataclasses import dataclass

from ctrnn.components.activation import inverse_sigmoid
from ctrnn.constants import DEFAULT_BIAS, DEFAULT_TIME_CONSTANT


@dataclass
class Node:
    """Bias and time constant of one CTRNN neuron.

    Attributes:
        bias: Added to the voltage before the activation (default: 0.0)
        time_constant: Relaxation time τ, same unit as dt (default: 1.0)
            Larger values = slower response to the weighted input sum.
    """

    bias: float = DEFAULT_BIAS
    time_constant: float = DEFAULT_TIME_CONSTANT

    @classmethod
    def from_resting_output(cls, output: float, time_constant: float = DEFAULT_TIME_CONSTANT) -> "Node":
        """Node whose sigmoid output at zero voltage equals ``output``.

        ``output`` must lie in (0, 1); the endpoints yield an infinite bias.
        """
        return cls(bias=inverse_sigmoid(output), time_constant=time_constant)
