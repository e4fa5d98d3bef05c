"""
Activation functions mapping node voltage to output.

Every function accepts a Python number (returns ``float``) or a
``torch.Tensor`` (returns a tensor, elementwise). Scalars are evaluated in
float64 through torch so that saturation and out-of-domain inputs behave
exactly like the tensor path instead of raising.
"""

from __future__ import annotations

from typing import Callable, Dict, Union, overload

import torch

from ctrnn.errors import ConfigurationError

Scalar = Union[int, float]

ActivationFunc = Callable[[torch.Tensor], torch.Tensor]
"""A single scalar-to-scalar transformation applied elementwise."""


def _apply(fn: ActivationFunc, x: Union[Scalar, torch.Tensor]) -> Union[float, torch.Tensor]:
    if isinstance(x, torch.Tensor):
        return fn(x)
    return fn(torch.tensor(float(x), dtype=torch.float64)).item()


@overload
def sigmoid(x: Scalar) -> float: ...
@overload
def sigmoid(x: torch.Tensor) -> torch.Tensor: ...
def sigmoid(x):
    """A logistic curve that tends towards 0 for negative inputs and 1 for positive inputs."""
    return _apply(torch.sigmoid, x)


@overload
def inverse_sigmoid(x: Scalar) -> float: ...
@overload
def inverse_sigmoid(x: torch.Tensor) -> torch.Tensor: ...
def inverse_sigmoid(x):
    """Logit, ln(x / (1 - x)).

    Finite only on (0, 1): returns -inf at 0, +inf at 1 and NaN outside.
    Callers guard the domain themselves.
    """
    return _apply(torch.logit, x)


@overload
def relu(x: Scalar) -> float: ...
@overload
def relu(x: torch.Tensor) -> torch.Tensor: ...
def relu(x):
    """A curve that is 0 if the input is negative, and x if it is positive."""
    return _apply(torch.relu, x)


ACTIVATIONS: Dict[str, Callable] = {
    "sigmoid": sigmoid,
    "relu": relu,
}
"""Activations selectable by name in network configs."""


def get_activation(activation: Union[str, Callable]) -> Callable:
    """Resolve an activation given by registry name or as a callable.

    Args:
        activation: Name in ACTIVATIONS, or any callable mapping a tensor
            to a tensor of the same shape (e.g. ``torch.tanh``)

    Returns:
        The activation callable

    Raises:
        ConfigurationError: Unknown name or non-callable value
    """
    if isinstance(activation, str):
        try:
            return ACTIVATIONS[activation]
        except KeyError:
            raise ConfigurationError(
                f"Unknown activation '{activation}'. "
                f"Choose from: {sorted(ACTIVATIONS)}"
            ) from None
    if callable(activation):
        return activation
    raise ConfigurationError(
        f"activation must be a name or a callable, got {type(activation).__name__}"
    )


__all__ = [
    "ActivationFunc",
    "ACTIVATIONS",
    "get_activation",
    "inverse_sigmoid",
    "relu",
    "sigmoid",
]
