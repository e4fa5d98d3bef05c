"""
Custom exception classes and validation utilities for ctrnn.

This module provides:
1. Hierarchical exception classes for different error categories
2. Validation utilities that enforce the network's index and shape contracts
3. Consistent error message formatting across components

Exception Hierarchy:
====================
CTRNNError (base)
├── ConfigurationError - Invalid configuration parameters
├── DimensionMismatchError - Voltage/input vector of the wrong length (also IndexError)
├── NodeIndexError - Node or weight index outside [0, N) (also IndexError)
└── UnsupportedOperationError - Operation declared but not supported (also NotImplementedError)

Usage Examples:
===============
    # Check a node index before touching a parameter slot
    validate_index(index, net.n_nodes, name="bias")

    # Check a voltage vector length before a tick
    validate_vector_length(len(voltages), net.n_nodes, name="voltages")

Numeric degeneracy (zero time constants, malformed Fluctuator bounds with
validation disabled) is deliberately not raised here: it propagates as
inf/NaN through the arithmetic.
"""

from __future__ import annotations

import math
import operator

# =============================================================================
# Exception Hierarchy
# =============================================================================


class CTRNNError(Exception):
    """Base exception for all ctrnn-specific errors.

    All custom exceptions in ctrnn inherit from this class, enabling
    code to catch library errors specifically:

        try:
            voltages = net.update(dt, voltages, inputs)
        except CTRNNError as e:
            logger.error(f"ctrnn error: {e}")
    """


class ConfigurationError(CTRNNError):
    """Invalid configuration parameters.

    Raised when configuration values are out of valid range or incompatible
    with each other.

    Example:
        raise ConfigurationError("time_constant must be positive, got -1.0")
    """


class DimensionMismatchError(CTRNNError, IndexError):
    """Vector length does not match the network size.

    Subclasses IndexError so that callers treating a short voltage vector
    as an indexing bug can catch it as such.

    Example:
        raise DimensionMismatchError("voltages has length 2, expected 3")
    """


class NodeIndexError(CTRNNError, IndexError):
    """Node or weight index outside [0, N).

    Negative indices are rejected too; they never wrap around.
    """


class UnsupportedOperationError(CTRNNError, NotImplementedError):
    """Operation exists on the API surface but is not supported.

    Example:
        raise UnsupportedOperationError("RLCTRNN topology is fixed at construction")
    """


# =============================================================================
# Validation Utilities
# =============================================================================


def validate_index(index: int, size: int, name: str = "index") -> int:
    """Validate that ``index`` addresses a slot in ``[0, size)``.

    Args:
        index: Index to check
        size: Number of slots
        name: Parameter name for the error message

    Returns:
        The index as a plain int. Integer scalars such as numpy integers
        or 0-d integer tensors are accepted.

    Raises:
        NodeIndexError: If the index is not an integer in range
    """
    if isinstance(index, bool):
        raise NodeIndexError(f"{name} index must be an int, got bool")
    try:
        index = operator.index(index)
    except TypeError:
        raise NodeIndexError(f"{name} index must be an int, got {type(index).__name__}") from None
    if not 0 <= index < size:
        raise NodeIndexError(f"{name} index {index} out of range [0, {size})")
    return index


def validate_vector_length(length: int, expected: int, name: str = "vector", allow_shorter: bool = False) -> None:
    """Validate a vector length against the network size.

    Args:
        length: Actual length
        expected: Network size N
        name: Vector name for the error message
        allow_shorter: Accept lengths below ``expected`` (used for inputs,
            where missing entries count as zero)

    Raises:
        DimensionMismatchError: If the length violates the contract
    """
    if allow_shorter:
        if length > expected:
            raise DimensionMismatchError(
                f"{name} has length {length}, expected at most {expected}"
            )
    elif length != expected:
        raise DimensionMismatchError(f"{name} has length {length}, expected {expected}")


def validate_positive(value: float, name: str) -> float:
    """Validate that a parameter value is finite and strictly positive.

    Raises:
        ConfigurationError: If the value is non-positive or not finite
    """
    if not math.isfinite(value) or value <= 0:
        raise ConfigurationError(f"{name} must be positive and finite, got {value}")
    return value


__all__ = [
    "CTRNNError",
    "ConfigurationError",
    "DimensionMismatchError",
    "NodeIndexError",
    "UnsupportedOperationError",
    "validate_index",
    "validate_vector_length",
    "validate_positive",
]
