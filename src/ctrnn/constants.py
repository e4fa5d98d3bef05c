# pyright: strict
"""
Numerical constants shared by the Fluctuator and the network variants.

Author: ctrnn project
"""

from __future__ import annotations

import math

# ============================================================================
# PHASE AND OSCILLATION CONSTANTS
# ============================================================================

TAU = 2.0 * math.pi
"""Full circle in radians (τ ≈ 6.283185307179586).

Used for the Fluctuator phase: theta = time * TAU / period.
"""

PERIOD_RESOLUTION = 0.1
"""Granularity a resampled Fluctuator period is floored to."""

# ============================================================================
# FLUCTUATOR DEFAULTS
# ============================================================================

DEFAULT_VALUE_RANGE = (-16.0, 16.0)
"""Declared legal range of a Fluctuator center."""

DEFAULT_PERIOD_RANGE = (3.0, 12.0)
"""Oscillation period bounds, in the same time unit as dt."""

DEFAULT_AMPLITUDE_RANGE = (0.001, 10.0)
"""Exploration amplitude bounds applied after every update."""

DEFAULT_CONVERGENCE_RATE = 0.1
"""How fast amplitude shrinks per unit of positive reward."""

DEFAULT_LEARNING_RATE = 0.1
"""How fast the center drifts along a rewarded perturbation."""

# ============================================================================
# NETWORK DEFAULTS
# ============================================================================

DEFAULT_BIAS = 0.0
DEFAULT_TIME_CONSTANT = 1.0
DEFAULT_WEIGHT = 0.0
DEFAULT_DT = 0.1

__all__ = [
    "TAU",
    "PERIOD_RESOLUTION",
    "DEFAULT_VALUE_RANGE",
    "DEFAULT_PERIOD_RANGE",
    "DEFAULT_AMPLITUDE_RANGE",
    "DEFAULT_CONVERGENCE_RATE",
    "DEFAULT_LEARNING_RATE",
    "DEFAULT_BIAS",
    "DEFAULT_TIME_CONSTANT",
    "DEFAULT_WEIGHT",
    "DEFAULT_DT",
]
