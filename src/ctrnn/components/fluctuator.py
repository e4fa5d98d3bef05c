"""
Fluctuator - Self-Tuning Oscillating Parameter.

A Fluctuator is a scalar parameter that never sits still: its observed value
is a center plus a sinusoidal exploration signal. A scalar reward delivered
after each step anneals the oscillation and nudges the center.

**Value**:
==========
.. math::

    \\theta = 2\\pi \\cdot t / T \\qquad value = c + A \\sin\\theta

Where:
- c: center, the current best estimate consumed by the network
- A: amplitude of the exploration signal
- T: oscillation period (same time unit as dt)
- t: phase accumulator since the last period resample

**Reward Update** (one call per tick):
=====================================
1. Anneal: A ← clamp(A − convergence_rate · A_max · reward, A_min, A_max)
2. Perturbation at the current phase: d = A sin θ
3. Drift: c ← c + learning_rate · d · reward
4. Advance: t ← t + dt, resample T and reset t once t > T

A positive reward shrinks the search radius (exploitation) and pulls the
center toward the phase that earned it; a negative reward widens the search
(exploration) and pushes the center away. This is a finite-difference style
ascent that needs no gradient, only the correlation between the
perturbation and the reward that followed.

**Period Resampling**:
The default policy is deterministic and always picks the lower period
bound. Set ``FluctuatorConfig.randomize_period`` to draw uniformly from the
period range instead.
"""

from __future__ import annotations

import math
import random
from dataclasses import dataclass
from typing import Optional, Tuple

from ctrnn.config.validation import ValidatedConfig
from ctrnn.constants import (
    DEFAULT_AMPLITUDE_RANGE,
    DEFAULT_CONVERGENCE_RATE,
    DEFAULT_LEARNING_RATE,
    DEFAULT_PERIOD_RANGE,
    DEFAULT_VALUE_RANGE,
    PERIOD_RESOLUTION,
    TAU,
)
from ctrnn.mixins.resettable_mixin import ResettableMixin
from ctrnn.units import Reward, TimeStep


@dataclass
class FluctuatorConfig(ValidatedConfig):
    """Configuration for a Fluctuator.

    One config is typically shared by every Fluctuator of a network.

    Attributes:
        value_range: Declared legal range of the center (default: (-16.0, 16.0))
            Only enforced when clamp_center is True.
        period_range: Oscillation period bounds (default: (3.0, 12.0))
        amplitude_range: Exploration amplitude bounds (default: (0.001, 10.0))
            Amplitude is clamped into this range after every update.
        initial_amplitude: Amplitude at construction and after reset (default: 0.0)
            With zero the value equals the center until the first update, after
            which exploration starts at amplitude_min.
        convergence_rate: Amplitude shrink per unit reward, scaled by the
            amplitude upper bound (default: 0.1)
        learning_rate: Center drift per unit of reward-weighted perturbation (default: 0.1)
        clamp_center: Clamp the center into value_range after each drift (default: False)
        randomize_period: Draw resampled periods uniformly instead of using
            the lower bound (default: False)
        validate: Check the fields at construction (default: True)
            Disable for an unchecked fast path; malformed bounds are then
            not caught and surface as NaN or arithmetic errors.
    """

    value_range: Tuple[float, float] = DEFAULT_VALUE_RANGE
    period_range: Tuple[float, float] = DEFAULT_PERIOD_RANGE
    amplitude_range: Tuple[float, float] = DEFAULT_AMPLITUDE_RANGE
    initial_amplitude: float = 0.0
    convergence_rate: float = DEFAULT_CONVERGENCE_RATE
    learning_rate: float = DEFAULT_LEARNING_RATE
    clamp_center: bool = False
    randomize_period: bool = False
    validate: bool = True

    _validation_rules = {
        'value_range': ('ordered_pair',),
        'period_range': ('ordered_pair', 'positive_pair'),
        'amplitude_range': ('ordered_pair',),
        'initial_amplitude': ('non_negative', 'finite'),
        'convergence_rate': ('finite',),
        'learning_rate': ('finite',),
    }

    def __post_init__(self) -> None:
        if self.validate:
            self.validate_config()


class Fluctuator(ResettableMixin):
    """
    Scalar parameter performing a reward-driven oscillating local search.

    ``get()`` is pure and may be called any number of times between updates
    with identical results; ``update()`` is the only mutator.

    Example:
        ```python
        weight = Fluctuator(0.5, FluctuatorConfig(initial_amplitude=1.0))

        for t in range(1000):
            value = weight.get()        # use the parameter this tick
            reward = evaluate(value)    # caller-defined
            weight.update(dt=0.1, reward=reward)
        ```
    """

    def __init__(
        self,
        center: float = 0.0,
        config: Optional[FluctuatorConfig] = None,
        rng: Optional[random.Random] = None,
    ):
        self.config = config or FluctuatorConfig()
        self.center = float(center)
        self.amplitude = self.config.initial_amplitude

        # Only consulted when config.randomize_period is set
        self._rng = rng if rng is not None else random.Random()

        self.period = 0.0
        self.time = 0.0
        self._resample_period()

    # ------------------------------------------------------------------
    # Pure reads
    # ------------------------------------------------------------------

    @property
    def convergence_rate(self) -> float:
        return self.config.convergence_rate

    @property
    def learning_rate(self) -> float:
        return self.config.learning_rate

    @property
    def phase(self) -> float:
        """Current phase in radians, time * 2π / period."""
        return self.time * TAU / self.period

    @property
    def perturbation(self) -> float:
        """Current exploration offset, amplitude * sin(phase)."""
        return self.amplitude * math.sin(self.phase)

    def get(self) -> float:
        """Instantaneous oscillated value, center + amplitude * sin(phase)."""
        return self.center + self.perturbation

    @property
    def value(self) -> float:
        """Same as ``get()``."""
        return self.get()

    def __float__(self) -> float:
        return self.get()

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, dt: TimeStep, reward: Reward) -> float:
        """
        Anneal amplitude, drift center and advance the phase by one step.

        Args:
            dt: Elapsed time since the previous update (≥ 0)
            reward: Scalar reward observed for the value used this step

        Returns:
            The perturbation d = amplitude * sin(phase) that was credited with
            the reward, computed at the phase before advancing.
        """
        amp_min, amp_max = self.config.amplitude_range
        amplitude = self.amplitude - self.convergence_rate * amp_max * reward
        self.amplitude = max(amp_min, min(amp_max, amplitude))

        d = self.perturbation
        self.center += self.learning_rate * d * reward
        if self.config.clamp_center:
            low, high = self.config.value_range
            self.center = max(low, min(high, self.center))

        self.time += dt
        if self.time > self.period:
            self._resample_period()
        return d

    def reset_state(self) -> None:
        """Restore initial amplitude and phase; the learned center is kept."""
        self.amplitude = self.config.initial_amplitude
        self._resample_period()

    def _resample_period(self) -> None:
        """Pick a new period and restart the phase.

        The period is floored to PERIOD_RESOLUTION but never below the lower
        bound.
        """
        low, high = self.config.period_range
        fraction = self._rng.random() if self.config.randomize_period else 0.0
        period = low + (high - low) * fraction
        steps = round(1.0 / PERIOD_RESOLUTION)
        period = math.floor(period * steps) / steps
        self.period = min(high, max(low, period))
        self.time = 0.0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(center={self.center:.4g}, "
            f"amplitude={self.amplitude:.4g}, period={self.period:.4g}, time={self.time:.4g})"
        )
