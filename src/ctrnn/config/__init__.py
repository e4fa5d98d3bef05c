"""
Configuration primitives shared by all ctrnn components.

Component configs live next to their components
(``ctrnn.components.fluctuator.FluctuatorConfig``,
``ctrnn.networks.rlctrnn.RLCTRNNConfig``); this package holds the base
fields and the declarative validation they build on.
"""

from ctrnn.config.base import BaseConfig
from ctrnn.config.validation import (
    ConfigValidationError,
    ValidatedConfig,
    ValidatorRegistry,
)

__all__ = [
    "BaseConfig",
    "ConfigValidationError",
    "ValidatedConfig",
    "ValidatorRegistry",
]
