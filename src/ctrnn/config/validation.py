"""
Configuration validation for ctrnn.

This module provides declarative validation patterns to catch configuration
errors before a Fluctuator or network is built.

Validation Features:
- Declarative validation rules via ValidatedConfig mixin
- Predefined validators for scalars and (low, high) pairs
- All failures of one config reported together
"""

from __future__ import annotations

import math
from typing import Any, Callable, Dict, List, Tuple

from ctrnn.errors import ConfigurationError


class ConfigValidationError(ConfigurationError):
    """Raised when configuration validation fails."""


# =============================================================================
# DECLARATIVE VALIDATION FRAMEWORK
# =============================================================================


class ValidatorRegistry:
    """Registry of predefined validation rules.

    Usage:
        validator = ValidatorRegistry.get_validator('positive')
        validator(0.5, 'learning_rate')  # Passes
        validator(-0.1, 'learning_rate')  # Raises ConfigValidationError
    """

    _validators: Dict[str, Callable[[Any, str], None]] = {}

    @classmethod
    def register(cls, name: str, validator: Callable[[Any, str], None]) -> None:
        """Register a validation function."""
        cls._validators[name] = validator

    @classmethod
    def get_validator(cls, rule: str) -> Callable[[Any, str], None]:
        """Get validator by name."""
        if rule in cls._validators:
            return cls._validators[rule]

        raise ValueError(f"Unknown validation rule: {rule}")

def _require_number(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ConfigValidationError(f"{name} must be numeric, got {type(value)}")


def _require_pair(value: Any, name: str) -> Tuple[float, float]:
    if not isinstance(value, (tuple, list)) or len(value) != 2:
        raise ConfigValidationError(f"{name} must be a (low, high) pair, got {value!r}")
    low, high = value
    _require_number(low, f"{name}[0]")
    _require_number(high, f"{name}[1]")
    if not (math.isfinite(low) and math.isfinite(high)):
        raise ConfigValidationError(f"{name}={tuple(value)} must be finite")
    return float(low), float(high)


def _register_builtin_validators() -> None:
    """Register standard validation rules."""

    def positive(value: Any, name: str) -> None:
        """Value must be > 0."""
        _require_number(value, name)
        if value <= 0:
            raise ConfigValidationError(f"{name}={value} must be positive")

    def non_negative(value: Any, name: str) -> None:
        """Value must be >= 0."""
        _require_number(value, name)
        if value < 0:
            raise ConfigValidationError(f"{name}={value} must be non-negative")

    def finite(value: Any, name: str) -> None:
        """Value must be finite (not inf or nan)."""
        _require_number(value, name)
        if not math.isfinite(value):
            raise ConfigValidationError(f"{name}={value} must be finite (not inf/nan)")

    def ordered_pair(value: Any, name: str) -> None:
        """Value must be a finite (low, high) pair with low <= high."""
        low, high = _require_pair(value, name)
        if low > high:
            raise ConfigValidationError(f"{name}=({low}, {high}) must satisfy low <= high")

    def positive_pair(value: Any, name: str) -> None:
        """Both ends of a (low, high) pair must be > 0."""
        low, high = _require_pair(value, name)
        if low <= 0 or high <= 0:
            raise ConfigValidationError(f"{name}=({low}, {high}) must be positive")

    ValidatorRegistry.register('positive', positive)
    ValidatorRegistry.register('non_negative', non_negative)
    ValidatorRegistry.register('finite', finite)
    ValidatorRegistry.register('ordered_pair', ordered_pair)
    ValidatorRegistry.register('positive_pair', positive_pair)


_register_builtin_validators()


class ValidatedConfig:
    """Mixin for declarative config validation.

    Usage:
        @dataclass
        class MyConfig(ValidatedConfig):
            learning_rate: float = 0.1
            period_range: Tuple[float, float] = (3.0, 12.0)

            _validation_rules = {
                'learning_rate': ('finite',),
                'period_range': ('ordered_pair', 'positive_pair'),
            }

            def __post_init__(self):
                self.validate_config()
    """

    _validation_rules: Dict[str, Tuple[str, ...]] = {}

    def validate_config(self) -> None:
        """Validate configuration based on _validation_rules.

        Should be called from __post_init__() or manually.

        Raises:
            ConfigValidationError: If any validation fails
        """
        errors: List[str] = []

        for field_name, rules in self._validation_rules.items():
            if not hasattr(self, field_name):
                errors.append(f"Validation rule for non-existent field: {field_name}")
                continue

            value = getattr(self, field_name)

            for rule in rules:
                try:
                    validator = ValidatorRegistry.get_validator(rule)
                    validator(value, field_name)
                except ConfigValidationError as e:
                    errors.append(str(e))
                except ValueError as e:
                    errors.append(f"Validation error for {field_name}: {e}")

        if errors:
            error_msg = (
                f"{self.__class__.__name__} validation failed:\n" +
                "\n".join(f"  • {e}" for e in errors)
            )
            raise ConfigValidationError(error_msg)
