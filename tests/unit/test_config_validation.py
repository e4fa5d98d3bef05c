"""Tests for declarative configuration validation."""

import pytest
import torch

from ctrnn.components.fluctuator import Fluctuator, FluctuatorConfig
from ctrnn.config import BaseConfig, ConfigValidationError, ValidatorRegistry
from ctrnn.errors import ConfigurationError
from ctrnn.networks import CTRNNConfig, RLCTRNNConfig


@pytest.mark.unit
class TestValidatorRegistry:

    def test_builtin_rules(self):
        ValidatorRegistry.get_validator('positive')(0.5, 'x')
        ValidatorRegistry.get_validator('ordered_pair')((1.0, 2.0), 'x')
        with pytest.raises(ConfigValidationError):
            ValidatorRegistry.get_validator('positive')(0.0, 'x')
        with pytest.raises(ConfigValidationError):
            ValidatorRegistry.get_validator('finite')(float('nan'), 'x')

    def test_pair_rules(self):
        ValidatorRegistry.get_validator('positive_pair')((0.5, 2.0), 'x')
        with pytest.raises(ConfigValidationError, match="low <= high"):
            ValidatorRegistry.get_validator('ordered_pair')((2.0, 1.0), 'x')
        with pytest.raises(ConfigValidationError, match="must be positive"):
            ValidatorRegistry.get_validator('positive_pair')((-1.0, 2.0), 'x')

    def test_non_negative_rule(self):
        ValidatorRegistry.get_validator('non_negative')(0.0, 'dt')
        with pytest.raises(ConfigValidationError, match="non-negative"):
            ValidatorRegistry.get_validator('non_negative')(-0.1, 'dt')

    def test_unknown_rule(self):
        with pytest.raises(ValueError, match="Unknown validation rule"):
            ValidatorRegistry.get_validator('prime')

    def test_pair_shape_checked(self):
        with pytest.raises(ConfigValidationError, match="pair"):
            ValidatorRegistry.get_validator('ordered_pair')((1.0, 2.0, 3.0), 'x')

    def test_validation_error_is_configuration_error(self):
        assert issubclass(ConfigValidationError, ConfigurationError)


@pytest.mark.unit
class TestFluctuatorConfigValidation:

    def test_defaults_valid(self):
        config = FluctuatorConfig()
        assert config.value_range == (-16.0, 16.0)
        assert config.period_range == (3.0, 12.0)
        assert config.amplitude_range == (0.001, 10.0)

    def test_inverted_amplitude_range(self):
        with pytest.raises(ConfigValidationError, match="amplitude_range"):
            FluctuatorConfig(amplitude_range=(1.0, 0.5))

    def test_non_positive_period(self):
        with pytest.raises(ConfigValidationError, match="period_range"):
            FluctuatorConfig(period_range=(0.0, 5.0))

    def test_all_failures_reported(self):
        with pytest.raises(ConfigValidationError) as exc_info:
            FluctuatorConfig(value_range=(2.0, 1.0), initial_amplitude=-1.0)
        message = str(exc_info.value)
        assert "value_range" in message
        assert "initial_amplitude" in message

    def test_unchecked_fast_path(self):
        """Validation can be skipped; malformed bounds are then the caller's problem."""
        config = FluctuatorConfig(amplitude_range=(1.0, 0.5), validate=False)
        flux = Fluctuator(0.0, config)
        flux.update(0.1, 0.0)
        assert flux.amplitude == 1.0


@pytest.mark.unit
class TestNetworkConfigValidation:

    def test_non_positive_time_constant(self):
        with pytest.raises(ConfigValidationError, match="initial_time_constant"):
            RLCTRNNConfig(initial_time_constant=0.0)

    def test_negative_dt(self):
        with pytest.raises(ConfigValidationError, match="dt"):
            CTRNNConfig(dt=-0.1)

    def test_unknown_activation(self):
        with pytest.raises(ConfigurationError):
            RLCTRNNConfig(activation="swish")

    def test_unknown_dtype(self):
        with pytest.raises(ConfigurationError):
            CTRNNConfig(dtype="float8")

    def test_nested_fluctuator_config(self):
        config = RLCTRNNConfig(fluctuator=FluctuatorConfig(learning_rate=0.5))
        assert config.fluctuator.learning_rate == 0.5

    def test_base_config_torch_objects(self):
        config = BaseConfig(dtype="float32")
        assert config.get_torch_dtype() == torch.float32
        assert config.get_torch_device() == torch.device("cpu")
