"""Shared test fixtures and configuration."""

import random

import numpy as np
import pytest
import torch

from ctrnn import FluctuatorConfig, RLCTRNN, RLCTRNNConfig


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure reproducible tests by setting all random seeds.

    This fixture runs automatically for every test to ensure deterministic behavior.
    """
    torch.manual_seed(42)
    np.random.seed(42)
    random.seed(42)


@pytest.fixture
def exploring_config():
    """Fluctuator config with a visible oscillation from the first tick."""
    return FluctuatorConfig(initial_amplitude=1.0)


@pytest.fixture
def exploring_network(exploring_config):
    """3-node RLCTRNN whose parameters oscillate with amplitude 1.0."""
    return RLCTRNN(3, RLCTRNNConfig(fluctuator=exploring_config))


@pytest.fixture
def rewards():
    """Mixed-sign reward sequence covering both annealing directions."""
    rng = np.random.default_rng(7)
    return rng.uniform(-3.0, 3.0, size=200).tolist()
