"""
Base Configuration Classes.

This module provides the base configuration class with the execution fields
shared by every network config.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import torch

from ctrnn.errors import ConfigurationError


@dataclass
class BaseConfig:
    """Base configuration with common fields for all networks.

    This provides standard fields that appear in every network config:
    - device: Hardware device (cpu/cuda)
    - dtype: Tensor data type
    - seed: Random seed for reproducibility
    """

    device: str = "cpu"
    """Device to run on: 'cpu', 'cuda', 'cuda:0', etc."""

    dtype: str = "float64"
    """Data type for tensors: 'float64', 'float32', 'float16', 'bfloat16'"""

    seed: Optional[int] = None
    """Random seed for reproducibility. None = no seeding."""

    def get_torch_device(self) -> torch.device:
        """Get PyTorch device object."""
        return torch.device(self.device)

    def get_torch_dtype(self) -> torch.dtype:
        """Get PyTorch dtype object."""
        dtype_map = {
            "float64": torch.float64,
            "float32": torch.float32,
            "float16": torch.float16,
            "bfloat16": torch.bfloat16,
        }
        if self.dtype not in dtype_map:
            raise ConfigurationError(
                f"Unknown dtype '{self.dtype}'. "
                f"Choose from: {list(dtype_map.keys())}"
            )
        return dtype_map[self.dtype]
