"""
Base Configuration Classes.

Common fields shared by every codec and learning-rule config.
"""

from __future__ import annotations

from dataclasses import dataclass

import torch


@dataclass
class BaseConfig:
    """Base configuration with common fields for all components.

    - device: Hardware device on which spike tensors are allocated
    """

    device: str = "cpu"
    """Device to run on: 'cpu', 'cuda', 'cuda:0', etc."""

    def get_torch_device(self) -> torch.device:
        """Get PyTorch device object."""
        return torch.device(self.device)
