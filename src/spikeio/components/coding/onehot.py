"""
Thermometer (one-hot bin) codec.

Adapts an array-of-scalars interface onto a fixed-width binary spiking
layer. Each scalar owns ``n_bins`` consecutive binary units; the number of
active units grows monotonically with the value (thermometer code).

Encoding (values in [0, 1]):
    threshold = 1 / (n_bins + 1)
    active    = min(n_bins, floor(v / threshold))

Decoding:
    v = sum(chunk) / n_bins * 2 - 1      (bipolar output)

The code is lossy: a maximal input activates every unit and decodes to 1.0,
but any value in the top bin decodes to the same saturated output.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import torch

from spikeio.config.coding_config import OneHotConfig
from spikeio.errors import DimensionMismatchError
from spikeio.mixins import ConfigurableMixin


class InputConverter(ConfigurableMixin):
    """Scalars in [0, 1] → thermometer-coded binary activity.

    Args:
        n_bins: Binary units per scalar

    Example:
        >>> InputConverter(n_bins=3).convert([0.0, 0.6])
        tensor([0, 0, 0, 1, 1, 0])
    """

    CONFIG_CLASS = OneHotConfig

    def __init__(self, n_bins: int, device: str = "cpu"):
        self.config = OneHotConfig(n_bins=n_bins, device=device)

    @property
    def n_bins(self) -> int:
        return self.config.n_bins

    def convert(self, values: Union[torch.Tensor, Sequence[float]]) -> torch.Tensor:
        """Encode a vector of scalars.

        Args:
            values: Scalars in [0, 1], shape (n_values,)

        Returns:
            Binary activity, shape (n_values * n_bins,), dtype int64
        """
        values = torch.as_tensor(values, dtype=torch.float64).flatten()
        threshold = 1.0 / (self.n_bins + 1)
        activity = torch.zeros(
            values.numel() * self.n_bins,
            dtype=torch.int64,
            device=self.config.get_torch_device(),
        )
        for i, value in enumerate(values.tolist()):
            n_active = min(self.n_bins, max(0, math.floor(value / threshold)))
            start = i * self.n_bins
            activity[start:start + n_active] = 1
        return activity

    def __repr__(self) -> str:
        return f"InputConverter(n_bins={self.n_bins})"


class OutputConverter(ConfigurableMixin):
    """Thermometer-coded binary activity → bipolar scalars.

    Args:
        n_bins: Binary units per scalar
    """

    CONFIG_CLASS = OneHotConfig

    def __init__(self, n_bins: int, device: str = "cpu"):
        self.config = OneHotConfig(n_bins=n_bins, device=device)

    @property
    def n_bins(self) -> int:
        return self.config.n_bins

    def convert(self, activity: Union[torch.Tensor, Sequence[int]]) -> torch.Tensor:
        """Decode binary activity.

        Args:
            activity: Binary units, shape (n_values * n_bins,)

        Returns:
            Values in [-1, 1], shape (n_values,), dtype float64

        Raises:
            DimensionMismatchError: If the activity length is not a multiple
                of n_bins
        """
        activity = torch.as_tensor(activity).flatten()
        if activity.numel() % self.n_bins != 0:
            raise DimensionMismatchError(
                f"Output size {activity.numel()} cannot be divided by the "
                f"number of bins {self.n_bins}"
            )
        n_active = activity.reshape(-1, self.n_bins).to(torch.float64).sum(dim=1)
        return n_active / self.n_bins * 2 - 1

    def __repr__(self) -> str:
        return f"OutputConverter(n_bins={self.n_bins})"


def check_bin_compatibility(dimension: int, n_bins: int, what: str) -> None:
    """Raise if ``dimension`` is not an exact multiple of ``n_bins``.

    Raises:
        DimensionMismatchError: On mismatch
    """
    if dimension % n_bins != 0:
        raise DimensionMismatchError(
            f"{what} size {dimension} not compatible with {n_bins} bins"
        )


__all__ = ["InputConverter", "OutputConverter", "check_bin_compatibility"]
