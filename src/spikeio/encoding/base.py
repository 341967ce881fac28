"""
Base classes for value-to-spike-train encoders.

Every encoder turns one control value per tick into the spike representation
of the current time window:

- continuous encoders return a strictly increasing float64 tensor of spike
  phases in (0, 1] (normalized window coordinates);
- quantized encoders return an int64 tensor of ARRAY_SIZE bucket counts.

Encoders are constructed once per channel and live for a whole episode.
``reset()`` clears the carry-over memory of the memory-carrying variants
without touching the configured frequency.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any, List

import torch

from spikeio.components.coding.spike_utils import (
    bipolar_to_unipolar,
    clip_unipolar,
)
from spikeio.config.validation import validate_frequency
from spikeio.constants.coding import ARRAY_SIZE
from spikeio.mixins import ConfigurableMixin, ResettableMixin

logger = logging.getLogger(__name__)


class ValueToSpikeTrainConverter(ResettableMixin, ConfigurableMixin, ABC):
    """Abstract value-to-spike-train encoder.

    Subclasses set ``self.config`` (a validated config dataclass with a
    ``frequency`` field) in their constructor.
    """

    config: Any

    @abstractmethod
    def convert(
        self,
        value: float,
        time_window_size: float,
        time_window_end: float = 0.0,
    ) -> torch.Tensor:
        """Encode ``value`` into the spikes of the current window.

        Args:
            value: Control value (clipped silently to the encoder's domain)
            time_window_size: Duration of the current window
            time_window_end: Absolute end time of the current window (used by
                variants that keep an absolute firing phase)

        Returns:
            Spike representation of the window
        """

    def __call__(
        self,
        value: float,
        time_window_size: float,
        time_window_end: float = 0.0,
    ) -> torch.Tensor:
        return self.convert(value, time_window_size, time_window_end)

    @property
    def frequency(self) -> float:
        """Base firing frequency (Hz)."""
        return self.config.frequency

    def set_frequency(self, frequency: float) -> None:
        """Change the base frequency for subsequent calls only.

        Raises:
            ConfigValidationError: If the frequency is not positive
        """
        self.config.frequency = validate_frequency(frequency)
        logger.debug("%s frequency set to %.3f Hz", self.__class__.__name__, frequency)

    def normalize_value(self, value: float) -> float:
        """Map a raw controller output in [-1, 1] onto [0, 1]."""
        return bipolar_to_unipolar(value)

    def _to_tensor(self, phases: List[float]) -> torch.Tensor:
        return torch.tensor(
            phases, dtype=torch.float64, device=self.config.get_torch_device()
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(frequency={self.frequency})"


class QuantizedValueToSpikeTrainConverter(ValueToSpikeTrainConverter):
    """Abstract encoder producing fixed-length bucketed spike trains.

    Quantized encoders receive values already in the encoding domain and
    clip them to [0, 1]. A non-zero value v fires at

        frequency(v) = v * (frequency - min_frequency) + min_frequency
    """

    ARRAY_SIZE = ARRAY_SIZE

    @property
    def min_frequency(self) -> float:
        """Firing frequency (Hz) approached for the smallest non-zero value."""
        return self.config.min_frequency

    def normalize_value(self, value: float) -> float:
        return clip_unipolar(value)

    def compute_delta_t(self, value: float) -> float:
        """Inter-spike interval, in window time units, for a normalized value."""
        frequency_range = self.config.frequency - self.config.min_frequency
        frequency = value * frequency_range + self.config.min_frequency
        return 1 / frequency

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(frequency={self.frequency}, "
            f"min_frequency={self.min_frequency})"
        )


__all__ = [
    "ValueToSpikeTrainConverter",
    "QuantizedValueToSpikeTrainConverter",
]
