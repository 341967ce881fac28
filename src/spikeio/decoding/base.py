"""
Base class for spike-train-to-value decoders.

All decoders share one formula: the observed firing frequency over a time
span, normalized by a reference frequency and mapped to a bipolar output

    value = clip(n_spikes / window / frequency * 2 - 1, -1, 1)

A zero window decodes to the neutral value (bipolar 0) instead of raising.
A negative window has no special case: the formula yields a non-positive
frequency, which clips to -1.
Variants differ only in how they count spikes (timestamps vs. bucket sums)
and in the span they average over (one window vs. a ring of windows).
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Any

from spikeio.components.coding.spike_utils import (
    SpikeTrainLike,
    count_timestamps,
    unipolar_to_bipolar,
)
from spikeio.config.validation import validate_frequency
from spikeio.constants.coding import NEUTRAL_DECODED_VALUE
from spikeio.mixins import ConfigurableMixin, ResettableMixin

logger = logging.getLogger(__name__)


class SpikeTrainToValueConverter(ResettableMixin, ConfigurableMixin, ABC):
    """Abstract spike-train-to-value decoder.

    Subclasses set ``self.config`` (a validated config dataclass with a
    ``frequency`` field) in their constructor.
    """

    config: Any

    @abstractmethod
    def convert(self, spike_train: SpikeTrainLike, time_window_size: float) -> float:
        """Decode the spikes emitted during a window into a value in [-1, 1]."""

    def __call__(self, spike_train: SpikeTrainLike, time_window_size: float) -> float:
        return self.convert(spike_train, time_window_size)

    def count_spikes(self, spike_train: SpikeTrainLike) -> int:
        """Number of spikes of a continuous (timestamp) spike train."""
        return count_timestamps(spike_train)

    def decode(self, n_spikes: int, time_window_size: float) -> float:
        """Map a spike count observed over ``time_window_size`` to [-1, 1]."""
        if time_window_size == 0:
            return NEUTRAL_DECODED_VALUE
        return unipolar_to_bipolar(n_spikes / time_window_size / self.config.frequency)

    @property
    def frequency(self) -> float:
        """Reference frequency (Hz) decoded as the maximal value."""
        return self.config.frequency

    def set_frequency(self, frequency: float) -> None:
        """Change the reference frequency for subsequent calls only.

        Raises:
            ConfigValidationError: If the frequency is not positive
        """
        self.config.frequency = validate_frequency(frequency)
        logger.debug("%s frequency set to %.3f Hz", self.__class__.__name__, frequency)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(frequency={self.frequency})"


__all__ = ["SpikeTrainToValueConverter"]
