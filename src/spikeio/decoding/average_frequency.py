"""Average-frequency and moving-average decoders for continuous spike trains."""

from __future__ import annotations

import torch

from spikeio.components.coding.spike_utils import SpikeTrainLike
from spikeio.config.coding_config import DecoderConfig, MovingAverageDecoderConfig
from spikeio.constants.coding import (
    DEFAULT_DECODER_FREQUENCY_HZ,
    DEFAULT_NUMBER_OF_WINDOWS,
)
from spikeio.decoding.base import SpikeTrainToValueConverter


class AverageFrequencySpikeTrainToValueConverter(SpikeTrainToValueConverter):
    """Decode the average firing frequency of a single window.

    Args:
        frequency: Reference frequency (Hz) decoded as the maximal value

    Example:
        >>> decoder = AverageFrequencySpikeTrainToValueConverter(frequency=8.0)
        >>> decoder.convert(torch.tensor([0.5, 1.0]), 0.5)
        0.0
    """

    CONFIG_CLASS = DecoderConfig

    def __init__(
        self,
        frequency: float = DEFAULT_DECODER_FREQUENCY_HZ,
        device: str = "cpu",
    ):
        self.config = self.CONFIG_CLASS(frequency=frequency, device=device)

    def convert(self, spike_train: SpikeTrainLike, time_window_size: float) -> float:
        return self.decode(self.count_spikes(spike_train), time_window_size)


class MovingAverageSpikeTrainToValueConverter(AverageFrequencySpikeTrainToValueConverter):
    """Decode the average firing frequency over the last ``n_windows`` windows.

    Each call writes ``(window size, spike count)`` into a ring buffer and
    decodes the totals over all slots written so far. Slots with a zero
    window size (not yet written since construction/reset) are ignored, so
    the start-up transient averages only over the windows seen.

    Args:
        frequency: Reference frequency (Hz) decoded as the maximal value
        n_windows: Length of the ring buffer
    """

    CONFIG_CLASS = MovingAverageDecoderConfig

    def __init__(
        self,
        frequency: float = DEFAULT_DECODER_FREQUENCY_HZ,
        n_windows: int = DEFAULT_NUMBER_OF_WINDOWS,
        device: str = "cpu",
    ):
        self.config = self.CONFIG_CLASS(
            frequency=frequency, n_windows=n_windows, device=device
        )
        device = self.config.get_torch_device()
        self.window_sizes = torch.zeros(self.n_windows, dtype=torch.float64, device=device)
        self.spike_counts = torch.zeros(self.n_windows, dtype=torch.int64, device=device)

        # Current write position (0 to n_windows - 1, wraps around)
        self.ptr = 0

    @property
    def n_windows(self) -> int:
        return self.config.n_windows

    def convert(self, spike_train: SpikeTrainLike, time_window_size: float) -> float:
        self.window_sizes[self.ptr] = time_window_size
        self.spike_counts[self.ptr] = self.count_spikes(spike_train)
        self.ptr = (self.ptr + 1) % self.n_windows

        written = self.window_sizes > 0
        total_window_size = float(self.window_sizes[written].sum().item())
        total_spikes = int(self.spike_counts[written].sum().item())
        return self.decode(total_spikes, total_window_size)

    def reset(self) -> None:
        self.window_sizes.zero_()
        self.spike_counts.zero_()
        self.ptr = 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(frequency={self.frequency}, "
            f"n_windows={self.n_windows})"
        )


__all__ = [
    "AverageFrequencySpikeTrainToValueConverter",
    "MovingAverageSpikeTrainToValueConverter",
]
