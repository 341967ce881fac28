"""Decoders for quantized (bucketed) spike trains.

Quantized trains are count arrays; the number of spikes is the sum over all
buckets rather than the number of timestamps.
"""

from __future__ import annotations

from spikeio.components.coding.spike_utils import SpikeTrainLike, compute_spike_count
from spikeio.config.coding_config import (
    QuantizedDecoderConfig,
    QuantizedMovingAverageDecoderConfig,
)
from spikeio.constants.coding import (
    DEFAULT_NUMBER_OF_WINDOWS,
    DEFAULT_QUANTIZED_DECODER_FREQUENCY_HZ,
)
from spikeio.decoding.average_frequency import (
    AverageFrequencySpikeTrainToValueConverter,
    MovingAverageSpikeTrainToValueConverter,
)


class QuantizedAverageFrequencySpikeTrainToValueConverter(AverageFrequencySpikeTrainToValueConverter):
    """Average-frequency decoder for bucketed spike counts.

    Example:
        >>> import torch
        >>> decoder = QuantizedAverageFrequencySpikeTrainToValueConverter(frequency=40.0)
        >>> counts = torch.zeros(16, dtype=torch.int64)
        >>> counts[0] = 5
        >>> decoder.convert(counts, 0.125)
        1.0
    """

    CONFIG_CLASS = QuantizedDecoderConfig

    def __init__(
        self,
        frequency: float = DEFAULT_QUANTIZED_DECODER_FREQUENCY_HZ,
        device: str = "cpu",
    ):
        super().__init__(frequency=frequency, device=device)

    def count_spikes(self, spike_train: SpikeTrainLike) -> int:
        return compute_spike_count(spike_train)


class QuantizedMovingAverageSpikeTrainToValueConverter(MovingAverageSpikeTrainToValueConverter):
    """Moving-average decoder for bucketed spike counts."""

    CONFIG_CLASS = QuantizedMovingAverageDecoderConfig

    def __init__(
        self,
        frequency: float = DEFAULT_QUANTIZED_DECODER_FREQUENCY_HZ,
        n_windows: int = DEFAULT_NUMBER_OF_WINDOWS,
        device: str = "cpu",
    ):
        super().__init__(frequency=frequency, n_windows=n_windows, device=device)

    def count_spikes(self, spike_train: SpikeTrainLike) -> int:
        return compute_spike_count(spike_train)


__all__ = [
    "QuantizedAverageFrequencySpikeTrainToValueConverter",
    "QuantizedMovingAverageSpikeTrainToValueConverter",
]
