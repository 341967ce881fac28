"""Quantized uniform encoders: values → bucketed spike counts.

Quantized spike trains are int64 tensors of ARRAY_SIZE buckets, each
counting the spikes that fell into one equal-width sub-interval of the
current window. They feed discrete-time network simulators.
"""

from __future__ import annotations

import math

import torch

from spikeio.components.coding.spike_utils import bucket_index, empty_quantized_spike_train
from spikeio.config.coding_config import QuantizedEncoderConfig
from spikeio.constants.coding import (
    DEFAULT_QUANTIZED_ENCODER_FREQUENCY_HZ,
    DEFAULT_QUANTIZED_MIN_FREQUENCY_HZ,
)
from spikeio.encoding.base import QuantizedValueToSpikeTrainConverter


class QuantizedUniformValueToSpikeTrainConverter(QuantizedValueToSpikeTrainConverter):
    """Memoryless quantized encoder.

    Ticks at ``Δt, 2Δt, ...`` strictly inside the window are counted into
    bucket ``floor(t / window * ARRAY_SIZE)``. The grid restarts at every
    call; ``time_window_end`` is ignored.

    Args:
        frequency: Firing frequency (Hz) for value 1
        min_frequency: Firing frequency (Hz) approached as the value tends to 0
    """

    CONFIG_CLASS = QuantizedEncoderConfig

    def __init__(
        self,
        frequency: float = DEFAULT_QUANTIZED_ENCODER_FREQUENCY_HZ,
        min_frequency: float = DEFAULT_QUANTIZED_MIN_FREQUENCY_HZ,
        device: str = "cpu",
    ):
        self.config = QuantizedEncoderConfig(
            frequency=frequency, min_frequency=min_frequency, device=device
        )

    def convert(
        self,
        value: float,
        time_window_size: float,
        time_window_end: float = 0.0,
    ) -> torch.Tensor:
        spikes = empty_quantized_spike_train(self.config.device)
        value = self.normalize_value(value)
        if value == 0:
            return spikes
        delta_t = self.compute_delta_t(value)
        t = delta_t
        while t < time_window_size:
            spikes[bucket_index(t, time_window_size, self.ARRAY_SIZE)] += 1
            t += delta_t
        return spikes


class QuantizedUniformWithMemoryValueToSpikeTrainConverter(QuantizedUniformValueToSpikeTrainConverter):
    """Quantized encoder keeping an absolute firing phase across windows.

    The encoder remembers the absolute time of its last spike and walks the
    firing grid ``last_spike_time, last_spike_time + Δt, ...`` up to the end
    of the window, counting only the ticks inside
    ``[time_window_end - time_window_size, time_window_end)``. Windows whose
    length is not a multiple of Δt therefore do not restart (and bias) the
    firing phase.

    Args:
        frequency: Firing frequency (Hz) for value 1
        min_frequency: Firing frequency (Hz) approached as the value tends to 0
    """

    def __init__(
        self,
        frequency: float = DEFAULT_QUANTIZED_ENCODER_FREQUENCY_HZ,
        min_frequency: float = DEFAULT_QUANTIZED_MIN_FREQUENCY_HZ,
        device: str = "cpu",
    ):
        super().__init__(frequency=frequency, min_frequency=min_frequency, device=device)
        self.last_spike_time = 0.0

    def convert(
        self,
        value: float,
        time_window_size: float,
        time_window_end: float = 0.0,
    ) -> torch.Tensor:
        spikes = empty_quantized_spike_train(self.config.device)
        value = self.normalize_value(value)
        if value == 0:
            return spikes
        time_window_start = time_window_end - time_window_size
        delta_t = self.compute_delta_t(value)

        t = self.last_spike_time
        if t < time_window_start:
            # Skip whole periods that end before the window starts
            t += math.floor((time_window_start - t) / delta_t) * delta_t
        while t < time_window_end:
            if t >= time_window_start:
                offset = t - time_window_start
                spikes[bucket_index(offset, time_window_size, self.ARRAY_SIZE)] += 1
                self.last_spike_time = t
            t += delta_t
        return spikes

    def reset(self) -> None:
        self.reset_standard_state({"last_spike_time": 0.0})


__all__ = [
    "QuantizedUniformValueToSpikeTrainConverter",
    "QuantizedUniformWithMemoryValueToSpikeTrainConverter",
]
