"""Continuous uniform encoders: values → evenly spaced spike phases."""

from __future__ import annotations

from typing import List

import torch

from spikeio.components.coding.spike_utils import empty_spike_train
from spikeio.config.coding_config import EncoderConfig, MemoryEncoderConfig
from spikeio.constants.coding import (
    DEFAULT_ENCODER_FREQUENCY_HZ,
    DEFAULT_MAX_MEMORY_WINDOWS,
)
from spikeio.encoding.base import ValueToSpikeTrainConverter


class UniformValueToSpikeTrainConverter(ValueToSpikeTrainConverter):
    """Memoryless uniform encoder.

    A value v in [-1, 1] is mapped to u = (1 + v) / 2 and fires at
    ``u * frequency`` Hz. Spikes are placed at ``Δt, 2Δt, ...`` up to and
    including the end of the window, with Δt expressed in normalized window
    coordinates. The grid restarts at every call.

    Args:
        frequency: Firing frequency (Hz) for the maximal value

    Example:
        >>> encoder = UniformValueToSpikeTrainConverter(frequency=8.0)
        >>> encoder.convert(1.0, 0.5)
        tensor([0.2500, 0.5000, 0.7500, 1.0000], dtype=torch.float64)
    """

    CONFIG_CLASS = EncoderConfig

    def __init__(
        self,
        frequency: float = DEFAULT_ENCODER_FREQUENCY_HZ,
        device: str = "cpu",
    ):
        self.config = EncoderConfig(frequency=frequency, device=device)

    def convert(
        self,
        value: float,
        time_window_size: float,
        time_window_end: float = 0.0,
    ) -> torch.Tensor:
        value = self.normalize_value(value)
        if value == 0 or time_window_size <= 0:
            return empty_spike_train(self.config.device)
        delta_t = self.compute_delta_t(value, time_window_size)
        spikes: List[float] = []
        t = delta_t
        while t <= 1:
            spikes.append(t)
            t += delta_t
        return self._to_tensor(spikes)

    def compute_delta_t(self, value: float, time_window_size: float) -> float:
        """Inter-spike interval in normalized window coordinates."""
        frequency = value * self.config.frequency
        return 1 / frequency / time_window_size


class UniformWithMemoryValueToSpikeTrainConverter(UniformValueToSpikeTrainConverter):
    """Uniform encoder that carries its firing grid across windows.

    Ticks scheduled past the end of a window are remembered as offsets in
    seconds from the start of the next window, so windows of different
    lengths see one continuous grid. The grid of the next call continues
    from the last pending tick instead of restarting at Δt. Ticks are
    scheduled up to ``max_memory`` windows past the current one, and the
    first tick past the window is always kept so that rates slower than one
    spike per horizon still fire at their long-run frequency.

    Args:
        frequency: Firing frequency (Hz) for the maximal value
        max_memory: Windows past the current one that pending spikes are kept for
    """

    CONFIG_CLASS = MemoryEncoderConfig

    def __init__(
        self,
        frequency: float = DEFAULT_ENCODER_FREQUENCY_HZ,
        max_memory: float = DEFAULT_MAX_MEMORY_WINDOWS,
        device: str = "cpu",
    ):
        self.config = MemoryEncoderConfig(
            frequency=frequency, max_memory=max_memory, device=device
        )
        # Pending ticks, in seconds after the start of the next window
        self.pending: List[float] = []

    def convert(
        self,
        value: float,
        time_window_size: float,
        time_window_end: float = 0.0,
    ) -> torch.Tensor:
        value = self.normalize_value(value)
        if value == 0 or time_window_size <= 0:
            return empty_spike_train(self.config.device)
        interval = 1 / (value * self.config.frequency)

        spikes = [p / time_window_size for p in self.pending if p <= time_window_size]
        carried = [p - time_window_size for p in self.pending if p > time_window_size]

        horizon = time_window_size * (1 + self.config.max_memory)
        t = (self.pending[-1] if self.pending else 0.0) + interval
        while t <= horizon or not carried:
            if t <= time_window_size:
                spikes.append(t / time_window_size)
            else:
                carried.append(t - time_window_size)
            t += interval

        self.pending = carried
        return self._to_tensor(spikes)

    def reset(self) -> None:
        self.reset_standard_state({"pending": list})

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(frequency={self.frequency}, "
            f"max_memory={self.config.max_memory})"
        )


__all__ = [
    "UniformValueToSpikeTrainConverter",
    "UniformWithMemoryValueToSpikeTrainConverter",
]
