"""
Spike Utility Functions.

Common helpers shared by encoders and decoders, centralizing the signal
normalization conventions and spike counting so every variant applies
them identically.

Key Functions:
    - bipolar_to_unipolar: Raw controller output [-1, 1] → encoding domain [0, 1]
    - unipolar_to_bipolar: Decoded ratio → controller output [-1, 1]
    - clip_unipolar: Clamp a value already in the encoding domain
    - compute_spike_count: Total spikes of a quantized (bucketed) train
    - count_timestamps: Number of spikes of a continuous (timestamp) train
    - bucket_index: Bucket of a quantized train a time falls into

Clamping is silent: out-of-range values are clipped, never rejected.
"""

from __future__ import annotations

import math
from typing import Sequence, Union

import torch

from spikeio.constants.coding import (
    ARRAY_SIZE,
    BIPOLAR_LOWER_BOUND,
    BIPOLAR_UPPER_BOUND,
    UNIPOLAR_LOWER_BOUND,
    UNIPOLAR_UPPER_BOUND,
)

SpikeTrainLike = Union[torch.Tensor, Sequence[float], Sequence[int]]


def bipolar_to_unipolar(value: float) -> float:
    """Map a raw controller output onto the encoding domain.

    The value is clipped to [-1, 1] first, then shifted and scaled to [0, 1].

    Example:
        >>> bipolar_to_unipolar(-1.0)
        0.0
        >>> bipolar_to_unipolar(0.0)
        0.5
        >>> bipolar_to_unipolar(3.0)
        1.0
    """
    value = max(min(BIPOLAR_UPPER_BOUND, float(value)), BIPOLAR_LOWER_BOUND)
    return (1 + value) / 2


def clip_unipolar(value: float) -> float:
    """Clamp a value to the encoding domain [0, 1]."""
    return max(min(UNIPOLAR_UPPER_BOUND, float(value)), UNIPOLAR_LOWER_BOUND)


def unipolar_to_bipolar(value: float) -> float:
    """Map a decoded ratio to a controller output in [-1, 1].

    Example:
        >>> unipolar_to_bipolar(0.5)
        0.0
        >>> unipolar_to_bipolar(4.0)
        1.0
    """
    value = float(value) * 2 - 1
    return max(min(BIPOLAR_UPPER_BOUND, value), BIPOLAR_LOWER_BOUND)


def compute_spike_count(spikes: SpikeTrainLike) -> int:
    """Count total number of spikes of a quantized spike train.

    Args:
        spikes: Bucket counts (any shape)

    Returns:
        Sum of all buckets

    Example:
        >>> compute_spike_count(torch.tensor([1, 0, 2, 1]))
        4
    """
    spikes = torch.as_tensor(spikes)
    if spikes.numel() == 0:
        return 0
    return int(spikes.sum().item())


def count_timestamps(spikes: SpikeTrainLike) -> int:
    """Count spikes of a continuous spike train (one timestamp per spike)."""
    if isinstance(spikes, torch.Tensor):
        return spikes.numel()
    return len(spikes)


def bucket_index(offset: float, time_window_size: float, n_buckets: int = ARRAY_SIZE) -> int:
    """Bucket that a time ``offset`` from the window start falls into.

    Buckets are equal-width sub-intervals of the window. The index is clamped
    to the last bucket against floating-point round-up at the window end.
    """
    index = math.floor(offset / time_window_size * n_buckets)
    return min(max(index, 0), n_buckets - 1)


def empty_spike_train(device: Union[str, torch.device] = "cpu") -> torch.Tensor:
    """Continuous spike train without spikes."""
    return torch.zeros(0, dtype=torch.float64, device=device)


def empty_quantized_spike_train(device: Union[str, torch.device] = "cpu") -> torch.Tensor:
    """Quantized spike train with all buckets at zero."""
    return torch.zeros(ARRAY_SIZE, dtype=torch.int64, device=device)


__all__ = [
    "SpikeTrainLike",
    "bipolar_to_unipolar",
    "clip_unipolar",
    "unipolar_to_bipolar",
    "compute_spike_count",
    "count_timestamps",
    "bucket_index",
    "empty_spike_train",
    "empty_quantized_spike_train",
]
