"""
Coding Components.

Shared spike-train helpers and the thermometer (one-hot bin) codec.

Usage:
    from spikeio.components.coding import InputConverter, OutputConverter
    from spikeio.components.coding import bipolar_to_unipolar, compute_spike_count
"""

from spikeio.components.coding.onehot import (
    InputConverter,
    OutputConverter,
    check_bin_compatibility,
)
from spikeio.components.coding.spike_utils import (
    SpikeTrainLike,
    bipolar_to_unipolar,
    bucket_index,
    clip_unipolar,
    compute_spike_count,
    count_timestamps,
    empty_quantized_spike_train,
    empty_spike_train,
    unipolar_to_bipolar,
)

__all__ = [
    # One-hot codec
    "InputConverter",
    "OutputConverter",
    "check_bin_compatibility",
    # Spike utilities
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
