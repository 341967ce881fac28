"""
Pairwise STDP over quantized spike trains.

A quantized train only tells how many spikes fell in each of the ARRAY_SIZE
buckets of a window. Every (pre bucket, post bucket) pair contributes

    c_pre * c_post * rule((i_post - i_pre) * bucket_width)

with ``bucket_width = window / ARRAY_SIZE``. Presynaptic history buckets
sit immediately before the current window (the last history bucket has
index -1), so late presynaptic spikes of earlier windows can still pair with
current postsynaptic spikes.
"""

from __future__ import annotations

from typing import Optional

import torch

from spikeio.components.coding.spike_utils import SpikeTrainLike
from spikeio.constants.coding import ARRAY_SIZE
from spikeio.constants.learning import SPIKE_HISTORY_LENGTH
from spikeio.learning.rules import STDPLearningRule
from spikeio.mixins import ResettableMixin


def compute_pairwise_delta_w(
    rule: STDPLearningRule,
    pre_spikes: SpikeTrainLike,
    post_spikes: SpikeTrainLike,
    time_window_size: float,
    pre_history: Optional[SpikeTrainLike] = None,
) -> float:
    """Total weight change for one synapse over a window.

    Args:
        rule: Learning rule evaluated on bucket-pair delays
        pre_spikes: Presynaptic bucket counts of the current window
        post_spikes: Postsynaptic bucket counts of the current window
        time_window_size: Duration of the window
        pre_history: Optional presynaptic buckets preceding the window,
            oldest first

    Returns:
        Sum of the rule over all spike pairs
    """
    pre = torch.as_tensor(pre_spikes, dtype=torch.float64).flatten()
    post = torch.as_tensor(post_spikes, dtype=torch.float64).flatten()
    pre_index = torch.arange(pre.numel(), dtype=torch.float64)
    if pre_history is not None:
        history = torch.as_tensor(pre_history, dtype=torch.float64).flatten()
        pre = torch.cat([history, pre])
        pre_index = torch.cat([torch.arange(-history.numel(), 0, dtype=torch.float64), pre_index])
    post_index = torch.arange(post.numel(), dtype=torch.float64)

    bucket_width = time_window_size / ARRAY_SIZE
    delta_t = (post_index[:, None] - pre_index[None, :]) * bucket_width
    pair_counts = post[:, None] * pre[None, :]
    if not bool(pair_counts.any()):
        return 0.0
    delta_w = rule.compute_delta_w_tensor(delta_t)
    return float((pair_counts * delta_w).sum().item())


class SpikeHistory(ResettableMixin):
    """Rolling buffer of the most recent quantized buckets of one train.

    Buckets are written into a ring buffer; :meth:`buckets` returns them in
    chronological order (oldest first), ready for ``pre_history``.

    Args:
        length: Number of buckets kept
    """

    def __init__(self, length: int = SPIKE_HISTORY_LENGTH, device: str = "cpu"):
        if length <= 0:
            raise ValueError(f"length must be > 0, got {length}")
        self.length = length
        self.buffer = torch.zeros(length, dtype=torch.int64, device=device)

        # Next write position (0 to length - 1, wraps around)
        self.ptr = 0

    def push(self, spikes: SpikeTrainLike) -> None:
        """Append the buckets of a window, dropping the oldest ones."""
        spikes = torch.as_tensor(spikes, dtype=torch.int64).flatten()
        if spikes.numel() >= self.length:
            self.buffer.copy_(spikes[-self.length:])
            self.ptr = 0
            return
        for count in spikes.tolist():
            self.buffer[self.ptr] = count
            self.ptr = (self.ptr + 1) % self.length

    def buckets(self) -> torch.Tensor:
        """Kept buckets, oldest first."""
        return torch.roll(self.buffer, shifts=-self.ptr)

    def reset(self) -> None:
        self.buffer.zero_()
        self.ptr = 0


__all__ = ["compute_pairwise_delta_w", "SpikeHistory"]
