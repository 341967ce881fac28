"""Tests for shared spike-train helpers."""

import pytest
import torch

from spikeio.components.coding.spike_utils import (
    bipolar_to_unipolar,
    bucket_index,
    clip_unipolar,
    compute_spike_count,
    count_timestamps,
    empty_quantized_spike_train,
    empty_spike_train,
    unipolar_to_bipolar,
)


class TestNormalization:
    """Tests for the bipolar/unipolar conventions."""

    @pytest.mark.parametrize(
        "value,expected",
        [(-1.0, 0.0), (0.0, 0.5), (1.0, 1.0), (0.5, 0.75)],
    )
    def test_bipolar_to_unipolar(self, value, expected):
        """Test bipolar values map linearly onto [0, 1]."""
        assert bipolar_to_unipolar(value) == expected

    def test_bipolar_to_unipolar_clamps_silently(self):
        """Test out-of-range inputs are clipped rather than rejected."""
        # Silent clamping may hide upstream bugs; kept as documented behavior
        assert bipolar_to_unipolar(3.0) == 1.0
        assert bipolar_to_unipolar(-7.0) == 0.0

    def test_clip_unipolar(self):
        """Test clipping into the encoding domain."""
        assert clip_unipolar(1.5) == 1.0
        assert clip_unipolar(-0.5) == 0.0
        assert clip_unipolar(0.25) == 0.25

    @pytest.mark.parametrize(
        "value,expected",
        [(0.0, -1.0), (0.5, 0.0), (1.0, 1.0), (4.0, 1.0), (-2.0, -1.0)],
    )
    def test_unipolar_to_bipolar(self, value, expected):
        """Test decoded ratios are mapped and clipped to [-1, 1]."""
        assert unipolar_to_bipolar(value) == expected


class TestSpikeCounting:
    """Tests for spike counting helpers."""

    def test_compute_spike_count(self):
        """Test bucket counts are summed."""
        assert compute_spike_count(torch.tensor([1, 0, 2, 1])) == 4

    def test_compute_spike_count_list(self):
        """Test plain sequences are accepted."""
        assert compute_spike_count([3, 0, 0, 1]) == 4

    def test_compute_spike_count_empty(self):
        """Test empty trains have no spikes."""
        assert compute_spike_count(torch.zeros(0, dtype=torch.int64)) == 0

    def test_count_timestamps(self):
        """Test continuous trains count one spike per timestamp."""
        assert count_timestamps(torch.tensor([0.25, 0.5, 1.0])) == 3
        assert count_timestamps([]) == 0


class TestBuckets:
    """Tests for quantized bucket helpers."""

    @pytest.mark.parametrize(
        "offset,expected",
        [(0.0, 0), (0.5, 8), (0.96875, 15), (1.0, 15)],
    )
    def test_bucket_index(self, offset, expected):
        """Test offsets fall into equal-width buckets, last bucket clamped."""
        assert bucket_index(offset, 1.0) == expected

    def test_empty_trains(self):
        """Test empty train shapes and dtypes."""
        continuous = empty_spike_train()
        quantized = empty_quantized_spike_train()

        assert continuous.numel() == 0
        assert continuous.dtype == torch.float64
        assert quantized.shape == (16,)
        assert quantized.dtype == torch.int64
        assert quantized.sum() == 0
