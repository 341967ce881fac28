"""Tests for network adapters wrapping an external spiking network."""

import numpy as np
import pytest
import torch

from spikeio.core.protocols import Parametrized, Resettable, TimedRealFunction
from spikeio.decoding import (
    AverageFrequencySpikeTrainToValueConverter,
    QuantizedMovingAverageSpikeTrainToValueConverter,
)
from spikeio.encoding import (
    QuantizedUniformWithMemoryValueToSpikeTrainConverter,
    UniformValueToSpikeTrainConverter,
)
from spikeio.errors import DimensionMismatchError
from spikeio.integration import (
    OneHotNetworkAdapter,
    SpikingNetworkWithConverters,
    replicate_converter,
)


class TestReplicateConverter:
    """Tests for per-channel converter copies."""

    def test_copies_are_independent_and_reset(self):
        """Test each channel gets its own freshly reset copy."""
        prototype = QuantizedUniformWithMemoryValueToSpikeTrainConverter(frequency=32.0)
        prototype.convert(1.0, 0.125, 0.125)

        copies = replicate_converter(prototype, 3)

        assert len({id(c) for c in copies}) == 3
        assert all(c is not prototype for c in copies)
        assert all(c.last_spike_time == 0.0 for c in copies)
        assert all(c.frequency == 32.0 for c in copies)
        assert prototype.last_spike_time == 0.09375


class TestSpikingNetworkWithConverters:
    """Tests for the encoder/decoder-per-channel adapter."""

    def test_default_converters(self, echo_network):
        """Test quantized memory encoders and moving-average decoders by default."""
        adapter = SpikingNetworkWithConverters(echo_network)

        assert len(adapter.encoders) == 2
        assert len(adapter.decoders) == 2
        assert all(
            isinstance(e, QuantizedUniformWithMemoryValueToSpikeTrainConverter)
            for e in adapter.encoders
        )
        assert all(
            isinstance(d, QuantizedMovingAverageSpikeTrainToValueConverter)
            for d in adapter.decoders
        )
        assert adapter.encoders[0] is not adapter.encoders[1]

    def test_dimensions(self, make_echo_network):
        """Test dimensions are those of the wrapped network."""
        adapter = SpikingNetworkWithConverters(make_echo_network(3, 5))

        assert adapter.input_dimension == 3
        assert adapter.output_dimension == 5
        assert len(adapter.decoders) == 5

    def test_apply_round_trip(self, echo_network):
        """Test maximal and minimal inputs decode to the output extremes."""
        adapter = SpikingNetworkWithConverters(echo_network)
        outputs = adapter.apply(0.1, [1.0, -1.0])

        assert outputs.dtype == torch.float64
        assert outputs.tolist() == pytest.approx([1.0, -1.0])

    def test_apply_uses_elapsed_time(self, echo_network):
        """Test windows span the time since the previous call."""
        adapter = SpikingNetworkWithConverters(echo_network)
        adapter.apply(0.125, [1.0, 1.0])
        adapter.apply(0.375, [1.0, 1.0])

        assert adapter.previous_application_time == 0.375
        assert [t for t, _ in echo_network.calls] == [0.125, 0.375]
        assert echo_network.calls[1][1][0].shape == (16,)

    def test_continuous_converters(self, echo_network):
        """Test prototypes of any encoder/decoder family are accepted."""
        adapter = SpikingNetworkWithConverters(
            echo_network,
            UniformValueToSpikeTrainConverter(frequency=8.0),
            AverageFrequencySpikeTrainToValueConverter(frequency=8.0),
        )

        # value 0 fires at 4 Hz: 2 spikes in 0.5 s, decoded against 8 Hz
        assert adapter.apply(0.5, [0.0, 1.0]).tolist() == [0.0, 1.0]

    def test_explicit_converter_lists(self, echo_network):
        """Test per-channel converter lists are used as given."""
        encoders = [QuantizedUniformWithMemoryValueToSpikeTrainConverter() for _ in range(2)]
        adapter = SpikingNetworkWithConverters(echo_network, encoders)

        assert adapter.encoders == encoders

    def test_converter_list_length_mismatch(self, echo_network):
        """Test lists not matching the network dimension are rejected."""
        with pytest.raises(DimensionMismatchError):
            SpikingNetworkWithConverters(
                echo_network,
                decoders=[QuantizedMovingAverageSpikeTrainToValueConverter()],
            )

    def test_wrong_input_length(self, echo_network):
        """Test inputs must have one value per network input."""
        adapter = SpikingNetworkWithConverters(echo_network)

        with pytest.raises(ValueError, match="Expected input length is 2"):
            adapter.apply(0.1, [0.5, 0.5, 0.5])

    def test_reset(self, echo_network):
        """Test reset restores the network, the clock and every converter."""
        adapter = SpikingNetworkWithConverters(echo_network)
        resets_after_init = echo_network.n_resets
        adapter.apply(0.1, [1.0, 1.0])
        adapter.reset()

        assert echo_network.n_resets == resets_after_init + 1
        assert adapter.previous_application_time == 0.0
        assert all(e.last_spike_time == 0.0 for e in adapter.encoders)
        assert all(d.ptr == 0 for d in adapter.decoders)

    def test_params_delegate_to_network(self, echo_network):
        """Test parameters are the network's and setting them resets state."""
        adapter = SpikingNetworkWithConverters(echo_network)
        adapter.apply(0.1, [1.0, 1.0])

        assert adapter.get_params().tolist() == [0.0, 1.0, 2.0]

        adapter.set_params([5.0, 6.0])
        assert echo_network.params.tolist() == [5.0, 6.0]
        assert adapter.previous_application_time == 0.0

    def test_network_without_params(self, stateless_network):
        """Test a network without parameters cannot be tuned through the adapter."""
        adapter = SpikingNetworkWithConverters(stateless_network)

        with pytest.raises(TypeError):
            adapter.get_params()

    def test_capabilities(self, echo_network):
        """Test the adapter satisfies the capability protocols."""
        adapter = SpikingNetworkWithConverters(echo_network)

        assert isinstance(adapter, TimedRealFunction)
        assert isinstance(adapter, Resettable)
        assert isinstance(adapter, Parametrized)


class TestOneHotNetworkAdapter:
    """Tests for the thermometer-coded binary network adapter."""

    def test_dimensions(self, make_echo_network):
        """Test dimensions are network sizes divided by the bin counts."""
        adapter = OneHotNetworkAdapter(make_echo_network(6, 8), input_bins=3, output_bins=4)

        assert adapter.input_dimension == 2
        assert adapter.output_dimension == 2

    def test_apply(self, make_echo_network):
        """Test values are encoded, passed per unit, and decoded."""
        network = make_echo_network(6, 6)
        adapter = OneHotNetworkAdapter(network, input_bins=3, output_bins=3)
        outputs = adapter.apply(0.0, [0.0, 1.0])

        assert outputs.tolist() == pytest.approx([-1.0, 1.0])
        _, inputs = network.calls[-1]
        assert len(inputs) == 6
        assert all(spikes.numel() == 1 for spikes in inputs)

    def test_partial_activation(self, make_echo_network):
        """Test partially active chunks decode between the extremes."""
        adapter = OneHotNetworkAdapter(make_echo_network(4, 4), input_bins=4, output_bins=4)

        # 0.5 / 0.2 -> 2 of 4 units active
        assert adapter.apply(0.0, [0.5]).tolist() == pytest.approx([0.0])

    @pytest.mark.parametrize(
        "dims,bins,message",
        [((10, 8), (4, 4), "Input size 10"), ((8, 10), (4, 4), "Output size 10")],
    )
    def test_incompatible_bins(self, make_echo_network, dims, bins, message):
        """Test construction fails when a dimension is not a multiple of its bins."""
        with pytest.raises(DimensionMismatchError, match=message):
            OneHotNetworkAdapter(make_echo_network(*dims), *bins)

    def test_wrong_input_length(self, make_echo_network):
        """Test inputs must match the number of scalar inputs."""
        adapter = OneHotNetworkAdapter(make_echo_network(6, 6), 3, 3)

        with pytest.raises(ValueError, match="Expected input length is 2: found 3"):
            adapter.apply(0.0, [0.1, 0.2, 0.3])

    def test_reset_and_params(self, make_echo_network):
        """Test reset and parameters delegate to the network."""
        network = make_echo_network(3, 3)
        adapter = OneHotNetworkAdapter(network, 3, 3)
        before = network.n_resets

        adapter.set_params(np.ones(2))

        assert network.n_resets == before + 1
        assert adapter.get_params().tolist() == [1.0, 1.0]
