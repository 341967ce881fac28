"""
Network adapters: wrap an external spiking network as a real-valued function.

The wrapped network is any :class:`TimedRealFunction` that maps one
(quantized) spike train per input channel to one spike train per output
channel. The adapters own the codecs and present the composite as a
function of time and a vector of reals, which is what a controller needs.

- :class:`SpikingNetworkWithConverters`: one encoder per input and one
  decoder per output, fed with the elapsed time since the previous call.
- :class:`OneHotNetworkAdapter`: thermometer codec over a binary network,
  each binary unit receiving a one-element spike train.
"""

from __future__ import annotations

import copy
import logging
from typing import List, Optional, Sequence, TypeVar, Union

import numpy as np
import torch

from spikeio.components.coding.onehot import (
    InputConverter,
    OutputConverter,
    check_bin_compatibility,
)
from spikeio.core.protocols import Parametrized, Resettable, TimedRealFunction
from spikeio.decoding import (
    QuantizedMovingAverageSpikeTrainToValueConverter,
    SpikeTrainToValueConverter,
)
from spikeio.encoding import (
    QuantizedUniformWithMemoryValueToSpikeTrainConverter,
    ValueToSpikeTrainConverter,
)
from spikeio.errors import DimensionMismatchError
from spikeio.mixins import ResettableMixin, reset_all

logger = logging.getLogger(__name__)

C = TypeVar("C", ValueToSpikeTrainConverter, SpikeTrainToValueConverter)


def replicate_converter(prototype: C, n_channels: int) -> List[C]:
    """Independent deep copies of a prototype, one per channel, each reset."""
    converters = [copy.deepcopy(prototype) for _ in range(n_channels)]
    reset_all(converters)
    return converters


def _resolve_converters(
    converters: Union[C, Sequence[C]],
    n_channels: int,
    what: str,
) -> List[C]:
    if isinstance(converters, (ValueToSpikeTrainConverter, SpikeTrainToValueConverter)):
        return replicate_converter(converters, n_channels)
    converters = list(converters)
    if len(converters) != n_channels:
        raise DimensionMismatchError(
            f"Expected {n_channels} {what} converters, received {len(converters)}"
        )
    return converters


def _delegate_get_params(network: TimedRealFunction) -> np.ndarray:
    if not isinstance(network, Parametrized):
        raise TypeError(f"{type(network).__name__} has no parameters")
    return np.asarray(network.get_params(), dtype=np.float64)


def _delegate_set_params(network: TimedRealFunction, params: Sequence[float]) -> None:
    if not isinstance(network, Parametrized):
        raise TypeError(f"{type(network).__name__} has no parameters")
    network.set_params(params)


class SpikingNetworkWithConverters(ResettableMixin):
    """Spiking network with value/spike converters on every channel.

    Each call ``apply(t, values)`` encodes input ``i`` over the window
    ``(previous_t, t]`` with encoder ``i``, runs the network, and decodes
    output ``j`` over the same window with decoder ``j``.

    Args:
        network: Network mapping one spike train per input to one per output
        encoders: Prototype encoder (deep-copied per input) or one per input.
            Defaults to a quantized memory encoder.
        decoders: Prototype decoder (deep-copied per output) or one per output.
            Defaults to a quantized moving-average decoder.

    Raises:
        DimensionMismatchError: If explicit converter lists do not match the
            network dimensions
    """

    def __init__(
        self,
        network: TimedRealFunction,
        encoders: Optional[Union[ValueToSpikeTrainConverter, Sequence[ValueToSpikeTrainConverter]]] = None,
        decoders: Optional[Union[SpikeTrainToValueConverter, Sequence[SpikeTrainToValueConverter]]] = None,
    ):
        self.network = network
        if encoders is None:
            encoders = QuantizedUniformWithMemoryValueToSpikeTrainConverter()
        if decoders is None:
            decoders = QuantizedMovingAverageSpikeTrainToValueConverter()
        self.encoders = _resolve_converters(encoders, network.input_dimension, "input")
        self.decoders = _resolve_converters(decoders, network.output_dimension, "output")
        self.previous_application_time = 0.0
        self.reset()

    @property
    def input_dimension(self) -> int:
        return self.network.input_dimension

    @property
    def output_dimension(self) -> int:
        return self.network.output_dimension

    def apply(self, t: float, values: Union[torch.Tensor, Sequence[float]]) -> torch.Tensor:
        """Advance to time ``t`` and return the decoded outputs.

        Raises:
            ValueError: If ``values`` does not have one entry per input
        """
        values = torch.as_tensor(values, dtype=torch.float64).flatten()
        if values.numel() != self.input_dimension:
            raise ValueError(
                f"Expected input length is {self.input_dimension}: found {values.numel()}"
            )
        delta_t = t - self.previous_application_time
        input_spikes = [
            encoder.convert(value, delta_t, t)
            for encoder, value in zip(self.encoders, values.tolist())
        ]
        output_spikes = self.network.apply(t, input_spikes)
        self.previous_application_time = t
        return torch.tensor(
            [decoder.convert(spikes, delta_t) for decoder, spikes in zip(self.decoders, output_spikes)],
            dtype=torch.float64,
        )

    def get_params(self) -> np.ndarray:
        return _delegate_get_params(self.network)

    def set_params(self, params: Sequence[float]) -> None:
        """Overwrite the network parameters and reset all runtime state."""
        _delegate_set_params(self.network, params)
        self.reset()

    def reset(self) -> None:
        if isinstance(self.network, Resettable):
            self.network.reset()
        self.previous_application_time = 0.0
        reset_all(self.encoders)
        reset_all(self.decoders)
        logger.debug(
            "Reset %s (%d encoders, %d decoders)",
            self.__class__.__name__,
            len(self.encoders),
            len(self.decoders),
        )


class OneHotNetworkAdapter(ResettableMixin):
    """Binary spiking network behind a thermometer (one-hot bin) codec.

    Args:
        network: Network whose input and output units are binary
        input_bins: Binary units per input scalar
        output_bins: Binary units per output scalar

    Raises:
        DimensionMismatchError: If a network dimension is not a multiple of
            the matching bin count
    """

    def __init__(self, network: TimedRealFunction, input_bins: int, output_bins: int):
        self.input_converter = InputConverter(input_bins)
        self.output_converter = OutputConverter(output_bins)
        check_bin_compatibility(network.input_dimension, input_bins, "Input")
        check_bin_compatibility(network.output_dimension, output_bins, "Output")
        self.network = network
        self.reset()

    @property
    def input_dimension(self) -> int:
        return self.network.input_dimension // self.input_converter.n_bins

    @property
    def output_dimension(self) -> int:
        return self.network.output_dimension // self.output_converter.n_bins

    def apply(self, t: float, values: Union[torch.Tensor, Sequence[float]]) -> torch.Tensor:
        """Encode, run the network at time ``t``, decode.

        Raises:
            ValueError: If ``values`` does not have one entry per input scalar
        """
        values = torch.as_tensor(values, dtype=torch.float64).flatten()
        if values.numel() != self.input_dimension:
            raise ValueError(
                f"Expected input length is {self.input_dimension}: found {values.numel()}"
            )
        activity = self.input_converter.convert(values)
        input_spikes = [activity[i:i + 1] for i in range(activity.numel())]
        output_spikes = self.network.apply(t, input_spikes)
        output_activity = torch.stack(
            [torch.as_tensor(spikes).flatten()[0] for spikes in output_spikes]
        )
        return self.output_converter.convert(output_activity)

    def get_params(self) -> np.ndarray:
        return _delegate_get_params(self.network)

    def set_params(self, params: Sequence[float]) -> None:
        """Overwrite the network parameters and reset it."""
        _delegate_set_params(self.network, params)
        self.reset()

    def reset(self) -> None:
        if isinstance(self.network, Resettable):
            self.network.reset()
        logger.debug("Reset %s", self.__class__.__name__)


__all__ = [
    "SpikingNetworkWithConverters",
    "OneHotNetworkAdapter",
    "replicate_converter",
]
