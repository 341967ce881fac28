"""Adapters presenting an external spiking network as a real-valued function."""

from spikeio.integration.network_adapters import (
    OneHotNetworkAdapter,
    SpikingNetworkWithConverters,
    replicate_converter,
)

__all__ = [
    "SpikingNetworkWithConverters",
    "OneHotNetworkAdapter",
    "replicate_converter",
]
