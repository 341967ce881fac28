"""
Value-to-spike-train encoders.

Variants:
    - "uniform": UniformValueToSpikeTrainConverter
    - "uniform_with_memory": UniformWithMemoryValueToSpikeTrainConverter
    - "quantized_uniform": QuantizedUniformValueToSpikeTrainConverter
    - "quantized_uniform_with_memory": QuantizedUniformWithMemoryValueToSpikeTrainConverter

Example:
    >>> from spikeio.encoding import create_encoder
    >>> encoder = create_encoder("quantized_uniform_with_memory", frequency=50.0)
    >>> spikes = encoder.convert(0.8, time_window_size=0.1, time_window_end=0.1)
    >>> spikes.shape
    torch.Size([16])
"""

from typing import Any, Dict, Type

from spikeio.encoding.base import (
    QuantizedValueToSpikeTrainConverter,
    ValueToSpikeTrainConverter,
)
from spikeio.encoding.quantized import (
    QuantizedUniformValueToSpikeTrainConverter,
    QuantizedUniformWithMemoryValueToSpikeTrainConverter,
)
from spikeio.encoding.uniform import (
    UniformValueToSpikeTrainConverter,
    UniformWithMemoryValueToSpikeTrainConverter,
)

ENCODERS: Dict[str, Type[ValueToSpikeTrainConverter]] = {
    "uniform": UniformValueToSpikeTrainConverter,
    "uniform_with_memory": UniformWithMemoryValueToSpikeTrainConverter,
    "quantized_uniform": QuantizedUniformValueToSpikeTrainConverter,
    "quantized_uniform_with_memory": QuantizedUniformWithMemoryValueToSpikeTrainConverter,
}


def create_encoder(kind: str, **kwargs: Any) -> ValueToSpikeTrainConverter:
    """Create an encoder by variant name.

    Raises:
        ValueError: If the variant is unknown
    """
    if kind not in ENCODERS:
        raise ValueError(
            f"Unknown encoder: '{kind}'. Available encoders: {', '.join(sorted(ENCODERS))}"
        )
    return ENCODERS[kind](**kwargs)


__all__ = [
    "ValueToSpikeTrainConverter",
    "QuantizedValueToSpikeTrainConverter",
    "UniformValueToSpikeTrainConverter",
    "UniformWithMemoryValueToSpikeTrainConverter",
    "QuantizedUniformValueToSpikeTrainConverter",
    "QuantizedUniformWithMemoryValueToSpikeTrainConverter",
    "ENCODERS",
    "create_encoder",
]
