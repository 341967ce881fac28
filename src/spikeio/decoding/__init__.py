"""
Spike-train-to-value decoders.

Variants:
    - "average_frequency": AverageFrequencySpikeTrainToValueConverter
    - "moving_average": MovingAverageSpikeTrainToValueConverter
    - "quantized_average_frequency": QuantizedAverageFrequencySpikeTrainToValueConverter
    - "quantized_moving_average": QuantizedMovingAverageSpikeTrainToValueConverter
"""

from typing import Any, Dict, Type

from spikeio.decoding.average_frequency import (
    AverageFrequencySpikeTrainToValueConverter,
    MovingAverageSpikeTrainToValueConverter,
)
from spikeio.decoding.base import SpikeTrainToValueConverter
from spikeio.decoding.quantized import (
    QuantizedAverageFrequencySpikeTrainToValueConverter,
    QuantizedMovingAverageSpikeTrainToValueConverter,
)

DECODERS: Dict[str, Type[SpikeTrainToValueConverter]] = {
    "average_frequency": AverageFrequencySpikeTrainToValueConverter,
    "moving_average": MovingAverageSpikeTrainToValueConverter,
    "quantized_average_frequency": QuantizedAverageFrequencySpikeTrainToValueConverter,
    "quantized_moving_average": QuantizedMovingAverageSpikeTrainToValueConverter,
}


def create_decoder(kind: str, **kwargs: Any) -> SpikeTrainToValueConverter:
    """Create a decoder by variant name.

    Raises:
        ValueError: If the variant is unknown
    """
    if kind not in DECODERS:
        raise ValueError(
            f"Unknown decoder: '{kind}'. Available decoders: {', '.join(sorted(DECODERS))}"
        )
    return DECODERS[kind](**kwargs)


__all__ = [
    "SpikeTrainToValueConverter",
    "AverageFrequencySpikeTrainToValueConverter",
    "MovingAverageSpikeTrainToValueConverter",
    "QuantizedAverageFrequencySpikeTrainToValueConverter",
    "QuantizedMovingAverageSpikeTrainToValueConverter",
    "DECODERS",
    "create_decoder",
]
