"""
Spike coding configurations.

Construction-time parameters of encoders, decoders and the one-hot bin
codec. Each config validates itself on creation so that non-positive
frequencies and non-positive bin/window counts fail immediately.
"""

from __future__ import annotations

from dataclasses import dataclass

from spikeio.config.base import BaseConfig
from spikeio.config.validation import ValidatedConfig
from spikeio.constants.coding import (
    DEFAULT_DECODER_FREQUENCY_HZ,
    DEFAULT_ENCODER_FREQUENCY_HZ,
    DEFAULT_MAX_MEMORY_WINDOWS,
    DEFAULT_NUMBER_OF_WINDOWS,
    DEFAULT_QUANTIZED_DECODER_FREQUENCY_HZ,
    DEFAULT_QUANTIZED_ENCODER_FREQUENCY_HZ,
    DEFAULT_QUANTIZED_MIN_FREQUENCY_HZ,
)


@dataclass
class EncoderConfig(BaseConfig, ValidatedConfig):
    """Configuration for continuous value-to-spike encoders.

    Attributes:
        frequency: Firing frequency (Hz) reached for the maximal value
    """

    frequency: float = DEFAULT_ENCODER_FREQUENCY_HZ

    _validation_rules = {
        'frequency': ('positive', 'finite'),
    }


@dataclass
class MemoryEncoderConfig(EncoderConfig):
    """Configuration for the continuous encoder with carry-over memory.

    Attributes:
        max_memory: How many windows past the current one pending spikes are
            remembered for
    """

    max_memory: float = DEFAULT_MAX_MEMORY_WINDOWS

    _validation_rules = {
        'frequency': ('positive', 'finite'),
        'max_memory': ('non_negative', 'finite'),
    }


@dataclass
class QuantizedEncoderConfig(BaseConfig, ValidatedConfig):
    """Configuration for quantized value-to-spike encoders.

    A value v in (0, 1] fires at ``v * (frequency - min_frequency) + min_frequency``.

    Attributes:
        frequency: Firing frequency (Hz) for the maximal value
        min_frequency: Firing frequency (Hz) approached for the smallest value
    """

    frequency: float = DEFAULT_QUANTIZED_ENCODER_FREQUENCY_HZ
    min_frequency: float = DEFAULT_QUANTIZED_MIN_FREQUENCY_HZ

    _validation_rules = {
        'frequency': ('positive', 'finite'),
        'min_frequency': ('non_negative', 'finite'),
    }


@dataclass
class DecoderConfig(BaseConfig, ValidatedConfig):
    """Configuration for average-frequency spike-to-value decoders.

    Attributes:
        frequency: Reference frequency (Hz) decoded as the maximal value
    """

    frequency: float = DEFAULT_DECODER_FREQUENCY_HZ

    _validation_rules = {
        'frequency': ('positive', 'finite'),
    }


@dataclass
class MovingAverageDecoderConfig(DecoderConfig):
    """Configuration for moving-average decoders.

    Attributes:
        n_windows: Number of past windows averaged over
    """

    n_windows: int = DEFAULT_NUMBER_OF_WINDOWS

    _validation_rules = {
        'frequency': ('positive', 'finite'),
        'n_windows': ('positive_integer',),
    }


@dataclass
class QuantizedDecoderConfig(DecoderConfig):
    """Average-frequency decoder config with the quantized default frequency."""

    frequency: float = DEFAULT_QUANTIZED_DECODER_FREQUENCY_HZ


@dataclass
class QuantizedMovingAverageDecoderConfig(MovingAverageDecoderConfig):
    """Moving-average decoder config with the quantized default frequency."""

    frequency: float = DEFAULT_QUANTIZED_DECODER_FREQUENCY_HZ


@dataclass
class OneHotConfig(BaseConfig, ValidatedConfig):
    """Configuration for the thermometer (one-hot bin) codec.

    Attributes:
        n_bins: Binary units assigned to each scalar
    """

    n_bins: int = 4

    _validation_rules = {
        'n_bins': ('positive_integer',),
    }


__all__ = [
    "EncoderConfig",
    "MemoryEncoderConfig",
    "QuantizedEncoderConfig",
    "DecoderConfig",
    "MovingAverageDecoderConfig",
    "QuantizedDecoderConfig",
    "QuantizedMovingAverageDecoderConfig",
    "OneHotConfig",
]
