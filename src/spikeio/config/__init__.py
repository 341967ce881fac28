"""
Configuration for SpikeIO components.

Every encoder, decoder, codec and learning rule keeps a validated dataclass
config on ``self.config``. Configs reject invalid values at construction
with :class:`~spikeio.errors.ConfigValidationError`.

Usage:
    from spikeio.config import QuantizedEncoderConfig
    from spikeio.encoding import QuantizedUniformValueToSpikeTrainConverter

    config = QuantizedEncoderConfig(frequency=80.0, min_frequency=5.0)
    encoder = QuantizedUniformValueToSpikeTrainConverter.from_config(config)
"""

from spikeio.config.base import BaseConfig
from spikeio.config.coding_config import (
    DecoderConfig,
    EncoderConfig,
    MemoryEncoderConfig,
    MovingAverageDecoderConfig,
    OneHotConfig,
    QuantizedDecoderConfig,
    QuantizedEncoderConfig,
    QuantizedMovingAverageDecoderConfig,
)
from spikeio.config.learning_config import (
    AsymmetricSTDPConfig,
    STDPConfig,
    SymmetricSTDPConfig,
)
from spikeio.config.validation import (
    ValidatedConfig,
    ValidatorRegistry,
    validate_frequency,
)

__all__ = [
    # Base
    "BaseConfig",
    # Validation
    "ValidatedConfig",
    "ValidatorRegistry",
    "validate_frequency",
    # Coding
    "EncoderConfig",
    "MemoryEncoderConfig",
    "QuantizedEncoderConfig",
    "DecoderConfig",
    "MovingAverageDecoderConfig",
    "QuantizedDecoderConfig",
    "QuantizedMovingAverageDecoderConfig",
    "OneHotConfig",
    # Learning
    "STDPConfig",
    "AsymmetricSTDPConfig",
    "SymmetricSTDPConfig",
]
