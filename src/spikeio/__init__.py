"""
SpikeIO - Spike coding and STDP learning rules for spiking controllers.

Converts real-valued control signals to spike trains and back, and provides
the spike-timing-dependent plasticity rules used to adapt synapses online.

Quick Start (External Users):
=============================

    from spikeio import (
        QuantizedUniformWithMemoryValueToSpikeTrainConverter,
        QuantizedMovingAverageSpikeTrainToValueConverter,
        create_learning_rule,
    )

    encoder = QuantizedUniformWithMemoryValueToSpikeTrainConverter(frequency=50.0)
    decoder = QuantizedMovingAverageSpikeTrainToValueConverter(frequency=50.0)
    spikes = encoder.convert(0.8, time_window_size=0.1, time_window_end=0.1)
    value = decoder.convert(spikes, time_window_size=0.1)

    rule = create_learning_rule("asymmetric_hebbian", tau_plus=10.0)
    dw = rule.compute_delta_w(2.5)

Internal Development:
====================

Internal code should use explicit imports for clarity:

    from spikeio.encoding.quantized import QuantizedUniformValueToSpikeTrainConverter
    from spikeio.learning.rules import SymmetricHebbianLearningRule
"""

__version__ = "0.1.0"

# ============================================================================
# PUBLIC API
# ============================================================================

# Errors
from spikeio.errors import (
    ConfigValidationError,
    ConfigurationError,
    DimensionMismatchError,
    SpikeIOError,
)

# Capabilities
from spikeio.core.protocols import Parametrized, Resettable, TimedRealFunction

# Encoders
from spikeio.encoding import (
    QuantizedUniformValueToSpikeTrainConverter,
    QuantizedUniformWithMemoryValueToSpikeTrainConverter,
    UniformValueToSpikeTrainConverter,
    UniformWithMemoryValueToSpikeTrainConverter,
    ValueToSpikeTrainConverter,
    create_encoder,
)

# Decoders
from spikeio.decoding import (
    AverageFrequencySpikeTrainToValueConverter,
    MovingAverageSpikeTrainToValueConverter,
    QuantizedAverageFrequencySpikeTrainToValueConverter,
    QuantizedMovingAverageSpikeTrainToValueConverter,
    SpikeTrainToValueConverter,
    create_decoder,
)

# One-hot codec
from spikeio.components.coding import InputConverter, OutputConverter

# Learning rules
from spikeio.learning import (
    AsymmetricAntiHebbianLearningRule,
    AsymmetricHebbianLearningRule,
    DegenerateLearningRule,
    LearningRuleRegistry,
    STDPLearningRule,
    SymmetricAntiHebbianLearningRule,
    SymmetricHebbianLearningRule,
    compute_pairwise_delta_w,
    create_learning_rule,
    create_learning_rule_from_reals,
    create_learning_rules,
)

# Network adapters
from spikeio.integration import OneHotNetworkAdapter, SpikingNetworkWithConverters

__all__ = [
    "__version__",
    # Errors
    "SpikeIOError",
    "ConfigurationError",
    "ConfigValidationError",
    "DimensionMismatchError",
    # Capabilities
    "Parametrized",
    "Resettable",
    "TimedRealFunction",
    # Encoders
    "ValueToSpikeTrainConverter",
    "UniformValueToSpikeTrainConverter",
    "UniformWithMemoryValueToSpikeTrainConverter",
    "QuantizedUniformValueToSpikeTrainConverter",
    "QuantizedUniformWithMemoryValueToSpikeTrainConverter",
    "create_encoder",
    # Decoders
    "SpikeTrainToValueConverter",
    "AverageFrequencySpikeTrainToValueConverter",
    "MovingAverageSpikeTrainToValueConverter",
    "QuantizedAverageFrequencySpikeTrainToValueConverter",
    "QuantizedMovingAverageSpikeTrainToValueConverter",
    "create_decoder",
    # One-hot codec
    "InputConverter",
    "OutputConverter",
    # Learning rules
    "STDPLearningRule",
    "AsymmetricHebbianLearningRule",
    "AsymmetricAntiHebbianLearningRule",
    "SymmetricHebbianLearningRule",
    "SymmetricAntiHebbianLearningRule",
    "DegenerateLearningRule",
    "LearningRuleRegistry",
    "create_learning_rule",
    "create_learning_rule_from_reals",
    "create_learning_rules",
    "compute_pairwise_delta_w",
    # Network adapters
    "SpikingNetworkWithConverters",
    "OneHotNetworkAdapter",
]
