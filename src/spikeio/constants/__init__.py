"""
Centralized Constants for SpikeIO.

Usage:
======
    from spikeio.constants.coding import ARRAY_SIZE
    from spikeio.constants import learning

Categories:
===========
- coding: Signal domains, quantized array size, encoder/decoder defaults
- learning: STDP parameter bounds and pairing window sizes
"""

from __future__ import annotations

from . import coding, learning
from .coding import *
from .learning import *

__all__ = [
    # Submodules
    "coding",
    "learning",
    # Coding
    "BIPOLAR_LOWER_BOUND",
    "BIPOLAR_UPPER_BOUND",
    "UNIPOLAR_LOWER_BOUND",
    "UNIPOLAR_UPPER_BOUND",
    "NEUTRAL_DECODED_VALUE",
    "ARRAY_SIZE",
    "DEFAULT_ENCODER_FREQUENCY_HZ",
    "DEFAULT_QUANTIZED_ENCODER_FREQUENCY_HZ",
    "DEFAULT_QUANTIZED_MIN_FREQUENCY_HZ",
    "DEFAULT_MAX_MEMORY_WINDOWS",
    "DEFAULT_DECODER_FREQUENCY_HZ",
    "DEFAULT_QUANTIZED_DECODER_FREQUENCY_HZ",
    "DEFAULT_NUMBER_OF_WINDOWS",
    # Learning
    "ASYMMETRIC_MIN_PARAMS",
    "ASYMMETRIC_MAX_PARAMS",
    "SYMMETRIC_MIN_PARAMS",
    "SYMMETRIC_MAX_PARAMS",
    "N_RULE_PARAMS",
    "N_RULE_SELECTOR_PARAMS",
    "STDP_LEARNING_WINDOW",
    "SPIKE_HISTORY_LENGTH",
]
