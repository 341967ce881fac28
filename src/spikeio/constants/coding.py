# pyright: strict
"""
Spike coding constants.

Default frequencies and array sizes shared by encoders, decoders and the
one-hot bin codec. Frequencies are in Hz, window sizes in seconds.
"""

from __future__ import annotations

# ============================================================================
# SIGNAL DOMAINS
# ============================================================================

BIPOLAR_LOWER_BOUND = -1.0
"""Lower bound of raw controller outputs."""

BIPOLAR_UPPER_BOUND = 1.0
"""Upper bound of raw controller outputs."""

UNIPOLAR_LOWER_BOUND = 0.0
"""Lower bound of the internal encoding domain."""

UNIPOLAR_UPPER_BOUND = 1.0
"""Upper bound of the internal encoding domain."""

NEUTRAL_DECODED_VALUE = 0.0
"""Bipolar midpoint returned when nothing can be decoded (zero window)."""

# ============================================================================
# QUANTIZED SPIKE TRAINS
# ============================================================================

ARRAY_SIZE = 16
"""Number of equal-width buckets of a quantized spike train."""

# ============================================================================
# ENCODER DEFAULTS
# ============================================================================

DEFAULT_ENCODER_FREQUENCY_HZ = 600.0
"""Base frequency of continuous value-to-spike encoders."""

DEFAULT_QUANTIZED_ENCODER_FREQUENCY_HZ = 50.0
"""Base (maximum) frequency of quantized encoders."""

DEFAULT_QUANTIZED_MIN_FREQUENCY_HZ = 5.0
"""Frequency emitted by quantized encoders for the smallest non-zero value."""

DEFAULT_MAX_MEMORY_WINDOWS = 1.0
"""How many windows ahead the continuous memory encoder keeps pending spikes."""

# ============================================================================
# DECODER DEFAULTS
# ============================================================================

DEFAULT_DECODER_FREQUENCY_HZ = 300.0
"""Reference frequency of continuous spike-to-value decoders."""

DEFAULT_QUANTIZED_DECODER_FREQUENCY_HZ = 50.0
"""Reference frequency of quantized decoders."""

DEFAULT_NUMBER_OF_WINDOWS = 10
"""Length of the moving-average ring buffer."""
