"""
Custom exception classes for SpikeIO.

Exception Hierarchy:
====================
SpikeIOError (base) - Base exception for all SpikeIO-specific errors
├── ConfigurationError - Invalid configuration parameters
│   ├── ConfigValidationError - Declarative config validation failed
│   └── DimensionMismatchError - Codec bin count incompatible with a network

Out-of-range control values are NOT errors: encoders and decoders clamp them
silently. Runtime argument errors (wrong vector lengths) raise ValueError.
"""

from __future__ import annotations

# =============================================================================
# Exception Hierarchy
# =============================================================================


class SpikeIOError(Exception):
    """Base exception for all SpikeIO-specific errors.

    All custom exceptions in SpikeIO inherit from this class, enabling
    code to catch SpikeIO errors specifically.
    """


class ConfigurationError(SpikeIOError):
    """Invalid configuration parameters.

    Raised at construction time when configuration values are out of valid
    range or incompatible with each other. Never retried.
    """


class ConfigValidationError(ConfigurationError):
    """Raised when declarative configuration validation fails."""


class DimensionMismatchError(ConfigurationError):
    """Bin count of a one-hot codec does not divide a dimension.

    Raised when a network input/output dimension, or an activity vector, is
    not an exact multiple of the codec's number of bins.
    """


__all__ = [
    "SpikeIOError",
    "ConfigurationError",
    "ConfigValidationError",
    "DimensionMismatchError",
]
