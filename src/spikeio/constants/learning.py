# pyright: strict
"""
STDP learning rule constants.

Parameter bounds used when raw genotype values in [-1, 1] are scaled into
the hyperparameter space of a learning-rule family, and the history length
used when pairing quantized spike trains.
"""

from __future__ import annotations

from .coding import ARRAY_SIZE

# ============================================================================
# PARAMETER BOUNDS (order: a_plus, a_minus, tau_plus, tau_minus)
# ============================================================================

ASYMMETRIC_MIN_PARAMS = (0.1, 0.1, 1.0, 1.0)
ASYMMETRIC_MAX_PARAMS = (1.0, 1.0, 10.0, 10.0)

# ============================================================================
# PARAMETER BOUNDS (order: a_plus, a_minus, sigma_plus, sigma_minus)
# ============================================================================

SYMMETRIC_MIN_PARAMS = (1.0, 1.0, 3.5, 13.5)
SYMMETRIC_MAX_PARAMS = (10.6, 44.0, 10.0, 20.0)

N_RULE_PARAMS = 4
"""Length of every learning-rule parameter vector."""

N_RULE_SELECTOR_PARAMS = 2
"""Leading genotype values selecting symmetry and hebbian sign."""

# ============================================================================
# PAIRING WINDOW
# ============================================================================

STDP_LEARNING_WINDOW = int(2.5 * ARRAY_SIZE)
"""Buckets spanned by the pairing window (current window plus history)."""

SPIKE_HISTORY_LENGTH = STDP_LEARNING_WINDOW - ARRAY_SIZE
"""Buckets of presynaptic history kept before the current window."""
