"""
Learning rule configurations.

Hyperparameters of the STDP learning-rule families. The field order of each
config is the order of the rule's flat parameter vector.
"""

from __future__ import annotations

from dataclasses import dataclass

from spikeio.config.base import BaseConfig
from spikeio.config.validation import ValidatedConfig


@dataclass
class STDPConfig(BaseConfig, ValidatedConfig):
    """Amplitudes shared by every STDP family.

    Attributes:
        a_plus: Amplitude of the positive lobe
        a_minus: Amplitude of the negative lobe
    """

    a_plus: float = 1.0
    a_minus: float = 1.0

    _validation_rules = {
        'a_plus': ('finite',),
        'a_minus': ('finite',),
    }


@dataclass
class AsymmetricSTDPConfig(STDPConfig):
    """Configuration for the exponential-kernel (asymmetric) STDP window.

    Δw = ±a_plus  * exp(-Δt/tau_plus)   for Δt > 0
    Δw = ∓a_minus * exp( Δt/tau_minus)  for Δt < 0

    Attributes:
        tau_plus: Decay constant of the causal side
        tau_minus: Decay constant of the anti-causal side
    """

    tau_plus: float = 20.0
    tau_minus: float = 20.0

    _validation_rules = {
        'a_plus': ('finite',),
        'a_minus': ('finite',),
        'tau_plus': ('positive', 'finite'),
        'tau_minus': ('positive', 'finite'),
    }


@dataclass
class SymmetricSTDPConfig(STDPConfig):
    """Configuration for the difference-of-Gaussians (symmetric) STDP window.

    Attributes:
        sigma_plus: Width of the positive Gaussian
        sigma_minus: Width of the subtracted Gaussian
    """

    sigma_plus: float = 5.0
    sigma_minus: float = 15.0

    _validation_rules = {
        'a_plus': ('finite',),
        'a_minus': ('finite',),
        'sigma_plus': ('positive', 'finite'),
        'sigma_minus': ('positive', 'finite'),
    }


__all__ = [
    "STDPConfig",
    "AsymmetricSTDPConfig",
    "SymmetricSTDPConfig",
]
