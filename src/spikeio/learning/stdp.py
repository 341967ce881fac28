"""
Spike-Timing-Dependent Plasticity (STDP) windows.

STDP maps the relative timing of a pre- and a post-synaptic spike,
Δt = t_post - t_pre, to a synaptic weight change.

Asymmetric (exponential) window:
    Δw =  A+ * exp(-Δt/τ+)   if Δt > 0
    Δw = -A- * exp( Δt/τ-)   if Δt < 0
    Δw =  0                  if Δt = 0

Symmetric (difference-of-Gaussians) window:
    G(Δt) = N(Δt; σ+) - N(Δt; σ-)
    N(Δt; σ) = exp(-(Δt/σ)² / 2) / (σ * sqrt(2π))

All kernels are elementwise over float64 tensors so that a whole matrix of
bucket-pair delays is evaluated in one call.
"""

from __future__ import annotations

import math

import torch


def exponential_stdp_window(
    delta_t: torch.Tensor,
    a_plus: float,
    a_minus: float,
    tau_plus: float,
    tau_minus: float,
) -> torch.Tensor:
    """Hebbian exponential STDP window, zero at Δt = 0."""
    delta_t = torch.as_tensor(delta_t, dtype=torch.float64)
    # Each branch is only selected where its exponent is non-positive
    potentiation = a_plus * torch.exp(-delta_t.clamp(min=0) / tau_plus)
    depression = -a_minus * torch.exp(delta_t.clamp(max=0) / tau_minus)
    return torch.where(
        delta_t > 0,
        potentiation,
        torch.where(delta_t < 0, depression, torch.zeros_like(delta_t)),
    )


def gaussian(delta_t: torch.Tensor, sigma: float) -> torch.Tensor:
    """Zero-mean normal density with standard deviation ``sigma``."""
    delta_t = torch.as_tensor(delta_t, dtype=torch.float64)
    return torch.exp(-0.5 * (delta_t / sigma) ** 2) / (sigma * math.sqrt(2 * math.pi))


def difference_of_gaussians(
    delta_t: torch.Tensor,
    sigma_plus: float,
    sigma_minus: float,
) -> torch.Tensor:
    """G(Δt) = N(Δt; σ+) - N(Δt; σ-)."""
    return gaussian(delta_t, sigma_plus) - gaussian(delta_t, sigma_minus)


def symmetric_stdp_window(
    delta_t: torch.Tensor,
    a_plus: float,
    a_minus: float,
    sigma_plus: float,
    sigma_minus: float,
) -> torch.Tensor:
    """Hebbian symmetric STDP window.

    Positive lobes of G are scaled by ``-a_plus``, negative lobes by
    ``-a_minus``; zeros of G map to 0.
    """
    g = difference_of_gaussians(delta_t, sigma_plus, sigma_minus)
    return torch.where(
        g > 0,
        -a_plus * g,
        torch.where(g < 0, -a_minus * g, torch.zeros_like(g)),
    )


__all__ = [
    "exponential_stdp_window",
    "gaussian",
    "difference_of_gaussians",
    "symmetric_stdp_window",
]
