"""
STDP learning rules.

Each rule maps a spike-timing difference ``Δt = t_post - t_pre`` to a weight
change and exposes its hyperparameters as a flat parameter vector so that an
optimizer can evolve them:

    asymmetric families: [a_plus, a_minus, tau_plus, tau_minus]
    symmetric families:  [a_plus, a_minus, sigma_plus, sigma_minus]

Anti-Hebbian variants are the exact negation of their Hebbian counterpart.
The degenerate rule never changes weights and has no effective parameters.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from typing import Any, Sequence, Tuple, Union

import numpy as np
import torch

from spikeio.config.base import BaseConfig
from spikeio.config.learning_config import AsymmetricSTDPConfig, SymmetricSTDPConfig
from spikeio.constants.learning import N_RULE_PARAMS
from spikeio.learning.rule_registry import LearningRuleRegistry
from spikeio.learning.stdp import exponential_stdp_window, symmetric_stdp_window
from spikeio.mixins import ConfigurableMixin

ParamsLike = Union[np.ndarray, Sequence[float], torch.Tensor]


class STDPLearningRule(ConfigurableMixin, ABC):
    """Base class for STDP learning rules.

    Subclasses define ``PARAM_NAMES`` (config fields in parameter-vector
    order) and the tensor kernel ``compute_delta_w_tensor``.
    """

    PARAM_NAMES: Tuple[str, ...] = ()

    config: Any

    @abstractmethod
    def compute_delta_w_tensor(self, delta_t: torch.Tensor) -> torch.Tensor:
        """Elementwise weight change for a tensor of timing differences."""

    def compute_delta_w(self, delta_t: float) -> float:
        """Weight change for a single timing difference."""
        delta_t = torch.tensor(float(delta_t), dtype=torch.float64)
        return float(self.compute_delta_w_tensor(delta_t).item())

    def __call__(self, delta_t: float) -> float:
        return self.compute_delta_w(delta_t)

    def get_params(self) -> np.ndarray:
        """Hyperparameters as a float64 vector in the family's fixed order."""
        return np.array([getattr(self.config, name) for name in self.PARAM_NAMES], dtype=np.float64)

    def set_params(self, params: ParamsLike) -> None:
        """Replace all hyperparameters from a vector in the family's order.

        Raises:
            ValueError: If the vector does not have exactly one entry per parameter
            ConfigValidationError: If a value is invalid (e.g. non-positive tau)
        """
        if isinstance(params, torch.Tensor):
            params = params.detach().cpu().numpy()
        params = np.asarray(params, dtype=np.float64).ravel()
        if params.size != len(self.PARAM_NAMES):
            raise ValueError(
                f"{self.__class__.__name__} expects {len(self.PARAM_NAMES)} parameters, "
                f"received {params.size}"
            )
        self.config = dataclasses.replace(
            self.config,
            **{name: float(value) for name, value in zip(self.PARAM_NAMES, params)},
        )

    def __repr__(self) -> str:
        params = ", ".join(f"{name}={getattr(self.config, name)}" for name in self.PARAM_NAMES)
        return f"{self.__class__.__name__}({params})"


class AsymmetricSTDPLearningRule(STDPLearningRule):
    """Exponential-window STDP family.

    Args:
        a_plus: Amplitude for causal pairs (Δt > 0)
        a_minus: Amplitude for anti-causal pairs (Δt < 0)
        tau_plus: Decay constant of the causal side
        tau_minus: Decay constant of the anti-causal side
    """

    CONFIG_CLASS = AsymmetricSTDPConfig
    PARAM_NAMES = ("a_plus", "a_minus", "tau_plus", "tau_minus")

    def __init__(
        self,
        a_plus: float = 1.0,
        a_minus: float = 1.0,
        tau_plus: float = 20.0,
        tau_minus: float = 20.0,
        device: str = "cpu",
    ):
        self.config = AsymmetricSTDPConfig(
            a_plus=a_plus,
            a_minus=a_minus,
            tau_plus=tau_plus,
            tau_minus=tau_minus,
            device=device,
        )

    def _hebbian_window(self, delta_t: torch.Tensor) -> torch.Tensor:
        c = self.config
        return exponential_stdp_window(delta_t, c.a_plus, c.a_minus, c.tau_plus, c.tau_minus)


@LearningRuleRegistry.register("asymmetric_hebbian", aliases=["stdp"])
class AsymmetricHebbianLearningRule(AsymmetricSTDPLearningRule):
    """Classic STDP: causal pairs potentiate, anti-causal pairs depress.

    Example:
        >>> rule = AsymmetricHebbianLearningRule(1.0, 1.0, 20.0, 20.0)
        >>> round(rule.compute_delta_w(20.0), 4)
        0.3679
    """

    def compute_delta_w_tensor(self, delta_t: torch.Tensor) -> torch.Tensor:
        return self._hebbian_window(delta_t)


@LearningRuleRegistry.register("asymmetric_anti_hebbian")
class AsymmetricAntiHebbianLearningRule(AsymmetricSTDPLearningRule):
    """Inverted STDP: causal pairs depress, anti-causal pairs potentiate."""

    def compute_delta_w_tensor(self, delta_t: torch.Tensor) -> torch.Tensor:
        return -self._hebbian_window(delta_t)


class SymmetricSTDPLearningRule(STDPLearningRule):
    """Difference-of-Gaussians STDP family (depends on |Δt| only).

    Args:
        a_plus: Scale of the positive lobes of G
        a_minus: Scale of the negative lobes of G
        sigma_plus: Width of the positive Gaussian
        sigma_minus: Width of the subtracted Gaussian
    """

    CONFIG_CLASS = SymmetricSTDPConfig
    PARAM_NAMES = ("a_plus", "a_minus", "sigma_plus", "sigma_minus")

    def __init__(
        self,
        a_plus: float = 1.0,
        a_minus: float = 1.0,
        sigma_plus: float = 5.0,
        sigma_minus: float = 15.0,
        device: str = "cpu",
    ):
        self.config = SymmetricSTDPConfig(
            a_plus=a_plus,
            a_minus=a_minus,
            sigma_plus=sigma_plus,
            sigma_minus=sigma_minus,
            device=device,
        )

    def _hebbian_window(self, delta_t: torch.Tensor) -> torch.Tensor:
        c = self.config
        return symmetric_stdp_window(delta_t, c.a_plus, c.a_minus, c.sigma_plus, c.sigma_minus)


@LearningRuleRegistry.register("symmetric_hebbian")
class SymmetricHebbianLearningRule(SymmetricSTDPLearningRule):
    """Symmetric STDP scaling G by -a_plus (G > 0) or -a_minus (G < 0)."""

    def compute_delta_w_tensor(self, delta_t: torch.Tensor) -> torch.Tensor:
        return self._hebbian_window(delta_t)


@LearningRuleRegistry.register("symmetric_anti_hebbian")
class SymmetricAntiHebbianLearningRule(SymmetricSTDPLearningRule):
    """Negation of the symmetric Hebbian rule."""

    def compute_delta_w_tensor(self, delta_t: torch.Tensor) -> torch.Tensor:
        return -self._hebbian_window(delta_t)


@LearningRuleRegistry.register("degenerate", aliases=["none"])
class DegenerateLearningRule(STDPLearningRule):
    """Rule that never changes weights."""

    CONFIG_CLASS = BaseConfig

    def __init__(self, device: str = "cpu"):
        self.config = BaseConfig(device=device)

    def compute_delta_w_tensor(self, delta_t: torch.Tensor) -> torch.Tensor:
        return torch.zeros_like(torch.as_tensor(delta_t, dtype=torch.float64))

    def get_params(self) -> np.ndarray:
        return np.zeros(N_RULE_PARAMS, dtype=np.float64)

    def set_params(self, params: ParamsLike) -> None:
        # No parameters to update
        pass

    def __repr__(self) -> str:
        return "DegenerateLearningRule()"


__all__ = [
    "STDPLearningRule",
    "AsymmetricSTDPLearningRule",
    "AsymmetricHebbianLearningRule",
    "AsymmetricAntiHebbianLearningRule",
    "SymmetricSTDPLearningRule",
    "SymmetricHebbianLearningRule",
    "SymmetricAntiHebbianLearningRule",
    "DegenerateLearningRule",
]
