"""
STDP learning rules.

Rules are registered by name in :class:`LearningRuleRegistry` when this
package is imported:

    >>> from spikeio.learning import create_learning_rule
    >>> rule = create_learning_rule("asymmetric_anti_hebbian", tau_plus=10.0)
"""

from spikeio.learning.rule_registry import LearningRuleRegistry, create_learning_rule
from spikeio.learning.rules import (
    AsymmetricAntiHebbianLearningRule,
    AsymmetricHebbianLearningRule,
    AsymmetricSTDPLearningRule,
    DegenerateLearningRule,
    STDPLearningRule,
    SymmetricAntiHebbianLearningRule,
    SymmetricHebbianLearningRule,
    SymmetricSTDPLearningRule,
)
from spikeio.learning.rule_factory import (
    create_learning_rule_from_reals,
    create_learning_rules,
    scale_parameter,
    scale_parameters,
)
from spikeio.learning.pairing import SpikeHistory, compute_pairwise_delta_w
from spikeio.learning.stdp import (
    difference_of_gaussians,
    exponential_stdp_window,
    gaussian,
    symmetric_stdp_window,
)

__all__ = [
    # Registry
    "LearningRuleRegistry",
    "create_learning_rule",
    # Rules
    "STDPLearningRule",
    "AsymmetricSTDPLearningRule",
    "AsymmetricHebbianLearningRule",
    "AsymmetricAntiHebbianLearningRule",
    "SymmetricSTDPLearningRule",
    "SymmetricHebbianLearningRule",
    "SymmetricAntiHebbianLearningRule",
    "DegenerateLearningRule",
    # Factory
    "scale_parameter",
    "scale_parameters",
    "create_learning_rule_from_reals",
    "create_learning_rules",
    # Pairing
    "compute_pairwise_delta_w",
    "SpikeHistory",
    # Windows
    "exponential_stdp_window",
    "gaussian",
    "difference_of_gaussians",
    "symmetric_stdp_window",
]
