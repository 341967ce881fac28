"""
Learning rules from raw real-valued genotypes.

An evolutionary optimizer produces unconstrained reals; these helpers map
them onto valid learning rules. The two leading values select the family:

    params[0] > 0  → symmetric window, otherwise asymmetric
    params[1] > 0  → Hebbian, otherwise anti-Hebbian

The remaining four values are clipped to [-1, 1] and mapped linearly into
the family's hyperparameter bounds.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from spikeio.constants.learning import (
    ASYMMETRIC_MAX_PARAMS,
    ASYMMETRIC_MIN_PARAMS,
    N_RULE_PARAMS,
    N_RULE_SELECTOR_PARAMS,
    SYMMETRIC_MAX_PARAMS,
    SYMMETRIC_MIN_PARAMS,
)
from spikeio.learning.rules import (
    AsymmetricAntiHebbianLearningRule,
    AsymmetricHebbianLearningRule,
    STDPLearningRule,
    SymmetricAntiHebbianLearningRule,
    SymmetricHebbianLearningRule,
)


def scale_parameter(param: float, min_value: float, max_value: float) -> float:
    """Map a raw value (clipped to [-1, 1]) linearly onto [min_value, max_value].

    Example:
        >>> scale_parameter(1.0, 0.1, 1.0)
        1.0
        >>> scale_parameter(-5.0, 1.0, 10.0)
        1.0
    """
    param = max(min(float(param), 1.0), -1.0)
    return (param / 2 + 0.5) * (max_value - min_value) + min_value


def scale_parameters(params: Sequence[float], symmetric: bool) -> np.ndarray:
    """Scale four raw values into the bounds of a learning-rule family.

    Raises:
        ValueError: If ``params`` does not hold exactly four values
    """
    params = np.asarray(params, dtype=np.float64).ravel()
    if params.size != N_RULE_PARAMS:
        raise ValueError(f"Expected {N_RULE_PARAMS} parameters, received {params.size}")
    lower = SYMMETRIC_MIN_PARAMS if symmetric else ASYMMETRIC_MIN_PARAMS
    upper = SYMMETRIC_MAX_PARAMS if symmetric else ASYMMETRIC_MAX_PARAMS
    return np.array(
        [scale_parameter(p, lo, hi) for p, lo, hi in zip(params, lower, upper)],
        dtype=np.float64,
    )


def _select_rule(symmetry: float, hebbian: float) -> STDPLearningRule:
    if symmetry > 0:
        if hebbian > 0:
            return SymmetricHebbianLearningRule()
        return SymmetricAntiHebbianLearningRule()
    if hebbian > 0:
        return AsymmetricHebbianLearningRule()
    return AsymmetricAntiHebbianLearningRule()


def create_learning_rule_from_reals(
    params: Sequence[float],
    default_symmetric_params: Optional[Sequence[float]] = None,
    default_asymmetric_params: Optional[Sequence[float]] = None,
) -> STDPLearningRule:
    """Build a learning rule from a genotype.

    Two forms are accepted:

    - 6 reals: two selectors followed by four raw hyperparameters.
    - 2 reals: selectors only; the four raw hyperparameters come from
      ``default_symmetric_params`` or ``default_asymmetric_params``
      (all zeros, i.e. the middle of each bound, when omitted).

    Raises:
        ValueError: If ``params`` has neither 6 nor 2 entries
    """
    params = np.asarray(params, dtype=np.float64).ravel()
    if params.size == N_RULE_SELECTOR_PARAMS + N_RULE_PARAMS:
        raw = params[N_RULE_SELECTOR_PARAMS:]
    elif params.size == N_RULE_SELECTOR_PARAMS:
        defaults = default_symmetric_params if params[0] > 0 else default_asymmetric_params
        raw = np.zeros(N_RULE_PARAMS) if defaults is None else defaults
    else:
        raise ValueError(
            f"Expected {N_RULE_SELECTOR_PARAMS + N_RULE_PARAMS} or "
            f"{N_RULE_SELECTOR_PARAMS} parameters, received {params.size}"
        )

    rule = _select_rule(params[0], params[1])
    rule.set_params(scale_parameters(raw, symmetric=bool(params[0] > 0)))
    return rule


def create_learning_rules(
    params: Sequence[Sequence[float]],
    default_symmetric_params: Optional[Sequence[float]] = None,
    default_asymmetric_params: Optional[Sequence[float]] = None,
) -> List[STDPLearningRule]:
    """Apply :func:`create_learning_rule_from_reals` to each row of a matrix."""
    return [
        create_learning_rule_from_reals(row, default_symmetric_params, default_asymmetric_params)
        for row in params
    ]


__all__ = [
    "scale_parameter",
    "scale_parameters",
    "create_learning_rule_from_reals",
    "create_learning_rules",
]
