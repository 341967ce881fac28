"""Tests for STDP learning rules."""

import math

import numpy as np
import pytest
import torch

from spikeio.core.protocols import Parametrized
from spikeio.errors import ConfigValidationError
from spikeio.learning import (
    AsymmetricAntiHebbianLearningRule,
    AsymmetricHebbianLearningRule,
    DegenerateLearningRule,
    SymmetricAntiHebbianLearningRule,
    SymmetricHebbianLearningRule,
    difference_of_gaussians,
)

DELAYS = [-40.0, -20.0, -3.5, -0.1, 0.0, 0.1, 3.5, 20.0, 40.0]


def normal_density(x, sigma):
    return math.exp(-0.5 * (x / sigma) ** 2) / (sigma * math.sqrt(2 * math.pi))


class TestAsymmetricRules:
    """Tests for the exponential-window families."""

    def test_anti_hebbian_reference_values(self):
        """Test AntiHebbian(1, 1, 20, 20) at ±20 and 0."""
        rule = AsymmetricAntiHebbianLearningRule(a_plus=1.0, a_minus=1.0, tau_plus=20.0, tau_minus=20.0)

        assert rule.compute_delta_w(20.0) == pytest.approx(-0.3679, abs=1e-4)
        assert rule.compute_delta_w(-20.0) == pytest.approx(0.3679, abs=1e-4)
        assert rule.compute_delta_w(0.0) == 0.0

    def test_hebbian_window(self):
        """Test causal pairs potentiate and anti-causal pairs depress."""
        rule = AsymmetricHebbianLearningRule(a_plus=0.5, a_minus=0.25, tau_plus=10.0, tau_minus=5.0)

        assert rule.compute_delta_w(10.0) == pytest.approx(0.5 * math.exp(-1))
        assert rule.compute_delta_w(-5.0) == pytest.approx(-0.25 * math.exp(-1))
        assert rule.compute_delta_w(0.0) == 0.0

    @pytest.mark.parametrize("delta_t", DELAYS)
    def test_anti_hebbian_negates_hebbian(self, delta_t):
        """Test the anti-Hebbian rule is the exact negation of the Hebbian one."""
        hebbian = AsymmetricHebbianLearningRule(0.7, 0.3, 4.0, 8.0)
        anti = AsymmetricAntiHebbianLearningRule(0.7, 0.3, 4.0, 8.0)

        assert anti.compute_delta_w(delta_t) == -hebbian.compute_delta_w(delta_t)

    def test_large_delays_stay_finite(self):
        """Test extreme timing differences do not overflow."""
        rule = AsymmetricHebbianLearningRule(tau_plus=1.0, tau_minus=1.0)

        assert rule.compute_delta_w(-1e6) == pytest.approx(0.0)
        assert rule.compute_delta_w(1e6) == pytest.approx(0.0)
        assert torch.isfinite(rule.compute_delta_w_tensor(torch.tensor([-1e6, 1e6]))).all()

    def test_tensor_evaluation_matches_scalar(self):
        """Test the tensor kernel agrees elementwise with the scalar call."""
        rule = AsymmetricHebbianLearningRule()
        delays = torch.tensor(DELAYS, dtype=torch.float64)
        values = rule.compute_delta_w_tensor(delays)

        assert values.shape == delays.shape
        assert values.tolist() == pytest.approx([rule(d) for d in DELAYS])


class TestSymmetricRules:
    """Tests for the difference-of-Gaussians families."""

    def test_hebbian_at_zero(self):
        """Test the positive lobe at Δt=0 is scaled by -a_plus."""
        rule = SymmetricHebbianLearningRule(a_plus=2.0, a_minus=1.0, sigma_plus=5.0, sigma_minus=15.0)
        g = normal_density(0.0, 5.0) - normal_density(0.0, 15.0)

        assert g > 0
        assert rule.compute_delta_w(0.0) == pytest.approx(-2.0 * g)

    def test_hebbian_negative_lobe(self):
        """Test the negative lobe of G is scaled by -a_minus."""
        rule = SymmetricHebbianLearningRule(a_plus=2.0, a_minus=3.0, sigma_plus=5.0, sigma_minus=15.0)
        g = normal_density(20.0, 5.0) - normal_density(20.0, 15.0)

        assert g < 0
        assert rule.compute_delta_w(20.0) == pytest.approx(-3.0 * g)

    @pytest.mark.parametrize("delta_t", [0.5, 3.5, 12.0, 40.0])
    def test_symmetric_in_delay(self, delta_t):
        """Test the window depends on |Δt| only."""
        rule = SymmetricHebbianLearningRule()

        assert rule.compute_delta_w(delta_t) == pytest.approx(rule.compute_delta_w(-delta_t))

    @pytest.mark.parametrize("delta_t", DELAYS)
    def test_anti_hebbian_negates_hebbian(self, delta_t):
        """Test the anti-Hebbian rule is the exact negation of the Hebbian one."""
        hebbian = SymmetricHebbianLearningRule(3.0, 6.0, 4.0, 16.0)
        anti = SymmetricAntiHebbianLearningRule(3.0, 6.0, 4.0, 16.0)

        assert anti.compute_delta_w(delta_t) == -hebbian.compute_delta_w(delta_t)

    def test_difference_of_gaussians(self):
        """Test the kernel against the closed form."""
        value = difference_of_gaussians(torch.tensor(2.0, dtype=torch.float64), 5.0, 15.0)

        assert value.item() == pytest.approx(normal_density(2.0, 5.0) - normal_density(2.0, 15.0))


class TestDegenerateRule:
    """Tests for the rule that never learns."""

    @pytest.mark.parametrize("delta_t", DELAYS + [1e9, -1e9])
    def test_always_zero(self, delta_t):
        """Test every timing difference yields zero."""
        assert DegenerateLearningRule().compute_delta_w(delta_t) == 0.0

    def test_params_are_zero(self):
        """Test the parameter vector is four zeros."""
        params = DegenerateLearningRule().get_params()

        assert params.shape == (4,)
        assert not params.any()

    def test_set_params_ignored(self):
        """Test setting parameters has no effect."""
        rule = DegenerateLearningRule()
        rule.set_params([1.0, 2.0, 3.0, 4.0])

        assert not rule.get_params().any()
        assert rule.compute_delta_w(1.0) == 0.0


class TestParameterVector:
    """Tests for get_params / set_params."""

    def test_asymmetric_order(self):
        """Test asymmetric parameters are [a_plus, a_minus, tau_plus, tau_minus]."""
        rule = AsymmetricHebbianLearningRule(0.1, 0.2, 3.0, 4.0)
        params = rule.get_params()

        assert isinstance(params, np.ndarray)
        assert params.dtype == np.float64
        assert params.tolist() == [0.1, 0.2, 3.0, 4.0]

    def test_symmetric_order(self):
        """Test symmetric parameters are [a_plus, a_minus, sigma_plus, sigma_minus]."""
        rule = SymmetricAntiHebbianLearningRule(1.5, 2.5, 4.0, 14.0)

        assert rule.get_params().tolist() == [1.5, 2.5, 4.0, 14.0]

    def test_set_params(self):
        """Test set_params replaces every hyperparameter."""
        rule = AsymmetricAntiHebbianLearningRule()
        rule.set_params(np.array([1.0, 1.0, 20.0, 20.0]))

        assert rule.get_params().tolist() == [1.0, 1.0, 20.0, 20.0]
        assert rule.compute_delta_w(20.0) == pytest.approx(-math.exp(-1))

    def test_set_params_wrong_length(self):
        """Test vectors of the wrong length are rejected."""
        rule = SymmetricHebbianLearningRule()

        with pytest.raises(ValueError, match="expects 4 parameters"):
            rule.set_params([1.0, 2.0, 3.0])

    def test_set_params_validates(self):
        """Test invalid hyperparameters are rejected and the old ones kept."""
        rule = AsymmetricHebbianLearningRule(0.1, 0.2, 3.0, 4.0)

        with pytest.raises(ConfigValidationError):
            rule.set_params([1.0, 1.0, -1.0, 1.0])
        assert rule.get_params().tolist() == [0.1, 0.2, 3.0, 4.0]

    def test_invalid_time_constant(self):
        """Test non-positive time constants are rejected at construction."""
        with pytest.raises(ConfigValidationError):
            AsymmetricHebbianLearningRule(tau_plus=0.0)
        with pytest.raises(ConfigValidationError):
            SymmetricHebbianLearningRule(sigma_minus=-2.0)

    def test_rules_are_parametrized(self):
        """Test every rule satisfies the parameter capability."""
        for rule in (
            AsymmetricHebbianLearningRule(),
            SymmetricAntiHebbianLearningRule(),
            DegenerateLearningRule(),
        ):
            assert isinstance(rule, Parametrized)
