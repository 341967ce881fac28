"""Tests for configuration dataclasses and declarative validation."""

import math

import pytest
import torch

from spikeio.config import (
    AsymmetricSTDPConfig,
    BaseConfig,
    DecoderConfig,
    EncoderConfig,
    MemoryEncoderConfig,
    MovingAverageDecoderConfig,
    OneHotConfig,
    QuantizedEncoderConfig,
    QuantizedMovingAverageDecoderConfig,
    SymmetricSTDPConfig,
    ValidatorRegistry,
    validate_frequency,
)
from spikeio.errors import ConfigurationError, ConfigValidationError, SpikeIOError


class TestDefaults:
    """Tests for default construction parameters."""

    def test_coding_defaults(self):
        """Test default frequencies and counts."""
        assert EncoderConfig().frequency == 600.0
        assert MemoryEncoderConfig().max_memory == 1.0
        assert QuantizedEncoderConfig().frequency == 50.0
        assert QuantizedEncoderConfig().min_frequency == 5.0
        assert DecoderConfig().frequency == 300.0
        assert MovingAverageDecoderConfig().n_windows == 10
        assert QuantizedMovingAverageDecoderConfig().frequency == 50.0

    def test_device(self):
        """Test the torch device is derived from the config."""
        assert BaseConfig().get_torch_device() == torch.device("cpu")


class TestValidation:
    """Tests for construction-time validation."""

    @pytest.mark.parametrize("frequency", [0.0, -1.0, math.inf, math.nan])
    def test_invalid_frequency(self, frequency):
        """Test non-positive or non-finite frequencies are rejected."""
        with pytest.raises(ConfigValidationError):
            EncoderConfig(frequency=frequency)
        with pytest.raises(ConfigValidationError):
            DecoderConfig(frequency=frequency)

    def test_negative_min_frequency(self):
        """Test the quantized minimum frequency may not be negative."""
        with pytest.raises(ConfigValidationError):
            QuantizedEncoderConfig(min_frequency=-1.0)
        assert QuantizedEncoderConfig(min_frequency=0.0).min_frequency == 0.0

    @pytest.mark.parametrize("n_windows", [0, -3, 2.5, True])
    def test_invalid_window_count(self, n_windows):
        """Test window counts must be positive integers."""
        with pytest.raises(ConfigValidationError):
            MovingAverageDecoderConfig(n_windows=n_windows)

    def test_invalid_bin_count(self):
        """Test bin counts must be positive integers."""
        with pytest.raises(ConfigValidationError):
            OneHotConfig(n_bins=0)

    def test_non_numeric(self):
        """Test non-numeric values are rejected."""
        with pytest.raises(ConfigValidationError, match="must be numeric"):
            EncoderConfig(frequency="fast")

    def test_errors_collected(self):
        """Test every failing field is reported at once."""
        with pytest.raises(ConfigValidationError) as exc_info:
            AsymmetricSTDPConfig(tau_plus=0.0, tau_minus=-1.0)

        message = str(exc_info.value)
        assert "tau_plus" in message
        assert "tau_minus" in message

    def test_symmetric_widths(self):
        """Test Gaussian widths must be positive."""
        with pytest.raises(ConfigValidationError):
            SymmetricSTDPConfig(sigma_plus=0.0)

    def test_error_hierarchy(self):
        """Test validation errors are configuration errors."""
        assert issubclass(ConfigValidationError, ConfigurationError)
        assert issubclass(ConfigurationError, SpikeIOError)


class TestValidatorRegistry:
    """Tests for the validator registry."""

    def test_non_negative_rule(self):
        """Test registered rules are looked up by name."""
        validator = ValidatorRegistry.get_validator("non_negative")
        validator(0.0, "value")

        with pytest.raises(ConfigValidationError, match="must be non-negative"):
            validator(-0.5, "value")

    def test_compound_rules_not_parsed(self):
        """Test only registered names are accepted as rules."""
        with pytest.raises(ValueError, match="Unknown validation rule"):
            ValidatorRegistry.get_validator("range(0, 1)")

    def test_unknown_rule(self):
        """Test unknown rules are programming errors."""
        with pytest.raises(ValueError):
            ValidatorRegistry.get_validator("prime")

    def test_validate_frequency(self):
        """Test standalone frequency validation."""
        assert validate_frequency(25) == 25.0
        with pytest.raises(ConfigValidationError):
            validate_frequency(0.0)
