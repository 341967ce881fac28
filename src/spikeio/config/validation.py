"""
Configuration validation for SpikeIO.

This module provides declarative validation so that invalid construction
parameters (non-positive frequencies, non-positive bin or window counts)
are rejected immediately, before any component is used.

Validation Features:
- Declarative validation rules via ValidatedConfig mixin
- Predefined validators (positive, finite, positive_integer)
"""

from __future__ import annotations

import math
import numbers
from typing import Any, Callable, Dict, List, Tuple

from spikeio.errors import ConfigValidationError

# =============================================================================
# DECLARATIVE VALIDATION FRAMEWORK
# =============================================================================


class ValidatorRegistry:
    """Registry of predefined validation rules.

    Usage:
        validator = ValidatorRegistry.get_validator('positive')
        validator(0.5, 'frequency')  # Passes
        validator(-0.1, 'frequency')  # Raises ConfigValidationError
    """

    _validators: Dict[str, Callable[[Any, str], None]] = {}

    @classmethod
    def register(cls, name: str, validator: Callable[[Any, str], None]) -> None:
        """Register a validation function."""
        cls._validators[name] = validator

    @classmethod
    def get_validator(cls, rule: str) -> Callable[[Any, str], None]:
        """Get validator by name."""
        if rule in cls._validators:
            return cls._validators[rule]

        raise ValueError(f"Unknown validation rule: {rule}")


def _require_numeric(value: Any, name: str) -> None:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise ConfigValidationError(f"{name} must be numeric, got {type(value)}")


def _register_builtin_validators() -> None:
    """Register standard validation rules."""

    def positive(value: Any, name: str) -> None:
        """Value must be > 0."""
        _require_numeric(value, name)
        if value <= 0:
            raise ConfigValidationError(f"{name}={value} must be positive")

    def non_negative(value: Any, name: str) -> None:
        """Value must be >= 0."""
        _require_numeric(value, name)
        if value < 0:
            raise ConfigValidationError(f"{name}={value} must be non-negative")

    def finite(value: Any, name: str) -> None:
        """Value must be finite (not inf or nan)."""
        _require_numeric(value, name)
        if not math.isfinite(value):
            raise ConfigValidationError(f"{name}={value} must be finite (not inf/nan)")

    def positive_integer(value: Any, name: str) -> None:
        """Value must be a positive integer."""
        if isinstance(value, bool) or not isinstance(value, numbers.Integral):
            raise ConfigValidationError(f"{name} must be integer, got {type(value)}")
        if value <= 0:
            raise ConfigValidationError(f"{name}={value} must be positive integer")

    ValidatorRegistry.register('positive', positive)
    ValidatorRegistry.register('non_negative', non_negative)
    ValidatorRegistry.register('finite', finite)
    ValidatorRegistry.register('positive_integer', positive_integer)


_register_builtin_validators()


class ValidatedConfig:
    """Mixin for declarative config validation.

    Usage:
        @dataclass
        class MyConfig(ValidatedConfig):
            frequency: float = 50.0
            n_windows: int = 10

            _validation_rules = {
                'frequency': ('positive', 'finite'),
                'n_windows': ('positive_integer',),
            }

    The validation runs automatically in __post_init__.
    """

    _validation_rules: Dict[str, Tuple[str, ...]] = {}

    def __post_init__(self) -> None:
        self.validate_config()

    def validate_config(self) -> None:
        """Validate configuration based on _validation_rules.

        Raises:
            ConfigValidationError: If any validation fails
        """
        errors: List[str] = []

        for field_name, rules in self._validation_rules.items():
            if not hasattr(self, field_name):
                errors.append(f"Validation rule for non-existent field: {field_name}")
                continue

            value = getattr(self, field_name)

            for rule in rules:
                try:
                    validator = ValidatorRegistry.get_validator(rule)
                    validator(value, field_name)
                except ConfigValidationError as e:
                    errors.append(str(e))

        if errors:
            error_msg = (
                f"{self.__class__.__name__} validation failed:\n" +
                "\n".join(f"  • {e}" for e in errors)
            )
            raise ConfigValidationError(error_msg)


def validate_frequency(frequency: float, name: str = "frequency") -> float:
    """Validate a frequency supplied after construction (e.g. set_frequency).

    Raises:
        ConfigValidationError: If the frequency is not a positive finite number
    """
    for rule in ('positive', 'finite'):
        ValidatorRegistry.get_validator(rule)(frequency, name)
    return float(frequency)


__all__ = [
    "ValidatorRegistry",
    "ValidatedConfig",
    "validate_frequency",
]
