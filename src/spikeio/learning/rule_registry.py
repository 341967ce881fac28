"""
Learning Rule Registry.

Provides a registration and factory system for STDP learning rules, so that
rules can be created by name from configuration files or evolved genomes.

Architecture:
=============
    LearningRuleRegistry
        ├── "asymmetric_hebbian" → AsymmetricHebbianLearningRule
        ├── "asymmetric_anti_hebbian" → AsymmetricAntiHebbianLearningRule
        ├── "symmetric_hebbian" → SymmetricHebbianLearningRule
        ├── "symmetric_anti_hebbian" → SymmetricAntiHebbianLearningRule
        └── "degenerate" → DegenerateLearningRule

Usage Example:
==============
    @LearningRuleRegistry.register("asymmetric_hebbian", aliases=["stdp"])
    class AsymmetricHebbianLearningRule(AsymmetricSTDPLearningRule):
        ...

    rule = create_learning_rule("asymmetric_hebbian", a_plus=0.5, tau_plus=10.0)
    LearningRuleRegistry.list_rules()
"""

from __future__ import annotations

import inspect
import logging
from typing import TYPE_CHECKING, Any, Callable, Dict, List, Optional, Type

if TYPE_CHECKING:
    from spikeio.learning.rules import STDPLearningRule

logger = logging.getLogger(__name__)


class LearningRuleRegistry:
    """Registry for all STDP learning rules.

    Attributes:
        _registry: Dict mapping rule name to rule class
        _aliases: Dict mapping alias to canonical name
        _metadata: Rule metadata (class name, description, aliases)
    """

    _registry: Dict[str, Type["STDPLearningRule"]] = {}
    _aliases: Dict[str, str] = {}
    _metadata: Dict[str, Dict[str, Any]] = {}

    @classmethod
    def register(
        cls,
        name: str,
        *,
        aliases: Optional[List[str]] = None,
        description: str = "",
    ) -> Callable[[Type["STDPLearningRule"]], Type["STDPLearningRule"]]:
        """Decorator to register a learning rule.

        Args:
            name: Primary name for the rule
            aliases: Optional list of alternative names
            description: Human-readable description

        Raises:
            ValueError: If name or alias already registered, or target is not a class
        """
        def decorator(rule_class: Type["STDPLearningRule"]) -> Type["STDPLearningRule"]:
            if not inspect.isclass(rule_class):
                raise ValueError(f"Learning rule must be a class, got {type(rule_class)}")

            if name in cls._registry:
                raise ValueError(
                    f"Learning rule '{name}' already registered as {cls._registry[name].__name__}"
                )

            cls._registry[name] = rule_class

            if aliases:
                for alias in aliases:
                    if alias in cls._aliases:
                        raise ValueError(
                            f"Alias '{alias}' already registered for '{cls._aliases[alias]}'"
                        )
                    cls._aliases[alias] = name

            doc = (rule_class.__doc__ or "").strip().splitlines()
            cls._metadata[name] = {
                "class": rule_class.__name__,
                "description": description or (doc[0] if doc else ""),
                "aliases": aliases or [],
            }
            logger.debug("Registered learning rule '%s' -> %s", name, rule_class.__name__)
            return rule_class

        return decorator

    @classmethod
    def get(cls, name: str) -> Type["STDPLearningRule"]:
        """Rule class registered under a name or alias.

        Raises:
            ValueError: If the rule is not registered
        """
        canonical_name = cls._aliases.get(name, name)
        if canonical_name not in cls._registry:
            raise ValueError(
                f"Unknown learning rule: '{name}'. "
                f"Available rules: {', '.join(cls.list_rules(include_aliases=True))}"
            )
        return cls._registry[canonical_name]

    @classmethod
    def create(cls, name: str, config: Any = None, **kwargs: Any) -> "STDPLearningRule":
        """Create a learning rule instance.

        Args:
            name: Rule name (or alias)
            config: Optional config dataclass; hyperparameters are taken from it
            **kwargs: Hyperparameters passed to the rule constructor

        Raises:
            ValueError: If the rule is unknown or rejects the given arguments
            ConfigValidationError: If a hyperparameter is invalid
        """
        rule_class = cls.get(name)
        try:
            if config is not None:
                return rule_class.from_config(config, **kwargs)
            return rule_class(**kwargs)
        except TypeError as e:
            raise ValueError(f"Failed to create learning rule '{name}': {e}") from e

    @classmethod
    def list_rules(cls, include_aliases: bool = False) -> List[str]:
        """List all registered rule names (and aliases if requested)."""
        rules = list(cls._registry.keys())
        if include_aliases:
            rules.extend(cls._aliases.keys())
        return sorted(set(rules))

    @classmethod
    def get_metadata(cls, name: str) -> Dict[str, Any]:
        """Metadata of a registered rule.

        Raises:
            ValueError: If the rule is not registered
        """
        canonical_name = cls._aliases.get(name, name)
        if canonical_name not in cls._metadata:
            raise ValueError(f"Unknown learning rule: '{name}'")
        return cls._metadata[canonical_name]

    @classmethod
    def is_registered(cls, name: str) -> bool:
        """Check if a rule (or alias) is registered."""
        return cls._aliases.get(name, name) in cls._registry

    @classmethod
    def unregister(cls, name: str) -> None:
        """Remove a rule and its aliases (mainly for tests and plugins).

        Raises:
            ValueError: If the rule is not registered
        """
        if name not in cls._registry:
            raise ValueError(f"Learning rule '{name}' not registered")
        del cls._registry[name]
        del cls._metadata[name]
        for alias in [a for a, target in cls._aliases.items() if target == name]:
            del cls._aliases[alias]


def create_learning_rule(name: str, config: Any = None, **kwargs: Any) -> "STDPLearningRule":
    """Shorthand for :meth:`LearningRuleRegistry.create`."""
    return LearningRuleRegistry.create(name, config, **kwargs)


__all__ = ["LearningRuleRegistry", "create_learning_rule"]
