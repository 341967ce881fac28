"""Mixin classes for codec and learning components.

Available Mixins:
- ResettableMixin: Standard interface for resetting runtime state
- ConfigurableMixin: Factory method pattern for config instantiation
"""

from spikeio.mixins.resettable_mixin import ResettableMixin, reset_all
from spikeio.mixins.configurable_mixin import ConfigurableMixin

__all__ = [
    'ResettableMixin',
    'ConfigurableMixin',
    'reset_all',
]
