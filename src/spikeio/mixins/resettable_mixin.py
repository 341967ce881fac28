"""
Resettable State Mixin for SpikeIO Components.

Provides a standard interface for resetting the runtime state of encoders,
decoders and network adapters between episodes, while leaving configured
parameters (frequency, bin count, window count, rule hyperparameters)
untouched.
"""

from __future__ import annotations

from typing import Any, Dict, Iterable, Optional


class ResettableMixin:
    """Mixin for components with resettable runtime state.

    Usage:
        class MyDecoder(ResettableMixin):
            def __init__(self):
                self.ptr = 0

            def reset(self) -> None:
                '''Reset internal state for a new episode.'''
                self.ptr = 0

    Stateless components inherit the default no-op ``reset()``.
    """

    def reset(self) -> None:
        """Reset runtime state for a new episode.

        Note:
            Subclasses holding state across calls override this method.
            The default implementation is a no-op for stateless components.
        """

    def reset_standard_state(
        self,
        state_defaults: Optional[Dict[str, Any]] = None,
    ) -> None:
        """Helper to restore state attributes to their construction values.

        Args:
            state_defaults: Mapping of attribute name to the value it holds
                right after construction. Callables are invoked to build a
                fresh value (e.g. ``list`` for an empty carry-over set).

        Example:
            >>> class MyEncoder(ResettableMixin):
            ...     def reset(self) -> None:
            ...         self.reset_standard_state({"last_spike_time": 0.0})

        Note:
            Only resets attributes that already exist on the component.
            Silently skips missing attributes for flexibility.
        """
        if not state_defaults:
            return

        for attr, default in state_defaults.items():
            if hasattr(self, attr):
                setattr(self, attr, default() if callable(default) else default)


def reset_all(components: Iterable[ResettableMixin]) -> None:
    """Reset every component of a collection (e.g. one per channel)."""
    for component in components:
        component.reset()


__all__ = ["ResettableMixin", "reset_all"]
