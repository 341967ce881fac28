"""
Configurable Component Mixin for SpikeIO.

Provides a standard factory method pattern for instantiating components
from their validated dataclass configs.
"""

from __future__ import annotations

import dataclasses
from typing import Any, Optional, Type


class ConfigurableMixin:
    """Mixin for components that can be created from a config dataclass.

    Subclasses must define CONFIG_CLASS. The constructor of the subclass
    must accept the fields of CONFIG_CLASS (other than ``device``) as
    keyword arguments.
    """

    CONFIG_CLASS: Optional[Type[Any]] = None

    @classmethod
    def from_config(cls, config: Any, **kwargs: Any):
        """Create instance from a config dataclass.

        Args:
            config: Config instance (a CONFIG_CLASS instance; fields added by a
                config subclass are not forwarded)
            **kwargs: Additional arguments passed to constructor

        Returns:
            Component instance

        Raises:
            NotImplementedError: If CONFIG_CLASS not defined
            TypeError: If config is not a CONFIG_CLASS instance
        """
        if cls.CONFIG_CLASS is None:
            raise NotImplementedError(
                f"{cls.__name__} must define CONFIG_CLASS "
                f"(e.g., 'EncoderConfig')"
            )
        if not isinstance(config, cls.CONFIG_CLASS):
            raise TypeError(
                f"{cls.__name__} expects config type {cls.CONFIG_CLASS.__name__}, "
                f"got {type(config).__name__}"
            )

        fields = {
            f.name: getattr(config, f.name)
            for f in dataclasses.fields(cls.CONFIG_CLASS)
        }
        fields.update(kwargs)
        return cls(**fields)  # type: ignore[call-arg]


__all__ = ["ConfigurableMixin"]
