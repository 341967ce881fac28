"""
Capability protocols for components exchanged with an external simulator.

The external spiking-network simulator and the optimizer that tunes
parameters depend only on these narrow capabilities, never on concrete
encoder, decoder or learning-rule classes:

- :class:`TimedRealFunction`: "can be applied to a time and an input"
- :class:`Resettable`: "can be reset for a new episode"
- :class:`Parametrized`: "has a flat parameter vector"
"""

from __future__ import annotations

from typing import Any, Protocol, Sequence, runtime_checkable

import numpy as np


@runtime_checkable
class Resettable(Protocol):
    """Component whose runtime state can be returned to its initial value."""

    def reset(self) -> None:
        """Reset runtime state, keeping configured parameters."""
        ...


@runtime_checkable
class Parametrized(Protocol):
    """Component exposing its hyperparameters as a flat vector."""

    def get_params(self) -> np.ndarray:
        """Return parameters as a 1-D float array in a fixed order."""
        ...

    def set_params(self, params: Sequence[float]) -> None:
        """Overwrite parameters from a 1-D vector in the same order."""
        ...


@runtime_checkable
class TimedRealFunction(Protocol):
    """Function of the current time and an input vector.

    Spiking networks consumed by the network adapters implement this with
    one spike train per input and output channel.
    """

    @property
    def input_dimension(self) -> int:
        """Number of input channels."""
        ...

    @property
    def output_dimension(self) -> int:
        """Number of output channels."""
        ...

    def apply(self, t: float, inputs: Sequence[Any]) -> Sequence[Any]:
        """Advance to time ``t`` and return one output per channel."""
        ...


__all__ = ["Resettable", "Parametrized", "TimedRealFunction"]
