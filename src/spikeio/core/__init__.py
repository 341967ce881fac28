"""Core abstractions of SpikeIO."""

from spikeio.core.protocols import Parametrized, Resettable, TimedRealFunction

__all__ = ["Parametrized", "Resettable", "TimedRealFunction"]
