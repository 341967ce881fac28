"""
Protocols shared between SpikeIO components and external collaborators.
"""

from spikeio.core.protocols.capabilities import (
    Parametrized,
    Resettable,
    TimedRealFunction,
)

__all__ = [
    "Parametrized",
    "Resettable",
    "TimedRealFunction",
]
