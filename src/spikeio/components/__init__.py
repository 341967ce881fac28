"""
Reusable components shared by encoders, decoders and network adapters.
"""

from spikeio.components.coding import (
    InputConverter,
    OutputConverter,
)

__all__ = [
    "InputConverter",
    "OutputConverter",
]
