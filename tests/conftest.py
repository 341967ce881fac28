"""Shared test fixtures and configuration."""

from typing import List, Sequence

import numpy as np
import pytest
import torch


@pytest.fixture(autouse=True)
def set_random_seed():
    """Ensure reproducible tests by setting all random seeds.

    This fixture runs automatically for every test to ensure deterministic behavior.
    """
    torch.manual_seed(42)
    np.random.seed(42)


class EchoNetwork:
    """Stand-in for an external spiking network.

    Output channel ``j`` re-emits the spike train received on input channel
    ``j % input_dimension``. Records calls, resets and parameters so adapters
    can be checked without a neuron simulator.
    """

    def __init__(self, input_dimension: int, output_dimension: int):
        self._input_dimension = input_dimension
        self._output_dimension = output_dimension
        self.calls: List[tuple] = []
        self.n_resets = 0
        self.params = np.arange(3, dtype=np.float64)

    @property
    def input_dimension(self) -> int:
        return self._input_dimension

    @property
    def output_dimension(self) -> int:
        return self._output_dimension

    def apply(self, t: float, inputs: Sequence[torch.Tensor]) -> List[torch.Tensor]:
        self.calls.append((t, list(inputs)))
        return [
            torch.as_tensor(inputs[j % self._input_dimension]).clone()
            for j in range(self._output_dimension)
        ]

    def reset(self) -> None:
        self.n_resets += 1

    def get_params(self) -> np.ndarray:
        return self.params.copy()

    def set_params(self, params: Sequence[float]) -> None:
        self.params = np.asarray(params, dtype=np.float64)


class StatelessNetwork:
    """Network exposing only the apply capability."""

    input_dimension = 1
    output_dimension = 1

    def apply(self, t: float, inputs: Sequence[torch.Tensor]) -> List[torch.Tensor]:
        return list(inputs)


@pytest.fixture
def echo_network():
    """Two-input, two-output echo network."""
    return EchoNetwork(2, 2)


@pytest.fixture
def make_echo_network():
    """Factory for echo networks of arbitrary dimensions."""
    return EchoNetwork


@pytest.fixture
def stateless_network():
    """Network without reset or parameters."""
    return StatelessNetwork()


@pytest.fixture
def window_size():
    """Standard window duration (an exact binary fraction)."""
    return 0.125
