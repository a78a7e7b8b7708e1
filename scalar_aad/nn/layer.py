from typing import List, Sequence
import numpy as np

from ..aad.core.node import Node
from ..aad.core.engine import zero_gradients
from .neuron import Neuron


class Layer:
    """Fully connected layer: `nout` independent neurons over the same inputs."""

    def __init__(self, nin: int, nout: int, rng=None):
        rng = np.random.default_rng(rng)
        self.neurons: List[Neuron] = [Neuron(nin, rng=rng) for _ in range(nout)]

    def __call__(self, inputs: Sequence) -> List[Node]:
        return [n(inputs) for n in self.neurons]

    def parameters(self) -> List[Node]:
        return [p for n in self.neurons for p in n.parameters()]

    def set_neurons(self, neurons: Sequence[Neuron]) -> None:
        self.neurons = list(neurons)

    def zero_grad(self) -> None:
        zero_gradients(self.parameters())

    def __repr__(self):
        nin = self.neurons[0].nin if self.neurons else 0
        return f"Layer(nin={nin}, nout={len(self.neurons)})"
