from typing import List, Sequence
import numpy as np

from ..aad.core.node import Node
from ..aad.core.engine import zero_gradients
from .layer import Layer


class MLP:
    """
    Multilayer perceptron: a chain of tanh layers.

    MLP(3, [4, 4, 1]) maps 3 inputs through two hidden layers of width 4 to a
    single output. One generator is shared by every layer, so a single seed
    fixes all initial parameters.
    """

    def __init__(self, nin: int, nouts: Sequence[int], rng=None):
        rng = np.random.default_rng(rng)
        sizes = [nin] + list(nouts)
        self.layers: List[Layer] = [
            Layer(sizes[i], sizes[i + 1], rng=rng) for i in range(len(nouts))
        ]

    def __call__(self, inputs: Sequence) -> List[Node]:
        out = list(inputs)
        for layer in self.layers:
            out = layer(out)
        return out

    def parameters(self) -> List[Node]:
        return [p for layer in self.layers for p in layer.parameters()]

    def zero_grad(self) -> None:
        zero_gradients(self.parameters())

    def __repr__(self):
        return f"MLP of [{', '.join(str(layer) for layer in self.layers)}]"
