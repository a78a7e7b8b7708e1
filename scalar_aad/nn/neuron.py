"""
Single tanh neuron built from graph nodes.

    out = tanh(sum_i x_i * w_i + b)

Weights and bias are leaf nodes drawn uniformly from [-1, 1]. The random
source is a numpy Generator passed in by the caller (or built from a seed),
so initialisation is reproducible and never touches global RNG state.
"""

from typing import List, Sequence
import numpy as np

from ..aad.core.node import Node
from ..aad.core.engine import zero_gradients
from ..aad.ops.arithmetic import _as_node


class ArityMismatchError(ValueError):
    """Input vector length differs from the neuron's weight count."""


class Neuron:
    """
    Attributes:
        weights (List[Node]): one leaf per input
        bias (Node): bias leaf
    """

    def __init__(self, nin: int, rng=None):
        """
        Args:
            nin: number of inputs
            rng: np.random.Generator, seed, or None (fresh entropy)
        """
        if nin < 1:
            raise ValueError(f"a neuron needs at least one input, got nin={nin}")
        rng = np.random.default_rng(rng)
        self.weights: List[Node] = [Node.leaf(w) for w in rng.uniform(-1.0, 1.0, size=nin)]
        self.bias: Node = Node.leaf(rng.uniform(-1.0, 1.0))

    def __call__(self, inputs: Sequence) -> Node:
        if len(inputs) != len(self.weights):
            raise ArityMismatchError(
                f"num of inputs ({len(inputs)}) do not equal num of weights ({len(self.weights)})"
            )
        xs = [_as_node(x) for x in inputs]
        act = sum((x * w for x, w in zip(xs, self.weights)), Node.leaf(0.0))
        return (act + self.bias).tanh()

    @property
    def nin(self) -> int:
        return len(self.weights)

    def set_weights(self, weights: Sequence) -> None:
        self.weights = [_as_node(w) for w in weights]

    def set_bias(self, bias) -> None:
        self.bias = _as_node(bias)

    def parameters(self) -> List[Node]:
        return self.weights + [self.bias]

    def zero_grad(self) -> None:
        zero_gradients(self.parameters())

    def __repr__(self):
        return f"Neuron(nin={self.nin})"
