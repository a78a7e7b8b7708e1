# nn/__init__.py
# Neuron / Layer / MLP composed from scalar graph nodes

from .neuron import Neuron, ArityMismatchError
from .layer import Layer
from .mlp import MLP

__all__ = ["Neuron", "ArityMismatchError", "Layer", "MLP"]
