# aad/core/__init__.py

"""
Core public API for the scalar AAD package.

Exports:
    Node              : Scalar computation-graph vertex (value, gradient, provenance).
    OpKind            : Tag naming the primitive that produced a node.
    topological_order : Leaves-first ordering of the graph below a root.
    backward          : Run a single reverse pass from a scalar output.
    zero_gradients    : Reset accumulators of a graph or of a parameter list.
    grad, grads       : Convenience: derivative(s) of a scalar function.
    value             : Convenience: extract the primal value from a Node.
"""

from .node import Node, OpKind
from .engine import topological_order, backward, zero_gradients, apply_local_gradient
from .seeds import grad, grads, grads_list, value

__all__ = [
    "Node", "OpKind",
    "topological_order", "backward", "zero_gradients", "apply_local_gradient",
    "grad", "grads", "grads_list", "value",
]
