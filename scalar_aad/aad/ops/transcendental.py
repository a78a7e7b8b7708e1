# aad/ops/transcendental.py
import numpy as np
from ..core.node import Node, OpKind
from .arithmetic import _as_node


def exp(x):
    x = _as_node(x)
    return Node.from_op(np.exp(x.value), (x,), OpKind.EXP)


def tanh(x):
    """
    Hyperbolic tangent as a single primitive.

    The reverse rule uses the closed form 1 - tanh(x)^2 on the output value,
    so no exp/divide sub-graph is recorded underneath it.
    """
    x = _as_node(x)
    return Node.from_op(np.tanh(x.value), (x,), OpKind.TANH)
