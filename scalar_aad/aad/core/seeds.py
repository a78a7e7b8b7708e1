# aad/core/seeds.py

#-----------------------------------------------------------------------------
# We "plant" a seed (dy/dy = 1) at the scalar output and let gradients grow
# backwards through the graph.
#-----------------------------------------------------------------------------
from __future__ import annotations
from typing import Any, Callable, Dict, Iterable, List

from .node import Node, NUMERIC_TYPES
from .engine import backward


def value(x: Any) -> Any:
    """Return the numeric value of a Node; pass through plain numbers unchanged."""
    return x.value if isinstance(x, Node) else x


def _ensure_node(v: Any, *, name: str) -> Node:
    """Wrap a plain value as a fresh leaf; a Node is used as-is."""
    return v if isinstance(v, Node) else Node.leaf(v, name=name)


def _as_output(y: Any, fn_name: str) -> Node:
    if isinstance(y, Node):
        return y
    if isinstance(y, NUMERIC_TYPES):
        # constant output: nothing depends on the inputs
        return Node.leaf(y, name="y")
    raise ValueError(f"{fn_name} expects f to return a single scalar, got {type(y)}")


def _reset(nodes: Iterable[Node]) -> None:
    for v in nodes:
        v.gradient = 0.0


# ----------------------------- single-input grad ----------------------------- #
def grad(f: Callable[[Node], Any], x0: Any) -> float:
    """
    Derivative of a scalar function y=f(x) at x0.
    Builds a fresh graph and runs one reverse pass.
    """
    x = _ensure_node(x0, name="x")
    _reset([x])
    y = _as_output(f(x), "grad(f, x0)")
    backward(y)
    return x.gradient


# ----------------------------- multi-input grads ----------------------------- #
def grads(f: Callable[[Dict[str, Node]], Any],
          inputs: Dict[str, Any]) -> Dict[str, float]:
    """
    Gradient of a scalar function y=f(vars) w.r.t. ALL inputs (dict form).
    Performs ONE reverse pass to obtain all ∂y/∂var simultaneously.

    Parameters
    ----------
    f       : function taking a dict {name: Node} and returning a scalar Node
    inputs  : dict {name: numeric}

    Returns
    -------
    dict {name: float}  # gradients in the same key order as `inputs`
    """
    nodes: Dict[str, Node] = {k: _ensure_node(v, name=k) for k, v in inputs.items()}
    _reset(nodes.values())
    y = _as_output(f(nodes), "grads(f, inputs)")
    backward(y)
    return {k: nodes[k].gradient for k in inputs.keys()}


def grads_list(f: Callable[[List[Node]], Any],
               x0_list: Iterable[Any]) -> List[float]:
    """
    Same as grads(), but the inputs are provided as a list and the result is a list
    of partials in the same order.

    Example
    -------
    f = lambda xs: xs[0]*xs[0] + 3*xs[1]
    grads_list(f, [2.0, 4.0]) -> [4.0, 3.0]
    """
    xs: List[Node] = [_ensure_node(v, name=f"x{i}") for i, v in enumerate(x0_list)]
    _reset(xs)
    y = _as_output(f(xs), "grads_list(f, x0_list)")
    backward(y)
    return [x.gradient for x in xs]
