# aad/core/engine.py
from __future__ import annotations
from typing import Iterable, List, Union
from .node import Node, OpKind


def topological_order(root: Node) -> List[Node]:
    """
    Nodes reachable from `root`, each listed after all of its parents.

    Depth-first: a node's parents are emitted (first parent first) before the
    node itself, and a node already visited is skipped. Membership is tracked
    by `id()` since `Node.__eq__` compares values. The root is always last.

    An explicit stack replaces recursion so that long chains (e.g. a sum over
    many terms) are not bounded by the interpreter's recursion limit; the
    resulting order is the same post-order a recursive walk would produce.
    """
    order: List[Node] = []
    visited = set()
    stack = [(root, False)]
    while stack:
        node, expanded = stack.pop()
        if expanded:
            order.append(node)
            continue
        if id(node) in visited:
            continue
        visited.add(id(node))
        stack.append((node, True))
        # reversed so that the first parent is popped (and finished) first
        for parent in reversed(node.parents):
            if id(parent) not in visited:
                stack.append((parent, False))
    return order


def apply_local_gradient(node: Node) -> None:
    """
    Push `node.gradient` into its parents' accumulators, using the rule
    selected by `node.operation`.

    For each parent p we propagate p.gradient += g * (∂node/∂p). Parents
    listed twice (x + x, x * x) receive both contributions.
    """
    tag = node.operation
    g = node.gradient

    if tag is OpKind.LEAF:
        return

    # ---------- Sum: ∂y/∂x = ∂y/∂z = 1 ----------
    if tag is OpKind.ADD:
        x, z = node.parents
        x.gradient += g
        z.gradient += g
        return

    # ---------- Product: ∂y/∂x = z, ∂y/∂z = x ----------
    if tag is OpKind.MULTIPLY:
        x, z = node.parents
        x.gradient += z.value * g
        z.gradient += x.value * g
        return

    # ---------- Power: y = x^p, ∂y/∂x = p * x^(p-1) ----------
    if tag is OpKind.POWER:
        (x,) = node.parents
        p = node.exponent
        x.gradient += p * x.value ** (p - 1.0) * g
        return

    # ---------- Exponential: ∂y/∂x = y ----------
    if tag is OpKind.EXP:
        (x,) = node.parents
        x.gradient += node.value * g
        return

    # ---------- Tanh: ∂y/∂x = 1 - y^2 ----------
    if tag is OpKind.TANH:
        (x,) = node.parents
        x.gradient += (1.0 - node.value ** 2) * g
        return

    raise ValueError(f"no reverse rule for operation {tag!r}")


def backward(root: Node, seed: float = 1.0) -> List[Node]:
    """
    Run a single reverse pass from `root`.

    Args:
        root: scalar output node (typically a loss).
        seed: value the root's gradient is set to before the sweep (dy/dy = 1).

    Returns:
        The topological order that was swept (leaves first, root last).

    Notes:
        - The root's gradient is overwritten with `seed`; every other
          accumulator is only added to.
        - Nothing is reset beforehand. Calling backward twice without
          zero_gradients() accumulates both passes (interior accumulators
          included).
        - The graph is assumed acyclic; no cycle detection is performed.
    """
    order = topological_order(root)
    root.gradient = seed
    for node in reversed(order):
        apply_local_gradient(node)
    return order


def zero_gradients(nodes: Union[Node, Iterable[Node]]) -> None:
    """
    Reset gradient accumulators to zero.

    Given a single Node, every node reachable from it is zeroed (the whole
    graph below a loss). Given an iterable, exactly those nodes are zeroed
    (e.g. a model's parameters).
    """
    if isinstance(nodes, Node):
        nodes = topological_order(nodes)
    for v in nodes:
        v.gradient = 0.0
