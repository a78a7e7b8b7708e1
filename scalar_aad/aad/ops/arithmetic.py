# aad/ops/arithmetic.py
from ..core.node import Node, OpKind, is_operand


def _as_node(x):
    """Ensure x is a Node; otherwise lift it to an ephemeral leaf."""
    if isinstance(x, Node):
        return x
    if not is_operand(x):
        raise TypeError(f"unsupported operand type for Node arithmetic: {type(x)}")
    return Node.leaf(x)


def _binary(x, y, f, op):
    """
    Generic binary primitive:
      - lifts scalar operands to leaves
      - computes out.value = f(x.value, y.value)
      - records (x, y) as parents; the local partials are applied by the
        engine from the `op` tag during the reverse sweep
    """
    x = _as_node(x)
    y = _as_node(y)
    return Node.from_op(f(x.value, y.value), (x, y), op)


def add(x, y): return _binary(x, y, lambda a, b: a + b, OpKind.ADD)
def mul(x, y): return _binary(x, y, lambda a, b: a * b, OpKind.MULTIPLY)


def neg(x):
    """Negation, recorded as x * (-1)."""
    return mul(x, -1.0)


def sub(x, y):
    """Subtraction, recorded as x + (-y)."""
    return add(x, neg(y))


def div(x, y):
    """Division, recorded as x * y^(-1)."""
    return mul(x, pow(y, -1.0))


def pow(x, p):
    """
    Power with a constant scalar exponent:
      out.value = x.value ** p

    Local partial:
      ∂out/∂x = p * x^(p-1)

    The exponent is not a graph node, so no gradient flows into it.
    """
    if isinstance(p, Node):
        raise TypeError("pow() only supports int/float exponents, not Node")
    if not is_operand(p):
        raise TypeError(f"unsupported exponent type: {type(p)}")
    x = _as_node(x)
    return Node.from_op(x.value ** float(p), (x,), OpKind.POWER, exponent=p)
