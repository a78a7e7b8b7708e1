# aad/core/node.py
from __future__ import annotations
from enum import Enum
from typing import Any, Optional, Sequence, Tuple
import numpy as np

# Scalar types accepted as node values and as plain operands.
NUMERIC_TYPES = (int, float, np.integer, np.floating)


class OpKind(str, Enum):
    """
    Tag identifying how a node's value was derived.

    Negation, subtraction and division have no tag of their own: they are
    recorded through MULTIPLY, ADD and POWER nodes.
    """
    LEAF = "leaf"
    ADD = "add"
    MULTIPLY = "mul"
    POWER = "pow"
    EXP = "exp"
    TANH = "tanh"


# Number of parents each tag records.
_ARITY = {
    OpKind.LEAF: 0,
    OpKind.ADD: 2,
    OpKind.MULTIPLY: 2,
    OpKind.POWER: 1,
    OpKind.EXP: 1,
    OpKind.TANH: 1,
}


def is_operand(x: Any) -> bool:
    """True for anything the operator set can combine with a Node."""
    return isinstance(x, Node) or (isinstance(x, NUMERIC_TYPES) and not isinstance(x, bool))


class Node:
    """
    One vertex of the computation graph: a scalar value plus its provenance.

    Attributes
    ----------
    value : np.float64
        Forward (primal) value. Writable, so an optimisation loop can update
        parameters in place.
    gradient : float
        Reverse-mode accumulator, 0 at construction. The backward driver only
        ever adds into it; clients reset it explicitly.
    operation : OpKind
        Primitive that produced this node (read-only).
    parents : tuple[Node, ...]
        Operands of that primitive, fixed at construction (read-only).
    exponent : float | None
        Scalar exponent for POWER nodes.
    name : Optional[str]
        Optional debug/pretty-print name.

    Graph traversal works on object identity. `==` compares values only and
    exists for assertions; nodes are therefore unhashable.
    """

    __slots__ = ("_value", "gradient", "name", "_operation", "_parents", "_exponent")

    def __init__(
        self,
        value: Any,
        parents: Sequence["Node"] = (),
        operation: OpKind = OpKind.LEAF,
        *,
        exponent: Optional[float] = None,
        name: Optional[str] = None,
    ):
        self.value = value
        operation = OpKind(operation)
        parents = tuple(parents)
        if len(parents) != _ARITY[operation]:
            raise ValueError(
                f"{operation.value!r} nodes take {_ARITY[operation]} parent(s), "
                f"got {len(parents)}"
            )
        for p in parents:
            if not isinstance(p, Node):
                raise TypeError(f"parents must be Node instances, got {type(p)}")
        if (operation is OpKind.POWER) != (exponent is not None):
            raise ValueError("exponent is required for, and only valid on, 'pow' nodes")

        self.gradient = 0.0
        self.name = name
        self._operation = operation
        self._parents: Tuple[Node, ...] = parents
        self._exponent = None if exponent is None else float(exponent)

    # ---------------- construction ---------------- #
    @classmethod
    def leaf(cls, value: Any, name: Optional[str] = None) -> "Node":
        """Input or trainable parameter: no parents, nothing to propagate."""
        return cls(value, name=name)

    @classmethod
    def from_op(
        cls,
        value: Any,
        parents: Sequence["Node"],
        operation: OpKind,
        exponent: Optional[float] = None,
    ) -> "Node":
        """Result of a primitive; its backward rule follows from `operation`."""
        return cls(value, parents, operation, exponent=exponent)

    # ---------------- numeric state ---------------- #
    @property
    def value(self) -> np.float64:
        return self._value

    @value.setter
    def value(self, value: Any) -> None:
        if isinstance(value, Node) or not is_operand(value):
            raise TypeError(
                f"Node only accepts numeric scalars (int, float, numpy scalar), "
                f"but got {type(value)}"
            )
        # numpy scalars turn overflow and zero division into inf/nan
        self._value = np.float64(value)

    # ---------------- read-only provenance ---------------- #
    @property
    def operation(self) -> OpKind:
        return self._operation

    @property
    def parents(self) -> Tuple["Node", ...]:
        return self._parents

    @property
    def exponent(self) -> Optional[float]:
        return self._exponent

    @property
    def is_leaf(self) -> bool:
        return self._operation is OpKind.LEAF

    # ---------------- display / comparison ---------------- #
    def __repr__(self):
        label = f", name={self.name!r}" if self.name is not None else ""
        return (
            f"Node(value={float(self.value):.4f}, grad={float(self.gradient):.4f}, "
            f"op={self._operation.value!r}, parents={len(self._parents)}{label})"
        )

    def __str__(self):
        return f"Node(value={float(self.value)})"

    def __eq__(self, other):
        if isinstance(other, Node):
            return bool(self.value == other.value)
        if is_operand(other):
            return bool(self.value == other)
        return NotImplemented

    __hash__ = None

    def __float__(self):
        return float(self.value)

    # ---------------- operator overloading ---------------- #
    def __add__(self, other):
        if not is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(self, other)

    def __radd__(self, other):
        if not is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import add
        return add(other, self)

    def __sub__(self, other):
        if not is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import sub
        return sub(self, other)

    def __rsub__(self, other):
        if not is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import sub
        return sub(other, self)

    def __mul__(self, other):
        if not is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import mul
        return mul(self, other)

    def __rmul__(self, other):
        if not is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import mul
        return mul(other, self)

    def __truediv__(self, other):
        if not is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import div
        return div(self, other)

    def __rtruediv__(self, other):
        if not is_operand(other):
            return NotImplemented
        from ..ops.arithmetic import div
        return div(other, self)

    def __neg__(self):
        from ..ops.arithmetic import neg
        return neg(self)

    def __pow__(self, exponent):
        from ..ops.arithmetic import pow
        if isinstance(exponent, Node):
            return pow(self, exponent)  # raises TypeError
        if not is_operand(exponent):
            return NotImplemented
        return pow(self, exponent)

    def pow(self, exponent) -> "Node":
        from ..ops.arithmetic import pow
        return pow(self, exponent)

    def exp(self) -> "Node":
        from ..ops.transcendental import exp
        return exp(self)

    def tanh(self) -> "Node":
        from ..ops.transcendental import tanh
        return tanh(self)
