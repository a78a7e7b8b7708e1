# aad/__init__.py
# Scalar reverse-mode automatic differentiation

from .core.node import Node, OpKind
from .core.engine import (
    topological_order,
    backward,
    zero_gradients,
    apply_local_gradient,
)
from .core.seeds import grad, grads, grads_list, value
from .core.graph_utils import (
    get_graph_stats,
    graph_stats_frame,
    print_graph_summary,
    print_computation_graph,
    analyze_graph_complexity,
)

# Operators
from . import ops
from .ops import add, sub, mul, div, neg, pow, exp, tanh

__all__ = [
    # Core
    'Node',
    'OpKind',
    # Engine
    'topological_order',
    'backward',
    'zero_gradients',
    'apply_local_gradient',
    # Functional helpers
    'grad',
    'grads',
    'grads_list',
    'value',
    # Graph inspection
    'get_graph_stats',
    'graph_stats_frame',
    'print_graph_summary',
    'print_computation_graph',
    'analyze_graph_complexity',
    # Operators
    'ops',
    'add', 'sub', 'mul', 'div', 'neg', 'pow', 'exp', 'tanh',
]
