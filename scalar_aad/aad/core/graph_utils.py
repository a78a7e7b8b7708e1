"""
Computation-graph utilities.
Print and analyse the graph reachable from a root node.
"""

import numpy as np
import pandas as pd
from typing import Dict
from collections import Counter

from .engine import topological_order


def _fan_counts(order):
    """Fan-in and fan-out per node, aligned with `order`."""
    index = {id(node): i for i, node in enumerate(order)}
    fan_ins = [len(node.parents) for node in order]
    fan_outs = [0] * len(order)
    for node in order:
        for parent in node.parents:
            fan_outs[index[id(parent)]] += 1
    return index, fan_ins, fan_outs


def get_graph_stats(root) -> Dict:
    """
    Graph statistics without printing.

    Returns:
        dict with node/edge counts, fan-in/fan-out extremes and averages, and
        a per-operation node count.
    """
    order = topological_order(root)
    n_nodes = len(order)
    n_edges = sum(len(node.parents) for node in order)
    _, fan_ins, fan_outs = _fan_counts(order)

    op_counter = Counter(node.operation.value for node in order)

    return {
        'nodes': n_nodes,
        'edges': n_edges,
        'leaves': sum(1 for node in order if node.is_leaf),
        'max_fan_in': max(fan_ins),
        'avg_fan_in': float(np.mean(fan_ins)),
        'max_fan_out': max(fan_outs),
        'avg_fan_out': float(np.mean(fan_outs)),
        'operations': dict(op_counter)
    }


def graph_stats_frame(root) -> pd.DataFrame:
    """Per-operation breakdown as a DataFrame (columns: operation, count, percent)."""
    stats = get_graph_stats(root)
    rows = [
        (op, count, 100.0 * count / stats['nodes'])
        for op, count in Counter(stats['operations']).most_common()
    ]
    return pd.DataFrame(rows, columns=['operation', 'count', 'percent'])


def print_graph_summary(root, detailed: bool = False) -> Dict:
    """
    Print a summary of the graph below `root`.

    Args:
        root: output node
        detailed: also list every node (only for graphs of at most 100 nodes)

    Returns:
        the statistics dict from get_graph_stats
    """
    stats = get_graph_stats(root)
    n_nodes = stats['nodes']

    print("\n" + "="*70)
    print("COMPUTATION GRAPH SUMMARY")
    print("="*70)
    print(f"Total nodes:        {n_nodes:,}")
    print(f"Total edges:        {stats['edges']:,}")
    print(f"Leaves:             {stats['leaves']:,}")
    print(f"Max fan-in:         {stats['max_fan_in']}")
    print(f"Avg fan-in:         {stats['avg_fan_in']:.2f}")
    print(f"Max fan-out:        {stats['max_fan_out']}")
    print(f"Avg fan-out:        {stats['avg_fan_out']:.2f}")
    print()
    print("Operation breakdown:")
    for op_type, count in Counter(stats['operations']).most_common(10):
        pct = 100.0 * count / n_nodes
        print(f"  {op_type:12s}: {count:6,} ({pct:5.1f}%)")

    if detailed and n_nodes <= 100:
        order = topological_order(root)
        index, _, _ = _fan_counts(order)
        print()
        print("="*70)
        print("DETAILED NODE LIST")
        print("="*70)
        for i, node in enumerate(order):
            parent_info = ", ".join(f"Node{index[id(p)]}" for p in node.parents)
            print(f"Node {i:3d}: {node.operation.value:12s} <- [{parent_info}]")

    print("="*70 + "\n")
    return stats


def print_computation_graph(root, max_nodes: int = 20) -> None:
    """
    Print the graph in build order, one line per node.

    Args:
        root: output node
        max_nodes: maximum number of nodes to print
    """
    order = topological_order(root)
    index, _, _ = _fan_counts(order)

    print("\n" + "="*70)
    print("COMPUTATION GRAPH STRUCTURE")
    print("="*70)

    for i, node in enumerate(order[:max_nodes]):
        val = float(node.value)
        grad = float(node.gradient)
        if node.parents:
            parent_info = ", ".join(f"Node{index[id(p)]}" for p in node.parents)
            print(f"Node {i:4d}: {node.operation.value:12s} ({val:10.6f}, grad {grad:10.6f}) <- [{parent_info}]")
        else:
            label = node.name if node.name is not None else "leaf/input"
            print(f"Node {i:4d}: {node.operation.value:12s} ({val:10.6f}, grad {grad:10.6f}) [{label}]")

    if len(order) > max_nodes:
        print(f"... ({len(order) - max_nodes} more nodes)")

    print("="*70 + "\n")


def analyze_graph_complexity(root) -> str:
    """
    Text report on graph size and composition.
    """
    stats = get_graph_stats(root)

    report = []
    report.append("Graph Complexity Analysis:")
    report.append(f"  Total operations: {stats['nodes']:,}")
    report.append(f"  Total connections: {stats['edges']:,}")
    report.append(f"  Average branching: {stats['avg_fan_out']:.2f}")

    if stats['nodes'] < 1000:
        complexity = "Low"
    elif stats['nodes'] < 10000:
        complexity = "Medium"
    else:
        complexity = "High"

    report.append(f"  Complexity level: {complexity}")

    top_ops = sorted(stats['operations'].items(), key=lambda x: x[1], reverse=True)[:3]
    report.append("  Top operations:")
    for op, count in top_ops:
        pct = 100.0 * count / stats['nodes']
        report.append(f"    - {op}: {pct:.1f}%")

    return "\n".join(report)
