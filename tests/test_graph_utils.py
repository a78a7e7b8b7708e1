"""
Tests for graph statistics and printing.
"""

import pytest

from scalar_aad.aad import (
    Node,
    analyze_graph_complexity,
    get_graph_stats,
    graph_stats_frame,
    print_computation_graph,
    print_graph_summary,
)


@pytest.fixture
def small_graph():
    a = Node.leaf(1.0, name="a")
    b = Node.leaf(2.0, name="b")
    return (a * b) + a


def test_get_graph_stats(small_graph):
    stats = get_graph_stats(small_graph)
    assert stats['nodes'] == 4
    assert stats['edges'] == 4
    assert stats['leaves'] == 2
    assert stats['max_fan_in'] == 2
    assert stats['max_fan_out'] == 2  # `a` feeds both mul and add
    assert stats['avg_fan_in'] == pytest.approx(1.0)
    assert stats['operations'] == {'leaf': 2, 'mul': 1, 'add': 1}


def test_stats_of_single_leaf():
    stats = get_graph_stats(Node.leaf(3.0))
    assert stats['nodes'] == 1
    assert stats['edges'] == 0
    assert stats['max_fan_out'] == 0


def test_graph_stats_frame(small_graph):
    df = graph_stats_frame(small_graph)
    assert list(df.columns) == ['operation', 'count', 'percent']
    assert df['count'].sum() == 4
    assert df.iloc[0]['operation'] == 'leaf'
    assert df['percent'].sum() == pytest.approx(100.0)


def test_print_graph_summary(small_graph, capsys):
    stats = print_graph_summary(small_graph, detailed=True)
    out = capsys.readouterr().out
    assert "COMPUTATION GRAPH SUMMARY" in out
    assert "DETAILED NODE LIST" in out
    assert "Node2" in out
    assert stats['nodes'] == 4


def test_print_computation_graph_truncates(small_graph, capsys):
    print_computation_graph(small_graph, max_nodes=2)
    out = capsys.readouterr().out
    assert "[a]" in out
    assert "[b]" in out
    assert "(2 more nodes)" in out


def test_analyze_graph_complexity(small_graph):
    report = analyze_graph_complexity(small_graph)
    assert "Total operations: 4" in report
    assert "Complexity level: Low" in report
    assert "leaf: 50.0%" in report
