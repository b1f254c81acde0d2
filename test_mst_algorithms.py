"""Tests for Prim's and Kruskal's minimum spanning tree algorithms."""

import itertools

import pytest

from create_input_file import create_random_graph
from mst_algorithms import AlgorithmResult, Edge, Graph, kruskal_mst, prim_mst
from mst_comparison import reference_mst_cost
from union_find import UnionFind


ALGORITHMS = [prim_mst, kruskal_mst]


def brute_force_mst_cost(graph):
    """Cheapest set of V-1 edges that connects every node"""
    best = None
    for combo in itertools.combinations(graph.edges, graph.num_vertices - 1):
        sets = UnionFind(graph.nodes)
        for u, v, _ in combo:
            if not sets.connected(u, v):
                sets.union(u, v)
        if sets.component_count() == 1:
            cost = sum(edge.weight for edge in combo)
            if best is None or cost < best:
                best = cost
    return best


def component_count(graph):
    sets = UnionFind(graph.nodes)
    for u, v, _ in graph.edges:
        if not sets.connected(u, v):
            sets.union(u, v)
    return sets.component_count()


@pytest.fixture
def triangle():
    return Graph(8, ["A", "B", "C"], [("A", "B", 1), ("B", "C", 2), ("A", "C", 3)])


@pytest.fixture
def two_components():
    return Graph(7, ["A", "B", "C", "D"], [("A", "B", 1), ("C", "D", 2)])


class TestDataModel:
    def test_edges_are_immutable(self):
        edge = Edge("A", "B", 3)
        with pytest.raises(AttributeError):
            edge.weight = 4

    def test_graph_converts_tuples_to_edges(self, triangle):
        assert triangle.edges[0] == Edge("A", "B", 1)
        assert triangle.edges[0].u == "A"
        assert triangle.num_vertices == 3
        assert triangle.num_edges == 3

    def test_default_result_is_empty(self):
        result = AlgorithmResult()
        assert result.mst_edges == []
        assert result.total_cost == 0
        assert result.operations_count == 0
        assert result.execution_time_ms == 0.0


@pytest.mark.parametrize("algorithm", ALGORITHMS)
class TestBothAlgorithms:
    def test_empty_graph(self, algorithm):
        result = algorithm(Graph(1, [], []))
        assert result.mst_edges == []
        assert result.total_cost == 0
        assert result.operations_count == 0

    def test_single_node(self, algorithm):
        result = algorithm(Graph(2, ["A"], []))
        assert result.mst_edges == []
        assert result.total_cost == 0

    def test_known_small_graph(self, algorithm, triangle):
        result = algorithm(triangle)
        assert set(result.mst_edges) == {Edge("A", "B", 1), Edge("B", "C", 2)}
        assert result.total_cost == 3

    def test_disconnected_graph(self, algorithm, two_components):
        result = algorithm(two_components)
        assert set(result.mst_edges) == {Edge("A", "B", 1), Edge("C", "D", 2)}
        assert result.total_cost == 3
        # V - K = 4 - 2
        assert len(result.mst_edges) == 2

    def test_isolated_nodes(self, algorithm):
        graph = Graph(3, ["A", "B", "C", "D", "E"], [("B", "C", 4), ("D", "C", 1)])
        result = algorithm(graph)
        assert result.total_cost == 5
        assert len(result.mst_edges) == 5 - 3

    def test_parallel_edges_take_cheapest(self, algorithm):
        graph = Graph(4, ["A", "B"], [("A", "B", 5), ("A", "B", 2), ("B", "A", 2)])
        result = algorithm(graph)
        assert result.mst_edges == [Edge("A", "B", 2)]
        assert result.mst_edges[0] is graph.edges[1]
        assert result.total_cost == 2

    def test_self_loop_is_never_chosen(self, algorithm):
        graph = Graph(5, ["A", "B"], [("A", "A", 0), ("A", "B", 4)])
        result = algorithm(graph)
        assert result.mst_edges == [Edge("A", "B", 4)]
        assert result.total_cost == 4

    def test_negative_weights(self, algorithm):
        graph = Graph(
            6, ["A", "B", "C"], [("A", "B", -3), ("B", "C", 2), ("A", "C", -1)]
        )
        result = algorithm(graph)
        assert result.total_cost == -4

    def test_repeated_runs_are_identical(self, algorithm):
        graph = create_random_graph(1, num_nodes=9, edge_probability=0.6, seed=7)
        first = algorithm(graph)
        second = algorithm(graph)
        assert first.total_cost == second.total_cost
        assert first.operations_count == second.operations_count
        assert first.mst_edges == second.mst_edges

    def test_input_graph_not_modified(self, algorithm, triangle):
        edges_before = list(triangle.edges)
        algorithm(triangle)
        assert triangle.edges == edges_before

    @pytest.mark.parametrize("seed", [1, 2, 3, 4, 5])
    def test_matches_brute_force_on_small_graphs(self, algorithm, seed):
        graph = create_random_graph(
            seed, num_nodes=6, edge_probability=0.5, max_weight=5, seed=seed
        )
        result = algorithm(graph)
        assert result.total_cost == brute_force_mst_cost(graph)
        assert len(result.mst_edges) == graph.num_vertices - 1

    @pytest.mark.parametrize("seed", [10, 20, 30])
    def test_forest_size_matches_components(self, algorithm, seed):
        graph = create_random_graph(
            seed, num_nodes=15, edge_probability=0.1, seed=seed, connected=False
        )
        result = algorithm(graph)
        assert len(result.mst_edges) == graph.num_vertices - component_count(graph)
        assert result.total_cost == reference_mst_cost(graph)


class TestPrim:
    def test_operation_count_is_edges_times_rounds(self, triangle):
        # Two rounds over three edges
        assert prim_mst(triangle).operations_count == 6

    def test_selection_order(self):
        graph = Graph(
            1,
            ["A", "B", "C", "D"],
            [("C", "D", 1), ("A", "B", 3), ("B", "C", 2), ("A", "D", 9)],
        )
        result = prim_mst(graph)
        assert result.mst_edges == [
            Edge("A", "B", 3),
            Edge("B", "C", 2),
            Edge("C", "D", 1),
        ]

    def test_tie_keeps_first_edge_in_scan_order(self):
        graph = Graph(1, ["A", "B", "C"], [("A", "C", 2), ("A", "B", 2), ("B", "C", 9)])
        result = prim_mst(graph)
        assert result.mst_edges[0] == Edge("A", "C", 2)
        assert result.mst_edges == [Edge("A", "C", 2), Edge("A", "B", 2)]

    def test_starts_from_first_node(self):
        graph = Graph(1, ["C", "A", "B"], [("A", "B", 1), ("C", "A", 5), ("B", "C", 7)])
        result = prim_mst(graph)
        assert result.mst_edges == [Edge("C", "A", 5), Edge("A", "B", 1)]

    def test_disconnected_counts_empty_scan(self, two_components):
        # AB, empty scan, then CD: three scans of two edges
        result = prim_mst(two_components)
        assert result.mst_edges == [Edge("A", "B", 1), Edge("C", "D", 2)]
        assert result.operations_count == 6


class TestKruskal:
    def test_operation_count_is_edge_count(self, triangle):
        assert kruskal_mst(triangle).operations_count == 3

    def test_scans_all_edges_after_tree_is_complete(self):
        graph = Graph(
            1,
            ["A", "B", "C"],
            [("A", "B", 1), ("B", "C", 2), ("A", "C", 3), ("C", "A", 4)],
        )
        result = kruskal_mst(graph)
        assert len(result.mst_edges) == 2
        assert result.operations_count == 4

    def test_acceptance_order_is_weight_order(self):
        graph = Graph(
            1,
            ["A", "B", "C", "D"],
            [("A", "B", 3), ("C", "D", 1), ("B", "C", 2)],
        )
        result = kruskal_mst(graph)
        assert [edge.weight for edge in result.mst_edges] == [1, 2, 3]

    def test_tie_keeps_input_order(self):
        graph = Graph(1, ["A", "B", "C"], [("B", "C", 1), ("A", "B", 1), ("A", "C", 1)])
        result = kruskal_mst(graph)
        assert result.mst_edges == [Edge("B", "C", 1), Edge("A", "B", 1)]

    def test_unknown_endpoint_raises(self):
        graph = Graph(1, ["A"], [("A", "Z", 1)])
        with pytest.raises(KeyError):
            kruskal_mst(graph)
