"""
Prim's and Kruskal's Minimum Spanning Tree algorithms
Both count the edges they examine so their work can be compared
"""

from collections import namedtuple

from union_find import UnionFind


# Immutable undirected edge; u/v are the "from"/"to" node ids
Edge = namedtuple("Edge", ["u", "v", "weight"])


class Graph:
    def __init__(self, graph_id, nodes, edges):
        """
        Initialize a weighted undirected graph
        nodes: list of node ids (strings), in input order
        edges: list of Edge
        """
        self.graph_id = graph_id
        self.nodes = list(nodes)
        self.edges = [Edge(*edge) for edge in edges]

    @property
    def num_vertices(self):
        return len(self.nodes)

    @property
    def num_edges(self):
        return len(self.edges)

    def __repr__(self):
        return (
            f"Graph(id={self.graph_id}, vertices={self.num_vertices}, "
            f"edges={self.num_edges})"
        )


class AlgorithmResult:
    def __init__(self, mst_edges=None, total_cost=0, operations_count=0):
        self.mst_edges = mst_edges if mst_edges is not None else []
        self.total_cost = total_cost
        self.operations_count = operations_count
        # Filled in by the runner, observational only
        self.execution_time_ms = 0.0

    def __repr__(self):
        return (
            f"AlgorithmResult(edges={len(self.mst_edges)}, "
            f"total_cost={self.total_cost}, operations={self.operations_count})"
        )


def prim_mst(graph):
    """
    Grow a tree from the first node, rescanning every edge each round.
    When no edge leaves the tree, the tree is finished and growth restarts
    from the first unvisited node, so a disconnected graph gets one tree per
    component.
    """
    if not graph.nodes:
        return AlgorithmResult()

    mst = []
    total_cost = 0
    operations = 0

    visited = {graph.nodes[0]}
    num_nodes = len(set(graph.nodes))

    while len(visited) < num_nodes:
        min_edge = None

        for edge in graph.edges:
            operations += 1
            # Candidate only when exactly one endpoint is in the tree
            if (edge.u in visited) != (edge.v in visited):
                if min_edge is None or edge.weight < min_edge.weight:
                    min_edge = edge

        # Nothing reaches the rest of the graph, seed the next component
        if min_edge is None:
            visited.add(next(n for n in graph.nodes if n not in visited))
            continue

        mst.append(min_edge)
        total_cost += min_edge.weight
        visited.add(min_edge.u)
        visited.add(min_edge.v)

    return AlgorithmResult(mst, total_cost, operations)


def kruskal_mst(graph):
    """Take edges cheapest first, skipping any that would close a cycle"""
    # sorted() is stable, equal weights keep their input order
    edges = sorted(graph.edges, key=lambda edge: edge.weight)
    sets = UnionFind(graph.nodes)

    mst = []
    total_cost = 0
    operations = 0

    # Every edge is examined, even after V-1 have been accepted
    for edge in edges:
        operations += 1
        root_u = sets.find(edge.u)
        root_v = sets.find(edge.v)
        if root_u != root_v:
            mst.append(edge)
            total_cost += edge.weight
            sets.union(edge.u, edge.v)

    return AlgorithmResult(mst, total_cost, operations)
