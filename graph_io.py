"""
Read graph batches from JSON and write MST comparison reports
"""

import json

from mst_algorithms import Edge, Graph


class InputFormatError(ValueError):
    """Input document is not a valid graph batch"""


def load_graphs(path="input.json"):
    """Load the graph batch stored at path"""
    with open(path, "r") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as e:
            raise InputFormatError(f"{path} is not valid JSON: {e}") from e

    return parse_graphs(data)


def parse_graphs(data):
    """Build Graph objects from a decoded {"graphs": [...]} document"""
    if not isinstance(data, dict) or not isinstance(data.get("graphs"), list):
        raise InputFormatError('expected an object with a "graphs" list')

    return [parse_graph(item) for item in data["graphs"]]


def parse_graph(item):
    try:
        graph_id = item["id"]
        nodes = item["nodes"]
        raw_edges = item["edges"]
    except (KeyError, TypeError) as e:
        raise InputFormatError(f"graph entry is missing field {e}") from e

    if not isinstance(graph_id, int) or isinstance(graph_id, bool):
        raise InputFormatError(f"graph id must be an integer, got {graph_id!r}")
    if not isinstance(nodes, list) or not all(isinstance(n, str) for n in nodes):
        raise InputFormatError(f"graph {graph_id}: nodes must be a list of strings")
    if len(set(nodes)) != len(nodes):
        raise InputFormatError(f"graph {graph_id}: duplicate node ids")
    if not isinstance(raw_edges, list):
        raise InputFormatError(f"graph {graph_id}: edges must be a list")

    known = set(nodes)
    edges = []
    for raw in raw_edges:
        try:
            edge = Edge(raw["from"], raw["to"], raw["weight"])
        except (KeyError, TypeError) as e:
            raise InputFormatError(
                f"graph {graph_id}: malformed edge {raw!r}"
            ) from e

        if not isinstance(edge.u, str) or not isinstance(edge.v, str):
            raise InputFormatError(
                f"graph {graph_id}: edge endpoints must be strings in {raw!r}"
            )
        if not isinstance(edge.weight, int) or isinstance(edge.weight, bool):
            raise InputFormatError(
                f"graph {graph_id}: edge weight must be an integer in {raw!r}"
            )
        # Endpoints must be declared nodes
        if edge.u not in known or edge.v not in known:
            raise InputFormatError(
                f"graph {graph_id}: edge {edge.u}-{edge.v} references an unknown node"
            )
        edges.append(edge)

    return Graph(graph_id, nodes, edges)


def graph_to_dict(graph):
    return {
        "id": graph.graph_id,
        "nodes": list(graph.nodes),
        "edges": [edge_to_dict(edge) for edge in graph.edges],
    }


def edge_to_dict(edge):
    return {"from": edge.u, "to": edge.v, "weight": edge.weight}


def algorithm_result_to_dict(result):
    return {
        "mst_edges": [edge_to_dict(edge) for edge in result.mst_edges],
        "total_cost": result.total_cost,
        "operations_count": result.operations_count,
        "execution_time_ms": result.execution_time_ms,
    }


def report_to_dict(results):
    """Convert a list of GraphResult into the report document"""
    return {
        "results": [
            {
                "graph_id": result.graph_id,
                "input_stats": dict(result.input_stats),
                "prim": algorithm_result_to_dict(result.prim),
                "kruskal": algorithm_result_to_dict(result.kruskal),
            }
            for result in results
        ]
    }


def write_report(results, path="output.json"):
    with open(path, "w") as f:
        json.dump(report_to_dict(results), f, indent=2)
    return path


def write_graphs(graphs, path="input.json"):
    """Write a graph batch in the input format"""
    with open(path, "w") as f:
        json.dump({"graphs": [graph_to_dict(g) for g in graphs]}, f, indent=2)
    return path
