"""
Create an input batch of random weighted graphs for the MST comparison
"""

import random

import networkx as nx

from graph_io import write_graphs
from mst_algorithms import Graph
from mst_comparison import reference_mst_cost, to_networkx


def node_name(index):
    """Spreadsheet-style node ids: A..Z, AA, AB, ..."""
    name = ""
    index += 1
    while index:
        index, rem = divmod(index - 1, 26)
        name = chr(ord("A") + rem) + name
    return name


def create_random_graph(
    graph_id, num_nodes=6, edge_probability=0.5, max_weight=10, seed=42,
    connected=True,
):
    """Create a random graph with random integer weights"""
    rng = random.Random(seed)

    # Generate random graph using Erdos-Renyi model
    G = nx.erdos_renyi_graph(num_nodes, edge_probability, seed=seed)

    if connected and num_nodes > 0:
        # Force connectivity by linking consecutive components
        components = [sorted(c) for c in nx.connected_components(G)]
        for i in range(len(components) - 1):
            G.add_edge(components[i][0], components[i + 1][0])

    nodes = [node_name(n) for n in G.nodes()]
    edges = [
        (node_name(u), node_name(v), rng.randint(1, max_weight))
        for u, v in G.edges()
    ]
    return Graph(graph_id, nodes, edges)


def create_batch(
    num_graphs=5, min_nodes=3, max_nodes=10, edge_probability=0.5,
    max_weight=10, seed=42, connected=True,
):
    """Create num_graphs random graphs with ids 1..num_graphs"""
    rng = random.Random(seed)
    graphs = []
    for graph_id in range(1, num_graphs + 1):
        graphs.append(
            create_random_graph(
                graph_id,
                num_nodes=rng.randint(min_nodes, max_nodes),
                edge_probability=edge_probability,
                max_weight=max_weight,
                seed=rng.randint(0, 10000),
                connected=connected,
            )
        )
    return graphs


def print_graph_summary(graph):
    """Print summary of the graph"""
    G = to_networkx(graph)

    print(f"\nGraph {graph.graph_id}")
    print("-" * 70)
    print(f"Number of nodes: {graph.num_vertices}")
    print(f"Number of edges: {graph.num_edges}")
    print(f"Is connected: {graph.num_vertices > 0 and nx.is_connected(G)}")
    print(f"Expected MST weight (NetworkX): {reference_mst_cost(graph)}")


def main(argv=None):
    """Main function to create the input file"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Generate a batch of random graphs for the MST comparison"
    )
    parser.add_argument(
        "--graphs", type=int, default=5, help="Number of graphs (default: 5)"
    )
    parser.add_argument(
        "--min-nodes", type=int, default=3, help="Minimum nodes per graph (default: 3)"
    )
    parser.add_argument(
        "--max-nodes", type=int, default=10, help="Maximum nodes per graph (default: 10)"
    )
    parser.add_argument(
        "--edge-prob", type=float, default=0.5, help="Edge probability (default: 0.5)"
    )
    parser.add_argument(
        "--max-weight", type=int, default=10, help="Maximum edge weight (default: 10)"
    )
    parser.add_argument(
        "--seed", type=int, default=42, help="Random seed (default: 42)"
    )
    parser.add_argument(
        "--allow-disconnected",
        action="store_true",
        help="Keep disconnected graphs as generated (default: off)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="input.json",
        help="Output file (default: input.json)",
    )

    args = parser.parse_args(argv)

    if args.min_nodes < 0 or args.max_nodes < args.min_nodes:
        parser.error("--min-nodes must be >= 0 and <= --max-nodes")

    print("=" * 70)
    print("Input File Generator for the MST Comparison")
    print("=" * 70)

    graphs = create_batch(
        num_graphs=args.graphs,
        min_nodes=args.min_nodes,
        max_nodes=args.max_nodes,
        edge_probability=args.edge_prob,
        max_weight=args.max_weight,
        seed=args.seed,
        connected=not args.allow_disconnected,
    )

    for graph in graphs:
        print_graph_summary(graph)

    write_graphs(graphs, args.output)

    print("\n" + "=" * 70)
    print(f"✓ {len(graphs)} graphs written to {args.output}")
    print(f"\nTo compare the algorithms:")
    print(f"  python mst_comparison.py --input {args.output} --verify")
    print("=" * 70)


if __name__ == "__main__":
    main()
