"""
Prim vs Kruskal comparison over a batch of graphs
Runs both algorithms per graph, times them and cross-checks their costs
"""

import os
import sys
import time

import matplotlib

matplotlib.use("Agg")
import matplotlib.pyplot as plt
import networkx as nx

from graph_io import InputFormatError, load_graphs, write_report
from mst_algorithms import kruskal_mst, prim_mst


class GraphResult:
    def __init__(self, graph_id, input_stats, prim, kruskal):
        self.graph_id = graph_id
        self.input_stats = input_stats  # {"vertices": V, "edges": E}
        self.prim = prim
        self.kruskal = kruskal

    @property
    def costs_match(self):
        return self.prim.total_cost == self.kruskal.total_cost


def timed(algorithm, graph):
    """Run an MST algorithm and record its wall-clock time in milliseconds"""
    start = time.perf_counter()
    result = algorithm(graph)
    result.execution_time_ms = (time.perf_counter() - start) * 1000.0
    return result


def run_graph(graph, verbose=True):
    """Run Prim and Kruskal on a single graph"""
    input_stats = {"vertices": graph.num_vertices, "edges": graph.num_edges}

    prim = timed(prim_mst, graph)
    kruskal = timed(kruskal_mst, graph)

    result = GraphResult(graph.graph_id, input_stats, prim, kruskal)

    # Both must agree; a mismatch points at an implementation bug
    if not result.costs_match and verbose:
        print(
            f"⚠ Warning: MST costs differ in graph {graph.graph_id} "
            f"(prim={prim.total_cost}, kruskal={kruskal.total_cost})"
        )

    return result


def run_batch(graphs, verbose=True):
    """Process graphs one after another, keeping input order"""
    return [run_graph(graph, verbose=verbose) for graph in graphs]


def to_networkx(graph):
    """Build a networkx MultiGraph, keeping parallel edges and isolated nodes"""
    G = nx.MultiGraph()
    G.add_nodes_from(graph.nodes)
    for u, v, w in graph.edges:
        G.add_edge(u, v, weight=w)
    return G


def reference_mst_cost(graph):
    """Minimum spanning forest weight according to NetworkX"""
    mst = nx.minimum_spanning_tree(to_networkx(graph), weight="weight")
    return int(mst.size(weight="weight"))


def verify_result(graph, result):
    """Check both algorithms against the NetworkX reference weight"""
    expected = reference_mst_cost(graph)
    return (
        result.prim.total_cost == expected and result.kruskal.total_cost == expected
    )


def _simple_graph(nodes, edges):
    # Collapse parallel edges to the cheapest one and drop self-loops for drawing
    G = nx.Graph()
    G.add_nodes_from(nodes)
    for u, v, w in edges:
        if u == v:
            continue
        if not G.has_edge(u, v) or w < G[u][v]["weight"]:
            G.add_edge(u, v, weight=w)
    return G


def visualize_result(graph, result, save_path):
    """Draw the input graph next to the Prim and Kruskal trees"""
    fig, axes = plt.subplots(1, 3, figsize=(18, 6))

    full = _simple_graph(graph.nodes, graph.edges)
    pos = nx.spring_layout(full, seed=42)

    panels = [
        (full, f"Graph {graph.graph_id}", "lightblue", "gray"),
        (
            _simple_graph(graph.nodes, result.prim.mst_edges),
            f"Prim (cost={result.prim.total_cost})",
            "lightgreen",
            "red",
        ),
        (
            _simple_graph(graph.nodes, result.kruskal.mst_edges),
            f"Kruskal (cost={result.kruskal.total_cost})",
            "lightgreen",
            "blue",
        ),
    ]

    for ax, (G, title, node_color, edge_color) in zip(axes, panels):
        ax.set_title(title, fontsize=14, fontweight="bold")
        if G.number_of_nodes() == 0:
            ax.set_axis_off()
            continue
        nx.draw(
            G,
            pos,
            ax=ax,
            with_labels=True,
            node_color=node_color,
            node_size=700,
            font_size=12,
            font_weight="bold",
            edge_color=edge_color,
            width=2,
        )
        edge_labels = nx.get_edge_attributes(G, "weight")
        if edge_labels:
            nx.draw_networkx_edge_labels(G, pos, edge_labels, ax=ax)

    plt.tight_layout()
    plt.savefig(save_path, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return save_path


def print_summary(results, verification=None):
    """Print a fixed-width table of per-graph costs and operation counts"""
    print("\n" + "=" * 70)
    print(" " * 30 + "SUMMARY")
    print("=" * 70)
    header = (
        f"{'Graph':<7} {'V':<5} {'E':<6} {'Prim':<8} {'Kruskal':<9} "
        f"{'Prim ops':<10} {'Kr. ops':<9}"
    )
    if verification is not None:
        header += f" {'Status':<10}"
    print(header)
    print("-" * 70)

    for result in results:
        line = (
            f"{result.graph_id:<7} {result.input_stats['vertices']:<5} "
            f"{result.input_stats['edges']:<6} {result.prim.total_cost:<8} "
            f"{result.kruskal.total_cost:<9} {result.prim.operations_count:<10} "
            f"{result.kruskal.operations_count:<9}"
        )
        if verification is not None:
            ok = verification.get(result.graph_id)
            line += f" {'✓ CORRECT' if ok else '✗ INCORRECT':<10}"
        print(line)

    print("=" * 70)


def main(argv=None):
    """Compare Prim and Kruskal on every graph of an input file"""
    import argparse

    parser = argparse.ArgumentParser(
        description="Compute MSTs with Prim's and Kruskal's algorithms"
    )
    parser.add_argument(
        "--input",
        type=str,
        default="input.json",
        help="Input graph batch (default: input.json)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="output.json",
        help="Output report (default: output.json)",
    )
    parser.add_argument(
        "--verify",
        action="store_true",
        help="Check both costs against NetworkX (default: off)",
    )
    parser.add_argument(
        "--visualize",
        type=str,
        default=None,
        metavar="DIR",
        help="Save one PNG per graph into DIR (default: off)",
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only print errors (default: off)"
    )

    args = parser.parse_args(argv)
    verbose = not args.quiet

    try:
        graphs = load_graphs(args.input)
    except (FileNotFoundError, InputFormatError) as e:
        print(f"ERROR: cannot read {args.input}: {e}", file=sys.stderr)
        return 1

    results = run_batch(graphs, verbose=verbose)
    write_report(results, args.output)

    verification = None
    if args.verify:
        verification = {
            graph.graph_id: verify_result(graph, result)
            for graph, result in zip(graphs, results)
        }

    if args.visualize:
        os.makedirs(args.visualize, exist_ok=True)
        for graph, result in zip(graphs, results):
            filename = os.path.join(args.visualize, f"mst_graph_{graph.graph_id}.png")
            visualize_result(graph, result, filename)
        if verbose:
            print(f"Visualizations saved to: {args.visualize}")

    if verbose:
        print_summary(results, verification)
        print(f"✓ Results written to {args.output}")

    if verification is not None and not all(verification.values()):
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
