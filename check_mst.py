"""
Check Prim's MST weight against the NetworkX reference
Development tool: prints its report and writes no files
"""

import random
import networkx as nx

from prim_mst import Graph, create_example_graph, prim_mst

# (num_nodes, edge_probability, seed) for the random checks
RANDOM_CHECKS = [
    (5, 0.5, 42),
    (6, 0.4, 100),
    (7, 0.6, 200),
    (10, 0.8, 400),
    (20, 0.3, 500),
]


def random_connected_graph(num_nodes, edge_probability, seed):
    """G(n, p) graph with components bridged and weights in [1, 10]"""
    rng = random.Random(seed)
    G = nx.gnp_random_graph(num_nodes, edge_probability, seed=seed)

    # Chain the smallest vertex of each component so vertex 0 reaches all
    roots = sorted(min(c) for c in nx.connected_components(G))
    G.add_edges_from(zip(roots, roots[1:]))

    for u, v in G.edges():
        G[u][v]["weight"] = rng.randint(1, 10)
    return G


def graph_from_networkx(G):
    """Convert a NetworkX graph with nodes 0..n-1 to a Graph"""
    return Graph.from_edges(
        G.number_of_nodes(), [(u, v, w) for u, v, w in G.edges(data="weight")]
    )


def to_networkx(graph):
    """Convert a Graph to NetworkX, keeping the lightest of parallel edges"""
    G = nx.Graph()
    G.add_nodes_from(range(graph.vertices))
    for u, v, w in graph.edges():
        if not G.has_edge(u, v) or w < G[u][v]["weight"]:
            G.add_edge(u, v, weight=w)
    return G


def reference_mst_weight(G, root=0):
    """MST weight of the component containing root, computed by NetworkX"""
    component = G.subgraph(nx.node_connected_component(G, root))
    mst = nx.minimum_spanning_tree(component, weight="weight")
    return sum(w for _, _, w in mst.edges(data="weight"))


def check_graph(graph):
    """Compare Prim's total with NetworkX for a Graph"""
    G = to_networkx(graph)
    prim_weight = prim_mst(graph)
    nx_weight = reference_mst_weight(G)

    return {
        "num_nodes": graph.vertices,
        "num_edges": len(list(graph.edges())),
        "connected": nx.is_connected(G),
        "prim_weight": prim_weight,
        "networkx_weight": nx_weight,
        "is_correct": prim_weight == nx_weight,
    }


def run_checks():
    """Check the example graph and every RANDOM_CHECKS graph"""
    results = [("example", check_graph(create_example_graph()))]
    for num_nodes, edge_probability, seed in RANDOM_CHECKS:
        G = random_connected_graph(num_nodes, edge_probability, seed)
        results.append((f"gnp seed={seed}", check_graph(graph_from_networkx(G))))
    return results


def main():
    results = run_checks()

    print(f"{'Graph':<16} {'Nodes':<7} {'Edges':<7} {'Prim':<7} {'NetworkX':<9} Status")
    print("-" * 60)
    for name, result in results:
        status = "OK" if result["is_correct"] else "MISMATCH"
        print(
            f"{name:<16} {result['num_nodes']:<7} {result['num_edges']:<7} "
            f"{result['prim_weight']:<7} {result['networkx_weight']:<9} {status}"
        )

    failed = sum(1 for _, result in results if not result["is_correct"])
    print(f"\n{len(results) - failed}/{len(results)} graphs match NetworkX")
    return failed == 0


if __name__ == "__main__":
    raise SystemExit(0 if main() else 1)
