"""
Prim's Algorithm Implementation for MST
Grows a single tree from a start vertex using a lazy-deletion min-heap
"""

import heapq


class Edge:
    def __init__(self, to, weight):
        self.to = to
        self.weight = weight

    def __iter__(self):
        return iter((self.to, self.weight))

    def __repr__(self):
        return f"Edge(to={self.to}, weight={self.weight})"


class Graph:
    """Weighted undirected graph stored as an adjacency list"""

    def __init__(self, vertices):
        self.vertices = vertices
        self.adj_list = [[] for _ in range(vertices)]

    @classmethod
    def from_edges(cls, vertices, edges):
        """
        Build a graph from a list of edges
        edges: list of tuples (u, v, weight)
        """
        graph = cls(vertices)
        for u, v, w in edges:
            graph.add_edge(u, v, w)
        return graph

    def add_edge(self, u, v, weight):
        """Add an undirected edge to the graph"""
        self.adj_list[u].append(Edge(v, weight))
        self.adj_list[v].append(Edge(u, weight))

    def edges(self):
        """Yield each undirected edge once as (u, v, weight) with u <= v"""
        for u in range(self.vertices):
            # A self-loop stores two consecutive entries in the same slot
            skip_loop = False
            for edge in self.adj_list[u]:
                if edge.to == u:
                    if not skip_loop:
                        yield (u, u, edge.weight)
                    skip_loop = not skip_loop
                elif u < edge.to:
                    yield (u, edge.to, edge.weight)

    def prim_mst(self, start=0):
        return prim_mst(self, start=start)


class Item:
    """Candidate vertex in the priority queue with the cost to reach it"""

    def __init__(self, vertex, weight):
        self.vertex = vertex
        self.weight = weight

    def __lt__(self, other):
        return self.weight < other.weight

    def __repr__(self):
        return f"Item(vertex={self.vertex}, weight={self.weight})"


class PriorityQueue:
    """Min-heap of Items ordered by weight"""

    def __init__(self):
        self.heap = []

    def __len__(self):
        return len(self.heap)

    def push(self, item):
        heapq.heappush(self.heap, item)

    def pop(self):
        """Remove and return the item with the smallest weight"""
        return heapq.heappop(self.heap)


def prim_mst(graph, start=0):
    """Find the total weight of the MST using Prim's algorithm"""
    total_weight = 0

    # Visited list to keep track of tree membership
    visited = [False] * graph.vertices

    pq = PriorityQueue()
    pq.push(Item(start, 0))

    while len(pq) > 0:
        item = pq.pop()

        # Stale entry, vertex already in the tree
        if visited[item.vertex]:
            continue

        visited[item.vertex] = True
        total_weight += item.weight

        # Push every edge leaving the tree; duplicates are filtered on pop
        for edge in graph.adj_list[item.vertex]:
            if not visited[edge.to]:
                pq.push(Item(edge.to, edge.weight))

    return total_weight


EXAMPLE_VERTICES = 5
EXAMPLE_EDGES = [
    (0, 1, 2),
    (0, 3, 6),
    (1, 2, 3),
    (1, 3, 8),
    (1, 4, 5),
    (2, 4, 7),
    (3, 4, 9),
]


def create_example_graph():
    """Create the fixed 5-vertex example graph"""
    return Graph.from_edges(EXAMPLE_VERTICES, EXAMPLE_EDGES)


def main():
    graph = create_example_graph()

    total_weight = prim_mst(graph)

    print(f"Total weight of the Minimum Spanning Tree: {total_weight}")


if __name__ == "__main__":
    main()
