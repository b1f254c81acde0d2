"""
Union-Find (disjoint set) used by Kruskal's algorithm for cycle detection
"""


class UnknownNodeError(KeyError):
    """Raised when a node was never registered with make_set"""


class UnionFind:
    def __init__(self, nodes=()):
        # parent map is owned by a single Kruskal run
        self.parent = {}
        self.make_set(nodes)

    def make_set(self, nodes):
        """Register every node as its own singleton set"""
        for node in nodes:
            self.parent[node] = node

    def find(self, node):
        """Return the root of node's set, compressing the path walked"""
        if node not in self.parent:
            raise UnknownNodeError(node)

        # Walk up to the root
        root = node
        while self.parent[root] != root:
            root = self.parent[root]

        # Retrace and repoint every visited node at the root
        while self.parent[node] != root:
            next_node = self.parent[node]
            self.parent[node] = root
            node = next_node

        return root

    def union(self, a, b):
        """
        Merge the sets of a and b by pointing a's root at b's root.
        Callers check find(a) != find(b) first.
        """
        root_a = self.find(a)
        root_b = self.find(b)
        self.parent[root_a] = root_b

    def connected(self, a, b):
        return self.find(a) == self.find(b)

    def component_count(self):
        """Number of disjoint sets currently tracked"""
        return len({self.find(node) for node in list(self.parent)})
