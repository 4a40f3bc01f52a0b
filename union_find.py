class WeightedQuickUnionUF:
    """
    Weighted quick-union with path compression over sites 0 .. n-1.

    The smaller tree is always hung under the root of the larger one, so
    union and connected run in amortized near-constant time.
    """

    def __init__(self, n: int):
        """
        :param n: The number of sites. Each site starts in its own component.
        """
        if n <= 0:
            raise ValueError("n must be > 0")

        # parent[i] = parent of site i, roots point to themselves
        self.parent = list(range(n))

        # size[i] = number of sites in the tree rooted at i
        self.size = [1] * n

        self.count = n

    def __len__(self):
        return len(self.parent)

    def get_count(self):
        """
        Returns the number of disjoint sets.
        """
        return self.count

    def _validate(self, p):
        n = len(self.parent)
        if p < 0 or p >= n:
            raise IndexError(f"index {p} is not between 0 and {n-1}")

    def find(self, p):
        """
        Returns the root of the set containing site 'p', pointing every
        node on the walked path straight at that root.
        """
        self._validate(p)
        parent = self.parent

        root = p
        while root != parent[root]:
            root = parent[root]

        while p != root:
            next_p = parent[p]
            parent[p] = root
            p = next_p

        return root

    def connected(self, p, q):
        """
        Returns True if 'p' and 'q' are in the same component.
        """
        return self.find(p) == self.find(q)

    def union(self, p, q):
        """
        Merges the set containing 'p' with the set containing 'q'.

        :return: False if they were already connected, True otherwise.
        """
        rootP = self.find(p)
        rootQ = self.find(q)

        if rootP == rootQ:
            return False

        if self.size[rootP] < self.size[rootQ]:
            self.parent[rootP] = rootQ
            self.size[rootQ] += self.size[rootP]
        else:
            self.parent[rootQ] = rootP
            self.size[rootP] += self.size[rootQ]

        self.count -= 1
        return True
