import numpy as np

from union_find import WeightedQuickUnionUF
from validation import validate_grid_size, validate_index


class Percolation:
    """
    An n by n grid of sites that are opened one at a time.

    Two union-find structures are kept over the same sites. The top one
    carries a virtual top site linked to row 1 and answers isFull. The bottom
    one carries a virtual bottom site linked to row n and is only used to
    decide when the grid starts to percolate. Keeping the bottom link out of
    the top structure stops sites that only touch the bottom of a
    percolating cluster from being reported full (backwash).
    """

    # create a n by n grid with all sites blocked
    def __init__(self, n: int):
        n = validate_grid_size(n)

        self.size = n
        self.gridSquare = n * n
        self.grid = np.zeros(self.gridSquare, dtype=bool)

        self.wqfTop = WeightedQuickUnionUF(self.gridSquare + 1)
        self.wqfBottom = WeightedQuickUnionUF(self.gridSquare + 1)

        # the virtual site takes the last slot in both structures
        self.virtualTop = self.gridSquare
        self.virtualBottom = self.gridSquare

        for col in range(n):
            self.wqfTop.union(self.virtualTop, col)
            self.wqfBottom.union(self.virtualBottom, (n - 1) * n + col)

        self.openSite = 0
        self.doesPercolate = False

    # open the site[row,col] if it's not open yet
    def open_site(self, row: int, col: int):
        self.validState(row, col)

        flatIndex = self.flattenGrid(row, col)
        if self.grid[flatIndex]:
            return

        self.grid[flatIndex] = True
        self.openSite += 1

        ## up, down, left, right
        for nRow, nCol in ((row - 1, col), (row + 1, col), (row, col - 1), (row, col + 1)):
            if self.isOnGrid(nRow, nCol):
                neighbour = self.flattenGrid(nRow, nCol)
                if self.grid[neighbour]:
                    self.wqfTop.union(flatIndex, neighbour)
                    self.wqfBottom.union(flatIndex, neighbour)

        # only the site that was just opened can complete a new top-bottom path
        if not self.doesPercolate:
            self.doesPercolate = (
                self.wqfTop.connected(self.virtualTop, flatIndex)
                and self.wqfBottom.connected(self.virtualBottom, flatIndex)
            )

    # is site[row,col] open?
    def isOpen(self, row: int, col: int) -> bool:
        self.validState(row, col)
        return bool(self.grid[self.flattenGrid(row, col)])

    # is site[row,col] open and reachable from the top row?
    def isFull(self, row: int, col: int) -> bool:
        self.validState(row, col)
        flatIndex = self.flattenGrid(row, col)
        # closed row 1 sites share a component with the virtual top
        if not self.grid[flatIndex]:
            return False
        return self.wqfTop.connected(self.virtualTop, flatIndex)

    def percolates(self) -> bool:
        return self.doesPercolate

    def numberOfOpenSites(self) -> int:
        return self.openSite

    def validState(self, row: int, col: int):
        validate_index(row, self.size, "row")
        validate_index(col, self.size, "column")

    def flattenGrid(self, row: int, col: int) -> int:
        return self.size * (row - 1) + (col - 1)

    def isOnGrid(self, row: int, col: int) -> bool:
        return 1 <= row <= self.size and 1 <= col <= self.size

    def __repr__(self):
        return f"Percolation(n={self.size}, open={self.openSite}, percolates={self.doesPercolate})"
