import numpy as np
import scipy.sparse as sp


def dual_graph(he_twin: np.ndarray) -> sp.csr_matrix:
    """
    Face adjacency (dual graph) from a twin table.
      he_twin : (3m,) opposite half-edge per half-edge, negative on the boundary.
    Returns a symmetric (m, m) CSR matrix with a unit entry for every pair of
    faces that share at least one edge. Column indices are sorted, so row
    traversal visits neighbours in ascending face index.
    """
    nH = he_twin.shape[0]
    m = nH // 3
    h = np.flatnonzero(he_twin >= 0)
    rows = h // 3
    cols = he_twin[h] // 3

    data = np.ones(rows.shape[0], dtype=np.float64)
    G = sp.coo_matrix((data, (rows, cols)), shape=(m, m)).tocsr()
    # faces sharing two edges would otherwise carry weight 2
    G.data[:] = 1.0
    G.sort_indices()
    return G
