"""Spanning tree over the dual graph (faces as nodes, shared edges as links)."""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from typing import Iterator, NamedTuple, Optional

import numpy as np
from scipy.sparse.csgraph import breadth_first_order

from config import DEFAULT_SEED_FACE
from errors import SeedFaceOutOfRange
from halfedge_mesh import HalfEdgeMesh
from operators.dual_graph import dual_graph

logger = logging.getLogger(__name__)

NO_PARENT = -1


class TreeNode(NamedTuple):
    """Parent face and the parent's half-edge on the shared edge (None for the root)."""

    parent: Optional[int]
    half_edge: Optional[int]


@dataclass(frozen=True)
class SpanningTree:
    """
    root             : seed face
    order            : faces in visitation order (root first, parents before children)
    parent           : (m,) parent face, NO_PARENT for the root and unreached faces
    shared_half_edge : (m,) parent-side half-edge of the tree edge, NO_PARENT likewise
    """
    root: int
    order: np.ndarray
    parent: np.ndarray
    shared_half_edge: np.ndarray

    def __len__(self) -> int:
        return int(self.order.shape[0])

    def __contains__(self, f: object) -> bool:
        if not isinstance(f, numbers.Integral) or not 0 <= f < self.parent.shape[0]:
            return False
        return bool(f == self.root or self.parent[f] != NO_PARENT)

    def __getitem__(self, f: int) -> TreeNode:
        if f not in self:
            raise KeyError(f)
        if f == self.root:
            return TreeNode(None, None)
        return TreeNode(int(self.parent[f]), int(self.shared_half_edge[f]))

    @property
    def faces(self) -> np.ndarray:
        """Faces in the tree, ascending."""
        return np.sort(self.order)

    @property
    def is_spanning(self) -> bool:
        """True when every face of the mesh is in the tree."""
        return len(self) == self.parent.shape[0]

    def children(self, f: int) -> list[int]:
        """Children of f, in visitation order."""
        return [int(c) for c in self.order[self.parent[self.order] == f]]

    def edges(self) -> Iterator[tuple[int, int, int]]:
        """(parent, child, parent half-edge) for every tree edge, in visitation order."""
        for c in self.order[1:]:
            yield int(self.parent[c]), int(c), int(self.shared_half_edge[c])


def _check_seed(seed, n_faces: int) -> int:
    if isinstance(seed, bool) or not isinstance(seed, numbers.Integral):
        logger.debug("Rejecting seed face %r: not an integer", seed)
        raise SeedFaceOutOfRange(seed, n_faces)
    if not 0 <= seed < n_faces:
        logger.debug("Rejecting seed face %d: mesh has %d faces", seed, n_faces)
        raise SeedFaceOutOfRange(seed, n_faces)
    return int(seed)


def build_spanning_tree(mesh: HalfEdgeMesh, seed: int = DEFAULT_SEED_FACE) -> SpanningTree:
    """
    Breadth-first spanning tree of the seed's connected component.
    Neighbours are expanded in ascending face index, so the tree only depends
    on the mesh and the seed. Faces outside the component are left out.
    """
    seed = _check_seed(seed, mesh.n_faces)

    G = dual_graph(mesh.he_twin)
    order, pred = breadth_first_order(G, seed, directed=True, return_predecessors=True)
    order = np.asarray(order, dtype=np.int64)

    parent = np.where(pred < 0, NO_PARENT, pred).astype(np.int64)
    parent[seed] = NO_PARENT

    shared = np.full(mesh.n_faces, NO_PARENT, dtype=np.int64)
    for c in order[1:]:
        h, _ = mesh.shared_edge(int(parent[c]), int(c))
        shared[c] = h

    for arr in (order, parent, shared):
        arr.setflags(write=False)

    logger.debug("Spanning tree from seed %d covers %d of %d faces", seed, order.shape[0], mesh.n_faces)
    return SpanningTree(root=seed, order=order, parent=parent, shared_half_edge=shared)
