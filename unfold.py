# unfold.py
from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from config import DEFAULT_SEED_FACE, DEGENERATE_TOLERANCE
from halfedge_mesh import HalfEdgeMesh
from operators.edge_lengths import face_edge_lengths, planar_edge_lengths
from operators.unfold_transform import place_root, unfold_child
from spanning_tree import SpanningTree, build_spanning_tree

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Net:
    """
    Flat layout of the faces reachable from the seed.
      positions : (3k, 3) triangle corners with z = 0, three per face
      face_ids  : (k,) source face of each triangle, ascending
    Corner j of triangle i is vertex F[face_ids[i], j] of the source mesh.
    """
    positions: np.ndarray
    face_ids: np.ndarray
    tree: SpanningTree

    def __len__(self) -> int:
        return int(self.face_ids.shape[0])

    @property
    def triangles(self) -> np.ndarray:
        return self.positions.reshape(-1, 3, 3)

    def triangle(self, f: int) -> np.ndarray:
        """(3, 3) layout of source face f."""
        i = int(np.searchsorted(self.face_ids, f))
        if i >= len(self) or self.face_ids[i] != f:
            raise KeyError(f)
        return self.triangles[i]


def build_net(
    mesh: HalfEdgeMesh,
    tree: SpanningTree,
    *,
    tolerance: float = DEGENERATE_TOLERANCE,
) -> Net:
    """Lay out every face of `tree`, parents before children."""
    placed = np.zeros((mesh.n_faces, 3, 2), dtype=np.float64)

    for f in tree.order:
        f = int(f)
        if f == tree.root:
            placed[f] = place_root(mesh.face_positions(f), tol=tolerance, face=f)
            continue

        p = int(tree.parent[f])
        h = int(tree.shared_half_edge[f])
        placed[f] = unfold_child(
            placed[p],
            mesh.face_vertices(p),
            mesh.face_vertices(f),
            mesh.face_positions(f),
            (mesh.origin(h), mesh.destination(h)),
            tol=tolerance,
            face=f,
        )

    face_ids = tree.faces
    out = np.zeros((face_ids.shape[0], 3, 3), dtype=np.float64)
    out[:, :, :2] = placed[face_ids]
    positions = out.reshape(-1, 3)

    positions.setflags(write=False)
    face_ids.setflags(write=False)
    return Net(positions=positions, face_ids=face_ids, tree=tree)


def unfold(
    mesh,
    seed: int = DEFAULT_SEED_FACE,
    *,
    tolerance: float = DEGENERATE_TOLERANCE,
) -> Net:
    """
    Unfold the connected component of `seed` into the plane.
    `mesh` is a HalfEdgeMesh or anything with V/F arrays (e.g. mesh.Mesh).
    """
    if not isinstance(mesh, HalfEdgeMesh):
        mesh = HalfEdgeMesh.from_mesh(mesh)

    tree = build_spanning_tree(mesh, seed)
    net = build_net(mesh, tree, tolerance=tolerance)

    if tree.is_spanning:
        logger.info("Unfolded %d faces from seed %d", len(net), tree.root)
    else:
        logger.info(
            "Unfolded %d of %d faces from seed %d (mesh is not connected)",
            len(net), mesh.n_faces, tree.root,
        )
    return net


def net_residuals(mesh: HalfEdgeMesh, net: Net) -> dict:
    """
    Largest deviations of a net from its mesh:
      edge_length : max |planar edge length - 3D edge length| over all faces
      hinge       : max distance between a shared vertex in a child and in its parent
    """
    F = mesh.F[net.face_ids]
    L3 = face_edge_lengths(mesh.V, F)
    L2 = planar_edge_lengths(net.triangles)
    edge_err = float(np.abs(L2 - L3).max()) if len(net) else 0.0

    hinge_err = 0.0
    for p, c, h in net.tree.edges():
        Tp, Tc = net.triangle(p), net.triangle(c)
        for v in (mesh.origin(h), mesh.destination(h)):
            xp = Tp[mesh.face_vertices(p).index(v)]
            xc = Tc[mesh.face_vertices(c).index(v)]
            hinge_err = max(hinge_err, float(np.linalg.norm(xp - xc)))

    return {"edge_length": edge_err, "hinge": hinge_err}
