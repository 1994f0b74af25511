"""Index-based half-edge structure for closed triangle meshes.

Half-edge ``h = 3*f + k`` runs from ``F[f, k]`` to ``F[f, (k + 1) % 3]``, so
``face``, ``next`` and ``origin`` are implicit in the index and only the twin
table has to be built. Every relation is an index into an owned array.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from errors import InvalidFaceIndex, NonManifoldGeometry, UnsupportedFaceArity

logger = logging.getLogger(__name__)

NO_TWIN = -1


def _as_vertex_array(vertices) -> np.ndarray:
    V = np.array(vertices, dtype=np.float64, copy=True)
    if V.size == 0:
        V = V.reshape(0, 3)
    if V.ndim != 2 or V.shape[1] != 3:
        raise ValueError(f"vertices must have shape (n, 3), got {V.shape}")
    return V


def _as_triangle_array(faces, n_vertices: int) -> np.ndarray:
    """
    Stack faces into an (m, 3) int array, rejecting anything that is not a
    triangle and any index that is not a whole number.
    """
    if isinstance(faces, np.ndarray) and faces.ndim == 2:
        if faces.shape[0] > 0 and faces.shape[1] != 3:
            logger.debug("Rejecting face array with %d columns", faces.shape[1])
            raise UnsupportedFaceArity(0, int(faces.shape[1]))
        A = np.array(faces, copy=True)
    else:
        rows = []
        for f, face in enumerate(faces):
            face = tuple(face)
            if len(face) != 3:
                logger.debug("Rejecting face %d with %d vertices", f, len(face))
                raise UnsupportedFaceArity(f, len(face))
            rows.append(face)
        A = np.array(rows)
    A = A.reshape(-1, 3)

    if A.dtype.kind == "f":
        fractional = ~np.isfinite(A) | (A != np.round(A))
        if fractional.any():
            f, k = np.argwhere(fractional)[0]
            logger.debug("Face %d has non-integral vertex index %r", f, A[f, k])
            raise InvalidFaceIndex(int(f), float(A[f, k]), n_vertices)
    return A.astype(np.int64)


def _check_indices(F: np.ndarray, n_vertices: int) -> None:
    bad = (F < 0) | (F >= n_vertices)
    if bad.any():
        f, k = np.argwhere(bad)[0]
        logger.debug("Face %d references vertex %d of %d", f, F[f, k], n_vertices)
        raise InvalidFaceIndex(int(f), int(F[f, k]), n_vertices)


def pair_twins(origin: np.ndarray, target: np.ndarray) -> np.ndarray:
    """
    Match half-edges on their unordered vertex pair.
    Returns twin : (h,) with NO_TWIN where a half-edge has no partner.
    """
    nH = origin.shape[0]
    twin = np.full(nH, NO_TWIN, dtype=np.int64)
    if nH == 0:
        return twin

    K = np.sort(np.stack([origin, target], axis=1), axis=1)
    uniq, inverse, counts = np.unique(K, axis=0, return_inverse=True, return_counts=True)
    inverse = inverse.reshape(-1)

    # half-edges grouped by edge, each group in ascending half-edge order
    order = np.argsort(inverse, kind="stable")
    starts = np.cumsum(counts) - counts

    crowded = np.flatnonzero(counts > 2)
    if crowded.size > 0:
        g = crowded[0]
        members = order[starts[g]:starts[g] + counts[g]]
        logger.debug(
            "Edge (%d, %d) is shared by half-edges %s", uniq[g, 0], uniq[g, 1], members.tolist()
        )
        raise NonManifoldGeometry((int(uniq[g, 0]), int(uniq[g, 1])), members)

    paired = starts[counts == 2]
    first, second = order[paired], order[paired + 1]
    twin[first] = second
    twin[second] = first
    return twin


class HalfEdgeMesh:
    """
    Half-edge view of a triangle mesh.

    Attributes (all read-only arrays):
      V        : (n, 3) vertex positions
      F        : (m, 3) vertex indices per face, in input winding
      he_twin  : (3m,) opposite half-edge or NO_TWIN on the boundary
    """

    def __init__(self, vertices, faces) -> None:
        V = _as_vertex_array(vertices)
        F = _as_triangle_array(faces, V.shape[0])
        _check_indices(F, V.shape[0])

        origin = F.reshape(-1)
        target = np.roll(F, -1, axis=1).reshape(-1)
        twin = pair_twins(origin, target)

        for arr in (V, F, twin):
            arr.setflags(write=False)
        self.V = V
        self.F = F
        self.he_twin = twin

        logger.debug(
            "Built half-edge mesh: V=%d F=%d H=%d boundary=%d",
            self.n_vertices, self.n_faces, self.n_half_edges,
            int(np.count_nonzero(twin == NO_TWIN)),
        )

    @classmethod
    def from_mesh(cls, mesh) -> "HalfEdgeMesh":
        return cls(mesh.V, mesh.F)

    def __repr__(self) -> str:
        return f"HalfEdgeMesh(n_vertices={self.n_vertices}, n_faces={self.n_faces})"

    # -----------------------------
    # Sizes
    # -----------------------------

    @property
    def n_vertices(self) -> int:
        return int(self.V.shape[0])

    @property
    def n_faces(self) -> int:
        return int(self.F.shape[0])

    @property
    def n_half_edges(self) -> int:
        return 3 * self.n_faces

    @property
    def is_closed(self) -> bool:
        return bool(np.all(self.he_twin != NO_TWIN))

    # -----------------------------
    # Half-edge relations
    # -----------------------------

    def origin(self, h: int) -> int:
        return int(self.F[h // 3, h % 3])

    def destination(self, h: int) -> int:
        return int(self.F[h // 3, (h + 1) % 3])

    def next(self, h: int) -> int:
        return 3 * (h // 3) + (h + 1) % 3

    def face(self, h: int) -> int:
        return h // 3

    def twin(self, h: int) -> Optional[int]:
        t = int(self.he_twin[h])
        return None if t == NO_TWIN else t

    def twin_face(self, h: int) -> Optional[int]:
        t = self.twin(h)
        return None if t is None else t // 3

    def boundary_half_edges(self) -> np.ndarray:
        return np.flatnonzero(self.he_twin == NO_TWIN)

    # -----------------------------
    # Face queries
    # -----------------------------

    def face_half_edges(self, f: int) -> tuple[int, int, int]:
        h = 3 * f
        return h, h + 1, h + 2

    def face_vertices(self, f: int) -> tuple[int, int, int]:
        a, b, c = self.F[f]
        return int(a), int(b), int(c)

    def face_positions(self, f: int) -> np.ndarray:
        """(3, 3) positions of the face's vertices, in face order."""
        return self.V[self.F[f]]

    def shared_edge(self, f: int, g: int) -> Optional[tuple[int, int]]:
        """
        Half-edge pair (h in f, twin in g) realizing the adjacency of f and g,
        or None when the faces do not share an edge. The first matching
        half-edge of f wins if they share more than one.
        """
        for h in self.face_half_edges(f):
            t = int(self.he_twin[h])
            if t != NO_TWIN and t // 3 == g:
                return h, t
        return None

    def are_adjacent(self, f: int, g: int) -> bool:
        return self.shared_edge(f, g) is not None

    def neighbors(self, f: int) -> list[int]:
        """Faces across each half-edge of f, in half-edge order (boundary skipped)."""
        return [int(t) // 3 for t in self.he_twin[3 * f:3 * f + 3] if t != NO_TWIN]
