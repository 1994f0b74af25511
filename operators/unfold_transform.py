from __future__ import annotations

import logging
from typing import Optional, Sequence

import numpy as np

from config import DEGENERATE_TOLERANCE
from errors import DegenerateFace

logger = logging.getLogger(__name__)


def _cross2(u: np.ndarray, v: np.ndarray) -> float:
    return float(u[0] * v[1] - u[1] * v[0])


def triangle_shape(
    a: np.ndarray,
    b: np.ndarray,
    c: np.ndarray,
    *,
    tol: float = DEGENERATE_TOLERANCE,
    face: Optional[int] = None,
) -> np.ndarray:
    """
    Planar shape of the 3D triangle (a, b, c) from its edge lengths only.
    Returns (3, 2): a at the origin, b on +x, c above the x axis.

      x_c = (|ab|^2 + |ac|^2 - |bc|^2) / (2 |ab|)     (law of cosines)
      y_c = 2 * area / |ab|                          (height over ab)

    Raises DegenerateFace when (2 * area)^2 <= tol * longest_edge^4.
    """
    a, b, c = (np.asarray(p, dtype=np.float64) for p in (a, b, c))
    lab = float(np.linalg.norm(b - a))
    lac = float(np.linalg.norm(c - a))
    lbc = float(np.linalg.norm(c - b))
    dblA = float(np.linalg.norm(np.cross(b - a, c - a)))

    longest = max(lab, lac, lbc)
    if longest == 0.0 or dblA * dblA <= tol * longest ** 4:
        logger.debug("Degenerate triangle (face=%s): edges %.3e %.3e %.3e", face, lab, lac, lbc)
        raise DegenerateFace(face, 0.5 * dblA)

    x = (lab * lab + lac * lac - lbc * lbc) / (2.0 * lab)
    y = dblA / lab
    return np.array([[0.0, 0.0], [lab, 0.0], [x, y]])


def place_root(
    P: np.ndarray,
    *,
    tol: float = DEGENERATE_TOLERANCE,
    face: Optional[int] = None,
) -> np.ndarray:
    """Canonical layout for the seed face P : (3, 3), in its own vertex order."""
    return triangle_shape(P[0], P[1], P[2], tol=tol, face=face)


def unfold_child(
    parent_xy: np.ndarray,
    parent_vertices: Sequence[int],
    child_vertices: Sequence[int],
    child_xyz: np.ndarray,
    shared: tuple[int, int],
    *,
    tol: float = DEGENERATE_TOLERANCE,
    face: Optional[int] = None,
) -> np.ndarray:
    """
    Hinge a child face open about the edge it shares with an already placed parent.

      parent_xy       : (3, 2) parent layout, in parent vertex order
      parent_vertices : parent's three vertex indices
      child_vertices  : child's three vertex indices
      child_xyz       : (3, 3) child positions, in child vertex order
      shared          : the two vertex indices common to both faces

    Returns (3, 2) child layout in child vertex order. The shared vertices are
    copied from the parent; the free vertex lies on the far side of the hinge
    line from the parent's free vertex.
    """
    parent_vertices = [int(v) for v in parent_vertices]
    child_vertices = [int(v) for v in child_vertices]
    va, vb = int(shared[0]), int(shared[1])

    pa, pb = parent_vertices.index(va), parent_vertices.index(vb)
    pq = 3 - pa - pb
    ca, cb = child_vertices.index(va), child_vertices.index(vb)
    cc = 3 - ca - cb

    local = triangle_shape(child_xyz[ca], child_xyz[cb], child_xyz[cc], tol=tol, face=face)

    A = parent_xy[pa]
    B = parent_xy[pb]
    Q = parent_xy[pq]

    # rotation taking +x onto the placed hinge direction, translation onto A
    d = B - A
    u = d / np.hypot(d[0], d[1])
    n = np.array([-u[1], u[0]])

    x, y = local[2]
    if _cross2(u, Q - A) > 0.0:
        # parent opens on the +n side: fold the child out to the other one
        y = -y
    C = A + x * u + y * n

    out = np.empty((3, 2), dtype=np.float64)
    out[ca] = A
    out[cb] = B
    out[cc] = C
    return out
