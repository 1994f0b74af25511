import numpy as np


def face_edge_lengths(V: np.ndarray, F: np.ndarray) -> np.ndarray:
    """
    Per-face edge lengths.
    Returns:
      L : (m, 3) where L[f, k] = |V[F[f, k+1]] - V[F[f, k]]|, i.e. the length
          of half-edge 3f+k.
    """
    P = V[F]                                        # (m,3,3)
    E = np.roll(P, -1, axis=1) - P                  # edge vectors k -> k+1
    return np.linalg.norm(E, axis=2)


def face_areas(V: np.ndarray, F: np.ndarray) -> np.ndarray:
    vi, vj, vk = V[F[:, 0]], V[F[:, 1]], V[F[:, 2]]
    return 0.5 * np.linalg.norm(np.cross(vj - vi, vk - vi), axis=1)


def planar_edge_lengths(P: np.ndarray) -> np.ndarray:
    """Same as face_edge_lengths for already laid-out triangles P : (k, 3, d)."""
    E = np.roll(P, -1, axis=1) - P
    return np.linalg.norm(E, axis=2)


def planar_areas(P: np.ndarray) -> np.ndarray:
    """Unsigned areas of planar triangles P : (k, 3, 2 or 3); z is ignored."""
    e1 = P[:, 1, :2] - P[:, 0, :2]
    e2 = P[:, 2, :2] - P[:, 0, :2]
    return 0.5 * np.abs(e1[:, 0] * e2[:, 1] - e1[:, 1] * e2[:, 0])
