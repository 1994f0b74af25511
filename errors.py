# errors.py
from __future__ import annotations

from typing import Sequence


class UnfoldError(Exception):
    """Base class for mesh construction and unfolding failures."""


class InvalidFaceIndex(UnfoldError, IndexError):
    """A face references a vertex outside the vertex array."""

    def __init__(self, face: int, vertex: int | float, n_vertices: int) -> None:
        self.face = face
        self.vertex = vertex
        self.n_vertices = n_vertices
        message = (
            f"Face {face} references vertex {vertex}, "
            f"but the mesh has {n_vertices} vertices"
        )
        super().__init__(message)


class UnsupportedFaceArity(UnfoldError, ValueError):
    """A face is not a triangle."""

    def __init__(self, face: int, arity: int) -> None:
        self.face = face
        self.arity = arity
        super().__init__(f"Face {face} has {arity} vertices; only triangles are supported")


class NonManifoldGeometry(UnfoldError, ValueError):
    """More than two half-edges share the same unordered vertex pair."""

    def __init__(self, edge: tuple[int, int], half_edges: Sequence[int]) -> None:
        self.edge = edge
        self.half_edges = tuple(int(h) for h in half_edges)
        message = (
            f"Edge {edge} is shared by {len(self.half_edges)} half-edges "
            f"{self.half_edges} (at most 2 allowed)"
        )
        super().__init__(message)


class SeedFaceOutOfRange(UnfoldError, IndexError):
    def __init__(self, seed: object, n_faces: int) -> None:
        self.seed = seed
        self.n_faces = n_faces
        super().__init__(f"Seed face {seed!r} is not in [0, {n_faces})")


class DegenerateFace(UnfoldError, ValueError):
    """A face has (near) zero area and cannot be laid out in the plane."""

    def __init__(self, face: int | None, area: float) -> None:
        self.face = face
        self.area = area
        where = "Triangle" if face is None else f"Face {face}"
        super().__init__(f"{where} is degenerate (area={area:.3e})")
