"""
Pytest configuration and fixtures for the unfolding tests.
"""

import numpy as np
import pytest
import trimesh

from halfedge_mesh import HalfEdgeMesh


TETRA_V = np.array(
    [[1.0, 1.0, 1.0], [1.0, -1.0, -1.0], [-1.0, 1.0, -1.0], [-1.0, -1.0, 1.0]]
)
TETRA_F = np.array([[0, 1, 2], [0, 3, 1], [0, 2, 3], [1, 3, 2]])


@pytest.fixture
def tetrahedron():
    """Regular tetrahedron with edge length 2*sqrt(2), outward winding."""
    return HalfEdgeMesh(TETRA_V, TETRA_F)


@pytest.fixture
def two_tetrahedra():
    """Two disjoint copies of the tetrahedron (faces 0-3 and 4-7)."""
    V = np.vstack([TETRA_V, TETRA_V + np.array([5.0, 0.0, 0.0])])
    F = np.vstack([TETRA_F, TETRA_F + 4])
    return HalfEdgeMesh(V, F)


@pytest.fixture
def unit_square():
    """Open strip: unit square split along its diagonal (4 boundary edges)."""
    V = [[0.0, 0.0, 0.0], [1.0, 0.0, 0.0], [1.0, 1.0, 0.0], [0.0, 1.0, 0.0]]
    F = [[0, 1, 2], [0, 2, 3]]
    return HalfEdgeMesh(V, F)


@pytest.fixture
def cube():
    box = trimesh.creation.box(extents=(2.0, 2.0, 2.0))
    return HalfEdgeMesh(box.vertices, box.faces)


@pytest.fixture
def icosphere():
    ico = trimesh.creation.icosphere(subdivisions=2, radius=1.0)
    return HalfEdgeMesh(ico.vertices, ico.faces)
