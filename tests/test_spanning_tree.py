import logging

import numpy as np
import pytest

from errors import SeedFaceOutOfRange
from halfedge_mesh import HalfEdgeMesh
from operators.dual_graph import dual_graph
from spanning_tree import NO_PARENT, TreeNode, build_spanning_tree


def _depth(tree, f, limit):
    """Number of parent steps from f to the root; fails on a cycle."""
    steps = 0
    while tree[f].parent is not None:
        f = tree[f].parent
        steps += 1
        assert steps <= limit, "parent chain does not reach the root"
    return steps


def test_dual_graph_is_symmetric(icosphere):
    G = dual_graph(icosphere.he_twin)
    assert G.shape == (icosphere.n_faces, icosphere.n_faces)
    assert (G != G.T).nnz == 0
    # every triangle of a closed mesh has three neighbours
    np.testing.assert_array_equal(np.diff(G.indptr), 3)


def test_tetrahedron_tree(tetrahedron):
    tree = build_spanning_tree(tetrahedron, 0)
    assert tree.root == 0
    assert len(tree) == 4
    assert tree[0] == TreeNode(None, None)
    # breadth first, neighbours in ascending face order
    assert list(tree.order) == [0, 1, 2, 3]
    assert tree.children(0) == [1, 2, 3]
    assert tree.is_spanning


@pytest.mark.parametrize("name", ["tetrahedron", "cube", "icosphere"])
@pytest.mark.parametrize("seed", [0, 3])
def test_tree_edges_are_mesh_edges(name, seed, request):
    mesh = request.getfixturevalue(name)
    tree = build_spanning_tree(mesh, seed)

    assert len(tree) == mesh.n_faces
    assert sorted(tree.order.tolist()) == list(range(mesh.n_faces))
    assert tree.order[0] == seed

    n_edges = 0
    for parent, child, h in tree.edges():
        n_edges += 1
        assert mesh.face(h) == parent
        assert mesh.twin_face(h) == child
        assert tree[child] == TreeNode(parent, h)
    assert n_edges == mesh.n_faces - 1

    for f in range(mesh.n_faces):
        _depth(tree, f, mesh.n_faces)


def test_parents_come_before_children(icosphere):
    tree = build_spanning_tree(icosphere, 7)
    rank = {int(f): i for i, f in enumerate(tree.order)}
    for parent, child, _ in tree.edges():
        assert rank[parent] < rank[child]


def test_tree_is_deterministic(icosphere):
    a = build_spanning_tree(icosphere, 5)
    b = build_spanning_tree(HalfEdgeMesh(icosphere.V, icosphere.F), 5)
    np.testing.assert_array_equal(a.order, b.order)
    np.testing.assert_array_equal(a.parent, b.parent)
    np.testing.assert_array_equal(a.shared_half_edge, b.shared_half_edge)


def test_disconnected_mesh_covers_seed_component_only(two_tetrahedra):
    tree = build_spanning_tree(two_tetrahedra, 0)
    assert len(tree) == 4
    assert not tree.is_spanning
    np.testing.assert_array_equal(tree.faces, [0, 1, 2, 3])
    assert 5 not in tree
    assert tree.parent[5] == NO_PARENT
    with pytest.raises(KeyError):
        tree[5]

    other = build_spanning_tree(two_tetrahedra, 6)
    np.testing.assert_array_equal(other.faces, [4, 5, 6, 7])
    assert other[6].parent is None


def test_boundary_faces_are_leaves(unit_square):
    tree = build_spanning_tree(unit_square, 1)
    assert list(tree.order) == [1, 0]
    assert tree[0].parent == 1
    assert tree.children(0) == []


@pytest.mark.parametrize("seed", [-1, 4, 100, 1.0, True, "0", None])
def test_seed_out_of_range(tetrahedron, seed):
    with pytest.raises(SeedFaceOutOfRange) as excinfo:
        build_spanning_tree(tetrahedron, seed)
    assert excinfo.value.n_faces == 4


def test_numpy_integer_seed(tetrahedron):
    tree = build_spanning_tree(tetrahedron, np.int64(2))
    assert tree.root == 2
    assert isinstance(tree.root, int)


def test_rejected_seed_is_logged(tetrahedron, caplog):
    with caplog.at_level(logging.DEBUG, logger="spanning_tree"):
        with pytest.raises(SeedFaceOutOfRange):
            build_spanning_tree(tetrahedron, 9)
    assert "Rejecting seed face 9: mesh has 4 faces" in caplog.messages
