# operators/__init__.py
from .edge_lengths import face_edge_lengths, face_areas, planar_edge_lengths, planar_areas
from .dual_graph import dual_graph
from .unfold_transform import triangle_shape, place_root, unfold_child

__all__ = [
    "face_edge_lengths",
    "face_areas",
    "planar_edge_lengths",
    "planar_areas",
    "dual_graph",
    "triangle_shape",
    "place_root",
    "unfold_child",
]
