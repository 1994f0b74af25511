# mesh.py
from __future__ import annotations

import os
from dataclasses import dataclass
import numpy as np
import trimesh


@dataclass
class Mesh:
    """Raw triangle soup: vertex positions and vertex-index triples."""
    V: np.ndarray
    F: np.ndarray

    @classmethod
    def load(
        cls,
        path: str,
        process: bool = False,
        recenter: bool = False,
        rescale_unit: bool = False,
    ) -> "Mesh":
        """
        Load a surface mesh via trimesh. Corners that differ only by texture
        coordinate or normal are merged so faces share vertices; face order is
        kept as in the file. Recentering and rescaling are optional since the
        net is normalized for display afterwards anyway.
        """
        if not os.path.exists(path):
            raise FileNotFoundError(path)

        obj = trimesh.load(path, process=process)

        if isinstance(obj, trimesh.Scene):
            if len(obj.geometry) == 0:
                raise ValueError("Scene contains no geometry.")
            tm = trimesh.util.concatenate(tuple(obj.dump()))
        elif isinstance(obj, trimesh.Trimesh):
            tm = obj
        else:
            raise TypeError(f"Unsupported type from trimesh.load: {type(obj)}")

        if tm.faces is None or len(tm.faces) == 0:
            raise ValueError("Loaded geometry has no faces (is it a point cloud?)")

        # OBJ corners like `f 1//1 2//1 3//1` load as separate vertices per normal
        tm.merge_vertices(merge_tex=True, merge_norm=True)

        return cls.from_trimesh(tm, recenter=recenter, rescale_unit=rescale_unit)

    @classmethod
    def from_trimesh(
        cls,
        tm: trimesh.Trimesh,
        recenter: bool = False,
        rescale_unit: bool = False,
    ) -> "Mesh":
        translation = -tm.centroid if recenter else np.zeros(3)
        if rescale_unit:
            if tm.scale == 0:
                raise ValueError("Degenerate geometry with zero scale.")
            scale = 1.0 / float(tm.scale)
        else:
            scale = 1.0

        V = (np.asarray(tm.vertices) + translation) * scale
        F = np.asarray(tm.faces).astype(np.int64, copy=False)

        return cls(V=V.astype(np.float64, copy=False), F=F)
