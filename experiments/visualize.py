# experiments/visualize.py
import os, sys, logging
import numpy as np
sys.path.insert(0, os.path.abspath("."))

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.collections import PolyCollection
import trimesh

from config import BACKGROUND, DEFAULT_RESOLUTION, NET_PADDING, PALETTE
from layout import layout_stats, normalize_net
from logging_config import setup_logging
from mesh import Mesh
from unfold import Net, unfold

logger = logging.getLogger(__name__)

# -------------------------
# Mesh dictionary
# -------------------------
base_dir = "data"
mesh_paths = {
    "cube": os.path.join(base_dir, "cube.obj"),
    "icosahedron": os.path.join(base_dir, "icosahedron.obj"),
    "dodecahedron": os.path.join(base_dir, "dodecahedron.obj"),
}

builtin_solids = {
    "tetrahedron": lambda: Mesh(
        V=np.array([[1, 1, 1], [1, -1, -1], [-1, 1, -1], [-1, -1, 1]], dtype=np.float64),
        F=np.array([[0, 1, 2], [0, 3, 1], [0, 2, 3], [1, 3, 2]]),
    ),
    "box": lambda: Mesh.from_trimesh(trimesh.creation.box()),
    "icosahedron": lambda: Mesh.from_trimesh(trimesh.creation.icosahedron()),
    "icosphere": lambda: Mesh.from_trimesh(trimesh.creation.icosphere(subdivisions=2)),
}


def load_solid(name: str) -> Mesh:
    """Mesh from data/ when available, otherwise a generated solid of the same name."""
    path = mesh_paths.get(name)
    if path is not None and os.path.exists(path):
        return Mesh.load(path)
    return builtin_solids[name]()


def plot_net(
    net: Net,
    title: str,
    save_path: str,
    *,
    wireframe: bool = False,
    resolution: int = DEFAULT_RESOLUTION,
    padding: float = NET_PADDING,
):
    """Draw the net on a square canvas, one palette colour per triangle (cycled)."""
    P = normalize_net(net.positions, resolution=resolution, padding=padding)
    tris = P.reshape(-1, 3, 3)[:, :, :2]
    colors = [PALETTE[i % len(PALETTE)] for i in range(tris.shape[0])]

    if wireframe:
        coll = PolyCollection(tris, facecolors="none", edgecolors=colors, linewidths=2.0,
                              joinstyle="round", capstyle="round")
    else:
        coll = PolyCollection(tris, facecolors=colors, edgecolors="none")

    dpi = 100
    fig, ax = plt.subplots(figsize=(resolution / dpi, resolution / dpi), dpi=dpi)
    fig.patch.set_facecolor(BACKGROUND)
    ax.set_facecolor(BACKGROUND)
    ax.add_collection(coll)

    half = 0.5 * resolution
    ax.set_xlim(-half, half)
    ax.set_ylim(-half, half)
    ax.set_aspect("equal", adjustable="box")
    ax.set_axis_off()
    ax.set_title(title)

    os.makedirs(os.path.dirname(save_path) or ".", exist_ok=True)
    plt.savefig(save_path, dpi=dpi, facecolor=fig.get_facecolor())
    plt.close(fig)


# -------------------------
# Main loop
# -------------------------
if __name__ == "__main__":
    setup_logging()
    out_dir = os.path.join("results", "nets")
    os.makedirs(out_dir, exist_ok=True)

    for name in ("tetrahedron", "box", "icosahedron", "icosphere"):
        logger.info("=== Processing %s ===", name)
        M = load_solid(name)
        net = unfold(M, seed=0)
        stats = layout_stats(net.positions)
        logger.info("Net size: %.4f x %.4f", stats.width, stats.height)
        logger.info("Net center: %s", np.round(stats.centroid, 4))

        for wireframe in (False, True):
            suffix = "wire" if wireframe else "fill"
            png = os.path.join(out_dir, f"{name}_{suffix}.png")
            plot_net(net, f"{name} ({len(net)} faces)", png, wireframe=wireframe)
            logger.info("  -> Saved net: %s", png)

    logger.info("All solids processed. Plots saved in %s/", out_dir)
