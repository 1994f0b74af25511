import os
import sys
import time
import logging
import numpy as np

sys.path.insert(0, os.path.abspath("."))

from halfedge_mesh import HalfEdgeMesh
from layout import layout_stats
from logging_config import setup_logging
from operators.edge_lengths import face_areas, planar_areas
from unfold import net_residuals, unfold
from experiments.visualize import load_solid

logger = logging.getLogger(__name__)


def run_one(name: str, seed: int = 0):
    """
    Unfold one solid from one seed face.
    Returns dict with sizes, layout statistics, residuals and timings.
    """
    M = load_solid(name)

    t0 = time.perf_counter()
    H = HalfEdgeMesh(M.V, M.F)
    t_build = time.perf_counter() - t0

    t0 = time.perf_counter()
    net = unfold(H, seed=seed)
    t_unfold = time.perf_counter() - t0

    stats = layout_stats(net.positions)
    res = net_residuals(H, net)
    area_3d = face_areas(H.V, H.F[net.face_ids])
    area_2d = planar_areas(net.triangles)

    return {
        "name": name,
        "nV": H.n_vertices,
        "nF": H.n_faces,
        "closed": H.is_closed,
        "seed": int(seed),
        "width": stats.width,
        "height": stats.height,
        "max_edge_err": res["edge_length"],
        "max_hinge_err": res["hinge"],
        "max_area_err": float(np.abs(area_2d - area_3d).max()),
        "t_build": float(t_build),
        "t_unfold": float(t_unfold),
    }


if __name__ == "__main__":
    setup_logging(log_file=os.path.join("experiments", "unfold_solids.log"))

    rows = []
    for name in ("tetrahedron", "box", "icosahedron", "icosphere"):
        for seed in (0, 1):
            rows.append(run_one(name, seed))

    header = f"{'mesh':<12} {'F':>5} {'seed':>4} {'width':>8} {'height':>8} {'edge err':>10} {'hinge err':>10} {'ms':>7}"
    logger.info(header)
    logger.info("-" * len(header))
    for r in rows:
        logger.info(
            f"{r['name']:<12} {r['nF']:>5d} {r['seed']:>4d} {r['width']:>8.4f} {r['height']:>8.4f} "
            f"{r['max_edge_err']:>10.2e} {r['max_hinge_err']:>10.2e} {1e3 * (r['t_build'] + r['t_unfold']):>7.2f}"
        )
