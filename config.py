"""
Global constants
================
Numerical tolerances and display defaults shared by the unfolding modules.

Functions that depend on these values accept keyword overrides, so the
constants here are only defaults.
"""

# Squared-area tolerance, relative to the squared longest edge of a triangle.
# Triangles at or below it are rejected as degenerate.
DEGENERATE_TOLERANCE: float = 1e-12

# Absolute distance within which shared-edge endpoints and edge lengths
# are considered equal when checking a net.
SHARED_EDGE_TOLERANCE: float = 1e-6

DEFAULT_SEED_FACE: int = 0

# Display defaults used when normalizing a net for a square canvas.
DEFAULT_RESOLUTION: int = 1024
NET_PADDING: float = 100.0

# sRGB face colours, cycled per triangle.
PALETTE: tuple[tuple[float, float, float], ...] = (
    (0.5568627450980392, 0.792156862745098, 0.9019607843137255),
    (0.12941176470588237, 0.6196078431372549, 0.7372549019607844),
    (0.00784313725490196, 0.18823529411764706, 0.2784313725490196),
    (1.0, 0.7176470588235294, 0.011764705882352941),
    (0.984313725490196, 0.5215686274509804, 0.0),
)
BACKGROUND: tuple[float, float, float] = (1.0, 0.98, 0.98)
