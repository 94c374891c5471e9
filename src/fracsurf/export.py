"""
ASCII STL export of height fields.

The grid is triangulated with two facets per cell, wound counter-clockwise
when seen from above so that facet normals point to +z on a flat field. The
domain is centred on the origin.
"""

from pathlib import Path

import numpy as np


def to_stl(field: np.ndarray, Lx: float, Ly: float, name: str = "surface") -> bytes:
    """
    Triangulate a height field as an ASCII STL solid.

    Parameters
    ----------
    field : ndarray
        Height field of shape (ny, nx), with nx, ny >= 2.
    Lx, Ly : float
        Physical extent of the grid along x and y. Grid nodes span
        [-Lx/2, Lx/2] x [-Ly/2, Ly/2].
    name : str, optional
        Solid name written in the header and footer. Default is "surface".

    Returns
    -------
    blob : bytes
        ASCII STL document with 2 (nx - 1)(ny - 1) facets. Facet normals are
        the (unnormalized) cross products of the triangle edges.
    """
    z = np.asarray(field, dtype=float)
    if z.ndim != 2:
        raise ValueError(f"Expected 2D array, got shape {z.shape}")
    ny, nx = z.shape
    if nx < 2 or ny < 2:
        raise ValueError(f"Need at least a 2x2 grid to triangulate, got {ny}x{nx}")

    x = np.arange(nx) * (Lx / (nx - 1)) - Lx / 2
    y = np.arange(ny) * (Ly / (ny - 1)) - Ly / 2
    X, Y = np.meshgrid(x, y)
    nodes = np.stack([X, Y, z], axis=-1)

    p00 = nodes[:-1, :-1].reshape(-1, 3)
    p10 = nodes[:-1, 1:].reshape(-1, 3)
    p01 = nodes[1:, :-1].reshape(-1, 3)
    p11 = nodes[1:, 1:].reshape(-1, 3)

    # Per cell: (p00, p10, p11) then (p00, p11, p01)
    v1 = np.stack([p00, p00], axis=1).reshape(-1, 3)
    v2 = np.stack([p10, p11], axis=1).reshape(-1, 3)
    v3 = np.stack([p11, p01], axis=1).reshape(-1, 3)
    normals = np.cross(v2 - v1, v3 - v1)

    lines = [f"solid {name}"]
    for n, a, b, c in zip(normals.tolist(), v1.tolist(), v2.tolist(), v3.tolist()):
        lines.append(f"  facet normal {n[0]} {n[1]} {n[2]}")
        lines.append("    outer loop")
        lines.append(f"      vertex {a[0]} {a[1]} {a[2]}")
        lines.append(f"      vertex {b[0]} {b[1]} {b[2]}")
        lines.append(f"      vertex {c[0]} {c[1]} {c[2]}")
        lines.append("    endloop")
        lines.append("  endfacet")
    lines.append(f"endsolid {name}")
    return "\n".join(lines).encode("ascii")


def save_stl(
    path: str | Path,
    field: np.ndarray,
    Lx: float,
    Ly: float,
    name: str | None = None,
) -> Path:
    """Write :func:`to_stl` output to ``path``; the solid name defaults to the file stem."""
    path = Path(path)
    path.write_bytes(to_stl(field, Lx, Ly, name=name or path.stem))
    return path
