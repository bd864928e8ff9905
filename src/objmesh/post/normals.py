"""
Normal Synthesis
================
Flat normals for meshes whose file supplied none.

Each triangle corner gets the cross product of its own two adjacent edges,
so a non-planar or degenerate input may end up with three different
directions. Corners B and C take their edges in the opposite order to A. The
normals are oriented to point "up" (non-negative Y) rather than by winding.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from objmesh.model.mesh import Mesh

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def needs_normals(mesh: Mesh) -> bool:
    """True when the first vertex carries a zero normal, i.e. the file had no `vn` data."""
    if mesh.vertex_count == 0:
        return False
    return not np.any(mesh.vertices["normal"][0])


def corner_normals(triangles: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """
    Compute per-corner unit normals for a stack of triangles.

    Args:
        triangles: Array of shape (T, 3, 3), the xyz corners A, B, C of each triangle.

    Returns:
        Array of shape (T, 3, 3) with the normals at A, B and C. Vectors with a
        negative Y component are flipped; zero-length vectors stay zero.
    """
    a, b, c = triangles[:, 0], triangles[:, 1], triangles[:, 2]
    ab = b - a
    ac = c - a
    bc = c - b

    normals = np.stack(
        [
            np.cross(ab, ac),
            np.cross(-ab, bc),
            np.cross(-bc, -ac),
        ],
        axis=1,
    )

    downward = normals[..., 1] < 0
    normals[downward] = -normals[downward]

    lengths = np.linalg.norm(normals, axis=-1, keepdims=True)
    np.divide(normals, lengths, out=normals, where=lengths > 0)
    return normals


def calculate_normals(mesh: Mesh) -> None:
    """Overwrite the normals of every complete triangle in place."""
    count = mesh.vertex_count - mesh.vertex_count % 3
    if count != mesh.vertex_count:
        logger.warning(
            f"Vertex count {mesh.vertex_count} is not a multiple of 3, "
            f"trailing {mesh.vertex_count - count} vertices keep their normals."
        )
    if count == 0:
        return

    positions = mesh.vertices["position"][:count, :3].astype(np.float64)
    normals = corner_normals(positions.reshape(-1, 3, 3))
    mesh.vertices["normal"][:count] = normals.reshape(-1, 3)
    logger.debug(f"Synthesized normals for {count // 3} triangles.")
