"""
Near-Plane Culling
==================
Drops geometry closer to the viewer than a fixed depth.

The buffer is filtered into a new array; subsets are then re-mapped onto it
so that they keep partitioning the buffer. With `CullMode.VERTEX` single
vertices disappear and triangles following a removed vertex are no longer
aligned to multiples of three. `CullMode.TRIANGLE` removes whole triangles
instead.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from objmesh.config import CULLING_CUTOFF, CullMode
from objmesh.model.mesh import Mesh

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)


def keep_mask(
    mesh: Mesh,
    cutoff: float = CULLING_CUTOFF,
    mode: CullMode = CullMode.VERTEX,
) -> npt.NDArray[np.bool_]:
    """Boolean mask of the vertices that survive culling."""
    keep = ~(mesh.vertices["position"][:, 2] < cutoff)
    if CullMode(mode) == CullMode.TRIANGLE:
        count = mesh.vertex_count - mesh.vertex_count % 3
        whole = keep[:count].reshape(-1, 3).all(axis=1)
        keep[:count] = np.repeat(whole, 3)
    return keep


def cull_near_vertices(
    mesh: Mesh,
    cutoff: float = CULLING_CUTOFF,
    mode: CullMode = CullMode.VERTEX,
) -> int:
    """
    Remove vertices whose Z is strictly below `cutoff`.

    Args:
        mesh: Mesh modified in place.
        cutoff: Depth threshold; a vertex exactly at the cutoff is kept.
        mode: Remove single vertices or whole triangles.

    Returns:
        Number of removed vertices.
    """
    keep = keep_mask(mesh, cutoff, mode)
    removed = int(keep.size - np.count_nonzero(keep))
    if removed == 0:
        return 0

    # kept_before[i] = number of surviving vertices in [0, i)
    kept_before = np.concatenate(([0], np.cumsum(keep)))
    for subset in mesh.subsets:
        start = min(subset.start, mesh.vertex_count)
        stop = min(subset.stop, mesh.vertex_count)
        subset.start = int(kept_before[start])
        subset.length = int(kept_before[stop] - kept_before[start])

    mesh.vertices = mesh.vertices[keep]
    logger.info(f"Culled {removed} vertices nearer than z={cutoff} ({CullMode(mode)} mode).")
    return removed
