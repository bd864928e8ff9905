"""
PyVista Conversion
Builds a `pyvista.PolyData` from a loaded mesh for inspection and plotting.
"""
import logging

import numpy as np
import numpy.typing as npt
import pyvista as pv

from objmesh.model.mesh import Mesh

logger = logging.getLogger(__name__)


def subset_ids(mesh: Mesh) -> npt.NDArray[np.int32]:
    """Index of the owning subset for every complete triangle (-1 if none)."""
    ids = np.full(mesh.triangle_count, -1, dtype=np.int32)
    for index, subset in enumerate(mesh.subsets):
        # Only triangles lying fully inside the subset are tagged
        first = -(-subset.start // 3)
        last = subset.stop // 3
        ids[first:last] = index
    return ids


def to_polydata(mesh: Mesh) -> pv.PolyData:
    """
    Convert the vertex buffer into a triangle `PolyData`.

    Point data carries ``Normals`` and ``TCoords``; cell data carries ``subset``.
    Trailing vertices that do not complete a triangle are left unconnected.
    """
    if mesh.vertex_count == 0:
        return pv.PolyData()

    points = np.ascontiguousarray(mesh.vertices["position"][:, :3], dtype=np.float64)
    n_triangles = mesh.triangle_count
    if n_triangles * 3 != mesh.vertex_count:
        logger.warning(f"{mesh.vertex_count % 3} trailing vertices do not form a triangle.")

    connectivity = np.arange(n_triangles * 3, dtype=np.int64).reshape(-1, 3)
    faces = np.hstack([np.full((n_triangles, 1), 3, dtype=np.int64), connectivity]).ravel()

    poly = pv.PolyData(points, faces=faces) if n_triangles else pv.PolyData(points)
    poly.point_data["Normals"] = np.ascontiguousarray(mesh.vertices["normal"], dtype=np.float32)
    poly.point_data["TCoords"] = np.ascontiguousarray(mesh.vertices["texture"], dtype=np.float32)
    if n_triangles:
        poly.cell_data["subset"] = subset_ids(mesh)
    return poly
