"""
Mesh Loader
===========
Composes the OBJ/MTL readers and the post-processing passes into one call.

    mesh = load_mesh("assets/room.obj")

The load either completes or raises; no partially built mesh is returned.
"""
from __future__ import annotations

import logging
import os
from typing import Optional

from objmesh.config import LoaderSettings
from objmesh.io.obj_reader import GeometryReader
from objmesh.model.mesh import Mesh
from objmesh.post.culling import cull_near_vertices
from objmesh.post.normals import calculate_normals, needs_normals

logger = logging.getLogger(__name__)


def load_mesh(path: str | os.PathLike, settings: Optional[LoaderSettings] = None) -> Mesh:
    """
    Load a triangulated OBJ file (and its material libraries) into a `Mesh`.

    Args:
        path: Path to the OBJ file.
        settings: Post-processing options; defaults to `LoaderSettings()`.

    Returns:
        The loaded, post-processed mesh.

    Raises:
        MeshIOError: If the OBJ file or a material library cannot be read.
        ParseError: If either file is malformed.
    """
    settings = settings or LoaderSettings()
    logger.info(f"Loading mesh from: {os.fspath(path)}")

    mesh = GeometryReader(encoding=settings.encoding).read(path)

    if settings.generate_normals and needs_normals(mesh):
        logger.debug("No normals in file, synthesizing flat normals.")
        calculate_normals(mesh)

    if settings.cull_cutoff is not None:
        cull_near_vertices(mesh, cutoff=settings.cull_cutoff, mode=settings.cull_mode)

    logger.info(
        f"Mesh loaded: {mesh.vertex_count} vertices, {len(mesh.subsets)} subsets, "
        f"{len(mesh.materials)} materials."
    )
    return mesh
