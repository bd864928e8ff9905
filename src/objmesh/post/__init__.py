"""Post-processing passes run once a mesh has been read."""
from objmesh.post.culling import cull_near_vertices
from objmesh.post.normals import calculate_normals, needs_normals

__all__ = ["calculate_normals", "cull_near_vertices", "needs_normals"]
