"""
The MODEL layer contains the pure data structures produced by the loader.
It has NO knowledge of the file formats or of the renderer consuming it.
"""
from objmesh.model.errors import MeshLoadError, MeshIOError, ParseError
from objmesh.model.mesh import VERTEX_DTYPE, Vertex, Subset, Material, Mesh

__all__ = [
    "VERTEX_DTYPE",
    "Vertex",
    "Subset",
    "Material",
    "Mesh",
    "MeshLoadError",
    "MeshIOError",
    "ParseError",
]
