"""
objmesh
=======
Loader for triangulated OBJ meshes and their MTL material libraries.

    from objmesh import load_mesh
    mesh = load_mesh("scene.obj")
    for subset in mesh.subsets:
        draw(mesh.subset_vertices(subset), subset.material)
"""
from objmesh.config import CULLING_CUTOFF, CullMode, LoaderSettings
from objmesh.loader import load_mesh
from objmesh.model.errors import MeshIOError, MeshLoadError, ParseError
from objmesh.model.mesh import VERTEX_DTYPE, Material, Mesh, Subset, Vertex

__all__ = [
    "CULLING_CUTOFF",
    "CullMode",
    "LoaderSettings",
    "load_mesh",
    "MeshIOError",
    "MeshLoadError",
    "ParseError",
    "VERTEX_DTYPE",
    "Material",
    "Mesh",
    "Subset",
    "Vertex",
]
