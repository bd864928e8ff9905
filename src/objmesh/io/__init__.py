"""Readers for the OBJ geometry and MTL material text formats."""
from objmesh.io.mtl_reader import MaterialReader
from objmesh.io.obj_reader import GeometryReader

__all__ = ["GeometryReader", "MaterialReader"]
