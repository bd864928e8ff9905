"""
Renderable Mesh (Data Model)
============================
Defines the in-memory result of loading an OBJ/MTL pair.

The vertex buffer is a flat numpy structured array laid out exactly as the
GPU-side consumer uploads it (position xyzw, texture uv, normal xyz; 36 bytes
per vertex). Every three consecutive vertices form one triangle.

Classes:
    Vertex: Value view of a single buffer record.
    Material: Named surface constants shared by reference between subsets.
    Subset: Contiguous, material-homogeneous range of the vertex buffer.
    Mesh: Owner of the vertex buffer, the subsets and the material table.
"""
from __future__ import annotations

from dataclasses import dataclass, field
import logging
from typing import Dict, List, Optional, Tuple, TYPE_CHECKING

import numpy as np

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

VERTEX_DTYPE = np.dtype([
    ("position", np.float32, (4,)),
    ("texture", np.float32, (2,)),
    ("normal", np.float32, (3,)),
])


def _zero_color() -> npt.NDArray[np.float32]:
    return np.zeros(3, dtype=np.float32)


def empty_vertex_buffer() -> npt.NDArray:
    return np.zeros(0, dtype=VERTEX_DTYPE)


@dataclass(frozen=True)
class Vertex:
    position: Tuple[float, float, float, float] = (0.0, 0.0, 0.0, 1.0)
    texture: Tuple[float, float] = (0.0, 0.0)
    normal: Tuple[float, float, float] = (0.0, 0.0, 0.0)


@dataclass(eq=False)
class Material:
    """
    Surface constants bound by the renderer for every subset using them.

    Materials compare by identity: two subsets referring to the same name
    share one instance.
    """
    name: str
    ambient_color: npt.NDArray[np.float32] = field(default_factory=_zero_color)
    diffuse_color: npt.NDArray[np.float32] = field(default_factory=_zero_color)
    specular_color: npt.NDArray[np.float32] = field(default_factory=_zero_color)
    shininess: float = 0.0
    texture_filename: Optional[str] = None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name={self.name!r}, texture={self.texture_filename!r})"


@dataclass
class Subset:
    start: int
    material: Material
    length: int = 0

    @property
    def stop(self) -> int:
        """One past the last vertex of the range."""
        return self.start + self.length


@dataclass(eq=False)
class Mesh:
    vertices: npt.NDArray = field(default_factory=empty_vertex_buffer)
    subsets: List[Subset] = field(default_factory=list)
    materials: Dict[str, Material] = field(default_factory=dict)

    def get_or_create_material(self, name: str) -> Material:
        """Return the material called `name`, registering a blank one if absent."""
        material = self.materials.get(name)
        if material is None:
            material = Material(name=name)
            self.materials[name] = material
            logger.debug(f"Created material '{name}'.")
        return material

    @property
    def vertex_count(self) -> int:
        return int(self.vertices.shape[0])

    @property
    def triangle_count(self) -> int:
        return self.vertex_count // 3

    def vertex(self, index: int) -> Vertex:
        record = self.vertices[index]
        return Vertex(
            position=tuple(record["position"].tolist()),
            texture=tuple(record["texture"].tolist()),
            normal=tuple(record["normal"].tolist()),
        )

    def subset_vertices(self, subset: Subset) -> npt.NDArray:
        """View of the vertex buffer covered by `subset`."""
        return self.vertices[subset.start:subset.stop]

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(vertices={self.vertex_count}, "
            f"subsets={len(self.subsets)}, materials={len(self.materials)})"
        )
