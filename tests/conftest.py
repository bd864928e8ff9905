import textwrap
from pathlib import Path

import numpy as np
import pytest

from objmesh.model.mesh import VERTEX_DTYPE, Material, Mesh, Subset


@pytest.fixture
def write_file(tmp_path):
    """Write dedented text to tmp_path/name and return the path."""
    def _write(name: str, text: str) -> Path:
        path = tmp_path / name
        path.write_text(textwrap.dedent(text).lstrip(), encoding="utf-8")
        return path
    return _write


def make_mesh(positions, normals=None, material_name="m") -> Mesh:
    """One-subset mesh with the given xyz positions."""
    positions = np.asarray(positions, dtype=np.float32).reshape(-1, 3)
    vertices = np.zeros(len(positions), dtype=VERTEX_DTYPE)
    vertices["position"][:, :3] = positions
    vertices["position"][:, 3] = 1.0
    if normals is not None:
        vertices["normal"] = np.asarray(normals, dtype=np.float32).reshape(-1, 3)
    material = Material(name=material_name)
    return Mesh(
        vertices=vertices,
        subsets=[Subset(start=0, material=material, length=len(positions))],
        materials={material_name: material},
    )
