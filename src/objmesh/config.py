"""
Configuration & Constants
=========================
This module serves as the central registry for loader constants and defaults.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (e.g. the near-plane cutoff)
   scattered throughout the readers and post-processing steps.
2. Tuning: Callers override behaviour through a single `LoaderSettings`
   object instead of keyword arguments threaded through every function.

Exports:
    CULLING_CUTOFF (float): Depth below which vertices are discarded.
    DEFAULT_ENCODING (str): Text encoding of OBJ/MTL files.
    CullMode: Per-vertex or per-triangle culling.
    LoaderSettings: Settings bundle accepted by `objmesh.load_mesh`.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
from typing import Optional


# Global Constants
CULLING_CUTOFF: float = 10.0
DEFAULT_ENCODING: str = "utf-8"


class CullMode(StrEnum):
    VERTEX = "vertex"  # drop single vertices, triangles may fall apart
    TRIANGLE = "triangle"  # drop the whole triangle if any corner is too near


@dataclass
class LoaderSettings:
    """
    Settings for one mesh load.

    Attributes:
        cull_cutoff: Vertices with Z strictly below this value are removed.
            ``None`` disables culling.
        cull_mode: Whether culling removes single vertices or whole triangles.
        generate_normals: Synthesize flat normals when the file has none.
        encoding: Text encoding used for both OBJ and MTL files.
    """
    cull_cutoff: Optional[float] = CULLING_CUTOFF
    cull_mode: CullMode = CullMode.VERTEX
    generate_normals: bool = True
    encoding: str = DEFAULT_ENCODING
