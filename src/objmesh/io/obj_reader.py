"""
OBJ Geometry Reader
===================
Reads a triangulated OBJ file into the vertex buffer and subsets of a `Mesh`.

Faces are expanded into a flat, non-indexed vertex buffer: every face
contributes three vertices assembled from the position, texture coordinate
and normal tables declared before it. Subsets are opened by `usemtl`; each
face extends the subset opened last. Material libraries referenced through
`mtllib` are handed to the `MaterialReader`.
"""
from __future__ import annotations

from contextlib import closing
import logging
import os
from typing import List, Optional, Sequence, Set, Tuple

import numpy as np

from objmesh.config import DEFAULT_ENCODING
from objmesh.io.mtl_reader import MaterialReader
from objmesh.io.tokens import INDEX_PATTERN, Line, scan_lines
from objmesh.model.mesh import VERTEX_DTYPE, Mesh, Subset

logger = logging.getLogger(__name__)

NO_TEXTURE = (0.0, 0.0)
NO_NORMAL = (0.0, 0.0, 0.0)

VertexRecord = Tuple[Tuple[float, ...], Tuple[float, ...], Tuple[float, ...]]


class GeometryReader:
    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        self.encoding = encoding
        self._reset()

    def _reset(self) -> None:
        self.mesh = Mesh()
        self.materials = MaterialReader(self.mesh, encoding=self.encoding)
        self._positions: List[Tuple[float, float, float, float]] = []
        self._texture_coords: List[Tuple[float, float]] = []
        self._normals: List[Tuple[float, float, float]] = []
        self._records: List[VertexRecord] = []
        self._subset: Optional[Subset] = None
        self._directory = ""
        self._ignored: Set[str] = set()

    def read(self, path: str | os.PathLike) -> Mesh:
        """
        Parse the OBJ file at `path` and return a new mesh.

        Every call starts from empty tables, so a reader can be reused.

        Raises:
            MeshIOError: If the OBJ file or a referenced material library cannot be read.
            ParseError: On malformed numbers, bad face references or a face outside any subset.
        """
        filename = os.fspath(path)
        logger.debug(f"Reading geometry: {filename}")
        self._reset()
        self._directory = os.path.dirname(filename)

        with closing(scan_lines(filename, self.encoding)) as lines:
            for line in lines:
                self._dispatch(line)

        if self._records:
            self.mesh.vertices = np.array(self._records, dtype=VERTEX_DTYPE)
        logger.debug(
            f"Geometry {filename}: {len(self._positions)} positions, "
            f"{len(self._texture_coords)} texture coordinates, {len(self._normals)} normals, "
            f"{len(self._records) // 3} faces."
        )
        return self.mesh

    def _dispatch(self, line: Line) -> None:
        keyword = line.keyword
        if keyword == "v":
            x, y, z = line.floats(3)
            self._positions.append((x, y, z, 1.0))
        elif keyword == "vt":
            u, v = line.floats(2)
            # Flip v, the raster origin is top-left
            self._texture_coords.append((u, -v))
        elif keyword == "vn":
            x, y, z = line.floats(3)
            self._normals.append((x, y, z))
        elif keyword == "f":
            self._read_face(line)
        elif keyword == "mtllib":
            self._read_material_libraries(line)
        elif keyword == "usemtl":
            self._open_subset(line)
        elif keyword == "#":
            pass
        elif keyword not in self._ignored:
            self._ignored.add(keyword)
            logger.debug(f"{line.filename}:{line.number}: ignoring unsupported command '{keyword}'")

    def _read_face(self, line: Line) -> None:
        if self._subset is None:
            raise line.error("face appears before any 'usemtl'", token=line.keyword)
        groups = line.args
        if len(groups) != 3:
            raise line.error(
                f"only triangles are supported, face has {len(groups)} vertices",
                token=line.keyword,
            )

        for group in groups:
            parts = group.split("/")
            if len(parts) > 3:
                raise line.error("face vertex must be 'v[/vt[/vn]]'", token=group)
            position = self._lookup(line, group, parts[0], self._positions, "position")
            texture = NO_TEXTURE
            if len(parts) > 1 and parts[1]:
                texture = self._lookup(line, group, parts[1], self._texture_coords, "texture")
            normal = NO_NORMAL
            if len(parts) > 2 and parts[2]:
                normal = self._lookup(line, group, parts[2], self._normals, "normal")
            self._records.append((position, texture, normal))
            self._subset.length += 1

    @staticmethod
    def _lookup(line: Line, group: str, component: str, table: Sequence[tuple], kind: str) -> tuple:
        # OBJ indices are 1-based
        if not INDEX_PATTERN.fullmatch(component):
            raise line.error(f"invalid {kind} index '{component}'", token=group)
        index = int(component)
        if not 1 <= index <= len(table):
            if not table:
                raise line.error(f"{kind} index {index} refers to an empty table", token=group)
            raise line.error(f"{kind} index {index} out of range 1..{len(table)}", token=group)
        return table[index - 1]

    def _read_material_libraries(self, line: Line) -> None:
        line.name()  # at least one library
        for name in line.args:
            self.materials.read(os.path.join(self._directory, name))

    def _open_subset(self, line: Line) -> None:
        material = self.mesh.get_or_create_material(line.name())
        self._subset = Subset(start=len(self._records), material=material)
        self.mesh.subsets.append(self._subset)
        logger.debug(f"Subset {len(self.mesh.subsets) - 1} opened at vertex {self._subset.start} ('{material.name}').")
