"""
MTL Material Reader
===================
Reads a material library into the material table of a `Mesh`.

Recognized commands:
    newmtl name      select (or create) the current material
    Ka/Kd/Ks r g b   ambient/diffuse/specular color
    Ns value         shininess, truncated to an integral value
    map_Kd path      diffuse texture, relative to the library's directory
    d, Tr, illum     accepted, not modeled
Anything else is ignored.
"""
from __future__ import annotations

from contextlib import closing
import logging
import os
from typing import Optional

import numpy as np

from objmesh.config import DEFAULT_ENCODING
from objmesh.io.tokens import Line, scan_lines
from objmesh.model.mesh import Material, Mesh

logger = logging.getLogger(__name__)

COLOR_ATTRIBUTES = {
    "Ka": "ambient_color",
    "Kd": "diffuse_color",
    "Ks": "specular_color",
}

IGNORED_COMMANDS = frozenset({"#", "d", "Tr", "illum"})


class MaterialReader:
    def __init__(self, mesh: Mesh, encoding: str = DEFAULT_ENCODING) -> None:
        self.mesh = mesh
        self.encoding = encoding
        self._current: Optional[Material] = None
        self._directory = ""

    def read(self, path: str | os.PathLike) -> None:
        """
        Parse the material library at `path`, creating or updating materials in place.

        Raises:
            MeshIOError: If the file cannot be read.
            ParseError: On malformed numbers or attributes outside a `newmtl` block.
        """
        filename = os.fspath(path)
        logger.debug(f"Reading material library: {filename}")
        self._current = None
        self._directory = os.path.dirname(filename)
        before = len(self.mesh.materials)

        with closing(scan_lines(filename, self.encoding)) as lines:
            for line in lines:
                self._dispatch(line)

        logger.debug(
            f"Material library {filename} done "
            f"({len(self.mesh.materials) - before} new, {len(self.mesh.materials)} total)."
        )

    def _dispatch(self, line: Line) -> None:
        keyword = line.keyword
        if keyword == "newmtl":
            self._current = self.mesh.get_or_create_material(line.name())
        elif keyword in COLOR_ATTRIBUTES:
            material = self._require_material(line)
            color = np.array(line.floats(3), dtype=np.float32)
            setattr(material, COLOR_ATTRIBUTES[keyword], color)
        elif keyword == "Ns":
            material = self._require_material(line)
            material.shininess = self._parse_shininess(line)
        elif keyword == "map_Kd":
            material = self._require_material(line)
            material.texture_filename = os.path.join(self._directory, line.name())
        elif keyword in IGNORED_COMMANDS:
            pass
        else:
            logger.debug(f"{line.filename}:{line.number}: ignoring '{keyword}'")

    def _require_material(self, line: Line) -> Material:
        if self._current is None:
            raise line.error(f"'{line.keyword}' appears before any 'newmtl'", token=line.keyword)
        return self._current

    @staticmethod
    def _parse_shininess(line: Line) -> float:
        (value,) = line.floats(1)
        try:
            return float(int(value))
        except (OverflowError, ValueError):
            raise line.error("shininess must be finite", token=line.args[0]) from None
