"""Command-line interface: load a mesh and print a summary."""
import logging
import sys
from argparse import ArgumentParser
from typing import List, Optional

from objmesh.loader import load_mesh
from objmesh.logging_config import setup_logging
from objmesh.model.errors import MeshLoadError

logger = logging.getLogger("objmesh.cli")


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="objmesh", description="Load an OBJ mesh and print a summary.")
    parser.add_argument("file", help="path to the .obj file")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at DEBUG level")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    setup_logging(level=logging.DEBUG if args.verbose else logging.INFO)
    try:
        mesh = load_mesh(args.file)
    except MeshLoadError as e:
        logger.error(str(e))
        return 1

    logger.info(f"Triangles: {mesh.triangle_count}")
    for index, subset in enumerate(mesh.subsets):
        logger.info(
            f"Subset {index}: start={subset.start} length={subset.length} "
            f"material='{subset.material.name}' texture={subset.material.texture_filename}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
