"""
Entry Point Script (Bootstrap)
==============================
Runs the command line from a source checkout without installing the package.

It is located outside the 'src' package and puts 'src' on 'sys.path' so that
'import objmesh' resolves to the working tree.

Usage:
    $ python run.py path/to/mesh.obj [-v]
"""
import sys
import os

current_dir: str = os.path.dirname(os.path.abspath(__file__))
src_path: str = os.path.join(current_dir, 'src')
sys.path.insert(0, src_path)

from objmesh.__main__ import main

if __name__ == "__main__":
    sys.exit(main())
