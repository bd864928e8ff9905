import numpy as np
import pyvista as pv

from objmesh.export import subset_ids, to_polydata
from objmesh.model.mesh import Material, Mesh, Subset
from objmesh.post.normals import calculate_normals

from conftest import make_mesh


def test_triangles_become_cells():
    mesh = make_mesh([(0, 0, 20), (1, 0, 20), (0, 1, 20), (0, 0, 30), (1, 0, 30), (0, 1, 30)])
    calculate_normals(mesh)
    poly = to_polydata(mesh)

    assert isinstance(poly, pv.PolyData)
    assert poly.n_points == 6
    assert poly.n_cells == 2
    np.testing.assert_allclose(poly.points[:, 2], [20, 20, 20, 30, 30, 30])
    assert poly.point_data["TCoords"].shape == (6, 2)
    np.testing.assert_array_equal(poly.cell_data["subset"], [0, 0])


def test_subset_ids_follow_ranges():
    mesh = make_mesh([(i, 0, 20) for i in range(9)])
    a, b = Material(name="a"), Material(name="b")
    mesh.subsets = [Subset(start=0, material=a, length=3), Subset(start=3, material=b, length=6)]
    assert subset_ids(mesh).tolist() == [0, 1, 1]


def test_empty_mesh():
    assert to_polydata(Mesh()).n_points == 0
