import logging

import numpy as np
import pytest

from objmesh import (
    CullMode,
    LoaderSettings,
    MeshIOError,
    MeshLoadError,
    ParseError,
    load_mesh,
)


SCENE_MTL = """
    newmtl floor
    Ka 0.1 0.1 0.1
    Kd 0.5 0.5 0.5
    Ks 1 1 1
    Ns 32
    map_Kd floor.png

    newmtl wall
    Kd 1 0 0
"""

SCENE_OBJ = """
    mtllib scene.mtl
    v 0 0 20
    v 1 0 20
    v 0 1 20
    v 0 0 30
    v 1 0 30
    v 0 1 30
    vt 0.25 0.75
    usemtl floor
    f 1/1 2/1 3/1
    usemtl wall
    f 4 5 6
    usemtl floor
    f 6 5 4
"""


@pytest.fixture
def scene(write_file):
    write_file("scene.mtl", SCENE_MTL)
    return write_file("scene.obj", SCENE_OBJ)


def test_loads_vertices_subsets_and_materials(scene, tmp_path):
    mesh = load_mesh(scene)

    assert mesh.vertex_count == 9
    assert [(s.start, s.length) for s in mesh.subsets] == [(0, 3), (3, 3), (6, 3)]
    floor = mesh.materials["floor"]
    assert mesh.subsets[0].material is floor
    assert mesh.subsets[2].material is floor
    assert mesh.subsets[1].material is mesh.materials["wall"]
    assert floor.shininess == 32.0
    assert floor.texture_filename == str(tmp_path / "floor.png")
    np.testing.assert_allclose(floor.ambient_color, [0.1, 0.1, 0.1], rtol=1e-6)
    assert mesh.vertex(0).texture == (0.25, -0.75)


def test_normals_are_synthesized_when_missing(scene):
    mesh = load_mesh(scene)

    lengths = np.linalg.norm(mesh.vertices["normal"], axis=1)
    np.testing.assert_allclose(lengths, 1.0, rtol=1e-6)
    assert np.all(mesh.vertices["normal"][:, 1] >= 0)


def test_normal_synthesis_can_be_disabled(scene):
    mesh = load_mesh(scene, LoaderSettings(generate_normals=False))
    np.testing.assert_array_equal(mesh.vertices["normal"], np.zeros((9, 3)))


def test_file_normals_are_kept(write_file):
    path = write_file("lit.obj", """
        v 0 0 20
        v 1 0 20
        v 0 1 20
        vn 0 0.6 0.8
        usemtl m
        f 1//1 2//1 3//1
    """)
    mesh = load_mesh(path)
    np.testing.assert_allclose(mesh.vertices["normal"], [[0, 0.6, 0.8]] * 3, rtol=1e-6)


def test_near_vertices_are_culled(write_file):
    path = write_file("near.obj", """
        v 0 0 5
        v 1 0 10
        v 0 1 20
        usemtl m
        f 1 2 3
    """)
    mesh = load_mesh(path)

    np.testing.assert_array_equal(mesh.vertices["position"][:, 2], [10.0, 20.0])
    assert (mesh.subsets[0].start, mesh.subsets[0].length) == (0, 2)


def test_triangle_culling_keeps_alignment(write_file):
    path = write_file("near.obj", """
        v 0 0 5
        v 1 0 10
        v 0 1 20
        v 0 0 40
        usemtl m
        f 1 2 3
        f 2 3 4
    """)
    mesh = load_mesh(path, LoaderSettings(cull_mode=CullMode.TRIANGLE))

    assert mesh.vertex_count == 3
    np.testing.assert_array_equal(mesh.vertices["position"][:, 2], [10.0, 20.0, 40.0])


def test_culling_can_be_disabled(write_file):
    path = write_file("near.obj", """
        v 0 0 5
        v 1 0 5
        v 0 1 5
        usemtl m
        f 1 2 3
    """)
    assert load_mesh(path, LoaderSettings(cull_cutoff=None)).vertex_count == 3


def test_material_reused_across_obj_and_mtllib(write_file):
    write_file("lib.mtl", "newmtl foo\nKd 0 0 1\n")
    path = write_file("reuse.obj", """
        v 0 0 20
        v 1 0 20
        v 0 1 20
        usemtl foo
        f 1 2 3
        mtllib lib.mtl
        usemtl foo
        f 3 2 1
    """)
    mesh = load_mesh(path)

    assert len(mesh.materials) == 1
    assert mesh.subsets[0].material is mesh.subsets[1].material
    np.testing.assert_array_equal(mesh.subsets[0].material.diffuse_color, [0.0, 0.0, 1.0])


def test_face_before_usemtl_aborts_load(write_file):
    path = write_file("bad.obj", "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n")
    with pytest.raises(ParseError) as excinfo:
        load_mesh(path)
    assert isinstance(excinfo.value, MeshLoadError)
    assert "bad.obj:4" in str(excinfo.value)


def test_missing_file_raises_io_error(tmp_path):
    with pytest.raises(MeshIOError):
        load_mesh(tmp_path / "missing.obj")


def test_empty_file_gives_empty_mesh(write_file):
    mesh = load_mesh(write_file("empty.obj", "# nothing here\n"))
    assert mesh.vertex_count == 0
    assert mesh.subsets == []


def test_logs_summary(scene, caplog):
    with caplog.at_level(logging.INFO, logger="objmesh"):
        load_mesh(scene)
    assert "Mesh loaded: 9 vertices, 3 subsets, 2 materials." in caplog.text
