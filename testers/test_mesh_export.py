# -*- coding: utf-8 -*-
import numpy as np
import pytest

from objmodel.errors import InvalidFaceValue
from objmodel.parsing.faces import parse_face
from objmodel.parsing.pools import AttributePools
from objmodel.scene.mesh import Vertex, export_mesh


def make_pools(positions=4, texcoords=4, normals=1):
    pools = AttributePools()
    for i in range(positions):
        pools.add_position([str(i), "0", "0"])
    for i in range(texcoords):
        pools.add_texture_coord([str(i), "1"])
    for _ in range(normals):
        pools.add_normal(["0", "0", "1"])
    return pools


def faces(*lines):
    return [parse_face(line.split(), line=n) for n, line in enumerate(lines, start=1)]


def test_quad_becomes_two_triangles():
    mesh = export_mesh(faces("1/1/1 2/2/1 3/3/1 4/4/1"), make_pools())
    assert len(mesh.vertices) == 4
    assert mesh.indices.tolist() == [0, 1, 2, 0, 2, 3]
    assert mesh.indices.dtype == np.uint32
    assert mesh.triangle_count == 2


def test_vertices_materialized_from_pools():
    mesh = export_mesh(faces("2/3/1 1/1/1 4/2/1"), make_pools())
    assert mesh.vertices[0] == Vertex((1.0, 0.0, 0.0), (2.0, 1.0), (0.0, 0.0, 1.0))
    assert mesh.vertices[1].position == (0.0, 0.0, 0.0)
    assert mesh.vertices[2].texture_coord == (1.0, 1.0)


def test_dedup_by_vertex_key():
    mesh = export_mesh(faces("1/1/1 2/2/1 3/3/1", "1/1/1 3/3/1 4/4/1", "1/2/1 2/2/1 3/3/1"),
                       make_pools())
    # 1/2/1 – новая комбинация, хотя позиция 1 уже встречалась
    assert len(mesh.vertices) == 5
    assert mesh.indices.tolist() == [0, 1, 2, 0, 2, 3, 4, 1, 2]


def test_vertex_order_is_first_occurrence():
    mesh = export_mesh(faces("4 3 2"), make_pools())
    assert [v.position[0] for v in mesh.vertices] == [3.0, 2.0, 1.0]


def test_points_and_lines_are_dropped():
    mesh = export_mesh(faces("1", "1 2", "2 3"), make_pools())
    assert len(mesh.vertices) == 0
    assert len(mesh.indices) == 0


def test_every_index_in_range():
    mesh = export_mesh(faces("1 2 3 4", "4 3 2", "1/1 2/2 3/3"), make_pools())
    assert int(mesh.indices.max()) < len(mesh.vertices)


def test_missing_attributes_stay_none():
    pools = make_pools(positions=3, texcoords=0, normals=0)
    mesh = export_mesh(faces("1 2 3"), pools)
    assert all(v.texture_coord is None and v.normal is None for v in mesh.vertices)


@pytest.mark.parametrize("face", ["1 2 3", "1/1 1/1 1/1", "1//1 1//1 1//1"])
def test_out_of_range_index_rejected(face):
    pools = make_pools(positions=1, texcoords=0, normals=0)
    with pytest.raises(InvalidFaceValue) as info:
        export_mesh(faces(face), pools)
    assert info.value.line == 1


def test_indices_are_read_only():
    mesh = export_mesh(faces("1 2 3"), make_pools())
    with pytest.raises(ValueError):
        mesh.indices[0] = 5


def test_to_arrays_fills_defaults():
    pools = make_pools(positions=3, texcoords=1, normals=0)
    mesh = export_mesh(faces("1/1 2 3"), pools)
    positions, texcoords, normals, indices = mesh.to_arrays(default_normal=(0.0, 1.0, 0.0))
    assert positions.shape == (3, 3)
    assert np.allclose(texcoords, [[0, 1], [0, 0], [0, 0]])
    assert np.allclose(normals, [[0, 1, 0]] * 3)
    assert indices.tolist() == [0, 1, 2]


def test_interleaved_layout():
    mesh = export_mesh(faces("1/1/1 2/2/1 3/3/1"), make_pools())
    data = mesh.interleaved()
    assert data.dtype == np.float32
    assert data.shape == (3 * 8,)
    # pos(3) + normal(3) + texcoord(2)
    assert np.allclose(data[8:16], [1, 0, 0, 0, 0, 1, 1, 1])


def test_empty_mesh_arrays():
    mesh = export_mesh([], make_pools())
    positions, texcoords, normals, indices = mesh.to_arrays()
    assert positions.shape == (0, 3)
    assert texcoords.shape == (0, 2)
    assert indices.size == 0


def test_array_defaults_come_from_config(isolated_config):
    isolated_config["default_normal"] = [0.0, 1.0, 0.0]
    isolated_config["default_texcoord"] = [0.5, 0.5]
    mesh = export_mesh(faces("1 2 3"), make_pools(positions=3, texcoords=0, normals=0))
    _, texcoords, normals, _ = mesh.to_arrays()
    assert np.allclose(normals, [[0, 1, 0]] * 3)
    assert np.allclose(texcoords, [[0.5, 0.5]] * 3)
    # pos(3) + normal(3) + texcoord(2)
    assert np.allclose(mesh.interleaved()[:8], [0, 0, 0, 0, 1, 0, 0.5, 0.5])
