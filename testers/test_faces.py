# -*- coding: utf-8 -*-
import pytest

from objmodel.errors import InvalidFaceValue
from objmodel.parsing.faces import (
    VertexKey, Face, Point, Line, Triangle, Quad, parse_corner, parse_face
)


@pytest.mark.parametrize("token, expected", [
    ("3", VertexKey(2, None, None)),
    ("3/1", VertexKey(2, 0, None)),
    ("3//2", VertexKey(2, None, 1)),
    ("3/1/2", VertexKey(2, 0, 1)),
    ("3/", VertexKey(2, None, None)),
])
def test_parse_corner_forms(token, expected):
    assert parse_corner(token) == expected


def test_absent_index_is_not_zero():
    # "1/1/1" ссылается на реальные индексы 0, "1" – на отсутствующие
    assert parse_corner("1/1/1") != parse_corner("1")
    assert parse_corner("1").texture_coord is None
    assert parse_corner("1/1/1").texture_coord == 0


@pytest.mark.parametrize("token", ["1/2/3/4", "a", "1/b/2", "/1/1", "0", "-1", "1//-2", "1_0", "+1", " 1", "1/1_0"])
def test_parse_corner_rejects(token):
    with pytest.raises(InvalidFaceValue):
        parse_corner(token, line=3)


def test_vertex_key_structural_hash():
    lookup = {VertexKey(1, 2, 3): "a"}
    assert lookup[VertexKey(1, 2, 3)] == "a"
    assert VertexKey(1, None, 3) not in lookup


@pytest.mark.parametrize("tokens, variant", [
    (["1"], Point),
    (["1", "2"], Line),
    (["1", "2", "3"], Triangle),
    (["1", "2", "3", "4"], Quad),
])
def test_face_variant_by_arity(tokens, variant):
    face = parse_face(tokens, line=10)
    assert type(face) is variant
    assert len(face.corners) == len(tokens)
    assert face.line == 10


@pytest.mark.parametrize("count", [0, 5, 6])
def test_unsupported_arity(count):
    tokens = [str(i + 1) for i in range(count)]
    with pytest.raises(InvalidFaceValue) as info:
        parse_face(tokens, line=2)
    assert info.value.line == 2


def test_variant_constructor_checks_corner_count():
    with pytest.raises(InvalidFaceValue):
        Triangle([VertexKey(0), VertexKey(1)])


def test_quad_fan_split():
    a, b, c, d = (VertexKey(i) for i in range(4))
    quad = Face.from_corners([a, b, c, d])
    assert quad.triangles() == ((a, b, c), (a, c, d))


def test_points_and_lines_have_no_triangles():
    assert Point([VertexKey(0)]).triangles() == ()
    assert Line([VertexKey(0), VertexKey(1)]).triangles() == ()
