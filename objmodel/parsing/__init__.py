"""
Пакет parsing – токены, числовые поля, пулы атрибутов, грани, сегменты.
"""

from objmodel.parsing.fields import parse_floats, parse_float, parse_int
from objmodel.parsing.pools import AttributePools
from objmodel.parsing.faces import (
    VertexKey, Face, Point, Line, Triangle, Quad, parse_corner, parse_face
)
from objmodel.parsing.segments import Segment, tokenize, split_segments

__all__ = [
    "parse_floats", "parse_float", "parse_int",
    "AttributePools",
    "VertexKey", "Face", "Point", "Line", "Triangle", "Quad",
    "parse_corner", "parse_face",
    "Segment", "tokenize", "split_segments",
]
