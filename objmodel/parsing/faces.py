# objmodel/parsing/faces.py
"""
Разбор директивы `f`.

Каждый угол грани имеет вид `pos[/tex][/norm]`.  Индексы в файле
начинаются с 1; здесь они переводятся в 0‑based.  Отсутствующий
tex/norm хранится как `None` – это НЕ то же самое, что индекс 0.

Грань – закрытый набор вариантов по числу углов:
Point (1), Line (2), Triangle (3), Quad (4).  Любая другая арность –
`InvalidFaceValue` уже при создании.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Sequence, Tuple

from objmodel.errors import InvalidFaceValue


class VertexKey(NamedTuple):
    """Тройка индексов (position, texture_coord, normal), 0‑based."""
    position: int
    texture_coord: Optional[int] = None
    normal: Optional[int] = None


Triangle3 = Tuple[VertexKey, VertexKey, VertexKey]


class Face:
    """Базовый класс грани; конкретный вариант выбирает `from_corners`."""

    arity = 0
    __slots__ = ("corners", "line")

    def __init__(self, corners: Sequence[VertexKey], line: int = None):
        if len(corners) != self.arity:
            raise InvalidFaceValue(
                f"{type(self).__name__} needs {self.arity} corners, got {len(corners)}",
                line=line,
            )
        self.corners = tuple(corners)
        self.line = line

    @staticmethod
    def from_corners(corners: Sequence[VertexKey], line: int = None) -> "Face":
        variant = _VARIANTS.get(len(corners))
        if variant is None:
            raise InvalidFaceValue(f"unsupported face with {len(corners)} corners", line=line)
        return variant(corners, line)

    def triangles(self) -> Tuple[Triangle3, ...]:
        """Треугольники, на которые раскладывается грань."""
        raise NotImplementedError

    def __eq__(self, other):
        return type(self) is type(other) and self.corners == other.corners

    def __hash__(self):
        return hash((type(self).__name__, self.corners))

    def __repr__(self):
        return f"{type(self).__name__}{self.corners}"


class Point(Face):
    arity = 1
    __slots__ = ()

    def triangles(self):
        return ()


class Line(Face):
    arity = 2
    __slots__ = ()

    def triangles(self):
        return ()


class Triangle(Face):
    arity = 3
    __slots__ = ()

    def triangles(self):
        return (self.corners,)


class Quad(Face):
    arity = 4
    __slots__ = ()

    def triangles(self):
        # веер из первого угла: (0,1,2) и (0,2,3)
        a, b, c, d = self.corners
        return ((a, b, c), (a, c, d))


_VARIANTS = {cls.arity: cls for cls in (Point, Line, Triangle, Quad)}


# ----------------------------------------------------------------------
def _parse_index(field: str, line: int = None) -> int:
    if field.startswith("-"):
        # отрицательные (относительные) индексы не поддерживаются
        raise InvalidFaceValue(f"unsupported index {field}", line=line)
    if not (field.isascii() and field.isdigit()):
        raise InvalidFaceValue(f"not an index: {field!r}", line=line)
    value = int(field)
    if value < 1:
        raise InvalidFaceValue(f"unsupported index {value}", line=line)
    return value - 1


def parse_corner(token: str, line: int = None) -> VertexKey:
    """`3`, `3/1`, `3//2`, `3/1/2` → VertexKey."""
    fields = token.split("/")
    if len(fields) > 3:
        raise InvalidFaceValue(f"too many fields in corner {token!r}", line=line)
    if not fields[0]:
        raise InvalidFaceValue(f"corner {token!r} has no position index", line=line)

    indices = [None, None, None]
    for i, field in enumerate(fields):
        if field:
            indices[i] = _parse_index(field, line)
    return VertexKey(*indices)


def parse_face(tokens: Sequence[str], line: int = None) -> Face:
    """Аргументы директивы `f` (без самого `f`) → Face."""
    corners = [parse_corner(token, line) for token in tokens]
    return Face.from_corners(corners, line)
