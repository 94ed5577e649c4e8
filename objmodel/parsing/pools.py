# objmodel/parsing/pools.py
"""
Пулы атрибутов вершин (v / vt / vn).

Пулы общие для всего файла: объекты `o`/`g` их не сбрасывают, а
индексы граней ссылаются на них глобально.
"""

from typing import List, Sequence, Tuple

from objmodel.errors import (
    InvalidNormalValue,
    InvalidPositionValue,
    InvalidTextureCoordValue,
)
from objmodel.parsing.fields import parse_floats


class AttributePools:
    """Три растущих списка: позиции, текстурные координаты, нормали."""

    def __init__(self):
        self.positions: List[Tuple[float, float, float]] = []
        self.texture_coords: List[Tuple[float, float]] = []
        self.normals: List[Tuple[float, float, float]] = []

    def add_position(self, tokens: Sequence[str], line: int = None) -> None:
        self.positions.append(parse_floats(tokens, 3, InvalidPositionValue, line))

    def add_texture_coord(self, tokens: Sequence[str], line: int = None) -> None:
        # `vt u v [w]` – третья компонента не используется
        self.texture_coords.append(parse_floats(tokens, 2, InvalidTextureCoordValue, line))

    def add_normal(self, tokens: Sequence[str], line: int = None) -> None:
        self.normals.append(parse_floats(tokens, 3, InvalidNormalValue, line))

    def __repr__(self):
        return (f"AttributePools(positions={len(self.positions)}, "
                f"texture_coords={len(self.texture_coords)}, normals={len(self.normals)})")
