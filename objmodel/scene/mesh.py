"""
Индексированный треугольный меш и его экспорт из граней OBJ.

Меш – неизменяемое значение: список уникальных вершин, uint32‑индексы
и (опционально) индекс материала в `Model.materials`.  Буферы на GPU
создаёт слой рендеринга – отсюда он получает `interleaved()`.
"""

from __future__ import annotations

import dataclasses
from typing import Dict, Iterable, NamedTuple, Optional, Sequence, Tuple

import numpy as np

from objmodel.errors import InvalidFaceValue
from objmodel.parsing.faces import Face, VertexKey
from objmodel.parsing.pools import AttributePools
from objmodel.utils.config import Config
from objmodel.utils.logger import logger


class Vertex(NamedTuple):
    """Материализованная вершина; отсутствующие атрибуты – None."""
    position: Tuple[float, float, float]
    texture_coord: Optional[Tuple[float, float]] = None
    normal: Optional[Tuple[float, float, float]] = None


@dataclasses.dataclass(frozen=True, eq=False)
class Mesh:
    vertices: Tuple[Vertex, ...]
    indices: np.ndarray
    material: Optional[int] = None
    name: Optional[str] = None
    material_name: Optional[str] = None

    @property
    def index_count(self) -> int:
        return len(self.indices)

    @property
    def triangle_count(self) -> int:
        return len(self.indices) // 3

    def to_arrays(self, default_texcoord=None, default_normal=None):
        """(positions, texcoords, normals, indices) – float32 / uint32.

        Вершины без tex/norm получают значения по‑умолчанию; если они не
        переданы, берутся `default_texcoord` / `default_normal` из Config.
        """
        if default_texcoord is None:
            default_texcoord = tuple(Config()["default_texcoord"])
        if default_normal is None:
            default_normal = tuple(Config()["default_normal"])
        positions = np.array([v.position for v in self.vertices], dtype=np.float32).reshape(-1, 3)
        texcoords = np.array(
            [v.texture_coord if v.texture_coord is not None else default_texcoord
             for v in self.vertices],
            dtype=np.float32,
        ).reshape(-1, 2)
        normals = np.array(
            [v.normal if v.normal is not None else default_normal
             for v in self.vertices],
            dtype=np.float32,
        ).reshape(-1, 3)
        return positions, texcoords, normals, self.indices

    def interleaved(self, default_texcoord=None, default_normal=None) -> np.ndarray:
        """Плоский float32‑буфер: pos(3) + normal(3) + texcoord(2) на вершину."""
        positions, texcoords, normals, _ = self.to_arrays(default_texcoord, default_normal)
        return np.column_stack([positions, normals, texcoords]).astype(np.float32).ravel()

    def __repr__(self):
        return (f"Mesh(name={self.name!r}, vertices={len(self.vertices)}, "
                f"indices={len(self.indices)}, material={self.material})")


# ----------------------------------------------------------------------
def _lookup(pool: Sequence, index: Optional[int], what: str, face: Face):
    if index is None:
        return None
    if index >= len(pool):
        raise InvalidFaceValue(
            f"{what} index {index + 1} out of range (have {len(pool)})",
            line=face.line,
        )
    return pool[index]


def _materialize(key: VertexKey, pools: AttributePools, face: Face) -> Vertex:
    position = _lookup(pools.positions, key.position, "position", face)
    texture_coord = _lookup(pools.texture_coords, key.texture_coord, "texture coordinate", face)
    normal = _lookup(pools.normals, key.normal, "normal", face)
    return Vertex(position, texture_coord, normal)


def export_mesh(faces: Iterable[Face],
                pools: AttributePools,
                name: str = None,
                material: int = None,
                material_name: str = None) -> Mesh:
    """
    Грани + пулы → Mesh.

    * Point/Line отбрасываются.
    * Quad раскладывается веером: (0,1,2), (0,2,3).
    * Одинаковые VertexKey дают одну вершину; словарь дедупликации живёт
      только внутри этого вызова.
    """
    lookup: Dict[VertexKey, int] = {}
    vertices = []
    indices = []

    for face in faces:
        for triangle in face.triangles():
            for key in triangle:
                index = lookup.get(key)
                if index is None:
                    index = len(vertices)
                    vertices.append(_materialize(key, pools, face))
                    lookup[key] = index
                indices.append(index)

    index_array = np.array(indices, dtype=np.uint32)
    index_array.flags.writeable = False

    logger.debug(f"[MeshExporter] {name or '<unnamed>'}: "
                 f"{len(vertices)} vertices, {len(indices) // 3} triangles")
    return Mesh(
        vertices=tuple(vertices),
        indices=index_array,
        material=material,
        name=name,
        material_name=material_name,
    )
