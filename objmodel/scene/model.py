"""
Объединяет несколько Mesh‑ов и список материалов в одну модель.
"""

from __future__ import annotations

import dataclasses
from typing import Optional, Tuple

from objmodel.assets.material import Material
from objmodel.scene.mesh import Mesh


@dataclasses.dataclass(frozen=True, eq=False)
class Model:
    """Результат загрузки: меши ссылаются на материалы только по индексу."""
    meshes: Tuple[Mesh, ...] = ()
    materials: Tuple[Material, ...] = ()
    name: Optional[str] = None

    def material_index(self, name: str) -> Optional[int]:
        """Индекс материала с таким именем (последний, если имя повторяется)."""
        for index in range(len(self.materials) - 1, -1, -1):
            if self.materials[index].name == name:
                return index
        return None

    def material_for(self, mesh: Mesh) -> Optional[Material]:
        if mesh.material is None:
            return None
        return self.materials[mesh.material]

    @property
    def vertex_count(self) -> int:
        return sum(len(m.vertices) for m in self.meshes)

    @property
    def triangle_count(self) -> int:
        return sum(m.triangle_count for m in self.meshes)

    def __repr__(self):
        return (f"Model(name={self.name!r}, meshes={len(self.meshes)}, "
                f"materials={len(self.materials)})")
