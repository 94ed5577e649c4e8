# -*- coding: utf-8 -*-
"""
Загрузчик Wavefront OBJ (+ MTL) → Model.

Поддерживаемые директивы: v, vt, vn, f, o, g, usemtl, mtllib.
Остальные пропускаются.  Порядок работы:

1️⃣  Все `mtllib` разбираются до экспорта мешей – от них зависит
    разрешение `usemtl`.
2️⃣  Файл режется на сегменты по `o`/`g`.  Пулы атрибутов общие на
    весь файл, а список граней и текущий материал – свои у сегмента.
3️⃣  Непустой сегмент экспортируется в Mesh; пустой ничего не даёт.

Любая ошибка прерывает загрузку – частичная модель не возвращается.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Optional, Sequence

from objmodel.assets.material import Material, load_material_library
from objmodel.errors import (
    FileLoadError,
    InvalidMaterialLib,
    InvalidMaterialName,
    ObjLoadError,
)
from objmodel.multithread.task_pool import TaskPool
from objmodel.parsing.faces import parse_face
from objmodel.parsing.pools import AttributePools
from objmodel.parsing.segments import Segment, TokenLine, split_segments, tokenize
from objmodel.scene.mesh import Mesh, export_mesh
from objmodel.scene.model import Model
from objmodel.utils.config import Config
from objmodel.utils.logger import logger
from objmodel.utils.profiler import Profiler

OBJECT_BOUNDARIES = ("o", "g")


class LoaderContext:
    """Изменяемое состояние одного вызова загрузчика.

    Ничего отсюда не переживает вызов: пулы, материалы и словарь имён
    создаются заново для каждого файла.
    """

    def __init__(self, base_dir=".", path=None, encoding: str = "utf-8"):
        self.base_dir = Path(base_dir)
        self.path = path
        self.encoding = encoding
        self.pools = AttributePools()
        self.materials: List[Material] = []
        self.material_lookup: Dict[str, int] = {}
        self.meshes: List[Mesh] = []

    # -----------------------------------------------------------------
    def load_material_libraries(self, args: Sequence[str], line: int) -> None:
        if not args:
            raise InvalidMaterialLib("mtllib without a file name", line=line)
        for token in args:
            lib_path = Path(token)
            if not lib_path.is_absolute():
                lib_path = self.base_dir / lib_path
            for material in load_material_library(lib_path, self.encoding):
                if material.name in self.material_lookup:
                    logger.warning(f"[ObjLoader] Material '{material.name}' redefined in {lib_path}")
                self.material_lookup[material.name] = len(self.materials)
                self.materials.append(material)

    # -----------------------------------------------------------------
    def process_segment(self, segment: Segment) -> Optional[Mesh]:
        faces = []
        material_name = None

        for line, tokens in segment.lines:
            keyword, args = tokens[0], tokens[1:]
            if keyword == "v":
                self.pools.add_position(args, line)
            elif keyword == "vt":
                self.pools.add_texture_coord(args, line)
            elif keyword == "vn":
                self.pools.add_normal(args, line)
            elif keyword == "f":
                faces.append(parse_face(args, line))
            elif keyword == "usemtl":
                if not args:
                    raise InvalidMaterialName("usemtl without a material name", line=line)
                material_name = " ".join(args)
            # mtllib уже обработан, остальное игнорируем

        if not faces:
            logger.debug(f"[ObjLoader] Segment '{segment.name}' has no faces – skipped")
            return None

        material = None
        if material_name is not None:
            material = self.material_lookup.get(material_name)
            if material is None:
                logger.warning(f"[ObjLoader] Unknown material '{material_name}' "
                               f"in segment '{segment.name}'")

        mesh = export_mesh(
            faces,
            self.pools,
            name=segment.name,
            material=material,
            material_name=material_name,
        )
        self.meshes.append(mesh)
        return mesh

    # -----------------------------------------------------------------
    def run(self, lines: List[TokenLine], name: str = None) -> Model:
        for line, tokens in lines:
            if tokens[0] == "mtllib":
                self.load_material_libraries(tokens[1:], line)

        for segment in split_segments(lines, OBJECT_BOUNDARIES):
            self.process_segment(segment)

        return Model(meshes=tuple(self.meshes), materials=tuple(self.materials), name=name)


# ----------------------------------------------------------------------
def load_model_from_string(text: str, base_dir=".", name: str = None,
                           path=None, config: Config = None) -> Model:
    """Разобрать текст OBJ.  `base_dir` – откуда брать `mtllib`."""
    config = config or Config()
    context = LoaderContext(base_dir, path=path, encoding=config["encoding"])
    try:
        return context.run(list(tokenize(text)), name=name)
    except ObjLoadError as exc:
        # ошибки из MTL уже несут свой путь
        if exc.path is None:
            exc.path = path
        raise


def load_model(path, config: Config = None) -> Model:
    """Загрузить OBJ‑файл вместе с его MTL‑библиотеками."""
    config = config or Config()
    p = Path(path)
    with Profiler(f"load_model {p.name}") as prof:
        try:
            text = p.read_text(encoding=config["encoding"])
        except OSError as exc:
            raise FileLoadError(f"cannot read model: {exc}", path=p) from exc
        except UnicodeDecodeError as exc:
            raise FileLoadError(f"cannot decode model: {exc}", path=p) from exc
        model = load_model_from_string(text, base_dir=p.parent, name=p.stem, path=p, config=config)

    logger.info(f"[ObjLoader] Loaded {p.name}: {len(model.meshes)} mesh(es), "
                f"{len(model.materials)} material(s), {model.triangle_count} triangle(s) "
                f"in {prof.elapsed_ms:.1f} ms")
    return model


def load_models(paths, max_workers: int = None, config: Config = None) -> List[Model]:
    """Несколько файлов параллельно; порядок результатов = порядок `paths`."""
    config = config or Config()
    with TaskPool(max_workers=max_workers) as pool:
        return pool.map_ordered(lambda p: load_model(p, config), list(paths))
