# -*- coding: utf-8 -*-
"""
Материалы из MTL‑библиотеки.

Файл режется на сегменты по `newmtl <name>`; каждый сегмент даёт один
`Material`.  Поддерживаемые директивы:

    Ns            – specular exponent (1 float)
    Ka/Kd/Ks/Ke   – ambient/diffuse/specular/emissive (3 float)
    Ni            – optical density (1 float)
    d             – opacity
    Tr            – прозрачность, opacity = 1 − Tr
    illum         – режим освещения 0…10
    map_Bump      – карта нормалей (также `map_bump`, `bump`)
    map_Kd        – диффузная текстура

Остальные директивы пропускаются.  Если в сегменте есть и `d`, и `Tr`,
побеждает последняя.
"""

from __future__ import annotations

import dataclasses
from enum import IntEnum
from pathlib import Path
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from objmodel.errors import FileLoadError, InvalidMaterialLib
from objmodel.parsing.fields import parse_float, parse_floats, parse_int
from objmodel.parsing.segments import Segment, split_segments, tokenize
from objmodel.utils.logger import logger

Color = Tuple[float, float, float]


class IlluminationMode(IntEnum):
    """Режимы `illum` (см. описание формата MTL)."""
    COLOR_AMBIENT_OFF = 0
    COLOR_AMBIENT_ON = 1
    HIGHLIGHT = 2
    REFLECTION_RAY_TRACE = 3
    TRANSPARENCY_GLASS_RAY_TRACE = 4
    REFLECTION_FRESNEL_RAY_TRACE = 5
    TRANSPARENCY_REFRACTION_RAY_TRACE = 6
    TRANSPARENCY_FRESNEL_RAY_TRACE = 7
    REFLECTION = 8
    TRANSPARENCY_GLASS = 9
    CAST_SHADOWS = 10

    @classmethod
    def from_value(cls, value: int) -> Optional["IlluminationMode"]:
        """Неизвестные значения → None (не ошибка)."""
        try:
            return cls(value)
        except ValueError:
            return None


@dataclasses.dataclass(frozen=True)
class Material:
    name: str = ""
    specular_exponent: float = 0.0
    ambient_color: Color = (0.0, 0.0, 0.0)
    diffuse_color: Color = (0.0, 0.0, 0.0)
    specular_color: Color = (0.0, 0.0, 0.0)
    emissive_color: Color = (0.0, 0.0, 0.0)
    optical_density: float = 0.0
    opacity: float = 0.0
    illumination_mode: Optional[IlluminationMode] = None
    bump_map_file: str = ""
    diffuse_texture_file: str = ""
    source_dir: Optional[Path] = dataclasses.field(default=None, compare=False)

    def _resolve(self, token: str) -> Optional[Path]:
        if not token:
            return None
        path = Path(token)
        if self.source_dir is not None and not path.is_absolute():
            path = Path(self.source_dir) / path
        return path

    @property
    def bump_map_path(self) -> Optional[Path]:
        return self._resolve(self.bump_map_file)

    @property
    def diffuse_texture_path(self) -> Optional[Path]:
        return self._resolve(self.diffuse_texture_file)


# ----------------------------------------------------------------------
# Обработчики директив.  Каждый получает (fields, tokens, line) и
# записывает результат в словарь полей будущего Material.
# ----------------------------------------------------------------------
def _scalar(field: str) -> Callable:
    def handler(fields: dict, tokens: Sequence[str], line: int) -> None:
        fields[field] = parse_float(tokens, InvalidMaterialLib, line)
    return handler


def _color(field: str) -> Callable:
    def handler(fields: dict, tokens: Sequence[str], line: int) -> None:
        fields[field] = parse_floats(tokens, 3, InvalidMaterialLib, line)
    return handler


def _texture(field: str) -> Callable:
    def handler(fields: dict, tokens: Sequence[str], line: int) -> None:
        if not tokens:
            raise InvalidMaterialLib("texture directive without a file name", line=line)
        # опции (-s 1 1 1, -bm 0.5 …) идут до имени файла
        fields[field] = tokens[-1]
    return handler


def _transparency(fields: dict, tokens: Sequence[str], line: int) -> None:
    fields["opacity"] = 1.0 - parse_float(tokens, InvalidMaterialLib, line)


def _illumination(fields: dict, tokens: Sequence[str], line: int) -> None:
    if not tokens:
        raise InvalidMaterialLib("illum without a value", line=line)
    value = parse_int(tokens[0], InvalidMaterialLib, line)
    fields["illumination_mode"] = IlluminationMode.from_value(value)


_HANDLERS: Dict[str, Callable] = {
    "Ns": _scalar("specular_exponent"),
    "Ka": _color("ambient_color"),
    "Kd": _color("diffuse_color"),
    "Ks": _color("specular_color"),
    "Ke": _color("emissive_color"),
    "Ni": _scalar("optical_density"),
    "d": _scalar("opacity"),
    "Tr": _transparency,
    "illum": _illumination,
    "map_Bump": _texture("bump_map_file"),
    "map_bump": _texture("bump_map_file"),
    "bump": _texture("bump_map_file"),
    "map_Kd": _texture("diffuse_texture_file"),
}


def _parse_material(segment: Segment, source_dir: Optional[Path]) -> Material:
    fields = {}
    for line, tokens in segment.lines:
        handler = _HANDLERS.get(tokens[0])
        if handler is not None:
            handler(fields, tokens[1:], line)
    return Material(name=segment.name, source_dir=source_dir, **fields)


def parse_material_library(text: str, source_dir=None, path=None) -> List[Material]:
    """Текст MTL → список материалов в порядке `newmtl`."""
    source_dir = Path(source_dir) if source_dir is not None else None
    materials = []
    try:
        for segment in split_segments(tokenize(text), ("newmtl",)):
            if segment.keyword is None:
                logger.warning(f"[MtlLoader] Ignoring {len(segment.lines)} "
                               f"directive(s) before the first newmtl")
                continue
            if segment.name is None:
                raise InvalidMaterialLib("newmtl without a name", line=segment.start)
            materials.append(_parse_material(segment, source_dir))
            logger.debug(f"[MtlLoader] Parsed material '{segment.name}'")
    except InvalidMaterialLib as exc:
        if exc.path is None:
            exc.path = path
        raise
    return materials


def load_material_library(path, encoding: str = "utf-8") -> List[Material]:
    """Прочитать MTL‑файл; пути текстур разрешаются относительно его папки."""
    p = Path(path)
    try:
        text = p.read_text(encoding=encoding)
    except OSError as exc:
        raise FileLoadError(f"cannot read material library: {exc}", path=p) from exc
    except UnicodeDecodeError as exc:
        raise FileLoadError(f"cannot decode material library: {exc}", path=p) from exc
    materials = parse_material_library(text, source_dir=p.parent, path=p)
    logger.debug(f"[MtlLoader] {p}: {len(materials)} material(s)")
    return materials
