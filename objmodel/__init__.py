"""
objmodel – загрузчик Wavefront OBJ/MTL для AlKAsH3D‑подобных рендеров.

Превращает текстовое описание модели в индексированные треугольные
меши с уникальными вершинами и разрешёнными материалами.
"""

from objmodel.utils import logger, Config
from objmodel.errors import (
    ObjLoadError,
    FileLoadError,
    InvalidPositionValue,
    InvalidTextureCoordValue,
    InvalidNormalValue,
    InvalidFaceValue,
    InvalidMaterialName,
    InvalidMaterialLib,
)
from objmodel.parsing import VertexKey, Face, Point, Line, Triangle, Quad
from objmodel.scene import Vertex, Mesh, Model
from objmodel.assets import Material, IlluminationMode, TextureManager
from objmodel.loader import load_model, load_model_from_string, load_models

__version__ = "1.0.0"

__all__ = [
    "load_model",
    "load_model_from_string",
    "load_models",
    "Model",
    "Mesh",
    "Vertex",
    "Material",
    "IlluminationMode",
    "TextureManager",
    "VertexKey",
    "Face",
    "Point",
    "Line",
    "Triangle",
    "Quad",
    "Config",
    "logger",
    "ObjLoadError",
    "FileLoadError",
    "InvalidPositionValue",
    "InvalidTextureCoordValue",
    "InvalidNormalValue",
    "InvalidFaceValue",
    "InvalidMaterialName",
    "InvalidMaterialLib",
]
