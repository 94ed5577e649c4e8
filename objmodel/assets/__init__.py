# objmodel/assets/__init__.py
"""Пакет с материалами и менеджером текстур."""
from objmodel.assets.material import (
    Material, IlluminationMode, parse_material_library, load_material_library
)
from objmodel.assets.texture_manager import TextureManager

__all__ = [
    "Material", "IlluminationMode", "parse_material_library",
    "load_material_library", "TextureManager",
]
