# objmodel/assets/texture_manager.py
"""Менеджер кэширования декодированных текстур материалов."""

from pathlib import Path

from objmodel.utils.logger import logger
from objmodel.utils.texture_loader import load_image


class TextureManager:
    """Кеширующий менеджер текстур – один объект на процесс."""
    _cache = {}

    @classmethod
    def get(cls, path):
        key = Path(path).expanduser().resolve()
        if key in cls._cache:
            return cls._cache[key]
        image = load_image(key)
        cls._cache[key] = image
        logger.debug(f"[TextureManager] Loaded texture: {key}")
        return image

    @classmethod
    def for_material(cls, material) -> dict:
        """{"diffuse": …, "bump": …} – только для заданных карт."""
        textures = {}
        if material.diffuse_texture_path is not None:
            textures["diffuse"] = cls.get(material.diffuse_texture_path)
        if material.bump_map_path is not None:
            textures["bump"] = cls.get(material.bump_map_path)
        return textures

    @classmethod
    def clear(cls):
        cls._cache.clear()
