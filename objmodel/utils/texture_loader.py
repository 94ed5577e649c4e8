"""
Загружает PNG/JPG → RGBA‑массив numpy.  GPU‑текстуры здесь не создаются,
это делает слой рендеринга.
"""

from pathlib import Path
from PIL import Image
import numpy as np
from objmodel.utils.logger import logger

def load_image(path) -> np.ndarray:
    """
    Загружает изображение через Pillow и возвращает массив (h, w, 4) uint8.
    """
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"Texture not found: {p}")

    with Image.open(p) as img:
        rgba = img.convert("RGBA")
    data = np.array(rgba, dtype=np.uint8)

    h, w = data.shape[:2]
    logger.debug(f"[TextureLoader] Loaded texture {p} ({w}x{h})")
    return data
