"""
Минимальный пример: загрузить OBJ и показать, что получит рендер.

    python examples/minimal_example.py [path/to/model.obj]
"""

import sys
from pathlib import Path

import objmodel
from objmodel.utils import logger


if __name__ == "__main__":
    path = Path(sys.argv[1]) if len(sys.argv) > 1 else Path(__file__).parent / "assets" / "crate.obj"
    logger.info(f"Loading {path} ...")

    try:
        model = objmodel.load_model(path)
    except objmodel.ObjLoadError as exc:
        logger.error(f"Failed to load model: {exc}")
        sys.exit(1)

    for mesh in model.meshes:
        material = model.material_for(mesh)
        buffer = mesh.interleaved()
        logger.info(
            f"  {mesh.name or '<unnamed>'}: {len(mesh.vertices)} vertices, "
            f"{mesh.triangle_count} triangles, {buffer.nbytes} bytes, "
            f"material={material.name if material else None}"
        )
