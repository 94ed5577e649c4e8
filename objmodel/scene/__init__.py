"""
Пакет scene – вершины, меши, модели.
"""

from objmodel.scene.mesh import Vertex, Mesh, export_mesh
from objmodel.scene.model import Model

__all__ = ["Vertex", "Mesh", "export_mesh", "Model"]
