# -*- coding: utf-8 -*-
"""
conftest.py – общие фикстуры: запись OBJ/MTL во временную папку
и изолированная конфигурация (без чтения objmodel.json из cwd).
"""

import textwrap

import pytest

from objmodel.utils.config import Config, CONFIG_ENV_VAR
from objmodel.assets.texture_manager import TextureManager


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Каждый тест получает свежий Config, указывающий в tmp_path."""
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "objmodel.json"))
    Config.reset()
    TextureManager.clear()
    yield Config()
    Config.reset()
    TextureManager.clear()


@pytest.fixture
def write_file(tmp_path):
    """write_file("a.obj", "v 0 0 0") → Path; отступы из тройных кавычек срезаются."""
    def _write(name: str, text: str):
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(textwrap.dedent(text).lstrip("\n"), encoding="utf-8")
        return path
    return _write


QUAD_OBJ = """\
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
vt 0 0
vt 1 0
vt 1 1
vt 0 1
vn 0 0 1
f 1/1/1 2/2/1 3/3/1 4/4/1
"""


@pytest.fixture
def quad_obj():
    return QUAD_OBJ
