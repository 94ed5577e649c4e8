# objmodel/errors.py
"""
Иерархия ошибок загрузчика.

Любая ошибка прерывает разбор целиком – частичная модель не
возвращается.  Если известно, где именно случилась ошибка, в
исключении сохраняются `path` и номер строки `line` (с 1).
"""


class ObjLoadError(Exception):
    """Базовая ошибка разбора OBJ/MTL."""

    def __init__(self, message: str = "", line: int = None, path=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.path = path

    def __str__(self):
        where = ""
        if self.path is not None and self.line is not None:
            where = f" ({self.path}:{self.line})"
        elif self.line is not None:
            where = f" (line {self.line})"
        elif self.path is not None:
            where = f" ({self.path})"
        return f"{self.message or type(self).__name__}{where}"


class FileLoadError(ObjLoadError):
    """Не удалось прочитать OBJ‑ или MTL‑файл."""


class InvalidPositionValue(ObjLoadError):
    """Некорректная директива `v`."""


class InvalidTextureCoordValue(ObjLoadError):
    """Некорректная директива `vt`."""


class InvalidNormalValue(ObjLoadError):
    """Некорректная директива `vn`."""


class InvalidFaceValue(ObjLoadError):
    """Некорректная директива `f`: арность, поля или индексы."""


class InvalidMaterialName(ObjLoadError):
    """`usemtl` без имени материала."""


class InvalidMaterialLib(ObjLoadError):
    """Некорректное содержимое MTL‑библиотеки или строки `mtllib`."""


__all__ = [
    "ObjLoadError",
    "FileLoadError",
    "InvalidPositionValue",
    "InvalidTextureCoordValue",
    "InvalidNormalValue",
    "InvalidFaceValue",
    "InvalidMaterialName",
    "InvalidMaterialLib",
]
