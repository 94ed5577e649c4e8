# objmodel/parsing/fields.py
"""
Разбор числовых полей директив: `v 1.0 2.0 3.0` → (1.0, 2.0, 3.0).

Функции ничего не возвращают частично – первый же пропущенный или
нечисловой токен приводит к исключению того класса, который передал
вызывающий (`InvalidPositionValue`, `InvalidMaterialLib`, …).
"""

from typing import Sequence, Tuple, Type

from objmodel.errors import ObjLoadError


def parse_floats(tokens: Sequence[str], arity: int,
                 error_cls: Type[ObjLoadError], line: int = None) -> Tuple[float, ...]:
    """Прочитать первые `arity` токенов как float; лишние токены игнорируются."""
    if len(tokens) < arity:
        raise error_cls(f"expected {arity} values, got {len(tokens)}", line=line)
    values = []
    for token in tokens[:arity]:
        if "_" in token:
            # int/float принимают `1_0`, формат – нет
            raise error_cls(f"not a number: {token!r}", line=line)
        try:
            values.append(float(token))
        except ValueError:
            raise error_cls(f"not a number: {token!r}", line=line) from None
    return tuple(values)


def parse_float(tokens: Sequence[str], error_cls: Type[ObjLoadError], line: int = None) -> float:
    return parse_floats(tokens, 1, error_cls, line)[0]


def parse_int(token: str, error_cls: Type[ObjLoadError], line: int = None) -> int:
    if "_" in token:
        raise error_cls(f"not an integer: {token!r}", line=line)
    try:
        return int(token)
    except (TypeError, ValueError):
        raise error_cls(f"not an integer: {token!r}", line=line) from None
