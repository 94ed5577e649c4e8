# objmodel/parsing/segments.py
"""
Разбиение текста на строки‑токены и на сегменты.

Сегмент – непрерывный кусок файла между двумя «граничными»
директивами: `o`/`g` для геометрии, `newmtl` для материалов.
Строки до первой границы образуют ведущий безымянный сегмент.
"""

from __future__ import annotations

import dataclasses
from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

TokenLine = Tuple[int, List[str]]   # (номер строки с 1, токены)


@dataclasses.dataclass
class Segment:
    name: Optional[str]
    keyword: Optional[str]          # "o", "g", "newmtl" или None для ведущего
    start: int                      # номер строки границы (или первой строки)
    lines: List[TokenLine] = dataclasses.field(default_factory=list)


def tokenize(text: str) -> Iterator[TokenLine]:
    """Пустые строки и комментарии пропускаются.

    Комментарий начинается с токена, первый символ которого `#`;
    `#` внутри токена (`tex#1.png`) – обычный символ.
    """
    for number, raw in enumerate(text.splitlines(), start=1):
        tokens = []
        for token in raw.split():
            if token.startswith("#"):
                break
            tokens.append(token)
        if tokens:
            yield number, tokens


def split_segments(lines: Iterable[TokenLine], boundaries: Sequence[str]) -> Iterator[Segment]:
    """Разбить строки на сегменты по директивам из `boundaries`.

    Ведущий сегмент возвращается только если в нём есть строки;
    именованный – всегда, даже пустой (решать, что с ним делать,
    будет вызывающий).
    """
    current = None
    for number, tokens in lines:
        if tokens[0] in boundaries:
            if current is not None:
                yield current
            name = " ".join(tokens[1:]) or None
            current = Segment(name=name, keyword=tokens[0], start=number)
            continue
        if current is None:
            current = Segment(name=None, keyword=None, start=number)
        current.lines.append((number, tokens))

    if current is not None:
        yield current
