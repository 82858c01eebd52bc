"""Опции конвертации.

Принципы:
- Явная конфигурация: значения по умолчанию — задокументированные константы,
  объекты опций передаются явно, без неявного слияния словарей.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple

from PIL import Image

from imgico.config import DEFAULT_SIZES, TRANSPARENT

FIT_CONTAIN = "contain"
FIT_COVER = "cover"
FIT_FILL = "fill"
FIT_MODES = (FIT_CONTAIN, FIT_COVER, FIT_FILL)


@dataclass(frozen=True)
class ResizeOptions:
    """Параметры масштабирования до квадрата.

    Fields:
        fit: "contain" (вписать с прозрачными полями), "cover" (обрезать), "fill" (растянуть).
        background: RGBA-цвет полей для "contain".
        resample: Фильтр Pillow.
    """
    fit: str = FIT_CONTAIN
    background: Tuple[int, int, int, int] = TRANSPARENT
    resample: int = Image.Resampling.LANCZOS

    def __post_init__(self) -> None:
        if self.fit not in FIT_MODES:
            raise ValueError(f"Unknown fit mode: {self.fit!r}. Expected one of {', '.join(FIT_MODES)}.")
        if len(self.background) != 4:
            raise ValueError(f"Background must be an RGBA tuple, got {self.background!r}")


@dataclass(frozen=True)
class IcoOptions:
    """Параметры сборки ICO.

    Fields:
        sizes: Размеры в порядке записи в каталог.
        resize: Параметры масштабирования.
        workers: Число потоков отрисовки; 1 — последовательно.
    """
    sizes: Tuple[int, ...] = DEFAULT_SIZES
    resize: ResizeOptions = field(default_factory=ResizeOptions)
    workers: int = 1

    def __post_init__(self) -> None:
        # списки от вызывающего превращаем в кортеж, чтобы опции оставались неизменяемыми
        object.__setattr__(self, "sizes", tuple(self.sizes))
        if self.workers < 1:
            raise ValueError(f"workers must be >= 1, got {self.workers}")


@dataclass(frozen=True)
class SvgOptions:
    """Параметры SVG-обёртки.

    Fields:
        size: Квадратный размер; None — исходный размер изображения.
        resize: Параметры масштабирования (только если задан `size`).
    """
    size: Optional[int] = None
    resize: ResizeOptions = field(default_factory=ResizeOptions)
