"""Исключения конвертера.

Все ошибки всплывают синхронно к вызывающему; частичного результата нет.
"""
from __future__ import annotations

from typing import Any


class InvalidSizeError(ValueError):
    """Размер иконки вне допустимого диапазона [1, 256]."""

    def __init__(self, size: Any, message: str | None = None) -> None:
        self.size = size
        super().__init__(message or f"Invalid icon size: {size}. Size must be between 1 and 256.")


class EmptyIconError(ValueError):
    """Попытка собрать ICO без единого изображения."""


class RenderError(ValueError):
    """Источник не удалось прочитать, декодировать или отрисовать."""


class EncodingError(RuntimeError):
    """Нарушен инвариант формата ICO (ошибка программы, а не ввода)."""
