"""Модели данных для изображений.

Принципы:
- SRP: только структура данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) для предсказуемости.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union

from imgico.config import MAX_ICON_SIZE, MIN_ICON_SIZE
from imgico.errors import InvalidSizeError


def validate_icon_size(size: object) -> int:
    """Проверяет, что размер — целое число в [1, 256], и возвращает его.

    Raises:
        InvalidSizeError: если значение не целое или вне диапазона.
    """
    if isinstance(size, bool) or not isinstance(size, int):
        raise InvalidSizeError(size, f"Invalid icon size: {size!r}. Size must be an integer.")
    if size < MIN_ICON_SIZE or size > MAX_ICON_SIZE:
        raise InvalidSizeError(size)
    return size


class SourceKind(Enum):
    FILE_PATH = "file_path"
    IN_MEMORY = "in_memory"


@dataclass(frozen=True)
class ImageSource:
    """Входное изображение: путь к файлу либо байты в памяти.

    Fields:
        kind: Вариант источника.
        path: Путь, если `kind == FILE_PATH`.
        data: Байты, если `kind == IN_MEMORY`.
    """
    kind: SourceKind
    path: Optional[Path] = None
    data: Optional[bytes] = None

    @classmethod
    def from_path(cls, path: Union[str, os.PathLike]) -> "ImageSource":
        return cls(kind=SourceKind.FILE_PATH, path=Path(path))

    @classmethod
    def from_bytes(cls, data: Union[bytes, bytearray, memoryview]) -> "ImageSource":
        return cls(kind=SourceKind.IN_MEMORY, data=bytes(data))

    @classmethod
    def from_input(cls, value: "ImageInput") -> "ImageSource":
        """Разрешает объединение «путь или байты» один раз, на границе.

        Raises:
            TypeError: для неподдерживаемого типа входа.
        """
        if isinstance(value, ImageSource):
            return value
        if isinstance(value, (bytes, bytearray, memoryview)):
            return cls.from_bytes(value)
        if isinstance(value, (str, os.PathLike)):
            return cls.from_path(value)
        raise TypeError(f"Unsupported image input type: {type(value).__name__}")

    def describe(self) -> str:
        if self.kind is SourceKind.FILE_PATH:
            return str(self.path)
        return f"<{len(self.data or b'')} bytes>"


ImageInput = Union[str, os.PathLike, bytes, bytearray, memoryview, ImageSource]


@dataclass(frozen=True)
class RenderResult:
    """Ответ провайдера отрисовки.

    Fields:
        data: PNG-байты.
        width: Фактическая ширина, px.
        height: Фактическая высота, px.
    """
    data: bytes
    width: int
    height: int


@dataclass(frozen=True)
class RenderedImage:
    """Одно изображение для каталога ICO.

    Fields:
        data: PNG-байты; содержимое не перепроверяется.
        size: Логический (запрошенный) квадратный размер, 1..256.
    """
    data: bytes
    size: int

    def __post_init__(self) -> None:
        validate_icon_size(self.size)
