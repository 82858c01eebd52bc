"""Сборка контейнера ICO из готовых PNG.

Формат (все многобайтовые поля little-endian):
- заголовок, 6 байт: reserved=0, type=1, count=N;
- каталог, N записей по 16 байт: width, height (0 означает 256), palette=0,
  reserved=0, planes=1, bpp=32, размер данных, смещение данных;
- данные: PNG подряд, в порядке каталога, без выравнивания.

Принципы:
- SRP: только сериализация; откуда взялись PNG, сервис не знает.
- Чистая функция: один и тот же вход даёт побайтно один и тот же выход.
"""
from __future__ import annotations

import logging
import struct
from dataclasses import dataclass
from typing import List, Sequence

from imgico.errors import EmptyIconError, EncodingError
from imgico.models.image_model import RenderedImage, validate_icon_size

logger = logging.getLogger(__name__)

HEADER_FORMAT = "<HHH"
ENTRY_FORMAT = "<BBBBHHII"
HEADER_SIZE = struct.calcsize(HEADER_FORMAT)
ENTRY_SIZE = struct.calcsize(ENTRY_FORMAT)

ICO_TYPE = 1
COLOR_PLANES = 1
BITS_PER_PIXEL = 32

MAX_ENTRIES = 0xFFFF
MAX_UINT32 = 0xFFFFFFFF


@dataclass(frozen=True)
class IcoDirectoryEntry:
    """Разобранная запись каталога ICO.

    Fields:
        width, height: Сырые байты размеров (0 означает 256).
        color_count: Число цветов палитры.
        planes: Цветовые плоскости.
        bit_count: Бит на пиксель.
        data_size: Длина данных изображения.
        data_offset: Смещение данных от начала файла.
    """
    width: int
    height: int
    color_count: int
    reserved: int
    planes: int
    bit_count: int
    data_size: int
    data_offset: int

    @property
    def size(self) -> int:
        """Логический размер: 0 в поле ширины означает 256."""
        return self.width or 256


def encode_dimension(size: int) -> int:
    return 0 if size == 256 else size


class IcoService:
    def encode(self, images: Sequence[RenderedImage]) -> bytes:
        """Сериализует изображения в один ICO.

        Вся проверка выполняется до записи первого байта: либо полный
        контейнер, либо исключение.

        Args:
            images: Изображения в порядке каталога.

        Returns:
            Байты ICO длиной `6 + 16*N + sum(len(data))`.

        Raises:
            EmptyIconError: если список пуст.
            InvalidSizeError: если размер вне [1, 256].
            EncodingError: если число записей или смещения не помещаются в поля формата.
        """
        images = list(images)
        self._validate(images)

        count = len(images)
        header = struct.pack(HEADER_FORMAT, 0, ICO_TYPE, count)

        entries: List[bytes] = []
        offset = HEADER_SIZE + ENTRY_SIZE * count
        for image in images:
            dim = encode_dimension(image.size)
            entries.append(
                struct.pack(
                    ENTRY_FORMAT,
                    dim,
                    dim,
                    0,  # palette: PNG всегда truecolor
                    0,  # reserved
                    COLOR_PLANES,
                    BITS_PER_PIXEL,
                    len(image.data),
                    offset,
                )
            )
            offset += len(image.data)

        result = b"".join([header, *entries, *(image.data for image in images)])
        if len(result) != offset:
            raise EncodingError(f"ICO length mismatch: wrote {len(result)} bytes, directory claims {offset}")

        logger.debug("Encoded ICO with %d images (%d bytes)", count, len(result))
        return result

    def decode_directory(self, data: bytes) -> List[IcoDirectoryEntry]:
        """Читает заголовок и каталог ICO обратно в записи.

        Raises:
            EncodingError: если буфер усечён или это не ICO.
        """
        if len(data) < HEADER_SIZE:
            raise EncodingError("Invalid ICO: buffer shorter than header")
        reserved, ico_type, count = struct.unpack_from(HEADER_FORMAT, data, 0)
        if reserved != 0 or ico_type != ICO_TYPE:
            raise EncodingError(f"Invalid ICO header: reserved={reserved}, type={ico_type}")

        directory_end = HEADER_SIZE + ENTRY_SIZE * count
        if len(data) < directory_end:
            raise EncodingError(f"Invalid ICO: directory for {count} entries is truncated")

        entries = [
            IcoDirectoryEntry(*struct.unpack_from(ENTRY_FORMAT, data, HEADER_SIZE + ENTRY_SIZE * i))
            for i in range(count)
        ]
        for entry in entries:
            if entry.data_offset + entry.data_size > len(data):
                raise EncodingError(
                    f"Invalid ICO: entry at offset {entry.data_offset} runs past end of buffer"
                )
        return entries

    # ---- Helpers ----
    def _validate(self, images: Sequence[RenderedImage]) -> None:
        if not images:
            raise EmptyIconError("Cannot encode an ICO without images")
        if len(images) > MAX_ENTRIES:
            raise EncodingError(f"Too many images for ICO: {len(images)} (max {MAX_ENTRIES})")

        end = HEADER_SIZE + ENTRY_SIZE * len(images)
        for image in images:
            validate_icon_size(image.size)
            end += len(image.data)
        if end > MAX_UINT32:
            raise EncodingError(f"ICO too large: {end} bytes exceeds 32-bit offsets")
