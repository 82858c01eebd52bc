"""Константы конфигурации и настройка логирования.

Файлов конфигурации и переменных окружения нет: всё, что можно настроить,
передаётся явно через объекты опций (`imgico.models.options`).
"""
from __future__ import annotations

import logging
import sys
from typing import Tuple

# Стандартный набор размеров иконки Windows
DEFAULT_SIZES: Tuple[int, ...] = (16, 32, 48, 64, 128, 256)

# Поля ширины/высоты в каталоге ICO однобайтовые; 0 означает 256
MIN_ICON_SIZE = 1
MAX_ICON_SIZE = 256

TRANSPARENT: Tuple[int, int, int, int] = (0, 0, 0, 0)

OUTPUT_DIR_PREFIX = "imgico"

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(verbose: bool = False) -> None:
    """Настраивает корневой логгер для CLI. Библиотечный код обработчики не ставит."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
    )
