"""Контроллер конвертации: оркестрация провайдера отрисовки и кодировщиков.

SOLID:
- SRP: класс связывает сервисы (без логики кодирования и обработки изображений).
- DIP: зависит от сервисов как от ролей; реализации можно подменить при создании.
Clean Code:
- Проверка размеров выполняется до любой отрисовки; частичного результата нет.
"""
from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from typing import List, Optional

from imgico.errors import InvalidSizeError, RenderError
from imgico.models.image_model import (
    ImageInput,
    ImageSource,
    RenderedImage,
    validate_icon_size,
)
from imgico.models.options import IcoOptions, ResizeOptions, SvgOptions
from imgico.services.ico_service import IcoService
from imgico.services.image_service import ImageService
from imgico.services.svg_service import SvgService

logger = logging.getLogger(__name__)


@dataclass
class AppController:
    """Связывает провайдер отрисовки с кодировщиком ICO и SVG-обёрткой.

    Ответственности:
    - Разрешение входа «путь или байты» в `ImageSource`.
    - Проверка запрошенных размеров.
    - Отрисовка каждого размера через `ImageService` (последовательно или в пуле потоков).
    - Передача результатов в `IcoService` / `SvgService` в исходном порядке.
    """
    image_service: ImageService = field(default_factory=ImageService)
    ico_service: IcoService = field(default_factory=IcoService)
    svg_service: SvgService = field(default_factory=SvgService)

    def to_ico(self, source: ImageInput, options: IcoOptions = IcoOptions()) -> bytes:
        """Собирает ICO со всеми размерами из `options.sizes`.

        Raises:
            InvalidSizeError: для первого размера вне [1, 256]; до какой-либо отрисовки.
            RenderError, FileNotFoundError: ошибки провайдера, без изменений.
        """
        source = ImageSource.from_input(source)
        sizes = [validate_icon_size(size) for size in options.sizes]

        logger.debug("Rendering %s at sizes %s", source.describe(), sizes)
        images = self._render_all(source, sizes, options)
        return self.ico_service.encode(images)

    def to_svg(self, source: ImageInput, options: SvgOptions = SvgOptions()) -> str:
        """Оборачивает источник в SVG.

        В документ пишутся фактические размеры отрисовки, а не запрошенный `size`.
        """
        source = ImageSource.from_input(source)
        size = options.size
        if size is not None and (isinstance(size, bool) or not isinstance(size, int) or size < 1):
            raise InvalidSizeError(size, f"Invalid SVG size: {size!r}. Size must be a positive integer.")

        rendered = self.image_service.render(source, size, options.resize)
        return self.svg_service.wrap(rendered.data, rendered.width, rendered.height)

    # ---- Helpers ----
    def _render_all(self, source: ImageSource, sizes: List[int], options: IcoOptions) -> List[RenderedImage]:
        def render_one(size: int) -> RenderedImage:
            return self._render_square(source, size, options.resize)

        if options.workers == 1 or len(sizes) < 2:
            return [render_one(size) for size in sizes]
        # map сохраняет порядок запрошенных размеров
        with ThreadPoolExecutor(max_workers=min(options.workers, len(sizes))) as pool:
            return list(pool.map(render_one, sizes))

    def _render_square(self, source: ImageSource, size: int, resize: ResizeOptions) -> RenderedImage:
        rendered = self.image_service.render(source, size, resize)
        if (rendered.width, rendered.height) != (size, size):
            raise RenderError(
                f"Renderer returned {rendered.width}x{rendered.height} for requested size {size}x{size}"
            )
        return RenderedImage(data=rendered.data, size=size)


def imgico(source: ImageInput, options: Optional[IcoOptions] = None) -> bytes:
    """Конвертирует изображение в ICO (размеры по умолчанию 16..256)."""
    return AppController().to_ico(source, options or IcoOptions())


def imgsvg(source: ImageInput, options: Optional[SvgOptions] = None) -> bytes:
    """Конвертирует изображение в SVG со встроенным PNG; возвращает UTF-8 байты."""
    return AppController().to_svg(source, options or SvgOptions()).encode("utf-8")
