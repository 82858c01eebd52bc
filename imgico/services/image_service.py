"""Провайдер отрисовки: загрузка изображения, масштабирование и кодирование в PNG.

Принципы:
- SRP: класс отвечает только за превращение источника в PNG нужного размера.
- OCP: новые форматы источника (например, SVG) добавляются отдельными методами.
- LSP/ISP: возвращает `RenderResult` с предсказуемыми полями; интерфейс узкий и конкретный.
"""
from __future__ import annotations

import io
import logging
from typing import Optional

from PIL import Image, UnidentifiedImageError

from imgico.errors import RenderError
from imgico.models.image_model import ImageSource, RenderResult, SourceKind
from imgico.models.options import FIT_CONTAIN, FIT_COVER, ResizeOptions

logger = logging.getLogger(__name__)


class ImageService:
    def render(
        self,
        source: ImageSource,
        size: Optional[int] = None,
        resize: ResizeOptions = ResizeOptions(),
    ) -> RenderResult:
        """Отрисовывает источник в PNG.

        Args:
            source: Путь или байты изображения.
            size: Сторона квадрата; None — без масштабирования.
            resize: Политика вписывания и фон.

        Returns:
            `RenderResult` с PNG-байтами и фактическими размерами.

        Raises:
            FileNotFoundError: если путь не существует или не указывает на файл.
            RenderError: если данные не распознаны как изображение.
        """
        image = self.load_image(source)
        if size is not None:
            image = self._resize(image, size, resize)

        buffer = io.BytesIO()
        image.save(buffer, format="PNG")
        width, height = image.size
        logger.debug("Rendered %s at %dx%d (%d bytes)", source.describe(), width, height, buffer.tell())
        return RenderResult(data=buffer.getvalue(), width=width, height=height)

    def load_image(self, source: ImageSource) -> Image.Image:
        """Загружает источник и приводит к RGBA."""
        raw = self._read_source(source)
        if self._looks_like_svg(source, raw):
            raw = self._rasterize_svg(raw)

        try:
            pil_image = Image.open(io.BytesIO(raw))
            pil_image.load()
        except (UnidentifiedImageError, OSError) as exc:
            raise RenderError(f"Input is not a decodable image: {source.describe()}") from exc
        return pil_image.convert("RGBA")

    # ---- Helpers ----
    def _read_source(self, source: ImageSource) -> bytes:
        if source.kind is SourceKind.IN_MEMORY:
            return source.data or b""
        path = source.path
        if path is None or not path.exists() or not path.is_file():
            raise FileNotFoundError(f"Input file not found: {path}")
        return path.read_bytes()

    def _looks_like_svg(self, source: ImageSource, raw: bytes) -> bool:
        if source.kind is SourceKind.FILE_PATH and source.path is not None and source.path.suffix.lower() == ".svg":
            return True
        head = raw[:512].lstrip()
        return head.startswith(b"<svg") or (head.startswith(b"<?xml") and b"<svg" in head)

    def _rasterize_svg(self, raw: bytes) -> bytes:
        try:
            from cairosvg import svg2png
        except ImportError as exc:
            raise RenderError("SVG input requires cairosvg: pip install 'imgico[svg]'") from exc
        try:
            return svg2png(bytestring=raw)
        except (ValueError, OSError, SyntaxError) as exc:
            # ParseError из xml.etree наследует SyntaxError
            raise RenderError(f"Failed to rasterize SVG: {exc}") from exc

    def _resize(self, image: Image.Image, size: int, resize: ResizeOptions) -> Image.Image:
        target = (size, size)
        if resize.fit == FIT_CONTAIN:
            # вписываем с сохранением пропорций и центрируем на холсте цвета фона
            scale = min(size / image.width, size / image.height)
            # короткая сторона не меньше 1 px даже при крайних пропорциях
            fitted_size = (
                max(1, min(size, round(image.width * scale))),
                max(1, min(size, round(image.height * scale))),
            )
            fitted = image.resize(fitted_size, resize.resample)
            canvas = Image.new("RGBA", target, resize.background)
            left = (size - fitted.width) // 2
            top = (size - fitted.height) // 2
            canvas.alpha_composite(fitted, (left, top))
            return canvas
        if resize.fit == FIT_COVER:
            side = min(image.width, image.height)
            left = (image.width - side) // 2
            top = (image.height - side) // 2
            return image.resize(target, resize.resample, box=(left, top, left + side, top + side))
        return image.resize(target, resize.resample)
