"""Обёртка PNG в минимальный SVG с data URI."""
from __future__ import annotations

import base64

SVG_TEMPLATE = (
    '<svg width="{width}" height="{height}" xmlns="http://www.w3.org/2000/svg" '
    'xmlns:xlink="http://www.w3.org/1999/xlink">\n'
    '  <image width="{width}" height="{height}" xlink:href="data:image/png;base64,{data}" />\n'
    "</svg>"
)


class SvgService:
    def wrap(self, png: bytes, width: int, height: int) -> str:
        """Возвращает SVG-документ с одним встроенным PNG.

        Содержимое PNG не проверяется.

        Raises:
            ValueError: если ширина или высота не положительны.
        """
        for name, value in (("width", width), ("height", height)):
            if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
                raise ValueError(f"SVG {name} must be a positive integer, got {value!r}")
        encoded = base64.b64encode(png).decode("ascii")
        return SVG_TEMPLATE.format(width=width, height=height, data=encoded)
