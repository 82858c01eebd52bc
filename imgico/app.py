from __future__ import annotations

import argparse
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Sequence, TextIO, Tuple

from imgico.config import DEFAULT_SIZES, OUTPUT_DIR_PREFIX, setup_logging
from imgico.controllers.app_controller import AppController
from imgico.models.image_model import ImageSource
from imgico.models.options import IcoOptions, SvgOptions

logger = logging.getLogger(__name__)

FORMAT_ICO = "ico"
FORMAT_SVG = "svg"


def parse_sizes(raw: str) -> Tuple[int, ...]:
    """Разбирает список размеров вида "16,32,48". Диапазон проверяет контроллер."""
    sizes: List[int] = []
    for token in raw.split(","):
        token = token.strip()
        if not token:
            continue
        try:
            sizes.append(int(token))
        except ValueError as exc:
            raise argparse.ArgumentTypeError(f"invalid size value: {token!r}") from exc
    if not sizes:
        raise argparse.ArgumentTypeError("at least one size must be provided")
    return tuple(sizes)


def timestamped_dir_name(now: Optional[datetime] = None) -> str:
    # ISO-время, ':' и '.' заменены на '-'
    now = now or datetime.now(timezone.utc)
    stamp = now.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return f"{OUTPUT_DIR_PREFIX}-{stamp.replace(':', '-').replace('.', '-')}"


class ImgicoApp:
    def __init__(self, stdout: Optional[TextIO] = None, stderr: Optional[TextIO] = None) -> None:
        self._stdout = stdout or sys.stdout
        self._stderr = stderr or sys.stderr
        self._controller = AppController()

        self._parser = argparse.ArgumentParser(
            prog="imgico",
            description="Convert an image to ICO or SVG, one file per size.",
        )
        self._parser.add_argument("input", nargs="?", help="input image path")
        self._parser.add_argument(
            "-f",
            "--format",
            type=str.lower,
            choices=(FORMAT_ICO, FORMAT_SVG),
            default=FORMAT_ICO,
            help="output format (default: ico)",
        )
        self._parser.add_argument(
            "-s",
            "--sizes",
            type=parse_sizes,
            default=DEFAULT_SIZES,
            help="comma-separated sizes (default: 16,32,48,64,128,256)",
        )
        self._parser.add_argument(
            "-o",
            "--output-dir",
            type=Path,
            default=Path("."),
            help="directory in which the timestamped output folder is created",
        )
        self._parser.add_argument("-v", "--verbose", action="store_true", help="debug logging to stderr")

    def run(self, argv: Optional[Sequence[str]] = None) -> int:
        """Выполняет CLI и возвращает код выхода."""
        args = self._parser.parse_args(argv)
        if args.input is None:
            self._parser.print_help(self._stdout)
            return 0

        setup_logging(args.verbose)
        try:
            out_dir = self._convert(args)
        except Exception as exc:
            logger.debug("Conversion failed", exc_info=True)
            print(f"Error: {exc}", file=self._stderr)
            return 1

        print(f"Extracted {args.format.upper()} images to {out_dir}", file=self._stdout)
        return 0

    # ---- Helpers ----
    def _convert(self, args: argparse.Namespace) -> Path:
        source = ImageSource.from_path(args.input)
        # источник должен существовать до создания выходной папки
        if not source.path.is_file():
            raise FileNotFoundError(f"Input file not found: {source.path}")

        out_dir = args.output_dir / timestamped_dir_name()
        out_dir.mkdir(parents=True, exist_ok=False)

        for size in args.sizes:
            # каждый файл самодостаточен: один размер — один ICO или SVG
            if args.format == FORMAT_SVG:
                payload = self._controller.to_svg(source, SvgOptions(size=size)).encode("utf-8")
            else:
                payload = self._controller.to_ico(source, IcoOptions(sizes=(size,)))
            target = out_dir / f"{size}.{args.format}"
            target.write_bytes(payload)
            logger.info("Wrote %s (%d bytes)", target, len(payload))
        return out_dir
