"""Точка входа в приложение."""
import sys

from imgico.app import ImgicoApp


def main() -> None:
    """Создаёт CLI-приложение и завершает процесс с его кодом выхода."""
    app = ImgicoApp()
    sys.exit(app.run())


if __name__ == "__main__":
    main()
