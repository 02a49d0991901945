from __future__ import annotations

import logging
import sys
import warnings
from logging import Formatter, StreamHandler
from logging.handlers import RotatingFileHandler
from typing import TYPE_CHECKING, ClassVar, Final, Literal, Self, TextIO

if TYPE_CHECKING:
    from pathlib import Path

__all__: list[str] = ["LOGGER_NAMESPACE", "LoggerUtils"]

type LevelType = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOGGER_NAMESPACE: Final[str] = "TranslationChat"

_DEFAULT_LEVEL: Final[int] = logging.INFO
_ROTATE_BYTES: Final[int] = 2 * 1024 * 1024
_ROTATE_BACKUPS: Final[int] = 2
_CONSOLE_FORMAT: Final[str] = "%(levelname)s: %(message)s"
_FILE_FORMAT: Final[str] = "%(asctime)s %(levelname)-8s %(name)-44s %(funcName)s:%(lineno)d\t%(message)s"


class LoggerUtils:
    """Configures the ``TranslationChat`` logger tree once per process.

    Console output carries warnings and errors only. The optional log file receives everything
    from DEBUG up and rotates at 2 MB. Constructing the class again is a no-op that returns the
    configured instance, so entry points and tests may call it freely.
    """

    _instance: ClassVar[Self | None] = None
    _ready: ClassVar[bool] = False

    def __new__(cls, *args, **kwargs) -> Self:
        _ = args, kwargs
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __init__(self, log_file: str | Path = "") -> None:
        """
        Args:
            log_file (str | Path): Path of the rotating log file. Empty keeps logging on the console.
        """
        if LoggerUtils._ready:
            return

        self.root_logger: logging.Logger = logging.getLogger(LOGGER_NAMESPACE)
        self.root_logger.setLevel(_DEFAULT_LEVEL)
        self._attach_console()
        if str(log_file).strip():
            self._attach_file(str(log_file))

        warnings.showwarning = self._log_warning
        LoggerUtils._ready = True

    def _log_warning(
        self,
        message: Warning | str,
        category: type[Warning],
        filename: str,
        lineno: int,
        file: TextIO | None = None,
        line: str | None = None,
    ) -> None:
        _ = file, line
        self.root_logger.warning("%s:%d: %s: %s", filename, lineno, category.__name__, message)

    def _attach_console(self) -> None:
        if sys.stderr is None or self._find_handler(StreamHandler) is not None:
            return
        handler: StreamHandler[TextIO] = StreamHandler(sys.stderr)
        handler.setLevel(logging.WARNING)
        handler.setFormatter(Formatter(_CONSOLE_FORMAT))
        self.root_logger.addHandler(handler)

    def _attach_file(self, log_file: str) -> None:
        if self._find_handler(RotatingFileHandler) is not None:
            return
        try:
            handler = RotatingFileHandler(
                log_file, maxBytes=_ROTATE_BYTES, backupCount=_ROTATE_BACKUPS, encoding="utf-8"
            )
        except OSError as err:
            self.root_logger.error("Cannot open log file %s, file logging disabled: %s", log_file, err)
            return
        handler.setLevel(logging.DEBUG)
        handler.setFormatter(Formatter(_FILE_FORMAT))
        self.root_logger.addHandler(handler)

    def _find_handler(self, handler_type: type[logging.Handler]) -> logging.Handler | None:
        return next((h for h in self.root_logger.handlers if isinstance(h, handler_type)), None)

    def set_level(self, level: LevelType) -> None:
        """Change the threshold of the logger tree. Unknown names fall back to INFO."""
        numeric: int | None = logging.getLevelNamesMapping().get(level.upper())
        if numeric is None:
            self.root_logger.setLevel(_DEFAULT_LEVEL)
            self.root_logger.warning("Unknown logging level '%s', using INFO", level)
            return
        self.root_logger.setLevel(numeric)

    @staticmethod
    def get_logger(name: str | None = None) -> logging.Logger:
        """Return ``TranslationChat.<name>``, or the tree root when name is empty."""
        return logging.getLogger(f"{LOGGER_NAMESPACE}.{name}" if name else LOGGER_NAMESPACE)
