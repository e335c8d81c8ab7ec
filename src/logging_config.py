"""
Journalisation de MovieStore via loguru.

Deux sorties, réglées par les Settings :
- console : colorée, au niveau log_level, avec les champs liés au message
  (id=3, backend=sql...) rendus à la suite du texte
- fichier : JSON (une ligne par événement), niveau DEBUG, rotation par taille

Les loggers standard d'uvicorn sont redirigés vers loguru afin que les
traces du serveur et celles de l'application partagent les mêmes sorties.
"""

import inspect
import logging
import sys

from loguru import logger

from .config import Settings

# Loggers de la bibliothèque standard repris par loguru
INTERCEPTED_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")

_CONSOLE_PREFIX = (
    "<green>{time:HH:mm:ss.SSS}</green> "
    "<level>{level: <7}</level> "
    "<cyan>{name}</cyan> | <level>{message}</level>"
)


def console_format(record: dict) -> str:
    """Format console : le message suivi des champs extra triés par nom."""
    fields = " ".join(
        f"<magenta>{key}</magenta>={{extra[{key}]}}" for key in sorted(record["extra"])
    )
    if fields:
        return f"{_CONSOLE_PREFIX} {fields}\n{{exception}}"
    return f"{_CONSOLE_PREFIX}\n{{exception}}"


class InterceptHandler(logging.Handler):
    """Réémet un LogRecord standard dans loguru au même niveau."""

    def emit(self, record: logging.LogRecord) -> None:
        try:
            level = logger.level(record.levelname).name
        except ValueError:
            level = record.levelno
        # Remonte au-dessus des frames du module logging jusqu'à l'appelant
        frame, depth = inspect.currentframe(), 0
        while frame and (depth == 0 or frame.f_code.co_filename == logging.__file__):
            frame = frame.f_back
            depth += 1
        logger.opt(depth=depth, exception=record.exc_info).log(level, record.getMessage())


def intercept_standard_logging(names: tuple[str, ...] = INTERCEPTED_LOGGERS) -> None:
    """Remplace les handlers des loggers donnés par un InterceptHandler."""
    handler = InterceptHandler()
    for name in names:
        std_logger = logging.getLogger(name)
        std_logger.handlers = [handler]
        std_logger.propagate = False


def configure_logging(settings: Settings) -> None:
    """Installe les sorties console et fichier décrites par les Settings.

    Args :
        settings : Paramètres de l'application (log_level, log_file,
                   log_rotation_size, log_retention_count)
    """
    logger.remove()

    logger.add(sys.stderr, level=settings.log_level, format=console_format, colorize=True)

    settings.log_file.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        settings.log_file,
        level="DEBUG",
        serialize=True,
        rotation=settings.log_rotation_size,
        retention=settings.log_retention_count,
        compression="zip",
        enqueue=True,  # Les handlers HTTP tournent dans plusieurs threads
    )

    intercept_standard_logging()
    logger.debug(
        "Journalisation configurée",
        level=settings.log_level,
        log_file=str(settings.log_file),
    )
