# --------------------------------------------------------------
# File: logger.py
# Description: Configuración de logging con ficheros rotativos diarios.
# --------------------------------------------------------------
"""Configura el logger `passcore`.

Con `LOG_DIR` definido se escriben tres ficheros rotados a diario:
`access.log` (INFO, 14 días), `errors.log` (ERROR, 30 días) y `combined.log`
(todo, 30 días). Fuera de producción también se emite por consola.
"""

from __future__ import annotations

import logging
import os
from logging.handlers import TimedRotatingFileHandler

from passcore.config import Settings

LOGGER_NAME = "passcore"
FILE_FORMAT = '{"time": "%(asctime)s", "level": "%(levelname)s", "logger": "%(name)s", "message": "%(message)s"}'
CONSOLE_FORMAT = "[%(levelname)s] %(name)s: %(message)s"

# (fichero, nivel, días conservados)
ROTATING_FILES = (
    ("access.log", logging.INFO, 14),
    ("errors.log", logging.ERROR, 30),
    ("combined.log", logging.NOTSET, 30),
)

_HANDLER_MARK = "_passcore_handler"


def _mark(handler: logging.Handler) -> logging.Handler:
    setattr(handler, _HANDLER_MARK, True)
    return handler


def configure_logging(settings: Settings) -> logging.Logger:
    """Configura (o reconfigura) los handlers del logger `passcore`.

    Args:
        settings (Settings): Configuración del proceso.

    Returns:
        logging.Logger: Logger raíz del paquete.

    """

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(settings.log_level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_MARK, False):
            logger.removeHandler(handler)
            handler.close()

    if settings.log_dir:
        os.makedirs(settings.log_dir, exist_ok=True)
        file_formatter = logging.Formatter(FILE_FORMAT)
        for filename, level, backups in ROTATING_FILES:
            handler = TimedRotatingFileHandler(
                os.path.join(settings.log_dir, filename),
                when="midnight",
                backupCount=backups,
                encoding="utf-8",
            )
            handler.setLevel(level)
            handler.setFormatter(file_formatter)
            logger.addHandler(_mark(handler))

    if not settings.log_dir or not settings.is_production:
        console = logging.StreamHandler()
        console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        logger.addHandler(_mark(console))

    return logger
