"""Escritura del log de transacciones rechazadas."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from itertools import count
from pathlib import Path
from typing import TextIO

from servidor.domain.models import ErrorTransaccion
from shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)

ERROR_LOG_FORMAT = "%(asctime)s [ERROR]: %(message)s"
ERROR_LOG_DATEFMT = "%Y/%m/%d %H:%M:%S"

_SINK_IDS = count(1)


class _RaisingStreamHandler(logging.StreamHandler):
    """StreamHandler que propaga los errores de escritura del sink."""

    def handleError(self, record: logging.LogRecord) -> None:
        raise


def build_error_logger(destino: TextIO) -> tuple[logging.Logger, logging.Handler]:
    """Crea un logger aislado que escribe solo en ``destino``.

    El logger no se registra en ``logging.getLogger`` ni propaga a root,
    por lo que no altera la configuracion global de logging.
    """
    error_logger = logging.Logger(f"{__name__}.sink{next(_SINK_IDS)}", logging.INFO)
    error_logger.propagate = False
    handler = _RaisingStreamHandler(destino)
    handler.setFormatter(logging.Formatter(ERROR_LOG_FORMAT, datefmt=ERROR_LOG_DATEFMT))
    error_logger.addHandler(handler)
    return error_logger, handler


def escribir_log_errores(errores: Iterable[ErrorTransaccion | str], destino: TextIO) -> int:
    """Escribe una linea con fecha por cada error y retorna cuantas escribio.

    Un fallo de escritura en ``destino`` se propaga al llamador.
    """
    error_logger, handler = build_error_logger(destino)
    written = 0
    try:
        for error in errores:
            error_logger.info("%s", error)
            written += 1
        handler.flush()
    finally:
        error_logger.removeHandler(handler)
    return written


def escribir_log_errores_en_archivo(
    errores: Iterable[ErrorTransaccion | str],
    path: Path,
) -> Path:
    """Crea el archivo de log (y su directorio) y escribe los errores."""
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", encoding="utf-8") as log_file:
            written = escribir_log_errores(errores, log_file)
    except OSError as exc:
        raise ServiceError(f"No se pudo crear archivo de log: {path}") from exc

    LOGGER.info("Log de errores escrito: path=%s, errores=%d", path, written)
    return path
