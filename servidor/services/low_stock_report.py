"""Reporte de productos con bajo stock."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from servidor.domain.models import Producto
from shared.errors import ServiceError

LOGGER = logging.getLogger(__name__)

REPORT_TITLE = "ALERTA: PRODUCTOS CON BAJO STOCK"
REPORT_UNDERLINE = "=" * len(REPORT_TITLE)


def productos_bajo_stock(productos: Sequence[Producto], limite: int) -> list[Producto]:
    """Filtra productos con stock estrictamente menor al limite."""
    return [producto for producto in productos if producto.stock < limite]


def build_low_stock_report(productos: Sequence[Producto], limite: int) -> str:
    """Construye el texto del reporte con una linea por producto y total."""
    bajo_stock = productos_bajo_stock(productos, limite)
    lines = [REPORT_TITLE, REPORT_UNDERLINE]
    lines.extend(str(producto) for producto in bajo_stock)
    lines.append(f"Total de productos con bajo stock: {len(bajo_stock)}")
    return "\n".join(lines) + "\n"


def escribir_reporte_bajo_stock(
    productos: Sequence[Producto],
    limite: int,
    path: Path,
) -> Path:
    """Escribe el reporte de bajo stock en ``path``."""
    report = build_low_stock_report(productos, limite)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(report, encoding="utf-8")
    except OSError as exc:
        raise ServiceError(f"No se pudo crear reporte bajo stock: {path}") from exc

    LOGGER.info("Reporte de bajo stock escrito: path=%s, limite=%d", path, limite)
    return path
