"""Punto de entrada CLI para conciliar inventario."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from cliente.backend.controller import AppController
from cliente.backend.gateway import LocalServerGateway
from parametros import (
    DEFAULT_INVENTORY_PATH,
    DEFAULT_TRANSACTIONS_PATH,
    LOG_FORMAT,
    LOW_STOCK_THRESHOLD,
    OUTPUT_DIR,
)
from shared.errors import ServiceError, ValidationError

LOGGER = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parsea argumentos CLI de la corrida."""
    parser = argparse.ArgumentParser(
        description=(
            "Aplica transacciones sobre un inventario CSV y genera inventario "
            "actualizado, reporte de bajo stock y log de errores."
        )
    )
    parser.add_argument(
        "--inventario",
        type=Path,
        default=DEFAULT_INVENTORY_PATH,
        help="CSV de inventario (ID,Nombre,Categoría,Precio,Stock).",
    )
    parser.add_argument(
        "--transacciones",
        type=Path,
        default=DEFAULT_TRANSACTIONS_PATH,
        help="CSV de transacciones (Tipo,IDProducto,Cantidad,Fecha).",
    )
    parser.add_argument(
        "--salida",
        type=Path,
        default=OUTPUT_DIR,
        help="Directorio donde se escriben los archivos generados.",
    )
    parser.add_argument(
        "--umbral",
        type=int,
        default=LOW_STOCK_THRESHOLD,
        help="Stock bajo el cual un producto aparece en el reporte.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Muestra logs de depuracion.",
    )
    return parser.parse_args(argv)


def configure_logging(verbose: bool = False) -> None:
    """Configura logging para salida en consola."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Ejecuta una corrida y retorna el codigo de salida."""
    args = parse_args(argv)
    configure_logging(args.verbose)

    controller = AppController(gateway=LocalServerGateway())
    try:
        response = controller.on_process_inventory(
            inventory_path=args.inventario,
            transactions_path=args.transacciones,
            output_dir=args.salida,
            low_stock_threshold=args.umbral,
        )
    except ValidationError as exc:
        LOGGER.error("Entrada invalida: %s", exc)
        return 1
    except ServiceError as exc:
        LOGGER.error("Fallo procesando inventario: %s", exc)
        return 1

    for line in AppController.format_summary(response):
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
