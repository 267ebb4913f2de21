"""Controlador principal del cliente."""

from __future__ import annotations

import logging
from pathlib import Path

from parametros import LOW_STOCK_THRESHOLD, OUTPUT_DIR
from shared.protocol import ProcessInventoryRequest, ProcessInventoryResponse

from .gateway import ServerGateway
from .validators import validate_input_file, validate_output_dir, validate_threshold

LOGGER = logging.getLogger(__name__)


class AppController:
    """Coordina acciones de la linea de comandos y servicios de negocio."""

    def __init__(self, gateway: ServerGateway) -> None:
        self._gateway = gateway

    def on_process_inventory(
        self,
        inventory_path: Path,
        transactions_path: Path,
        output_dir: Path = OUTPUT_DIR,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    ) -> ProcessInventoryResponse:
        """Valida entradas y solicita la conciliacion al servidor."""
        validate_input_file(inventory_path)
        validate_input_file(transactions_path)
        validate_threshold(low_stock_threshold)
        validate_output_dir(output_dir)

        request = ProcessInventoryRequest(
            inventory_path=str(inventory_path),
            transactions_path=str(transactions_path),
            output_dir=str(output_dir),
            low_stock_threshold=low_stock_threshold,
        )
        LOGGER.info(
            "Accion ejecutada: procesar inventario=%s, transacciones=%s",
            inventory_path,
            transactions_path,
        )
        return self._gateway.process_inventory(request)

    @staticmethod
    def format_summary(response: ProcessInventoryResponse) -> list[str]:
        """Construye el resumen por consola de una corrida."""
        lines = [
            "Proceso completado.",
            f"Inventario actualizado -> {response.updated_inventory_path}",
            f"Reporte bajo stock -> {response.low_stock_report_path}",
            f"Errores (si los hay) -> {response.error_log_path}",
        ]
        if response.errores:
            lines.append(
                f"Transacciones rechazadas: {len(response.errores)} "
                f"de {response.transacciones}"
            )
        return lines
