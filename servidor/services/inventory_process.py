"""Servicio que orquesta una corrida completa de conciliacion."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from parametros import (
    ERROR_LOG_FILENAME,
    LOW_STOCK_REPORT_FILENAME,
    LOW_STOCK_THRESHOLD,
    UPDATED_INVENTORY_FILENAME,
)
from servidor.services.error_log import escribir_log_errores_en_archivo
from servidor.services.inventory_csv import (
    escribir_inventario,
    leer_inventario,
    leer_transacciones,
)
from servidor.services.low_stock_report import (
    escribir_reporte_bajo_stock,
    productos_bajo_stock,
)
from servidor.services.reconciliation import ReconciliationService, ResultadoConciliacion

LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ProcessOutputs:
    """Rutas de salida de una corrida."""

    updated_inventory: Path
    low_stock_report: Path
    error_log: Path


@dataclass(frozen=True, slots=True)
class ProcessSummary:
    """Resultado de una corrida completa."""

    outputs: ProcessOutputs
    resultado: ResultadoConciliacion
    transacciones: int
    productos_bajo_stock: int


class InventoryProcessService:
    """Lee entradas, concilia y escribe inventario, reporte y log."""

    def __init__(
        self,
        reconciliation_service: ReconciliationService | None = None,
        updated_inventory_filename: str = UPDATED_INVENTORY_FILENAME,
        low_stock_report_filename: str = LOW_STOCK_REPORT_FILENAME,
        error_log_filename: str = ERROR_LOG_FILENAME,
    ) -> None:
        self._reconciliation_service = reconciliation_service or ReconciliationService()
        self._updated_inventory_filename = updated_inventory_filename
        self._low_stock_report_filename = low_stock_report_filename
        self._error_log_filename = error_log_filename

    def outputs_for(self, output_dir: Path) -> ProcessOutputs:
        """Resuelve las rutas de salida dentro de ``output_dir``."""
        return ProcessOutputs(
            updated_inventory=output_dir / self._updated_inventory_filename,
            low_stock_report=output_dir / self._low_stock_report_filename,
            error_log=output_dir / self._error_log_filename,
        )

    def run(
        self,
        inventory_path: Path,
        transactions_path: Path,
        output_dir: Path,
        low_stock_threshold: int = LOW_STOCK_THRESHOLD,
    ) -> ProcessSummary:
        """Ejecuta la corrida.

        Un error de lectura o de formato numerico aborta antes de conciliar
        y no se escribe ninguna salida.
        """
        productos = leer_inventario(inventory_path)
        transacciones = leer_transacciones(transactions_path)

        resultado = self._reconciliation_service.conciliar(productos, transacciones)

        outputs = self.outputs_for(output_dir)
        escribir_inventario(resultado.productos, outputs.updated_inventory)
        escribir_reporte_bajo_stock(
            resultado.productos,
            low_stock_threshold,
            outputs.low_stock_report,
        )
        escribir_log_errores_en_archivo(resultado.errores, outputs.error_log)

        bajo_stock = len(productos_bajo_stock(resultado.productos, low_stock_threshold))
        if resultado.tiene_errores:
            LOGGER.warning(
                "Corrida con transacciones rechazadas: errores=%d, log=%s",
                len(resultado.errores),
                outputs.error_log,
            )
        LOGGER.info(
            "Corrida completada: inventario=%s, productos_bajo_stock=%d",
            outputs.updated_inventory,
            bajo_stock,
        )
        return ProcessSummary(
            outputs=outputs,
            resultado=resultado,
            transacciones=len(transacciones),
            productos_bajo_stock=bajo_stock,
        )
