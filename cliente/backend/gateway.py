"""Gateway de comunicacion cliente-servidor."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from servidor.services.inventory_process import InventoryProcessService
from shared.errors import ServiceError, ValidationError
from shared.protocol import ProcessInventoryRequest, ProcessInventoryResponse

LOGGER = logging.getLogger(__name__)


class ServerGateway(Protocol):
    """Interfaz de acceso del cliente a servicios del servidor."""

    def process_inventory(
        self,
        request: ProcessInventoryRequest,
    ) -> ProcessInventoryResponse:
        """Solicita una corrida de conciliacion de inventario."""


class LocalServerGateway:
    """Implementacion local del gateway usando servicios en memoria."""

    def __init__(
        self,
        inventory_process_service: InventoryProcessService | None = None,
    ) -> None:
        self._inventory_process_service = (
            inventory_process_service or InventoryProcessService()
        )

    def process_inventory(
        self,
        request: ProcessInventoryRequest,
    ) -> ProcessInventoryResponse:
        """Ejecuta la corrida delegando en el servicio."""
        try:
            summary = self._inventory_process_service.run(
                inventory_path=Path(request.inventory_path),
                transactions_path=Path(request.transactions_path),
                output_dir=Path(request.output_dir),
                low_stock_threshold=request.low_stock_threshold,
            )
        except (ServiceError, ValidationError):
            raise
        except Exception as exc:
            LOGGER.exception("Fallo inesperado al procesar inventario.")
            raise ServiceError("No fue posible procesar el inventario.") from exc

        return ProcessInventoryResponse(
            updated_inventory_path=str(summary.outputs.updated_inventory),
            low_stock_report_path=str(summary.outputs.low_stock_report),
            error_log_path=str(summary.outputs.error_log),
            productos=len(summary.resultado.productos),
            transacciones=summary.transacciones,
            aplicadas=summary.resultado.aplicadas,
            productos_bajo_stock=summary.productos_bajo_stock,
            errores=summary.resultado.mensajes,
        )
