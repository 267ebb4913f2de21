"""DTOs del protocolo cliente-servidor."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(slots=True)
class ProcessInventoryRequest:
    """Solicitud para conciliar inventario contra transacciones."""

    inventory_path: str
    transactions_path: str
    output_dir: str
    low_stock_threshold: int


@dataclass(slots=True)
class ProcessInventoryResponse:
    """Respuesta con rutas generadas y resumen de la conciliacion."""

    updated_inventory_path: str
    low_stock_report_path: str
    error_log_path: str
    productos: int
    transacciones: int
    aplicadas: int
    productos_bajo_stock: int
    errores: list[str] = field(default_factory=list)
