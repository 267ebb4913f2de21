"""Esquema canonico de columnas CSV de inventario y transacciones."""

from __future__ import annotations

from collections.abc import Sequence

ID_HEADER = "ID"
NOMBRE_HEADER = "Nombre"
CATEGORIA_HEADER = "Categoría"
PRECIO_HEADER = "Precio"
STOCK_HEADER = "Stock"

INVENTORY_HEADERS: tuple[str, ...] = (
    ID_HEADER,
    NOMBRE_HEADER,
    CATEGORIA_HEADER,
    PRECIO_HEADER,
    STOCK_HEADER,
)

TIPO_HEADER = "Tipo"
ID_PRODUCTO_HEADER = "IDProducto"
CANTIDAD_HEADER = "Cantidad"
FECHA_HEADER = "Fecha"

TRANSACTION_HEADERS: tuple[str, ...] = (
    TIPO_HEADER,
    ID_PRODUCTO_HEADER,
    CANTIDAD_HEADER,
    FECHA_HEADER,
)

INVENTORY_HEADERS_INDEX: dict[str, int] = {
    name: index for index, name in enumerate(INVENTORY_HEADERS)
}
TRANSACTION_HEADERS_INDEX: dict[str, int] = {
    name: index for index, name in enumerate(TRANSACTION_HEADERS)
}


def is_complete_row(row: Sequence[str], headers: Sequence[str]) -> bool:
    """Indica si una fila trae al menos tantas columnas como el esquema."""
    return len(row) >= len(headers)
