"""Lectura y escritura de inventario y transacciones en CSV."""

from __future__ import annotations

import csv
import logging
import re
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path
from typing import TypeVar

from servidor.domain.models import Producto, Transaccion, parse_tipo_transaccion
from shared.csv_schema import (
    CANTIDAD_HEADER,
    CATEGORIA_HEADER,
    FECHA_HEADER,
    ID_HEADER,
    ID_PRODUCTO_HEADER,
    INVENTORY_HEADERS,
    INVENTORY_HEADERS_INDEX,
    NOMBRE_HEADER,
    PRECIO_HEADER,
    STOCK_HEADER,
    TIPO_HEADER,
    TRANSACTION_HEADERS,
    TRANSACTION_HEADERS_INDEX,
    is_complete_row,
)
from shared.errors import ParseError, ServiceError

LOGGER = logging.getLogger(__name__)

READ_ENCODING = "utf-8-sig"
WRITE_ENCODING = "utf-8"

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")
_DECIMAL_PATTERN = re.compile(r"[+-]?(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")

T = TypeVar("T")


def leer_inventario(path: Path) -> list[Producto]:
    """Lee el inventario desde CSV y retorna la lista de productos."""
    rows = _read_rows(path, "inventario")
    productos = parse_inventory_rows(rows, origen=path.name)
    LOGGER.info("Inventario leido: path=%s, productos=%d", path, len(productos))
    return productos


def leer_transacciones(path: Path) -> list[Transaccion]:
    """Lee las transacciones desde CSV en el orden del archivo."""
    rows = _read_rows(path, "transacciones")
    transacciones = parse_transaction_rows(rows, origen=path.name)
    LOGGER.info("Transacciones leidas: path=%s, transacciones=%d", path, len(transacciones))
    return transacciones


def parse_inventory_rows(rows: Iterable[Sequence[str]], origen: str = "") -> list[Producto]:
    """Convierte filas CSV (incluida la cabecera) en productos.

    Las filas vacias se ignoran, la primera fila con datos se descarta
    como cabecera y las filas incompletas se omiten. Un precio o stock no
    numerico aborta con ``ParseError``.
    """
    columns = INVENTORY_HEADERS_INDEX
    productos: list[Producto] = []
    header_seen = False
    for line_number, row in enumerate(rows, start=1):
        if not row:
            continue
        if not header_seen:
            header_seen = True
            continue
        if not is_complete_row(row, INVENTORY_HEADERS):
            LOGGER.debug("Fila incompleta omitida en inventario: linea=%d", line_number)
            continue

        precio = _parse_number(
            row[columns[PRECIO_HEADER]],
            _DECIMAL_PATTERN,
            float,
            line_number,
            PRECIO_HEADER,
            origen,
        )
        stock = _parse_number(
            row[columns[STOCK_HEADER]],
            _INT_PATTERN,
            int,
            line_number,
            STOCK_HEADER,
            origen,
        )
        productos.append(
            Producto(
                id=row[columns[ID_HEADER]],
                nombre=row[columns[NOMBRE_HEADER]],
                categoria=row[columns[CATEGORIA_HEADER]],
                precio=precio,
                stock=stock,
            )
        )
    return productos


def parse_transaction_rows(
    rows: Iterable[Sequence[str]],
    origen: str = "",
) -> list[Transaccion]:
    """Convierte filas CSV (incluida la cabecera) en transacciones."""
    columns = TRANSACTION_HEADERS_INDEX
    transacciones: list[Transaccion] = []
    header_seen = False
    for line_number, row in enumerate(rows, start=1):
        if not row:
            continue
        if not header_seen:
            header_seen = True
            continue
        if not is_complete_row(row, TRANSACTION_HEADERS):
            LOGGER.debug("Fila incompleta omitida en transacciones: linea=%d", line_number)
            continue

        cantidad = _parse_number(
            row[columns[CANTIDAD_HEADER]],
            _INT_PATTERN,
            int,
            line_number,
            CANTIDAD_HEADER,
            origen,
        )
        transacciones.append(
            Transaccion(
                tipo=parse_tipo_transaccion(row[columns[TIPO_HEADER]]),
                id_producto=row[columns[ID_PRODUCTO_HEADER]],
                cantidad=cantidad,
                fecha=row[columns[FECHA_HEADER]],
            )
        )
    return transacciones


def escribir_inventario(productos: Sequence[Producto], path: Path) -> Path:
    """Escribe el inventario con cabecera fija y precio a dos decimales."""
    if path.exists() and path.is_dir():
        raise ServiceError(f"La ruta de inventario actualizado es un directorio: {path}")

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        with path.open("w", newline="", encoding=WRITE_ENCODING) as csv_file:
            writer = csv.writer(csv_file)
            writer.writerow(INVENTORY_HEADERS)
            writer.writerows(_inventory_row(producto) for producto in productos)
    except OSError as exc:
        raise ServiceError(
            f"No fue posible crear archivo inventario actualizado: {path}"
        ) from exc

    LOGGER.info("Inventario actualizado escrito: path=%s, productos=%d", path, len(productos))
    return path


def _inventory_row(producto: Producto) -> list[str]:
    return [
        producto.id,
        producto.nombre,
        producto.categoria,
        f"{producto.precio:.2f}",
        str(producto.stock),
    ]


def _read_rows(path: Path, descripcion: str) -> list[list[str]]:
    """Lee todas las filas de un CSV o falla con ``ServiceError``."""
    try:
        with path.open("r", newline="", encoding=READ_ENCODING) as csv_file:
            return list(csv.reader(csv_file))
    except OSError as exc:
        raise ServiceError(f"No se pudo abrir {descripcion}: {path}") from exc
    except (csv.Error, UnicodeDecodeError) as exc:
        raise ServiceError(f"Error leyendo CSV {descripcion}: {path}") from exc


def _parse_number(
    raw: str,
    pattern: re.Pattern[str],
    cast: Callable[[str], T],
    line_number: int,
    campo: str,
    origen: str,
) -> T:
    """Convierte un campo numerico ASCII; cualquier otra forma es ``ParseError``."""
    value = raw.strip()
    if not pattern.fullmatch(value):
        raise ParseError(linea=line_number, campo=campo, valor=raw, origen=origen)
    return cast(value)
