"""Modelos de dominio de inventario."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


@dataclass(slots=True)
class Producto:
    """Representa un producto en inventario.

    Solo ``stock`` cambia durante una conciliacion.
    """

    id: str
    nombre: str
    categoria: str
    precio: float
    stock: int

    def __str__(self) -> str:
        return f"ID: {self.id} | {self.nombre} | Stock actual: {self.stock} unidades"


class TipoTransaccion(str, Enum):
    """Tipos de transaccion reconocidos."""

    VENTA = "VENTA"
    COMPRA = "COMPRA"
    DEVOLUCION = "DEVOLUCION"

    @property
    def etiqueta(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class TipoDesconocido:
    """Tipo de transaccion no reconocido; conserva el texto original."""

    valor: str

    @property
    def etiqueta(self) -> str:
        return self.valor


def parse_tipo_transaccion(raw: str) -> TipoTransaccion | TipoDesconocido:
    """Mapea el texto de entrada a un tipo conocido o a ``TipoDesconocido``."""
    try:
        return TipoTransaccion(raw)
    except ValueError:
        return TipoDesconocido(raw)


@dataclass(frozen=True, slots=True)
class Transaccion:
    """Movimiento de inventario leido desde el archivo de transacciones."""

    tipo: TipoTransaccion | TipoDesconocido
    id_producto: str
    cantidad: int
    fecha: str

    def __str__(self) -> str:
        return f"{self.tipo.etiqueta},{self.id_producto},{self.cantidad},{self.fecha}"


class MotivoError(str, Enum):
    """Motivo por el que una transaccion no pudo aplicarse."""

    PRODUCTO_NO_ENCONTRADO = "producto_no_encontrado"
    STOCK_INSUFICIENTE = "stock_insuficiente"
    TIPO_DESCONOCIDO = "tipo_desconocido"


@dataclass(frozen=True, slots=True)
class ErrorTransaccion:
    """Error no fatal asociado a exactamente una transaccion."""

    motivo: MotivoError
    transaccion: Transaccion
    mensaje: str

    def __str__(self) -> str:
        return self.mensaje
