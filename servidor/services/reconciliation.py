"""Servicio de conciliacion de inventario contra transacciones."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from servidor.domain.models import (
    ErrorTransaccion,
    MotivoError,
    Producto,
    TipoDesconocido,
    TipoTransaccion,
    Transaccion,
)

LOGGER = logging.getLogger(__name__)

ERROR_PREFIX = "ERROR: "


@dataclass(frozen=True, slots=True)
class ResultadoConciliacion:
    """Catalogo mutado y errores en orden de procesamiento."""

    productos: list[Producto]
    errores: tuple[ErrorTransaccion, ...]
    aplicadas: int

    @property
    def tiene_errores(self) -> bool:
        return bool(self.errores)

    @property
    def mensajes(self) -> list[str]:
        return [error.mensaje for error in self.errores]


class ReconciliationService:
    """Aplica transacciones sobre un catalogo prestado por el llamador.

    ``conciliar`` recibe una lista mutable de productos, modifica ``stock``
    en su lugar y la retorna dentro del resultado. El llamador no debe
    agregar ni quitar productos mientras dura la llamada, porque el indice
    por ID se construye una sola vez al inicio.

    Si el catalogo trae IDs repetidos (precondicion violada) gana la ultima
    ocurrencia y se registra una advertencia.
    """

    def conciliar(
        self,
        productos: list[Producto],
        transacciones: Sequence[Transaccion],
    ) -> ResultadoConciliacion:
        """Procesa las transacciones en orden y acumula los errores."""
        index = self._build_index(productos)
        errores: list[ErrorTransaccion] = []
        aplicadas = 0

        for transaccion in transacciones:
            error = self._aplicar(productos, index, transaccion)
            if error is None:
                aplicadas += 1
                continue
            LOGGER.debug("Transaccion rechazada (%s): %s", error.motivo.value, transaccion)
            errores.append(error)

        LOGGER.info(
            "Conciliacion terminada: transacciones=%d, aplicadas=%d, errores=%d",
            len(transacciones),
            aplicadas,
            len(errores),
        )
        return ResultadoConciliacion(
            productos=productos,
            errores=tuple(errores),
            aplicadas=aplicadas,
        )

    def _build_index(self, productos: Sequence[Producto]) -> dict[str, int]:
        """Indice ID -> posicion en el catalogo."""
        index: dict[str, int] = {}
        for position, producto in enumerate(productos):
            if producto.id in index:
                LOGGER.warning(
                    "ID de producto duplicado en inventario: %s (se usa la ultima ocurrencia)",
                    producto.id,
                )
            index[producto.id] = position
        return index

    def _aplicar(
        self,
        productos: list[Producto],
        index: dict[str, int],
        transaccion: Transaccion,
    ) -> ErrorTransaccion | None:
        """Aplica una transaccion; retorna el error si no pudo aplicarse."""
        position = index.get(transaccion.id_producto)
        if position is None:
            return _build_error(
                MotivoError.PRODUCTO_NO_ENCONTRADO,
                transaccion,
                f"Producto {transaccion.id_producto} no encontrado en transacción "
                f"de tipo {transaccion.tipo.etiqueta} (fecha: {transaccion.fecha})",
            )

        producto = productos[position]
        tipo = transaccion.tipo

        if isinstance(tipo, TipoDesconocido):
            return _build_error(
                MotivoError.TIPO_DESCONOCIDO,
                transaccion,
                f"Tipo de transacción desconocido '{tipo.valor}' para producto "
                f"{transaccion.id_producto} (fecha: {transaccion.fecha})",
            )

        if tipo is TipoTransaccion.VENTA:
            if producto.stock < transaccion.cantidad:
                return _build_error(
                    MotivoError.STOCK_INSUFICIENTE,
                    transaccion,
                    f"Stock insuficiente para venta. Producto: {producto.id}, "
                    f"Stock actual: {producto.stock}, "
                    f"Cantidad solicitada: {transaccion.cantidad} "
                    f"(fecha: {transaccion.fecha})",
                )
            producto.stock -= transaccion.cantidad
        else:
            # COMPRA y DEVOLUCION suman stock de la misma forma.
            producto.stock += transaccion.cantidad
        return None


def _build_error(
    motivo: MotivoError,
    transaccion: Transaccion,
    detalle: str,
) -> ErrorTransaccion:
    return ErrorTransaccion(
        motivo=motivo,
        transaccion=transaccion,
        mensaje=f"{ERROR_PREFIX}{detalle}",
    )


def conciliar_inventario(
    productos: list[Producto],
    transacciones: Sequence[Transaccion],
) -> ResultadoConciliacion:
    """Atajo funcional sobre ``ReconciliationService.conciliar``."""
    return ReconciliationService().conciliar(productos, transacciones)
