"""Tests para ReconciliationService."""

from __future__ import annotations

import unittest

from servidor.domain.models import (
    MotivoError,
    Producto,
    TipoDesconocido,
    TipoTransaccion,
    Transaccion,
    parse_tipo_transaccion,
)
from servidor.services.reconciliation import ReconciliationService, conciliar_inventario


def _producto(id_: str, stock: int, precio: float = 1000.0) -> Producto:
    return Producto(id=id_, nombre=f"Producto {id_}", categoria="General", precio=precio, stock=stock)


def _tx(tipo: str, id_producto: str, cantidad: int, fecha: str = "2024-01-15") -> Transaccion:
    return Transaccion(
        tipo=parse_tipo_transaccion(tipo),
        id_producto=id_producto,
        cantidad=cantidad,
        fecha=fecha,
    )


class ReconciliationServiceTests(unittest.TestCase):
    """Valida reglas de aplicacion de transacciones sobre el catalogo."""

    def setUp(self) -> None:
        self.service = ReconciliationService()

    def test_empty_transactions_leave_catalog_unchanged(self) -> None:
        """Sin transacciones no cambia el stock ni hay errores."""
        productos = [_producto("P001", 5), _producto("P002", 0)]

        resultado = self.service.conciliar(productos, [])

        self.assertEqual([p.stock for p in resultado.productos], [5, 0])
        self.assertEqual(resultado.errores, ())
        self.assertEqual(resultado.aplicadas, 0)
        self.assertFalse(resultado.tiene_errores)

    def test_result_returns_the_lent_list(self) -> None:
        """El catalogo se muta en su lugar y se retorna la misma lista."""
        productos = [_producto("P001", 5)]

        resultado = self.service.conciliar(productos, [_tx("COMPRA", "P001", 2)])

        self.assertIs(resultado.productos, productos)
        self.assertEqual(productos[0].stock, 7)

    def test_sale_equal_to_stock_leaves_zero(self) -> None:
        """Una venta igual al stock debe dejarlo en cero."""
        productos = [_producto("P001", 5)]

        resultado = self.service.conciliar(productos, [_tx("VENTA", "P001", 5)])

        self.assertEqual(productos[0].stock, 0)
        self.assertEqual(resultado.errores, ())
        self.assertEqual(resultado.aplicadas, 1)

    def test_oversell_keeps_stock_and_reports_one_error(self) -> None:
        """Una venta mayor al stock no muta y genera exactamente un error."""
        productos = [_producto("P001", 3)]

        resultado = self.service.conciliar(
            productos,
            [_tx("VENTA", "P001", 4, fecha="2024-02-01")],
        )

        self.assertEqual(productos[0].stock, 3)
        self.assertEqual(len(resultado.errores), 1)
        error = resultado.errores[0]
        self.assertEqual(error.motivo, MotivoError.STOCK_INSUFICIENTE)
        self.assertEqual(
            error.mensaje,
            "ERROR: Stock insuficiente para venta. Producto: P001, Stock actual: 3, "
            "Cantidad solicitada: 4 (fecha: 2024-02-01)",
        )

    def test_purchase_and_return_are_additive(self) -> None:
        """Compra y devolucion suman stock y nunca fallan con producto existente."""
        productos = [_producto("P001", 1)]

        resultado = self.service.conciliar(
            productos,
            [_tx("COMPRA", "P001", 10), _tx("DEVOLUCION", "P001", 4)],
        )

        self.assertEqual(productos[0].stock, 15)
        self.assertEqual(resultado.errores, ())
        self.assertEqual(resultado.aplicadas, 2)

    def test_negative_quantities_are_applied_as_given(self) -> None:
        """Compra y devolucion no validan el signo de la cantidad."""
        productos = [_producto("P001", 10)]

        resultado = self.service.conciliar(
            productos,
            [_tx("COMPRA", "P001", -3), _tx("DEVOLUCION", "P001", -2)],
        )

        self.assertEqual(productos[0].stock, 5)
        self.assertEqual(resultado.errores, ())

    def test_sale_then_purchase(self) -> None:
        """Venta total seguida de compra: 5 -> 0 -> 3."""
        productos = [_producto("P001", 5)]
        observed: list[int] = []

        for transaccion in (_tx("VENTA", "P001", 5), _tx("COMPRA", "P001", 3)):
            resultado = self.service.conciliar(productos, [transaccion])
            self.assertEqual(resultado.errores, ())
            observed.append(productos[0].stock)

        self.assertEqual(observed, [0, 3])

    def test_purchase_then_sale(self) -> None:
        """Compra seguida de venta: 5 -> 8 -> 3."""
        productos = [_producto("P001", 5)]
        observed: list[int] = []

        for transaccion in (_tx("COMPRA", "P001", 3), _tx("VENTA", "P001", 5)):
            resultado = self.service.conciliar(productos, [transaccion])
            self.assertEqual(resultado.errores, ())
            observed.append(productos[0].stock)

        self.assertEqual(observed, [8, 3])

    def test_both_orders_end_at_same_stock_in_one_run(self) -> None:
        """Ambos ordenes terminan en 3 sin errores en una sola corrida."""
        for transacciones in (
            [_tx("VENTA", "P001", 5), _tx("COMPRA", "P001", 3)],
            [_tx("COMPRA", "P001", 3), _tx("VENTA", "P001", 5)],
        ):
            productos = [_producto("P001", 5)]
            resultado = self.service.conciliar(productos, transacciones)
            self.assertEqual(productos[0].stock, 3)
            self.assertEqual(resultado.errores, ())

    def test_order_dependence_within_a_single_run(self) -> None:
        """Una venta solo es posible si una compra previa la habilita."""
        sale_first = [_producto("P001", 2)]
        purchase_first = [_producto("P001", 2)]

        resultado_a = self.service.conciliar(
            sale_first,
            [_tx("VENTA", "P001", 4), _tx("COMPRA", "P001", 3)],
        )
        resultado_b = self.service.conciliar(
            purchase_first,
            [_tx("COMPRA", "P001", 3), _tx("VENTA", "P001", 4)],
        )

        self.assertEqual(sale_first[0].stock, 5)
        self.assertEqual(len(resultado_a.errores), 1)
        self.assertEqual(purchase_first[0].stock, 1)
        self.assertEqual(resultado_b.errores, ())

    def test_unknown_kind_reports_error_without_mutation(self) -> None:
        """Un tipo no reconocido como AJUSTE genera un error y no muta."""
        productos = [_producto("P001", 7)]

        resultado = self.service.conciliar(
            productos,
            [_tx("AJUSTE", "P001", 2, fecha="2024-03-10")],
        )

        self.assertEqual(productos[0].stock, 7)
        self.assertEqual(len(resultado.errores), 1)
        self.assertEqual(resultado.errores[0].motivo, MotivoError.TIPO_DESCONOCIDO)
        self.assertEqual(
            resultado.errores[0].mensaje,
            "ERROR: Tipo de transacción desconocido 'AJUSTE' para producto P001 "
            "(fecha: 2024-03-10)",
        )

    def test_missing_product_reports_error_for_any_kind(self) -> None:
        """Un producto inexistente genera un error por transaccion, sea cual sea el tipo."""
        productos = [_producto("P001", 7)]
        transacciones = [
            _tx("VENTA", "X999", 1),
            _tx("COMPRA", "X999", 1),
            _tx("DEVOLUCION", "X999", 1),
            _tx("AJUSTE", "X999", 1, fecha="2024-04-01"),
        ]

        resultado = self.service.conciliar(productos, transacciones)

        self.assertEqual(productos[0].stock, 7)
        self.assertEqual(len(resultado.errores), 4)
        self.assertTrue(
            all(e.motivo is MotivoError.PRODUCTO_NO_ENCONTRADO for e in resultado.errores)
        )
        self.assertEqual(
            resultado.errores[3].mensaje,
            "ERROR: Producto X999 no encontrado en transacción de tipo AJUSTE "
            "(fecha: 2024-04-01)",
        )

    def test_error_count_matches_failing_transactions_in_order(self) -> None:
        """Los errores conservan el orden de las transacciones que fallaron."""
        productos = [_producto("P001", 2), _producto("P002", 10)]
        transacciones = [
            _tx("VENTA", "P001", 1),
            _tx("VENTA", "P001", 5),
            _tx("COMPRA", "NOPE", 1),
            _tx("DEVOLUCION", "P002", 1),
            _tx("MERMA", "P002", 3),
            _tx("VENTA", "P002", 11),
        ]

        resultado = self.service.conciliar(productos, transacciones)

        self.assertEqual(
            [error.motivo for error in resultado.errores],
            [
                MotivoError.STOCK_INSUFICIENTE,
                MotivoError.PRODUCTO_NO_ENCONTRADO,
                MotivoError.TIPO_DESCONOCIDO,
            ],
        )
        self.assertEqual(
            [error.transaccion for error in resultado.errores],
            [transacciones[1], transacciones[2], transacciones[4]],
        )
        self.assertEqual(resultado.aplicadas, 3)
        self.assertEqual([p.stock for p in productos], [1, 0])

    def test_only_stock_changes(self) -> None:
        """La conciliacion nunca cambia id, nombre, categoria ni precio."""
        producto = Producto(id="P001", nombre="Casco", categoria="Seguridad", precio=24990.5, stock=4)

        conciliar_inventario([producto], [_tx("VENTA", "P001", 1), _tx("COMPRA", "P001", 9)])

        self.assertEqual(
            (producto.id, producto.nombre, producto.categoria, producto.precio, producto.stock),
            ("P001", "Casco", "Seguridad", 24990.5, 12),
        )

    def test_duplicate_ids_last_occurrence_wins(self) -> None:
        """Con IDs repetidos se usa la ultima ocurrencia y se advierte en el log."""
        primero = _producto("P001", 1)
        ultimo = _producto("P001", 1)

        with self.assertLogs("servidor.services.reconciliation", level="WARNING"):
            self.service.conciliar([primero, ultimo], [_tx("COMPRA", "P001", 5)])

        self.assertEqual(primero.stock, 1)
        self.assertEqual(ultimo.stock, 6)


class TipoTransaccionTests(unittest.TestCase):
    """Valida el mapeo de texto a tipos de transaccion."""

    def test_known_kinds(self) -> None:
        """Los tipos conocidos se mapean al enum."""
        self.assertIs(parse_tipo_transaccion("VENTA"), TipoTransaccion.VENTA)
        self.assertIs(parse_tipo_transaccion("COMPRA"), TipoTransaccion.COMPRA)
        self.assertIs(parse_tipo_transaccion("DEVOLUCION"), TipoTransaccion.DEVOLUCION)

    def test_unknown_kind_keeps_original_text(self) -> None:
        """Un tipo desconocido conserva el texto tal cual, sin normalizar."""
        self.assertEqual(parse_tipo_transaccion("venta"), TipoDesconocido("venta"))
        self.assertEqual(parse_tipo_transaccion("AJUSTE").etiqueta, "AJUSTE")

    def test_string_forms(self) -> None:
        """Producto y Transaccion tienen representaciones de texto fijas."""
        self.assertEqual(
            str(_producto("P001", 3)),
            "ID: P001 | Producto P001 | Stock actual: 3 unidades",
        )
        self.assertEqual(str(_tx("VENTA", "P001", 2)), "VENTA,P001,2,2024-01-15")


if __name__ == "__main__":
    unittest.main()
