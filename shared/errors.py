"""Excepciones compartidas del proyecto."""

from __future__ import annotations


class ValidationError(Exception):
    """Error de validacion de datos de entrada."""


class ParseError(ValidationError):
    """Campo numerico invalido en un archivo de entrada."""

    def __init__(self, linea: int, campo: str, valor: str, origen: str = "") -> None:
        self.linea = linea
        self.campo = campo
        self.valor = valor
        self.origen = origen
        prefix = f"{origen}: " if origen else ""
        super().__init__(f"{prefix}{campo.lower()} inválido en línea {linea}: {valor!r}")


class ServiceError(Exception):
    """Error en la ejecucion de servicios."""
