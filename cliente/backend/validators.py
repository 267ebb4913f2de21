"""Validaciones para entradas del cliente."""

from __future__ import annotations

from pathlib import Path

from shared.errors import ValidationError


def validate_input_file(path: Path) -> None:
    """Valida que la ruta de entrada exista y sea un archivo."""
    if not path.exists():
        raise ValidationError(f"No existe el archivo de entrada: {path}")
    if not path.is_file():
        raise ValidationError(f"La ruta de entrada no es un archivo: {path}")


def validate_output_dir(path: Path) -> None:
    """Valida que la ruta de salida sea utilizable para los archivos generados."""
    if path.exists() and not path.is_dir():
        raise ValidationError(f"La ruta no es un directorio: {path}")

    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise ValidationError(f"No se pudo crear/acceder al directorio: {path}") from exc


def validate_threshold(value: int) -> None:
    """Valida que el umbral de bajo stock no sea negativo."""
    if value < 0:
        raise ValidationError(f"El umbral de bajo stock no puede ser negativo: {value}")
