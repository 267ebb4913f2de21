"""Parametros globales del proyecto."""

from __future__ import annotations

from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent
DATA_DIR = BASE_DIR / "data"
INPUT_DIR = DATA_DIR / "input"
OUTPUT_DIR = DATA_DIR / "output"

INVENTORY_FILENAME = "inventario.txt"
TRANSACTIONS_FILENAME = "transacciones.txt"
UPDATED_INVENTORY_FILENAME = "inventario_actualizado.txt"
LOW_STOCK_REPORT_FILENAME = "productos_bajo_stock.txt"
ERROR_LOG_FILENAME = "errores.log"

DEFAULT_INVENTORY_PATH = INPUT_DIR / INVENTORY_FILENAME
DEFAULT_TRANSACTIONS_PATH = INPUT_DIR / TRANSACTIONS_FILENAME

LOW_STOCK_THRESHOLD = 10

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
