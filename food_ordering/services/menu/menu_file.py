"""Flat-file menu format.

One record per line, ``name,price``. The price is whatever follows the
*last* comma, so names may contain commas. Prices are written with exactly
two fractional digits. There is no header and no escaping.
"""
import logging
import os
import tempfile
from decimal import Decimal, InvalidOperation
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from food_ordering.core.errors import MenuFileError
from food_ordering.services.menu.base import format_money, to_money

logger = logging.getLogger(__name__)

Record = Tuple[str, Decimal]


def parse_line(line: str) -> Optional[Record]:
    """Parse one ``name,price`` line.

    Returns:
        (name, price) tuple, or None if the line is malformed
    """
    line = line.rstrip("\r\n")
    name, sep, price_text = line.rpartition(",")
    if not sep or not name.strip():
        return None

    try:
        price = Decimal(price_text.strip())
        if not price.is_finite():
            return None
        price = to_money(price)
    except InvalidOperation:
        return None
    if price <= 0:
        return None

    return name, price


def format_line(name: str, price: Decimal) -> str:
    """Format one record, newline included."""
    return f"{name},{format_money(price)}\n"


def read_records(path: Union[str, Path]) -> List[Record]:
    """Read every valid record from a menu file, skipping malformed lines."""
    path = Path(path)
    try:
        with open(path, "r", encoding="utf-8") as f:
            lines = f.readlines()
    except (OSError, UnicodeDecodeError) as e:
        raise MenuFileError(path, str(e)) from e

    records = []
    for lineno, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        record = parse_line(line)
        if record is None:
            logger.debug(f"[MENU FILE] Skipping malformed line {lineno} in {path}: {line!r}")
            continue
        records.append(record)
    return records


def write_records(path: Union[str, Path], records: Iterable[Record]) -> None:
    """Write records to a menu file, replacing it atomically.

    The data goes to a temporary file next to the destination which is then
    renamed over it, so the previous file stays intact if writing fails.
    """
    path = Path(path)
    tmp_name = None
    try:
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            for name, price in records:
                tmp.write(format_line(name, price))
        os.replace(tmp_name, path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise MenuFileError(path, str(e)) from e
