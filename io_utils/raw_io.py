# io/raw_io.py
"""
Headerless raw raster files.

A raw file is rows*cols bytes written row by row, with no header: the
dimensions are agreed between writer and reader out of band.

Functions:
- read_raw(path, rows, cols) -> byte Raster
- write_raw(path, raster) -> path
"""

import os

from core.errors import DimensionMismatch
from core.raster import Raster


def read_raw(path: str, rows: int, cols: int) -> Raster:
    """
    Read exactly rows*cols bytes from `path`.
    A file of any other length raises DimensionMismatch instead of yielding
    a partially populated raster.
    """
    expected = int(rows) * int(cols)
    with open(path, "rb") as f:
        buf = f.read()
    if len(buf) != expected:
        raise DimensionMismatch(expected, len(buf), what=f"raw file '{path}' byte count")
    return Raster.from_bytes(buf, rows, cols)


def write_raw(path: str, raster: Raster) -> str:
    d = os.path.dirname(path)
    if d:
        os.makedirs(d, exist_ok=True)
    with open(path, "wb") as f:
        f.write(raster.to_bytes())
    return path
